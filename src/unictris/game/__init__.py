"""Game module for Unictris.

Exports the simulation core:
- Shape / TetrominoKind: Piece geometry table with rotations
- Board: Grid representation and row clearing
- SpeedCurve: Level and gravity cadence
- GameEngine: Active piece, tick loop and state management
"""

from .board import Board
from .shapes import Shape, TetrominoKind, coor, dim, format_shape
from .rules import SpeedCurve, LEVEL_TICK_INCREASE, FRAMES_PER_DROP
from .core import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    GameConfig,
    GameEngine,
    GameState,
    Intent,
    Tetromino,
)

__all__ = [
    "Board",
    "Shape",
    "TetrominoKind",
    "coor",
    "dim",
    "format_shape",
    "SpeedCurve",
    "LEVEL_TICK_INCREASE",
    "FRAMES_PER_DROP",
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Intent",
    "Tetromino",
]
