from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from .board import Board, Coordinate
from .rules import FRAMES_PER_DROP, LEVEL_TICK_INCREASE, SpeedCurve, next_tick
from .shapes import ROTATIONS, Shape, TetrominoKind


logger = logging.getLogger(__name__)

BOARD_WIDTH = 10
BOARD_HEIGHT = 20


class Intent(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE = 3
    HARD_DROP = 4
    PAUSE = 5


MOVES = (Intent.LEFT, Intent.RIGHT, Intent.DOWN, Intent.ROTATE)


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    random_seed: Optional[int] = None
    level_tick_increase: int = LEVEL_TICK_INCREASE
    frames_per_drop: int = FRAMES_PER_DROP


@dataclass
class Tetromino:
    shape: Shape
    orientation: int = 0
    x: int = 0
    y: int = 0

    @property
    def kind(self) -> TetrominoKind:
        return self.shape.kind

    def dim(self, orientation: Optional[int] = None) -> Tuple[int, int]:
        return self.shape.dim(self.orientation if orientation is None else orientation)

    def cells_at(self, x: int, y: int, orientation: int) -> List[Coordinate]:
        return [(x + dx, y + dy) for dx, dy in self.shape.coor(orientation)]

    def cells(self) -> List[Coordinate]:
        return self.cells_at(self.x, self.y, self.orientation)


class GameEngine:
    """Owns the board, the active piece, score, tick counter and pause flag.

    The active piece is painted onto the board with ``kind + 1``. Only the
    cells the piece actually painted are tracked as its footprint, so a spawn
    overlapping locked cells never erases them on the next move.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.speed = SpeedCurve(self.config.level_tick_increase, self.config.frames_per_drop)
        self.rng = rng or random.Random(self.config.random_seed)
        self.board = Board(self.config.width, self.config.height)
        self.tetromino: Optional[Tetromino] = None
        self._footprint: FrozenSet[Coordinate] = frozenset()
        self.tick_count = 0
        self.score = 0
        self.paused = False
        self.game_over = False
        self.reset()

    def reset(self) -> None:
        self.board.reset()
        self._footprint = frozenset()
        self.tick_count = 0
        self.score = 0
        self.paused = False
        self.game_over = False
        self.spawn()

    # ------------------------------------------------------------------
    # Derived values
    @property
    def level(self) -> int:
        return self.speed.level(self.tick_count)

    @property
    def state(self) -> GameState:
        if self.game_over:
            return GameState.GAME_OVER
        if self.paused:
            return GameState.PAUSED
        return GameState.RUNNING

    # ------------------------------------------------------------------
    # Painting
    def _paint(self) -> None:
        assert self.tetromino is not None
        value = self.tetromino.shape.paint_value
        painted = []
        for x, y in self.tetromino.cells():
            if self.board.get(x, y) == 0:
                self.board.set(x, y, value)
                painted.append((x, y))
        self._footprint = frozenset(painted)

    def _erase(self) -> None:
        for x, y in self._footprint:
            self.board.set(x, y, 0)
        self._footprint = frozenset()

    # ------------------------------------------------------------------
    # Spawning
    def spawn(self, kind: Optional[int] = None, orientation: Optional[int] = None,
              x: Optional[int] = None) -> Tetromino:
        """Place a new piece on row 0.

        Missing arguments are drawn uniformly from the engine's generator.
        The previous piece's cells stay on the board (they are locked).
        """
        if kind is None:
            kind = self.rng.randrange(len(TetrominoKind))
        if orientation is None:
            orientation = self.rng.randrange(ROTATIONS)
        shape = Shape(kind)
        width, _ = shape.dim(orientation)
        if x is None:
            x = self.rng.randint(0, self.board.width - width)
        elif not 0 <= x <= self.board.width - width:
            raise ValueError(f"spawn x={x} does not fit shape of width {width}")
        self.tetromino = Tetromino(shape=shape, orientation=orientation, x=x, y=0)
        self._footprint = frozenset()
        self._paint()
        logger.debug("spawned %s orientation=%d x=%d", shape.kind.name, orientation, x)
        return self.tetromino

    # ------------------------------------------------------------------
    # Movement
    def _candidate(self, intent: Intent) -> Optional[Tuple[int, int, int]]:
        tet = self.tetromino
        assert tet is not None
        width, _ = tet.dim()
        if intent == Intent.LEFT:
            if tet.x == 0:
                return None
            return tet.x - 1, tet.y, tet.orientation
        if intent == Intent.RIGHT:
            if tet.x + width >= self.board.width:
                return None
            return tet.x + 1, tet.y, tet.orientation
        if intent == Intent.DOWN:
            return tet.x, tet.y + 1, tet.orientation
        if intent == Intent.ROTATE:
            new_r = (tet.orientation + 1) % ROTATIONS
            # Wall kick: shift left until the rotated shape fits
            new_width, _ = tet.dim(new_r)
            new_x = tet.x
            if tet.x + new_width > self.board.width:
                new_x = self.board.width - new_width
            return new_x, tet.y, new_r
        raise ValueError(f"{intent!r} is not a piece move")

    def try_move(self, intent: Intent) -> bool:
        """Move or rotate the active piece if it does not hit anything.

        Returns False, with no state change, when the move is rejected.
        """
        if self.tetromino is None:
            return False
        candidate = self._candidate(Intent(intent))
        if candidate is None:
            return False
        x, y, r = candidate
        _, height = self.tetromino.dim(r)
        if y + height > self.board.height:
            return False
        cells = self.tetromino.cells_at(x, y, r)
        if not self.board.footprint_is_free(cells, exclude=self._footprint):
            return False
        self._erase()
        self.tetromino.x, self.tetromino.y, self.tetromino.orientation = x, y, r
        self._paint()
        return True

    # ------------------------------------------------------------------
    # Locking
    def wipe_filled_rows(self) -> int:
        """Clear filled rows in the active piece's vertical span.

        Filled rows are collected before any collapse and removed top to
        bottom; collapsing a row only moves the rows above it, so the rows
        still to be removed keep their indices.
        """
        tet = self.tetromino
        assert tet is not None
        _, height = tet.dim()
        filled = [row for row in range(tet.y, tet.y + height) if self.board.is_filled(row)]
        for row in filled:
            self.board.clear_and_collapse(row)
        # The piece's cells are now part of the stack
        self._footprint = frozenset()
        self.score += len(filled)
        if filled:
            logger.debug("cleared rows %s, score=%d", filled, self.score)
        return len(filled)

    def _land(self) -> bool:
        assert self.tetromino is not None
        if self.tetromino.y == 0:
            self.game_over = True
            logger.debug("game over: score=%d level=%d", self.score, self.level)
            return False
        logger.debug("locked %s at (%d, %d)", self.tetromino.kind.name, self.tetromino.x, self.tetromino.y)
        self.wipe_filled_rows()
        self.spawn()
        return True

    def hard_drop(self) -> bool:
        if self.game_over or self.paused:
            return False
        while self.try_move(Intent.DOWN):
            pass
        return self._land()

    # ------------------------------------------------------------------
    # Driver surface
    def tick(self) -> bool:
        """Advance one frame. Returns False once the game is over."""
        if self.game_over:
            return False
        if self.paused:
            return True
        self.tick_count = next_tick(self.tick_count)
        if self.speed.gravity_due(self.tick_count):
            if not self.try_move(Intent.DOWN):
                return self._land()
        return True

    def toggle_pause(self) -> bool:
        if self.game_over:
            return False
        self.paused = not self.paused
        return True

    def apply(self, intent: Intent) -> bool:
        """Dispatch one user intent; movement is ignored while paused or over."""
        intent = Intent(intent)
        if intent == Intent.PAUSE:
            return self.toggle_pause()
        if self.state is not GameState.RUNNING:
            return False
        if intent == Intent.HARD_DROP:
            return self.hard_drop()
        return self.try_move(intent)

    def get_state(self) -> np.ndarray:
        return self.board.clone_state()
