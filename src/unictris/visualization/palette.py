from __future__ import annotations

from typing import Tuple


Color = Tuple[int, int, int]

BACKGROUND: Color = (10, 10, 14)
PANEL_TEXT: Color = (230, 230, 230)

# Indexed by cell value, i.e. kind + 1
PALETTE = {
    0: (20, 20, 26),
    1: (0, 90, 240),    # S
    2: (240, 240, 0),   # Z
    3: (0, 200, 0),     # O
    4: (200, 0, 200),   # J
    5: (140, 0, 0),     # T
    6: (0, 220, 220),   # I
    7: (240, 0, 0),     # L
}


def color_for_value(v: int) -> Color:
    return PALETTE.get(v, (200, 200, 200))
