# stamp/models/stamp_enums.py
from __future__ import annotations
from enum import IntEnum


class Anchor(IntEnum):
    """Phone keypad layout: 1 = top-left ... 9 = bottom-right."""
    TOP_LEFT = 1
    TOP_CENTER = 2
    TOP_RIGHT = 3
    MIDDLE_LEFT = 4
    CENTER = 5
    MIDDLE_RIGHT = 6
    BOTTOM_LEFT = 7
    BOTTOM_CENTER = 8
    BOTTOM_RIGHT = 9

    @property
    def column(self) -> int:
        """0 = left, 1 = centre, 2 = right."""
        return (self.value - 1) % 3

    @property
    def row(self) -> int:
        """0 = top, 1 = middle, 2 = bottom."""
        return (self.value - 1) // 3

    @classmethod
    def from_code(cls, code: int) -> "Anchor":
        """Unknown codes fall back to TOP_LEFT without complaint."""
        try:
            return cls(int(code))
        except ValueError:
            return cls.TOP_LEFT
