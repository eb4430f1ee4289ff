# stamp/logic/units.py
from __future__ import annotations

import math

# 1 inch = 25.4 mm = 72 pt
MM_TO_PT: float = 72 / 25.4


def mm_to_pt(mm: float) -> float:
    return mm * MM_TO_PT


def pt_to_mm(pt: float) -> float:
    return pt * 25.4 / 72


def round_half_up(value: float) -> int:
    """Nearest integer, halves away from zero (210.5 -> 211, -0.5 -> -1)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
