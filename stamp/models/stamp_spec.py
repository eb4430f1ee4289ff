# stamp/models/stamp_spec.py
from __future__ import annotations
from dataclasses import dataclass

from ..exceptions.errors import InvalidStampSpecError


@dataclass(frozen=True)
class StampSpec:
    """
    All user settings of one run, in millimetres (1 mm = 72/25.4 pt).

    Built once from the parsed command line and handed to the resolver and the
    placement engine. width_mm / height_mm == 0 means "not set".
    The anchor is intentionally not validated: codes outside 1..9 behave like 1.
    """
    anchor: int = 1
    offset_x_mm: float = 10.0
    offset_y_mm: float = 10.0
    width_mm: float = 0.0
    height_mm: float = 0.0
    opacity: float = 0.8

    def __post_init__(self) -> None:
        for name in ("offset_x_mm", "offset_y_mm", "width_mm", "height_mm"):
            if getattr(self, name) < 0:
                raise InvalidStampSpecError(f"{name} must not be negative (got {getattr(self, name)})")
        if not 0.0 <= self.opacity <= 1.0:
            raise InvalidStampSpecError(f"opacity must be between 0 and 1 (got {self.opacity})")
