"""
Geometry value objects shared by resolver, placement engine and compositor.

Units:
  - StampImage: native pixels of the decoded image
  - everything else: PDF points (1 pt = 1/72 inch)
"""
from __future__ import annotations

from dataclasses import dataclass

from ..exceptions.errors import MalformedImageError


@dataclass(frozen=True)
class StampImage:
    natural_width: float
    natural_height: float

    def __post_init__(self) -> None:
        if self.natural_width <= 0 or self.natural_height <= 0:
            raise MalformedImageError(
                f"Stamp image has no usable size ({self.natural_width}x{self.natural_height})"
            )


@dataclass(frozen=True)
class PageGeometry:
    """Media box of one page. left/bottom are the box origin in user space."""
    width_pt: float
    height_pt: float
    left_pt: float = 0.0
    bottom_pt: float = 0.0


@dataclass(frozen=True)
class ResolvedSize:
    width_pt: float
    height_pt: float
    offset_x_pt: float
    offset_y_pt: float


@dataclass(frozen=True)
class Placement:
    """
    Insertion point of the stamp, measured from the top-left page corner
    (keypad semantics). The compositor flips y into PDF user space.
    """
    x_pt: float
    y_pt: float
    scale_x: float
    scale_y: float
