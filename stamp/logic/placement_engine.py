"""
Page placement engine.

Anchor grid (phone keypad)::

    1 2 3
    4 5 6
    7 8 9

Column 0 sits ``offset_x`` from the left edge, column 2 ``offset_x`` from the
right edge, column 1 is centred and ignores the offset. Rows work the same way
with ``offset_y`` measured from the top / bottom edge. Coordinates are the
stamp's top-left corner relative to the page's top-left corner.

Results are never clamped: oversized stamps or large offsets give negative or
off-page coordinates and the compositor simply clips them.
"""
from __future__ import annotations

from typing import Tuple

from ..models.stamp_enums import Anchor
from ..models.stamp_geometry import PageGeometry, Placement, ResolvedSize, StampImage


def compute_scale(resolved: ResolvedSize, image: StampImage) -> Tuple[float, float]:
    """Scale factors from native image size to the resolved size. Same for every page."""
    return (
        resolved.width_pt / image.natural_width,
        resolved.height_pt / image.natural_height,
    )


def _axis(edge: int, page_len: float, stamp_len: float, offset: float) -> float:
    if edge == 1:
        return (page_len - stamp_len) / 2
    if edge == 2:
        return page_len - stamp_len - offset
    return offset


def place_on_page(
    page: PageGeometry,
    resolved: ResolvedSize,
    anchor: int,
    scale: Tuple[float, float],
) -> Placement:
    a = Anchor.from_code(anchor)
    x = _axis(a.column, page.width_pt, resolved.width_pt, resolved.offset_x_pt)
    y = _axis(a.row, page.height_pt, resolved.height_pt, resolved.offset_y_pt)
    scale_x, scale_y = scale
    return Placement(x_pt=x, y_pt=y, scale_x=scale_x, scale_y=scale_y)
