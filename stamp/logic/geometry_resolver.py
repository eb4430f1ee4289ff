"""
Unit & geometry resolver.

Turns the millimetre settings of a :class:`StampSpec` into the final stamp size
and offsets in points. Missing width or height is inferred from the image's
aspect ratio; when both are missing a fixed default width is used. When both
are given the image is stretched as requested (no aspect correction).
"""
from __future__ import annotations

from ..models.stamp_geometry import ResolvedSize, StampImage
from ..models.stamp_spec import StampSpec
from .units import mm_to_pt

DEFAULT_WIDTH_MM: float = 50.0


def resolve_size_mm(spec: StampSpec, image: StampImage) -> tuple[float, float]:
    """Width/height in mm after default + aspect-ratio inference (before conversion)."""
    width, height = spec.width_mm, spec.height_mm
    if width == 0 and height == 0:
        width = DEFAULT_WIDTH_MM
    if width == 0:
        width = image.natural_width / image.natural_height * height
    elif height == 0:
        height = image.natural_height / image.natural_width * width
    return width, height


def resolve(spec: StampSpec, image: StampImage) -> ResolvedSize:
    width_mm, height_mm = resolve_size_mm(spec, image)
    return ResolvedSize(
        width_pt=mm_to_pt(width_mm),
        height_pt=mm_to_pt(height_mm),
        offset_x_pt=mm_to_pt(spec.offset_x_mm),
        offset_y_pt=mm_to_pt(spec.offset_y_mm),
    )
