"""
stamp/tests/test_geometry_resolver.py

Size inference and mm/pt conversion.
"""

from __future__ import annotations

import unittest

from stamp.exceptions.errors import InvalidStampSpecError, MalformedImageError
from stamp.logic.geometry_resolver import DEFAULT_WIDTH_MM, resolve, resolve_size_mm
from stamp.logic.units import MM_TO_PT, mm_to_pt, pt_to_mm, round_half_up
from stamp.models.stamp_geometry import StampImage
from stamp.models.stamp_spec import StampSpec

WIDE = StampImage(natural_width=200, natural_height=100)


class TestUnits(unittest.TestCase):
    def test_constant(self) -> None:
        self.assertAlmostEqual(MM_TO_PT, 2.834645669, places=6)
        self.assertAlmostEqual(mm_to_pt(25.4), 72.0)

    def test_round_trip(self) -> None:
        for value in (0.001, 1.0, 10.0, 72.0, 595.2756, 12345.678):
            self.assertAlmostEqual(mm_to_pt(pt_to_mm(value)), value, delta=1e-9)
            self.assertAlmostEqual(pt_to_mm(mm_to_pt(value)), value, delta=1e-9)

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(210.5), 211)
        self.assertEqual(round_half_up(190.5), 191)
        self.assertEqual(round_half_up(210.49), 210)
        self.assertEqual(round_half_up(215.9), 216)
        self.assertEqual(round_half_up(-0.5), -1)
        self.assertEqual(round_half_up(pt_to_mm(540)), 191)


class TestResolveSize(unittest.TestCase):
    def test_width_from_height_keeps_aspect(self) -> None:
        spec = StampSpec(width_mm=0, height_mm=20)
        self.assertEqual(resolve_size_mm(spec, WIDE), (40.0, 20))

    def test_height_from_width_keeps_aspect(self) -> None:
        spec = StampSpec(width_mm=30, height_mm=0)
        self.assertEqual(resolve_size_mm(spec, WIDE), (30, 15.0))

    def test_default_width_when_both_unset(self) -> None:
        w, h = resolve_size_mm(StampSpec(width_mm=0, height_mm=0), WIDE)
        self.assertEqual(w, DEFAULT_WIDTH_MM)
        self.assertEqual(w, 50)
        self.assertEqual(h, 25)

    def test_both_set_stretches(self) -> None:
        self.assertEqual(resolve_size_mm(StampSpec(width_mm=30, height_mm=40), WIDE), (30, 40))

    def test_resolve_converts_everything_to_points(self) -> None:
        spec = StampSpec(offset_x_mm=10, offset_y_mm=5, width_mm=0, height_mm=20)
        r = resolve(spec, WIDE)
        self.assertAlmostEqual(r.width_pt, 40 * MM_TO_PT)
        self.assertAlmostEqual(r.height_pt, 20 * MM_TO_PT)
        self.assertAlmostEqual(r.offset_x_pt, 10 * MM_TO_PT)
        self.assertAlmostEqual(r.offset_y_pt, 5 * MM_TO_PT)

    def test_resolve_is_pure(self) -> None:
        spec = StampSpec(width_mm=0, height_mm=0)
        self.assertEqual(resolve(spec, WIDE), resolve(spec, WIDE))
        self.assertEqual(spec.width_mm, 0)


class TestModelValidation(unittest.TestCase):
    def test_zero_sized_image_is_malformed(self) -> None:
        with self.assertRaises(MalformedImageError):
            StampImage(natural_width=0, natural_height=10)

    def test_opacity_out_of_range(self) -> None:
        with self.assertRaises(InvalidStampSpecError):
            StampSpec(opacity=1.5)

    def test_negative_size(self) -> None:
        with self.assertRaises(InvalidStampSpecError):
            StampSpec(height_mm=-1)

    def test_anchor_not_validated(self) -> None:
        self.assertEqual(StampSpec(anchor=42).anchor, 42)


if __name__ == "__main__":
    unittest.main()
