from __future__ import annotations

import unittest

import numpy as np

from plotbox.errors import InvalidArgumentError
from plotbox.ruler import Ruler


class RulerTests(unittest.TestCase):
    def test_defaults(self) -> None:
        ruler = Ruler("x")
        self.assertEqual(ruler.limits, (0.0, 1.0))
        self.assertEqual(ruler.tick_labels, ("0", "0.2", "0.4", "0.6", "0.8", "1"))
        self.assertEqual(ruler.location, "start")
        self.assertEqual(ruler.tick_direction, "in")

    def test_to_pixel_maps_limits_onto_pixel_range(self) -> None:
        ruler = Ruler("x")
        ruler.set_limits(0.0, 10.0)
        ruler.set_pixel_range(100, 200)
        self.assertEqual(ruler.to_pixel(0.0), 100)
        self.assertEqual(ruler.to_pixel(5.0), 150)
        self.assertEqual(ruler.to_pixel(10.0), 200)
        self.assertAlmostEqual(ruler.to_value(150), 5.0, places=12)

    def test_reversed_pixel_range_for_vertical_ruler(self) -> None:
        ruler = Ruler("y")
        ruler.set_limits(0.0, 10.0)
        ruler.set_pixel_range(500, 100)
        self.assertEqual(ruler.to_pixel(0.0), 500)
        self.assertEqual(ruler.to_pixel(2.5), 400)
        self.assertEqual(ruler.to_pixel(10.0), 100)

    def test_to_pixel_truncates_offset_toward_zero(self) -> None:
        ruler = Ruler("y")
        ruler.set_limits(0.0, 3.0)
        ruler.set_pixel_range(0, 10)
        self.assertEqual(ruler.to_pixel(1.0), 3)
        ruler.set_pixel_range(10, 0)
        # -3.33 truncates to -3, not -4
        self.assertEqual(ruler.to_pixel(1.0), 7)

    def test_huge_finite_limits_map_without_overflow(self) -> None:
        ruler = Ruler("y")
        ruler.set_limits(-1e306, 1e306)
        ruler.set_pixel_range(534, 45)
        self.assertEqual(ruler.to_pixel(-1e306), 534)
        self.assertEqual(ruler.to_pixel(1e306), 45)
        self.assertEqual(ruler.to_pixel(0.0), 534 + int(-489 * 0.5))
        self.assertAlmostEqual(ruler.to_value(534) / 1e306, -1.0, places=12)

    def test_set_limits_keeps_ticks(self) -> None:
        ruler = Ruler("x")
        before = ruler.ticks
        ruler.set_limits(-5.0, 5.0)
        self.assertEqual(ruler.limits, (-5.0, 5.0))
        self.assertTrue(np.array_equal(ruler.ticks, before))

    def test_set_ticks_regenerates_labels(self) -> None:
        ruler = Ruler("x")
        ruler.set_limits(0.0, 100.0)
        ruler.set_ticks(0.0, 25.0, 100.0)
        self.assertEqual(ruler.tick_labels, ("0", "25", "50", "75", "100"))
        self.assertEqual(len(ruler.ticks), len(ruler.tick_labels))

    def test_set_ticks_ignores_unusable_requests(self) -> None:
        ruler = Ruler("x")
        before = ruler.ticks
        ruler.set_ticks(0.0, 0.0, 1.0)
        ruler.set_ticks(0.0, float("nan"), 1.0)
        ruler.set_ticks(5.0, 1.0, 0.0)
        self.assertTrue(np.array_equal(ruler.ticks, before))

    def test_set_tick_values_requires_sorted_input(self) -> None:
        ruler = Ruler("x")
        ruler.set_tick_values([0.0, 0.5, 1.0])
        self.assertEqual(ruler.tick_labels, ("0", "0.5", "1"))
        with self.assertRaises(InvalidArgumentError):
            ruler.set_tick_values([1.0, 0.0])

    def test_ticks_property_returns_copy(self) -> None:
        ruler = Ruler("x")
        ticks = ruler.ticks
        ticks[0] = 42.0
        self.assertEqual(float(ruler.ticks[0]), 0.0)

    def test_visible_tick_indices_drop_ticks_outside_pixel_range(self) -> None:
        ruler = Ruler("x")
        ruler.set_limits(0.0, 0.5)
        ruler.set_pixel_range(0, 100)
        self.assertEqual(ruler.visible_tick_indices(), [0, 1, 2])

    def test_origin_pixel_and_placement(self) -> None:
        x_ruler = Ruler("x")
        x_ruler.set_pixel_range(100, 200)
        x_ruler.origin = 0.5
        self.assertEqual(x_ruler.origin_pixel(), 150)

        y_ruler = Ruler("y")
        y_ruler.placement_from(x_ruler)
        self.assertEqual(y_ruler.placement, 100)
        y_ruler.location = "end"
        y_ruler.placement_from(x_ruler)
        self.assertEqual(y_ruler.placement, 200)
        y_ruler.location = "origin"
        y_ruler.placement_from(x_ruler)
        self.assertEqual(y_ruler.placement, 150)

    def test_invalid_enumerations_raise(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Ruler("z")  # type: ignore[arg-type]
        ruler = Ruler("x")
        with self.assertRaises(InvalidArgumentError):
            ruler.location = "middle"  # type: ignore[assignment]
        with self.assertRaises(InvalidArgumentError):
            ruler.tick_direction = "sideways"  # type: ignore[assignment]


if __name__ == "__main__":
    unittest.main()
