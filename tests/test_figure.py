from __future__ import annotations

import unittest

import numpy as np

from plotbox.box import PixelRect
from plotbox.colors import BLUE, SELECTION_BLUE, WHITE
from plotbox.figure import Figure
from plotbox.series import Series


class FigureTests(unittest.TestCase):
    def test_invalid_size_raises(self) -> None:
        with self.assertRaises(ValueError):
            Figure(width=0, height=100)

    def test_to_rgba_renders_every_box(self) -> None:
        fig = Figure(width=320, height=200)
        box = fig.add_box()
        box.add_series(Series.copied([0.0, 1.0], [0.0, 1.0]))
        frame = fig.to_rgba()
        self.assertEqual(frame.shape, (200, 320, 4))
        self.assertEqual(frame.dtype, np.uint8)
        self.assertTrue(np.any(np.all(frame == np.asarray(BLUE, dtype=np.uint8), axis=2)))
        self.assertEqual(tuple(int(v) for v in frame[0, 0]), WHITE)
        last = fig.last_frame_rgba()
        assert last is not None
        self.assertTrue(np.array_equal(last, frame))

    def test_huge_finite_values_render(self) -> None:
        fig = Figure(width=800, height=600)
        fig.add_box().add_series(Series.copied([0.0, 1.0], [-1e306, 1e306]))
        frame = fig.to_rgba()
        self.assertEqual(frame.shape, (600, 800, 4))
        self.assertTrue(np.any(np.all(frame == np.asarray(BLUE, dtype=np.uint8), axis=2)))

    def test_render_is_deterministic(self) -> None:
        fig = Figure(width=240, height=160)
        fig.add_box().add_series(Series.copied([0.0, 1.0, 2.0], [3.0, 1.0, 2.0]))
        self.assertTrue(np.array_equal(fig.to_rgba(), fig.to_rgba()))

    def test_to_rgba_accepts_new_size(self) -> None:
        fig = Figure(width=100, height=100)
        fig.add_box()
        frame = fig.to_rgba(300, 150)
        self.assertEqual(frame.shape, (150, 300, 4))
        self.assertEqual((fig.width, fig.height), (300, 150))

    def test_boxes_are_laid_out_against_reduced_parent(self) -> None:
        fig = Figure(width=801, height=601)
        box = fig.add_box()
        fig.layout()
        rect = box.pixel_rect
        assert rect is not None
        self.assertEqual((rect.left, rect.top, rect.right, rect.bottom), (104, 45, 724, 534))

    def test_box_at_hits_last_layout(self) -> None:
        fig = Figure(width=801, height=601)
        box = fig.add_box()
        self.assertIsNone(fig.box_at(400, 300))
        fig.layout()
        self.assertIs(fig.box_at(400, 300), box)
        self.assertIsNone(fig.box_at(5, 5))
        box.visible = False
        self.assertIsNone(fig.box_at(400, 300))

    def test_grid_boxes_follow_standalone_boxes(self) -> None:
        fig = Figure()
        first = fig.add_box((0.0, 0.0, 0.2, 0.2))
        grid = fig.set_grid(2, 1)
        self.assertEqual(fig.boxes(), [first, *grid.boxes])
        self.assertIs(fig.last_box(), grid.boxes[-1])
        self.assertIs(fig.set_grid(1, 1), grid)
        self.assertEqual(len(fig.boxes()), 2)

    def test_selection_is_drawn_over_boxes(self) -> None:
        fig = Figure(width=801, height=601)
        fig.add_box()
        frame = fig.to_rgba(selection=PixelRect(200, 100, 400, 300))
        self.assertEqual(tuple(int(v) for v in frame[100, 300]), SELECTION_BLUE)
        self.assertEqual(tuple(int(v) for v in frame[200, 400]), SELECTION_BLUE)
        self.assertEqual(tuple(int(v) for v in frame[200, 300]), WHITE)

    def test_clear_removes_boxes_and_grid(self) -> None:
        fig = Figure()
        fig.add_box()
        fig.set_grid(2, 2)
        fig.clear()
        self.assertEqual(fig.boxes(), [])
        self.assertIsNone(fig.grid)
        self.assertIsNone(fig.last_box())


if __name__ == "__main__":
    unittest.main()
