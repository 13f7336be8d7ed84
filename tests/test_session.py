from __future__ import annotations

import unittest

import numpy as np

from plotbox.colors import DARK_GREEN
from plotbox.errors import InvalidArgumentError, PlotDataError
from plotbox.session import Session


class SessionTests(unittest.TestCase):
    def test_plot_creates_figure_and_box_on_demand(self) -> None:
        session = Session()
        self.assertEqual(session.figures, ())
        series = session.plot([1.0, 3.0, 2.0])
        box = session.gca()
        self.assertEqual(len(session.figures), 1)
        self.assertEqual(box.series_on(0), [series])
        self.assertEqual(box.x_ruler.limits, (1.0, 3.0))
        self.assertEqual(box.y_ruler.limits, (1.0, 3.0))

    def test_plot_with_explicit_x(self) -> None:
        session = Session()
        session.plot([0.0, 4.0], [10.0, 20.0])
        self.assertEqual(session.gca().x_ruler.limits, (10.0, 20.0))
        with self.assertRaises(PlotDataError):
            session.plot([0.0, 1.0], [0.0])

    def test_referenced_plot_needs_x(self) -> None:
        session = Session()
        y = np.zeros(3)
        with self.assertRaises(PlotDataError):
            session.plot(y, ownership="referenced")
        series = session.plot(y, np.arange(3.0), ownership="referenced")
        self.assertIs(series.y, y)

    def test_hold_on_accumulates(self) -> None:
        session = Session()
        session.plot([0.0, 1.0])
        session.hold("on")
        second = session.plot([5.0, 6.0])
        self.assertEqual(len(session.gca().series), 2)
        self.assertEqual(second.color, DARK_GREEN)
        self.assertEqual(session.gca().y_ruler.limits, (0.0, 1.0))
        session.hold(False)
        session.plot([5.0, 6.0])
        self.assertEqual(len(session.gca().series), 1)
        with self.assertRaises(InvalidArgumentError):
            session.hold("maybe")  # type: ignore[arg-type]

    def test_commands_without_box_are_ignored(self) -> None:
        session = Session()
        session.xlabel("x")
        session.ylabel("y")
        session.axis(0.0, 1.0, 0.0, 1.0)
        session.hold("on")
        self.assertEqual(session.figures, ())

    def test_labels_and_axis(self) -> None:
        session = Session()
        session.plot([0.0, 1.0])
        session.xlabel("time")
        session.ylabel("flow")
        session.ylabel("pressure", 2)
        session.axis(0.0, 10.0, -1.0, 1.0)
        box = session.gca()
        self.assertEqual(box.x_ruler.label, "time")
        self.assertEqual(box.y_rulers[0].label, "flow")
        self.assertEqual(box.y_rulers[1].label, "pressure")
        self.assertEqual(box.x_ruler.limits, (0.0, 10.0))
        self.assertEqual(box.y_ruler.limits, (-1.0, 1.0))
        with self.assertRaises(InvalidArgumentError):
            session.ylabel("bad", 0)

    def test_plotyy_scales_each_ruler_and_restores_hold(self) -> None:
        session = Session()
        left, right = session.plotyy([0.0, 1.0], [0.0, 1.0], [0.0, 2.0], [100.0, 300.0])
        box = session.gca()
        self.assertEqual(box.strategy, "dual")
        self.assertEqual(box.series_on(0), [left])
        self.assertEqual(box.series_on(1), [right])
        self.assertEqual(box.x_ruler.limits, (0.0, 2.0))
        self.assertEqual(box.y_rulers[1].limits, (100.0, 300.0))
        self.assertFalse(box.hold)

    def test_plotmy_stacks_extra_rulers(self) -> None:
        session = Session()
        session.plotmy([0.0, 1.0], [0.0, 1.0], [0.0, 1.0], [0.0, 2.0], [0.0, 1.0], [5.0, 9.0])
        box = session.gca()
        self.assertEqual(box.strategy, "stacked")
        self.assertEqual(box.y_rulers[2].limits, (5.0, 9.0))
        with self.assertRaises(InvalidArgumentError):
            session.plotmy([0.0, 1.0])

    def test_plotmy_with_hold_keeps_limits(self) -> None:
        session = Session()
        session.plotyy([0.0, 1.0], [0.0, 1.0], [0.0, 1.0], [0.0, 1.0])
        session.hold("on")
        session.plotyy([0.0, 5.0], [0.0, 5.0], [0.0, 5.0], [0.0, 5.0])
        box = session.gca()
        self.assertEqual(len(box.series), 4)
        self.assertEqual(box.x_ruler.limits, (0.0, 1.0))
        self.assertTrue(box.hold)

    def test_subplot_selects_grid_boxes(self) -> None:
        session = Session()
        third = session.subplot(2, 2, 3)
        fig = session.gcf()
        grid = fig.grid
        assert grid is not None
        self.assertIs(third, grid.box(1, 0))
        self.assertIs(session.gca(), third)
        first = session.subplot(2, 2, 1)
        self.assertIs(fig.grid, grid)
        self.assertIs(first, grid.box(0, 0))
        session.subplot(3, 1, 2)
        self.assertEqual(len(fig.boxes()), 3)
        with self.assertRaises(InvalidArgumentError):
            session.subplot(3, 1, 4)

    def test_subplot_replaces_standalone_box(self) -> None:
        session = Session()
        session.plot([0.0, 1.0])
        session.subplot(2, 1, 1)
        self.assertEqual(len(session.gcf().boxes()), 2)

    def test_figure_starts_fresh_context(self) -> None:
        session = Session()
        session.plot([0.0, 1.0])
        old_box = session.gca()
        fig = session.figure()
        self.assertIs(session.gcf(), fig)
        self.assertIsNot(session.gca(), old_box)
        self.assertEqual(len(session.figures), 2)

    def test_sessions_are_independent(self) -> None:
        a = Session()
        b = Session()
        a.plot([0.0, 1.0])
        self.assertEqual(b.figures, ())

    def test_set_current_box_must_belong_to_figure(self) -> None:
        session = Session()
        session.subplot(2, 1, 1)
        other = Session().subplot(1, 1, 1)
        with self.assertRaises(InvalidArgumentError):
            session.set_current_box(other)
        second = session.gcf().boxes()[1]
        session.set_current_box(second)
        self.assertIs(session.gca(), second)


if __name__ == "__main__":
    unittest.main()
