from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from plotbox.adapters.normalize import coerce_1d, normalize_xy
from plotbox.errors import LengthMismatchError, PlotDataError

HAS_PANDAS = importlib.util.find_spec("pandas") is not None
HAS_TORCH = importlib.util.find_spec("torch") is not None


class NormalizeTests(unittest.TestCase):
    def test_y_only_numbers_samples_from_one(self) -> None:
        x, y = normalize_xy([4, 5, 6])
        self.assertTrue(np.array_equal(x, [1.0, 2.0, 3.0]))
        self.assertEqual(y.dtype, np.float64)

    def test_mixed_sequence_values(self) -> None:
        values = coerce_1d([1, None, Decimal("2.5"), 3.0], label="y")
        self.assertTrue(np.isnan(values[1]))
        self.assertEqual(values[2], 2.5)

    def test_non_numeric_value_raises(self) -> None:
        with self.assertRaises(PlotDataError):
            coerce_1d([1.0, "two"], label="y")
        with self.assertRaises(PlotDataError):
            coerce_1d("abc", label="y")
        with self.assertRaises(PlotDataError):
            coerce_1d(np.zeros((2, 2)), label="y")

    def test_missing_y_and_length_mismatch(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(None)
        with self.assertRaises(LengthMismatchError):
            normalize_xy([1.0, 2.0], x=[1.0])

    def test_coerce_returns_copy(self) -> None:
        src = np.arange(3, dtype=np.float64)
        out = coerce_1d(src, label="x")
        out[0] = 9.0
        self.assertEqual(src[0], 0.0)

    @unittest.skipUnless(HAS_PANDAS, "pandas not installed")
    def test_pandas_inputs(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"t": [0.0, 1.0, 2.0], "v": [3.0, 4.0, 5.0], "name": ["a", "b", "c"]})
        x, y = normalize_xy("v", x="t", data=frame)
        self.assertTrue(np.array_equal(x, [0.0, 1.0, 2.0]))
        self.assertTrue(np.array_equal(y, [3.0, 4.0, 5.0]))
        _, y_only = normalize_xy(pd.Series([1, 2]))
        self.assertEqual(y_only.dtype, np.float64)
        with self.assertRaises(PlotDataError):
            normalize_xy("missing", data=frame)

    @unittest.skipUnless(HAS_TORCH, "torch not installed")
    def test_torch_tensor_input(self) -> None:
        import torch

        x, y = normalize_xy(torch.tensor([1.0, 2.0, 3.0], dtype=torch.float32))
        self.assertEqual(y.dtype, np.float64)
        self.assertTrue(np.array_equal(x, [1.0, 2.0, 3.0]))
        with self.assertRaises(PlotDataError):
            coerce_1d(torch.zeros((2, 2)), label="y")


if __name__ == "__main__":
    unittest.main()
