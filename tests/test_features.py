"""
Tests for the numpy adapters in moremath.core.features.
"""

import math

import numpy as np
import pytest

from moremath.core.features import ContainmentAdapter, trace_array

QUAD = [(0, 0), (2, 0), (1, 1), (0, 1)]
PENTAGRAM = [(0, 10), (-6, -8), (10, 3), (-10, 3), (6, -8)]


class TestTraceArray:
    def test_shape_and_rows(self):
        arr = trace_array(QUAD, (1, 0))
        assert arr.shape == (4, 3)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr[0], [0.0, 0.5, 1.0])
        np.testing.assert_array_equal(arr[1], [1.0, 1.0, -1.0])
        assert math.isnan(arr[3, 0])
        assert math.isnan(arr[3, 1])
        assert arr[3, 2] == 0

    def test_dtype(self):
        arr = trace_array(QUAD, (1, 0), dtype=np.float32)
        assert arr.dtype == np.float32


class TestContainmentAdapter:
    def test_contains(self):
        adapter = ContainmentAdapter(QUAD)
        assert adapter.contains((1, 0.5)) is True
        assert adapter.contains((1, 2)) is False

    def test_contains_batch(self):
        adapter = ContainmentAdapter(QUAD)
        probes = [(0, 0), (1, 0), (1, 0.5), (0, 2), (1, -1), (1, 2)]
        result = adapter.contains_batch(probes)
        assert result.dtype == bool
        np.testing.assert_array_equal(result, [True, True, True, False, False, False])

    def test_contains_batch_accepts_arrays(self):
        adapter = ContainmentAdapter(QUAD)
        result = adapter.contains_batch(np.array([[1.0, 0.5], [3.0, 3.0]]))
        np.testing.assert_array_equal(result, [True, False])

    def test_empty_batch(self):
        result = ContainmentAdapter(QUAD).contains_batch([])
        assert result.shape == (0,)
        assert result.dtype == bool

    def test_fill_modes(self):
        parity = ContainmentAdapter(PENTAGRAM)
        nonzero = ContainmentAdapter(PENTAGRAM, no_checker_board=True)
        np.testing.assert_array_equal(parity.contains_batch([(1, 0), (1, 6)]), [False, True])
        np.testing.assert_array_equal(nonzero.contains_batch([(1, 0), (1, 6)]), [True, True])

    def test_rejects_degenerate_polygon(self):
        with pytest.raises(ValueError):
            ContainmentAdapter([(0, 0)])
