"""
Tests for grid_maximize(): brute-force maximization on a fixed grid.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pybiostat.core.compute.optimization import grid_maximize, make_grid
from pybiostat.core.exceptions import NumericalError, ValidationError


class TestMakeGrid:

    def test_unit_interval_thousandths(self):
        grid = make_grid(0.0, 1.0, 0.001)
        assert len(grid) == 1001
        assert grid[0] == 0.0
        assert grid[-1] == 1.0
        assert_allclose(np.diff(grid), 0.001, rtol=1e-9)

    def test_non_unit_bounds(self):
        assert_allclose(make_grid(-1.0, 1.0, 0.5), [-1.0, -0.5, 0.0, 0.5, 1.0])

    def test_step_must_divide_range(self):
        with pytest.raises(ValidationError, match="whole number of steps"):
            make_grid(0.0, 1.0, 0.3)

    @pytest.mark.parametrize("lower,upper,step", [
        (1.0, 0.0, 0.1),
        (0.0, 0.0, 0.1),
        (0.0, 1.0, 0.0),
        (0.0, 1.0, -0.1),
        (0.0, np.inf, 0.1),
    ])
    def test_invalid_grid(self, lower, upper, step):
        with pytest.raises(ValidationError):
            make_grid(lower, upper, step)


class TestGridMaximize:

    def test_quadratic_peak(self):
        result = grid_maximize(lambda p: -(p - 0.3) ** 2, 0.0, 1.0, 0.01)
        assert result.argmax == pytest.approx(0.3)
        assert result.max_value == pytest.approx(0.0, abs=1e-12)
        assert result.grid[result.index] == result.argmax

    def test_ties_take_smallest_argument(self):
        """A flat objective is maximized at the first grid point."""
        result = grid_maximize(lambda p: 1.0, 0.0, 1.0, 0.1)
        assert result.index == 0
        assert result.argmax == 0.0

    def test_plateau_in_interior(self):
        result = grid_maximize(lambda p: min(p, 0.5), 0.0, 1.0, 0.1)
        assert result.argmax == pytest.approx(0.5)

    def test_negative_infinity_allowed(self):
        result = grid_maximize(
            lambda p: -np.inf if p in (0.0, 1.0) else np.log(p) + np.log(1 - p),
            0.0, 1.0, 0.1,
        )
        assert result.argmax == pytest.approx(0.5)
        assert np.isneginf(result.values[0])

    def test_nan_values_never_win(self):
        result = grid_maximize(lambda p: np.nan if p < 0.5 else -p, 0.0, 1.0, 0.1)
        assert result.argmax == pytest.approx(0.5)

    def test_all_nan_raises(self):
        with pytest.raises(NumericalError, match="NaN at all 11 grid points"):
            grid_maximize(lambda p: np.nan, 0.0, 1.0, 0.1)

    def test_values_align_with_grid(self):
        result = grid_maximize(lambda p: 2 * p, 0.0, 2.0, 0.5)
        assert_allclose(result.values, 2 * result.grid)
        assert result.step == pytest.approx(0.5)
