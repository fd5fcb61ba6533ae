"""
Tests for t-test sample size calculations.

R reference (pwr 1.3):
    pwr.t.test(d = 0.5, power = 0.8)                           # n = 63.76576
    pwr.t.test(d = 0.5, power = 0.8, type = "one.sample")      # n = 33.36713
    pwr.t.test(d = 0.5, power = 0.8, type = "paired")          # n = 33.36713
    pwr.t.test(d = 0.8, power = 0.8)                           # n = 25.52457
    pwr.t.test(d = 1.0, power = 0.8)                           # n = 16.71477
    pwr.t.test(d = 0.5, power = 0.8, alternative = "greater")  # n = 50.1508
    pwr.t.test(n = 64, d = 0.5)                                # power = 0.8014596
"""

import numpy as np
import pytest

from pybiostat.power import (
    sample_size_t_test,
    minimum_n,
    cohens_d,
    SampleSizeDesign,
    SampleSizeSolution,
)
from pybiostat.power._t_test import t_test_power
from pybiostat.core.exceptions import DegenerateInputError, ValidationError


class TestSampleSizeTTest:

    def test_two_sample_medium_effect(self):
        result = sample_size_t_test(0.5)

        assert isinstance(result, SampleSizeSolution)
        assert result.n == pytest.approx(63.76576, rel=1e-4)
        assert result.n_required == 64
        assert result.achieved_power == pytest.approx(0.8014596, rel=1e-4)
        assert result.achieved_power >= 0.8

    def test_one_sample(self):
        result = sample_size_t_test(0.5, type="one.sample")
        assert result.n == pytest.approx(33.36713, rel=1e-4)
        assert result.n_required == 34

    def test_paired_equals_one_sample(self):
        paired = sample_size_t_test(0.5, type="paired")
        one = sample_size_t_test(0.5, type="one.sample")
        assert paired.n == pytest.approx(one.n)
        assert paired.n_required == 34

    @pytest.mark.parametrize("d, expected", [(0.8, 25.52457), (1.0, 16.71477)])
    def test_two_sample_effects(self, d, expected):
        assert sample_size_t_test(d).n == pytest.approx(expected, rel=1e-4)

    def test_one_sided(self):
        result = sample_size_t_test(0.5, alternative="greater")
        assert result.n == pytest.approx(50.1508, rel=1e-4)
        assert result.n_required == 51

    def test_less_mirrors_greater(self):
        greater = sample_size_t_test(0.5, alternative="greater")
        less = sample_size_t_test(-0.5, alternative="less")
        assert less.n == pytest.approx(greater.n, rel=1e-8)

    def test_two_sided_sign_irrelevant(self):
        pos = sample_size_t_test(0.5)
        neg = sample_size_t_test(-0.5)
        assert neg.n == pytest.approx(pos.n, rel=1e-10)
        assert neg.d == pytest.approx(0.5)

    def test_power_at_solution_equals_target(self):
        result = sample_size_t_test(0.3, power=0.9, sig_level=0.01)
        attained = t_test_power(result.n, 0.3, 0.01, 2, "two.sided")
        assert attained == pytest.approx(0.9, abs=1e-8)

    def test_n_monotone_in_power(self):
        ns = [sample_size_t_test(0.5, power=p).n for p in (0.7, 0.8, 0.9, 0.95)]
        assert all(a < b for a, b in zip(ns, ns[1:]))

    def test_large_effect_hits_floor(self):
        result = sample_size_t_test(20.0, type="one.sample")
        assert result.n_required == 3
        assert any("smallest possible design" in w for w in result.warnings)

    def test_small_effect_warns(self):
        with pytest.warns(RuntimeWarning, match="very small"):
            result = sample_size_t_test(0.005)
        assert result.n_required > 100_000

    def test_info(self):
        result = sample_size_t_test(0.5)
        assert result.info["solver"] == "brentq"
        assert result.backend_name == "cpu_nct"

    def test_summary(self):
        text = sample_size_t_test(0.5).summary()
        assert "Two-sample t test power calculation" in text
        assert "n = 64 in each group" in text

    def test_summary_paired(self):
        text = sample_size_t_test(0.5, type="paired").summary()
        assert "Paired t test power calculation" in text
        assert "in each group" not in text

    def test_repr(self):
        assert repr(sample_size_t_test(0.5)) == (
            "SampleSizeSolution(n_required=64, d=0.5, type='two.sample')"
        )


class TestSampleSizeValidation:

    @pytest.mark.parametrize("kwargs", [
        {"sig_level": 0.0},
        {"sig_level": 1.0},
        {"power": 1.5},
        {"power": 0.0},
    ])
    def test_probabilities_in_unit_interval(self, kwargs):
        with pytest.raises(ValidationError, match=r"must be in \(0, 1\)"):
            sample_size_t_test(0.5, **kwargs)

    def test_unknown_type(self):
        with pytest.raises(ValidationError, match="type must be one of"):
            sample_size_t_test(0.5, type="three.sample")

    def test_unknown_alternative(self):
        with pytest.raises(ValidationError, match="alternative must be one of"):
            sample_size_t_test(0.5, alternative="both")

    def test_zero_effect(self):
        with pytest.raises(DegenerateInputError):
            sample_size_t_test(0.0)

    @pytest.mark.parametrize("d", [np.nan, np.inf])
    def test_non_finite_effect(self, d):
        with pytest.raises(ValidationError, match="finite"):
            sample_size_t_test(d)

    def test_direction_contradicts_alternative(self):
        with pytest.raises(ValidationError, match="other way"):
            sample_size_t_test(-0.5, alternative="greater")

    def test_power_not_above_level(self):
        with pytest.raises(ValidationError, match="must exceed sig_level"):
            sample_size_t_test(0.5, power=0.04)


class TestCohensD:

    def test_one_sample(self):
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        assert cohens_d(x) == pytest.approx(3.0 / np.std(x, ddof=1))

    def test_one_sample_mu(self):
        assert cohens_d([1.0, 2.0, 3.0], mu=2.0) == pytest.approx(0.0)

    def test_two_sample_pooled(self):
        assert cohens_d([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == pytest.approx(-1.0)

    def test_unequal_groups(self):
        x1 = np.array([1.0, 3.0, 5.0, 7.0])
        x2 = np.array([2.0, 4.0])
        pooled = np.sqrt((3 * np.var(x1, ddof=1) + 1 * np.var(x2, ddof=1)) / 4)
        assert cohens_d(x1, x2) == pytest.approx((4.0 - 3.0) / pooled)

    def test_too_few_values(self):
        with pytest.raises(ValidationError, match="at least 2"):
            cohens_d([1.0])

    def test_constant_sample(self):
        with pytest.raises(DegenerateInputError, match="x1 is constant"):
            cohens_d([1, 1, 1])

    def test_both_samples_constant(self):
        with pytest.raises(DegenerateInputError, match="both constant"):
            cohens_d([2, 2], [2, 2])

    def test_constant_inexact_sample(self):
        """A constant sample of 0.1 can have a tiny nonzero sd in floating point."""
        with pytest.raises(DegenerateInputError):
            cohens_d([0.1, 0.1, 0.1], mu=0.0)

    def test_one_constant_group_uses_other_spread(self):
        d = cohens_d([1.0, 2.0, 3.0], [5.0, 5.0, 5.0])
        assert d == pytest.approx(-3.0 / np.sqrt(0.5))


class TestMinimumN:

    def test_two_sample_pilot(self):
        result = minimum_n([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        assert result.type == "two.sample"
        assert result.d == pytest.approx(1.0)
        assert result.n == pytest.approx(16.71477, rel=1e-4)
        assert result.n_required == 17

    def test_one_sample_pilot(self, rng):
        x = rng.normal(0.5, 1.0, size=40)
        result = minimum_n(x)
        expected = sample_size_t_test(cohens_d(x), type="one.sample")
        assert result.type == "one.sample"
        assert result.n == pytest.approx(expected.n)

    def test_matches_design(self):
        design = SampleSizeDesign.from_pilot([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        assert design.d == pytest.approx(-1.0)
        assert design.type == "two.sample"

    def test_constant_pilot(self):
        with pytest.raises(DegenerateInputError, match="constant"):
            minimum_n([2.0, 2.0, 2.0])

    def test_both_groups_constant(self):
        with pytest.raises(DegenerateInputError, match="both constant"):
            minimum_n([1.0, 1.0], [2.0, 2.0])

    def test_equal_means(self):
        with pytest.raises(DegenerateInputError):
            minimum_n([1.0, 2.0, 3.0], [3.0, 2.0, 1.0])

    def test_non_finite_pilot(self):
        with pytest.raises(ValidationError, match="non-finite"):
            minimum_n([1.0, np.nan, 3.0])
