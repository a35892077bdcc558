"""
Autodiff self check of every formula kind.

The hand-coded sources and gradients of each kind must agree with jax
forward-mode derivatives of its conservation-law balance.
"""

import pytest
import numpy as np

from masa.solutions.catalog import KIND_TABLE
from masa.solutions.euler import Euler1D
from masa.validation import sample_points, verify_solution
from masa.validation.autodiff import _relative_error


CHECKED_KINDS = [k for k in KIND_TABLE if k.name != "masa_uninit"]


class BrokenEuler(Euler1D):
    """Euler 1D with a deliberately wrong mass source."""

    def source_rho(self, coords, t=None):
        return super().source_rho(coords, t) + 1.0


class FlakyEuler(Euler1D):
    """Euler 1D whose mass source is NaN on the first evaluation only."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = 0

    def source_rho(self, coords, t=None):
        self.calls += 1
        if self.calls == 1:
            return np.nan
        return super().source_rho(coords, t)


def _ready(kind):
    solution = kind()
    solution.init_var()
    return solution


@pytest.mark.slow
class TestAllKinds:

    @pytest.mark.parametrize("kind", CHECKED_KINDS, ids=lambda k: k.name)
    def test_verify_with_defaults(self, kind):
        report = verify_solution(_ready(kind), n_points=3, rtol=1e-9)

        assert report.passed, str(report)
        assert set(report.source_errors) == set(kind.source_terms)

    @pytest.mark.parametrize("kind", CHECKED_KINDS, ids=lambda k: k.name)
    def test_poly_test(self, kind):
        assert _ready(kind).poly_test(n_points=2) is True


class TestReport:

    def test_wrong_source_detected(self):
        report = verify_solution(_ready(BrokenEuler), n_points=2)

        assert not report.passed
        assert report.source_errors["rho"] > 1e-9
        assert report.source_errors["u"] <= 1e-9

    def test_nan_at_first_point_not_forgotten(self):
        """A later agreeing point must not hide an earlier NaN."""
        report = verify_solution(_ready(FlakyEuler), n_points=3)

        assert not report.passed
        assert report.source_errors["rho"] == np.inf
        assert report.worst == np.inf

    def test_non_finite_error_is_infinite(self):
        assert _relative_error(np.nan, 1.0) == np.inf
        assert _relative_error(1.0, np.inf) == np.inf
        assert _relative_error(2.0, 1.0) == 0.5

    def test_poly_test_false_on_wrong_source(self, log_messages):
        assert _ready(BrokenEuler).poly_test(n_points=2) is False
        assert any("FAILED" in message for message in log_messages)

    def test_str(self):
        report = verify_solution(_ready(Euler1D), n_points=1)
        text = str(report)

        assert text.startswith("Autodiff check of euler_1d: PASSED")
        assert "source    rho" in text

    def test_worst_of_empty_report(self):
        from masa.validation.autodiff import VerificationReport

        report = VerificationReport(solution="none", n_points=0, rtol=1e-9)
        assert report.worst == 0.0
        assert report.passed


class TestSampling:

    def test_points_inside_box(self):
        solution = _ready(KIND_TABLE[2])
        box = np.array(solution.sample_box())
        points = sample_points(solution, n_points=32, seed=3)

        assert points.shape == (32, len(box))
        assert (points >= box[:, 0]).all() and (points <= box[:, 1]).all()

    def test_seed_reproducible(self):
        solution = _ready(Euler1D)
        np.testing.assert_array_equal(sample_points(solution, 5, seed=7),
                                      sample_points(solution, 5, seed=7))
