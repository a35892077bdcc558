"""
Tests for the Spalart-Allmaras channel kind.
"""

import numpy as np
from numpy.testing import assert_allclose

from masa.constants import SIGMA
from masa.physics import spalart_allmaras as sa
from masa.solutions.rans_sa import RansSA


def _ready():
    solution = RansSA()
    solution.init_var()
    return solution


class TestFields:

    def test_working_variable_positive(self):
        solution = _ready()
        x = np.linspace(0.0, float(solution.get_var("L")), 51)

        assert np.all(solution.eval_exact("nu", x) > 0)

    def test_v_is_working_variable(self):
        """The second unknown is also reachable as 'v'."""
        solution = _ready()

        assert solution.eval_exact("v", 0.4) == solution.eval_exact("nu", 0.4)
        assert solution.eval_source("v", 0.4) == solution.eval_source("nu", 0.4)
        assert solution.eval_grad("v", 1, 0.4) == solution.eval_grad("nu", 1, 0.4)

    def test_turbulent_regime(self):
        """Defaults put the eddy viscosity well above the laminar value."""
        solution = _ready()
        chi = solution.eval_exact("nu", 0.5) / solution.get_var("nu")

        assert 20.0 < chi < 500.0


class TestSources:

    def test_momentum_by_finite_differences(self):
        """Q_u = -d/dx[(nu + nu_t) du/dx]."""
        solution = _ready()
        nu = float(solution.get_var("nu"))
        x, h = 0.45, 1e-5

        def flux(xi):
            nu_t, _ = sa.turbulent_viscosity(solution.eval_exact("nu", xi), nu)
            return (nu + nu_t) * solution.eval_grad("u", 1, xi)

        fd = -(flux(x + h) - flux(x - h)) / (2 * h)
        assert_allclose(solution.eval_source("u", x), fd, rtol=1e-6)

    def test_transport_by_finite_differences(self):
        solution = _ready()
        nu = float(solution.get_var("nu"))
        x, h = 0.6, 1e-5

        def diffusive_flux(xi):
            return (nu + solution.eval_exact("nu", xi)) * solution.eval_grad("nu", 1, xi) / SIGMA

        nu_sa = solution.eval_exact("nu", x)
        dnu_sa = solution.eval_grad("nu", 1, x)
        omega = solution.eval_grad("u", 1, x)
        expected = (-sa.production(omega, nu_sa, nu, x)
                    + sa.destruction(omega, nu_sa, nu, x)
                    - (diffusive_flux(x + h) - diffusive_flux(x - h)) / (2 * h)
                    - sa.cb2_term(dnu_sa))

        assert_allclose(solution.eval_source("nu", x), expected, rtol=1e-6)
