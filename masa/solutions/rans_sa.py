"""
Fully developed channel flow with the Spalart-Allmaras model.

The wall-normal coordinate x doubles as the wall distance d. Exact fields:

    u  = u_0 + u_x sin(a_ux π x / L)
    ν̃ = nu_sa_0 + nu_sa_x cos(a_nux π x / L)

Sources balance

    -d/dx[(ν + ν_t) du/dx]                                   = Q_u
    -P + D - (1/σ)(d/dx[(ν + ν̃) dν̃/dx] + cb2 (dν̃/dx)²)    = Q_nu

with ν_t = ν̃ fv1(ν̃/ν) and the vorticity Ω = |du/dx|.
"""

import numpy as np

from ..constants import SIGMA
from ..physics import spalart_allmaras as sa
from ..physics.fields import AxisTerm, SinusoidField
from .base import Balance, ManufacturedSolution


VELOCITY = SinusoidField(offset="u_0", terms=(AxisTerm("u_x", "a_ux", "sin"),))
WORKING_VARIABLE = SinusoidField(offset="nu_sa_0", terms=(AxisTerm("nu_sa_x", "a_nux", "cos"),))


class RansSA(ManufacturedSolution):
    """1D RANS channel with the one-equation SA closure."""

    name = "rans_sa"
    dimension = 1
    parameters = ("u_0", "u_x", "a_ux", "nu_sa_0", "nu_sa_x", "a_nux", "nu", "L")
    source_terms = ("u", "nu")
    defaults = {
        "u_0": 1.0,
        "u_x": 0.5,
        "a_ux": 0.5,
        "nu_sa_0": 0.1,
        "nu_sa_x": 0.05,
        "a_nux": 1.0,
        "nu": 1.0e-3,
        "L": 1.0,
    }

    # Older callers pass the SA working variable as the second unknown
    term_aliases = {"v": "nu"}

    def fields(self, coords, t=None, xp=np):
        return {
            "u": VELOCITY.value(self, coords, xp),
            "nu": WORKING_VARIABLE.value(self, coords, xp),
        }

    def gradients(self, coords, t=None):
        return {
            "u": VELOCITY.gradient(self, coords),
            "nu": WORKING_VARIABLE.gradient(self, coords),
        }

    def source_u(self, coords, t=None):
        nu = self.param("nu")
        nu_sa = WORKING_VARIABLE.value(self, coords)
        dnu_sa = WORKING_VARIABLE.derivative(self, coords, 0)
        du = VELOCITY.derivative(self, coords, 0)
        d2u = VELOCITY.second_derivative(self, coords, 0)

        nu_t, dnu_t = sa.turbulent_viscosity(nu_sa, nu)
        return -(dnu_t * dnu_sa * du + (nu + nu_t) * d2u)

    def source_nu(self, coords, t=None):
        x, = coords
        nu = self.param("nu")
        nu_sa = WORKING_VARIABLE.value(self, coords)
        dnu_sa = WORKING_VARIABLE.derivative(self, coords, 0)
        d2nu_sa = WORKING_VARIABLE.second_derivative(self, coords, 0)
        omega = VELOCITY.derivative(self, coords, 0)

        prod = sa.production(omega, nu_sa, nu, x)
        dest = sa.destruction(omega, nu_sa, nu, x)
        diffusion = (dnu_sa ** 2 + (nu + nu_sa) * d2nu_sa) / SIGMA
        return -prod + dest - diffusion - sa.cb2_term(dnu_sa)

    def balance(self, coords, fields, grads, xp=np):
        nu = self.param("nu", xp)
        nu_sa = fields["nu"]
        du, = grads["u"]
        dnu_sa, = grads["nu"]
        d, = coords

        nu_t, _ = sa.turbulent_viscosity(nu_sa, nu)
        production = (sa.production(du, nu_sa, nu, d, xp=xp)
                      - sa.destruction(du, nu_sa, nu, d, xp=xp)
                      + sa.cb2_term(dnu_sa))
        return {
            "u": Balance(0.0, (-(nu + nu_t) * du,), 0.0),
            "nu": Balance(0.0, (-(nu + nu_sa) * dnu_sa / SIGMA,), production),
        }
