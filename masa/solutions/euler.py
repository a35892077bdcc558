"""
Inviscid compressible flow (Euler) manufactured solutions.

Primitive fields are sums of sinusoids (see masa.physics.fields):

    1D: u = u_0 + u_x sin(a_ux π x / L)
        ρ = rho_0 + rho_x sin(a_rhox π x / L)
        p = p_0 + p_x cos(a_px π x / L)

2D and 3D add per-axis terms for every field. Steady conservation laws:

    ∂_j(ρ u_j)                      = Q_rho
    ∂_j(ρ u_i u_j) + ∂_i p          = Q_u_i
    ∂_j(u_j H),  H = γp/(γ-1) + ρ|u|²/2 = Q_e
"""

from typing import Dict, List, Sequence

import numpy as np

from ..constants import AXES
from ..physics.fields import SinusoidField, sinusoid_field
from ..utils.errors import UnsupportedTermError
from .base import Balance, ManufacturedSolution


# Velocity component names by axis
VELOCITIES = ("u", "v", "w")

# Trig pattern per field and dimension ("s" = sin, "c" = cos per axis)
PATTERNS = {
    1: {"u": "s", "rho": "s", "p": "c"},
    2: {"u": "sc", "v": "cs", "rho": "sc", "p": "cs"},
    3: {"u": "scc", "v": "css", "w": "ssc", "rho": "scs", "p": "csc"},
}


def field_parameters(dimension: int) -> List[str]:
    """Amplitude and wave number parameter names of all fields."""
    names = []
    for field in (*VELOCITIES[:dimension], "rho", "p"):
        names.append(f"{field}_0")
        names += [f"{field}_{axis}" for axis in AXES[:dimension]]
        names += [f"a_{field}{axis}" for axis in AXES[:dimension]]
    return names


EULER_DEFAULTS = {
    "u_0": 70.0, "u_x": 4.0, "u_y": -12.0, "u_z": 7.0,
    "v_0": 90.0, "v_x": -20.0, "v_y": 4.0, "v_z": -11.0,
    "w_0": 80.0, "w_x": -3.0, "w_y": 6.0, "w_z": 5.0,
    "rho_0": 1.0, "rho_x": 0.1, "rho_y": 0.15, "rho_z": -0.12,
    "p_0": 1.0e5, "p_x": -3.0e4, "p_y": 2.0e4, "p_z": 1.5e4,
    "a_ux": 1.5, "a_uy": 0.6, "a_uz": 0.7,
    "a_vx": 0.5, "a_vy": 2.0 / 3.0, "a_vz": 1.0,
    "a_wx": 0.4, "a_wy": 0.9, "a_wz": 1.25,
    "a_rhox": 0.75, "a_rhoy": 1.0, "a_rhoz": 0.5,
    "a_px": 2.0, "a_py": 1.0, "a_pz": 0.3,
    "Gamma": 1.4,
    "mu": 0.5,
    "L": 1.0,
}


class EulerSolution(ManufacturedSolution):
    """Shared formula body for the Euler kinds (any dimension)."""

    # Built per subclass from PATTERNS
    flow_fields: Dict[str, SinusoidField] = {}

    def velocity_names(self) -> Sequence[str]:
        return VELOCITIES[:self.dimension]

    def fields(self, coords, t=None, xp=np):
        return {name: field.value(self, coords, xp)
                for name, field in self.flow_fields.items()}

    def gradients(self, coords, t=None):
        return {name: field.gradient(self, coords)
                for name, field in self.flow_fields.items()}

    def _state(self, coords):
        """Exact fields and gradients as used by every source term."""
        return self.fields(coords), self.gradients(coords)

    # ----- hand-coded sources (chain rule) -----

    def _inviscid_mass(self, f, g):
        rho, grho = f["rho"], g["rho"]
        total = 0.0
        for j, vel in enumerate(self.velocity_names()):
            total = total + grho[j] * f[vel] + rho * g[vel][j]
        return total

    def _inviscid_momentum(self, f, g, i):
        rho, grho = f["rho"], g["rho"]
        ui = self.velocity_names()[i]
        total = g["p"][i]
        for j, vel in enumerate(self.velocity_names()):
            total = total + (grho[j] * f[ui] * f[vel]
                             + rho * g[ui][j] * f[vel]
                             + rho * f[ui] * g[vel][j])
        return total

    def _inviscid_energy(self, f, g):
        gamma = self.param("Gamma")
        rho, p = f["rho"], f["p"]
        velocities = self.velocity_names()
        speed2 = sum(f[vel] ** 2 for vel in velocities)
        enthalpy = gamma * p / (gamma - 1) + rho * speed2 / 2

        total = 0.0
        for j, vel in enumerate(velocities):
            grad_h = (gamma * g["p"][j] / (gamma - 1)
                      + g["rho"][j] * speed2 / 2
                      + rho * sum(f[k] * g[k][j] for k in velocities))
            total = total + g[vel][j] * enthalpy + f[vel] * grad_h
        return total

    def momentum_source(self, coords, i):
        if i >= self.dimension:
            raise UnsupportedTermError(self.name, "source", VELOCITIES[i])
        f, g = self._state(coords)
        return self._inviscid_momentum(f, g, i)

    def energy_source(self, coords):
        f, g = self._state(coords)
        return self._inviscid_energy(f, g)

    def source_rho(self, coords, t=None):
        f, g = self._state(coords)
        return self._inviscid_mass(f, g)

    def source_u(self, coords, t=None):
        return self.momentum_source(coords, 0)

    def source_v(self, coords, t=None):
        return self.momentum_source(coords, 1)

    def source_w(self, coords, t=None):
        return self.momentum_source(coords, 2)

    def source_e(self, coords, t=None):
        return self.energy_source(coords)

    # ----- conservation form -----

    def balance(self, coords, fields, grads, xp=np):
        gamma = self.param("Gamma", xp)
        rho, p = fields["rho"], fields["p"]
        velocities = self.velocity_names()
        u = [fields[vel] for vel in velocities]
        speed2 = sum(c ** 2 for c in u)
        enthalpy = gamma * p / (gamma - 1) + rho * speed2 / 2

        result = {"rho": Balance(rho, tuple(rho * c for c in u), 0.0)}
        for i, vel in enumerate(velocities):
            flux = tuple(rho * u[i] * u[j] + (p if i == j else 0.0)
                         for j in range(self.dimension))
            result[vel] = Balance(rho * u[i], flux, 0.0)
        result["e"] = Balance(0.0, tuple(c * enthalpy for c in u), 0.0)
        return result


def build_flow_fields(dimension: int) -> Dict[str, SinusoidField]:
    return {name: sinusoid_field(name, pattern, dimension)
            for name, pattern in PATTERNS[dimension].items()}


def build_parameters(dimension: int, extra: Sequence[str] = ()) -> tuple:
    return tuple(field_parameters(dimension)) + ("Gamma", "mu", "L") + tuple(extra)


class Euler1D(EulerSolution):
    """One-dimensional Euler equations."""
    name = "euler_1d"
    dimension = 1
    flow_fields = build_flow_fields(1)
    parameters = build_parameters(1)
    source_terms = ("rho", "u", "e")
    defaults = {n: EULER_DEFAULTS[n] for n in parameters}


class Euler2D(EulerSolution):
    """Two-dimensional Euler equations."""
    name = "euler_2d"
    dimension = 2
    flow_fields = build_flow_fields(2)
    parameters = build_parameters(2)
    source_terms = ("rho", "u", "v", "e")
    defaults = {n: EULER_DEFAULTS[n] for n in parameters}


class Euler3D(EulerSolution):
    """Three-dimensional Euler equations."""
    name = "euler_3d"
    dimension = 3
    flow_fields = build_flow_fields(3)
    parameters = build_parameters(3)
    source_terms = ("rho", "u", "v", "w", "e")
    defaults = {n: EULER_DEFAULTS[n] for n in parameters}


EULER_KINDS = (Euler1D, Euler2D, Euler3D)
