"""
Compressible Navier-Stokes manufactured solutions (2D and 3D).

Same primitive fields as the Euler kinds, with a Stokes viscous stress

    τ_ij = μ (∂_i u_j + ∂_j u_i) - (2/3) μ δ_ij ∇·u

and Fourier conduction of the ideal-gas temperature T = p / (R ρ).
Because every field is a sum of single-axis sinusoids, mixed second
derivatives vanish and

    ∂_i τ_ij = μ (∇²u_j + (1/3) ∂_jj u_j)
"""

import numpy as np

from .base import Balance
from .euler import EULER_DEFAULTS, EulerSolution, build_flow_fields, build_parameters


NAVIER_STOKES_DEFAULTS = dict(EULER_DEFAULTS, R=287.0, k=0.024)


class NavierStokesSolution(EulerSolution):
    """Viscous extension of the Euler formula body."""

    def stress(self, fields, grads, xp=np):
        """Viscous stress tensor τ_ij as nested lists."""
        mu = self.param("mu", xp)
        velocities = self.velocity_names()
        divergence = sum(grads[vel][j] for j, vel in enumerate(velocities))
        tau = []
        for i, ui in enumerate(velocities):
            row = []
            for j, uj in enumerate(velocities):
                value = mu * (grads[uj][i] + grads[ui][j])
                if i == j:
                    value = value - 2.0 / 3.0 * mu * divergence
                row.append(value)
            tau.append(row)
        return tau

    def stress_divergence(self, coords, j):
        """∂_i τ_ij for velocity component j."""
        field = self.flow_fields[self.velocity_names()[j]]
        laplacian = sum(field.second_derivative(self, coords, axis)
                        for axis in range(self.dimension))
        return self.param("mu") * (laplacian + field.second_derivative(self, coords, j) / 3)

    def temperature_laplacian(self, coords):
        """∇²(p / (R ρ)) by the quotient rule."""
        f, g = self._state(coords)
        rho, p = f["rho"], f["p"]
        big_r = self.param("R")
        total = 0.0
        for axis in range(self.dimension):
            d2p = self.flow_fields["p"].second_derivative(self, coords, axis)
            d2rho = self.flow_fields["rho"].second_derivative(self, coords, axis)
            dp, drho = g["p"][axis], g["rho"][axis]
            total = total + (d2p / rho
                             - 2 * dp * drho / rho ** 2
                             - p * d2rho / rho ** 2
                             + 2 * p * drho ** 2 / rho ** 3)
        return total / big_r

    def momentum_source(self, coords, i):
        inviscid = super().momentum_source(coords, i)
        return inviscid - self.stress_divergence(coords, i)

    def energy_source(self, coords):
        f, g = self._state(coords)
        velocities = self.velocity_names()
        tau = self.stress(f, g)

        viscous = 0.0
        for i in range(self.dimension):
            for j, uj in enumerate(velocities):
                viscous = viscous + g[uj][i] * tau[i][j]
        for j, uj in enumerate(velocities):
            viscous = viscous + f[uj] * self.stress_divergence(coords, j)

        conduction = self.param("k") * self.temperature_laplacian(coords)
        return self._inviscid_energy(f, g) - viscous - conduction

    def balance(self, coords, fields, grads, xp=np):
        result = super().balance(coords, fields, grads, xp)
        velocities = self.velocity_names()
        tau = self.stress(fields, grads, xp)
        rho, p = fields["rho"], fields["p"]
        big_r = self.param("R", xp)
        k = self.param("k", xp)

        for i, ui in enumerate(velocities):
            inviscid = result[ui]
            flux = tuple(inviscid.flux[j] - tau[i][j] for j in range(self.dimension))
            result[ui] = inviscid._replace(flux=flux)

        energy = result["e"]
        flux = []
        for j in range(self.dimension):
            grad_t = grads["p"][j] / (big_r * rho) - p * grads["rho"][j] / (big_r * rho ** 2)
            work = sum(fields[ui] * tau[i][j] for i, ui in enumerate(velocities))
            flux.append(energy.flux[j] - work - k * grad_t)
        result["e"] = Balance(energy.density, tuple(flux), energy.production)
        return result


class NavierStokes2D(NavierStokesSolution):
    """Two-dimensional compressible Navier-Stokes equations."""
    name = "navierstokes_2d_compressible"
    dimension = 2
    flow_fields = build_flow_fields(2)
    parameters = build_parameters(2, ("R", "k"))
    source_terms = ("rho", "u", "v", "e")
    defaults = {n: NAVIER_STOKES_DEFAULTS[n] for n in parameters}


class NavierStokes3D(NavierStokesSolution):
    """Three-dimensional compressible Navier-Stokes equations."""
    name = "navierstokes_3d_compressible"
    dimension = 3
    flow_fields = build_flow_fields(3)
    parameters = build_parameters(3, ("R", "k"))
    source_terms = ("rho", "u", "v", "w", "e")
    defaults = {n: NAVIER_STOKES_DEFAULTS[n] for n in parameters}


NAVIER_STOKES_KINDS = (NavierStokes2D, NavierStokes3D)
