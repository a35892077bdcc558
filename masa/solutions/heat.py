"""
Heat equation manufactured solutions.

    ρ c_p ∂T/∂t = ∇·(k(T) ∇T) + Q

The exact temperature is a product of cosines,

    T = Π_i cos(A_i x_i)            (steady)
    T = Π_i cos(A_i x_i) cos(D_t t) (unsteady)

so ∇²T = -(Σ A_i²) T. Constant-conductivity kinds use k; the variable
kinds use k(T) = k_0 + k_1 T + k_2 T².

Twelve kinds are generated, one per (dimension, steady, variable) triple,
named ``heat_{n}d_{steady|unsteady}_{const|var}``.
"""

from typing import Dict, List

import numpy as np

from .base import Balance, ManufacturedSolution


# Wave number parameter per axis
WAVE_NUMBERS = ("A_x", "B_y", "C_z")


class HeatEquation(ManufacturedSolution):
    """Shared formula body for all heat equation kinds."""

    # Conductivity depends on temperature
    variable: bool = False

    source_terms = ("t",)

    def _spatial(self, coords, xp=np):
        """Per-axis cosines and sines of A_i x_i."""
        cosines, sines, waves = [], [], []
        for x, wave in zip(coords, WAVE_NUMBERS):
            a = self.param(wave, xp)
            cosines.append(xp.cos(a * x))
            sines.append(xp.sin(a * x))
            waves.append(a)
        return cosines, sines, waves

    def _time_factor(self, t, xp=np):
        if self.steady:
            return 1.0, 0.0
        d_t = self.param("D_t", xp)
        return xp.cos(d_t * t), -d_t * xp.sin(d_t * t)

    def conductivity(self, temperature, xp=np):
        """k(T) and dk/dT."""
        if not self.variable:
            return self.param("k", xp), 0.0
        k_0, k_1, k_2 = (self.param(n, xp) for n in ("k_0", "k_1", "k_2"))
        return (k_0 + k_1 * temperature + k_2 * temperature ** 2,
                k_1 + 2 * k_2 * temperature)

    def fields(self, coords, t=None, xp=np):
        cosines, _, _ = self._spatial(coords, xp)
        factor, _ = self._time_factor(t, xp)
        temperature = factor
        for c in cosines:
            temperature = temperature * c
        return {"t": temperature}

    def gradients(self, coords, t=None) -> Dict[str, List]:
        cosines, sines, waves = self._spatial(coords)
        factor, _ = self._time_factor(t)
        grad = []
        for i in range(self.dimension):
            term = -waves[i] * sines[i] * factor
            for j, c in enumerate(cosines):
                if j != i:
                    term = term * c
            grad.append(term)
        return {"t": grad}

    def source_t(self, coords, t=None):
        cosines, _, waves = self._spatial(coords)
        factor, dfactor = self._time_factor(t)

        spatial = cosines[0]
        for c in cosines[1:]:
            spatial = spatial * c
        temperature = spatial * factor
        laplacian = -sum(a * a for a in waves) * temperature

        k, dk = self.conductivity(temperature)
        source = -k * laplacian
        if self.variable:
            grad = self.gradients(coords, t)["t"]
            source = source - dk * sum(g * g for g in grad)
        if not self.steady:
            source = source + self.param("rho") * self.param("cp") * spatial * dfactor
        return source

    def balance(self, coords, fields, grads, xp=np):
        temperature = fields["t"]
        k, _ = self.conductivity(temperature, xp)
        if self.steady:
            density = 0.0
        else:
            density = self.param("rho", xp) * self.param("cp", xp) * temperature
        flux = tuple(-k * g for g in grads["t"])
        return {"t": Balance(density=density, flux=flux, production=0.0)}


HEAT_DEFAULTS = {
    "A_x": 1.2,
    "B_y": 0.8,
    "C_z": 0.5,
    "k": 1.3,
    "D_t": 0.7,
    "rho": 1.1,
    "cp": 2.4,
    "k_0": 1.0,
    "k_1": 0.4,
    "k_2": 0.2,
}


def _heat_kind(dimension: int, steady: bool, variable: bool):
    """Create the heat kind class for one (dimension, steady, variable) triple."""
    names = list(WAVE_NUMBERS[:dimension])
    if not steady:
        names += ["D_t", "rho", "cp"]
    names += ["k_0", "k_1", "k_2"] if variable else ["k"]

    kind = "heat_{}d_{}_{}".format(dimension, "steady" if steady else "unsteady",
                                    "var" if variable else "const")
    class_name = "Heat{}D{}{}".format(dimension, "Steady" if steady else "Unsteady",
                                      "Var" if variable else "Const")
    return type(class_name, (HeatEquation,), {
        "name": kind,
        "dimension": dimension,
        "steady": steady,
        "variable": variable,
        "parameters": tuple(names),
        "defaults": {n: HEAT_DEFAULTS[n] for n in names},
        "__doc__": f"Heat equation kind '{kind}'.",
        "__module__": __name__,
    })


# Catalog order: steady/const, unsteady/const, unsteady/var, steady/var
HEAT_KINDS = tuple(
    _heat_kind(dimension, steady, variable)
    for steady, variable in ((True, False), (False, False), (False, True), (True, True))
    for dimension in (1, 2, 3)
)
