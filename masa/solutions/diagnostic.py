"""
Diagnostic kinds.

masa_test_function is a trivial 1D Poisson solution used to exercise the
registry end to end. masa_uninit deliberately ships without defaults so
that sanity checking has a known failing member.
"""

import numpy as np

from .base import Balance, ManufacturedSolution


class TestFunction(ManufacturedSolution):
    """
    Quadratic 1D solution of -T'' = Q.

    T(x) = d1 + d2 x + d3 x²,  Q = -2 d3
    """

    # Not a pytest test class
    __test__ = False

    name = "masa_test_function"
    dimension = 1
    parameters = ("demo_var_1", "demo_var_2", "demo_var_3")
    defaults = {"demo_var_1": 1.0, "demo_var_2": 2.0, "demo_var_3": 3.0}
    source_terms = ("t",)

    def fields(self, coords, t=None, xp=np):
        x, = coords
        d1, d2, d3 = (self.param(name, xp) for name in self.parameters)
        return {"t": d1 + d2 * x + d3 * x * x}

    def gradients(self, coords, t=None):
        x, = coords
        return {"t": [self.param("demo_var_2") + 2 * self.param("demo_var_3") * x]}

    def source_t(self, coords, t=None):
        x, = coords
        return -2 * self.param("demo_var_3") + 0 * x

    def balance(self, coords, fields, grads, xp=np):
        return {"t": Balance(density=0.0, flux=(-grads["t"][0],), production=0.0)}


class Uninitialized(ManufacturedSolution):
    """Kind with a declared parameter and no default for it."""

    name = "masa_uninit"
    dimension = 1
    parameters = ("dummy",)
    defaults = {}
