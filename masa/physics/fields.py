"""
Separable trigonometric fields used by the flow manufactured solutions.

A field is an offset plus one sinusoid per spatial axis:

    f(x) = f_0 + Σ_i  f_i · trig_i(a_i π x_i / L)

where trig_i is sin or cos. Because the field is a sum of single-axis
terms, every mixed second derivative vanishes; the kinds rely on this when
writing their source terms.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class AxisTerm:
    """One sinusoid along a single axis: amplitude · trig(freq π x / L)."""
    amplitude: str   # parameter name of the amplitude
    frequency: str   # parameter name of the wave number a_i
    trig: str        # "sin" or "cos"


@dataclass(frozen=True)
class SinusoidField:
    """
    Parameter-driven sum of sinusoids.

    Parameters
    ----------
    offset : str
        Parameter holding the constant part f_0.
    terms : tuple
        One AxisTerm (or None) per spatial axis.
    length : str
        Parameter holding the reference length L.
    """
    offset: str
    terms: Tuple[Optional[AxisTerm], ...]
    length: str = "L"

    def _omega(self, solution, term, xp):
        return solution.param(term.frequency, xp) * solution.pi(xp) / solution.param(self.length, xp)

    def value(self, solution, coords, xp=np):
        result = solution.param(self.offset, xp)
        for x, term in zip(coords, self.terms):
            if term is None:
                continue
            arg = self._omega(solution, term, xp) * x
            trig = xp.sin if term.trig == "sin" else xp.cos
            result = result + solution.param(term.amplitude, xp) * trig(arg)
        return result

    def derivative(self, solution, coords, axis: int, xp=np):
        """∂f/∂x_axis (0-based axis)."""
        term = self.terms[axis] if axis < len(self.terms) else None
        if term is None:
            return 0.0 * coords[axis]
        w = self._omega(solution, term, xp)
        amp = solution.param(term.amplitude, xp)
        if term.trig == "sin":
            return amp * w * xp.cos(w * coords[axis])
        return -amp * w * xp.sin(w * coords[axis])

    def second_derivative(self, solution, coords, axis: int, xp=np):
        """∂²f/∂x_axis² (0-based axis). Mixed derivatives are zero."""
        term = self.terms[axis] if axis < len(self.terms) else None
        if term is None:
            return 0.0 * coords[axis]
        w = self._omega(solution, term, xp)
        trig = xp.sin if term.trig == "sin" else xp.cos
        return -solution.param(term.amplitude, xp) * w ** 2 * trig(w * coords[axis])

    def gradient(self, solution, coords, xp=np):
        return [self.derivative(solution, coords, i, xp) for i in range(len(coords))]


def sinusoid_field(name: str, pattern: str, dimension: int) -> SinusoidField:
    """
    Build the field ``name`` from a trig pattern such as "scs".

    Parameter naming follows ``<name>_0``, ``<name>_x`` and ``a_<name>x``
    for the x-axis; ``pattern[i]`` is "s" (sin) or "c" (cos) for axis i.
    """
    terms = []
    for axis in range(dimension):
        label = "xyz"[axis]
        terms.append(AxisTerm(
            amplitude=f"{name}_{label}",
            frequency=f"a_{name}{label}",
            trig="sin" if pattern[axis] == "s" else "cos",
        ))
    return SinusoidField(offset=f"{name}_0", terms=tuple(terms))
