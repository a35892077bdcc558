"""
Automatic differentiation check of hand-coded source terms.

Each kind supplies its exact fields and a conservation-law balance
(density, flux, production) as namespace-agnostic code. Here both are
traced with jax so that

    Q = ∂(density)/∂t + Σ_i ∂(flux_i)/∂x_i - production

and ∇f are obtained exactly, then compared with the kind's hand-coded
source_<var>() and gradients() at sampled points (float64).
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from ..physics.jax_config import jax, jnp


@dataclass
class VerificationReport:
    """Worst relative discrepancy per term."""
    solution: str
    n_points: int
    rtol: float
    source_errors: Dict[str, float] = field(default_factory=dict)
    gradient_errors: Dict[str, float] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        errors = list(self.source_errors.values()) + list(self.gradient_errors.values())
        return all(err <= self.rtol for err in errors)

    @property
    def worst(self) -> float:
        errors = list(self.source_errors.values()) + list(self.gradient_errors.values())
        return max(errors, default=0.0)

    def __str__(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        lines = [f"Autodiff check of {self.solution}: {status} "
                 f"({self.n_points} points, rtol={self.rtol:.1e})"]
        for var, err in self.source_errors.items():
            lines.append(f"  source   {var:>4}: {err:.3e}")
        for var, err in self.gradient_errors.items():
            lines.append(f"  gradient {var:>4}: {err:.3e}")
        return "\n".join(lines)


def sample_points(solution, n_points: int = 4, seed: int = 0) -> np.ndarray:
    """
    Random evaluation arguments inside the kind's sample box.

    Returns
    -------
    points : ndarray, shape (n_points, n_args)
        Spatial coordinates followed by time for unsteady kinds.
    """
    rng = np.random.default_rng(seed)
    box = np.array(solution.sample_box(), dtype=np.float64)
    u = rng.random((n_points, len(box)))
    return box[:, 0] + u * (box[:, 1] - box[:, 0])


def _split(solution, args):
    coords = [args[i] for i in range(solution.dimension)]
    t = None if solution.steady else args[solution.dimension]
    return coords, t


def _field_function(solution):
    def fields(args):
        coords, t = _split(solution, args)
        return solution.fields(coords, t, xp=jnp)
    return fields


def _spatial_gradients(solution, jacobian):
    """Keep the spatial columns of a fields Jacobian."""
    return {var: [row[i] for i in range(solution.dimension)] for var, row in jacobian.items()}


def _balance_function(solution):
    fields_fn = _field_function(solution)
    jac_fn = jax.jacfwd(fields_fn)

    def balance(args):
        coords, _ = _split(solution, args)
        grads = _spatial_gradients(solution, jac_fn(args))
        result = solution.balance(coords, fields_fn(args), grads, xp=jnp)
        # Constant leaves (e.g. a zero density) still need to be traced
        return jax.tree_util.tree_map(lambda leaf: leaf + 0.0 * args[0], result)

    return balance


def autodiff_sources(solution, args) -> Dict[str, float]:
    """Source terms implied by the kind's balance, via jax forward mode."""
    args = jnp.asarray(args, dtype=jnp.float64)
    balance_fn = _balance_function(solution)
    values = balance_fn(args)
    jacobian = jax.jacfwd(balance_fn)(args)

    sources = {}
    for var, bal in values.items():
        jac = jacobian[var]
        total = -bal.production
        for i in range(solution.dimension):
            total = total + jac.flux[i][i]
        if not solution.steady:
            total = total + jac.density[solution.dimension]
        sources[var] = float(total)
    return sources


def autodiff_gradients(solution, args) -> Dict[str, List[float]]:
    """Spatial gradients of the exact fields, via jax forward mode."""
    args = jnp.asarray(args, dtype=jnp.float64)
    jacobian = jax.jacfwd(_field_function(solution))(args)
    return {var: [float(g) for g in grads]
            for var, grads in _spatial_gradients(solution, jacobian).items()}


def _relative_error(value, reference) -> float:
    value, reference = float(value), float(reference)
    # NaN would vanish under max(); a non-finite term is a failure
    if not (np.isfinite(value) and np.isfinite(reference)):
        return np.inf
    return abs(value - reference) / max(1.0, abs(reference))


def verify_solution(solution, n_points: int = 4, rtol: float = 1e-9,
                    seed: int = 0) -> VerificationReport:
    """
    Compare hand-coded sources and gradients against autodiff.

    Parameters
    ----------
    solution : ManufacturedSolution
        Instance with every parameter set.
    n_points : int
        Number of random sample points.
    rtol : float
        Tolerance on |a - b| / max(1, |b|).
    seed : int
        Sampling seed.

    Returns
    -------
    VerificationReport
    """
    report = VerificationReport(solution=solution.name, n_points=n_points, rtol=rtol)

    for point in sample_points(solution, n_points, seed):
        args = [np.float64(a) for a in point]
        coords, t = _split(solution, args)

        for var, reference in autodiff_sources(solution, point).items():
            err = _relative_error(solution.eval_source(var, *args), reference)
            report.source_errors[var] = max(err, report.source_errors.get(var, 0.0))

        hand_coded = solution.gradients(coords, t)
        for var, reference in autodiff_gradients(solution, point).items():
            if var not in hand_coded:
                continue
            err = max(_relative_error(a, b) for a, b in zip(hand_coded[var], reference))
            report.gradient_errors[var] = max(err, report.gradient_errors.get(var, 0.0))

    return report
