"""
Spalart-Allmaras Turbulence Model Functions.

This module implements the closure functions of the Spalart-Allmaras
one-equation model used by the ``rans_sa`` manufactured solution.

Array Namespace Agnostic:
    Every function takes an ``xp`` namespace (numpy or jax.numpy) for the
    few non-arithmetic operations (abs, clamps). Arithmetic is written with
    plain operators, so the same body evaluates:
    - numpy scalars/arrays in double or long double precision
    - jax tracers, for autodiff consistency checks

Notation:
    nu_sa : SA working variable ν̃
    nu    : laminar kinematic viscosity
    chi   : ν̃ / ν
    omega : vorticity magnitude (|du/dy| in a channel)
    d     : wall distance
"""

import numpy as np

from ..constants import CB1, CB2, SIGMA, KAPPA, CW1, CW2, CW3, CV1, S_TILDE_MIN, R_MAX


def fv1(chi):
    """
    Compute fv1 damping function and its derivative.

    fv1 = chi³ / (chi³ + cv1³)

    Parameters
    ----------
    chi : scalar or array
        Viscosity ratio ν̃/ν.

    Returns
    -------
    val : fv1 value (same shape as input).
    grad : d(fv1)/d(chi) (same shape as input).
    """
    chi3 = chi ** 3
    denom = chi3 + CV1 ** 3

    val = chi3 / denom

    # d/dchi [chi^3 / (chi^3 + cv1^3)] = 3chi^2 * cv1^3 / denom^2
    grad = (3 * chi ** 2 * CV1 ** 3) / (denom ** 2)

    return val, grad


def fv2(chi):
    """
    Returns (fv2, d(fv2)/d(chi)).

    fv2 = 1 - chi / (1 + chi * fv1)
    """
    fv1_val, fv1_grad = fv1(chi)

    denom = 1.0 + chi * fv1_val
    val = 1.0 - chi / denom

    # d(chi/denom)/dchi = (1 - chi^2 * fv1') / denom^2
    grad = -(1.0 - chi ** 2 * fv1_grad) / (denom ** 2)

    return val, grad


def turbulent_viscosity(nu_sa, nu):
    """
    Eddy viscosity and its derivative with respect to ν̃.

    ν_t = ν̃ · fv1(χ)
    dν_t/dν̃ = fv1 + χ · fv1'(χ)
    """
    chi = nu_sa / nu
    fv1_val, fv1_grad = fv1(chi)
    return nu_sa * fv1_val, fv1_val + chi * fv1_grad


def s_tilde(omega, nu_sa, nu, d, xp=np):
    """
    Modified vorticity S̃ = Ω + ν̃/(κ²d²) · fv2(χ), clamped from below.
    """
    fv2_val, _ = fv2(nu_sa / nu)
    raw = xp.abs(omega) + nu_sa / (KAPPA ** 2 * d ** 2) * fv2_val
    return xp.maximum(raw, S_TILDE_MIN)


def r(omega, nu_sa, nu, d, xp=np):
    """r = ν̃ / (S̃ κ² d²), clamped at R_MAX."""
    s_t = s_tilde(omega, nu_sa, nu, d, xp=xp)
    return xp.minimum(nu_sa / (s_t * KAPPA ** 2 * d ** 2), R_MAX)


def g(omega, nu_sa, nu, d, xp=np):
    """g = r + cw2 (r⁶ - r)."""
    r_val = r(omega, nu_sa, nu, d, xp=xp)
    return r_val + CW2 * (r_val ** 6 - r_val)


def fw(omega, nu_sa, nu, d, xp=np):
    """fw = g · ((1 + cw3⁶)/(g⁶ + cw3⁶))^(1/6)."""
    g_val = g(omega, nu_sa, nu, d, xp=xp)
    c6 = CW3 ** 6
    return g_val * ((1.0 + c6) / (g_val ** 6 + c6)) ** (1.0 / 6.0)


def production(omega, nu_sa, nu, d, xp=np):
    """Production P = cb1 · S̃ · ν̃."""
    return CB1 * s_tilde(omega, nu_sa, nu, d, xp=xp) * nu_sa


def destruction(omega, nu_sa, nu, d, xp=np):
    """Destruction D = cw1 · fw · (ν̃/d)²."""
    return CW1 * fw(omega, nu_sa, nu, d, xp=xp) * (nu_sa / d) ** 2


def cb2_term(dnu_sa):
    """Non-conservative diffusion term (cb2/σ)|∇ν̃|² for a 1D profile."""
    return CB2 / SIGMA * dnu_sa ** 2
