"""
Global constants for the manufactured solution library.

This module defines constants shared by the formula kinds, the registry
and the verification tools.
"""

# Spalart-Allmaras model constants
CB1 = 0.1355
CB2 = 0.622
SIGMA = 2.0 / 3.0
KAPPA = 0.41
CW1 = CB1 / (KAPPA ** 2) + (1.0 + CB2) / SIGMA
CW2 = 0.3
CW3 = 2.0
CV1 = 7.1

# Lower clamp on the modified vorticity, upper clamp on r
S_TILDE_MIN = 1e-16
R_MAX = 10.0

# Axis labels, indexed by 0-based axis
AXES = ("x", "y", "z")

# Term families exposed through the dispatch layer
SOURCE_VARIABLES = (
    "t", "u", "v", "w", "e", "rho",
    "rho_u", "rho_v", "rho_w", "rho_e", "nu",
)
EXACT_VARIABLES = ("t", "u", "v", "w", "p", "rho", "nu")
GRADIENT_VARIABLES = ("t", "u", "v", "w", "p", "rho", "nu")

# Conservative names used by older callers for the momentum/energy sources
CONSERVATIVE_ALIASES = {
    "rho_u": "u",
    "rho_v": "v",
    "rho_w": "w",
    "rho_e": "e",
}


def axis_count(dimension: int, steady: bool) -> int:
    """
    Number of positional evaluation arguments for a kind.

    Parameters
    ----------
    dimension : int
        Spatial dimensionality (1, 2 or 3).
    steady : bool
        Steady kinds take no time argument.

    Returns
    -------
    int
        dimension + (0 if steady else 1)
    """
    return dimension + (0 if steady else 1)
