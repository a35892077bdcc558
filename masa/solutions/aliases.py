"""
Kind name aliasing.

Callers may spell a kind with legacy or shorthand names. map_alias is a
pure function: it normalises the spelling, then looks it up in a
versioned table. Names without an alias come back unchanged.
"""

from typing import Dict, Optional


ALIAS_TABLE_VERSION = "2"

ALIAS_TABLE: Dict[str, str] = {
    # Legacy heat equation spelling
    **{
        f"heateq_{dim}d_{time}_{cond}": f"heat_{dim}d_{time}_{cond}"
        for dim in (1, 2, 3)
        for time in ("steady", "unsteady")
        for cond in ("const", "var")
    },
    # Shorthand
    "test": "masa_test_function",
    "ns_2d": "navierstokes_2d_compressible",
    "ns_3d": "navierstokes_3d_compressible",
    "navierstokes_2d": "navierstokes_2d_compressible",
    "navierstokes_3d": "navierstokes_3d_compressible",
    "sa": "rans_sa",
    "spalart_allmaras": "rans_sa",
}


def normalize(name: str) -> str:
    """Lower-case, strip, and map '-' and spaces to '_'."""
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def map_alias(name: str, extra: Optional[Dict[str, str]] = None) -> str:
    """
    Resolve a user-supplied kind name to a canonical kind name.

    Parameters
    ----------
    name : str
        Name as given by the caller.
    extra : dict, optional
        Additional aliases (normalised keys) consulted before ALIAS_TABLE.

    Returns
    -------
    str
        The canonical name if an alias applies, otherwise ``name`` unchanged.
    """
    key = normalize(name)
    if extra:
        extra = {normalize(k): v for k, v in extra.items()}
        if key in extra:
            return extra[key]
    return ALIAS_TABLE.get(key, name)
