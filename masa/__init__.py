"""
Manufactured solutions registry.

Named, per-precision instances of analytical manufactured solutions with
a dispatch layer for source terms, exact fields and gradients.

    from masa import Masa

    masa = Masa()
    masa.initialize("double", "flow", "euler_2d")
    masa.init_default_params("double")
    masa.eval_source("double", "rho_u", 0.25, 0.5)
"""

from .precision import KindName, Precision, UserName
from .core import Dispatcher, Masa, Registry
from .solutions import ManufacturedSolution, available_kinds, map_alias
from .utils.errors import (
    CatalogIntegrityError,
    ErrorMode,
    MasaError,
    NoActiveSolutionError,
    UnknownInstanceError,
    UnknownKindError,
    UnsetParameterError,
    UnsupportedTermError,
)

__all__ = [
    'KindName',
    'Precision',
    'UserName',
    'Dispatcher',
    'Masa',
    'Registry',
    'ManufacturedSolution',
    'available_kinds',
    'map_alias',
    'CatalogIntegrityError',
    'ErrorMode',
    'MasaError',
    'NoActiveSolutionError',
    'UnknownInstanceError',
    'UnknownKindError',
    'UnsetParameterError',
    'UnsupportedTermError',
]
