"""
Static table of the solution kinds the registry can instantiate.

The table is built once at import; its order is the lookup and listing
order. Lookups instantiate only the matching kind.
"""

from typing import List, Optional, Sequence, Type

from loguru import logger

from ..precision import KindName, Precision
from ..utils.errors import CatalogIntegrityError
from .base import ManufacturedSolution
from .diagnostic import TestFunction, Uninitialized
from .euler import EULER_KINDS
from .heat import HEAT_KINDS
from .navier_stokes import NAVIER_STOKES_KINDS
from .rans_sa import RansSA


KIND_TABLE: Sequence[Type[ManufacturedSolution]] = (
    TestFunction,
    Uninitialized,
    *HEAT_KINDS,
    *EULER_KINDS,
    *NAVIER_STOKES_KINDS,
    RansSA,
)


def _checked_name(position: int, kind: Type[ManufacturedSolution]) -> KindName:
    if not kind.name:
        raise CatalogIntegrityError(position, kind.__name__)
    return KindName(kind.name)


def build_catalog(precision=Precision.DOUBLE,
                  catalog: Sequence[Type[ManufacturedSolution]] = KIND_TABLE
                  ) -> List[ManufacturedSolution]:
    """
    Construct one fresh instance of every kind, in table order.

    Each call returns new objects; instances are never shared between
    callers.

    Raises
    ------
    CatalogIntegrityError
        If a kind reports an empty canonical name.
    """
    instances = []
    for position, kind in enumerate(catalog):
        _checked_name(position, kind)
        instances.append(kind(precision))
    return instances


def find_kind(name: str, catalog: Sequence[Type[ManufacturedSolution]] = KIND_TABLE
              ) -> Optional[Type[ManufacturedSolution]]:
    """
    First kind in ``catalog`` whose canonical name equals ``name``.

    Returns None when no kind matches.

    Raises
    ------
    CatalogIntegrityError
        If an empty canonical name is met during the scan.
    """
    for position, kind in enumerate(catalog):
        if _checked_name(position, kind) == name:
            return kind
    return None


def available_kinds(catalog: Sequence[Type[ManufacturedSolution]] = KIND_TABLE) -> List[str]:
    """Canonical names in table order."""
    return [_checked_name(position, kind) for position, kind in enumerate(catalog)]


def print_catalog(catalog: Sequence[Type[ManufacturedSolution]] = KIND_TABLE) -> None:
    names = available_kinds(catalog)
    logger.info(f"MASA :: {len(names)} available manufactured solutions")
    for name in names:
        logger.info(f"  {name}")
