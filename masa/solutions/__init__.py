"""Manufactured solution kinds and the catalog that lists them."""

from .base import Balance, ManufacturedSolution, ParameterStore
from .catalog import KIND_TABLE, available_kinds, build_catalog, find_kind, print_catalog
from .aliases import ALIAS_TABLE, ALIAS_TABLE_VERSION, map_alias

__all__ = [
    'Balance',
    'ManufacturedSolution',
    'ParameterStore',
    'KIND_TABLE',
    'available_kinds',
    'build_catalog',
    'find_kind',
    'print_catalog',
    'ALIAS_TABLE',
    'ALIAS_TABLE_VERSION',
    'map_alias',
]
