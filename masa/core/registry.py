"""
Per-precision registry of manufactured solution instances.

A Registry maps user-chosen names to instances of catalog kinds and keeps
track of the single active instance. Kind names are alias-mapped before
the catalog scan; only the matching kind is instantiated.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Type

from loguru import logger

from ..precision import KindName, Precision, UserName
from ..solutions.aliases import map_alias
from ..solutions.base import ManufacturedSolution
from ..solutions.catalog import KIND_TABLE, available_kinds, find_kind
from ..utils.errors import (
    ErrorMode,
    MasaError,
    NoActiveSolutionError,
    UnknownInstanceError,
    UnknownKindError,
    fatal,
)


class Registry:
    """
    Solution instances of one precision domain.

    Parameters
    ----------
    precision : Precision or str
        Numeric domain of every instance created here.
    catalog : sequence of kind classes
        Kinds available to initialize(); defaults to the static table.
    aliases : dict, optional
        Extra kind aliases consulted before the built-in table.
    error_mode : ErrorMode or str
        What fail() does after logging: raise or exit the process.
    """

    def __init__(
        self,
        precision=Precision.DOUBLE,
        catalog: Sequence[Type[ManufacturedSolution]] = KIND_TABLE,
        aliases: Optional[Dict[str, str]] = None,
        error_mode=ErrorMode.RAISE,
    ):
        self.precision = Precision.parse(precision)
        self.catalog = tuple(catalog)
        self.aliases = dict(aliases or {})
        self.error_mode = ErrorMode.parse(error_mode)
        self._instances: Dict[UserName, ManufacturedSolution] = {}
        self._active: Optional[UserName] = None

    def __repr__(self) -> str:
        return (f"Registry(precision={self.precision.value}, "
                f"instances={self.count()}, active={self._active!r})")

    def fail(self, exc: MasaError):
        """Apply the fatal error discipline to exc."""
        fatal(exc, self.error_mode)

    # ----- lifecycle -----

    def initialize(self, user_name: str, kind_name: str) -> ManufacturedSolution:
        """
        Create an instance of ``kind_name`` stored as ``user_name``.

        The new instance becomes active. An existing instance under the
        same user name is replaced and released.
        """
        mapped = KindName(map_alias(kind_name, self.aliases))
        try:
            kind = find_kind(mapped, self.catalog)
        except MasaError as exc:
            self.fail(exc)
        if kind is None:
            self.fail(UnknownKindError(kind_name, mapped, available_kinds(self.catalog)))

        key = UserName(user_name)
        if key in self._instances:
            logger.debug(f"MASA :: replacing solution '{key}' "
                         f"({self._instances[key].name} -> {kind.name})")
        self._instances[key] = kind(self.precision)
        self._active = key
        logger.info(f"MASA :: initialized '{key}' as {kind.name} "
                    f"({self.precision.value} precision)")
        return self._instances[key]

    def select(self, user_name: str) -> ManufacturedSolution:
        """Make an initialized instance active."""
        key = UserName(user_name)
        if key not in self._instances:
            logger.error(f"MASA ERROR:: No such manufactured solution ({user_name}) has been initialized")
            self.print_list()
            self.fail(UnknownInstanceError(user_name, self.list()))
        self._active = key
        logger.info(f"MASA :: selected {key}")
        return self._instances[key]

    def active_instance(self) -> ManufacturedSolution:
        if self._active is None:
            self.fail(NoActiveSolutionError(self.precision.value))
        return self._instances[self._active]

    @property
    def active_name(self) -> Optional[UserName]:
        return self._active

    def clear(self) -> None:
        """Release every instance; no solution is active afterwards."""
        self._instances.clear()
        self._active = None

    # ----- listing -----

    def list(self) -> List[Tuple[UserName, KindName]]:
        """(user name, canonical kind name) pairs sorted by user name."""
        return [(name, KindName(self._instances[name].name)) for name in sorted(self._instances)]

    def count(self) -> int:
        return len(self._instances)

    def print_list(self) -> None:
        entries = self.list()
        logger.info(f"MASA :: {len(entries)} initialized manufactured solution(s)")
        for name, kind in entries:
            marker = "*" if name == self._active else " "
            logger.info(f" {marker} {name} : {kind}")

    def __contains__(self, user_name: str) -> bool:
        return user_name in self._instances

    def __len__(self) -> int:
        return self.count()
