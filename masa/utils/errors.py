"""
Centralized error handling for the manufactured solution registry.

Every error the registry can report is fatal: it reflects a caller
mistake or a defect in a formula kind, never a transient condition.
What "fatal" means is configurable through ErrorMode so that embedding
code can choose between process termination and a catchable exception.
"""

import sys
from enum import Enum
from typing import List, Optional, Sequence, Tuple, NoReturn

from loguru import logger


class ErrorMode(Enum):
    """What happens after a fatal condition has been reported."""

    RAISE = "raise"  # Raise the MasaError (carries an integer code)
    EXIT = "exit"    # Terminate the process with the error code

    @classmethod
    def parse(cls, value) -> "ErrorMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid error mode: {value!r}. Use 'raise' or 'exit'")


class MasaError(Exception):
    """
    Base exception for all registry and dispatch errors.

    Subclasses provide an integer code (used as exit status in EXIT mode)
    and suggestions for recovering the correct call.
    """

    code = 1
    default_title = "MASA Error"
    default_suggestions: List[str] = []

    def __init__(
        self,
        message: str,
        *,
        suggestions: Optional[List[str]] = None,
        technical_details: Optional[str] = None,
    ):
        super().__init__(message)
        self.user_message = message
        self.suggestions = suggestions or self.default_suggestions.copy()
        self.technical_details = technical_details


class UnknownKindError(MasaError):
    """Raised when initialize() is given a kind name absent from the catalog."""

    code = 2
    default_title = "Unknown Solution Kind"

    def __init__(self, kind_name: str, mapped_name: str, available: Sequence[str] = ()):
        message = f"No manufactured solution named '{kind_name}' found"
        if mapped_name != kind_name:
            message += f" (mapped to '{mapped_name}')"
        super().__init__(
            message,
            suggestions=[
                "Check the spelling of the solution kind",
                "List the available kinds with available_kinds()",
            ],
            technical_details="Available: " + ", ".join(available) if available else None,
        )
        self.kind_name = kind_name
        self.mapped_name = mapped_name


class UnknownInstanceError(MasaError):
    """Raised when select() is given a name that was never initialized."""

    code = 3
    default_title = "Unknown Solution Instance"

    def __init__(self, user_name: str, known: Sequence[Tuple[str, str]] = ()):
        listing = ", ".join(f"{name} : {kind}" for name, kind in known) or "none"
        super().__init__(
            f"No such manufactured solution ({user_name}) has been initialized. "
            f"Initialized solutions: {listing}",
            suggestions=[f"Select one of: {', '.join(name for name, _ in known)}"]
            if known else ["Call initialize() before select()"],
        )
        self.user_name = user_name
        self.known = list(known)


class NoActiveSolutionError(MasaError):
    """Raised when a forwarding call is made before any initialize/select."""

    code = 4
    default_title = "No Active Solution"
    default_suggestions = ["Have you called initialize()?"]

    def __init__(self, precision: str = ""):
        where = f" for {precision} precision" if precision else ""
        super().__init__(f"No initialized manufactured solution{where}")


class UnsetParameterError(MasaError):
    """Raised when a parameter is read before it was ever set."""

    code = 5
    default_title = "Unset Parameter"

    def __init__(self, param: str, solution: str = ""):
        owner = f" of '{solution}'" if solution else ""
        super().__init__(
            f"Parameter '{param}'{owner} has not been set",
            suggestions=[
                "Call init_default_params() to load the documented defaults",
                f"Set it explicitly with set_param('{param}', value)",
            ],
        )
        self.param = param


class CatalogIntegrityError(MasaError):
    """Raised when a catalog kind reports an empty canonical name."""

    code = 6
    default_title = "Catalog Defect"

    def __init__(self, position: int, kind: str = ""):
        super().__init__(
            f"Manufactured solution at catalog position {position} has no name",
            technical_details=f"Kind class: {kind}" if kind else None,
        )
        self.position = position


class UnsupportedTermError(MasaError):
    """Raised when a term is not implemented for the selected solution."""

    code = 7
    default_title = "Unsupported Term"

    def __init__(self, solution: str, family: str, variable: str, detail: str = ""):
        message = f"'{family}' term '{variable}' is not implemented for '{solution}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.solution = solution
        self.family = family
        self.variable = variable


def fatal(exc: MasaError, mode: ErrorMode = ErrorMode.RAISE) -> NoReturn:
    """
    Report a fatal condition and apply the configured error mode.

    Args:
        exc: The error to report
        mode: RAISE re-raises exc, EXIT terminates with exc.code

    Raises:
        MasaError: In RAISE mode
        SystemExit: In EXIT mode
    """
    logger.error(f"MASA FATAL ERROR:: {exc.user_message}")
    if exc.technical_details:
        logger.debug(exc.technical_details)

    if ErrorMode.parse(mode) is ErrorMode.EXIT:
        logger.critical("MASA:: ABORTING")
        sys.exit(exc.code)

    raise exc


def format_error_for_user(exc: Exception) -> str:
    """
    Format an exception into a single user-facing line.

    Returns the message followed by the first suggestion, if any.
    """
    if isinstance(exc, MasaError):
        result = exc.user_message
        if exc.suggestions:
            result += f" Try: {exc.suggestions[0]}"
        return result
    return f"An unexpected error occurred: {exc}"
