"""
Session holding one registry per precision domain.

Masa is the explicit replacement for process-wide registries: build one,
then address a domain on every call.

    masa = Masa()
    masa.initialize("double", "nick", "euler_1d")
    masa.init_default_params("double")
    q = masa.eval_source("double", "rho", 0.5)
"""

from typing import Dict, Optional

from loguru import logger

from ..precision import Precision
from ..utils.errors import ErrorMode
from .dispatch import Dispatcher
from .registry import Registry


class Masa:
    """One Dispatcher (and Registry) per Precision."""

    def __init__(self, error_mode=ErrorMode.RAISE, aliases: Optional[Dict[str, str]] = None):
        self.error_mode = ErrorMode.parse(error_mode)
        self._domains: Dict[Precision, Dispatcher] = {
            precision: Dispatcher(Registry(precision, aliases=aliases, error_mode=self.error_mode))
            for precision in Precision
        }

    def domain(self, precision) -> Dispatcher:
        """Dispatcher for ``precision`` (enum, spelling or numpy dtype)."""
        return self._domains[Precision.parse(precision)]

    def __getitem__(self, precision) -> Dispatcher:
        return self.domain(precision)

    # ----- control -----

    def initialize(self, precision, user_name: str, kind_name: str) -> None:
        self.domain(precision).initialize(user_name, kind_name)

    def select(self, precision, user_name: str) -> None:
        self.domain(precision).select(user_name)

    def list(self, precision):
        return self.domain(precision).list()

    def get_param(self, precision, name: str):
        return self.domain(precision).get_param(name)

    def set_param(self, precision, name: str, value) -> None:
        self.domain(precision).set_param(name, value)

    def init_default_params(self, precision) -> None:
        self.domain(precision).init_default_params()

    def purge_params(self, precision) -> None:
        self.domain(precision).purge_params()

    def sanity_check(self, precision) -> bool:
        return self.domain(precision).sanity_check()

    def poly_test(self, precision, n_points: int = 4, rtol: float = 1e-9, seed: int = 0) -> bool:
        return self.domain(precision).poly_test(n_points, rtol, seed)

    def get_name(self, precision) -> str:
        return self.domain(precision).get_name()

    def get_dimension(self, precision) -> int:
        return self.domain(precision).get_dimension()

    # ----- evaluation -----

    def eval_source(self, precision, variable: str, *args):
        return self.domain(precision).eval_source(variable, *args)

    def eval_exact(self, precision, variable: str, *args):
        return self.domain(precision).eval_exact(variable, *args)

    def eval_grad(self, precision, variable: str, *coords, component: Optional[int] = None):
        return self.domain(precision).eval_grad(variable, *coords, component=component)

    # ----- configuration -----

    @classmethod
    def from_config(cls, config) -> "Masa":
        """
        Build a session from a MasaConfig.

        Applies the error mode and extra aliases, then initializes every
        listed solution (defaults first, then explicit parameter overrides).
        The last listed solution of each domain ends up active.

        Loguru sinks are left alone; applications that want the configured
        console format call setup_logging(config.logging.level, ...) first.
        """
        session = cls(error_mode=config.errors.mode, aliases=config.aliases)

        for spec in config.solutions:
            dispatcher = session.domain(spec.precision)
            dispatcher.initialize(spec.name, spec.kind)
            if spec.init_defaults:
                dispatcher.init_default_params()
            for name, value in spec.params.items():
                dispatcher.set_param(name, value)
            logger.debug(f"Configured solution '{spec.name}' ({spec.kind}, {spec.precision})")

        return session
