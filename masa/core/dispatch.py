"""
Dispatch façade over one registry.

Every evaluation or parameter call resolves the registry's active
instance and forwards its arguments unchanged; results are returned
untransformed. Errors raised anywhere below go through the registry's
fatal error discipline.

Besides the generic eval_source/eval_exact/eval_grad, one named entry
point exists per term, e.g. ``eval_source_rho_u(x, y)`` or
``eval_grad_2d_p(x, y, 2)``.
"""

from functools import partialmethod
from typing import Any, List, Optional, Tuple

from ..constants import EXACT_VARIABLES, GRADIENT_VARIABLES, SOURCE_VARIABLES
from ..solutions.catalog import available_kinds
from ..utils.errors import MasaError, UnsupportedTermError
from .registry import Registry


class Dispatcher:
    """Forward calls to the active solution of ``registry``."""

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry if registry is not None else Registry()

    @property
    def precision(self):
        return self.registry.precision

    def _call(self, method: str, *args):
        solution = self.registry.active_instance()
        try:
            return getattr(solution, method)(*args)
        except MasaError as exc:
            self.registry.fail(exc)

    # ----- registry control -----

    def initialize(self, user_name: str, kind_name: str) -> None:
        self.registry.initialize(user_name, kind_name)

    def select(self, user_name: str) -> None:
        self.registry.select(user_name)

    def list(self) -> List[Tuple[str, str]]:
        return self.registry.list()

    def count(self) -> int:
        return self.registry.count()

    def print_list(self) -> None:
        self.registry.print_list()

    def available_kinds(self) -> List[str]:
        return available_kinds(self.registry.catalog)

    # ----- parameters -----

    def get_param(self, name: str):
        return self._call("get_var", name)

    def set_param(self, name: str, value) -> None:
        self._call("set_var", name, value)

    def init_default_params(self) -> None:
        self._call("init_var")

    def purge_params(self) -> None:
        self._call("purge_var")

    def display_params(self) -> None:
        self._call("display_var")

    def list_params(self) -> List[Tuple[str, Any]]:
        return self._call("list_var")

    # ----- identity and checks -----

    def get_name(self) -> str:
        return self._call("return_name")

    def get_dimension(self) -> int:
        return self._call("return_dim")

    def sanity_check(self) -> bool:
        return self._call("sanity_check")

    def poly_test(self, n_points: int = 4, rtol: float = 1e-9, seed: int = 0) -> bool:
        return self._call("poly_test", n_points, rtol, seed)

    # ----- evaluation -----

    def eval_source(self, variable: str, *args):
        return self._call("eval_source", variable, *args)

    def eval_exact(self, variable: str, *args):
        return self._call("eval_exact", variable, *args)

    def eval_grad(self, variable: str, *coords, component: Optional[int] = None):
        """
        Gradient of ``variable`` along axis ``component`` (1-based).

        The component may only be omitted for one-dimensional solutions.
        """
        if component is None:
            if self.get_dimension() > 1:
                self.registry.fail(UnsupportedTermError(
                    self.get_name(), "gradient", variable, "missing gradient component"))
            component = 1
        return self._call("eval_grad", variable, component, *coords)

    def _eval_grad_nd(self, variable: str, dimension: int, *args):
        actual = self.get_dimension()
        if actual != dimension:
            self.registry.fail(UnsupportedTermError(
                self.get_name(), "gradient", variable,
                f"{dimension}d entry point called on a {actual}d solution"))
        if dimension == 1:
            return self.eval_grad(variable, *args, component=1)
        if not args:
            self.registry.fail(UnsupportedTermError(
                self.get_name(), "gradient", variable, "missing gradient component"))
        *coords, component = args
        return self.eval_grad(variable, *coords, component=component)


for _var in SOURCE_VARIABLES:
    setattr(Dispatcher, f"eval_source_{_var}",
            partialmethod(Dispatcher.eval_source, _var))

for _var in EXACT_VARIABLES:
    setattr(Dispatcher, f"eval_exact_{_var}",
            partialmethod(Dispatcher.eval_exact, _var))

for _var in GRADIENT_VARIABLES:
    for _dim in (1, 2, 3):
        setattr(Dispatcher, f"eval_grad_{_dim}d_{_var}",
                partialmethod(Dispatcher._eval_grad_nd, _var, _dim))

del _var, _dim
