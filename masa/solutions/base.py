"""
Base manufactured solution interface and parameter storage.

All formula kinds inherit from ManufacturedSolution. A kind is identified
by its canonical ``name``; each instance owns a ParameterStore, so two
instances of one kind carry independent parameter values.
"""

import numbers
from abc import ABC
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from ..constants import AXES, CONSERVATIVE_ALIASES, axis_count
from ..precision import Precision
from ..utils.errors import UnsetParameterError, UnsupportedTermError


class ParameterStore:
    """
    Named bag of precision-domain scalars.

    Declared names are the parameters a kind documents; ``set`` is an
    upsert and also accepts undeclared names.
    """

    def __init__(self, names: Iterable[str] = (), dtype=np.float64, owner: str = ""):
        self._declared: Tuple[str, ...] = tuple(names)
        self._values: Dict[str, Any] = {}
        self.dtype = dtype
        self.owner = owner

    def init_defaults(self, defaults: Dict[str, float]) -> None:
        """Set every parameter in ``defaults``."""
        for name, value in defaults.items():
            self.set(name, value)

    def set(self, name: str, value) -> None:
        self._values[name] = self.dtype(value)

    def get(self, name: str):
        try:
            return self._values[name]
        except KeyError:
            raise UnsetParameterError(name, self.owner) from None

    def purge_all(self) -> None:
        """Clear every value; declared names stay declared."""
        self._values.clear()

    def enumerate(self) -> List[Tuple[str, Optional[Any]]]:
        """Sorted (name, value) pairs; unset declared names report None."""
        names = set(self._declared) | set(self._values)
        return [(name, self._values.get(name)) for name in sorted(names)]

    def unset(self) -> List[str]:
        """Declared names without a value, in declaration order."""
        return [name for name in self._declared if name not in self._values]

    def display(self) -> None:
        logger.info(f"Parameters of {self.owner or 'solution'}:")
        for name, value in self.enumerate():
            shown = "<unset>" if value is None else f"{value}"
            logger.info(f"  {name:>12} : {shown}")

    @property
    def declared(self) -> Tuple[str, ...]:
        return self._declared

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)


class Balance(NamedTuple):
    """
    Conservation-law form of one equation.

    source = d(density)/dt + div(flux) - production
    """
    density: Any
    flux: Tuple[Any, ...]
    production: Any


class ManufacturedSolution(ABC):
    """
    Abstract base class for manufactured solution kinds.

    Subclasses set the class attributes below and implement:
      - fields(): exact primitive fields (namespace agnostic)
      - gradients(): hand-coded spatial gradients
      - source_<var>(): hand-coded source terms
      - balance(): conservation form, used by the autodiff self check
    """

    # Canonical kind name (must be non-empty)
    name: str = ""

    # Spatial dimensionality
    dimension: int = 1

    # Unsteady kinds take a trailing time argument
    steady: bool = True

    # Declared parameters and their documented defaults
    parameters: Tuple[str, ...] = ()
    defaults: Dict[str, float] = {}

    # Variables with a source term, in equation order
    source_terms: Tuple[str, ...] = ()

    # Alternative term names accepted by eval_*
    term_aliases: Dict[str, str] = {}

    def __init__(self, precision=Precision.DOUBLE):
        self.precision = Precision.parse(precision)
        self.store = ParameterStore(self.parameters, dtype=self.precision.dtype, owner=self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, precision={self.precision.value})"

    # ----- identity -----

    def return_name(self) -> str:
        return self.name

    def return_dim(self) -> int:
        return self.dimension

    # ----- parameters -----

    def init_var(self) -> None:
        """Set every parameter to its documented default."""
        self.store.init_defaults(self.defaults)

    def set_var(self, name: str, value) -> None:
        self.store.set(name, value)

    def get_var(self, name: str):
        return self.store.get(name)

    def purge_var(self) -> None:
        self.store.purge_all()

    def display_var(self) -> None:
        self.store.display()

    def list_var(self) -> List[Tuple[str, Optional[Any]]]:
        return self.store.enumerate()

    def param(self, name: str, xp=np):
        """Parameter value for a formula body in namespace ``xp``."""
        value = self.store.get(name)
        return value if xp is np else float(value)

    def pi(self, xp=np):
        if xp is np:
            return np.arccos(self.precision.dtype(-1))
        return xp.pi

    # ----- formula bodies (overridden by kinds) -----

    def fields(self, coords: Sequence, t=None, xp=np) -> Dict[str, Any]:
        return {}

    def gradients(self, coords: Sequence, t=None) -> Dict[str, List[Any]]:
        return {}

    def balance(self, coords: Sequence, fields: Dict[str, Any], grads: Dict[str, Any],
                xp=np) -> Dict[str, Balance]:
        return {}

    # ----- evaluation entry points -----

    def _split_args(self, family: str, variable: str, args: Sequence):
        expected = axis_count(self.dimension, self.steady)
        if len(args) != expected:
            labels = list(AXES[:self.dimension]) + ([] if self.steady else ["t"])
            raise UnsupportedTermError(
                self.name, family, variable,
                f"expected {expected} argument(s) ({', '.join(labels)}), got {len(args)}",
            )
        coords = tuple(args[:self.dimension])
        t = None if self.steady else args[-1]
        return coords, t

    def _resolve(self, variable: str) -> str:
        variable = self.term_aliases.get(variable, variable)
        return CONSERVATIVE_ALIASES.get(variable, variable)

    def eval_source(self, variable: str, *args):
        coords, t = self._split_args("source", variable, args)
        key = self._resolve(variable)
        # Only declared equations; other source_* attributes are not terms
        if key not in self.source_terms:
            raise UnsupportedTermError(self.name, "source", variable)
        return getattr(self, f"source_{key}")(coords, t)

    def eval_exact(self, variable: str, *args):
        coords, t = self._split_args("exact", variable, args)
        fields = self.fields(coords, t)
        key = self._resolve(variable)
        if key not in fields:
            raise UnsupportedTermError(self.name, "exact", variable)
        return fields[key]

    def eval_grad(self, variable: str, component: int, *args):
        """Gradient component (1-based: 1 = x, 2 = y, 3 = z)."""
        coords, t = self._split_args("gradient", variable, args)
        axis = self._component_axis(variable, component)
        grads = self.gradients(coords, t)
        key = self._resolve(variable)
        if key not in grads:
            raise UnsupportedTermError(self.name, "gradient", variable)
        return grads[key][axis]

    def _component_axis(self, variable: str, component) -> int:
        """0-based axis of a 1-based component; integral values only."""
        if isinstance(component, numbers.Real) and float(component).is_integer():
            axis = int(component) - 1
            if 0 <= axis < self.dimension:
                return axis
        raise UnsupportedTermError(
            self.name, "gradient", variable,
            f"component must be an integer between 1 and {self.dimension}, got {component!r}",
        )

    # ----- self checks -----

    def sanity_check(self) -> bool:
        """Check that every declared parameter has been set."""
        missing = self.store.unset()
        for name in missing:
            logger.warning(f"MASA WARNING:: {self.name} parameter '{name}' is uninitialized")
        if missing:
            logger.warning(f"MASA WARNING:: {self.name} failed sanity check "
                           f"({len(missing)} unset parameter(s))")
        return not missing

    def poly_test(self, n_points: int = 4, rtol: float = 1e-9, seed: int = 0) -> bool:
        """
        Compare the hand-coded sources and gradients against jax autodiff.

        Returns False when parameters are missing or any term disagrees.
        """
        if not self.sanity_check():
            return False

        from ..validation.autodiff import verify_solution

        report = verify_solution(self, n_points=n_points, rtol=rtol, seed=seed)
        if report.passed:
            logger.debug(str(report))
        else:
            logger.warning(str(report))
        return report.passed

    def sample_box(self) -> List[Tuple[float, float]]:
        """
        (low, high) sampling range per evaluation argument for self checks.

        Defaults to the interior [0.1, 0.9] of a unit box (and of L when the
        kind has a length parameter).
        """
        scale = float(self.store.get("L")) if "L" in self.store else 1.0
        box = [(0.1 * scale, 0.9 * scale)] * self.dimension
        if not self.steady:
            box.append((0.1, 0.9))
        return box
