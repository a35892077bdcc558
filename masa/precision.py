"""
Precision domains.

Each domain owns its own registry; no instance or name is shared between
domains. Formula bodies are evaluated in the domain's numpy scalar type.
"""

from enum import Enum
from typing import NewType

import numpy as np


# Names chosen by the caller for an instance vs. canonical catalog names
UserName = NewType("UserName", str)
KindName = NewType("KindName", str)


class Precision(Enum):
    """Numeric precision domains."""
    DOUBLE = "double"
    LONG_DOUBLE = "long_double"

    @property
    def dtype(self):
        """numpy scalar type for this domain."""
        return np.float64 if self is Precision.DOUBLE else np.longdouble

    @classmethod
    def parse(cls, value) -> "Precision":
        """
        Accept a Precision, its value, a common spelling or a numpy dtype.

        Raises
        ------
        ValueError
            If the value names no known precision.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DOUBLE
        if not isinstance(value, str):
            try:
                dtype = np.dtype(value)
            except TypeError:
                raise ValueError(f"Invalid precision: {value!r}")
            if dtype == np.float64:
                return cls.DOUBLE
            if dtype == np.longdouble:
                return cls.LONG_DOUBLE
            raise ValueError(f"Unsupported precision dtype: {dtype}")

        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        spellings = {
            "double": cls.DOUBLE,
            "float64": cls.DOUBLE,
            "f8": cls.DOUBLE,
            "long_double": cls.LONG_DOUBLE,
            "longdouble": cls.LONG_DOUBLE,
            "extended": cls.LONG_DOUBLE,
        }
        if key not in spellings:
            raise ValueError(f"Invalid precision: {value!r}. "
                             f"Use one of {sorted(spellings)}")
        return spellings[key]

    def cast(self, value):
        """Convert a scalar or array to this domain's scalar type."""
        if isinstance(value, np.ndarray):
            return value.astype(self.dtype)
        return self.dtype(value)
