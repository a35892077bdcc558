"""
Registry and dispatch layer.

This package provides:
    - Registry: user-named solution instances of one precision domain
    - Dispatcher: forwards calls to the active instance of a registry
    - Masa: one registry per precision, domain chosen per call
"""

from ..precision import KindName, Precision, UserName
from .registry import Registry
from .dispatch import Dispatcher
from .session import Masa

__all__ = [
    'KindName',
    'Precision',
    'UserName',
    'Registry',
    'Dispatcher',
    'Masa',
]
