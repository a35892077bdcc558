"""
Validation tools for the manufactured solutions.

Contains the jax autodiff consistency check behind poly_test().
"""

from .autodiff import (
    VerificationReport,
    autodiff_gradients,
    autodiff_sources,
    sample_points,
    verify_solution,
)

__all__ = [
    'VerificationReport',
    'autodiff_gradients',
    'autodiff_sources',
    'sample_points',
    'verify_solution',
]
