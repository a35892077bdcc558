"""
Physics building blocks for the manufactured solutions.

- fields: separable sinusoidal exact fields
- spalart_allmaras: SA closure functions (numpy or jax namespace)
- jax_config: 64-bit JAX setup for autodiff verification (imported lazily)
"""

from .fields import AxisTerm, SinusoidField, sinusoid_field

__all__ = ['AxisTerm', 'SinusoidField', 'sinusoid_field']
