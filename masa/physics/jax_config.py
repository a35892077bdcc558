"""JAX configuration for autodiff verification: 64-bit precision and device info."""

import os

# Verification runs on small scalar graphs; keep JAX off the GPU unless asked
os.environ.setdefault("JAX_PLATFORMS", "cpu")

import jax
import jax.numpy as jnp

jax.config.update("jax_enable_x64", True)


def get_device_info() -> str:
    """Get available JAX devices as string."""
    devices = jax.devices()
    device_strs = [f"{d.platform}:{d.id}" for d in devices]
    return f"JAX devices: {device_strs}"


def x64_enabled() -> bool:
    """Check that 64-bit floats are active (required for the consistency checks)."""
    return jnp.zeros(()).dtype == jnp.float64


__all__ = ['jax', 'jnp', 'get_device_info', 'x64_enabled']
