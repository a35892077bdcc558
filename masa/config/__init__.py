"""
Configuration module for the manufactured solution registry.

Provides YAML-based configuration with dataclass schema.
"""

from .schema import (
    MasaConfig,
    LoggingConfig,
    ErrorConfig,
    VerificationConfig,
    SolutionSpec,
    quick_preset,
    standard_preset,
    strict_preset,
)

from .loader import (
    load_yaml,
    from_dict,
    apply_cli_overrides,
    save_yaml,
)

__all__ = [
    # Schema classes
    'MasaConfig',
    'LoggingConfig',
    'ErrorConfig',
    'VerificationConfig',
    'SolutionSpec',
    # Presets
    'quick_preset',
    'standard_preset',
    'strict_preset',
    # Loader functions
    'load_yaml',
    'from_dict',
    'apply_cli_overrides',
    'save_yaml',
]
