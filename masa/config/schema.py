"""
Configuration schema for the manufactured solution registry.

Dataclass-based configuration that can be loaded from YAML or constructed programmatically.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List


@dataclass
class LoggingConfig:
    """Console logging configuration."""

    level: str = "INFO"        # DEBUG, INFO, WARNING, ERROR
    show_time: bool = True     # Prefix records with a timestamp


@dataclass
class ErrorConfig:
    """Fatal error policy."""

    # "raise": raise the MasaError (default, embedding friendly)
    # "exit":  log and terminate the process with the error code
    mode: str = "raise"


@dataclass
class VerificationConfig:
    """Autodiff self-check settings used by poly_test()."""

    n_points: int = 4          # Random sample points per kind
    rtol: float = 1e-9         # Tolerance on |a - b| / max(1, |b|)
    seed: int = 0              # Sampling seed


@dataclass
class SolutionSpec:
    """One solution to initialize when the session is built."""

    name: str = "solution"     # User name of the instance
    kind: str = "masa_test_function"  # Kind name (aliases allowed)
    precision: str = "double"  # "double" or "long_double"
    init_defaults: bool = True # Load documented defaults before params
    params: Dict[str, float] = field(default_factory=dict)


@dataclass
class MasaConfig:
    """Complete session configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    errors: ErrorConfig = field(default_factory=ErrorConfig)
    verification: VerificationConfig = field(default_factory=VerificationConfig)

    # Extra kind aliases: {alias: canonical kind name}
    aliases: Dict[str, str] = field(default_factory=dict)

    solutions: List[SolutionSpec] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to nested dictionary."""
        return asdict(self)


# Preset verification settings
def quick_preset() -> VerificationConfig:
    """Few points, loose tolerance; for smoke tests."""
    return VerificationConfig(n_points=2, rtol=1e-8)


def standard_preset() -> VerificationConfig:
    """Default verification."""
    return VerificationConfig()


def strict_preset() -> VerificationConfig:
    """Many points, tight tolerance."""
    return VerificationConfig(n_points=16, rtol=1e-11)
