"""
YAML configuration loader with validation.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Union
from dataclasses import fields, is_dataclass

from ..precision import Precision
from ..utils.errors import ErrorMode
from .schema import (
    MasaConfig, LoggingConfig, ErrorConfig, VerificationConfig, SolutionSpec,
    quick_preset, standard_preset, strict_preset,
)


def _merge_dict(base: dict, override: dict) -> dict:
    """Recursively merge override into base dict."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def _coerce_type(value, field_type):
    """Coerce value to the expected field type."""
    # Handle string representations of numbers (e.g., "1e-9")
    if field_type == float and isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    if field_type == int and isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return value
    if field_type == bool and isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return value


def _dict_to_dataclass(cls, data: dict):
    """Convert a nested dictionary to a dataclass instance."""
    if not is_dataclass(cls):
        return data

    field_types = {f.name: f.type for f in fields(cls)}
    kwargs = {}

    for key, value in data.items():
        if key not in field_types:
            continue  # Skip unknown fields

        field_type = field_types[key]

        # Handle nested dataclasses
        if is_dataclass(field_type) and isinstance(value, dict):
            kwargs[key] = _dict_to_dataclass(field_type, value)
        else:
            # Coerce types for primitive values
            kwargs[key] = _coerce_type(value, field_type)

    return cls(**kwargs)


def _solution_spec(data: Dict[str, Any]) -> SolutionSpec:
    spec = _dict_to_dataclass(SolutionSpec, data)
    # Validate precision spelling early; keep the canonical value
    spec.precision = Precision.parse(spec.precision).value
    spec.params = {str(k): _coerce_type(v, float) for k, v in (spec.params or {}).items()}
    return spec


def load_yaml(path: Union[str, Path]) -> MasaConfig:
    """
    Load session configuration from a YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        MasaConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    return from_dict(data)


def from_dict(data: Dict[str, Any]) -> MasaConfig:
    """
    Create MasaConfig from a dictionary.

    Handles nested structures and applies defaults for missing values.

    Raises:
        ValueError: On an unknown precision or error mode
    """
    data = dict(data)

    # Check for verification preset
    preset = data.pop('preset', None)
    if preset:
        verification_preset = {
            'quick': quick_preset(),
            'standard': standard_preset(),
            'strict': strict_preset(),
        }.get(preset)
        if verification_preset:
            # Merge preset with any explicit verification overrides
            preset_dict = {f.name: getattr(verification_preset, f.name)
                           for f in fields(VerificationConfig)}
            data['verification'] = _merge_dict(preset_dict, data.get('verification') or {})

    config_dict = {}

    if 'logging' in data:
        config_dict['logging'] = _dict_to_dataclass(LoggingConfig, data['logging'])

    if 'errors' in data:
        errors = _dict_to_dataclass(ErrorConfig, data['errors'])
        errors.mode = ErrorMode.parse(errors.mode).value
        config_dict['errors'] = errors

    if 'verification' in data:
        config_dict['verification'] = _dict_to_dataclass(VerificationConfig, data['verification'])

    if data.get('aliases'):
        config_dict['aliases'] = {str(k): str(v) for k, v in data['aliases'].items()}

    if data.get('solutions'):
        config_dict['solutions'] = [_solution_spec(s) for s in data['solutions']]

    return MasaConfig(**config_dict)


def apply_cli_overrides(config: MasaConfig, args) -> MasaConfig:
    """
    Apply command-line argument overrides to a configuration.

    Only overrides values that were explicitly set (not default).

    Args:
        config: Base configuration
        args: argparse.Namespace with CLI arguments

    Returns:
        Updated MasaConfig
    """
    config_dict = config.to_dict()

    # Map CLI args to config paths
    cli_mapping = {
        'log_level': ('logging', 'level'),
        'error_mode': ('errors', 'mode'),
        'n_points': ('verification', 'n_points'),
        'rtol': ('verification', 'rtol'),
        'seed': ('verification', 'seed'),
    }

    for cli_name, config_path in cli_mapping.items():
        if hasattr(args, cli_name):
            value = getattr(args, cli_name)
            if value is not None:
                target = config_dict
                for key in config_path[:-1]:
                    target = target[key]
                target[config_path[-1]] = value

    # A kind given on the command line adds one solution
    if getattr(args, 'kind', None):
        config_dict['solutions'].append({
            'name': getattr(args, 'name', None) or args.kind,
            'kind': args.kind,
            'precision': getattr(args, 'precision', None) or 'double',
            'init_defaults': True,
            'params': dict(getattr(args, 'param', None) or {}),
        })

    return from_dict(config_dict)


def save_yaml(config: MasaConfig, path: Union[str, Path]) -> None:
    """Save configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
