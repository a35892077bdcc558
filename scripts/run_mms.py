#!/usr/bin/env python3
"""
Manufactured Solution Self-Check Script.

Initializes one or more manufactured solutions (from a YAML file and/or
the command line), loads their default parameters and runs the autodiff
consistency check on each of them.

Features:
    - YAML session configuration (config/example.yaml)
    - Parameter overrides: --param u_0=2.5 --param L=3
    - Double and long double precision domains
    - Optional point evaluation of source terms

Usage:
    python scripts/run_mms.py --kind euler_2d
    python scripts/run_mms.py --kind heateq_1d_unsteady_var --param k_1=0.1 --eval 0.3 0.2
    python scripts/run_mms.py config/example.yaml --preset strict
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from masa import Masa, MasaError
from masa.config import MasaConfig, load_yaml, apply_cli_overrides, from_dict
from masa.physics.jax_config import get_device_info
from masa.utils.errors import format_error_for_user
from masa.utils.logging import setup_logging


def parse_param(text: str):
    """Parse NAME=VALUE into (name, float)."""
    name, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {text!r}")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid value for {name}: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Initialize and self-check manufactured solutions")
    parser.add_argument("config", nargs="?", default=None, help="YAML session configuration")
    parser.add_argument("--kind", type=str, default=None, help="Solution kind (aliases allowed)")
    parser.add_argument("--name", type=str, default=None, help="User name of the instance")
    parser.add_argument("--precision", type=str, default=None, help="double or long_double")
    parser.add_argument("--param", type=parse_param, action="append", default=None,
                        help="Parameter override NAME=VALUE (repeatable)")
    parser.add_argument("--preset", choices=["quick", "standard", "strict"], default=None,
                        help="Verification preset")
    parser.add_argument("--n-points", type=int, default=None)
    parser.add_argument("--rtol", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--eval", type=float, nargs="+", default=None, metavar="ARG",
                        help="Evaluate every source term of the last solution at these arguments")
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--error-mode", choices=["raise", "exit"], default=None)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.config:
        config = load_yaml(args.config)
    else:
        config = MasaConfig()
    if args.preset:
        data = config.to_dict()
        data["preset"] = args.preset
        data.pop("verification", None)
        config = from_dict(data)
    config = apply_cli_overrides(config, args)
    setup_logging(config.logging.level, show_time=config.logging.show_time)

    if not config.solutions:
        logger.error("No solutions configured: pass --kind or a YAML file with 'solutions'")
        return 1

    try:
        session = Masa.from_config(config)
    except MasaError as exc:
        logger.error(format_error_for_user(exc))
        return exc.code

    logger.debug(get_device_info())
    verification = config.verification
    failures = 0
    for spec in config.solutions:
        dispatcher = session.domain(spec.precision)
        dispatcher.select(spec.name)
        dispatcher.print_list()
        passed = dispatcher.poly_test(verification.n_points, verification.rtol, verification.seed)
        status = "PASSED" if passed else "FAILED"
        logger.info(f"{spec.name} ({dispatcher.get_name()}, {spec.precision}): {status}")
        failures += 0 if passed else 1

    if args.eval:
        last = config.solutions[-1]
        dispatcher = session.domain(last.precision)
        dispatcher.select(last.name)
        solution = dispatcher.registry.active_instance()
        try:
            for var in solution.source_terms:
                value = dispatcher.eval_source(var, *args.eval)
                logger.info(f"  Q_{var}{tuple(args.eval)} = {value}")
        except MasaError as exc:
            logger.error(format_error_for_user(exc))
            return exc.code

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
