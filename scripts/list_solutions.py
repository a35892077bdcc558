#!/usr/bin/env python3
"""
List the available manufactured solution kinds.

Prints every kind in catalog order with its dimension, time dependence and
default parameters. With --aliases, also prints the alias table.

Usage:
    python scripts/list_solutions.py
    python scripts/list_solutions.py --params --kind euler_1d
    python scripts/list_solutions.py --aliases
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from masa.solutions import ALIAS_TABLE, ALIAS_TABLE_VERSION, KIND_TABLE, map_alias


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="List manufactured solution kinds")
    parser.add_argument("--kind", type=str, default=None, help="Only this kind (aliases allowed)")
    parser.add_argument("--params", action="store_true", help="Show default parameters")
    parser.add_argument("--aliases", action="store_true", help="Show the alias table")
    args = parser.parse_args(argv)

    wanted = map_alias(args.kind) if args.kind else None
    kinds = [k for k in KIND_TABLE if wanted is None or k.name == wanted]
    if not kinds:
        print(f"Unknown kind: {args.kind}")
        return 2

    print(f"{'kind':<32} {'dim':>3}  {'time':<8}  sources")
    print("-" * 70)
    for kind in kinds:
        time = "steady" if kind.steady else "unsteady"
        print(f"{kind.name:<32} {kind.dimension:>3}  {time:<8}  {', '.join(kind.source_terms)}")
        if args.params:
            for name in kind.parameters:
                default = kind.defaults.get(name)
                shown = "<no default>" if default is None else f"{default:g}"
                print(f"    {name:<12} = {shown}")

    if args.aliases:
        print(f"\nAlias table (version {ALIAS_TABLE_VERSION}):")
        for alias, target in sorted(ALIAS_TABLE.items()):
            print(f"  {alias:<28} -> {target}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
