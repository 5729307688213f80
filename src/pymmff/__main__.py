"""Command line entry point: ``python -m pymmff``."""
import argparse
import logging
import sys
from typing import List, Optional

import pymmff
from pymmff.config import load_config
from pymmff.core import ConfigurationError, atom_types
from pymmff.parameters import MmffParameters, ParametersCache


def _summary(args: argparse.Namespace) -> int:
    if args.config:
        try:
            config = load_config(args.config)
            if args.log_level is None:
                logging.getLogger().setLevel(config.level)
            parameters = config.create_parameters()
        except ConfigurationError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    else:
        if not args.params:
            print("error: a parameter file or --config is required", file=sys.stderr)
            return 2
        parameters = MmffParameters(ParametersCache())
        if not parameters.read(args.params):
            print(f"error: {parameters.error_string}", file=sys.stderr)
            return 1

    table = parameters.table
    print(f"Parameters: {parameters.file_name}")
    for kind, count in table.counts().items():
        print(f"  {kind.value:<22s} {count:6d}")
    print(f"  {'total':<22s} {len(table):6d}")
    return 0


def _atom(args: argparse.Namespace) -> int:
    record = atom_types.get(args.type)
    if record is None:
        print(f"error: no atom type {args.type}", file=sys.stderr)
        return 1
    for name, value in vars(record).items():
        print(f"{name:<14s} {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pymmff",
        description=f"pymmff {pymmff.__version__} - MMFF94 parameter resolution",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    summary = sub.add_parser("summary", help="Print row counts of a parameter file")
    summary.add_argument("params", nargs="?", help="MMFF parameter file")
    summary.add_argument("--config", help="YAML configuration file")
    summary.set_defaults(func=_summary)

    atom = sub.add_parser("atom", help="Print the static properties of an atom type")
    atom.add_argument("type", type=int, help="MMFF atom type (1-99)")
    atom.set_defaults(func=_atom)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
