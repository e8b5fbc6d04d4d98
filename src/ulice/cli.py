#!/usr/bin/env python3
"""
Command line interface for ulice.

Usage:
    ulice 1024MiB GiB
    ulice 86400s auto
    ulice --time 10GiB 100MiB/s min
    ulice --table 1.5GB
    ulice --list-units
"""

import argparse
import sys
from typing import List, Optional

from ulice.core.config import ConfigBuilder, UliceConfig
from ulice.core.conversion import convert, solve
from ulice.core.errors import NotEnoughArgsError, UliceError
from ulice.core.formatting import DEFAULT_PRECISION
from ulice.core.logging import get_logger, update_log_level
from ulice.core.parser import parse_quantity, parse_unit
from ulice.core.results import (
    conversion_table,
    render_conversion_table,
    render_units_table,
    units_table,
)

log = get_logger(__name__)

CONVERT_USAGE = "ulice <number><source unit> <target unit>, e.g. ulice 1024MiB GiB"
TIME_USAGE = (
    "ulice --time <number><unit> <number><unit> <target unit>, "
    "e.g. ulice --time 10GiB 100MiB/s min"
)
TABLE_USAGE = "ulice --table <number><unit>, e.g. ulice --table 1.5GB"

EPILOG = """\
units:
  data size  bits, B, KB, KiB, MB, MiB, GB, GiB, TB, TiB
  time       ns, us, ms, s, min, hr, days, wk, yr
  bandwidth  <data size>/<time> or <data size>p<time>, e.g. MiB/s, MBps
  auto, ?    pick the largest unit that keeps the amount at least 1

examples:
  ulice 1024MiB GiB
  ulice 147456B auto
  ulice --time 10GiB 100MiB/s min
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ulice",
        description="Convert between units of data size, time and bandwidth.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "quantities",
        nargs="*",
        metavar="QUANTITY",
        help="<number><unit> quantities followed by the target unit",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--time",
        "-t",
        action="store_true",
        help="Solve for the missing one of data size, time and bandwidth",
    )
    group.add_argument(
        "--table",
        action="store_true",
        help="Show the quantity in every unit of its metric",
    )
    group.add_argument(
        "--list-units",
        action="store_true",
        help="List all known units and their synonyms",
    )

    parser.add_argument(
        "--precision",
        "-p",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"Decimal places for non-integral results (default: {DEFAULT_PRECISION})",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level (default: warning)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> UliceConfig:
    """Build the configuration from parsed command line arguments."""
    return (
        ConfigBuilder()
        .precision(args.precision)
        .time_mode(args.time)
        .table(args.table)
        .list_units(args.list_units)
        .log_level(args.log_level)
        .build()
    )


def _require(quantities: List[str], count: int, usage: str):
    if len(quantities) != count:
        raise NotEnoughArgsError(usage)


def run(config: UliceConfig, quantities: List[str]) -> str:
    """
    Run one ulice command.

    Args:
        config: The configuration selecting the mode and precision
        quantities: The positional command line arguments

    Returns:
        The text to print on success

    Raises:
        UliceError: If the arguments cannot be parsed or converted
    """
    if config.list_units:
        _require(quantities, 0, "ulice --list-units")
        return render_units_table(units_table())

    if config.table:
        _require(quantities, 1, TABLE_USAGE)
        quantity = parse_quantity(quantities[0])
        df = conversion_table(quantity.amount, quantity.unit)
        return render_conversion_table(df, config.precision)

    if config.time_mode:
        _require(quantities, 3, TIME_USAGE)
        first = parse_quantity(quantities[0])
        second = parse_quantity(quantities[1])
        result = solve(first, second, parse_unit(quantities[2]))
        return result.format(config.precision)

    _require(quantities, 2, CONVERT_USAGE)
    source = parse_quantity(quantities[0])
    result = convert(source.amount, source.unit, parse_unit(quantities[1]))
    return result.format(config.precision)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the command and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        update_log_level(config.log_level)
        log.debug(f"Running with {config}")
        output = run(config, args.quantities)
    except UliceError as e:
        log.debug(f"Command failed: {e!r}")
        print(e, file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
