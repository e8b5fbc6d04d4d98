#!/usr/bin/env python3
"""
Example demonstrating the ulice conversion library.

This example parses quantities, converts them between units, lets ulice
pick readable units and estimates how long a transfer takes.
"""

import sys
from pathlib import Path

# Add the src directory to sys.path to import ulice
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.append(str(src_path))

from ulice.core.conversion import convert, convert_auto, solve
from ulice.core.logging import get_logger, update_log_level
from ulice.core.parser import parse_quantity, parse_unit
from ulice.core.results import conversion_table, render_conversion_table

update_log_level("info")
log = get_logger(__name__)


def main():
    """Walk through the main conversion features."""
    log.info("ulice Conversion Example")
    log.info("========================\n")

    # 1. Plain conversion
    log.info("1. Converting between units")
    log.info("---------------------------")
    image = parse_quantity("4.7GB")
    result = convert(image.amount, image.unit, parse_unit("GiB"))
    log.info(f"A {image.amount} {image.unit} DVD holds {result.format()}\n")

    # 2. Automatic units
    log.info("2. Picking a readable unit")
    log.info("--------------------------")
    for token in ["150528B", "86400s", "3000000us", "147456Bps"]:
        quantity = parse_quantity(token)
        log.info(f"{token:>12} -> {convert_auto(quantity.amount, quantity.unit).format()}")
    log.info("")

    # 3. Transfer time
    log.info("3. How long does a backup take?")
    log.info("-------------------------------")
    backup = parse_quantity("500GiB")
    link = parse_quantity("100MiB/s")
    duration = solve(backup, link, parse_unit("auto"))
    log.info(f"{backup.amount} {backup.unit} over {link.amount} {link.unit}: {duration.format()}\n")

    # 4. Full table
    log.info("4. One quantity in every unit")
    log.info("-----------------------------")
    df = conversion_table(backup.amount, backup.unit)
    for line in render_conversion_table(df, precision=3).splitlines():
        log.info(line)


if __name__ == "__main__":
    main()
