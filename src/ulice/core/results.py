"""
Result tables.

This module builds Polars DataFrames for showing one quantity in every unit
of its metric and for listing the unit registry, and renders them as text
for the command line.
"""

from typing import List

import polars as pl

from ulice.core.conversion import candidate_units
from ulice.core.formatting import DEFAULT_PRECISION, format_amount
from ulice.core.logging import get_logger
from ulice.core.units import BaseUnit, Unit

log = get_logger(__name__)


def conversion_table(amount: float, unit: Unit) -> pl.DataFrame:
    """
    Express a quantity in every unit of its metric.

    Args:
        amount: The amount in `unit`
        unit: The unit the amount is given in

    Returns:
        A DataFrame with columns ``unit`` and ``amount``, smallest unit first
    """
    si_amount = unit.to_si(amount)
    candidates = candidate_units(unit)
    df = pl.DataFrame(
        {
            "unit": [str(candidate) for candidate in candidates],
            "amount": [candidate.from_si(si_amount) for candidate in candidates],
        },
        schema={"unit": pl.Utf8, "amount": pl.Float64},
    )
    log.debug(f"Conversion table for {amount} {unit} has {len(df)} rows")
    return df


def units_table() -> pl.DataFrame:
    """
    List the known base units.

    Returns:
        A DataFrame with columns ``unit``, ``metric``, ``multiplier`` and
        ``synonyms``
    """
    rows = [
        {
            "unit": str(base),
            "metric": str(base.metric),
            "multiplier": base.multiplier,
            "synonyms": ", ".join(base.synonyms[1:]),
        }
        for base in BaseUnit
        if base is not BaseUnit.AUTO
    ]
    return pl.DataFrame(rows)


def render_conversion_table(
    df: pl.DataFrame, precision: int = DEFAULT_PRECISION
) -> str:
    """Render a conversion table as right-aligned ``<amount> <unit>`` lines."""
    df = df.with_columns(
        pl.col("amount")
        .map_elements(lambda value: format_amount(value, precision), return_dtype=pl.Utf8)
        .alias("display")
    )
    width = max((len(display) for display in df["display"]), default=0)
    lines: List[str] = [
        f"{row['display']:>{width}} {row['unit']}" for row in df.iter_rows(named=True)
    ]
    return "\n".join(lines)


def render_units_table(df: pl.DataFrame) -> str:
    """Render the unit registry listing, grouped by metric."""
    lines: List[str] = []
    for metric in df["metric"].unique(maintain_order=True):
        lines.append(f"{metric}:")
        for row in df.filter(pl.col("metric") == metric).iter_rows(named=True):
            lines.append(f"  {row['unit']:<5} {row['synonyms']}")
    return "\n".join(lines)
