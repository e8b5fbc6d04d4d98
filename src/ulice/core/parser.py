"""
Parsing of command line quantities and unit names.

A quantity is written as ``<amount><unit>`` with no space, e.g. ``147MiB``
or ``1.5GB/s``. Composite units join two base units with ``/`` or ``p``,
so ``Bps`` and ``B/s`` are the same unit.
"""

import string
from typing import Optional, Tuple

from ulice.core.errors import (
    AmountAndUnitRequiredError,
    CouldNotParseAmountError,
    NotCompositeError,
)
from ulice.core.logging import get_logger
from ulice.core.units import AmountAndUnit, BaseUnit, BasicUnit, CompositeUnit, Unit

log = get_logger(__name__)

COMPOSITE_SEPARATORS = frozenset("p/")


def split_amount_and_unit(token: str) -> Tuple[str, str]:
    """
    Split a token into its amount and unit text.

    The amount is the leading run of ASCII digits, optionally containing a
    single decimal point after the first digit. The unit is everything after.

    Args:
        token: A raw command line token such as ``147bytes``

    Returns:
        A tuple of (amount text, unit text)

    Raises:
        AmountAndUnitRequiredError: If the token is too short, does not start
            with a digit or has no unit part
    """
    if len(token) <= 1:
        raise AmountAndUnitRequiredError(token)

    seen_point = False
    for i, char in enumerate(token):
        if char in string.digits:
            continue
        if char == "." and i > 0 and not seen_point:
            seen_point = True
            continue
        if i == 0:
            break
        return token[:i], token[i:]

    raise AmountAndUnitRequiredError(token)


def parse_amount(amount_str: str) -> float:
    """Parse the amount part of a quantity as a float."""
    try:
        return float(amount_str)
    except ValueError:
        raise CouldNotParseAmountError(amount_str)


def parse_base_unit(unit_str: str) -> BaseUnit:
    """Resolve unit text to a base unit via the registry's synonyms."""
    return BaseUnit.from_string(unit_str)


def _find_composite_separator(unit_str: str) -> Optional[int]:
    """Index of the first separator that is not the final character."""
    if len(unit_str) <= 1:
        return None
    for i, char in enumerate(unit_str[:-1]):
        if char in COMPOSITE_SEPARATORS:
            return i
    return None


def split_composite(unit_str: str) -> Tuple[str, str]:
    """
    Split composite unit text around its separator.

    Raises:
        NotCompositeError: If there is no separator before the final character
    """
    index = _find_composite_separator(unit_str)
    if index is None:
        raise NotCompositeError(unit_str)
    return unit_str[:index], unit_str[index + 1 :]


def parse_unit(unit_str: str) -> Unit:
    """
    Resolve unit text to a basic or composite unit.

    Text with a separator before its final character is parsed as a
    composite, anything else as a single base unit. ``auto`` and ``?``
    resolve to the automatic placeholder.
    """
    if _find_composite_separator(unit_str) is None:
        unit = BasicUnit(parse_base_unit(unit_str))
    else:
        numerator, denominator = split_composite(unit_str)
        unit = CompositeUnit(parse_base_unit(numerator), parse_base_unit(denominator))

    log.debug(f"Parsed unit '{unit_str}' as {unit!r}")
    return unit


def parse_amount_and_unit(amount_str: str, unit_str: str) -> AmountAndUnit:
    """Parse already split amount and unit text."""
    return AmountAndUnit(parse_amount(amount_str), parse_unit(unit_str))


def parse_quantity(token: str) -> AmountAndUnit:
    """Parse a ``<amount><unit>`` token, e.g. ``147MiB``."""
    amount_str, unit_str = split_amount_and_unit(token)
    return parse_amount_and_unit(amount_str, unit_str)
