"""
Core components for unit conversion.

This package contains the unit registry, the parser and the conversion
engine used by the ulice command line.
"""

from ulice.core import types, units
from ulice.core.conversion import Conversion, convert, convert_auto, solve
from ulice.core.errors import UliceError
from ulice.core.parser import parse_quantity, parse_unit
from ulice.core.types import Metric
from ulice.core.units import (
    AmountAndUnit,
    BaseUnit,
    BasicUnit,
    CompositeUnit,
    Unit,
)
