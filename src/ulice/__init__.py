"""
ulice: unit conversion for data sizes, durations and bandwidths.

A small command line tool and library that converts ``<amount><unit>``
quantities, picks readable units automatically and solves for the missing
one of data size, time and bandwidth.
"""

# Import core logging first to configure it before anything else
from ulice.core.logging import configure_logging, get_logger

from ulice.core import types, units
from ulice.core.conversion import Conversion, convert, convert_auto, solve
from ulice.core.errors import UliceError
from ulice.core.parser import parse_quantity, parse_unit
from ulice.core.types import Metric
from ulice.core.units import BaseUnit, BasicUnit, CompositeUnit, Unit

__all__ = [
    # Core modules
    "types",
    "units",
    # Model
    "Metric",
    "BaseUnit",
    "Unit",
    "BasicUnit",
    "CompositeUnit",
    # Operations
    "parse_quantity",
    "parse_unit",
    "convert",
    "convert_auto",
    "solve",
    "Conversion",
    "UliceError",
]

# Configure logging once at import time
configure_logging()
log = get_logger(__name__)
