"""
Core data types for unit conversion.

This module defines the metric classification shared by the unit registry,
the parser and the conversion engine.
"""

from enum import Enum, auto

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NEVER IMPORT ANYTHING FROM THE ULICE LIBRARY              #
#                                                                                 #
###################################################################################


class Metric(Enum):
    """Represents the dimension a unit measures."""

    DATA_SIZE = auto()  # SI base: bytes
    TIME = auto()  # SI base: seconds
    BANDWIDTH = auto()  # data size over time, only from composite units

    def __str__(self) -> str:
        return self.name.lower()
