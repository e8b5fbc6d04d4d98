"""Exceptions for parsing and conversion errors.

Every exception carries its user-facing message, so the command line only
has to print ``str(error)`` and exit with status 1.
"""

from ulice.core.types import Metric

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD  ONLY EVER IMPORT from `core.types`                       #
#                                                                                 #
###################################################################################


class UliceError(Exception):
    """Base exception for unit parsing and conversion errors."""

    pass


class NotEnoughArgsError(UliceError):
    """Raised when a mode receives the wrong number of arguments."""

    def __init__(self, usage: str):
        super().__init__(f"Wrong number of arguments. Usage: {usage}")


class AmountAndUnitRequiredError(UliceError):
    """Raised when a token cannot be split into an amount and a unit."""

    def __init__(self, token: str):
        super().__init__(
            f"An amount and a unit - with no space - are required, e.g. 7bits (got '{token}')"
        )


class CouldNotParseAmountError(UliceError):
    """Raised when the amount part of a token is not a valid float."""

    def __init__(self, text: str):
        super().__init__(f"Amount must be a valid float: '{text}'")


class UnitNotFoundError(UliceError):
    """Raised when unit text matches no known unit."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unrecognised unit: '{text}'")


class NotCompositeError(UliceError):
    """Raised when unit text has no usable composite separator."""

    def __init__(self, text: str):
        super().__init__(f"Not a composite unit: '{text}'")


class MismatchedMetricsError(UliceError):
    """Raised when source and target units measure different things."""

    def __init__(self, source: Metric, target: Metric):
        self.source = source
        self.target = target
        super().__init__(f"Cannot convert {source} to {target}")


class UnknownMetricError(UliceError):
    """Raised when a unit does not measure data size, time or bandwidth."""

    def __init__(self, unit: str):
        super().__init__(f"Unit '{unit}' does not measure data size, time or bandwidth")


class WrongUnitsError(UliceError):
    """Raised when a solve does not get one unit of each metric."""

    def __init__(self, message: str):
        super().__init__(
            f"Need one data size, one time and one bandwidth unit: {message}"
        )


class ZeroQuantityError(UliceError):
    """Raised when a solve would divide by a zero quantity."""

    def __init__(self, metric: Metric):
        super().__init__(f"Cannot solve with a zero {metric}")


class InvalidPrecisionError(UliceError):
    """Raised when the requested decimal precision is out of range."""

    def __init__(self, precision: int, maximum: int):
        super().__init__(f"Precision must be between 0 and {maximum}, got {precision}")
