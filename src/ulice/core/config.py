import logging
from dataclasses import dataclass
from typing import Any, Dict

from ulice.core.errors import InvalidPrecisionError
from ulice.core.formatting import DEFAULT_PRECISION, MAX_PRECISION

log = logging.getLogger(__name__)


@dataclass
class UliceConfig:
    """
    Configuration for a single ulice invocation.

    Attributes:
        precision: Decimal places for non-integral results (0 to MAX_PRECISION)
        time_mode: Solve for the missing one of data size, time and bandwidth
        table: Show the quantity in every unit of its metric
        list_units: List the known units instead of converting
        log_level: Logging level ('debug', 'info', 'warning', 'error')
    """

    precision: int = DEFAULT_PRECISION
    time_mode: bool = False
    table: bool = False
    list_units: bool = False
    log_level: str = "warning"

    @classmethod
    def create_default(cls) -> "UliceConfig":
        """Create a configuration with default values."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "UliceConfig":
        """
        Create a configuration from a dictionary.

        Keys that are not configuration fields are ignored.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            A new UliceConfig instance
        """
        builder = ConfigBuilder()
        for key, value in config_dict.items():
            if not hasattr(builder._config, key):
                log.debug(f"Ignoring unknown config key: {key}")
                continue
            getattr(builder, key)(value)

        return builder.build()


class ConfigBuilder:
    """
    Builder pattern implementation for creating UliceConfig objects.

    This class provides a fluent interface for constructing UliceConfig
    objects with a chain of method calls.
    """

    def __init__(self):
        """Initialize a new ConfigBuilder with default values."""
        self._config = UliceConfig.create_default()

    def precision(self, places: int) -> "ConfigBuilder":
        """Set the number of decimal places."""
        if not 0 <= places <= MAX_PRECISION:
            raise InvalidPrecisionError(places, MAX_PRECISION)
        self._config.precision = places
        return self

    def time_mode(self, enabled: bool) -> "ConfigBuilder":
        """Set whether to solve for a missing quantity."""
        self._config.time_mode = enabled
        return self

    def table(self, enabled: bool) -> "ConfigBuilder":
        """Set whether to show a full conversion table."""
        self._config.table = enabled
        return self

    def list_units(self, enabled: bool) -> "ConfigBuilder":
        """Set whether to list the known units."""
        self._config.list_units = enabled
        return self

    def log_level(self, level: str) -> "ConfigBuilder":
        """Set the logging level."""
        self._config.log_level = level
        return self

    def build(self) -> UliceConfig:
        """Build and return a UliceConfig object."""
        return self._config
