"""
Tests for the configuration dataclass and its builder.
"""

import pytest

from ulice.core.config import ConfigBuilder, UliceConfig
from ulice.core.errors import InvalidPrecisionError


class TestUliceConfig:
    """Test configuration defaults and construction."""

    def test_defaults(self):
        config = UliceConfig.create_default()
        assert config.precision == 2
        assert not config.time_mode
        assert not config.table
        assert not config.list_units
        assert config.log_level == "warning"

    def test_from_dict(self):
        config = UliceConfig.from_dict({"precision": 5, "time_mode": True})
        assert config.precision == 5
        assert config.time_mode

    def test_from_dict_ignores_unknown_keys(self):
        config = UliceConfig.from_dict({"colour": "blue", "build": True})
        assert config == UliceConfig()

    def test_from_dict_validates(self):
        with pytest.raises(InvalidPrecisionError):
            UliceConfig.from_dict({"precision": 99})


class TestConfigBuilder:
    """Test the fluent builder."""

    def test_chain(self):
        config = (
            ConfigBuilder()
            .precision(0)
            .table(True)
            .log_level("debug")
            .build()
        )
        assert config.precision == 0
        assert config.table
        assert config.log_level == "debug"

    @pytest.mark.parametrize("precision", [-1, 16])
    def test_precision_out_of_range(self, precision):
        with pytest.raises(InvalidPrecisionError):
            ConfigBuilder().precision(precision)

    def test_precision_bounds(self):
        assert ConfigBuilder().precision(15).build().precision == 15
