"""
Tests for the units module.

This module tests the base unit registry and the basic and composite unit
model built on top of it.
"""

import itertools

import pytest

from ulice.core.errors import UnitNotFoundError, UnknownMetricError
from ulice.core.types import Metric
from ulice.core.units import (
    AmountAndUnit,
    BaseUnit,
    BasicUnit,
    CompositeUnit,
    si_unit,
)

MEASURABLE = [unit for unit in BaseUnit if unit is not BaseUnit.AUTO]


class TestRegistry:
    """Test the base unit registry."""

    def test_synonyms_are_disjoint(self):
        """No synonym may resolve to two different units."""
        seen = {}
        for unit in BaseUnit:
            for synonym in unit.synonyms:
                assert synonym not in seen, f"{synonym} used by {seen.get(synonym)}"
                seen[synonym] = unit

    def test_synonyms_avoid_composite_separators(self):
        """Base unit names never contain 'p' or '/'."""
        for unit in BaseUnit:
            for synonym in unit.synonyms:
                assert "p" not in synonym
                assert "/" not in synonym

    def test_every_unit_has_metric_and_multiplier(self):
        for unit in MEASURABLE:
            assert unit.metric in (Metric.DATA_SIZE, Metric.TIME)
            assert unit.multiplier > 0

    def test_multipliers_ascend_within_metric(self):
        """Declaration order within a metric is ascending multiplier order."""
        for metric in (Metric.DATA_SIZE, Metric.TIME):
            declared = [unit for unit in BaseUnit if unit.metric is metric]
            assert BaseUnit.of_metric(metric) == declared
            multipliers = [unit.multiplier for unit in declared]
            assert all(a < b for a, b in zip(multipliers, multipliers[1:]))

    def test_no_base_unit_measures_bandwidth(self):
        assert BaseUnit.of_metric(Metric.BANDWIDTH) == []

    def test_canonical_names(self):
        assert str(BaseUnit.BITS) == "bits"
        assert str(BaseUnit.BYTES) == "bytes"
        assert str(BaseUnit.MEBIBYTES) == "MiB"
        assert str(BaseUnit.MINUTES) == "min"
        assert str(BaseUnit.AUTO) == "auto"

    def test_from_string(self):
        assert BaseUnit.from_string("B") is BaseUnit.BYTES
        assert BaseUnit.from_string("kb") is BaseUnit.KILOBYTES
        assert BaseUnit.from_string("KiB") is BaseUnit.KIBIBYTES
        assert BaseUnit.from_string("secs") is BaseUnit.SECONDS
        assert BaseUnit.from_string("?") is BaseUnit.AUTO

    def test_from_string_is_case_sensitive(self):
        with pytest.raises(UnitNotFoundError):
            BaseUnit.from_string("Kb")

    def test_from_string_unknown(self):
        with pytest.raises(UnitNotFoundError) as excinfo:
            BaseUnit.from_string("furlongs")
        assert excinfo.value.text == "furlongs"

    def test_si_multipliers(self):
        assert BaseUnit.BITS.to_si(8) == 1.0
        assert BaseUnit.KIBIBYTES.to_si(2) == 2048.0
        assert BaseUnit.DAYS.to_si(1) == 86400.0
        assert BaseUnit.YEARS.to_si(1) == 365 * 24 * 3600
        assert BaseUnit.MILLISECONDS.from_si(1) == pytest.approx(1000)

    def test_auto_has_no_si_conversion(self):
        with pytest.raises(UnknownMetricError):
            BaseUnit.AUTO.to_si(1)
        with pytest.raises(UnknownMetricError):
            BaseUnit.AUTO.from_si(1)


class TestUnitModel:
    """Test basic and composite units."""

    def test_basic_metric(self):
        assert BasicUnit(BaseUnit.GIGABYTES).metric is Metric.DATA_SIZE
        assert BasicUnit(BaseUnit.WEEKS).metric is Metric.TIME

    def test_auto_metric_is_unknown(self):
        unit = BasicUnit(BaseUnit.AUTO)
        assert unit.is_auto
        with pytest.raises(UnknownMetricError):
            unit.metric

    def test_composite_metric(self):
        assert CompositeUnit(BaseUnit.BYTES, BaseUnit.SECONDS).metric is Metric.BANDWIDTH
        assert not CompositeUnit(BaseUnit.BYTES, BaseUnit.SECONDS).is_auto

    @pytest.mark.parametrize(
        "numerator, denominator",
        [
            (BaseUnit.SECONDS, BaseUnit.SECONDS),
            (BaseUnit.BYTES, BaseUnit.BYTES),
            (BaseUnit.SECONDS, BaseUnit.BYTES),
            (BaseUnit.AUTO, BaseUnit.SECONDS),
        ],
    )
    def test_composite_metric_unknown(self, numerator, denominator):
        with pytest.raises(UnknownMetricError):
            CompositeUnit(numerator, denominator).metric

    def test_composite_si_formulas(self):
        """to_si divides by one denominator unit in seconds, from_si multiplies."""
        unit = CompositeUnit(BaseUnit.KIBIBYTES, BaseUnit.MINUTES)
        assert unit.to_si(147) == pytest.approx(147 * 1024 / 60)
        assert unit.from_si(147 * 1024 / 60) == pytest.approx(147)

    def test_bits_per_second(self):
        unit = CompositeUnit(BaseUnit.BITS, BaseUnit.SECONDS)
        assert unit.to_si(8) == pytest.approx(1)

    def test_string_representation(self):
        assert str(BasicUnit(BaseUnit.MEBIBYTES)) == "MiB"
        assert str(CompositeUnit(BaseUnit.BYTES, BaseUnit.SECONDS)) == "bytes/s"
        assert str(CompositeUnit(BaseUnit.GIBIBYTES, BaseUnit.HOURS)) == "GiB/hr"

    def test_value_semantics(self):
        """Units compare and hash by value."""
        assert BasicUnit(BaseUnit.BYTES) == BasicUnit(BaseUnit.BYTES)
        assert BasicUnit(BaseUnit.BYTES) != BasicUnit(BaseUnit.BITS)
        assert CompositeUnit(BaseUnit.BYTES, BaseUnit.SECONDS) == CompositeUnit(
            BaseUnit.BYTES, BaseUnit.SECONDS
        )
        assert len({BasicUnit(BaseUnit.BYTES), BasicUnit(BaseUnit.BYTES)}) == 1

    def test_units_are_immutable(self):
        unit = BasicUnit(BaseUnit.BYTES)
        with pytest.raises(AttributeError):
            unit.base = BaseUnit.BITS

    @pytest.mark.parametrize("metric", [Metric.DATA_SIZE, Metric.TIME])
    def test_round_trip(self, metric):
        """Converting to another unit of the same metric and back is lossless."""
        amount = 147.25
        for first, second in itertools.permutations(BaseUnit.of_metric(metric), 2):
            converted = second.from_si(first.to_si(amount))
            back = first.from_si(second.to_si(converted))
            assert back == pytest.approx(amount, rel=1e-9)

    def test_amount_and_unit(self):
        quantity = AmountAndUnit(2.0, BasicUnit(BaseUnit.KILOBYTES))
        assert quantity.si_amount == 2000.0

    def test_si_unit(self):
        assert si_unit(Metric.DATA_SIZE) == BasicUnit(BaseUnit.BYTES)
        assert si_unit(Metric.TIME) == BasicUnit(BaseUnit.SECONDS)
        assert si_unit(Metric.BANDWIDTH) == CompositeUnit(
            BaseUnit.BYTES, BaseUnit.SECONDS
        )
