#!/usr/bin/env python3
"""
Units module for data size, time and bandwidth conversion.

This module provides the registry of base units (bits through tebibytes,
nanoseconds through years) and the unit model built on top of it. Every
conversion pivots through the SI base of a metric: bytes for data size,
seconds for time and bytes per second for bandwidth.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ulice.core.errors import UnitNotFoundError, UnknownMetricError
from ulice.core.types import Metric

_YEAR_SECONDS = 365 * 24 * 3600


class BaseUnit(Enum):
    """
    Atomic units of measurement.

    Each member carries its metric, the multiplier that takes an amount in
    this unit to the SI base of its metric, and its synonyms. The first
    synonym is the canonical display string. Within a metric, members are
    declared in ascending multiplier order.
    """

    BITS = (Metric.DATA_SIZE, 1 / 8, ("bits", "bit", "bi", "b"))
    BYTES = (Metric.DATA_SIZE, 1.0, ("bytes", "byte", "B"))
    KILOBYTES = (Metric.DATA_SIZE, 1e3, ("KB", "kilobytes", "kilobyte", "kb"))
    KIBIBYTES = (Metric.DATA_SIZE, 1024.0, ("KiB", "kibibytes", "kibibyte", "kib"))
    MEGABYTES = (Metric.DATA_SIZE, 1e6, ("MB", "megabytes", "megabyte", "mb"))
    MEBIBYTES = (Metric.DATA_SIZE, 1024.0**2, ("MiB", "mebibytes", "mebibyte", "mib"))
    GIGABYTES = (Metric.DATA_SIZE, 1e9, ("GB", "gigabytes", "gigabyte", "gb"))
    GIBIBYTES = (Metric.DATA_SIZE, 1024.0**3, ("GiB", "gibibytes", "gibibyte", "gib"))
    TERABYTES = (Metric.DATA_SIZE, 1e12, ("TB", "terabytes", "terabyte", "tb"))
    TEBIBYTES = (Metric.DATA_SIZE, 1024.0**4, ("TiB", "tebibytes", "tebibyte", "tib"))

    NANOSECONDS = (Metric.TIME, 1e-9, ("ns", "nanoseconds", "nanosecond"))
    MICROSECONDS = (Metric.TIME, 1e-6, ("us", "microseconds", "microsecond"))
    MILLISECONDS = (Metric.TIME, 1e-3, ("ms", "milliseconds", "millisecond"))
    SECONDS = (Metric.TIME, 1.0, ("s", "seconds", "second", "sec", "secs"))
    MINUTES = (Metric.TIME, 60.0, ("min", "minutes", "minute", "mins"))
    HOURS = (Metric.TIME, 3600.0, ("hr", "hours", "hour", "hrs", "h"))
    DAYS = (Metric.TIME, 86400.0, ("days", "day", "d"))
    WEEKS = (Metric.TIME, 7 * 86400.0, ("wk", "weeks", "week", "wks", "w"))
    YEARS = (Metric.TIME, float(_YEAR_SECONDS), ("yr", "years", "year", "yrs", "y"))

    # Parse-only placeholder: "pick the unit automatically"
    AUTO = (None, None, ("auto", "?"))

    def __init__(
        self,
        metric: Optional[Metric],
        multiplier: Optional[float],
        synonyms: Tuple[str, ...],
    ):
        self.metric = metric
        self.multiplier = multiplier
        self.synonyms = synonyms

    def __str__(self) -> str:
        return self.synonyms[0]

    def to_si(self, amount: float) -> float:
        """Convert an amount in this unit to the SI base of its metric."""
        if self is BaseUnit.AUTO:
            raise UnknownMetricError(str(self))
        return amount * self.multiplier

    def from_si(self, amount: float) -> float:
        """Convert an amount in the SI base of this unit's metric to this unit."""
        if self is BaseUnit.AUTO:
            raise UnknownMetricError(str(self))
        return amount / self.multiplier

    @classmethod
    def from_string(cls, unit_str: str) -> "BaseUnit":
        """Look up a unit by exact (case-sensitive) synonym match."""
        for unit in cls:
            if unit_str in unit.synonyms:
                return unit
        raise UnitNotFoundError(unit_str)

    @classmethod
    def of_metric(cls, metric: Metric) -> List["BaseUnit"]:
        """Get the units measuring `metric`, smallest first."""
        units = [unit for unit in cls if unit.metric is metric]
        return sorted(units, key=lambda unit: unit.multiplier)


class Unit(ABC):
    """Base class for basic and composite units."""

    @property
    @abstractmethod
    def metric(self) -> Metric:
        """The metric this unit measures."""

    @abstractmethod
    def to_si(self, amount: float) -> float:
        """Convert an amount in this unit to the SI base of its metric."""

    @abstractmethod
    def from_si(self, amount: float) -> float:
        """Convert an amount in the SI base of this unit's metric to this unit."""

    @property
    def is_auto(self) -> bool:
        """Whether this unit is the 'pick automatically' placeholder."""
        return False


@dataclass(frozen=True)
class BasicUnit(Unit):
    """A unit made of a single base unit, e.g. ``MiB``."""

    base: BaseUnit

    @property
    def metric(self) -> Metric:
        if self.base.metric is None:
            raise UnknownMetricError(str(self))
        return self.base.metric

    @property
    def is_auto(self) -> bool:
        return self.base is BaseUnit.AUTO

    def to_si(self, amount: float) -> float:
        return self.base.to_si(amount)

    def from_si(self, amount: float) -> float:
        return self.base.from_si(amount)

    def __str__(self) -> str:
        return str(self.base)


@dataclass(frozen=True)
class CompositeUnit(Unit):
    """
    A ratio of two base units, e.g. ``MiB/s``.

    Only a data size over a time is measurable, and measures bandwidth.
    """

    numerator: BaseUnit
    denominator: BaseUnit

    @property
    def metric(self) -> Metric:
        if (
            self.numerator.metric is Metric.DATA_SIZE
            and self.denominator.metric is Metric.TIME
        ):
            return Metric.BANDWIDTH
        raise UnknownMetricError(str(self))

    def to_si(self, amount: float) -> float:
        return self.numerator.to_si(amount) / self.denominator.to_si(1)

    def from_si(self, amount: float) -> float:
        return self.numerator.from_si(amount) * self.denominator.to_si(1)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class AmountAndUnit:
    """An amount together with the unit it is expressed in."""

    amount: float
    unit: Unit

    @property
    def si_amount(self) -> float:
        """The amount converted to the SI base of its unit's metric."""
        return self.unit.to_si(self.amount)


def si_unit(metric: Metric) -> Unit:
    """Get the SI pivot unit for a metric."""
    if metric is Metric.DATA_SIZE:
        return BasicUnit(BaseUnit.BYTES)
    elif metric is Metric.TIME:
        return BasicUnit(BaseUnit.SECONDS)
    return CompositeUnit(BaseUnit.BYTES, BaseUnit.SECONDS)
