"""
Conversion engine.

Converts amounts between units of the same metric, picks the most readable
unit for ``auto`` targets and solves for the missing one of data size, time
and bandwidth given the other two.
"""

from typing import Dict, List, NamedTuple

from ulice.core.errors import MismatchedMetricsError, WrongUnitsError, ZeroQuantityError
from ulice.core.formatting import DEFAULT_PRECISION, format_amount
from ulice.core.logging import get_logger
from ulice.core.types import Metric
from ulice.core.units import (
    AmountAndUnit,
    BaseUnit,
    BasicUnit,
    CompositeUnit,
    Unit,
    si_unit,
)

log = get_logger(__name__)


class Conversion(NamedTuple):
    """The result of a conversion: an amount and the unit it resolved to."""

    amount: float
    unit: Unit

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Format as ``<amount> <unit>``."""
        return f"{format_amount(self.amount, precision)} {self.unit}"


def candidate_units(source: Unit) -> List[Unit]:
    """
    Get the units `source` can be expressed in, smallest first.

    Composite units keep their denominator and vary the numerator, so a
    bandwidth in bytes per second is offered in KB/s, MiB/s and so on.
    """
    metric = source.metric
    if isinstance(source, CompositeUnit):
        return [
            CompositeUnit(numerator, source.denominator)
            for numerator in BaseUnit.of_metric(Metric.DATA_SIZE)
        ]
    return [BasicUnit(base) for base in BaseUnit.of_metric(metric)]


def convert(amount: float, source: Unit, target: Unit) -> Conversion:
    """
    Convert an amount from one unit to another.

    Args:
        amount: The amount in `source` units
        source: The unit the amount is given in
        target: The unit to convert to, or the automatic placeholder

    Returns:
        The converted amount and the unit it is expressed in

    Raises:
        MismatchedMetricsError: If the units measure different metrics
        UnknownMetricError: If either unit measures nothing convertible
    """
    if target.is_auto:
        return convert_auto(amount, source)

    source_metric = source.metric
    target_metric = target.metric
    if source_metric is not target_metric:
        raise MismatchedMetricsError(source_metric, target_metric)

    result = Conversion(target.from_si(source.to_si(amount)), target)
    log.debug(f"Converted {amount} {source} to {result.amount} {target}")
    return result


def convert_auto(amount: float, source: Unit) -> Conversion:
    """
    Convert to the largest unit in which the amount is still at least 1.

    Amounts below 1 even in the smallest unit stay in the smallest unit.
    """
    candidates = candidate_units(source)
    si_amount = source.to_si(amount)

    best = candidates[0]
    for candidate in candidates:
        if candidate.from_si(si_amount) < 1:
            break
        best = candidate

    log.debug(f"Auto resolved {amount} {source} to {best}")
    return Conversion(best.from_si(si_amount), best)


def solve(first: AmountAndUnit, second: AmountAndUnit, target: Unit) -> Conversion:
    """
    Solve for the missing one of data size, time and bandwidth.

    Args:
        first: One known quantity
        second: Another known quantity, of a different metric
        target: The unit to express the answer in. The automatic placeholder
            solves for whichever metric `first` and `second` leave out.

    Raises:
        WrongUnitsError: If the three units are not one of each metric
        UnknownMetricError: If any unit measures nothing convertible
        ZeroQuantityError: If the answer requires dividing by zero
    """
    known: Dict[Metric, float] = {}
    for quantity in (first, second):
        metric = quantity.unit.metric
        if metric in known:
            raise WrongUnitsError(f"got two {metric} quantities")
        known[metric] = quantity.si_amount

    missing = [metric for metric in Metric if metric not in known]
    wanted = missing[0] if target.is_auto else target.metric
    if wanted in known:
        raise WrongUnitsError(f"{wanted} is already given")

    if wanted is Metric.BANDWIDTH:
        si_result = _divide(known[Metric.DATA_SIZE], known[Metric.TIME], Metric.TIME)
    elif wanted is Metric.TIME:
        si_result = _divide(
            known[Metric.DATA_SIZE], known[Metric.BANDWIDTH], Metric.BANDWIDTH
        )
    else:
        si_result = known[Metric.BANDWIDTH] * known[Metric.TIME]

    log.debug(f"Solved {wanted} = {si_result} in {si_unit(wanted)}")
    if target.is_auto:
        return convert_auto(si_result, si_unit(wanted))
    return Conversion(target.from_si(si_result), target)


def _divide(dividend: float, divisor: float, divisor_metric: Metric) -> float:
    if divisor == 0:
        raise ZeroQuantityError(divisor_metric)
    return dividend / divisor
