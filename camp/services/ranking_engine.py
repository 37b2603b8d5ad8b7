"""
Results aggregation and ranking engine.

Collapses the raw attempts recorded for one discipline into a single score per
child and orders the children by that score. No I/O, no shared state, inputs
are never mutated.

``best_result`` always takes the maximum value and the ranking is always
highest-first, timed disciplines included.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from camp.enums import AggregationMethod
from camp.errors import InvalidDisciplineError, PrecondAssertionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasurementRecord:
    """One attempt as handed to the engine by the measurement store."""

    child_id: int
    child_name: str
    value: float
    attempt_number: int = 1
    discipline_id: Optional[int] = None


@dataclass(frozen=True)
class AggregateResult:
    """Per-child aggregate for one discipline. Never persisted."""

    child_id: int
    child_name: str
    aggregated_value: float
    total_attempts: int


def _best(values: Sequence[float]) -> float:
    return max(values)


def _sum(values: Sequence[float]) -> float:
    return math.fsum(values)


def _mean(values: Sequence[float]) -> float:
    return math.fsum(values) / len(values)


_AGGREGATORS: Dict[AggregationMethod, Callable[[Sequence[float]], float]] = {
    AggregationMethod.BEST_RESULT: _best,
    AggregationMethod.SUM: _sum,
    AggregationMethod.MEAN: _mean,
}


def resolve_method(method: Any) -> AggregationMethod:
    """Coerce a stored method value to the enum, failing closed on anything unknown."""
    if isinstance(method, AggregationMethod):
        return method
    try:
        return AggregationMethod(method)
    except ValueError:
        raise InvalidDisciplineError(method) from None


class _ChildBucket:
    __slots__ = ("child_name", "values")

    def __init__(self, child_name: str):
        self.child_name = child_name
        self.values: List[float] = []


def _group_by_child(
    measurements: Iterable[MeasurementRecord],
    discipline_id: Optional[int],
) -> Dict[int, _ChildBucket]:
    # dict preserves first-seen order, which is the tie-break order downstream
    buckets: Dict[int, _ChildBucket] = {}
    for m in measurements:
        if discipline_id is not None and m.discipline_id is not None and m.discipline_id != discipline_id:
            raise PrecondAssertionError(
                f"measurement for discipline {m.discipline_id} passed to ranking of discipline {discipline_id}"
            )
        value = float(m.value)
        if not math.isfinite(value):
            raise PrecondAssertionError(f"non-finite measurement value for child {m.child_id}: {m.value!r}")
        bucket = buckets.get(m.child_id)
        if bucket is None:
            bucket = buckets[m.child_id] = _ChildBucket(m.child_name)
        bucket.values.append(value)
    return buckets


def _aggregate_bucket(aggregate: Callable[[Sequence[float]], float], child_id: int, values: Sequence[float]) -> float:
    try:
        value = float(aggregate(values))
    except OverflowError:
        raise PrecondAssertionError(f"aggregate for child {child_id} overflows a float") from None
    if not math.isfinite(value):
        raise PrecondAssertionError(f"aggregate for child {child_id} is not finite: {value!r}")
    return value


def compute_ranking(discipline: Any, measurements: Iterable[MeasurementRecord]) -> List[AggregateResult]:
    """Aggregate ``measurements`` per child with the discipline's method and rank them.

    ``discipline`` is any object exposing ``aggregation_method`` (enum or raw
    string) and optionally ``id``. Children appear once each, only if they
    have at least one measurement; ``total_attempts`` counts every record,
    duplicate attempt numbers included.

    Raises InvalidDisciplineError for an unknown method (before any grouping,
    so there is never a partial ranking) and PrecondAssertionError for
    measurements from another discipline, non-finite values, or an aggregate
    that overflows a float.
    """
    method = resolve_method(getattr(discipline, "aggregation_method", None))
    aggregate = _AGGREGATORS[method]
    discipline_id = getattr(discipline, "id", None)

    buckets = _group_by_child(measurements, discipline_id)

    results = [
        AggregateResult(
            child_id=child_id,
            child_name=bucket.child_name,
            aggregated_value=_aggregate_bucket(aggregate, child_id, bucket.values),
            total_attempts=len(bucket.values),
        )
        for child_id, bucket in buckets.items()
    ]
    # sorted() is stable with reverse=True, so equal scores keep grouping order
    ranked = sorted(results, key=lambda r: r.aggregated_value, reverse=True)
    logger.debug(
        "ranking computed: discipline_id=%s method=%s children=%d",
        discipline_id,
        method.value,
        len(ranked),
    )
    return ranked


__all__ = [
    "MeasurementRecord",
    "AggregateResult",
    "compute_ranking",
    "resolve_method",
]
