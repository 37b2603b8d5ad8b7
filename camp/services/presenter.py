"""Display labels for rankings returned to API consumers."""

from __future__ import annotations

from typing import Dict

from camp.db import schemas
from camp.enums import AggregationMethod, ResultType

RESULT_TYPE_LABELS: Dict[ResultType, str] = {
    ResultType.ONE_TIME: "Single Result",
    ResultType.MULTIPLE_TIMES: "Multiple Attempts",
    ResultType.NUMBER: "Count/Score",
    ResultType.MULTIPLE_NUMBERS: "Multiple Scores",
}

AGGREGATION_LABELS: Dict[AggregationMethod, str] = {
    AggregationMethod.BEST_RESULT: "Best Result",
    AggregationMethod.SUM: "Sum Total",
    AggregationMethod.MEAN: "Average",
}

VALUE_LABELS: Dict[AggregationMethod, str] = {
    AggregationMethod.BEST_RESULT: "Best",
    AggregationMethod.SUM: "Total",
    AggregationMethod.MEAN: "Average",
}

_ATTEMPT_RESULT_TYPES = frozenset({ResultType.MULTIPLE_TIMES, ResultType.MULTIPLE_NUMBERS})


def expects_attempt_number(result_type: ResultType | str) -> bool:
    """Whether the recording form should ask for an attempt number."""
    return ResultType(result_type) in _ATTEMPT_RESULT_TYPES


def attempts_label(total_attempts: int) -> str:
    return f"{total_attempts} attempt{'' if total_attempts == 1 else 's'}"


def present_results(results: schemas.DisciplineResults) -> schemas.PresentedDisciplineResults:
    result_type = ResultType(results.result_type)
    method = AggregationMethod(results.aggregation_method)
    value_label = VALUE_LABELS[method]
    return schemas.PresentedDisciplineResults(
        id=results.id,
        name=results.name,
        result_type=result_type,
        aggregation_method=method,
        result_type_label=RESULT_TYPE_LABELS[result_type],
        aggregation_label=AGGREGATION_LABELS[method],
        expects_attempt_number=expects_attempt_number(result_type),
        results=[
            schemas.RankedResult(
                **row.model_dump(),
                rank=position,
                value_label=value_label,
                attempts_label=attempts_label(row.total_attempts),
            )
            for position, row in enumerate(results.results, start=1)
        ],
    )
