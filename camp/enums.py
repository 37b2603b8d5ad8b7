"""
Closed value sets shared by models, schemas and the ranking engine.
"""
from __future__ import annotations
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ResultType(str, Enum):
    # Descriptive only: tells callers whether to prompt for an attempt number.
    ONE_TIME = "one_time"
    MULTIPLE_TIMES = "multiple_times"
    NUMBER = "number"
    MULTIPLE_NUMBERS = "multiple_numbers"


class AggregationMethod(str, Enum):
    BEST_RESULT = "best_result"
    SUM = "sum"
    MEAN = "mean"


def sql_values(enum_cls) -> str:
    """Render enum values for a CHECK constraint body, e.g. ``'a','b'``."""
    return ",".join(f"'{member.value}'" for member in enum_cls)


__all__ = ["Gender", "ResultType", "AggregationMethod", "sql_values"]
