from __future__ import annotations

from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from camp.enums import ResultType, AggregationMethod


# Largest accepted magnitude for a recorded value, either sign.
MAX_MEASUREMENT_MAGNITUDE = 1e12


class MeasurementCreate(BaseModel):
    child_id: int
    discipline_id: int
    value: float = Field(allow_inf_nan=False, ge=-MAX_MEASUREMENT_MAGNITUDE, le=MAX_MEASUREMENT_MAGNITUDE)
    attempt_number: int = Field(default=1, ge=1)


class Measurement(BaseModel):
    id: int
    child_id: int
    discipline_id: int
    value: float
    attempt_number: int
    recorded_at: datetime
    model_config = ConfigDict(from_attributes=True)


class AggregateResult(BaseModel):
    child_id: int
    child_name: str
    aggregated_value: float
    total_attempts: int
    model_config = ConfigDict(from_attributes=True)


class RankedResult(AggregateResult):
    rank: int
    value_label: str
    attempts_label: str


class DisciplineResults(BaseModel):
    id: int
    name: str
    result_type: ResultType
    aggregation_method: AggregationMethod
    results: List[AggregateResult] = []


class PresentedDisciplineResults(BaseModel):
    id: int
    name: str
    result_type: ResultType
    aggregation_method: AggregationMethod
    result_type_label: str
    aggregation_label: str
    expects_attempt_number: bool
    results: List[RankedResult] = []
