from __future__ import annotations

from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from camp.enums import ResultType, AggregationMethod
from .children import Child


class DisciplineBase(BaseModel):
    name: str = Field(min_length=1)
    result_type: ResultType
    aggregation_method: AggregationMethod
    model_config = ConfigDict(use_enum_values=True)


class DisciplineCreate(DisciplineBase):
    pass


class DisciplineUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    result_type: ResultType | None = None
    aggregation_method: AggregationMethod | None = None
    model_config = ConfigDict(use_enum_values=True)


class Discipline(DisciplineBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ChildDiscipline(BaseModel):
    child_id: int
    discipline_id: int
    assigned_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ChildWithDisciplines(Child):
    disciplines: List[Discipline] = []


class DisciplineWithChildren(Discipline):
    children: List[Child] = []
