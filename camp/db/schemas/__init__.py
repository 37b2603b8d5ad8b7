"""
Domain-split Pydantic schemas with an aggregator.

Import order: children first so group/discipline detail views can embed them.
"""

from .children import ChildBase, ChildCreate, ChildUpdate, ChildFilter, Child
from .groups import (
    GroupBase,
    GroupCreate,
    GroupUpdate,
    Group,
    ChildGroup,
    ChildWithGroups,
    GroupWithChildren,
)
from .disciplines import (
    DisciplineBase,
    DisciplineCreate,
    DisciplineUpdate,
    Discipline,
    ChildDiscipline,
    ChildWithDisciplines,
    DisciplineWithChildren,
)
from .results import (
    MAX_MEASUREMENT_MAGNITUDE,
    MeasurementCreate,
    Measurement,
    AggregateResult,
    RankedResult,
    DisciplineResults,
    PresentedDisciplineResults,
)

__all__ = [
    # Children
    "ChildBase",
    "ChildCreate",
    "ChildUpdate",
    "ChildFilter",
    "Child",
    # Groups
    "GroupBase",
    "GroupCreate",
    "GroupUpdate",
    "Group",
    "ChildGroup",
    "ChildWithGroups",
    "GroupWithChildren",
    # Disciplines
    "DisciplineBase",
    "DisciplineCreate",
    "DisciplineUpdate",
    "Discipline",
    "ChildDiscipline",
    "ChildWithDisciplines",
    "DisciplineWithChildren",
    # Results
    "MAX_MEASUREMENT_MAGNITUDE",
    "MeasurementCreate",
    "Measurement",
    "AggregateResult",
    "RankedResult",
    "DisciplineResults",
    "PresentedDisciplineResults",
]
