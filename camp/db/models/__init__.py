"""
Domain-split SQLAlchemy models with an aggregator.

Exposes `Base`, `now_utc`, and all ORM classes from one import path.
"""

from .base import Base, now_utc  # re-export

from .children import Child
from .groups import Group, ChildGroup
from .disciplines import Discipline, ChildDiscipline
from .measurements import Measurement

__all__ = [
    # base
    "Base",
    "now_utc",
    # entities
    "Child",
    "Group",
    "Discipline",
    # memberships
    "ChildGroup",
    "ChildDiscipline",
    # results
    "Measurement",
]
