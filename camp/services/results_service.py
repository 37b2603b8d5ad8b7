"""
Results service: records measurements and builds discipline rankings.

The discipline catalog and measurement store are explicit collaborators so
the ranking engine stays pure and the service can run against fakes.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from camp.db import schemas
from camp.db.repositories import children as children_repo
from camp.db.repositories import disciplines as disciplines_repo
from camp.db.repositories import measurements as measurements_repo
from camp.errors import NotFoundError
from camp.services.ranking_engine import MeasurementRecord, compute_ranking

logger = logging.getLogger(__name__)


class DisciplineCatalog(Protocol):
    def get_discipline(self, discipline_id: int): ...


class MeasurementStore(Protocol):
    def list_measurements(self, discipline_id: int) -> List[MeasurementRecord]: ...

    def append(self, *, child_id: int, discipline_id: int, value: float, attempt_number: int = 1): ...


class SqlDisciplineCatalog:
    """Discipline lookups backed by the ORM session."""

    def __init__(self, db: Session):
        self.db = db

    def get_discipline(self, discipline_id: int):
        discipline = disciplines_repo.get_discipline(self.db, discipline_id)
        if discipline is None:
            raise NotFoundError("Discipline", discipline_id)
        return discipline


class SqlMeasurementStore:
    """Append-only measurement storage backed by the ORM session."""

    def __init__(self, db: Session):
        self.db = db

    def list_measurements(self, discipline_id: int) -> List[MeasurementRecord]:
        rows = measurements_repo.get_discipline_measurement_rows(self.db, discipline_id)
        return [
            MeasurementRecord(
                child_id=child_id,
                child_name=child_name,
                value=value,
                attempt_number=attempt_number,
                discipline_id=row_discipline_id,
            )
            for child_id, child_name, value, attempt_number, row_discipline_id in rows
        ]

    def append(self, *, child_id: int, discipline_id: int, value: float, attempt_number: int = 1):
        if children_repo.get_child(self.db, child_id) is None:
            raise NotFoundError("Child", child_id)
        if disciplines_repo.get_discipline(self.db, discipline_id) is None:
            raise NotFoundError("Discipline", discipline_id)
        return measurements_repo.create_measurement(
            self.db,
            child_id=child_id,
            discipline_id=discipline_id,
            value=value,
            attempt_number=attempt_number,
        )


class ResultsService:
    """Service class for recording attempts and ranking disciplines."""

    def __init__(
        self,
        db: Optional[Session] = None,
        catalog: Optional[DisciplineCatalog] = None,
        store: Optional[MeasurementStore] = None,
    ):
        if db is None and (catalog is None or store is None):
            raise ValueError("ResultsService needs a session or both collaborators")
        self.catalog = catalog or SqlDisciplineCatalog(db)
        self.store = store or SqlMeasurementStore(db)

    def record_measurement(self, measurement: schemas.MeasurementCreate):
        """Append one attempt. Never updates or deduplicates by attempt number."""
        created = self.store.append(
            child_id=measurement.child_id,
            discipline_id=measurement.discipline_id,
            value=measurement.value,
            attempt_number=measurement.attempt_number,
        )
        logger.info(
            "measurement_recorded: child_id=%s discipline_id=%s attempt=%s",
            measurement.child_id,
            measurement.discipline_id,
            measurement.attempt_number,
        )
        return created

    def compute_ranking(self, discipline_id: int) -> schemas.DisciplineResults:
        """Rank every child with at least one attempt in the discipline."""
        discipline = self.catalog.get_discipline(discipline_id)
        measurements = self.store.list_measurements(discipline_id)
        ranking = compute_ranking(discipline, measurements)
        logger.info(
            "ranking_built: discipline_id=%s method=%s measurements=%d children=%d",
            discipline_id,
            discipline.aggregation_method,
            len(measurements),
            len(ranking),
        )
        return schemas.DisciplineResults(
            id=discipline.id,
            name=discipline.name,
            result_type=discipline.result_type,
            aggregation_method=discipline.aggregation_method,
            results=[schemas.AggregateResult.model_validate(r) for r in ranking],
        )
