"""
Measurement repository functions.

Measurements are append-only: there is an insert and there are reads, nothing
else. Rows disappear only through cascading deletes of their child or
discipline.
"""
from __future__ import annotations

from typing import List
from sqlalchemy.orm import Session

from camp.db import models


def create_measurement(
    db: Session,
    *,
    child_id: int,
    discipline_id: int,
    value: float,
    attempt_number: int = 1,
):
    db_measurement = models.Measurement(
        child_id=child_id,
        discipline_id=discipline_id,
        value=float(value),
        attempt_number=attempt_number,
    )
    db.add(db_measurement)
    db.commit()
    db.refresh(db_measurement)
    return db_measurement


def get_discipline_measurement_rows(db: Session, discipline_id: int) -> List[tuple]:
    """Return ``(child_id, child_name, value, attempt_number, discipline_id)`` rows in recording order."""
    return (
        db.query(
            models.Measurement.child_id,
            models.Child.name,
            models.Measurement.value,
            models.Measurement.attempt_number,
            models.Measurement.discipline_id,
        )
        .join(models.Child, models.Child.id == models.Measurement.child_id)
        .filter(models.Measurement.discipline_id == discipline_id)
        .order_by(models.Measurement.id)
        .all()
    )


def get_child_measurements(db: Session, child_id: int, discipline_id: int):
    return (
        db.query(models.Measurement)
        .filter(
            models.Measurement.child_id == child_id,
            models.Measurement.discipline_id == discipline_id,
        )
        .order_by(models.Measurement.id)
        .all()
    )
