"""
Discipline repository functions.

Implements discipline CRUD and child assignment/removal.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from camp.db import models, schemas


def create_discipline(db: Session, discipline: schemas.DisciplineCreate):
    db_discipline = models.Discipline(
        name=discipline.name,
        result_type=discipline.result_type,
        aggregation_method=discipline.aggregation_method,
    )
    db.add(db_discipline)
    db.commit()
    db.refresh(db_discipline)
    return db_discipline


def get_discipline(db: Session, discipline_id: int):
    return db.query(models.Discipline).filter(models.Discipline.id == discipline_id).first()


def get_disciplines(db: Session, skip: int = 0, limit: Optional[int] = None):
    q = db.query(models.Discipline).order_by(models.Discipline.created_at, models.Discipline.id).offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def update_discipline(db: Session, discipline_id: int, discipline: schemas.DisciplineUpdate):
    db_discipline = db.query(models.Discipline).filter(models.Discipline.id == discipline_id).first()
    if db_discipline:
        for key, value in discipline.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(db_discipline, key, value)
        db_discipline.updated_at = models.now_utc()
        db.commit()
        db.refresh(db_discipline)
    return db_discipline


def delete_discipline(db: Session, discipline_id: int) -> Optional[schemas.Discipline]:
    """Delete a discipline and return a snapshot of it, or ``None`` when absent."""
    db_discipline = db.query(models.Discipline).filter(models.Discipline.id == discipline_id).first()
    if not db_discipline:
        return None
    snapshot = schemas.Discipline.model_validate(db_discipline)
    db.delete(db_discipline)
    db.commit()
    return snapshot


def get_assignment(db: Session, child_id: int, discipline_id: int):
    return db.query(models.ChildDiscipline).filter(
        models.ChildDiscipline.child_id == child_id,
        models.ChildDiscipline.discipline_id == discipline_id,
    ).first()


def create_assignment(db: Session, child_id: int, discipline_id: int):
    db_assignment = models.ChildDiscipline(child_id=child_id, discipline_id=discipline_id)
    db.add(db_assignment)
    db.commit()
    db.refresh(db_assignment)
    return db_assignment


def delete_assignment(db: Session, child_id: int, discipline_id: int) -> Optional[schemas.ChildDiscipline]:
    db_assignment = get_assignment(db, child_id, discipline_id)
    if not db_assignment:
        return None
    snapshot = schemas.ChildDiscipline.model_validate(db_assignment)
    db.delete(db_assignment)
    db.commit()
    return snapshot


def get_discipline_children(db: Session, discipline_id: int) -> List[models.Child]:
    return (
        db.query(models.Child)
        .join(models.ChildDiscipline)
        .filter(models.ChildDiscipline.discipline_id == discipline_id)
        .order_by(models.ChildDiscipline.assigned_at, models.Child.id)
        .all()
    )
