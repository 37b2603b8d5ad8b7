"""
Child repository functions.

Implements child CRUD, filtered listing, and the membership lookups used by
the child detail views.
"""
from __future__ import annotations

from typing import Optional, List
from sqlalchemy.orm import Session

from camp.db import models, schemas


def create_child(db: Session, child: schemas.ChildCreate):
    db_child = models.Child(
        name=child.name,
        birth_date=child.birth_date,
        gender=child.gender,
    )
    db.add(db_child)
    db.commit()
    db.refresh(db_child)
    return db_child


def get_child(db: Session, child_id: int):
    return db.query(models.Child).filter(models.Child.id == child_id).first()


def get_children(
    db: Session,
    filters: Optional[schemas.ChildFilter] = None,
    skip: int = 0,
    limit: Optional[int] = None,
):
    q = db.query(models.Child)
    if filters is not None:
        if filters.name:
            # Case-insensitive partial match
            q = q.filter(models.Child.name.ilike(f"%{filters.name}%"))
        if filters.birth_date:
            q = q.filter(models.Child.birth_date == filters.birth_date)
        if filters.gender:
            q = q.filter(models.Child.gender == filters.gender)
    q = q.order_by(models.Child.id).offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def update_child(db: Session, child_id: int, child: schemas.ChildUpdate):
    db_child = db.query(models.Child).filter(models.Child.id == child_id).first()
    if db_child:
        for key, value in child.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(db_child, key, value)
        db_child.updated_at = models.now_utc()
        db.commit()
        db.refresh(db_child)
    return db_child


def delete_child(db: Session, child_id: int) -> bool:
    """Delete a child; memberships and measurements go with it."""
    db_child = db.query(models.Child).filter(models.Child.id == child_id).first()
    if db_child:
        db.delete(db_child)
        db.commit()
        return True
    return False


def get_child_groups(db: Session, child_id: int) -> List[models.Group]:
    return (
        db.query(models.Group)
        .join(models.ChildGroup)
        .filter(models.ChildGroup.child_id == child_id)
        .order_by(models.ChildGroup.assigned_at, models.Group.id)
        .all()
    )


def get_child_disciplines(db: Session, child_id: int) -> List[models.Discipline]:
    return (
        db.query(models.Discipline)
        .join(models.ChildDiscipline)
        .filter(models.ChildDiscipline.child_id == child_id)
        .order_by(models.ChildDiscipline.assigned_at, models.Discipline.id)
        .all()
    )
