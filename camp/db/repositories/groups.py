"""
Group repository functions.

Implements group CRUD and child membership assignment/removal.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from camp.db import models, schemas


def create_group(db: Session, group: schemas.GroupCreate):
    db_group = models.Group(name=group.name)
    db.add(db_group)
    db.commit()
    db.refresh(db_group)
    return db_group


def get_group(db: Session, group_id: int):
    return db.query(models.Group).filter(models.Group.id == group_id).first()


def get_group_by_name(db: Session, name: str):
    return db.query(models.Group).filter(models.Group.name == name).first()


def get_groups(db: Session, skip: int = 0, limit: Optional[int] = None):
    q = db.query(models.Group).order_by(models.Group.id).offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def update_group(db: Session, group_id: int, group: schemas.GroupUpdate):
    db_group = db.query(models.Group).filter(models.Group.id == group_id).first()
    if db_group:
        db_group.name = group.name
        db_group.updated_at = models.now_utc()
        db.commit()
        db.refresh(db_group)
    return db_group


def delete_group(db: Session, group_id: int) -> bool:
    db_group = db.query(models.Group).filter(models.Group.id == group_id).first()
    if db_group:
        db.delete(db_group)
        db.commit()
        return True
    return False


def get_membership(db: Session, child_id: int, group_id: int):
    return db.query(models.ChildGroup).filter(
        models.ChildGroup.child_id == child_id,
        models.ChildGroup.group_id == group_id,
    ).first()


def create_membership(db: Session, child_id: int, group_id: int):
    db_membership = models.ChildGroup(child_id=child_id, group_id=group_id)
    db.add(db_membership)
    db.commit()
    db.refresh(db_membership)
    return db_membership


def delete_membership(db: Session, child_id: int, group_id: int) -> bool:
    db_membership = get_membership(db, child_id, group_id)
    if db_membership:
        db.delete(db_membership)
        db.commit()
        return True
    return False


def get_group_children(db: Session, group_id: int) -> List[models.Child]:
    return (
        db.query(models.Child)
        .join(models.ChildGroup)
        .filter(models.ChildGroup.group_id == group_id)
        .order_by(models.ChildGroup.assigned_at, models.Child.id)
        .all()
    )
