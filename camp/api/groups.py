"""
Groups API endpoints.

Group CRUD with unique names, and child membership assignment/removal.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from camp.db import schemas
from camp.db.database import get_db
from camp.db.repositories import children as children_repo
from camp.db.repositories import groups as groups_repo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/groups", tags=["groups"])


def _get_group_or_404(db: Session, group_id: int):
    db_group = groups_repo.get_group(db, group_id)
    if not db_group:
        raise HTTPException(status_code=404, detail=f"Group with id {group_id} not found")
    return db_group


def _ensure_name_available(db: Session, name: str, group_id: Optional[int] = None):
    existing = groups_repo.get_group_by_name(db, name)
    if existing and existing.id != group_id:
        raise HTTPException(status_code=409, detail="Group with this name already exists")


@router.post("/", response_model=schemas.Group, status_code=status.HTTP_201_CREATED)
def create_group_endpoint(group: schemas.GroupCreate, db: Session = Depends(get_db)):
    _ensure_name_available(db, group.name)
    try:
        return groups_repo.create_group(db, group)
    except IntegrityError:
        # Lost a race with a concurrent create of the same name
        db.rollback()
        raise HTTPException(status_code=409, detail="Group with this name already exists")


@router.get("/", response_model=List[schemas.Group])
def get_groups_endpoint(skip: int = 0, limit: Optional[int] = None, db: Session = Depends(get_db)):
    return groups_repo.get_groups(db, skip=skip, limit=limit)


@router.get("/{group_id}", response_model=schemas.Group)
def get_group_endpoint(group_id: int, db: Session = Depends(get_db)):
    return _get_group_or_404(db, group_id)


@router.put("/{group_id}", response_model=schemas.Group)
def update_group_endpoint(group_id: int, group: schemas.GroupUpdate, db: Session = Depends(get_db)):
    _get_group_or_404(db, group_id)
    _ensure_name_available(db, group.name, group_id=group_id)
    try:
        return groups_repo.update_group(db, group_id, group)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Group with this name already exists")


@router.delete("/{group_id}")
def delete_group_endpoint(group_id: int, db: Session = Depends(get_db)):
    return {"success": groups_repo.delete_group(db, group_id)}


@router.get("/{group_id}/children", response_model=schemas.GroupWithChildren)
def get_group_with_children_endpoint(group_id: int, db: Session = Depends(get_db)):
    db_group = _get_group_or_404(db, group_id)
    children = groups_repo.get_group_children(db, group_id)
    return schemas.GroupWithChildren(
        **schemas.Group.model_validate(db_group).model_dump(),
        children=[schemas.Child.model_validate(c) for c in children],
    )


@router.post(
    "/{group_id}/children/{child_id}",
    response_model=schemas.ChildGroup,
    status_code=status.HTTP_201_CREATED,
)
def assign_child_to_group_endpoint(group_id: int, child_id: int, db: Session = Depends(get_db)):
    if not children_repo.get_child(db, child_id):
        raise HTTPException(status_code=404, detail=f"Child with id {child_id} not found")
    _get_group_or_404(db, group_id)
    if groups_repo.get_membership(db, child_id, group_id):
        raise HTTPException(
            status_code=409,
            detail=f"Child {child_id} is already assigned to group {group_id}",
        )
    membership = groups_repo.create_membership(db, child_id, group_id)
    logger.info("child_assigned_to_group: child_id=%s group_id=%s", child_id, group_id)
    return membership


@router.delete("/{group_id}/children/{child_id}")
def remove_child_from_group_endpoint(group_id: int, child_id: int, db: Session = Depends(get_db)):
    return {"success": groups_repo.delete_membership(db, child_id, group_id)}
