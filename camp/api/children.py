"""
Children API endpoints.

Create, filter, update and delete children, plus the group and discipline
detail views for a single child.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from camp.db import schemas
from camp.db.database import get_db
from camp.db.repositories import children as children_repo
from camp.enums import Gender

router = APIRouter(prefix="/children", tags=["children"])


def _get_child_or_404(db: Session, child_id: int):
    db_child = children_repo.get_child(db, child_id)
    if not db_child:
        raise HTTPException(status_code=404, detail=f"Child with id {child_id} not found")
    return db_child


@router.post("/", response_model=schemas.Child, status_code=status.HTTP_201_CREATED)
def create_child_endpoint(child: schemas.ChildCreate, db: Session = Depends(get_db)):
    return children_repo.create_child(db, child)


@router.get("/", response_model=List[schemas.Child])
def get_children_endpoint(
    name: Optional[str] = None,
    birth_date: Optional[date] = None,
    gender: Optional[Gender] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    filters = schemas.ChildFilter(name=name, birth_date=birth_date, gender=gender)
    return children_repo.get_children(db, filters=filters, skip=skip, limit=limit)


@router.get("/{child_id}", response_model=schemas.Child)
def get_child_endpoint(child_id: int, db: Session = Depends(get_db)):
    return _get_child_or_404(db, child_id)


@router.put("/{child_id}", response_model=schemas.Child)
def update_child_endpoint(child_id: int, child: schemas.ChildUpdate, db: Session = Depends(get_db)):
    db_child = children_repo.update_child(db, child_id, child)
    if not db_child:
        raise HTTPException(status_code=404, detail=f"Child with id {child_id} not found")
    return db_child


@router.delete("/{child_id}")
def delete_child_endpoint(child_id: int, db: Session = Depends(get_db)):
    # Memberships and recorded results cascade with the child
    return {"success": children_repo.delete_child(db, child_id)}


@router.get("/{child_id}/groups", response_model=schemas.ChildWithGroups)
def get_child_with_groups_endpoint(child_id: int, db: Session = Depends(get_db)):
    db_child = _get_child_or_404(db, child_id)
    groups = children_repo.get_child_groups(db, child_id)
    return schemas.ChildWithGroups(
        **schemas.Child.model_validate(db_child).model_dump(),
        groups=[schemas.Group.model_validate(g) for g in groups],
    )


@router.get("/{child_id}/disciplines", response_model=schemas.ChildWithDisciplines)
def get_child_with_disciplines_endpoint(child_id: int, db: Session = Depends(get_db)):
    db_child = _get_child_or_404(db, child_id)
    disciplines = children_repo.get_child_disciplines(db, child_id)
    return schemas.ChildWithDisciplines(
        **schemas.Child.model_validate(db_child).model_dump(),
        disciplines=[schemas.Discipline.model_validate(d) for d in disciplines],
    )
