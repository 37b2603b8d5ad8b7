"""
Disciplines API endpoints.

Discipline CRUD, child assignment/removal, and the ranked results view.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from camp.db import schemas
from camp.db.database import get_db
from camp.db.repositories import children as children_repo
from camp.db.repositories import disciplines as disciplines_repo
from camp.errors import InvalidDisciplineError, NotFoundError
from camp.services.presenter import present_results
from camp.services.results_service import ResultsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/disciplines", tags=["disciplines"])


def _get_discipline_or_404(db: Session, discipline_id: int):
    db_discipline = disciplines_repo.get_discipline(db, discipline_id)
    if not db_discipline:
        raise HTTPException(status_code=404, detail="Discipline not found")
    return db_discipline


@router.post("/", response_model=schemas.Discipline, status_code=status.HTTP_201_CREATED)
def create_discipline_endpoint(discipline: schemas.DisciplineCreate, db: Session = Depends(get_db)):
    return disciplines_repo.create_discipline(db, discipline)


@router.get("/", response_model=List[schemas.Discipline])
def get_disciplines_endpoint(skip: int = 0, limit: Optional[int] = None, db: Session = Depends(get_db)):
    return disciplines_repo.get_disciplines(db, skip=skip, limit=limit)


@router.get("/{discipline_id}", response_model=schemas.Discipline)
def get_discipline_endpoint(discipline_id: int, db: Session = Depends(get_db)):
    return _get_discipline_or_404(db, discipline_id)


@router.put("/{discipline_id}", response_model=schemas.Discipline)
def update_discipline_endpoint(
    discipline_id: int,
    discipline: schemas.DisciplineUpdate,
    db: Session = Depends(get_db),
):
    # A method change re-ranks every historical attempt on the next query
    db_discipline = disciplines_repo.update_discipline(db, discipline_id, discipline)
    if not db_discipline:
        raise HTTPException(status_code=404, detail="Discipline not found")
    return db_discipline


@router.delete("/{discipline_id}", response_model=schemas.Discipline)
def delete_discipline_endpoint(discipline_id: int, db: Session = Depends(get_db)):
    deleted = disciplines_repo.delete_discipline(db, discipline_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Discipline not found")
    return deleted


@router.get("/{discipline_id}/children", response_model=schemas.DisciplineWithChildren)
def get_discipline_with_children_endpoint(discipline_id: int, db: Session = Depends(get_db)):
    db_discipline = _get_discipline_or_404(db, discipline_id)
    children = disciplines_repo.get_discipline_children(db, discipline_id)
    return schemas.DisciplineWithChildren(
        **schemas.Discipline.model_validate(db_discipline).model_dump(),
        children=[schemas.Child.model_validate(c) for c in children],
    )


@router.post(
    "/{discipline_id}/children/{child_id}",
    response_model=schemas.ChildDiscipline,
    status_code=status.HTTP_201_CREATED,
)
def assign_child_to_discipline_endpoint(discipline_id: int, child_id: int, db: Session = Depends(get_db)):
    if not children_repo.get_child(db, child_id):
        raise HTTPException(status_code=404, detail=f"Child with id {child_id} not found")
    _get_discipline_or_404(db, discipline_id)
    if disciplines_repo.get_assignment(db, child_id, discipline_id):
        raise HTTPException(
            status_code=409,
            detail=f"Child {child_id} is already assigned to discipline {discipline_id}",
        )
    return disciplines_repo.create_assignment(db, child_id, discipline_id)


@router.delete("/{discipline_id}/children/{child_id}", response_model=schemas.ChildDiscipline)
def remove_child_from_discipline_endpoint(discipline_id: int, child_id: int, db: Session = Depends(get_db)):
    removed = disciplines_repo.delete_assignment(db, child_id, discipline_id)
    if not removed:
        raise HTTPException(status_code=404, detail="Child-discipline assignment not found")
    return removed


@router.get("/{discipline_id}/results", response_model=schemas.PresentedDisciplineResults)
def get_discipline_results_endpoint(discipline_id: int, db: Session = Depends(get_db)):
    service = ResultsService(db)
    try:
        results = service.compute_ranking(discipline_id)
    except NotFoundError as e:
        logger.warning("ranking_failed: discipline_id=%s error=%s", discipline_id, e)
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidDisciplineError as e:
        logger.error("ranking_failed: discipline_id=%s error=%s", discipline_id, e)
        raise HTTPException(status_code=422, detail=str(e))
    return present_results(results)
