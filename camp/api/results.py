"""
Results API endpoints.

Record attempts (append-only) and list a child's raw attempts in a discipline.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from camp.db import schemas
from camp.db.database import get_db
from camp.db.repositories import measurements as measurements_repo
from camp.errors import NotFoundError
from camp.services.results_service import ResultsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/results", tags=["results"])


@router.post("/", response_model=schemas.Measurement, status_code=status.HTTP_201_CREATED)
def record_result_endpoint(measurement: schemas.MeasurementCreate, db: Session = Depends(get_db)):
    """
    Record one attempt. The same attempt number may be recorded more than
    once; every row counts toward the ranking.
    """
    try:
        return ResultsService(db).record_measurement(measurement)
    except NotFoundError as e:
        logger.warning(
            "record_failed: child_id=%s discipline_id=%s error=%s",
            measurement.child_id,
            measurement.discipline_id,
            e,
        )
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/", response_model=List[schemas.Measurement])
def get_child_results_endpoint(child_id: int, discipline_id: int, db: Session = Depends(get_db)):
    return measurements_repo.get_child_measurements(db, child_id, discipline_id)
