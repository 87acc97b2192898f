"""
Workouts API Endpoints

A workout carries its exercises; deleting the workout deletes them too.
"""
import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, selectinload

from core.database import get_db
from core.exceptions import NotFoundError
from models import Workout, WorkoutExercise
from schemas import DeleteResponse, WorkoutCreate, WorkoutResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


def _get_workout_or_404(db: Session, workout_id: UUID) -> Workout:
    workout = (
        db.query(Workout)
        .options(selectinload(Workout.exercises))
        .filter(Workout.id == workout_id)
        .first()
    )
    if not workout:
        logger.warning("Workout not found", extra={"extra_fields": {"workout_id": str(workout_id)}})
        raise NotFoundError("Workout")
    return workout


@router.get("", response_model=List[WorkoutResponse])
def list_workouts(
    day: Optional[date] = Query(None, alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    query = db.query(Workout).options(selectinload(Workout.exercises))
    if day:
        query = query.filter(Workout.date == day)
    return query.order_by(Workout.date.desc(), Workout.created_at.asc()).all()


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
def create_workout(workout: WorkoutCreate, db: Session = Depends(get_db)):
    data = workout.model_dump(exclude={"exercises"})
    db_workout = Workout(**data)
    db_workout.exercises = [WorkoutExercise(**ex.model_dump()) for ex in workout.exercises]

    db.add(db_workout)
    db.commit()
    db.refresh(db_workout)
    logger.info(
        "Workout created",
        extra={"extra_fields": {"workout_id": str(db_workout.id), "exercise_count": len(workout.exercises)}},
    )
    return db_workout


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout(workout_id: UUID, db: Session = Depends(get_db)):
    return _get_workout_or_404(db, workout_id)


@router.delete("/{workout_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_workout(workout_id: UUID, db: Session = Depends(get_db)):
    db_workout = _get_workout_or_404(db, workout_id)
    db.delete(db_workout)
    db.commit()
    logger.info("Workout deleted", extra={"extra_fields": {"workout_id": str(workout_id)}})
    return {"success": True}
