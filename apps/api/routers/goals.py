"""
Wellness Goals API Endpoints
"""
import logging
from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError
from models import WellnessGoal
from schemas import DeleteResponse, GoalCreate, GoalProgressResponse, GoalResponse, GoalUpdate
from services.wellness_aggregation import active_goals, compute_goals_progress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/goals", tags=["goals"])


def _get_goal_or_404(db: Session, goal_id: UUID) -> WellnessGoal:
    goal = db.query(WellnessGoal).filter(WellnessGoal.id == goal_id).first()
    if not goal:
        logger.warning("Goal not found", extra={"extra_fields": {"goal_id": str(goal_id)}})
        raise NotFoundError("Goal")
    return goal


@router.get("", response_model=List[GoalResponse])
def list_goals(db: Session = Depends(get_db)):
    """Active goals only."""
    return active_goals(db)


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
def create_goal(goal: GoalCreate, db: Session = Depends(get_db)):
    db_goal = WellnessGoal(goal_type=goal.goal_type, target_value=goal.target_value)
    db.add(db_goal)
    db.commit()
    db.refresh(db_goal)
    logger.info(
        "Goal created",
        extra={"extra_fields": {"goal_id": str(db_goal.id), "goal_type": db_goal.goal_type}},
    )
    return db_goal


@router.get("/progress", response_model=List[GoalProgressResponse])
def get_progress(
    day: date = Query(..., alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    return compute_goals_progress(db, day)


@router.put("/{goal_id}", response_model=GoalResponse)
def update_goal(goal_id: UUID, update: GoalUpdate, db: Session = Depends(get_db)):
    db_goal = _get_goal_or_404(db, goal_id)
    for field, value in update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_goal, field, value)
    db.commit()
    db.refresh(db_goal)
    logger.info("Goal updated", extra={"extra_fields": {"goal_id": str(goal_id)}})
    return db_goal


@router.delete("/{goal_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_goal(goal_id: UUID, db: Session = Depends(get_db)):
    db_goal = _get_goal_or_404(db, goal_id)
    db.delete(db_goal)
    db.commit()
    logger.info("Goal deleted", extra={"extra_fields": {"goal_id": str(goal_id)}})
    return {"success": True}
