"""
Daily Activities API Endpoints

Single daily readings: steps, sleep hours, water glasses and mood.
"""
import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError
from models import DailyActivity
from schemas import ActivitySummaryResponse, ActivityType, DailyActivityCreate, DailyActivityResponse, DeleteResponse
from services.wellness_aggregation import fetch_activities, summarize_activities

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.get("", response_model=List[DailyActivityResponse])
def list_activities(
    day: Optional[date] = Query(None, alias="date", description="Date (YYYY-MM-DD)"),
    activity_type: Optional[ActivityType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    query = db.query(DailyActivity)
    if day:
        query = query.filter(DailyActivity.date == day)
    if activity_type:
        query = query.filter(DailyActivity.activity_type == activity_type)
    return query.order_by(DailyActivity.date.desc(), DailyActivity.created_at.asc()).all()


@router.post("", response_model=DailyActivityResponse, status_code=status.HTTP_201_CREATED)
def record_activity(activity: DailyActivityCreate, db: Session = Depends(get_db)):
    """
    Record a reading. Rows are never merged: a second reading of the same
    type on the same day is stored separately and wins in the summary.
    """
    db_activity = DailyActivity(**activity.model_dump())
    db.add(db_activity)
    db.commit()
    db.refresh(db_activity)
    logger.info(
        "Activity recorded",
        extra={"extra_fields": {"activity_id": str(db_activity.id), "activity_type": db_activity.activity_type}},
    )
    return db_activity


@router.get("/summary", response_model=ActivitySummaryResponse)
def get_summary(
    day: date = Query(..., alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    return summarize_activities(fetch_activities(db, day))


@router.delete("/{activity_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_activity(activity_id: UUID, db: Session = Depends(get_db)):
    db_activity = db.query(DailyActivity).filter(DailyActivity.id == activity_id).first()
    if not db_activity:
        logger.warning("Activity not found", extra={"extra_fields": {"activity_id": str(activity_id)}})
        raise NotFoundError("Activity")
    db.delete(db_activity)
    db.commit()
    logger.info("Activity deleted", extra={"extra_fields": {"activity_id": str(activity_id)}})
    return {"success": True}
