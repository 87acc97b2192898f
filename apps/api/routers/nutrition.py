"""
Nutrition API Endpoints

Meal logging and the per-day macro summary used by the dashboard and
calorie/protein goals.
"""
import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError
from models import NutritionLog
from schemas import DeleteResponse, NutritionLogCreate, NutritionLogResponse, NutritionSummaryResponse
from services.wellness_aggregation import fetch_nutrition, summarize_nutrition

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.get("/logs", response_model=List[NutritionLogResponse])
def list_logs(
    day: Optional[date] = Query(None, alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    query = db.query(NutritionLog)
    if day:
        query = query.filter(NutritionLog.date == day)
    return query.order_by(NutritionLog.date.desc(), NutritionLog.created_at.asc()).all()


@router.post("/logs", response_model=NutritionLogResponse, status_code=status.HTTP_201_CREATED)
def create_log(log: NutritionLogCreate, db: Session = Depends(get_db)):
    db_log = NutritionLog(**log.model_dump())
    db.add(db_log)
    db.commit()
    db.refresh(db_log)
    logger.info(
        "Nutrition log created",
        extra={"extra_fields": {"log_id": str(db_log.id), "date": str(db_log.date)}},
    )
    return db_log


@router.get("/summary", response_model=NutritionSummaryResponse)
def get_summary(
    day: date = Query(..., alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    """Macro totals for one day, plus the meals behind them."""
    meals = fetch_nutrition(db, day)
    return {**summarize_nutrition(meals), "meals": meals}


@router.delete("/logs/{log_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_log(log_id: UUID, db: Session = Depends(get_db)):
    db_log = db.query(NutritionLog).filter(NutritionLog.id == log_id).first()
    if not db_log:
        logger.warning("Nutrition log not found", extra={"extra_fields": {"log_id": str(log_id)}})
        raise NotFoundError("Nutrition log")
    db.delete(db_log)
    db.commit()
    logger.info("Nutrition log deleted", extra={"extra_fields": {"log_id": str(log_id)}})
    return {"success": True}
