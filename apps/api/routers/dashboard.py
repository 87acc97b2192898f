"""
Dashboard API Endpoints

One call returning every same-day summary plus goal progress.
"""
import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from schemas import DashboardOverviewResponse
from services.wellness_aggregation import compute_dashboard_overview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=DashboardOverviewResponse)
def get_overview(
    day: date = Query(..., alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    overview = compute_dashboard_overview(db, day)
    logger.info(
        "Dashboard overview computed",
        extra={"extra_fields": {"date": str(day), "goal_count": len(overview["goals_progress"])}},
    )
    return overview
