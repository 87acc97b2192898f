"""
Insights API Endpoints

Trending programs, curated community insights, and the analytics feed
they are computed from.
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from schemas import (
    AnalyticsRecordRequest,
    CommunityInsightResponse,
    TrendingProgram,
    WellnessStatsResponse,
)
from services import program_insights

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("/trending", response_model=List[TrendingProgram])
def get_trending(db: Session = Depends(get_db)):
    return program_insights.compute_trending(db, date.today())


@router.get("/community", response_model=List[CommunityInsightResponse])
def get_community_insights(db: Session = Depends(get_db)):
    insights = program_insights.list_community_insights(db)
    return [
        {"id": i.id, "title": i.title, "description": i.description, "type": i.insight_type}
        for i in insights
    ]


@router.post("/analytics/record")
def record_analytics(request: AnalyticsRecordRequest, db: Session = Depends(get_db)):
    """Upsert a program's daily active users and completions."""
    program_insights.record_analytics(
        db,
        request.program_id,
        request.date,
        request.active_users,
        request.completions,
    )
    return {"success": True}


@router.get("/stats", response_model=WellnessStatsResponse)
def get_stats(db: Session = Depends(get_db)):
    return program_insights.wellness_stats(db, date.today())
