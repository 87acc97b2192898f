"""
Meditation API Endpoints
"""
import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError
from models import MeditationSession
from schemas import (
    DeleteResponse,
    MeditationSessionCreate,
    MeditationSessionResponse,
    MeditationStatsResponse,
)
from services.wellness_aggregation import compute_meditation_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/meditation", tags=["meditation"])


@router.get("/sessions", response_model=List[MeditationSessionResponse])
def list_sessions(
    day: Optional[date] = Query(None, alias="date", description="Date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    query = db.query(MeditationSession)
    if day:
        query = query.filter(MeditationSession.date == day)
    return query.order_by(MeditationSession.date.desc(), MeditationSession.created_at.asc()).all()


@router.post("/sessions", response_model=MeditationSessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(session: MeditationSessionCreate, db: Session = Depends(get_db)):
    db_session = MeditationSession(**session.model_dump())
    db.add(db_session)
    db.commit()
    db.refresh(db_session)
    logger.info(
        "Meditation session logged",
        extra={"extra_fields": {"session_id": str(db_session.id), "practice_type": db_session.practice_type}},
    )
    return db_session


@router.get("/stats", response_model=MeditationStatsResponse)
def get_stats(db: Session = Depends(get_db)):
    """All-time totals, practice breakdown and the current daily streak."""
    return compute_meditation_stats(db, date.today())


@router.delete("/sessions/{session_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_session(session_id: UUID, db: Session = Depends(get_db)):
    db_session = db.query(MeditationSession).filter(MeditationSession.id == session_id).first()
    if not db_session:
        logger.warning("Meditation session not found", extra={"extra_fields": {"session_id": str(session_id)}})
        raise NotFoundError("Meditation session")
    db.delete(db_session)
    db.commit()
    logger.info("Meditation session deleted", extra={"extra_fields": {"session_id": str(session_id)}})
    return {"success": True}
