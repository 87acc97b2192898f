"""
Rhythm Visuals API Endpoints

Imagery for the seasonal-rhythm galleries, rotated by calendar month.
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from models import RhythmVisual, User
from schemas import RhythmVisualCreate, RhythmVisualResponse
from services.renewal_visuals import rhythm_visuals_for_month

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/visuals/rhythms", tags=["visuals"])


@router.get("", response_model=List[RhythmVisualResponse])
def list_rhythm_visuals(db: Session = Depends(get_db)):
    return rhythm_visuals_for_month(db, date.today().month)


@router.get("/{category}", response_model=List[RhythmVisualResponse])
def list_rhythm_visuals_by_category(category: str, db: Session = Depends(get_db)):
    return rhythm_visuals_for_month(db, date.today().month, category)


@router.post("", response_model=RhythmVisualResponse, status_code=status.HTTP_201_CREATED)
def create_rhythm_visual(
    visual: RhythmVisualCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_visual = RhythmVisual(**visual.model_dump())
    db.add(db_visual)
    db.commit()
    db.refresh(db_visual)
    logger.info("Rhythm visual created", extra={"extra_fields": {"visual_id": str(db_visual.id), "admin_id": str(admin.id)}})
    return db_visual
