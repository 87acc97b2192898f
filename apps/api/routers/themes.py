"""
Themes API Endpoints
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from core.exceptions import ConflictError
from models import User, VisualTheme
from schemas import ThemeCreate, ThemeResponse
from services.theme_store import format_theme, get_theme_or_404, reset_stores

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/themes", tags=["themes"])


@router.get("", response_model=List[ThemeResponse])
def list_themes(db: Session = Depends(get_db)):
    themes = (
        db.query(VisualTheme)
        .filter(VisualTheme.is_active.is_(True))
        .order_by(VisualTheme.created_at.asc())
        .all()
    )
    return [format_theme(t) for t in themes]


@router.get("/{theme_id}", response_model=ThemeResponse)
def get_theme(theme_id: UUID, db: Session = Depends(get_db)):
    return format_theme(get_theme_or_404(db, theme_id))


@router.post("", response_model=ThemeResponse, status_code=status.HTTP_201_CREATED)
def create_theme(
    theme: ThemeCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    if db.query(VisualTheme).filter(VisualTheme.theme_name == theme.theme_name).first():
        raise ConflictError("Theme name already exists")

    db_theme = VisualTheme(**theme.model_dump())
    db.add(db_theme)
    db.commit()
    db.refresh(db_theme)
    # Cached current themes may fall back to the new one
    reset_stores()
    logger.info("Theme created", extra={"extra_fields": {"theme_id": str(db_theme.id), "admin_id": str(admin.id)}})
    return format_theme(db_theme)
