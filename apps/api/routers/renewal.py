"""
Renewal API Endpoints

Saved programs, rituals and tools for the authenticated user, and the
seasonal visual shown on the renewal screen.
"""
import logging
from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import ensure_owner, get_current_user
from core.database import get_db
from core.exceptions import ConflictError, NotFoundError
from models import SavedRenewalItem, User
from schemas import DeleteResponse, RenewalVisualResponse, SavedItemCreate, SavedItemPause, SavedItemResponse
from services.renewal_visuals import select_renewal_visual

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/renewal", tags=["renewal"])


def _owned_item(db: Session, user: User, item_id: UUID) -> SavedRenewalItem:
    item = db.query(SavedRenewalItem).filter(SavedRenewalItem.id == item_id).first()
    if not item:
        logger.warning("Saved item not found", extra={"extra_fields": {"saved_item_id": str(item_id)}})
        raise NotFoundError("Saved item")
    ensure_owner(item.user_id, user, "saved item")
    return item


@router.get("/saved-items", response_model=List[SavedItemResponse])
def list_saved_items(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return (
        db.query(SavedRenewalItem)
        .filter(SavedRenewalItem.user_id == current_user.id)
        .order_by(SavedRenewalItem.saved_at.desc())
        .all()
    )


@router.post("/saved-items", response_model=SavedItemResponse, status_code=status.HTTP_201_CREATED)
def save_item(
    request: SavedItemCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    existing = db.query(SavedRenewalItem).filter(
        SavedRenewalItem.user_id == current_user.id,
        SavedRenewalItem.item_id == request.item_id,
    ).first()
    if existing:
        logger.warning(
            "Item already saved",
            extra={"extra_fields": {"user_id": str(current_user.id), "item_id": request.item_id}},
        )
        raise ConflictError("Item already saved")

    item = SavedRenewalItem(user_id=current_user.id, item_type=request.item_type, item_id=request.item_id)
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info(
        "Renewal item saved",
        extra={"extra_fields": {"saved_item_id": str(item.id), "user_id": str(current_user.id)}},
    )
    return item


@router.put("/saved-items/{item_id}/pause", response_model=SavedItemResponse)
def set_paused(
    item_id: UUID,
    request: SavedItemPause,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = _owned_item(db, current_user, item_id)
    item.is_paused = request.is_paused
    db.commit()
    db.refresh(item)
    logger.info(
        "Saved item pause toggled",
        extra={"extra_fields": {"saved_item_id": str(item_id), "is_paused": request.is_paused}},
    )
    return item


@router.delete("/saved-items/{item_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def remove_saved_item(
    item_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = _owned_item(db, current_user, item_id)
    db.delete(item)
    db.commit()
    logger.info("Saved item removed", extra={"extra_fields": {"saved_item_id": str(item_id)}})
    return {"success": True, "id": item_id}


@router.get("/visuals/current", response_model=RenewalVisualResponse)
def get_current_visual(db: Session = Depends(get_db)):
    return select_renewal_visual(db, date.today())
