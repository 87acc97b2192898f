"""
Journal API Endpoints

Free-form journal entries with optional mood, energy and intention.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError
from models import JournalEntry
from schemas import DeleteResponse, JournalEntryCreate, JournalEntryResponse, JournalEntryUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/journal", tags=["journal"])


def _get_entry_or_404(db: Session, entry_id: UUID) -> JournalEntry:
    entry = db.query(JournalEntry).filter(JournalEntry.id == entry_id).first()
    if not entry:
        logger.warning("Journal entry not found", extra={"extra_fields": {"entry_id": str(entry_id)}})
        raise NotFoundError("Journal entry")
    return entry


@router.get("/entries", response_model=List[JournalEntryResponse])
def list_entries(db: Session = Depends(get_db)):
    """All journal entries, newest first."""
    return db.query(JournalEntry).order_by(JournalEntry.created_at.desc()).all()


@router.post("/entries", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(entry: JournalEntryCreate, db: Session = Depends(get_db)):
    db_entry = JournalEntry(**entry.model_dump())
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    logger.info("Journal entry created", extra={"extra_fields": {"entry_id": str(db_entry.id)}})
    return db_entry


@router.get("/entries/{entry_id}", response_model=JournalEntryResponse)
def get_entry(entry_id: UUID, db: Session = Depends(get_db)):
    return _get_entry_or_404(db, entry_id)


@router.put("/entries/{entry_id}", response_model=JournalEntryResponse)
def update_entry(entry_id: UUID, update: JournalEntryUpdate, db: Session = Depends(get_db)):
    """Partial update: only the fields present in the body change."""
    db_entry = _get_entry_or_404(db, entry_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(db_entry, field, value)
    db.commit()
    db.refresh(db_entry)
    logger.info("Journal entry updated", extra={"extra_fields": {"entry_id": str(entry_id)}})
    return db_entry


@router.delete("/entries/{entry_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_entry(entry_id: UUID, db: Session = Depends(get_db)):
    db_entry = _get_entry_or_404(db, entry_id)
    db.delete(db_entry)
    db.commit()
    logger.info("Journal entry deleted", extra={"extra_fields": {"entry_id": str(entry_id)}})
    return {"success": True}
