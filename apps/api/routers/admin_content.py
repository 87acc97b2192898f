"""
Admin CMS: page content blocks.

Reads are public so the app can render managed copy. Mutations require
the admin role. Bodies and responses use camelCase keys.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from core.exceptions import NotFoundError
from models import AdminContent, User
from schemas import AdminContentCreate, AdminContentResponse, AdminContentUpdate, DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/content", tags=["admin-content"])


def _get_content_or_404(db: Session, content_id: UUID) -> AdminContent:
    content = db.query(AdminContent).filter(AdminContent.id == content_id).first()
    if not content:
        logger.warning("Content not found", extra={"extra_fields": {"content_id": str(content_id)}})
        raise NotFoundError("Content")
    return content


@router.get("", response_model=List[AdminContentResponse])
def list_content(db: Session = Depends(get_db)):
    return db.query(AdminContent).order_by(AdminContent.display_order.desc()).all()


@router.get("/{page_name}", response_model=List[AdminContentResponse])
def get_page_content(page_name: str, db: Session = Depends(get_db)):
    return (
        db.query(AdminContent)
        .filter(AdminContent.page_name == page_name)
        .order_by(AdminContent.display_order.desc())
        .all()
    )


@router.post("", response_model=AdminContentResponse, status_code=status.HTTP_201_CREATED)
def create_content(
    content: AdminContentCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_content = AdminContent(**content.model_dump())
    db.add(db_content)
    db.commit()
    db.refresh(db_content)
    logger.info(
        "Content created",
        extra={"extra_fields": {"content_id": str(db_content.id), "page_name": db_content.page_name, "admin_id": str(admin.id)}},
    )
    return db_content


@router.put("/{content_id}", response_model=AdminContentResponse)
def update_content(
    content_id: UUID,
    update: AdminContentUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_content = _get_content_or_404(db, content_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(db_content, field, value)
    db.commit()
    db.refresh(db_content)
    logger.info("Content updated", extra={"extra_fields": {"content_id": str(content_id), "admin_id": str(admin.id)}})
    return db_content


@router.delete("/{content_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_content(
    content_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_content = _get_content_or_404(db, content_id)
    db.delete(db_content)
    db.commit()
    logger.info("Content deleted", extra={"extra_fields": {"content_id": str(content_id), "admin_id": str(admin.id)}})
    return {"success": True}
