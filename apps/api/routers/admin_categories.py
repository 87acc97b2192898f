"""
Admin CMS: navigation categories.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from core.exceptions import NotFoundError
from models import AdminCategory, User
from schemas import AdminCategoryCreate, AdminCategoryResponse, AdminCategoryUpdate, DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/categories", tags=["admin-categories"])


def _get_category_or_404(db: Session, category_id: UUID) -> AdminCategory:
    category = db.query(AdminCategory).filter(AdminCategory.id == category_id).first()
    if not category:
        logger.warning("Category not found", extra={"extra_fields": {"category_id": str(category_id)}})
        raise NotFoundError("Category")
    return category


@router.get("", response_model=List[AdminCategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return db.query(AdminCategory).order_by(AdminCategory.display_order.desc()).all()


@router.post("", response_model=AdminCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category: AdminCategoryCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_category = AdminCategory(**category.model_dump())
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    logger.info("Category created", extra={"extra_fields": {"category_id": str(db_category.id), "admin_id": str(admin.id)}})
    return db_category


@router.put("/{category_id}", response_model=AdminCategoryResponse)
def update_category(
    category_id: UUID,
    update: AdminCategoryUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_category = _get_category_or_404(db, category_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(db_category, field, value)
    db.commit()
    db.refresh(db_category)
    logger.info("Category updated", extra={"extra_fields": {"category_id": str(category_id), "admin_id": str(admin.id)}})
    return db_category


@router.delete("/{category_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_category(
    category_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_category = _get_category_or_404(db, category_id)
    db.delete(db_category)
    db.commit()
    logger.info("Category deleted", extra={"extra_fields": {"category_id": str(category_id), "admin_id": str(admin.id)}})
    return {"success": True}
