"""
Admin CMS: subscription plan catalog.

Plans are display records (name, price string, feature bullets). They are
not wired to any payment provider.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from core.exceptions import NotFoundError
from models import SubscriptionPlan, User
from schemas import DeleteResponse, SubscriptionPlanCreate, SubscriptionPlanResponse, SubscriptionPlanUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/subscriptions", tags=["admin-subscriptions"])


def _get_plan_or_404(db: Session, plan_id: UUID) -> SubscriptionPlan:
    plan = db.query(SubscriptionPlan).filter(SubscriptionPlan.id == plan_id).first()
    if not plan:
        logger.warning("Subscription plan not found", extra={"extra_fields": {"plan_id": str(plan_id)}})
        raise NotFoundError("Subscription plan")
    return plan


@router.get("", response_model=List[SubscriptionPlanResponse])
def list_plans(db: Session = Depends(get_db)):
    return db.query(SubscriptionPlan).order_by(SubscriptionPlan.display_order.desc()).all()


@router.post("", response_model=SubscriptionPlanResponse, status_code=status.HTTP_201_CREATED)
def create_plan(
    plan: SubscriptionPlanCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_plan = SubscriptionPlan(**plan.model_dump())
    db.add(db_plan)
    db.commit()
    db.refresh(db_plan)
    logger.info("Subscription plan created", extra={"extra_fields": {"plan_id": str(db_plan.id), "admin_id": str(admin.id)}})
    return db_plan


@router.put("/{plan_id}", response_model=SubscriptionPlanResponse)
def update_plan(
    plan_id: UUID,
    update: SubscriptionPlanUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_plan = _get_plan_or_404(db, plan_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(db_plan, field, value)
    db.commit()
    db.refresh(db_plan)
    logger.info("Subscription plan updated", extra={"extra_fields": {"plan_id": str(plan_id), "admin_id": str(admin.id)}})
    return db_plan


@router.delete("/{plan_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_plan(
    plan_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_plan = _get_plan_or_404(db, plan_id)
    db.delete(db_plan)
    db.commit()
    logger.info("Subscription plan deleted", extra={"extra_fields": {"plan_id": str(plan_id), "admin_id": str(admin.id)}})
    return {"success": True}
