"""
Subscription API Endpoints

Status and activation for the authenticated user. No payment provider is
involved; activation is a direct state change.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import get_current_user
from core.database import get_db
from models import User
from schemas import SubscriptionActivate, SubscriptionStatusResponse
from services.subscription_access import activate_subscription, get_subscription_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/subscriptions", tags=["subscriptions"])


@router.get("/status", response_model=SubscriptionStatusResponse)
def get_status(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_subscription_status(db, current_user)


@router.post("/activate", response_model=SubscriptionStatusResponse)
def activate(
    request: SubscriptionActivate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return activate_subscription(db, current_user, request.tier)
