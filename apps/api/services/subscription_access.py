"""
Subscription status and premium access.

There is no payment provider: activation is a direct state change. A
premium subscription runs for PREMIUM_SUBSCRIPTION_DAYS, a lifetime one
never expires. Expired subscriptions are deactivated lazily on read.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from core.auth import is_admin
from core.config import settings
from models import User, UserSubscription

logger = logging.getLogger(__name__)

PREMIUM_TIERS = ("premium", "lifetime")


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_subscription_status(db: Session, user: User, now: Optional[datetime] = None) -> UserSubscription:
    now = now or datetime.now(timezone.utc)
    subscription = db.query(UserSubscription).filter(UserSubscription.user_id == user.id).first()

    if subscription is None:
        subscription = UserSubscription(user_id=user.id, subscription_tier="free", is_active=False)
        db.add(subscription)
        db.commit()
        db.refresh(subscription)
        logger.info("Created free subscription record", extra={"extra_fields": {"user_id": str(user.id)}})
        return subscription

    expires_at = _as_utc(subscription.expires_at)
    if subscription.is_active and expires_at is not None and expires_at < now:
        subscription.is_active = False
        db.commit()
        db.refresh(subscription)
        logger.info("Subscription expired", extra={"extra_fields": {"user_id": str(user.id)}})

    return subscription


def activate_subscription(db: Session, user: User, tier: str, now: Optional[datetime] = None) -> UserSubscription:
    now = now or datetime.now(timezone.utc)
    subscription = get_subscription_status(db, user, now)

    subscription.subscription_tier = tier
    subscription.is_active = True
    subscription.started_at = now
    subscription.expires_at = (
        now + timedelta(days=settings.PREMIUM_SUBSCRIPTION_DAYS) if tier == "premium" else None
    )

    db.commit()
    db.refresh(subscription)
    logger.info(
        "Subscription activated",
        extra={"extra_fields": {"user_id": str(user.id), "tier": tier}},
    )
    return subscription


def has_premium_access(db: Session, user: Optional[User]) -> bool:
    if user is None:
        return False
    if is_admin(user):
        return True
    subscription = get_subscription_status(db, user)
    return subscription.is_active and subscription.subscription_tier in PREMIUM_TIERS
