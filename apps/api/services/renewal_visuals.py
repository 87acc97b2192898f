"""
Seasonal imagery selection for the renewal screen and rhythm galleries.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from models import RenewalVisual, RhythmVisual

logger = logging.getLogger(__name__)


def season_for_month(month: int) -> str:
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "fall"
    return "winter"


def day_of_week_sunday_zero(day: date) -> int:
    # date.weekday(): Monday=0 .. Sunday=6
    return (day.weekday() + 1) % 7


def select_renewal_visual(db: Session, today: date) -> RenewalVisual:
    """First match of: seasonal, monthly, daily, then any visual. Ties go to the lowest id."""
    query = db.query(RenewalVisual)
    candidates = [
        query.filter(
            RenewalVisual.visual_type == "seasonal",
            RenewalVisual.season == season_for_month(today.month),
        ),
        query.filter(
            RenewalVisual.visual_type == "monthly",
            RenewalVisual.month == today.month,
        ),
        query.filter(
            RenewalVisual.visual_type == "daily",
            RenewalVisual.day_of_week == day_of_week_sunday_zero(today),
        ),
        query,
    ]

    for candidate in candidates:
        visual: Optional[RenewalVisual] = candidate.order_by(RenewalVisual.id.asc()).first()
        if visual is not None:
            return visual

    logger.warning("No renewal visuals available")
    raise NotFoundError("Renewal visual")


def rhythm_visuals_for_month(db: Session, month: int, category: Optional[str] = None) -> List[RhythmVisual]:
    query = db.query(RhythmVisual).filter(RhythmVisual.month_active == month)
    if category:
        query = query.filter(RhythmVisual.rhythm_category == category)
    return query.order_by(RhythmVisual.display_order.asc()).all()
