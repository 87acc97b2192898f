"""
Weekly quote

One quote per calendar week (weeks start on Monday). The first read of a
week generates and stores it; later reads return the stored row.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import WeeklyQuote

logger = logging.getLogger(__name__)


def week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _find(db: Session, start: date):
    return db.query(WeeklyQuote).filter(WeeklyQuote.week_start_date == start).first()


def _store(db: Session, start: date, text: str) -> WeeklyQuote:
    quote = WeeklyQuote(quote_text=text, week_start_date=start)
    db.add(quote)
    db.commit()
    db.refresh(quote)
    return quote


def get_or_create_weekly_quote(db: Session, today: date, generate: Callable[[], str]) -> WeeklyQuote:
    start = week_start(today)
    quote = _find(db, start)
    if quote:
        return quote

    text = generate()
    try:
        quote = _store(db, start, text)
    except IntegrityError:
        # Another request stored this week's quote first
        db.rollback()
        return _find(db, start)

    logger.info("Weekly quote generated", extra={"extra_fields": {"week_start_date": start.isoformat()}})
    return quote


def regenerate_weekly_quote(db: Session, today: date, generate: Callable[[], str]) -> WeeklyQuote:
    """Replace this week's quote. Generation runs first so a failure keeps the old one."""
    start = week_start(today)
    text = generate()

    existing = _find(db, start)
    if existing:
        existing.quote_text = text
        existing.created_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(existing)
        quote = existing
    else:
        quote = _store(db, start, text)

    logger.info("Weekly quote regenerated", extra={"extra_fields": {"week_start_date": start.isoformat()}})
    return quote
