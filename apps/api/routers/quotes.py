"""
Weekly Quote API Endpoints

Anyone can read the current week's quote; regenerating it is an admin
action.
"""
import logging
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from core.exceptions import ServiceUnavailableError
from models import User
from schemas import WeeklyQuoteResponse
from services import content_generation
from services.weekly_quotes import get_or_create_weekly_quote, regenerate_weekly_quote

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


def _generate_quote() -> str:
    try:
        return content_generation.generate_weekly_quote()
    except Exception as e:
        raise ServiceUnavailableError(f"Quote generation unavailable: {str(e)}")


@router.get("/current", response_model=WeeklyQuoteResponse)
def get_current_quote(db: Session = Depends(get_db)):
    """Generated on the first read of each week, then served from storage."""
    return get_or_create_weekly_quote(db, date.today(), _generate_quote)


@router.post("/regenerate", response_model=WeeklyQuoteResponse)
def regenerate_quote(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    quote = regenerate_weekly_quote(db, date.today(), _generate_quote)
    logger.info("Quote regenerated by admin", extra={"extra_fields": {"quote_id": str(quote.id), "admin_id": str(admin.id)}})
    return quote
