"""
Program Insights Service

Trending ranks programs by adoption over the current window and reports
growth against the window immediately before it. The two windows are
contiguous and never overlap:

    previous: [today - 2w + 1, today - w]
    current:  [today - w + 1, today]

Everything is recomputed from raw analytics rows on each request.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import NotFoundError
from models import CommunityInsight, ProgramAnalytics, WellnessProgram
from services.presentation import style_for_program_type

logger = logging.getLogger(__name__)

MOST_POPULAR_TIME = "8:00 AM"
# Completion rate assumes 100 possible completions per analytics row
COMPLETIONS_PER_ROW = 100


@dataclass(frozen=True)
class DateWindow:
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def trending_windows(today: date, window_days: int = 7):
    """Return (current, previous) windows ending today."""
    current = DateWindow(start=today - timedelta(days=window_days - 1), end=today)
    previous = DateWindow(
        start=current.start - timedelta(days=window_days),
        end=current.start - timedelta(days=1),
    )
    return current, previous


def growth_percent(current: int, previous: int) -> float:
    """Week-over-week growth, one decimal. 0 when there is no baseline."""
    if previous == 0:
        return 0.0
    growth = 100 * (current - previous) / previous
    return math.floor(growth * 10 + 0.5) / 10


def sum_by_program(rows, window: DateWindow) -> Dict[UUID, int]:
    totals: Dict[UUID, int] = {}
    for row in rows:
        if window.contains(row.date):
            totals[row.program_id] = totals.get(row.program_id, 0) + (row.active_users or 0)
    return totals


def rank_trending(
    programs: Sequence,
    current_sums: Dict[UUID, int],
    previous_sums: Dict[UUID, int],
    limit: int = 5,
) -> List[Dict]:
    ranked = []
    for program in programs:
        participants = current_sums.get(program.id, 0)
        style = style_for_program_type(program.program_type)
        ranked.append({
            "id": program.id,
            "title": program.title,
            "category": program.program_type,
            "participants": participants,
            "growth": growth_percent(participants, previous_sums.get(program.id, 0)),
            "icon": style["icon"],
            "color": style["color"],
        })
    # sorted() is stable: ties keep catalog order
    ranked = sorted(ranked, key=lambda item: item["participants"], reverse=True)
    return ranked[:limit]


def compute_trending(db: Session, today: date) -> List[Dict]:
    current, previous = trending_windows(today, settings.TRENDING_WINDOW_DAYS)
    rows = db.query(ProgramAnalytics).filter(
        ProgramAnalytics.date >= previous.start,
        ProgramAnalytics.date <= current.end,
    ).all()
    programs = db.query(WellnessProgram).order_by(WellnessProgram.created_at.asc()).all()

    return rank_trending(
        programs,
        sum_by_program(rows, current),
        sum_by_program(rows, previous),
        limit=settings.TRENDING_LIMIT,
    )


def list_community_insights(db: Session) -> List[CommunityInsight]:
    return (
        db.query(CommunityInsight)
        .filter(CommunityInsight.is_active.is_(True))
        .order_by(CommunityInsight.display_order.asc(), CommunityInsight.created_at.desc())
        .all()
    )


def record_analytics(
    db: Session,
    program_id: UUID,
    day: date,
    active_users: int,
    completions: int,
) -> ProgramAnalytics:
    """Upsert the analytics row for (program, day)."""
    if not db.query(WellnessProgram).filter(WellnessProgram.id == program_id).first():
        raise NotFoundError("Program")

    row = db.query(ProgramAnalytics).filter(
        ProgramAnalytics.program_id == program_id,
        ProgramAnalytics.date == day,
    ).first()

    if row:
        row.active_users = active_users
        row.completions = completions
        logger.info("Analytics record updated", extra={"extra_fields": {"program_id": str(program_id), "date": str(day)}})
    else:
        row = ProgramAnalytics(
            program_id=program_id,
            date=day,
            active_users=active_users,
            completions=completions,
        )
        db.add(row)
        logger.info("Analytics record created", extra={"extra_fields": {"program_id": str(program_id), "date": str(day)}})

    db.commit()
    return row


def wellness_stats(db: Session, today: date) -> Dict:
    start = today - timedelta(days=settings.STATS_WINDOW_DAYS)
    rows = db.query(ProgramAnalytics).filter(
        ProgramAnalytics.date >= start,
        ProgramAnalytics.date <= today,
    ).all()

    total_active_users = max((r.active_users or 0 for r in rows), default=0)

    total_completions = sum(r.completions or 0 for r in rows)
    total_possible = len(rows) * COMPLETIONS_PER_ROW
    completion_rate = (
        int(math.floor(100 * total_completions / total_possible + 0.5)) if total_possible > 0 else 0
    )

    program_types = {p.id: p.program_type for p in db.query(WellnessProgram).all()}
    by_type: Dict[str, int] = {}
    for row in rows:
        program_type = program_types.get(row.program_id)
        if program_type:
            by_type[program_type] = by_type.get(program_type, 0) + (row.active_users or 0)

    trending_categories = [
        category for category, _ in sorted(by_type.items(), key=lambda kv: kv[1], reverse=True)[:3]
    ]

    return {
        "total_active_users": total_active_users,
        "most_popular_time": MOST_POPULAR_TIME,
        "completion_rate": completion_rate,
        "trending_categories": trending_categories,
    }
