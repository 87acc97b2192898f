"""
Daily Aggregation Service

Folds one calendar day of nutrition, workouts, meditation and daily
activities into summary numbers, and measures each active goal against
its target.

Dates are opaque keys: rows match on their stored `date` exactly, with
no timezone conversion. The weekly-workout goal is the only range read,
covering Sunday through the requested day inclusive.

Everything here is read-only. Storage errors propagate; there is no
per-family fallback.
"""

import logging
import math
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from models import (
    DailyActivity,
    MeditationSession,
    NutritionLog,
    WellnessGoal,
    Workout,
)
from services.presentation import ACTIVITY_SUMMARY_KEYS

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Pure folds over already-fetched rows
# ---------------------------------------------------------------------------

def _histogram(values: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def summarize_nutrition(rows) -> Dict[str, int]:
    return {
        "total_calories": sum(r.calories or 0 for r in rows),
        "total_protein": sum(r.protein or 0 for r in rows),
        "total_carbs": sum(r.carbs or 0 for r in rows),
        "total_fats": sum(r.fats or 0 for r in rows),
        "meal_count": len(rows),
    }


def summarize_workouts(rows) -> Dict:
    return {
        "total_workouts": len(rows),
        "total_duration": sum(r.duration_minutes or 0 for r in rows),
        "total_calories_burned": sum(r.calories_burned or 0 for r in rows),
        "workout_types": _histogram(r.workout_type for r in rows),
    }


def summarize_meditation(rows) -> Dict:
    return {
        "total_sessions": len(rows),
        "total_minutes": sum(r.duration_minutes or 0 for r in rows),
        "practice_breakdown": _histogram(r.practice_type for r in rows),
    }


def summarize_activities(rows) -> Dict[str, int]:
    """
    One scalar per activity type, 0 when absent.

    Rows must arrive in insertion order: a later row of the same type
    overwrites an earlier one.
    """
    summary = {key: 0 for key in ACTIVITY_SUMMARY_KEYS.values()}
    for row in rows:
        key = ACTIVITY_SUMMARY_KEYS.get(row.activity_type)
        if key is not None:
            summary[key] = row.value
    return summary


def week_start(day: date) -> date:
    """Most recent Sunday on or before `day`."""
    # date.weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def goal_percentage(current: int, target: int) -> int:
    if target > 0:
        return round_half_up(100 * current / target)
    return 0


def goal_progress(goal, current: int) -> Dict:
    return {
        "id": goal.id,
        "goal_type": goal.goal_type,
        "target": goal.target_value,
        "current": current,
        "percentage": goal_percentage(current, goal.target_value),
        "on_track": current >= goal.target_value,
    }


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def fetch_nutrition(db: Session, day: date) -> List[NutritionLog]:
    return db.query(NutritionLog).filter(NutritionLog.date == day).all()


def fetch_workouts(db: Session, day: date) -> List[Workout]:
    return db.query(Workout).filter(Workout.date == day).all()


def fetch_meditation(db: Session, day: date) -> List[MeditationSession]:
    return db.query(MeditationSession).filter(MeditationSession.date == day).all()


def fetch_activities(db: Session, day: date) -> List[DailyActivity]:
    return (
        db.query(DailyActivity)
        .filter(DailyActivity.date == day)
        .order_by(DailyActivity.created_at.asc())
        .all()
    )


def count_week_workouts(db: Session, day: date) -> int:
    return (
        db.query(Workout)
        .filter(Workout.date >= week_start(day), Workout.date <= day)
        .count()
    )


def active_goals(db: Session) -> List[WellnessGoal]:
    return (
        db.query(WellnessGoal)
        .filter(WellnessGoal.is_active.is_(True))
        .order_by(WellnessGoal.created_at.asc())
        .all()
    )


def _goal_current(
    db: Session,
    goal_type: str,
    day: date,
    nutrition: Dict,
    meditation: Dict,
    activities: Dict,
    week_workouts: Optional[int],
) -> int:
    if goal_type == "daily_calories":
        return nutrition["total_calories"]
    if goal_type == "daily_protein":
        return nutrition["total_protein"]
    if goal_type == "weekly_workouts":
        return week_workouts if week_workouts is not None else count_week_workouts(db, day)
    if goal_type == "daily_meditation":
        return meditation["total_minutes"]
    if goal_type == "daily_steps":
        return activities["steps"]
    if goal_type == "daily_water":
        return activities["water_glasses"]
    if goal_type == "daily_sleep":
        return activities["sleep_hours"]
    logger.warning(f"Unknown goal type {goal_type!r}; reporting 0 progress")
    return 0


def _progress_for_goals(db: Session, day: date, goals, nutrition, meditation, activities) -> List[Dict]:
    week_workouts = None
    if any(g.goal_type == "weekly_workouts" for g in goals):
        week_workouts = count_week_workouts(db, day)

    return [
        goal_progress(
            goal,
            _goal_current(db, goal.goal_type, day, nutrition, meditation, activities, week_workouts),
        )
        for goal in goals
    ]


def compute_goals_progress(db: Session, day: date) -> List[Dict]:
    """Progress of every active goal on `day`."""
    goals = active_goals(db)
    if not goals:
        return []

    nutrition = summarize_nutrition(fetch_nutrition(db, day))
    meditation = summarize_meditation(fetch_meditation(db, day))
    activities = summarize_activities(fetch_activities(db, day))
    return _progress_for_goals(db, day, goals, nutrition, meditation, activities)


def compute_dashboard_overview(db: Session, day: date) -> Dict:
    """All same-day summaries plus goal progress, in one object."""
    nutrition = summarize_nutrition(fetch_nutrition(db, day))
    workouts = summarize_workouts(fetch_workouts(db, day))
    meditation = summarize_meditation(fetch_meditation(db, day))
    activities = summarize_activities(fetch_activities(db, day))
    goals_progress = _progress_for_goals(db, day, active_goals(db), nutrition, meditation, activities)

    return {
        "date": day,
        "nutrition": nutrition,
        "workouts": workouts,
        "meditation": meditation,
        "activities": activities,
        "goals_progress": goals_progress,
    }


def meditation_streak(session_dates: Iterable[date], today: date) -> int:
    """Consecutive days, ending today, with at least one session."""
    days = set(session_dates)
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def compute_meditation_stats(db: Session, today: date) -> Dict:
    sessions = db.query(MeditationSession).all()
    stats = summarize_meditation(sessions)
    stats["current_streak"] = meditation_streak((s.date for s in sessions), today)
    return stats
