"""
Program Enrollment Lifecycle

not_enrolled -> in_progress -> completed

An enrollment is created once per (user, program) and moves forward only
through `mark_day_complete`. The derived fields always satisfy:

- current_day == max(completed_days) + 1, or 1 before any day is done
- is_completed  <=> len(completed_days) == program.duration_days

Any existing row blocks a new enrollment, including a completed one, so a
finished program cannot be restarted. Days above duration_days are
accepted and push current_day past the end of the program.

Editing a program's duration re-derives is_completed for its enrollments,
so the invariant above holds across admin edits too.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Tuple
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from core.auth import ensure_owner
from core.exceptions import ConflictError, NotFoundError, ValidationError
from models import ProgramEnrollment, User, WellnessProgram

logger = logging.getLogger(__name__)


def apply_completed_day(completed_days: Iterable[int], day: int, duration_days: int) -> Tuple[List[int], int, bool]:
    """
    Add `day` to the completed set and recompute the derived fields.

    Returns (sorted_days, current_day, is_completed). Adding a day that is
    already present leaves the set unchanged.
    """
    days = sorted(set(int(d) for d in completed_days or []) | {int(day)})
    current_day = max(days) + 1
    is_completed = len(days) == duration_days
    return days, current_day, is_completed


def get_program_or_404(db: Session, program_id: UUID) -> WellnessProgram:
    program = db.query(WellnessProgram).filter(WellnessProgram.id == program_id).first()
    if not program:
        logger.warning("Program not found", extra={"extra_fields": {"program_id": str(program_id)}})
        raise NotFoundError("Program")
    return program


def _owned_enrollment(db: Session, user: User, enrollment_id: UUID) -> ProgramEnrollment:
    enrollment = db.query(ProgramEnrollment).filter(ProgramEnrollment.id == enrollment_id).first()
    if not enrollment:
        logger.warning("Enrollment not found", extra={"extra_fields": {"enrollment_id": str(enrollment_id)}})
        raise NotFoundError("Enrollment")
    ensure_owner(enrollment.user_id, user, "enrollment")
    return enrollment


def list_enrollments(db: Session, user: User) -> List[ProgramEnrollment]:
    return (
        db.query(ProgramEnrollment)
        .options(joinedload(ProgramEnrollment.program))
        .filter(ProgramEnrollment.user_id == user.id)
        .order_by(ProgramEnrollment.enrolled_at.asc())
        .all()
    )


def enroll(db: Session, user: User, program_id: UUID) -> ProgramEnrollment:
    get_program_or_404(db, program_id)

    existing = db.query(ProgramEnrollment).filter(
        ProgramEnrollment.user_id == user.id,
        ProgramEnrollment.program_id == program_id,
    ).first()
    if existing:
        logger.warning(
            "User already enrolled in program",
            extra={"extra_fields": {"user_id": str(user.id), "program_id": str(program_id)}},
        )
        raise ConflictError("Already enrolled in this program")

    enrollment = ProgramEnrollment(
        user_id=user.id,
        program_id=program_id,
        current_day=1,
        completed_days=[],
        is_completed=False,
    )
    db.add(enrollment)
    db.commit()
    db.refresh(enrollment)

    logger.info(
        "User enrolled successfully",
        extra={"extra_fields": {"enrollment_id": str(enrollment.id), "user_id": str(user.id)}},
    )
    return enrollment


def _set_progress(enrollment: ProgramEnrollment, days: List[int], is_completed: bool, now: datetime) -> None:
    if is_completed and not enrollment.is_completed:
        enrollment.completed_at = now
    elif not is_completed:
        enrollment.completed_at = None

    # Reassign so the JSON column is flagged dirty
    enrollment.completed_days = days
    enrollment.current_day = max(days) + 1 if days else 1
    enrollment.is_completed = is_completed


def mark_day_complete(db: Session, user: User, enrollment_id: UUID, day: int) -> ProgramEnrollment:
    enrollment = _owned_enrollment(db, user, enrollment_id)
    if day < 1:
        raise ValidationError("Day must be 1 or greater", field="day")
    program = get_program_or_404(db, enrollment.program_id)

    days, _, is_completed = apply_completed_day(
        enrollment.completed_days, day, program.duration_days
    )
    _set_progress(enrollment, days, is_completed, datetime.now(timezone.utc))

    db.commit()
    db.refresh(enrollment)

    logger.info(
        "Progress updated successfully",
        extra={
            "extra_fields": {
                "enrollment_id": str(enrollment.id),
                "completed_days": len(days),
                "is_completed": is_completed,
            }
        },
    )
    return enrollment


def check_program_days(daily_activities: Iterable[dict], duration_days: int) -> None:
    """Every scheduled day must fall within 1..duration_days."""
    outside = sorted({a["day"] for a in daily_activities if not 1 <= a["day"] <= duration_days})
    if outside:
        raise ValidationError(
            f"Activity days {outside} fall outside 1..{duration_days}",
            field="daily_activities",
        )


def update_program(db: Session, program: WellnessProgram, changes: dict) -> WellnessProgram:
    """
    Apply a partial admin edit.

    A new duration re-derives is_completed and completed_at for every
    enrollment of the program in the same transaction.
    """
    old_duration = program.duration_days
    for field, value in changes.items():
        setattr(program, field, value)
    check_program_days(program.daily_activities or [], program.duration_days)

    recomputed = 0
    if program.duration_days != old_duration:
        now = datetime.now(timezone.utc)
        enrollments = db.query(ProgramEnrollment).filter(ProgramEnrollment.program_id == program.id).all()
        for enrollment in enrollments:
            days = sorted(set(int(d) for d in enrollment.completed_days or []))
            _set_progress(enrollment, days, len(days) == program.duration_days, now)
        recomputed = len(enrollments)

    db.commit()
    db.refresh(program)

    if recomputed:
        logger.info(
            "Enrollments recomputed for new program duration",
            extra={
                "extra_fields": {
                    "program_id": str(program.id),
                    "duration_days": program.duration_days,
                    "enrollments": recomputed,
                }
            },
        )
    return program


def unenroll(db: Session, user: User, enrollment_id: UUID) -> None:
    enrollment = _owned_enrollment(db, user, enrollment_id)
    db.delete(enrollment)
    db.commit()
    logger.info(
        "User unenrolled successfully",
        extra={"extra_fields": {"enrollment_id": str(enrollment_id), "user_id": str(user.id)}},
    )
