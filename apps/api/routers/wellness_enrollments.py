"""
Program Enrollment API Endpoints

All routes act on the authenticated user's own enrollments.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import get_current_user
from core.database import get_db
from models import User
from schemas import (
    DeleteResponse,
    EnrollmentCreate,
    EnrollmentProgressUpdate,
    EnrollmentResponse,
    EnrollmentWithProgram,
)
from services import program_enrollment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wellness/enrollments", tags=["wellness-enrollments"])


@router.get("", response_model=List[EnrollmentWithProgram])
def list_enrollments(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return program_enrollment.list_enrollments(db, current_user)


@router.post("", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def enroll(
    request: EnrollmentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Enroll in a program. 409 if any enrollment already exists, completed or not."""
    return program_enrollment.enroll(db, current_user, request.program_id)


@router.put("/{enrollment_id}/progress", response_model=EnrollmentResponse)
def mark_day_complete(
    enrollment_id: UUID,
    update: EnrollmentProgressUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark a day complete. Repeating a day is a no-op on the completed set."""
    return program_enrollment.mark_day_complete(db, current_user, enrollment_id, update.day)


@router.delete("/{enrollment_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def unenroll(
    enrollment_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    program_enrollment.unenroll(db, current_user, enrollment_id)
    return {"success": True, "id": enrollment_id}
