"""
Wellness Programs API Endpoints

Programs are admin-authored, fixed-length curricula. Anyone can browse
them; creating, editing and deleting require the admin role.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.database import get_db
from models import ProgramAnalytics, ProgramEnrollment, User, WellnessProgram
from schemas import DeleteResponse, ProgramCreate, ProgramListItem, ProgramResponse, ProgramUpdate
from services.presentation import style_for_program_type
from services import program_enrollment
from services.program_enrollment import get_program_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wellness/programs", tags=["wellness-programs"])


def _list_item(program: WellnessProgram) -> dict:
    return {
        "id": program.id,
        "program_type": program.program_type,
        "title": program.title,
        "description": program.description,
        "duration_days": program.duration_days,
        "is_premium": program.is_premium,
        "image_url": program.image_url,
        "created_at": program.created_at,
        **style_for_program_type(program.program_type),
    }


@router.get("", response_model=List[ProgramListItem])
def list_programs(db: Session = Depends(get_db)):
    programs = db.query(WellnessProgram).order_by(WellnessProgram.created_at.asc()).all()
    return [_list_item(p) for p in programs]


@router.get("/{program_id}", response_model=ProgramResponse)
def get_program(program_id: UUID, db: Session = Depends(get_db)):
    return get_program_or_404(db, program_id)


@router.post("", response_model=ProgramResponse, status_code=status.HTTP_201_CREATED)
def create_program(
    program: ProgramCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_program = WellnessProgram(**program.model_dump())
    db.add(db_program)
    db.commit()
    db.refresh(db_program)
    logger.info(
        "Program created",
        extra={"extra_fields": {"program_id": str(db_program.id), "admin_id": str(admin.id)}},
    )
    return db_program


@router.put("/{program_id}", response_model=ProgramResponse)
def update_program(
    program_id: UUID,
    update: ProgramUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_program = program_enrollment.update_program(
        db, get_program_or_404(db, program_id), update.model_dump(exclude_unset=True)
    )
    logger.info(
        "Program updated",
        extra={"extra_fields": {"program_id": str(program_id), "admin_id": str(admin.id)}},
    )
    return db_program


@router.delete("/{program_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_program(
    program_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Deletes the program together with its enrollments and analytics."""
    db_program = get_program_or_404(db, program_id)

    enrollments = db.query(ProgramEnrollment).filter(ProgramEnrollment.program_id == program_id).delete()
    analytics = db.query(ProgramAnalytics).filter(ProgramAnalytics.program_id == program_id).delete()
    db.delete(db_program)
    db.commit()

    logger.info(
        "Program deleted",
        extra={
            "extra_fields": {
                "program_id": str(program_id),
                "admin_id": str(admin.id),
                "enrollments_removed": enrollments,
                "analytics_removed": analytics,
            }
        },
    )
    return {"success": True}
