"""
Sleep Tools API Endpoints

Breathwork, ambient sounds and wind-down rituals. Premium tools are
listed without their content; opening one needs an active subscription
or the admin role.
"""
import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.auth import get_current_user_optional, require_admin
from core.database import get_db
from core.exceptions import ForbiddenError, NotFoundError
from models import SleepTool, User
from schemas import DeleteResponse, SleepToolCreate, SleepToolResponse, SleepToolUpdate
from services.subscription_access import has_premium_access

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sleep/tools", tags=["sleep-tools"])


def _tool_response(tool: SleepTool, unlocked: bool) -> dict:
    locked = tool.is_premium and not unlocked
    return {
        "id": tool.id,
        "tool_type": tool.tool_type,
        "title": tool.title,
        "description": tool.description,
        "content": None if locked else tool.content,
        "duration_minutes": tool.duration_minutes,
        "is_premium": tool.is_premium,
        "audio_url": None if locked else tool.audio_url,
        "locked": locked,
    }


def _get_tool_or_404(db: Session, tool_id: UUID) -> SleepTool:
    tool = db.query(SleepTool).filter(SleepTool.id == tool_id).first()
    if not tool:
        logger.warning("Sleep tool not found", extra={"extra_fields": {"tool_id": str(tool_id)}})
        raise NotFoundError("Sleep tool")
    return tool


@router.get("", response_model=List[SleepToolResponse])
def list_tools(
    tool_type: Optional[str] = Query(None, alias="type"),
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    query = db.query(SleepTool)
    if tool_type:
        query = query.filter(SleepTool.tool_type == tool_type)
    tools = query.order_by(SleepTool.is_premium.asc(), SleepTool.created_at.asc()).all()

    unlocked = has_premium_access(db, current_user)
    return [_tool_response(t, unlocked) for t in tools]


@router.get("/{tool_id}", response_model=SleepToolResponse)
def get_tool(
    tool_id: UUID,
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    tool = _get_tool_or_404(db, tool_id)
    if tool.is_premium and not has_premium_access(db, current_user):
        logger.warning("Premium sleep tool requested without access", extra={"extra_fields": {"tool_id": str(tool_id)}})
        raise ForbiddenError("Premium subscription required")
    return _tool_response(tool, unlocked=True)


@router.post("", response_model=SleepToolResponse, status_code=status.HTTP_201_CREATED)
def create_tool(
    tool: SleepToolCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_tool = SleepTool(**tool.model_dump())
    db.add(db_tool)
    db.commit()
    db.refresh(db_tool)
    logger.info("Sleep tool created", extra={"extra_fields": {"tool_id": str(db_tool.id), "admin_id": str(admin.id)}})
    return _tool_response(db_tool, unlocked=True)


@router.put("/{tool_id}", response_model=SleepToolResponse)
def update_tool(
    tool_id: UUID,
    update: SleepToolUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_tool = _get_tool_or_404(db, tool_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(db_tool, field, value)
    db.commit()
    db.refresh(db_tool)
    logger.info("Sleep tool updated", extra={"extra_fields": {"tool_id": str(tool_id), "admin_id": str(admin.id)}})
    return _tool_response(db_tool, unlocked=True)


@router.delete("/{tool_id}", response_model=DeleteResponse, response_model_exclude_none=True)
def delete_tool(
    tool_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    db_tool = _get_tool_or_404(db, tool_id)
    db.delete(db_tool)
    db.commit()
    logger.info("Sleep tool deleted", extra={"extra_fields": {"tool_id": str(tool_id), "admin_id": str(admin.id)}})
    return {"success": True}
