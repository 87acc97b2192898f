"""
Admin CMS: writing assistance.

Drafts and rewrites copy for content pages and plan cards. Nothing is
saved; editors paste the result into the regular CMS endpoints.
"""
import logging

from fastapi import APIRouter, Depends

from core.auth import require_admin
from core.exceptions import ServiceUnavailableError
from models import User
from schemas import (
    GenerateContentRequest,
    GenerateContentResponse,
    GenerateFeaturesRequest,
    GenerateFeaturesResponse,
    ImproveContentRequest,
    ImproveContentResponse,
)
from services import content_generation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/ai", tags=["admin-ai"])


@router.post("/generate-content", response_model=GenerateContentResponse)
def generate_content(request: GenerateContentRequest, admin: User = Depends(require_admin)):
    try:
        text = content_generation.generate_content(request.prompt, request.content_type, request.context)
    except Exception as e:
        raise ServiceUnavailableError(f"Content generation unavailable: {str(e)}")

    logger.info("Content generated", extra={"extra_fields": {"content_type": request.content_type, "admin_id": str(admin.id)}})
    return {"generated_content": text}


@router.post("/improve-content", response_model=ImproveContentResponse)
def improve_content(request: ImproveContentRequest, admin: User = Depends(require_admin)):
    try:
        text = content_generation.improve_content(request.content, request.improvement_type)
    except Exception as e:
        raise ServiceUnavailableError(f"Content generation unavailable: {str(e)}")

    logger.info("Content improved", extra={"extra_fields": {"improvement_type": request.improvement_type, "admin_id": str(admin.id)}})
    return {"improved_content": text}


@router.post("/generate-features", response_model=GenerateFeaturesResponse)
def generate_features(request: GenerateFeaturesRequest, admin: User = Depends(require_admin)):
    """Feature bullets for a subscription plan card."""
    try:
        features = content_generation.generate_plan_features(request.plan_name, request.plan_type)
    except Exception as e:
        raise ServiceUnavailableError(f"Content generation unavailable: {str(e)}")

    logger.info(
        "Plan features generated",
        extra={"extra_fields": {"plan_type": request.plan_type, "count": len(features), "admin_id": str(admin.id)}},
    )
    return {"features": features}
