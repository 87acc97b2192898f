"""
Image uploads for CMS content.

Admins upload images; the stored files are served back publicly from
/uploads/<filename> so content rows can reference them by URL.
"""
import logging
import os
import secrets
import time
from pathlib import Path

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from core.auth import require_admin
from core.config import settings
from core.exceptions import BadRequestError, ForbiddenError, NotFoundError, PayloadTooLargeError
from models import User
from schemas import ImageUploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])

IMAGE_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def _uploads_dir() -> Path:
    return Path(settings.UPLOADS_DIR).resolve()


def _stored_name(ext: str) -> str:
    return f"{int(time.time() * 1000)}-{secrets.token_hex(3)}{ext}"


@router.post("/api/admin/upload/image", response_model=ImageUploadResponse)
async def upload_image(
    file: UploadFile = File(...),
    admin: User = Depends(require_admin),
):
    ext = os.path.splitext(os.path.basename(file.filename or ""))[1].lower()
    if ext not in IMAGE_TYPES:
        logger.warning("Invalid file type uploaded", extra={"extra_fields": {"filename": file.filename}})
        raise BadRequestError("Invalid file type. Only images are allowed.")

    uploads_dir = _uploads_dir()
    uploads_dir.mkdir(parents=True, exist_ok=True)
    filename = _stored_name(ext)
    stored_path = uploads_dir / filename

    total = 0
    try:
        with stored_path.open("wb") as out:
            while True:
                chunk = await file.read(1024 * 1024)
                if not chunk:
                    break
                total += len(chunk)
                if total > settings.UPLOAD_MAX_FILE_BYTES:
                    raise PayloadTooLargeError()
                out.write(chunk)
    except PayloadTooLargeError:
        stored_path.unlink(missing_ok=True)
        logger.warning("Upload exceeded size limit", extra={"extra_fields": {"filename": file.filename}})
        raise
    finally:
        await file.close()

    logger.info(
        "Image uploaded",
        extra={"extra_fields": {"filename": filename, "size": total, "admin_id": str(admin.id)}},
    )
    return {"url": f"/uploads/{filename}", "filename": filename}


@router.get("/uploads/{filename}")
def get_upload(filename: str):
    uploads_dir = _uploads_dir()
    path = (uploads_dir / filename).resolve()
    if path.parent != uploads_dir:
        logger.warning("Directory traversal attempt", extra={"extra_fields": {"filename": filename}})
        raise ForbiddenError("Forbidden")
    if not path.is_file():
        raise NotFoundError("File")

    media_type = IMAGE_TYPES.get(path.suffix.lower(), "application/octet-stream")
    return FileResponse(path, media_type=media_type)
