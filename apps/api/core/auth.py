"""
Authentication and authorization dependencies.

Provides FastAPI dependencies for:
- Resolving the session to the current user
- The single admin authorization predicate used by every admin-gated route
"""
import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import ForbiddenError, UnauthorizedError
from core.security import get_user_id_from_token
from models import User

logger = logging.getLogger(__name__)

# Use auto_error=False to handle missing credentials manually and return 401 (not 403)
security = HTTPBearer(auto_error=False)

ADMIN_ROLE = "admin"


def _resolve_user(credentials: Optional[HTTPAuthorizationCredentials], db: Session) -> Optional[User]:
    if not credentials:
        return None

    user_id = get_user_id_from_token(credentials.credentials)
    if not user_id:
        return None

    try:
        user_id_uuid = UUID(user_id)
    except ValueError:
        return None

    return db.query(User).filter(User.id == user_id_uuid).first()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Get the current authenticated user from the session token.

    Raises UnauthorizedError if the token is missing, invalid, or names
    an unknown user.
    """
    if not credentials:
        raise UnauthorizedError("Not authenticated")

    user = _resolve_user(credentials, db)
    if not user:
        raise UnauthorizedError("Invalid authentication credentials")
    return user


def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get the current authenticated user if a valid token is provided.

    Useful for endpoints that work both authenticated and unauthenticated.
    """
    return _resolve_user(credentials, db)


def is_admin(user: Optional[User]) -> bool:
    """Authorization predicate: does this session belong to an admin?"""
    return user is not None and user.role == ADMIN_ROLE


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not is_admin(current_user):
        logger.warning(
            "Non-admin user attempted admin action",
            extra={"extra_fields": {"user_id": str(current_user.id)}},
        )
        raise ForbiddenError("Admin access required")
    return current_user


def ensure_owner(resource_user_id, current_user: User, resource: str) -> None:
    """Raise ForbiddenError unless the resource belongs to the current user."""
    if str(resource_user_id) != str(current_user.id):
        logger.warning(
            f"User not authorized to modify {resource}",
            extra={"extra_fields": {"user_id": str(current_user.id), "resource": resource}},
        )
        raise ForbiddenError("Unauthorized")
