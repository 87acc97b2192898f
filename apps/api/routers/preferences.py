"""
Preferences API Endpoints

Theme selection per user. Requests without a session share the default
preferences record. Writes go through the per-key ThemeStore so the
cached current theme follows them.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import get_current_user_optional
from core.database import get_db
from models import User
from schemas import PreferencesResponse, PreferencesUpdate, ThemeResponse
from services.theme_store import (
    get_or_create_preferences,
    preferences_key,
    preferences_response,
    store_for,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesResponse)
def get_preferences(
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    """Created with defaults on first read."""
    prefs = get_or_create_preferences(db, preferences_key(current_user))
    return preferences_response(db, prefs)


@router.put("", response_model=PreferencesResponse)
def put_preferences(
    update: PreferencesUpdate,
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    key = preferences_key(current_user)
    store = store_for(key)

    if update.selected_theme_id is not None:
        store.select(update.selected_theme_id)
    if update.auto_theme_by_time is not None:
        store.set_auto(update.auto_theme_by_time)

    return preferences_response(db, get_or_create_preferences(db, key))


@router.get("/current-theme", response_model=ThemeResponse)
def get_current_theme(current_user: Optional[User] = Depends(get_current_user_optional)):
    return store_for(preferences_key(current_user)).current()
