"""
Theme Store

Visual themes are palettes of seven colors. A user's preferences either
pin one theme or follow the time of day:

    05:00-11:59  Energizing Dawn
    12:00-16:59  Warm Earth
    17:00-20:59  Deep Grounding
    otherwise    Neutral Calm

`ThemeStore` is the read-through cache clients hold on to. It loads the
resolved palette once and refreshes when the selection changes through
the store itself, or when auto mode crosses into another hour band.
`store_for(key)` keeps one store per preferences key for the process.
"""

import logging
import threading
from collections import OrderedDict
from datetime import datetime
from typing import Callable, Dict, Optional, Union
from uuid import UUID

from sqlalchemy.orm import Session

from core.config import settings
from core.database import SessionLocal
from core.exceptions import NotFoundError
from models import User, UserPreferences, VisualTheme

logger = logging.getLogger(__name__)

COLOR_FIELDS = (
    "background_color",
    "card_color",
    "text_color",
    "text_secondary_color",
    "primary_color",
    "secondary_color",
    "accent_color",
)


def theme_name_for_hour(hour: int) -> str:
    if 5 <= hour < 12:
        return "Energizing Dawn"
    if 12 <= hour < 17:
        return "Warm Earth"
    if 17 <= hour < 21:
        return "Deep Grounding"
    return "Neutral Calm"


def format_theme(theme: VisualTheme) -> Dict:
    return {
        "id": theme.id,
        "theme_name": theme.theme_name,
        "colors": {field: getattr(theme, field) for field in COLOR_FIELDS},
        "is_active": theme.is_active,
    }


def preferences_key(user: Optional[User]) -> str:
    """Preferences belong to the session's user, or to the shared default."""
    return str(user.id) if user is not None else settings.DEFAULT_PREFERENCES_USER_ID


def get_or_create_preferences(db: Session, key: str) -> UserPreferences:
    prefs = db.query(UserPreferences).filter(UserPreferences.user_id == key).first()
    if prefs:
        return prefs

    prefs = UserPreferences(user_id=key, auto_theme_by_time=False)
    db.add(prefs)
    db.commit()
    db.refresh(prefs)
    logger.info("Created default preferences", extra={"extra_fields": {"user_id": key}})
    return prefs


def get_theme_or_404(db: Session, theme_id: UUID) -> VisualTheme:
    theme = db.query(VisualTheme).filter(VisualTheme.id == theme_id).first()
    if not theme:
        logger.warning("Theme not found", extra={"extra_fields": {"theme_id": str(theme_id)}})
        raise NotFoundError("Theme")
    return theme


def update_preferences(
    db: Session,
    key: str,
    selected_theme_id: Optional[UUID] = None,
    auto_theme_by_time: Optional[bool] = None,
) -> UserPreferences:
    """Upsert: only the fields that are given change."""
    prefs = get_or_create_preferences(db, key)

    if selected_theme_id is not None:
        get_theme_or_404(db, selected_theme_id)
        prefs.selected_theme_id = selected_theme_id
    if auto_theme_by_time is not None:
        prefs.auto_theme_by_time = auto_theme_by_time

    db.commit()
    db.refresh(prefs)
    logger.info("Preferences updated", extra={"extra_fields": {"user_id": key}})
    return prefs


def resolve_current_theme(db: Session, prefs: Optional[UserPreferences], now: datetime) -> VisualTheme:
    """
    Pick the palette to show right now.

    Order: time-of-day theme when auto mode is on, then the pinned theme,
    then the first active theme.
    """
    theme = None

    if prefs is not None and prefs.auto_theme_by_time:
        name = theme_name_for_hour(now.hour)
        theme = db.query(VisualTheme).filter(VisualTheme.theme_name == name).first()

    if theme is None and prefs is not None and prefs.selected_theme_id:
        theme = db.query(VisualTheme).filter(VisualTheme.id == prefs.selected_theme_id).first()

    if theme is None:
        theme = (
            db.query(VisualTheme)
            .filter(VisualTheme.is_active.is_(True))
            .order_by(VisualTheme.created_at.asc())
            .first()
        )

    if theme is None:
        raise NotFoundError("Theme")
    return theme


def preferences_response(db: Session, prefs: UserPreferences) -> Dict:
    theme_details = None
    if prefs.selected_theme_id:
        theme = db.query(VisualTheme).filter(VisualTheme.id == prefs.selected_theme_id).first()
        if theme:
            theme_details = format_theme(theme)
    return {
        "id": prefs.id,
        "selected_theme_id": prefs.selected_theme_id,
        "auto_theme_by_time": prefs.auto_theme_by_time,
        "theme_details": theme_details,
    }


class DatabasePreferencesSource:
    """
    Preferences source backed by the user_preferences table.

    Opens its own short-lived session per call, so a store holding it can
    outlive the request that created it.
    """

    def __init__(
        self,
        key: str,
        session_factory: Callable[[], Session] = SessionLocal,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.key = key
        self.session_factory = session_factory
        self.clock = clock
        self.auto_theme_by_time = False

    def fetch(self) -> Dict:
        db = self.session_factory()
        try:
            prefs = get_or_create_preferences(db, self.key)
            self.auto_theme_by_time = prefs.auto_theme_by_time
            return format_theme(resolve_current_theme(db, prefs, self.clock()))
        finally:
            db.close()

    def save(self, **changes) -> None:
        db = self.session_factory()
        try:
            update_preferences(db, self.key, **changes)
        finally:
            db.close()

    def cache_key(self) -> Optional[str]:
        """In auto mode the palette changes with the hour band."""
        if self.auto_theme_by_time:
            return theme_name_for_hour(self.clock().hour)
        return None


class ThemeStore:
    """
    Read-through cache over a preferences source.

    The source exposes `fetch()` returning the resolved theme,
    `save(**changes)` persisting selected_theme_id / auto_theme_by_time, and
    `cache_key()`; a change in the key since the last fetch forces a reload.
    """

    def __init__(self, source):
        self._source = source
        self._theme: Optional[Dict] = None
        self._key: Optional[str] = None

    def current(self) -> Dict:
        if self._theme is None or self._source.cache_key() != self._key:
            self._theme = self._source.fetch()
            self._key = self._source.cache_key()
        return self._theme

    def select(self, theme_id: Union[UUID, str]) -> Dict:
        self._source.save(selected_theme_id=theme_id)
        return self._reload()

    def set_auto(self, enabled: bool) -> Dict:
        self._source.save(auto_theme_by_time=enabled)
        return self._reload()

    def invalidate(self) -> None:
        self._theme = None

    def _reload(self) -> Dict:
        self.invalidate()
        return self.current()


_stores: "OrderedDict[str, ThemeStore]" = OrderedDict()
_stores_lock = threading.Lock()


def store_for(key: str) -> ThemeStore:
    """
    The process-wide store for a preferences key.

    Least recently used stores are dropped past THEME_STORE_MAX_ENTRIES.
    Preference writes must go through the store so its cache stays current.
    """
    with _stores_lock:
        store = _stores.get(key)
        if store is None:
            store = ThemeStore(DatabasePreferencesSource(key))
            _stores[key] = store
            while len(_stores) > settings.THEME_STORE_MAX_ENTRIES:
                _stores.popitem(last=False)
        else:
            _stores.move_to_end(key)
        return store


def reset_stores() -> None:
    with _stores_lock:
        _stores.clear()
