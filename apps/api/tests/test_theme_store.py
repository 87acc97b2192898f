"""
Tests for theme resolution and the ThemeStore cache.
"""
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from core.config import settings
from core.exceptions import NotFoundError
from models import UserPreferences, VisualTheme
from services.theme_store import (
    DatabasePreferencesSource,
    ThemeStore,
    format_theme,
    resolve_current_theme,
    store_for,
    theme_name_for_hour,
)

PALETTE = dict(
    background_color="#ffffff",
    card_color="#eeeeee",
    text_color="#111111",
    text_secondary_color="#444444",
    primary_color="#aa0000",
    secondary_color="#00aa00",
    accent_color="#0000aa",
)


def _add_themes(db_session, *names):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    themes = [
        VisualTheme(theme_name=name, created_at=base + timedelta(minutes=i), **PALETTE)
        for i, name in enumerate(names)
    ]
    db_session.add_all(themes)
    db_session.commit()
    return themes


@pytest.mark.parametrize(
    "hour,name",
    [
        (5, "Energizing Dawn"),
        (11, "Energizing Dawn"),
        (12, "Warm Earth"),
        (16, "Warm Earth"),
        (17, "Deep Grounding"),
        (20, "Deep Grounding"),
        (21, "Neutral Calm"),
        (0, "Neutral Calm"),
        (4, "Neutral Calm"),
    ],
)
def test_theme_name_for_hour(hour, name):
    assert theme_name_for_hour(hour) == name


def test_format_theme_groups_colors(db_session):
    [theme] = _add_themes(db_session, "Warm Earth")
    formatted = format_theme(theme)
    assert formatted["theme_name"] == "Warm Earth"
    assert formatted["colors"]["accent_color"] == "#0000aa"
    assert set(formatted["colors"]) == set(PALETTE)


class TestResolveCurrentTheme:
    def test_auto_mode_uses_hour(self, db_session):
        _add_themes(db_session, "Warm Earth", "Energizing Dawn")
        prefs = UserPreferences(user_id="u", auto_theme_by_time=True)
        theme = resolve_current_theme(db_session, prefs, datetime(2024, 6, 1, 7, 0))
        assert theme.theme_name == "Energizing Dawn"

    def test_selected_theme_when_not_auto(self, db_session):
        warm, dawn = _add_themes(db_session, "Warm Earth", "Energizing Dawn")
        prefs = UserPreferences(user_id="u", auto_theme_by_time=False, selected_theme_id=dawn.id)
        theme = resolve_current_theme(db_session, prefs, datetime(2024, 6, 1, 13, 0))
        assert theme.id == dawn.id

    def test_falls_back_to_first_active(self, db_session):
        warm, _ = _add_themes(db_session, "Warm Earth", "Soft Pastels")
        theme = resolve_current_theme(db_session, None, datetime(2024, 6, 1, 13, 0))
        assert theme.id == warm.id

    def test_no_themes(self, db_session):
        with pytest.raises(NotFoundError):
            resolve_current_theme(db_session, None, datetime(2024, 6, 1, 13, 0))


class FakeSource:
    def __init__(self):
        self.fetches = 0
        self.saved = []
        self.theme = {"theme_name": "Warm Earth"}
        self.key = None

    def fetch(self):
        self.fetches += 1
        return dict(self.theme)

    def save(self, **changes):
        self.saved.append(changes)
        if changes.get("auto_theme_by_time"):
            self.theme = {"theme_name": "Deep Grounding"}
        if "selected_theme_id" in changes:
            self.theme = {"theme_name": "Soft Pastels"}

    def cache_key(self):
        return self.key


class TestThemeStore:
    def test_current_is_cached(self):
        source = FakeSource()
        store = ThemeStore(source)
        assert store.current()["theme_name"] == "Warm Earth"
        store.current()
        assert source.fetches == 1

    def test_select_writes_through_and_refreshes(self):
        source = FakeSource()
        store = ThemeStore(source)
        store.current()
        theme_id = uuid4()

        assert store.select(theme_id)["theme_name"] == "Soft Pastels"
        assert source.saved == [{"selected_theme_id": theme_id}]
        assert source.fetches == 2

    def test_set_auto(self):
        source = FakeSource()
        store = ThemeStore(source)
        assert store.set_auto(True)["theme_name"] == "Deep Grounding"
        assert source.saved == [{"auto_theme_by_time": True}]

    def test_invalidate_forces_reload(self):
        source = FakeSource()
        store = ThemeStore(source)
        store.current()
        store.invalidate()
        store.current()
        assert source.fetches == 2

    def test_cache_key_change_forces_reload(self):
        source = FakeSource()
        store = ThemeStore(source)
        store.current()
        source.key = "Warm Earth"
        store.current()
        store.current()
        assert source.fetches == 2

    def test_database_source(self, db_session):
        warm, dawn = _add_themes(db_session, "Warm Earth", "Deep Grounding")
        source = DatabasePreferencesSource("default_user", clock=lambda: datetime(2024, 6, 1, 18, 30))
        store = ThemeStore(source)

        assert store.current()["theme_name"] == "Warm Earth"
        assert source.cache_key() is None
        assert store.set_auto(True)["theme_name"] == "Deep Grounding"
        assert source.cache_key() == "Deep Grounding"

        prefs = db_session.query(UserPreferences).filter(UserPreferences.user_id == "default_user").one()
        assert prefs.auto_theme_by_time is True

    def test_auto_mode_follows_the_clock(self, db_session):
        _add_themes(db_session, "Warm Earth", "Deep Grounding")
        now = [datetime(2024, 6, 1, 13, 0)]
        store = ThemeStore(DatabasePreferencesSource("default_user", clock=lambda: now[0]))

        assert store.set_auto(True)["theme_name"] == "Warm Earth"
        now[0] = datetime(2024, 6, 1, 18, 0)
        assert store.current()["theme_name"] == "Deep Grounding"


def test_store_for_reuses_and_bounds_stores(monkeypatch):
    monkeypatch.setattr(settings, "THEME_STORE_MAX_ENTRIES", 2)
    first = store_for("a")
    assert store_for("a") is first

    store_for("b")
    store_for("c")
    assert store_for("a") is not first
