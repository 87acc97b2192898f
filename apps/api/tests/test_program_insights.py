"""
Tests for trending, analytics and community insights.
"""
from datetime import date, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest

from core.exceptions import NotFoundError
from models import CommunityInsight, ProgramAnalytics
from services.program_insights import (
    compute_trending,
    growth_percent,
    list_community_insights,
    rank_trending,
    record_analytics,
    trending_windows,
    wellness_stats,
)

TODAY = date(2024, 6, 20)


class TestWindows:
    def test_windows_are_contiguous_and_disjoint(self):
        current, previous = trending_windows(TODAY, 7)
        assert current.start == date(2024, 6, 14)
        assert current.end == TODAY
        assert previous.start == date(2024, 6, 7)
        assert previous.end == date(2024, 6, 13)
        assert previous.end + timedelta(days=1) == current.start


class TestGrowth:
    def test_no_baseline_is_zero(self):
        assert growth_percent(50, 0) == 0

    def test_one_decimal(self):
        assert growth_percent(4, 3) == 33.3
        assert growth_percent(2, 3) == -33.3

    def test_half_rounds_up(self):
        # 100 * 1 / 8 = 12.5 exactly; one decimal keeps it
        assert growth_percent(9, 8) == 12.5
        # 100 * 1 / 16 = 6.25 -> 6.3
        assert growth_percent(17, 16) == 6.3


class TestRanking:
    def _program(self, title, program_type="mindfulness"):
        return SimpleNamespace(id=uuid4(), title=title, program_type=program_type)

    def test_sorted_by_participants_and_limited(self):
        programs = [self._program(f"P{i}") for i in range(7)]
        current = {p.id: i * 10 for i, p in enumerate(programs)}
        ranked = rank_trending(programs, current, {}, limit=5)
        assert [r["title"] for r in ranked] == ["P6", "P5", "P4", "P3", "P2"]

    def test_unknown_type_gets_default_style(self):
        program = self._program("Mystery", program_type="unheard_of")
        [item] = rank_trending([program], {}, {}, limit=5)
        assert item["icon"] == "✨"
        assert item["color"] == "#9B9B9B"
        assert item["participants"] == 0
        assert item["growth"] == 0


class TestTrendingFromDatabase:
    def test_window_sums_and_growth(self, db_session, program_factory):
        program = program_factory(program_type="stress_relief")
        db_session.add_all([
            ProgramAnalytics(program_id=program.id, date=TODAY, active_users=30),
            ProgramAnalytics(program_id=program.id, date=TODAY - timedelta(days=6), active_users=20),
            ProgramAnalytics(program_id=program.id, date=TODAY - timedelta(days=7), active_users=40),
            ProgramAnalytics(program_id=program.id, date=TODAY - timedelta(days=14), active_users=999),
        ])
        db_session.commit()

        [item] = compute_trending(db_session, TODAY)
        assert item["participants"] == 50
        assert item["growth"] == 25.0
        assert item["category"] == "stress_relief"
        assert item["icon"] == "🧘"


class TestRecordAnalytics:
    def test_upsert(self, db_session, program_factory):
        program = program_factory()
        record_analytics(db_session, program.id, TODAY, 10, 2)
        record_analytics(db_session, program.id, TODAY, 15, 5)

        rows = db_session.query(ProgramAnalytics).all()
        assert len(rows) == 1
        assert rows[0].active_users == 15
        assert rows[0].completions == 5

    def test_unknown_program(self, db_session):
        with pytest.raises(NotFoundError):
            record_analytics(db_session, uuid4(), TODAY, 1, 1)


class TestWellnessStats:
    def test_empty(self, db_session):
        assert wellness_stats(db_session, TODAY) == {
            "total_active_users": 0,
            "most_popular_time": "8:00 AM",
            "completion_rate": 0,
            "trending_categories": [],
        }

    def test_aggregates(self, db_session, program_factory):
        calm = program_factory(program_type="mindfulness")
        sleep = program_factory(program_type="sleep_mastery")
        gratitude = program_factory(program_type="gratitude")
        energy = program_factory(program_type="energy_reset")
        db_session.add_all([
            ProgramAnalytics(program_id=calm.id, date=TODAY, active_users=50, completions=30),
            ProgramAnalytics(program_id=sleep.id, date=TODAY, active_users=80, completions=20),
            ProgramAnalytics(program_id=gratitude.id, date=TODAY - timedelta(days=1), active_users=10, completions=10),
            ProgramAnalytics(program_id=energy.id, date=TODAY - timedelta(days=2), active_users=5, completions=0),
        ])
        db_session.commit()

        stats = wellness_stats(db_session, TODAY)
        assert stats["total_active_users"] == 80
        # 60 completions over 4 rows * 100
        assert stats["completion_rate"] == 15
        assert stats["trending_categories"] == ["sleep_mastery", "mindfulness", "gratitude"]


class TestCommunityInsights:
    def test_active_only_in_display_order(self, db_session):
        db_session.add_all([
            CommunityInsight(insight_type="tip", title="Second", description="d", display_order=2),
            CommunityInsight(insight_type="stat", title="First", description="d", display_order=1),
            CommunityInsight(insight_type="tip", title="Hidden", description="d", display_order=0, is_active=False),
        ])
        db_session.commit()

        assert [i.title for i in list_community_insights(db_session)] == ["First", "Second"]
