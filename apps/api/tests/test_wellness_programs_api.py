"""
API tests for programs, enrollments and the admin predicate.
"""
from datetime import date
from uuid import uuid4

from models import ProgramAnalytics, ProgramEnrollment

PROGRAM = {
    "program_type": "gratitude",
    "title": "3-Day Gratitude Start",
    "description": "Begin a gratitude practice",
    "duration_days": 3,
    "daily_activities": [
        {"day": 1, "title": "First Steps", "activity": "Write down 3 things"},
        {"day": 2, "title": "Appreciation", "activity": "Thank someone"},
        {"day": 3, "title": "Reflection", "activity": "Plan a daily practice"},
    ],
}


class TestProgramAdmin:
    def test_create_requires_session(self, client):
        assert client.post("/api/wellness/programs", json=PROGRAM).status_code == 401

    def test_create_requires_admin(self, client, auth_headers):
        response = client.post("/api/wellness/programs", json=PROGRAM, headers=auth_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "Admin access required"

    def test_invalid_token(self, client):
        response = client.post("/api/wellness/programs", json=PROGRAM, headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_admin_crud(self, client, admin_headers):
        created = client.post("/api/wellness/programs", json=PROGRAM, headers=admin_headers)
        assert created.status_code == 201
        program = created.json()
        assert program["daily_activities"][2]["title"] == "Reflection"

        updated = client.put(
            f"/api/wellness/programs/{program['id']}",
            json={"is_premium": True},
            headers=admin_headers,
        )
        assert updated.json()["is_premium"] is True
        assert updated.json()["title"] == PROGRAM["title"]

        listed = client.get("/api/wellness/programs").json()
        assert listed[0]["icon"] == "🙏"
        assert listed[0]["color"] == "#FF6B6B"

    def test_duration_must_be_positive(self, client, admin_headers):
        response = client.post(
            "/api/wellness/programs",
            json={**PROGRAM, "duration_days": 0},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_delete_cascades(self, client, admin_headers, auth_headers, db_session, program_factory):
        program = program_factory()
        client.post("/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers)
        client.post(
            "/api/insights/analytics/record",
            json={"program_id": str(program.id), "date": "2024-06-12", "active_users": 4},
        )

        response = client.delete(f"/api/wellness/programs/{program.id}", headers=admin_headers)
        assert response.status_code == 200
        assert db_session.query(ProgramEnrollment).count() == 0
        assert db_session.query(ProgramAnalytics).count() == 0
        assert client.get(f"/api/wellness/programs/{program.id}").status_code == 404


class TestEnrollmentApi:
    def test_requires_session(self, client):
        assert client.get("/api/wellness/enrollments").status_code == 401

    def test_enroll_and_progress(self, client, auth_headers, program_factory):
        program = program_factory(duration_days=3)

        created = client.post("/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers)
        assert created.status_code == 201
        enrollment = created.json()
        assert enrollment["current_day"] == 1
        assert enrollment["completed_days"] == []

        url = f"/api/wellness/enrollments/{enrollment['id']}/progress"
        first = client.put(url, json={"day": 1}, headers=auth_headers).json()
        assert (first["completed_days"], first["current_day"], first["is_completed"]) == ([1], 2, False)

        third = client.put(url, json={"day": 3}, headers=auth_headers).json()
        assert (third["completed_days"], third["current_day"], third["is_completed"]) == ([1, 3], 4, False)

        done = client.put(url, json={"day": 2}, headers=auth_headers).json()
        assert (done["completed_days"], done["current_day"], done["is_completed"]) == ([1, 2, 3], 4, True)
        assert done["completed_at"] is not None

        again = client.put(url, json={"day": 2}, headers=auth_headers).json()
        assert again["completed_days"] == [1, 2, 3]

        listed = client.get("/api/wellness/enrollments", headers=auth_headers).json()
        assert listed[0]["program"]["title"] == program.title

    def test_double_enroll_is_conflict(self, client, auth_headers, program_factory):
        program = program_factory()
        client.post("/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers)
        response = client.post("/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers)
        assert response.status_code == 409
        assert response.json()["error"] == "Already enrolled in this program"

    def test_unknown_program(self, client, auth_headers):
        response = client.post("/api/wellness/enrollments", json={"program_id": str(uuid4())}, headers=auth_headers)
        assert response.status_code == 404

    def test_day_below_one_rejected(self, client, auth_headers, program_factory):
        program = program_factory()
        enrollment = client.post(
            "/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers
        ).json()
        response = client.put(
            f"/api/wellness/enrollments/{enrollment['id']}/progress", json={"day": 0}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_other_user_is_forbidden(self, client, auth_headers, other_headers, program_factory):
        program = program_factory()
        enrollment = client.post(
            "/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers
        ).json()

        progress = client.put(
            f"/api/wellness/enrollments/{enrollment['id']}/progress", json={"day": 1}, headers=other_headers
        )
        assert progress.status_code == 403
        assert client.delete(f"/api/wellness/enrollments/{enrollment['id']}", headers=other_headers).status_code == 403

    def test_unenroll(self, client, auth_headers, program_factory):
        program = program_factory()
        enrollment = client.post(
            "/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=auth_headers
        ).json()
        response = client.request(
            "DELETE", f"/api/wellness/enrollments/{enrollment['id']}", json={}, headers=auth_headers
        )
        assert response.json() == {"success": True, "id": enrollment["id"]}
        assert client.get("/api/wellness/enrollments", headers=auth_headers).json() == []


class TestInsightsApi:
    def test_trending_growth_zero_without_baseline(self, client, program_factory):
        program = program_factory(program_type="mindfulness")
        client.post(
            "/api/insights/analytics/record",
            json={"program_id": str(program.id), "date": date.today().isoformat(), "active_users": 12, "completions": 3},
        )

        [item] = client.get("/api/insights/trending").json()
        assert item["participants"] == 12
        assert item["growth"] == 0
        assert item["icon"] == "🧠"

    def test_record_unknown_program(self, client):
        response = client.post(
            "/api/insights/analytics/record",
            json={"program_id": str(uuid4()), "date": "2024-06-12", "active_users": 1},
        )
        assert response.status_code == 404

    def test_community_shape(self, client, db_session):
        from models import CommunityInsight

        db_session.add(CommunityInsight(insight_type="tip", title="Wellness Tip", description="Breathe"))
        db_session.commit()

        [insight] = client.get("/api/insights/community").json()
        assert set(insight) == {"id", "title", "description", "type"}
        assert insight["type"] == "tip"

    def test_stats_empty(self, client):
        stats = client.get("/api/insights/stats").json()
        assert stats["total_active_users"] == 0
        assert stats["completion_rate"] == 0
        assert stats["most_popular_time"] == "8:00 AM"


class TestProgramEdits:
    def _complete_all(self, client, headers, program, days):
        enrollment = client.post(
            "/api/wellness/enrollments", json={"program_id": str(program.id)}, headers=headers
        ).json()
        for day in days:
            client.put(f"/api/wellness/enrollments/{enrollment['id']}/progress", json={"day": day}, headers=headers)
        return enrollment

    def test_longer_duration_reopens_completed_enrollments(self, client, admin_headers, auth_headers, program_factory):
        program = program_factory(duration_days=2)
        self._complete_all(client, auth_headers, program, [1, 2])

        client.put(f"/api/wellness/programs/{program.id}", json={"duration_days": 5}, headers=admin_headers)

        [enrollment] = client.get("/api/wellness/enrollments", headers=auth_headers).json()
        assert enrollment["completed_days"] == [1, 2]
        assert enrollment["is_completed"] is False
        assert enrollment["completed_at"] is None
        assert enrollment["current_day"] == 3

    def test_shorter_duration_completes_enrollments(self, client, admin_headers, auth_headers, program_factory):
        program = program_factory(duration_days=3)
        self._complete_all(client, auth_headers, program, [1, 2])

        response = client.put(
            f"/api/wellness/programs/{program.id}",
            json={"duration_days": 2, "daily_activities": PROGRAM["daily_activities"][:2]},
            headers=admin_headers,
        )
        assert response.status_code == 200

        [enrollment] = client.get("/api/wellness/enrollments", headers=auth_headers).json()
        assert enrollment["is_completed"] is True
        assert enrollment["completed_at"] is not None

    def test_explicit_null_on_required_field(self, client, admin_headers, program_factory):
        program = program_factory()
        for body in ({"title": None}, {"duration_days": None}, {"daily_activities": None}):
            response = client.put(f"/api/wellness/programs/{program.id}", json=body, headers=admin_headers)
            assert response.status_code == 422
        assert client.get(f"/api/wellness/programs/{program.id}").json()["title"] == program.title

    def test_null_on_optional_field_clears_it(self, client, admin_headers, program_factory):
        program = program_factory(image_url="https://img/p")
        response = client.put(f"/api/wellness/programs/{program.id}", json={"image_url": None}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["image_url"] is None

    def test_activity_day_beyond_duration_on_create(self, client, admin_headers):
        response = client.post("/api/wellness/programs", json={**PROGRAM, "duration_days": 2}, headers=admin_headers)
        assert response.status_code == 422

    def test_shrinking_below_scheduled_days(self, client, admin_headers, program_factory):
        program = program_factory(duration_days=3)
        response = client.put(f"/api/wellness/programs/{program.id}", json={"duration_days": 2}, headers=admin_headers)
        assert response.status_code == 422
        assert client.get(f"/api/wellness/programs/{program.id}").json()["duration_days"] == 3
