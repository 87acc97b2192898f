"""
API tests for journal, nutrition, workouts, meditation and activities.
"""
from datetime import date
from uuid import uuid4

from models import WorkoutExercise

DAY = "2024-06-12"


class TestJournal:
    def test_crud(self, client):
        created = client.post("/api/journal/entries", json={"content": "Slept well", "mood": "calm", "energy": 7})
        assert created.status_code == 201
        entry = created.json()
        assert entry["mood"] == "calm"

        listed = client.get("/api/journal/entries").json()
        assert [e["id"] for e in listed] == [entry["id"]]

        updated = client.put(f"/api/journal/entries/{entry['id']}", json={"intention": "Walk at lunch"})
        assert updated.status_code == 200
        assert updated.json()["intention"] == "Walk at lunch"
        assert updated.json()["content"] == "Slept well"

        deleted = client.request("DELETE", f"/api/journal/entries/{entry['id']}", json={})
        assert deleted.status_code == 200
        assert deleted.json()["success"] is True
        assert client.get(f"/api/journal/entries/{entry['id']}").status_code == 404

    def test_content_required(self, client):
        response = client.post("/api/journal/entries", json={"mood": "tired"})
        assert response.status_code == 422
        body = response.json()
        assert "error" in body
        assert body["details"]

    def test_update_rejects_null_content(self, client):
        entry = client.post("/api/journal/entries", json={"content": "Slept well", "mood": "calm"}).json()

        response = client.put(f"/api/journal/entries/{entry['id']}", json={"content": None})
        assert response.status_code == 422

        cleared = client.put(f"/api/journal/entries/{entry['id']}", json={"mood": None})
        assert cleared.status_code == 200
        assert cleared.json()["mood"] is None
        assert cleared.json()["content"] == "Slept well"


class TestNutrition:
    def _log(self, client, **overrides):
        payload = {"date": DAY, "meal_type": "lunch", "food_name": "Salad", "calories": 400, "protein": 25}
        payload.update(overrides)
        return client.post("/api/nutrition/logs", json=payload)

    def test_summary(self, client):
        assert self._log(client).status_code == 201
        assert self._log(client, meal_type="dinner", food_name="Soup", calories=300, protein=None, fats=12).status_code == 201
        self._log(client, date="2024-06-11", calories=999)

        summary = client.get("/api/nutrition/summary", params={"date": DAY}).json()
        assert summary["total_calories"] == 700
        assert summary["total_protein"] == 25
        assert summary["total_fats"] == 12
        assert summary["meal_count"] == 2
        assert len(summary["meals"]) == 2

    def test_summary_requires_date(self, client):
        assert client.get("/api/nutrition/summary").status_code == 422

    def test_malformed_date(self, client):
        assert client.get("/api/nutrition/summary", params={"date": "June 12"}).status_code == 422

    def test_list_filters_by_date(self, client):
        self._log(client)
        self._log(client, date="2024-06-11")
        assert len(client.get("/api/nutrition/logs", params={"date": DAY}).json()) == 1
        assert len(client.get("/api/nutrition/logs").json()) == 2

    def test_calories_required(self, client):
        response = client.post("/api/nutrition/logs", json={"date": DAY, "meal_type": "lunch", "food_name": "Salad"})
        assert response.status_code == 422

    def test_delete_missing(self, client):
        response = client.delete(f"/api/nutrition/logs/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Nutrition log not found"


class TestWorkouts:
    def test_create_with_exercises_and_cascade_delete(self, client, db_session):
        response = client.post(
            "/api/workouts",
            json={
                "date": DAY,
                "workout_type": "strength",
                "title": "Upper body",
                "duration_minutes": 45,
                "exercises": [
                    {"exercise_name": "Bench press", "sets": 3, "reps": 8, "weight": 60},
                    {"exercise_name": "Rows", "sets": 3, "reps": 10},
                ],
            },
        )
        assert response.status_code == 201
        workout = response.json()
        assert len(workout["exercises"]) == 2

        listed = client.get("/api/workouts", params={"date": DAY}).json()
        assert len(listed) == 1
        assert len(listed[0]["exercises"]) == 2

        assert client.delete(f"/api/workouts/{workout['id']}").status_code == 200
        assert db_session.query(WorkoutExercise).count() == 0
        assert client.get(f"/api/workouts/{workout['id']}").status_code == 404


class TestMeditation:
    def test_stats_streak(self, client):
        today = date.today().isoformat()
        client.post("/api/meditation/sessions", json={"date": today, "practice_type": "breathwork", "duration_minutes": 10})
        client.post("/api/meditation/sessions", json={"date": today, "practice_type": "mindfulness", "duration_minutes": 5})

        stats = client.get("/api/meditation/stats").json()
        assert stats["total_sessions"] == 2
        assert stats["total_minutes"] == 15
        assert stats["current_streak"] == 1
        assert stats["practice_breakdown"] == {"breathwork": 1, "mindfulness": 1}

    def test_list_by_date_and_delete(self, client):
        created = client.post(
            "/api/meditation/sessions",
            json={"date": DAY, "practice_type": "body_scan", "duration_minutes": 20},
        ).json()
        assert len(client.get("/api/meditation/sessions", params={"date": DAY}).json()) == 1
        assert client.delete(f"/api/meditation/sessions/{created['id']}").status_code == 200
        assert client.get("/api/meditation/sessions").json() == []


class TestActivities:
    def test_summary_last_write_wins(self, client):
        client.post("/api/activities", json={"date": DAY, "activity_type": "steps", "value": 4000})
        client.post("/api/activities", json={"date": DAY, "activity_type": "mood_check", "value": 4})
        client.post("/api/activities", json={"date": DAY, "activity_type": "steps", "value": 8000})

        summary = client.get("/api/activities/summary", params={"date": DAY}).json()
        assert summary == {"steps": 8000, "sleep_hours": 0, "water_glasses": 0, "mood_rating": 4}

    def test_unknown_type_rejected(self, client):
        response = client.post("/api/activities", json={"date": DAY, "activity_type": "yoga", "value": 1})
        assert response.status_code == 422

    def test_filter_by_type(self, client):
        client.post("/api/activities", json={"date": DAY, "activity_type": "steps", "value": 4000})
        client.post("/api/activities", json={"date": DAY, "activity_type": "water", "value": 3})
        water = client.get("/api/activities", params={"date": DAY, "type": "water"}).json()
        assert [a["value"] for a in water] == [3]
