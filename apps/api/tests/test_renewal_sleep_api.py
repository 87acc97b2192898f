"""
API tests for renewal saved items, renewal visuals, sleep tools and
subscriptions.
"""
from models import RenewalVisual, SleepTool


class TestSavedItems:
    def test_save_pause_remove(self, client, auth_headers):
        created = client.post(
            "/api/renewal/saved-items", json={"item_type": "ritual", "item_id": "morning-pages"}, headers=auth_headers
        )
        assert created.status_code == 201
        item = created.json()
        assert item["is_paused"] is False

        paused = client.put(f"/api/renewal/saved-items/{item['id']}/pause", json={"is_paused": True}, headers=auth_headers)
        assert paused.json()["is_paused"] is True

        removed = client.delete(f"/api/renewal/saved-items/{item['id']}", headers=auth_headers)
        assert removed.json() == {"success": True, "id": item["id"]}
        assert client.get("/api/renewal/saved-items", headers=auth_headers).json() == []

    def test_duplicate_save_conflicts(self, client, auth_headers):
        payload = {"item_type": "tool", "item_id": "box-breathing"}
        client.post("/api/renewal/saved-items", json=payload, headers=auth_headers)
        assert client.post("/api/renewal/saved-items", json=payload, headers=auth_headers).status_code == 409

    def test_items_are_per_user(self, client, auth_headers, other_headers):
        payload = {"item_type": "tool", "item_id": "box-breathing"}
        item = client.post("/api/renewal/saved-items", json=payload, headers=auth_headers).json()

        assert client.get("/api/renewal/saved-items", headers=other_headers).json() == []
        assert client.post("/api/renewal/saved-items", json=payload, headers=other_headers).status_code == 201
        forbidden = client.put(
            f"/api/renewal/saved-items/{item['id']}/pause", json={"is_paused": True}, headers=other_headers
        )
        assert forbidden.status_code == 403

    def test_invalid_item_type(self, client, auth_headers):
        response = client.post(
            "/api/renewal/saved-items", json={"item_type": "playlist", "item_id": "x"}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_requires_session(self, client):
        assert client.get("/api/renewal/saved-items").status_code == 401


class TestRenewalVisualApi:
    def test_none(self, client):
        assert client.get("/api/renewal/visuals/current").status_code == 404

    def test_any_visual(self, client, db_session):
        db_session.add(RenewalVisual(visual_type="daily", day_of_week=9, image_url="https://img/1", description="d"))
        db_session.commit()
        body = client.get("/api/renewal/visuals/current").json()
        assert body["image_url"] == "https://img/1"


class TestSleepTools:
    def _seed(self, db_session):
        db_session.add_all([
            SleepTool(tool_type="breathwork", title="4-7-8 Breathing", content="Inhale 4", duration_minutes=5),
            SleepTool(tool_type="body_scan", title="Progressive Relaxation", content="Toes first", duration_minutes=15, is_premium=True),
        ])
        db_session.commit()

    def test_premium_content_hidden_from_free_users(self, client, db_session):
        self._seed(db_session)
        tools = {t["title"]: t for t in client.get("/api/sleep/tools").json()}
        assert tools["4-7-8 Breathing"]["content"] == "Inhale 4"
        assert tools["4-7-8 Breathing"]["locked"] is False
        assert tools["Progressive Relaxation"]["content"] is None
        assert tools["Progressive Relaxation"]["locked"] is True

    def test_premium_detail_requires_subscription(self, client, db_session, auth_headers):
        self._seed(db_session)
        premium = db_session.query(SleepTool).filter(SleepTool.is_premium.is_(True)).one()

        assert client.get(f"/api/sleep/tools/{premium.id}", headers=auth_headers).status_code == 403

        client.post("/api/subscriptions/activate", json={"tier": "premium"}, headers=auth_headers)
        unlocked = client.get(f"/api/sleep/tools/{premium.id}", headers=auth_headers)
        assert unlocked.status_code == 200
        assert unlocked.json()["content"] == "Toes first"

    def test_filter_by_type(self, client, db_session):
        self._seed(db_session)
        tools = client.get("/api/sleep/tools", params={"type": "breathwork"}).json()
        assert [t["title"] for t in tools] == ["4-7-8 Breathing"]

    def test_admin_crud(self, client, admin_headers, auth_headers):
        payload = {"tool_type": "wind_down", "title": "Evening Ritual", "duration_minutes": 10}
        assert client.post("/api/sleep/tools", json=payload, headers=auth_headers).status_code == 403

        created = client.post("/api/sleep/tools", json=payload, headers=admin_headers).json()
        updated = client.put(f"/api/sleep/tools/{created['id']}", json={"is_premium": True}, headers=admin_headers)
        assert updated.json()["is_premium"] is True
        assert client.put(
            f"/api/sleep/tools/{created['id']}", json={"title": None}, headers=admin_headers
        ).status_code == 422
        assert client.delete(f"/api/sleep/tools/{created['id']}", headers=admin_headers).json() == {"success": True}


class TestSubscriptions:
    def test_status_defaults_to_free(self, client, auth_headers, user):
        status = client.get("/api/subscriptions/status", headers=auth_headers).json()
        assert status["user_id"] == str(user.id)
        assert status["subscription_tier"] == "free"
        assert status["is_active"] is False

    def test_activate_lifetime(self, client, auth_headers):
        status = client.post("/api/subscriptions/activate", json={"tier": "lifetime"}, headers=auth_headers).json()
        assert status["subscription_tier"] == "lifetime"
        assert status["is_active"] is True
        assert status["expires_at"] is None

    def test_unknown_tier(self, client, auth_headers):
        response = client.post("/api/subscriptions/activate", json={"tier": "platinum"}, headers=auth_headers)
        assert response.status_code == 422
