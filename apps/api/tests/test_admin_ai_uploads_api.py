"""
API tests for the admin writing tools and image uploads.
"""
from unittest.mock import patch

import pytest

from core.config import settings
from core.exceptions import ForbiddenError
from routers.uploads import get_upload


class TestAdminAi:
    def test_requires_admin(self, client, auth_headers):
        payload = {"prompt": "Hero line", "contentType": "text"}
        assert client.post("/api/admin/ai/generate-content", json=payload).status_code == 401
        assert client.post("/api/admin/ai/generate-content", json=payload, headers=auth_headers).status_code == 403

    def test_generate_content(self, client, admin_headers):
        with patch("services.content_generation.generate_content") as mock_generate:
            mock_generate.return_value = "Rest is part of the rhythm."
            response = client.post(
                "/api/admin/ai/generate-content",
                json={"prompt": "Hero line", "contentType": "description", "context": "Sleep page"},
                headers=admin_headers,
            )

        assert response.status_code == 200
        assert response.json() == {"generatedContent": "Rest is part of the rhythm."}
        mock_generate.assert_called_once_with("Hero line", "description", "Sleep page")

    def test_unknown_content_type(self, client, admin_headers):
        response = client.post(
            "/api/admin/ai/generate-content",
            json={"prompt": "Hero line", "contentType": "poem"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_improve_content(self, client, admin_headers):
        with patch("services.content_generation.improve_content") as mock_improve:
            mock_improve.return_value = "Warmer copy"
            response = client.post(
                "/api/admin/ai/improve-content",
                json={"content": "Cold copy", "improvementType": "tone"},
                headers=admin_headers,
            )

        assert response.json() == {"improvedContent": "Warmer copy"}
        mock_improve.assert_called_once_with("Cold copy", "tone")

    def test_generate_features(self, client, admin_headers):
        with patch("services.content_generation.generate_plan_features") as mock_features:
            mock_features.return_value = ["Guided programs", "Sleep tools"]
            response = client.post(
                "/api/admin/ai/generate-features",
                json={"planName": "Bloom", "planType": "enterprise"},
                headers=admin_headers,
            )

        assert response.json() == {"features": ["Guided programs", "Sleep tools"]}
        mock_features.assert_called_once_with("Bloom", "enterprise")

    def test_provider_unavailable(self, client, admin_headers):
        with patch("services.content_generation.improve_content") as mock_improve:
            mock_improve.side_effect = RuntimeError("OPENAI_API_KEY not configured")
            response = client.post(
                "/api/admin/ai/improve-content",
                json={"content": "Copy", "improvementType": "clarity"},
                headers=admin_headers,
            )
        assert response.status_code == 503


@pytest.fixture
def uploads_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOADS_DIR", str(directory))
    return directory


class TestImageUpload:
    def test_upload_and_serve(self, client, admin_headers, uploads_dir):
        response = client.post(
            "/api/admin/upload/image",
            files={"file": ("sunrise.PNG", b"\x89PNG fake bytes", "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["filename"].endswith(".png")
        assert body["url"] == f"/uploads/{body['filename']}"
        assert (uploads_dir / body["filename"]).read_bytes() == b"\x89PNG fake bytes"

        served = client.get(body["url"])
        assert served.status_code == 200
        assert served.headers["content-type"] == "image/png"
        assert served.content == b"\x89PNG fake bytes"

    def test_requires_admin(self, client, auth_headers, uploads_dir):
        files = {"file": ("a.jpg", b"data", "image/jpeg")}
        assert client.post("/api/admin/upload/image", files=files).status_code == 401
        assert client.post("/api/admin/upload/image", files=files, headers=auth_headers).status_code == 403

    def test_rejects_non_images(self, client, admin_headers, uploads_dir):
        response = client.post(
            "/api/admin/upload/image",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "BAD_REQUEST"

    def test_size_limit(self, client, admin_headers, uploads_dir, monkeypatch):
        monkeypatch.setattr(settings, "UPLOAD_MAX_FILE_BYTES", 4)
        response = client.post(
            "/api/admin/upload/image",
            files={"file": ("big.gif", b"GIF89a...", "image/gif")},
            headers=admin_headers,
        )
        assert response.status_code == 413
        assert list(uploads_dir.iterdir()) == []

    def test_missing_file(self, client, uploads_dir):
        assert client.get("/uploads/nothing.png").status_code == 404

    def test_parent_directory_refused(self, uploads_dir):
        uploads_dir.mkdir()
        with pytest.raises(ForbiddenError):
            get_upload("..")
