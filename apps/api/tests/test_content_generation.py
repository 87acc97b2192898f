"""
Tests for the OpenAI-backed text generation helpers.
"""
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from core.config import settings
from services import content_generation


def _completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


@pytest.fixture
def openai_client(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "test-key")
    with patch("services.content_generation.OpenAI") as mock_openai:
        yield mock_openai.return_value


def _messages(client):
    return client.chat.completions.create.call_args.kwargs["messages"]


def test_missing_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    with pytest.raises(RuntimeError, match="not configured"):
        content_generation.generate_weekly_quote()


def test_upstream_failure_becomes_runtime_error(openai_client):
    openai_client.chat.completions.create.side_effect = Exception("timeout")
    with pytest.raises(RuntimeError, match="request failed"):
        content_generation.generate_weekly_quote()


def test_empty_response_rejected(openai_client):
    openai_client.chat.completions.create.return_value = _completion("   ")
    with pytest.raises(RuntimeError):
        content_generation.generate_weekly_quote()


def test_quote_text_is_stripped(openai_client):
    openai_client.chat.completions.create.return_value = _completion("  Breathe in the morning.\n")
    assert content_generation.generate_weekly_quote() == "Breathe in the morning."
    assert openai_client.chat.completions.create.call_args.kwargs["model"] == settings.OPENAI_MODEL


def test_generate_content_prepends_context(openai_client):
    openai_client.chat.completions.create.return_value = _completion("Draft")
    content_generation.generate_content("Write a hero line", "description", context="Sleep program page")

    system, user = _messages(openai_client)
    assert system["content"] == content_generation.CONTENT_SYSTEM_PROMPTS["description"]
    assert user["content"] == "Sleep program page\n\nWrite a hero line"


def test_improve_content_uses_instruction(openai_client):
    openai_client.chat.completions.create.return_value = _completion("Shorter")
    assert content_generation.improve_content("A long paragraph", "length") == "Shorter"

    user = _messages(openai_client)[1]["content"]
    assert user.startswith(content_generation.IMPROVEMENT_PROMPTS["length"])
    assert user.endswith("A long paragraph")


def test_plan_features_prompt_names_tier(openai_client):
    openai_client.chat.completions.create.return_value = _completion('["Guided programs", "Sleep tools"]')
    features = content_generation.generate_plan_features("Bloom", "premium")

    assert features == ["Guided programs", "Sleep tools"]
    assert "Plan Name: Bloom" in _messages(openai_client)[1]["content"]
    assert content_generation.PLAN_TIERS["premium"] in _messages(openai_client)[1]["content"]


class TestParseFeatureList:
    def test_json_array(self):
        assert content_generation.parse_feature_list('["A", " B ", ""]') == ["A", "B"]

    def test_bulleted_lines(self):
        text = "- Daily check-ins\n\n* Journal prompts\n• Sleep sounds\nPlain line"
        assert content_generation.parse_feature_list(text) == [
            "Daily check-ins",
            "Journal prompts",
            "Sleep sounds",
            "Plain line",
        ]

    def test_json_object_falls_back_to_lines(self):
        assert content_generation.parse_feature_list('{"a": 1}') == ['{"a": 1}']
