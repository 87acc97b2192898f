"""
Text generation

Short wellness copy from the OpenAI chat API: the weekly quote and the
admin writing tools (draft, improve, plan features).

Every call raises RuntimeError when the key is missing or the request
fails; routers turn that into a 503 so editors can fall back to typing.
"""

import json
import logging
import re
from typing import List, Optional

from openai import OpenAI

from core.config import settings

logger = logging.getLogger(__name__)

QUOTE_PROMPT = (
    "Generate a single poetic, encouraging wellness quote (2-3 sentences max) that feels warm, "
    "grounding, and aligned with holistic wellbeing. The tone should be elemental, human, and never "
    "generic or overly polished. Focus on themes like presence, rhythm, nourishment, movement, and "
    "emotional grounding."
)

CONTENT_SYSTEM_PROMPTS = {
    "text": "You are a wellness content expert. Create clear, engaging, and helpful text content.",
    "description": (
        "You are a product description expert. Create concise, compelling descriptions "
        "that highlight benefits and value."
    ),
    "features": (
        "You are a features expert. Create clear, benefit-focused feature descriptions "
        "that resonate with users."
    ),
}

IMPROVEMENT_PROMPTS = {
    "clarity": "Improve the clarity of this content while keeping it concise:",
    "tone": "Rewrite this content to have a warmer, more human tone that aligns with wellness and wellbeing:",
    "length": "Make this content more concise while retaining all important information:",
    "engagement": "Rewrite this content to be more engaging and compelling:",
}

EDITOR_SYSTEM_PROMPT = (
    "You are an expert content editor. Improve the provided content while maintaining "
    "its core message and purpose."
)

PLAN_TIERS = {
    "basic": "Basic tier - essential features for getting started",
    "premium": "Premium tier - advanced features for engaged users who want more capabilities",
    "enterprise": "Enterprise tier - comprehensive features for power users and teams",
}

PLAN_SYSTEM_PROMPT = (
    "You are a product manager for a wellness app. "
    "Generate practical, benefit-focused feature lists for subscription tiers."
)

_BULLET = re.compile(r"^[-•*]\s*")


def _complete(system: str, user: str, max_tokens: int = 600) -> str:
    api_key = settings.OPENAI_API_KEY
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY not configured")

    client = OpenAI(api_key=api_key)
    try:
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            max_tokens=max_tokens,
        )
        content = response.choices[0].message.content or ""
    except Exception as e:
        logger.error(f"OpenAI completion failed: {e}")
        raise RuntimeError("OpenAI request failed")

    content = content.strip()
    if not content:
        raise RuntimeError("Empty model response")
    return content


def generate_weekly_quote() -> str:
    return _complete("You write short wellness quotes.", QUOTE_PROMPT, max_tokens=200)


def generate_content(prompt: str, content_type: str, context: Optional[str] = None) -> str:
    """Draft copy for the CMS; `context` is prepended to the prompt when given."""
    system = CONTENT_SYSTEM_PROMPTS.get(
        content_type, "You are a helpful content writer for a wellness application."
    )
    full_prompt = f"{context}\n\n{prompt}" if context else prompt
    return _complete(system, full_prompt)


def improve_content(content: str, improvement_type: str) -> str:
    instruction = IMPROVEMENT_PROMPTS[improvement_type]
    return _complete(EDITOR_SYSTEM_PROMPT, f"{instruction}\n\n{content}")


def parse_feature_list(text: str) -> List[str]:
    """
    JSON array of strings when the model complied, otherwise one feature
    per non-blank line with list bullets stripped.
    """
    try:
        parsed = json.loads(text)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        return [str(item).strip() for item in parsed if str(item).strip()]

    logger.warning("Feature list was not JSON, splitting lines", extra={"extra_fields": {"length": len(text)}})
    return [_BULLET.sub("", line).strip() for line in text.splitlines() if line.strip()]


def generate_plan_features(plan_name: str, plan_type: str) -> List[str]:
    prompt = f"""Generate a feature list for a wellness app subscription plan.
Plan Name: {plan_name}
Tier: {PLAN_TIERS[plan_type]}

Create 5-7 specific, benefit-focused features for this plan. Each feature should:
- Be a concrete capability or benefit
- Be specific to wellness/wellbeing
- Be appropriate for this tier level
- Highlight unique value

Return ONLY a JSON array of feature strings, no other text.
Example format: ["Feature 1", "Feature 2", "Feature 3"]"""

    return parse_feature_list(_complete(PLAN_SYSTEM_PROMPT, prompt))
