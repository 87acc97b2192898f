"""
Presentation lookups keyed by domain enums.

One table per enum, shared by every endpoint that decorates rows for
display (trending, program listings, goal labels).
"""
from typing import Dict

DEFAULT_PROGRAM_STYLE = {"icon": "✨", "color": "#9B9B9B"}

PROGRAM_TYPE_STYLES: Dict[str, Dict[str, str]] = {
    "stress_relief": {"icon": "🧘", "color": "#8B7BA8"},
    "energy_reset": {"icon": "⚡", "color": "#FDB913"},
    "gratitude": {"icon": "🙏", "color": "#FF6B6B"},
    "mindfulness": {"icon": "🧠", "color": "#4ECDC4"},
    "sleep_mastery": {"icon": "😴", "color": "#2C3E50"},
    "self_compassion": {"icon": "💗", "color": "#FFB6C1"},
}

GOAL_TYPE_LABELS: Dict[str, Dict[str, str]] = {
    "daily_calories": {"label": "Daily Calories", "unit": "kcal"},
    "daily_protein": {"label": "Daily Protein", "unit": "g"},
    "weekly_workouts": {"label": "Weekly Workouts", "unit": "workouts"},
    "daily_meditation": {"label": "Daily Meditation", "unit": "min"},
    "daily_steps": {"label": "Daily Steps", "unit": "steps"},
    "daily_water": {"label": "Daily Water", "unit": "glasses"},
    "daily_sleep": {"label": "Daily Sleep", "unit": "hours"},
}

# activity_type -> key used in the activity summary
ACTIVITY_SUMMARY_KEYS: Dict[str, str] = {
    "steps": "steps",
    "sleep": "sleep_hours",
    "water": "water_glasses",
    "mood_check": "mood_rating",
}


def style_for_program_type(program_type: str) -> Dict[str, str]:
    """Icon and color for a program type, falling back to the neutral style."""
    return dict(PROGRAM_TYPE_STYLES.get(program_type, DEFAULT_PROGRAM_STYLE))


def goal_label(goal_type: str) -> str:
    entry = GOAL_TYPE_LABELS.get(goal_type)
    return entry["label"] if entry else goal_type.replace("_", " ").title()
