"""
Seed the content catalog: themes, rhythm visuals, renewal visuals,
wellness programs, sleep tools and community insights.

Each table is seeded only while it is empty, so the script can run on
every deploy.

Usage:
    python scripts/seed_content.py
"""
import logging
import os
import sys
from typing import Dict

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session

from core.database import SessionLocal
from core.logging import setup_logging
from models import (
    CommunityInsight,
    RenewalVisual,
    RhythmVisual,
    SleepTool,
    VisualTheme,
    WellnessProgram,
)

logger = logging.getLogger(__name__)

THEMES = [
    {
        "theme_name": "Warm Earth",
        "background_color": "#f5f1ed",
        "card_color": "#efe9e4",
        "text_color": "#5a4a42",
        "text_secondary_color": "#8b7765",
        "primary_color": "#c9a87d",
        "secondary_color": "#9b8b7e",
        "accent_color": "#d4a574",
    },
    {
        "theme_name": "Soft Pastels",
        "background_color": "#faf7f9",
        "card_color": "#f5f0f7",
        "text_color": "#6b5b7a",
        "text_secondary_color": "#9b8ba8",
        "primary_color": "#d4b5e8",
        "secondary_color": "#c9a8d8",
        "accent_color": "#e8c5f0",
    },
    {
        "theme_name": "Deep Grounding",
        "background_color": "#2a2520",
        "card_color": "#3d3530",
        "text_color": "#e8e0d8",
        "text_secondary_color": "#b8a89f",
        "primary_color": "#6b8e7f",
        "secondary_color": "#4a6b5e",
        "accent_color": "#7da892",
    },
    {
        "theme_name": "Neutral Calm",
        "background_color": "#f3f1f0",
        "card_color": "#ebe8e5",
        "text_color": "#6b6b6b",
        "text_secondary_color": "#989898",
        "primary_color": "#b5b5b5",
        "secondary_color": "#9a9a9a",
        "accent_color": "#c5c5c5",
    },
    {
        "theme_name": "Energizing Dawn",
        "background_color": "#fff5f0",
        "card_color": "#ffeee5",
        "text_color": "#7a5a45",
        "text_secondary_color": "#b89968",
        "primary_color": "#f5a869",
        "secondary_color": "#e89b5a",
        "accent_color": "#ffc284",
    },
]

_UNSPLASH = "https://images.unsplash.com/{}?w=800"

# (month, category, name, photo)
RHYTHM_VISUALS = [
    (1, "movement", "Morning Activation", "photo-1506126613408-eca07ce68773"),
    (1, "nourishment", "Winter Warmth", "photo-1543256969-8f5e2a6d8d75"),
    (2, "presence", "Mindful Pause", "photo-1506126613408-eca07ce68773"),
    (2, "reflection", "Inner Stillness", "photo-1516222338550-38f3cabf841d"),
    (3, "movement", "Spring Flow", "photo-1506126613408-eca07ce68773"),
    (3, "nourishment", "Fresh Beginnings", "photo-1512621776951-a57141f2eefd"),
    (4, "presence", "Grounded Growth", "photo-1506126613408-eca07ce68773"),
    (4, "reflection", "Seasonal Reflection", "photo-1494783367193-149034c05e41"),
    (5, "movement", "Flowing Motion", "photo-1506126613408-eca07ce68773"),
    (5, "presence", "Open Connection", "photo-1470252649378-9c29740c9fa8"),
    (6, "movement", "Sunlit Stretch", "photo-1506126613408-eca07ce68773"),
    (6, "nourishment", "Summer Harvest", "photo-1512621776951-a57141f2eefd"),
    (7, "presence", "Slow Afternoons", "photo-1473496169904-658ba7c44d8a"),
    (7, "reflection", "Midyear Pause", "photo-1494783367193-149034c05e41"),
    (8, "movement", "Golden Hour Walk", "photo-1506126613408-eca07ce68773"),
    (8, "nourishment", "Late Summer Table", "photo-1512621776951-a57141f2eefd"),
    (9, "presence", "Turning Season", "photo-1507003211169-0a1dd7228f2d"),
    (9, "reflection", "Letting Go", "photo-1494783367193-149034c05e41"),
    (10, "movement", "Crisp Air Flow", "photo-1506126613408-eca07ce68773"),
    (10, "nourishment", "Autumn Roots", "photo-1543256969-8f5e2a6d8d75"),
    (11, "presence", "Gathering In", "photo-1507003211169-0a1dd7228f2d"),
    (11, "reflection", "Gratitude Season", "photo-1516222338550-38f3cabf841d"),
    (12, "movement", "Gentle Winter Practice", "photo-1506126613408-eca07ce68773"),
    (12, "reflection", "Year in Stillness", "photo-1483728642387-6c3bdd6c93e5"),
]

RENEWAL_VISUALS = [
    {
        "visual_type": "seasonal",
        "season": "spring",
        "image_url": "https://images.unsplash.com/photo-1490750967868-88aa4486c946?w=1200&q=80",
        "description": "Cherry blossoms in spring light",
    },
    {
        "visual_type": "seasonal",
        "season": "summer",
        "image_url": "https://images.unsplash.com/photo-1473496169904-658ba7c44d8a?w=1200&q=80",
        "description": "Golden field under summer sun",
    },
    {
        "visual_type": "seasonal",
        "season": "fall",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=1200&q=80",
        "description": "Autumn leaves in golden light",
    },
    {
        "visual_type": "seasonal",
        "season": "winter",
        "image_url": "https://images.unsplash.com/photo-1483728642387-6c3bdd6c93e5?w=1200&q=80",
        "description": "Snowy mountains in stillness",
    },
]

PROGRAMS = [
    {
        "program_type": "stress_relief",
        "title": "7-Day Stress Relief",
        "description": "A quick, accessible program to manage daily stress and anxiety",
        "duration_days": 7,
        "is_premium": False,
        "daily_activities": [
            {"day": 1, "title": "Understanding Stress", "activity": "Learn how stress affects your body. Practice deep breathing for 5 minutes."},
            {"day": 2, "title": "Body Awareness", "activity": "Do a progressive body scan and spend 10 minutes releasing physical tension."},
            {"day": 3, "title": "Mindful Movement", "activity": "Gentle stretching and walking meditation."},
            {"day": 4, "title": "Thought Patterns", "activity": "Recognize stress-inducing thoughts and practice reframing."},
            {"day": 5, "title": "Breathing Techniques", "activity": "Practice 4-7-8 breathing for 10 minutes whenever stress arises."},
            {"day": 6, "title": "Grounding Exercises", "activity": "Learn 5-4-3-2-1 sensory grounding for moments of anxiety."},
            {"day": 7, "title": "Integration & Reflection", "activity": "Review the week and build your stress-management toolkit."},
        ],
    },
    {
        "program_type": "energy_reset",
        "title": "5-Day Energy Reset",
        "description": "Revitalize your energy through movement, nutrition and sleep",
        "duration_days": 5,
        "is_premium": False,
        "daily_activities": [
            {"day": 1, "title": "Energy Audit", "activity": "Track your energy through the day. Note drains and boosts."},
            {"day": 2, "title": "Movement & Vitality", "activity": "20 minutes of exercise that gets your heart pumping."},
            {"day": 3, "title": "Nutrition Focus", "activity": "Plan meals that keep blood sugar steady."},
            {"day": 4, "title": "Sleep Optimization", "activity": "Set up your sleep space and try a 20-minute wind-down."},
            {"day": 5, "title": "Energy Mastery", "activity": "Design your personal energy plan."},
        ],
    },
    {
        "program_type": "gratitude",
        "title": "3-Day Gratitude Start",
        "description": "Begin a gratitude practice in just 3 days",
        "duration_days": 3,
        "is_premium": False,
        "daily_activities": [
            {"day": 1, "title": "First Steps in Gratitude", "activity": "Write down 3 things you are grateful for today."},
            {"day": 2, "title": "Deepening Appreciation", "activity": "Tell one person what they mean to you."},
            {"day": 3, "title": "Gratitude Reflection", "activity": "Reflect on the shift in perspective and plan a daily practice."},
        ],
    },
]

SLEEP_TOOLS = [
    {
        "tool_type": "breathwork",
        "title": "4-7-8 Breathing",
        "description": "A calming breathwork technique to help you fall asleep naturally",
        "content": (
            "Exhale completely through your mouth. Inhale quietly through your nose for 4 counts. "
            "Hold for 7 counts. Exhale through your mouth for 8 counts. Repeat 3-4 times."
        ),
        "duration_minutes": 5,
        "is_premium": False,
    },
    {
        "tool_type": "ambient_sounds",
        "title": "Rain & Thunder",
        "description": "Soothing sounds of a gentle rainstorm to lull you to sleep",
        "content": "Close your eyes and listen to rain on leaves and distant thunder.",
        "duration_minutes": 30,
        "is_premium": False,
    },
    {
        "tool_type": "gratitude",
        "title": "Evening Gratitude",
        "description": "Reflect on three things that brought you joy today",
        "content": "Before sleep, recall three moments from your day you are grateful for.",
        "duration_minutes": 5,
        "is_premium": False,
    },
    {
        "tool_type": "body_scan",
        "title": "Progressive Relaxation",
        "description": "Release tension from head to toe with guided body awareness",
        "content": (
            "Lie comfortably and bring awareness to your toes. Breathe into any tension and release. "
            "Move slowly up through your body to the crown of your head."
        ),
        "duration_minutes": 15,
        "is_premium": True,
    },
    {
        "tool_type": "sleep_story",
        "title": "Moonlit Forest Walk",
        "description": "A gentle narrative journey through a peaceful nighttime forest",
        "content": "Imagine a soft forest path under moonlight. Each step takes you deeper into calm.",
        "duration_minutes": 20,
        "is_premium": True,
    },
    {
        "tool_type": "wind_down",
        "title": "Gentle Evening Ritual",
        "description": "A wind-down sequence combining breath, body and mind",
        "content": "Three deep breaths, a body scan, a kind review of the day, and an intention for rest.",
        "duration_minutes": 10,
        "is_premium": True,
    },
]

COMMUNITY_INSIGHTS = [
    {
        "insight_type": "stat",
        "title": "Most Active Time",
        "description": "Peak wellness activity occurs between 7-9 AM when users are most engaged with their programs.",
        "display_order": 1,
    },
    {
        "insight_type": "recommendation",
        "title": "Popular Combination",
        "description": "Members who combine mindfulness with sleep programs report better sleep quality.",
        "display_order": 2,
    },
    {
        "insight_type": "tip",
        "title": "Wellness Tip",
        "description": "Starting your day with a 5-minute breathing exercise can lower stress levels.",
        "display_order": 3,
    },
    {
        "insight_type": "tip",
        "title": "Weekly Streak Bonus",
        "description": "Complete your practices 7 days in a row to build a lasting habit.",
        "display_order": 4,
    },
]


def _seed_table(db: Session, model, rows) -> int:
    if db.query(model).first() is not None:
        logger.info(f"{model.__tablename__} already seeded, skipping")
        return 0
    db.add_all(model(**row) for row in rows)
    db.commit()
    logger.info(f"Seeded {len(rows)} rows into {model.__tablename__}")
    return len(rows)


def seed_content(db: Session) -> Dict[str, int]:
    """Seed every empty catalog table. Returns rows inserted per table."""
    rhythm_rows = [
        {
            "month_active": month,
            "rhythm_category": category,
            "rhythm_name": name,
            "image_url": _UNSPLASH.format(photo),
            "display_order": index % 2 + 1,
        }
        for index, (month, category, name, photo) in enumerate(RHYTHM_VISUALS)
    ]

    return {
        "visual_theme": _seed_table(db, VisualTheme, THEMES),
        "rhythm_visual": _seed_table(db, RhythmVisual, rhythm_rows),
        "renewal_visual": _seed_table(db, RenewalVisual, RENEWAL_VISUALS),
        "wellness_program": _seed_table(db, WellnessProgram, PROGRAMS),
        "sleep_tool": _seed_table(db, SleepTool, SLEEP_TOOLS),
        "community_insight": _seed_table(db, CommunityInsight, COMMUNITY_INSIGHTS),
    }


def main():
    setup_logging()
    db = SessionLocal()
    try:
        counts = seed_content(db)
        logger.info("Content seeding complete", extra={"extra_fields": counts})
    finally:
        db.close()


if __name__ == "__main__":
    main()
