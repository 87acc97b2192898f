from sqlalchemy import Column, Integer, Boolean, CheckConstraint, Date, DateTime, ForeignKey, JSON, Text, Index, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import JSONB
from core.database import Base
import uuid
from datetime import datetime, timezone

# JSONB on Postgres, plain JSON elsewhere (tests run on SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    # Python-side timestamps keep microsecond ordering on every backend
    return datetime.now(timezone.utc)


class User(Base):
    """
    Account known to the session provider.

    Only the fields this service needs: identity for ownership checks and
    the role consulted by the admin predicate.
    """
    __tablename__ = "app_user"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=True)
    display_name = Column(Text, nullable=True)
    role = Column(Text, default="user", nullable=False)  # 'user' or 'admin'
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


# --- Single-user daily logs ---

class JournalEntry(Base):
    __tablename__ = "journal_entry"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    content = Column(Text, nullable=False)
    mood = Column(Text, nullable=True)
    energy = Column(Integer, nullable=True)
    intention = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class NutritionLog(Base):
    __tablename__ = "nutrition_log"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False)
    meal_type = Column(Text, nullable=False)  # breakfast, lunch, dinner, snack
    food_name = Column(Text, nullable=False)
    calories = Column(Integer, nullable=False)
    protein = Column(Integer, nullable=True)
    carbs = Column(Integer, nullable=True)
    fats = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_nutrition_log_date", "date"),
    )


class Workout(Base):
    __tablename__ = "workout"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False)
    workout_type = Column(Text, nullable=False)  # strength, cardio, flexibility, sports
    title = Column(Text, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    calories_burned = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.created_at",
    )

    __table_args__ = (
        Index("ix_workout_date", "date"),
    )


class WorkoutExercise(Base):
    __tablename__ = "workout_exercise"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    workout_id = Column(Uuid(as_uuid=True), ForeignKey("workout.id"), nullable=False, index=True)
    exercise_name = Column(Text, nullable=False)
    sets = Column(Integer, nullable=True)
    reps = Column(Integer, nullable=True)
    weight = Column(Integer, nullable=True)
    duration_seconds = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    workout = relationship("Workout", back_populates="exercises")


class MeditationSession(Base):
    __tablename__ = "meditation_session"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False)
    practice_type = Column(Text, nullable=False)  # breathwork, mindfulness, body_scan, loving_kindness, gratitude
    duration_minutes = Column(Integer, nullable=False)
    mood_before = Column(Text, nullable=True)
    mood_after = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_meditation_session_date", "date"),
    )


class DailyActivity(Base):
    """
    Single daily scalar (steps, sleep hours, water glasses, mood rating).

    No uniqueness on (date, activity_type): a later row for the same day
    is kept as history and wins in summaries.
    """
    __tablename__ = "daily_activity"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False)
    activity_type = Column(Text, nullable=False)  # steps, sleep, water, mood_check
    value = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_daily_activity_date_type", "date", "activity_type"),
    )


class WellnessGoal(Base):
    __tablename__ = "wellness_goal"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    goal_type = Column(Text, nullable=False)
    target_value = Column(Integer, nullable=False)
    current_streak = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)  # soft-disable instead of delete
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


# --- Programs ---

class WellnessProgram(Base):
    """
    Admin-authored, fixed-length curriculum.

    daily_activities is an ordered list of {day, title, activity}.
    """
    __tablename__ = "wellness_program"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    program_type = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    duration_days = Column(Integer, nullable=False)
    is_premium = Column(Boolean, default=False, nullable=False)
    daily_activities = Column(JSONType, nullable=False, default=list)
    image_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("duration_days >= 1", name="ck_wellness_program_duration_positive"),
    )


class ProgramEnrollment(Base):
    """
    Per-user progress through a program.

    current_day / is_completed / completed_at are only written by
    services.program_enrollment.mark_day_complete.
    """
    __tablename__ = "program_enrollment"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("app_user.id"), nullable=False, index=True)
    program_id = Column(Uuid(as_uuid=True), ForeignKey("wellness_program.id"), nullable=False, index=True)
    enrolled_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    current_day = Column(Integer, default=1, nullable=False)
    completed_days = Column(JSONType, nullable=False, default=list)  # sorted list of day numbers
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    program = relationship("WellnessProgram")

    __table_args__ = (
        UniqueConstraint("user_id", "program_id", name="uq_program_enrollment_user_program"),
    )


class ProgramAnalytics(Base):
    __tablename__ = "program_analytics"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    program_id = Column(Uuid(as_uuid=True), ForeignKey("wellness_program.id"), nullable=False)
    date = Column(Date, nullable=False)
    active_users = Column(Integer, default=0, nullable=False)
    completions = Column(Integer, default=0, nullable=False)

    __table_args__ = (
        UniqueConstraint("program_id", "date", name="uq_program_analytics_program_date"),
        Index("ix_program_analytics_date", "date"),
    )


class CommunityInsight(Base):
    __tablename__ = "community_insight"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    insight_type = Column(Text, nullable=False)  # stat, recommendation, tip
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


# --- Renewal / sleep ---

class SavedRenewalItem(Base):
    __tablename__ = "saved_renewal_item"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("app_user.id"), nullable=False, index=True)
    item_type = Column(Text, nullable=False)  # program, ritual, tool
    item_id = Column(Text, nullable=False)
    is_paused = Column(Boolean, default=False, nullable=False)
    saved_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "item_id", name="uq_saved_renewal_item_user_item"),
    )


class RenewalVisual(Base):
    __tablename__ = "renewal_visual"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    visual_type = Column(Text, nullable=False)  # seasonal, monthly, daily
    season = Column(Text, nullable=True)
    month = Column(Integer, nullable=True)
    day_of_week = Column(Integer, nullable=True)  # 0 = Sunday
    image_url = Column(Text, nullable=False)
    description = Column(Text, nullable=True)


class SleepTool(Base):
    __tablename__ = "sleep_tool"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    tool_type = Column(Text, nullable=False)  # breathwork, ambient_sounds, gratitude, body_scan, ...
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    is_premium = Column(Boolean, default=False, nullable=False)
    audio_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


# --- Theming ---

class VisualTheme(Base):
    __tablename__ = "visual_theme"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    theme_name = Column(Text, unique=True, nullable=False)
    background_color = Column(Text, nullable=False)
    card_color = Column(Text, nullable=False)
    text_color = Column(Text, nullable=False)
    text_secondary_color = Column(Text, nullable=False)
    primary_color = Column(Text, nullable=False)
    secondary_color = Column(Text, nullable=False)
    accent_color = Column(Text, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class UserPreferences(Base):
    __tablename__ = "user_preferences"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, unique=True, nullable=False)  # user UUID or the single-user default key
    selected_theme_id = Column(Uuid(as_uuid=True), ForeignKey("visual_theme.id"), nullable=True)
    auto_theme_by_time = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class RhythmVisual(Base):
    __tablename__ = "rhythm_visual"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    rhythm_category = Column(Text, nullable=False)
    rhythm_name = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    video_url = Column(Text, nullable=True)
    month_active = Column(Integer, nullable=False)  # 1-12
    display_order = Column(Integer, default=0, nullable=False)

    __table_args__ = (
        CheckConstraint("month_active BETWEEN 1 AND 12", name="ck_rhythm_visual_month"),
    )


# --- Admin CMS ---

class AdminContent(Base):
    __tablename__ = "admin_content"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    page_name = Column(Text, nullable=False, index=True)
    content_type = Column(Text, nullable=False)
    content_key = Column(Text, nullable=False)
    content_value = Column(Text, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class AdminCategory(Base):
    __tablename__ = "admin_category"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category_name = Column(Text, nullable=False)
    icon_name = Column(Text, nullable=False)
    route_path = Column(Text, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class SubscriptionPlan(Base):
    __tablename__ = "subscription_plan"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    plan_name = Column(Text, nullable=False)
    plan_description = Column(Text, nullable=True)
    price = Column(Text, nullable=False)  # display string, e.g. "$9.99"
    billing_period = Column(Text, nullable=False)
    features = Column(JSONType, nullable=False, default=list)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class UserSubscription(Base):
    __tablename__ = "user_subscription"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("app_user.id"), unique=True, nullable=False)
    subscription_tier = Column(Text, default="free", nullable=False)  # free, premium, lifetime
    is_active = Column(Boolean, default=False, nullable=False)
    started_at = Column(DateTime(timezone=True), nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)  # NULL = never (lifetime)


class WeeklyQuote(Base):
    """One generated quote per week; weeks start on Monday."""
    __tablename__ = "weekly_quote"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    quote_text = Column(Text, nullable=False)
    week_start_date = Column(Date, unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
