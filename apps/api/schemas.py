from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, date
from uuid import UUID
from typing import ClassVar, Optional, List, Dict, Literal, Tuple


ActivityType = Literal["steps", "sleep", "water", "mood_check"]
GoalType = Literal[
    "daily_calories",
    "daily_protein",
    "weekly_workouts",
    "daily_meditation",
    "daily_steps",
    "daily_water",
    "daily_sleep",
]
RenewalItemType = Literal["program", "ritual", "tool"]


class DeleteResponse(BaseModel):
    success: bool = True
    id: Optional[UUID] = None


class PartialUpdate(BaseModel):
    """
    PUT body where omitted fields are left alone.

    Fields listed in `required_fields` back NOT NULL columns, so an explicit
    null for them is rejected instead of being written.
    """
    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulls = [f for f in self.required_fields if f in self.model_fields_set and getattr(self, f) is None]
        if nulls:
            raise ValueError(f"{', '.join(nulls)} may not be null")
        return self


# --- Journal ---

class JournalEntryCreate(BaseModel):
    content: str = Field(min_length=1)
    mood: Optional[str] = None
    energy: Optional[int] = None
    intention: Optional[str] = None


class JournalEntryUpdate(PartialUpdate):
    required_fields = ("content",)

    content: Optional[str] = Field(default=None, min_length=1)
    mood: Optional[str] = None
    energy: Optional[int] = None
    intention: Optional[str] = None


class JournalEntryResponse(BaseModel):
    id: UUID
    content: str
    mood: Optional[str]
    energy: Optional[int]
    intention: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Nutrition ---

class NutritionLogCreate(BaseModel):
    date: date
    meal_type: str  # breakfast, lunch, dinner, snack
    food_name: str
    calories: int = Field(ge=0)
    protein: Optional[int] = None
    carbs: Optional[int] = None
    fats: Optional[int] = None
    notes: Optional[str] = None


class NutritionLogResponse(BaseModel):
    id: UUID
    date: date
    meal_type: str
    food_name: str
    calories: int
    protein: Optional[int]
    carbs: Optional[int]
    fats: Optional[int]
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NutritionTotals(BaseModel):
    total_calories: int = 0
    total_protein: int = 0
    total_carbs: int = 0
    total_fats: int = 0
    meal_count: int = 0


class NutritionSummaryResponse(NutritionTotals):
    meals: List[NutritionLogResponse] = []


# --- Workouts ---

class WorkoutExerciseCreate(BaseModel):
    exercise_name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight: Optional[int] = None
    duration_seconds: Optional[int] = None


class WorkoutExerciseResponse(WorkoutExerciseCreate):
    id: UUID
    workout_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class WorkoutCreate(BaseModel):
    date: date
    workout_type: str  # strength, cardio, flexibility, sports
    title: str
    duration_minutes: int = Field(ge=0)
    calories_burned: Optional[int] = None
    notes: Optional[str] = None
    exercises: List[WorkoutExerciseCreate] = []


class WorkoutResponse(BaseModel):
    id: UUID
    date: date
    workout_type: str
    title: str
    duration_minutes: int
    calories_burned: Optional[int]
    notes: Optional[str]
    created_at: datetime
    exercises: List[WorkoutExerciseResponse] = []

    model_config = ConfigDict(from_attributes=True)


class WorkoutTotals(BaseModel):
    total_workouts: int = 0
    total_duration: int = 0
    total_calories_burned: int = 0
    workout_types: Dict[str, int] = {}


# --- Meditation ---

class MeditationSessionCreate(BaseModel):
    date: date
    practice_type: str  # breathwork, mindfulness, body_scan, loving_kindness, gratitude
    duration_minutes: int = Field(ge=0)
    mood_before: Optional[str] = None
    mood_after: Optional[str] = None
    notes: Optional[str] = None


class MeditationSessionResponse(BaseModel):
    id: UUID
    date: date
    practice_type: str
    duration_minutes: int
    mood_before: Optional[str]
    mood_after: Optional[str]
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MeditationTotals(BaseModel):
    total_sessions: int = 0
    total_minutes: int = 0
    practice_breakdown: Dict[str, int] = {}


class MeditationStatsResponse(MeditationTotals):
    current_streak: int = 0


# --- Daily activities ---

class DailyActivityCreate(BaseModel):
    date: date
    activity_type: ActivityType
    value: int
    notes: Optional[str] = None


class DailyActivityResponse(BaseModel):
    id: UUID
    date: date
    activity_type: str
    value: int
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivitySummaryResponse(BaseModel):
    steps: int = 0
    sleep_hours: int = 0
    water_glasses: int = 0
    mood_rating: int = 0


# --- Goals ---

class GoalCreate(BaseModel):
    goal_type: GoalType
    target_value: int = Field(ge=0)


class GoalUpdate(BaseModel):
    target_value: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None


class GoalResponse(BaseModel):
    id: UUID
    goal_type: str
    target_value: int
    current_streak: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GoalProgressResponse(BaseModel):
    id: UUID
    goal_type: str
    target: int
    current: int
    percentage: int
    on_track: bool


class DashboardOverviewResponse(BaseModel):
    date: date
    nutrition: NutritionTotals
    workouts: WorkoutTotals
    meditation: MeditationTotals
    activities: ActivitySummaryResponse
    goals_progress: List[GoalProgressResponse]


# --- Wellness programs ---

class ProgramDay(BaseModel):
    day: int = Field(ge=1)
    title: str
    activity: str


def _check_days(daily_activities: List[ProgramDay], duration_days: int) -> None:
    outside = sorted({a.day for a in daily_activities if a.day > duration_days})
    if outside:
        raise ValueError(f"activity days {outside} fall outside 1..{duration_days}")


class ProgramCreate(BaseModel):
    program_type: str
    title: str
    description: Optional[str] = None
    duration_days: int = Field(ge=1)
    is_premium: bool = False
    daily_activities: List[ProgramDay] = []
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def _days_within_duration(self):
        _check_days(self.daily_activities, self.duration_days)
        return self


class ProgramUpdate(PartialUpdate):
    required_fields = ("program_type", "title", "duration_days", "is_premium", "daily_activities")

    program_type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    duration_days: Optional[int] = Field(default=None, ge=1)
    is_premium: Optional[bool] = None
    daily_activities: Optional[List[ProgramDay]] = None
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def _days_within_duration(self):
        # Partial edits are rechecked against the stored program on save
        if self.daily_activities is not None and self.duration_days is not None:
            _check_days(self.daily_activities, self.duration_days)
        return self


class ProgramListItem(BaseModel):
    id: UUID
    program_type: str
    title: str
    description: Optional[str]
    duration_days: int
    is_premium: bool
    image_url: Optional[str]
    created_at: datetime
    icon: str
    color: str


class ProgramResponse(BaseModel):
    id: UUID
    program_type: str
    title: str
    description: Optional[str]
    duration_days: int
    is_premium: bool
    daily_activities: List[ProgramDay]
    image_url: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProgramSummary(BaseModel):
    id: UUID
    title: str
    description: Optional[str]
    duration_days: int
    is_premium: bool

    model_config = ConfigDict(from_attributes=True)


# --- Enrollments ---

class EnrollmentCreate(BaseModel):
    program_id: UUID


class EnrollmentProgressUpdate(BaseModel):
    day: int = Field(ge=1)


class EnrollmentResponse(BaseModel):
    id: UUID
    user_id: UUID
    program_id: UUID
    enrolled_at: datetime
    current_day: int
    completed_days: List[int]
    is_completed: bool
    completed_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class EnrollmentWithProgram(EnrollmentResponse):
    program: Optional[ProgramSummary] = None


# --- Insights ---

class TrendingProgram(BaseModel):
    id: UUID
    title: str
    category: str
    participants: int
    growth: float
    icon: str
    color: str


class CommunityInsightResponse(BaseModel):
    id: UUID
    title: str
    description: str
    type: str


class AnalyticsRecordRequest(BaseModel):
    program_id: UUID
    date: date
    active_users: int = Field(default=0, ge=0)
    completions: int = Field(default=0, ge=0)


class WellnessStatsResponse(BaseModel):
    total_active_users: int
    most_popular_time: str
    completion_rate: int
    trending_categories: List[str]


# --- Renewal ---

class SavedItemCreate(BaseModel):
    item_type: RenewalItemType
    item_id: str = Field(min_length=1)


class SavedItemPause(BaseModel):
    is_paused: bool


class SavedItemResponse(BaseModel):
    id: UUID
    item_type: str
    item_id: str
    is_paused: bool
    saved_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RenewalVisualResponse(BaseModel):
    id: UUID
    image_url: str
    description: Optional[str]
    visual_type: str

    model_config = ConfigDict(from_attributes=True)


# --- Sleep tools ---

class SleepToolCreate(BaseModel):
    tool_type: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    is_premium: bool = False
    audio_url: Optional[str] = None


class SleepToolUpdate(PartialUpdate):
    required_fields = ("tool_type", "title", "is_premium")

    tool_type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    is_premium: Optional[bool] = None
    audio_url: Optional[str] = None


class SleepToolResponse(BaseModel):
    id: UUID
    tool_type: str
    title: str
    description: Optional[str]
    content: Optional[str] = None
    duration_minutes: Optional[int]
    is_premium: bool
    audio_url: Optional[str] = None
    locked: bool = False

    model_config = ConfigDict(from_attributes=True)


# --- Themes / preferences / visuals ---

class ThemeColors(BaseModel):
    background_color: str
    card_color: str
    text_color: str
    text_secondary_color: str
    primary_color: str
    secondary_color: str
    accent_color: str


class ThemeCreate(ThemeColors):
    theme_name: str
    is_active: bool = True


class ThemeResponse(BaseModel):
    id: UUID
    theme_name: str
    colors: ThemeColors
    is_active: bool


class PreferencesUpdate(BaseModel):
    selected_theme_id: Optional[UUID] = None
    auto_theme_by_time: Optional[bool] = None


class PreferencesResponse(BaseModel):
    id: UUID
    selected_theme_id: Optional[UUID]
    auto_theme_by_time: bool
    theme_details: Optional[ThemeResponse] = None


class RhythmVisualCreate(BaseModel):
    rhythm_category: str
    rhythm_name: str
    image_url: str
    video_url: Optional[str] = None
    month_active: int = Field(ge=1, le=12)
    display_order: int = 0


class RhythmVisualResponse(BaseModel):
    id: UUID
    rhythm_category: str
    rhythm_name: str
    image_url: str
    video_url: Optional[str]
    display_order: int

    model_config = ConfigDict(from_attributes=True)


# --- Subscriptions ---

class SubscriptionActivate(BaseModel):
    tier: Literal["premium", "lifetime"]


class SubscriptionStatusResponse(BaseModel):
    user_id: UUID
    subscription_tier: str
    is_active: bool
    expires_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


# --- Admin CMS (camelCase on the wire) ---

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AdminContentCreate(CamelModel):
    page_name: str
    content_type: str
    content_key: str
    content_value: str
    display_order: int = 0
    is_active: bool = True


class AdminContentUpdate(CamelModel, PartialUpdate):
    required_fields = ("page_name", "content_type", "content_key", "content_value", "display_order", "is_active")

    page_name: Optional[str] = None
    content_type: Optional[str] = None
    content_key: Optional[str] = None
    content_value: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class AdminContentResponse(AdminContentCreate):
    id: UUID
    created_at: datetime
    updated_at: datetime


class AdminCategoryCreate(CamelModel):
    category_name: str
    icon_name: str
    route_path: str
    display_order: int = 0
    is_active: bool = True


class AdminCategoryUpdate(CamelModel, PartialUpdate):
    required_fields = ("category_name", "icon_name", "route_path", "display_order", "is_active")

    category_name: Optional[str] = None
    icon_name: Optional[str] = None
    route_path: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class AdminCategoryResponse(AdminCategoryCreate):
    id: UUID
    created_at: datetime
    updated_at: datetime


class SubscriptionPlanCreate(CamelModel):
    plan_name: str
    plan_description: Optional[str] = None
    price: str
    billing_period: str
    features: List[str] = []
    display_order: int = 0
    is_active: bool = True


class SubscriptionPlanUpdate(CamelModel, PartialUpdate):
    required_fields = ("plan_name", "price", "billing_period", "features", "display_order", "is_active")

    plan_name: Optional[str] = None
    plan_description: Optional[str] = None
    price: Optional[str] = None
    billing_period: Optional[str] = None
    features: Optional[List[str]] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class SubscriptionPlanResponse(SubscriptionPlanCreate):
    id: UUID
    created_at: datetime
    updated_at: datetime


class WeeklyQuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    quote_text: str
    week_start_date: date
    created_at: datetime


# --- Admin writing tools ---

class GenerateContentRequest(CamelModel):
    prompt: str = Field(min_length=1)
    content_type: Literal["text", "description", "features"]
    context: Optional[str] = None


class GenerateContentResponse(CamelModel):
    generated_content: str


class ImproveContentRequest(CamelModel):
    content: str = Field(min_length=1)
    improvement_type: Literal["clarity", "tone", "length", "engagement"]


class ImproveContentResponse(CamelModel):
    improved_content: str


class GenerateFeaturesRequest(CamelModel):
    plan_name: str = Field(min_length=1)
    plan_type: Literal["basic", "premium", "enterprise"]


class GenerateFeaturesResponse(CamelModel):
    features: List[str]


class ImageUploadResponse(BaseModel):
    url: str
    filename: str
