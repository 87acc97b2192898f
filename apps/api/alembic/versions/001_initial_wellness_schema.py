"""initial wellness schema

Revision ID: 001
Revises:
Create Date: 2025-01-06 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True)


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()'))


def _updated_at() -> sa.Column:
    return sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()'))


def upgrade() -> None:
    op.create_table(
        'app_user',
        _id(),
        sa.Column('email', sa.Text(), nullable=True, unique=True),
        sa.Column('display_name', sa.Text(), nullable=True),
        sa.Column('role', sa.Text(), nullable=False, server_default='user'),
        _created_at(),
    )

    # Single-user daily logs
    op.create_table(
        'journal_entry',
        _id(),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('mood', sa.Text(), nullable=True),
        sa.Column('energy', sa.Integer(), nullable=True),
        sa.Column('intention', sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        'nutrition_log',
        _id(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('meal_type', sa.Text(), nullable=False),
        sa.Column('food_name', sa.Text(), nullable=False),
        sa.Column('calories', sa.Integer(), nullable=False),
        sa.Column('protein', sa.Integer(), nullable=True),
        sa.Column('carbs', sa.Integer(), nullable=True),
        sa.Column('fats', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index('ix_nutrition_log_date', 'nutrition_log', ['date'])

    op.create_table(
        'workout',
        _id(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('workout_type', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('calories_burned', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index('ix_workout_date', 'workout', ['date'])

    op.create_table(
        'workout_exercise',
        _id(),
        sa.Column('workout_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('exercise_name', sa.Text(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['workout_id'], ['workout.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_workout_exercise_workout_id', 'workout_exercise', ['workout_id'])

    op.create_table(
        'meditation_session',
        _id(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('practice_type', sa.Text(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('mood_before', sa.Text(), nullable=True),
        sa.Column('mood_after', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index('ix_meditation_session_date', 'meditation_session', ['date'])

    op.create_table(
        'daily_activity',
        _id(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('activity_type', sa.Text(), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index('ix_daily_activity_date_type', 'daily_activity', ['date', 'activity_type'])

    op.create_table(
        'wellness_goal',
        _id(),
        sa.Column('goal_type', sa.Text(), nullable=False),
        sa.Column('target_value', sa.Integer(), nullable=False),
        sa.Column('current_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        _updated_at(),
    )

    # Programs
    op.create_table(
        'wellness_program',
        _id(),
        sa.Column('program_type', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('duration_days', sa.Integer(), nullable=False),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('daily_activities', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('image_url', sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
        sa.CheckConstraint('duration_days >= 1', name='ck_wellness_program_duration_positive'),
    )

    op.create_table(
        'program_enrollment',
        _id(),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('program_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('enrolled_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('current_day', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('completed_days', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['app_user.id'], ),
        sa.ForeignKeyConstraint(['program_id'], ['wellness_program.id'], ),
        sa.UniqueConstraint('user_id', 'program_id', name='uq_program_enrollment_user_program'),
    )
    op.create_index('ix_program_enrollment_user_id', 'program_enrollment', ['user_id'])
    op.create_index('ix_program_enrollment_program_id', 'program_enrollment', ['program_id'])

    op.create_table(
        'program_analytics',
        _id(),
        sa.Column('program_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('active_users', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completions', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['program_id'], ['wellness_program.id'], ),
        sa.UniqueConstraint('program_id', 'date', name='uq_program_analytics_program_date'),
    )
    op.create_index('ix_program_analytics_date', 'program_analytics', ['date'])

    op.create_table(
        'community_insight',
        _id(),
        sa.Column('insight_type', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        _created_at(),
    )

    # Renewal and sleep
    op.create_table(
        'saved_renewal_item',
        _id(),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('item_type', sa.Text(), nullable=False),
        sa.Column('item_id', sa.Text(), nullable=False),
        sa.Column('is_paused', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('saved_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.ForeignKeyConstraint(['user_id'], ['app_user.id'], ),
        sa.UniqueConstraint('user_id', 'item_id', name='uq_saved_renewal_item_user_item'),
    )
    op.create_index('ix_saved_renewal_item_user_id', 'saved_renewal_item', ['user_id'])

    op.create_table(
        'renewal_visual',
        _id(),
        sa.Column('visual_type', sa.Text(), nullable=False),
        sa.Column('season', sa.Text(), nullable=True),
        sa.Column('month', sa.Integer(), nullable=True),
        sa.Column('day_of_week', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )

    op.create_table(
        'sleep_tool',
        _id(),
        sa.Column('tool_type', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('audio_url', sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    # Themes and visuals
    op.create_table(
        'visual_theme',
        _id(),
        sa.Column('theme_name', sa.Text(), nullable=False, unique=True),
        sa.Column('background_color', sa.Text(), nullable=False),
        sa.Column('card_color', sa.Text(), nullable=False),
        sa.Column('text_color', sa.Text(), nullable=False),
        sa.Column('text_secondary_color', sa.Text(), nullable=False),
        sa.Column('primary_color', sa.Text(), nullable=False),
        sa.Column('secondary_color', sa.Text(), nullable=False),
        sa.Column('accent_color', sa.Text(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
    )

    op.create_table(
        'user_preferences',
        _id(),
        sa.Column('user_id', sa.Text(), nullable=False, unique=True),
        sa.Column('selected_theme_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('auto_theme_by_time', sa.Boolean(), nullable=False, server_default=sa.false()),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(['selected_theme_id'], ['visual_theme.id'], ),
    )

    op.create_table(
        'rhythm_visual',
        _id(),
        sa.Column('rhythm_category', sa.Text(), nullable=False),
        sa.Column('rhythm_name', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('video_url', sa.Text(), nullable=True),
        sa.Column('month_active', sa.Integer(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('month_active BETWEEN 1 AND 12', name='ck_rhythm_visual_month'),
    )

    # Admin CMS
    op.create_table(
        'admin_content',
        _id(),
        sa.Column('page_name', sa.Text(), nullable=False),
        sa.Column('content_type', sa.Text(), nullable=False),
        sa.Column('content_key', sa.Text(), nullable=False),
        sa.Column('content_value', sa.Text(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        _updated_at(),
    )
    op.create_index('ix_admin_content_page_name', 'admin_content', ['page_name'])

    op.create_table(
        'admin_category',
        _id(),
        sa.Column('category_name', sa.Text(), nullable=False),
        sa.Column('icon_name', sa.Text(), nullable=False),
        sa.Column('route_path', sa.Text(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        'subscription_plan',
        _id(),
        sa.Column('plan_name', sa.Text(), nullable=False),
        sa.Column('plan_description', sa.Text(), nullable=True),
        sa.Column('price', sa.Text(), nullable=False),
        sa.Column('billing_period', sa.Text(), nullable=False),
        sa.Column('features', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        'user_subscription',
        _id(),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False, unique=True),
        sa.Column('subscription_tier', sa.Text(), nullable=False, server_default='free'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['app_user.id'], ),
    )


def downgrade() -> None:
    op.drop_table('user_subscription')
    op.drop_table('subscription_plan')
    op.drop_table('admin_category')
    op.drop_index('ix_admin_content_page_name', table_name='admin_content')
    op.drop_table('admin_content')
    op.drop_table('rhythm_visual')
    op.drop_table('user_preferences')
    op.drop_table('visual_theme')
    op.drop_table('sleep_tool')
    op.drop_table('renewal_visual')
    op.drop_index('ix_saved_renewal_item_user_id', table_name='saved_renewal_item')
    op.drop_table('saved_renewal_item')
    op.drop_table('community_insight')
    op.drop_index('ix_program_analytics_date', table_name='program_analytics')
    op.drop_table('program_analytics')
    op.drop_index('ix_program_enrollment_program_id', table_name='program_enrollment')
    op.drop_index('ix_program_enrollment_user_id', table_name='program_enrollment')
    op.drop_table('program_enrollment')
    op.drop_table('wellness_program')
    op.drop_table('wellness_goal')
    op.drop_index('ix_daily_activity_date_type', table_name='daily_activity')
    op.drop_table('daily_activity')
    op.drop_index('ix_meditation_session_date', table_name='meditation_session')
    op.drop_table('meditation_session')
    op.drop_index('ix_workout_exercise_workout_id', table_name='workout_exercise')
    op.drop_table('workout_exercise')
    op.drop_index('ix_workout_date', table_name='workout')
    op.drop_table('workout')
    op.drop_index('ix_nutrition_log_date', table_name='nutrition_log')
    op.drop_table('nutrition_log')
    op.drop_table('journal_entry')
    op.drop_table('app_user')
