"""create wellness tables

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-17 09:12:40.218553

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a9d2b47'
down_revision = None
branch_labels = None
depends_on = None


def _user_fk(ondelete='CASCADE'):
    return sa.ForeignKey('users.id', ondelete=ondelete)


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('avatar_url', sa.String(500)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'quiz_responses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('question_id', sa.String(100), nullable=False),
        sa.Column('answer_index', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'quiz_results',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('balance_score', sa.Integer(), nullable=False),
        sa.Column('mood_result', sa.String(20), nullable=False),
        sa.Column('cognitive_score', sa.Integer(), nullable=False),
        sa.Column('physical_score', sa.Integer(), nullable=False),
        sa.Column('digital_score', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'wellness_goals',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('goal_id', sa.String(100), nullable=False),
        sa.Column('goal_title', sa.String(255), nullable=False),
        sa.Column('selected_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'wellness_plans',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('plan_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'user_metrics',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('metric_type', sa.String(20), nullable=False),
        sa.Column('value', sa.String(255), nullable=False),
        sa.Column('date', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'badges',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('badge_id', sa.String(100), nullable=False),
        sa.Column('badge_name', sa.String(255), nullable=False),
        sa.Column('earned_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'user_streaks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, unique=True),
        sa.Column('current_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('longest_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_activity_date', sa.Date()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'daily_tasks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('task_name', sa.String(255), nullable=False),
        sa.Column('task_time', sa.String(50), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completion_date', sa.Date()),
    )
    op.create_table(
        'family_members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('family_group_id', sa.String(100), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('joined_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'community_posts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('author_id', sa.Integer(), _user_fk('SET NULL'), index=True),
        sa.Column('author_name', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('likes_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('comments_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'post_likes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('community_posts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('post_id', 'user_id', name='uq_post_like_post_user'),
    )
    op.create_table(
        'post_comments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('community_posts.id', ondelete='CASCADE'),
                  nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('comment_text', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'user_settings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), _user_fk(), nullable=False, index=True),
        sa.Column('theme', sa.String(10), nullable=False, server_default='light'),
        sa.Column('notifications_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('sms_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('email_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )


def downgrade():
    for table in (
        'user_settings', 'post_comments', 'post_likes', 'community_posts', 'family_members',
        'daily_tasks', 'user_streaks', 'badges', 'user_metrics', 'wellness_plans',
        'wellness_goals', 'quiz_results', 'quiz_responses', 'users',
    ):
        op.drop_table(table)
