"""initial schema

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a7b9d10'
down_revision = None
branch_labels = None
depends_on = None

DIFFICULTIES = ('Easy', 'Medium', 'Hard')
STATUSES = ('Not Started', 'In Progress', 'Completed', 'Failed')


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'USER', name='userrole'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('email_confirmed', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'problems',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('difficulty', sa.Enum(*DIFFICULTIES, name='difficulty'), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('url', sa.String(1000), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.Enum(*STATUSES, name='problemstatus'), nullable=False),
        sa.Column('attempts', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('language', sa.String(50), nullable=True),
        sa.Column('time_complexity', sa.String(100), nullable=True),
        sa.Column('space_complexity', sa.String(100), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('is_starred', sa.Boolean(), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_problems_id', 'problems', ['id'])
    op.create_index('ix_problems_user_id', 'problems', ['user_id'])

    op.create_table(
        'notes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('problem_id', sa.Integer(), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_notes_id', 'notes', ['id'])
    op.create_index('ix_notes_user_id', 'notes', ['user_id'])

    op.create_table(
        'ai_analyses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('problem_id', sa.Integer(), sa.ForeignKey('problems.id'), nullable=False),
        sa.Column('analysis', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_ai_analyses_id', 'ai_analyses', ['id'])
    op.create_index('ix_ai_analyses_user_id', 'ai_analyses', ['user_id'])
    op.create_index('ix_ai_analyses_problem_id', 'ai_analyses', ['problem_id'])

    op.create_table(
        'practice_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('plan_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(50), nullable=True),
        sa.Column('plan', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_practice_plans_id', 'practice_plans', ['id'])
    op.create_index('ix_practice_plans_user_id', 'practice_plans', ['user_id'])
    op.create_index('ix_practice_plans_plan_date', 'practice_plans', ['plan_date'])

    op.create_table(
        'recommendations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('difficulty', sa.String(20), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('priority', sa.String(20), nullable=True),
        sa.Column('estimated_time', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_recommendations_id', 'recommendations', ['id'])
    op.create_index('ix_recommendations_user_id', 'recommendations', ['user_id'])


def downgrade():
    op.drop_table('recommendations')
    op.drop_table('practice_plans')
    op.drop_table('ai_analyses')
    op.drop_table('notes')
    op.drop_table('problems')
    op.drop_table('users')
    sa.Enum(name='problemstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='difficulty').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
