"""Content tables: users, projects, spaces, dashboards, saved charts, saved SQL

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

from insight_backend.db.types import GUID

revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _authored() -> list[sa.Column]:
    return [
        sa.Column('created_by', GUID(), sa.ForeignKey('users.id'), nullable=True, index=True),
        sa.Column('updated_by', GUID(), sa.ForeignKey('users.id'), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), unique=True, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'projects',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'spaces',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('project_id', GUID(), sa.ForeignKey('projects.id'), nullable=False, index=True),
        sa.Column('parent_space_id', GUID(), sa.ForeignKey('spaces.id'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('is_private', sa.Boolean(), nullable=False),
        *_authored(),
        *_timestamps(),
    )
    op.create_index('ix_spaces_project_parent', 'spaces', ['project_id', 'parent_space_id'])

    op.create_table(
        'dashboards',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('project_id', GUID(), sa.ForeignKey('projects.id'), nullable=False, index=True),
        sa.Column('space_id', GUID(), sa.ForeignKey('spaces.id'), nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('views_count', sa.Integer(), nullable=False),
        *_authored(),
        *_timestamps(),
    )

    op.create_table(
        'saved_charts',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('project_id', GUID(), sa.ForeignKey('projects.id'), nullable=False, index=True),
        sa.Column('space_id', GUID(), sa.ForeignKey('spaces.id'), nullable=False, index=True),
        sa.Column('dashboard_id', GUID(), sa.ForeignKey('dashboards.id'), nullable=True, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('chart_kind', sa.String(50), nullable=False),
        sa.Column('explore_name', sa.String(255), nullable=False),
        sa.Column('views_count', sa.Integer(), nullable=False),
        *_authored(),
        *_timestamps(),
    )

    op.create_table(
        'saved_sql',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('project_id', GUID(), sa.ForeignKey('projects.id'), nullable=False, index=True),
        sa.Column('space_id', GUID(), sa.ForeignKey('spaces.id'), nullable=False, index=True),
        sa.Column('dashboard_id', GUID(), sa.ForeignKey('dashboards.id'), nullable=True, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('chart_kind', sa.String(50), nullable=False),
        sa.Column('sql', sa.Text(), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False, index=True),
        sa.Column('views_count', sa.Integer(), nullable=False),
        *_authored(),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table('saved_sql')
    op.drop_table('saved_charts')
    op.drop_table('dashboards')
    op.drop_index('ix_spaces_project_parent', table_name='spaces')
    op.drop_table('spaces')
    op.drop_table('projects')
    op.drop_table('users')
