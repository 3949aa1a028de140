"""Create users, sleep_sessions and app_settings tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create tables and seed the default time zone."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('sleep_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('wake_date', sa.Date(), nullable=False),
        sa.Column('bed_time', sa.Time(), nullable=False),
        sa.Column('wake_time', sa.Time(), nullable=False),
        sa.Column('latency_min', sa.Integer(), nullable=False),
        sa.Column('awakenings', sa.Integer(), nullable=False),
        sa.Column('quality', sa.Integer(), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=False),
        sa.Column('timezone', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('approximate', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.CheckConstraint('quality BETWEEN 1 AND 5', name='ck_sleep_quality_range'),
        sa.CheckConstraint('latency_min >= 0', name='ck_sleep_latency_non_negative'),
        sa.CheckConstraint('awakenings >= 0', name='ck_sleep_awakenings_non_negative'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sleep_sessions_user_id'), 'sleep_sessions', ['user_id'], unique=False)
    op.create_index('ix_sleep_sessions_user_wake_date', 'sleep_sessions', ['user_id', 'wake_date'], unique=False)

    settings_table = op.create_table('app_settings',
        sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('value', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.PrimaryKeyConstraint('key'))
    op.bulk_insert(settings_table, [{'key': 'user_timezone', 'value': 'Asia/Tokyo'}])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('app_settings')
    op.drop_index('ix_sleep_sessions_user_wake_date', table_name='sleep_sessions')
    op.drop_index(op.f('ix_sleep_sessions_user_id'), table_name='sleep_sessions')
    op.drop_table('sleep_sessions')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
