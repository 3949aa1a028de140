"""Add exercise_events and notes tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 14:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DAILY_ROW = 'start_time IS NULL AND duration_min IS NULL'


def upgrade() -> None:
    """Create exercise_events (with the one-daily-row index) and notes."""
    op.create_table('exercise_events', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('intensity', sa.String(length=8), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=True),
        sa.Column('duration_min', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.CheckConstraint("intensity IN ('none', 'light', 'hard')", name='ck_exercise_intensity'),
        sa.CheckConstraint('duration_min IS NULL OR duration_min > 0', name='ck_exercise_duration_positive'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index('ix_exercise_events_user_date', 'exercise_events', ['user_id', 'date'], unique=False)
    op.create_index('uq_exercise_events_daily', 'exercise_events', ['user_id', 'date'], unique=True,
                    sqlite_where=sa.text(DAILY_ROW), postgresql_where=sa.text(DAILY_ROW))

    op.create_table('notes', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_notes_user_id'), 'notes', ['user_id'], unique=False)
    op.create_index(op.f('ix_notes_date'), 'notes', ['date'], unique=False)


def downgrade() -> None:
    """Drop notes and exercise_events."""
    op.drop_index(op.f('ix_notes_date'), table_name='notes')
    op.drop_index(op.f('ix_notes_user_id'), table_name='notes')
    op.drop_table('notes')
    op.drop_index('uq_exercise_events_daily', table_name='exercise_events')
    op.drop_index('ix_exercise_events_user_date', table_name='exercise_events')
    op.drop_table('exercise_events')
