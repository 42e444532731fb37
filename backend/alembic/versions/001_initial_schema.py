"""initial schema: periods and period-dependent content

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00

Dependents reference periods.id without ON DELETE CASCADE; period
deletion is handled by the integrity service.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'periods',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=False, unique=True, index=True),
        sa.Column('timeframe', sa.String(100), nullable=False, server_default=''),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('icon', sa.String(50), nullable=False, server_default=''),
        sa.Column('is_show', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0', index=True),
        *_timestamps(),
    )

    op.create_table(
        'event_types',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('slug', sa.String(100), nullable=False, unique=True, index=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('color', sa.String(7), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('period_id', sa.Integer(), sa.ForeignKey('periods.id'), nullable=True, index=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('slug', sa.String(500), nullable=True, index=True),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('year', sa.String(100), nullable=False, server_default=''),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    op.create_table(
        'event_to_event_type',
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('events.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('event_type_id', sa.Integer(), sa.ForeignKey('event_types.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'historical_figures',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('period_id', sa.Integer(), sa.ForeignKey('periods.id'), nullable=True, index=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=True, index=True),
        sa.Column('period_text', sa.String(200), nullable=True),
        sa.Column('lifespan', sa.String(100), nullable=False, server_default=''),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    op.create_table(
        'historical_sites',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('period_id', sa.Integer(), sa.ForeignKey('periods.id'), nullable=True, index=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=True, index=True),
        sa.Column('location', sa.String(200), nullable=False, server_default=''),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    # Grouped ordering lookups: WHERE period_id = ? ORDER BY sort_order, id
    op.create_index('idx_events_period_order', 'events', ['period_id', 'sort_order'])
    op.create_index('idx_figures_period_order', 'historical_figures', ['period_id', 'sort_order'])
    op.create_index('idx_sites_period_order', 'historical_sites', ['period_id', 'sort_order'])


def downgrade() -> None:
    op.drop_index('idx_sites_period_order', table_name='historical_sites')
    op.drop_index('idx_figures_period_order', table_name='historical_figures')
    op.drop_index('idx_events_period_order', table_name='events')
    op.drop_table('historical_sites')
    op.drop_table('historical_figures')
    op.drop_table('event_to_event_type')
    op.drop_table('events')
    op.drop_table('event_types')
    op.drop_table('periods')
