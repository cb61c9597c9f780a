"""baseline_users_and_usage_tracking

Revision ID: 3c1f0a9d2b7e
Revises: 
Create Date: 2026-10-19 09:12:44.102384

Production-safe migration: only creates tables that do not exist yet.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    """Create users and usage_tracking tables if they don't exist."""
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('password', sa.String(), nullable=False),
            sa.Column('full_name', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)

    if not table_exists('usage_tracking'):
        op.create_table('usage_tracking',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('ip_address', sa.String(length=45), nullable=False),
            sa.Column('usage_date', sa.Date(), nullable=False),
            sa.Column('generation_count', sa.Integer(), server_default='0', nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('ip_address', 'usage_date', name='uq_usage_ip_date')
        )
        op.create_index(op.f('ix_usage_tracking_id'), 'usage_tracking', ['id'], unique=False)
        op.create_index(op.f('ix_usage_tracking_ip_address'), 'usage_tracking', ['ip_address'], unique=False)
        op.create_index(op.f('ix_usage_tracking_usage_date'), 'usage_tracking', ['usage_date'], unique=False)


def downgrade() -> None:
    """Drop usage_tracking and users tables."""
    op.drop_index(op.f('ix_usage_tracking_usage_date'), table_name='usage_tracking')
    op.drop_index(op.f('ix_usage_tracking_ip_address'), table_name='usage_tracking')
    op.drop_index(op.f('ix_usage_tracking_id'), table_name='usage_tracking')
    op.drop_table('usage_tracking')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
