"""create agenda tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


SESSION_STATUS = sa.Enum(
    'scheduled',
    'done',
    'confirmed',
    'cancelled_by_client',
    'cancelled_by_professional',
    name='session_status',
    native_enum=False,
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'professionals',
        sa.Column('professional_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('professional_id'),
    )

    op.create_table(
        'sessions',
        sa.Column('session_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('professional_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('client_name', sa.String(), nullable=False),
        sa.Column('client_reference', sa.String(), nullable=True),
        sa.Column('session_date', sa.Date(), nullable=False),
        sa.Column('session_time', sa.Time(), nullable=True),
        sa.Column('duration_code', sa.String(), nullable=False, server_default='1h'),
        sa.Column('therapy_type', sa.String(), nullable=True),
        sa.Column('status', SESSION_STATUS, nullable=False, server_default='scheduled'),
        sa.Column('is_confirmed_by_client', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['professional_id'], ['professionals.professional_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('session_id'),
    )
    op.create_index(op.f('ix_sessions_professional_id'), 'sessions', ['professional_id'], unique=False)
    op.create_index(op.f('ix_sessions_session_date'), 'sessions', ['session_date'], unique=False)

    op.create_table(
        'custom_slots',
        sa.Column('custom_slot_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('professional_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('slot_date', sa.Date(), nullable=False),
        sa.Column('slot_time', sa.Time(), nullable=False),
        sa.ForeignKeyConstraint(['professional_id'], ['professionals.professional_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('custom_slot_id'),
        sa.UniqueConstraint('professional_id', 'slot_date', 'slot_time', name='uq_custom_slot'),
    )
    op.create_index(op.f('ix_custom_slots_professional_id'), 'custom_slots', ['professional_id'], unique=False)

    op.create_table(
        'blocked_slots',
        sa.Column('block_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('professional_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('block_date', sa.Date(), nullable=False),
        sa.Column('is_full_day', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('start_time', sa.Time(), nullable=True),
        sa.Column('end_time', sa.Time(), nullable=True),
        sa.Column('reason', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['professional_id'], ['professionals.professional_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('block_id'),
    )
    op.create_index(op.f('ix_blocked_slots_professional_id'), 'blocked_slots', ['professional_id'], unique=False)
    op.create_index(op.f('ix_blocked_slots_block_date'), 'blocked_slots', ['block_date'], unique=False)

    op.create_table(
        'professional_day_configs',
        sa.Column('day_config_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('professional_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('config_date', sa.Date(), nullable=False),
        sa.Column('custom_start_time', sa.Time(), nullable=False),
        sa.ForeignKeyConstraint(['professional_id'], ['professionals.professional_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('day_config_id'),
        sa.UniqueConstraint('professional_id', 'config_date', name='uq_professional_day_config'),
    )
    op.create_index(
        op.f('ix_professional_day_configs_professional_id'),
        'professional_day_configs',
        ['professional_id'],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_professional_day_configs_professional_id'), table_name='professional_day_configs')
    op.drop_table('professional_day_configs')
    op.drop_index(op.f('ix_blocked_slots_block_date'), table_name='blocked_slots')
    op.drop_index(op.f('ix_blocked_slots_professional_id'), table_name='blocked_slots')
    op.drop_table('blocked_slots')
    op.drop_index(op.f('ix_custom_slots_professional_id'), table_name='custom_slots')
    op.drop_table('custom_slots')
    op.drop_index(op.f('ix_sessions_session_date'), table_name='sessions')
    op.drop_index(op.f('ix_sessions_professional_id'), table_name='sessions')
    op.drop_table('sessions')
    op.drop_table('professionals')
