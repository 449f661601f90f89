"""init_inventory_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Schema:
- event, layout: external documents stored verbatim (JSON)
- orders: order documents with the columns inventory filters on
- ticket_hold, seat_hold: checkout holds with expiry
- inventory_block: admin blocks (GA quantity or single seat), owned
- inventory_log: append-only audit trail, owned
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== STEP 1: External documents ==========

    op.create_table(
        'event',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('document', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'layout',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('document', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'orders',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column('document', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_orders_event_id_status', 'orders', ['event_id', 'status'])

    # ========== STEP 2: Checkout holds ==========

    op.create_table(
        'ticket_hold',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('ticket_type_id', sa.String(length=255), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=True),
        sa.Column('held_until', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ticket_hold_event_id'), 'ticket_hold', ['event_id'])

    op.create_table(
        'seat_hold',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('seat_id', sa.String(length=255), nullable=False),
        sa.Column('held_until', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_seat_hold_event_id'), 'seat_hold', ['event_id'])

    # ========== STEP 3: Owned inventory records ==========

    op.create_table(
        'inventory_block',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('tier_id', sa.String(length=255), nullable=True),
        sa.Column('tier_name', sa.String(length=255), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=True),
        sa.Column('seat_id', sa.String(length=255), nullable=True),
        sa.Column('section_id', sa.String(length=255), nullable=True),
        sa.Column('section_name', sa.String(length=255), nullable=True),
        sa.Column('row', sa.String(length=64), nullable=True),
        sa.Column('seat_number', sa.String(length=64), nullable=True),
        sa.Column('blocked_by', sa.String(length=255), nullable=False),
        sa.Column('blocked_by_name', sa.String(length=255), nullable=False),
        sa.Column('blocked_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('released_by', sa.String(length=255), nullable=True),
        sa.Column('released_by_name', sa.String(length=255), nullable=True),
        sa.Column('released_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_inventory_block_event_id_status', 'inventory_block', ['event_id', 'status']
    )

    op.create_table(
        'inventory_log',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('action', sa.String(length=32), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('quantity_change', sa.Integer(), nullable=False),
        sa.Column('tier_id', sa.String(length=255), nullable=True),
        sa.Column('tier_name', sa.String(length=255), nullable=True),
        sa.Column('seat_ids', sa.JSON(), nullable=False),
        sa.Column('section_id', sa.String(length=255), nullable=True),
        sa.Column('section_name', sa.String(length=255), nullable=True),
        sa.Column('previous_value', sa.Integer(), nullable=True),
        sa.Column('new_value', sa.Integer(), nullable=True),
        sa.Column('performed_by', sa.String(length=255), nullable=False),
        sa.Column('performed_by_name', sa.String(length=255), nullable=False),
        sa.Column('performed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_inventory_log_event_id_performed_at', 'inventory_log', ['event_id', 'performed_at']
    )


def downgrade() -> None:
    op.drop_index('ix_inventory_log_event_id_performed_at', table_name='inventory_log')
    op.drop_table('inventory_log')
    op.drop_index('ix_inventory_block_event_id_status', table_name='inventory_block')
    op.drop_table('inventory_block')
    op.drop_index(op.f('ix_seat_hold_event_id'), table_name='seat_hold')
    op.drop_table('seat_hold')
    op.drop_index(op.f('ix_ticket_hold_event_id'), table_name='ticket_hold')
    op.drop_table('ticket_hold')
    op.drop_index('ix_orders_event_id_status', table_name='orders')
    op.drop_table('orders')
    op.drop_table('layout')
    op.drop_table('event')
