"""Initial booking schema and seeded time slots

Revision ID: 3b1f0c9a7d21
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from datetime import time
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b1f0c9a7d21'
down_revision = None
branch_labels = None
depends_on = None

SLOTS = [
    (1, time(7, 0), time(8, 30)),
    (2, time(8, 45), time(10, 15)),
    (3, time(10, 30), time(12, 0)),
    (4, time(12, 30), time(14, 0)),
    (5, time(14, 15), time(15, 45)),
    (6, time(16, 0), time(17, 30)),
]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(200), nullable=False),
        sa.Column('role', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'campuses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('address', sa.Text()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('campus_id', sa.Integer(), sa.ForeignKey('campuses.id'), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('room_type', sa.String(50), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('code', 'campus_id', name='uq_rooms_code_campus'),
    )
    op.create_index('ix_rooms_campus_id', 'rooms', ['campus_id'])

    slots = op.create_table(
        'slots',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('slot_number', sa.Integer(), nullable=False, unique=True),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
    )

    op.create_table(
        'roomslots',
        sa.Column('room_id', sa.Integer(), sa.ForeignKey('rooms.id'), primary_key=True),
        sa.Column('slot_id', sa.Integer(), sa.ForeignKey('slots.id'), primary_key=True),
    )

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('booking_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(8), nullable=False),
        sa.Column('requested_at', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('approved_at', sa.TIMESTAMP(timezone=True)),
        sa.Column('rejected_at', sa.TIMESTAMP(timezone=True)),
        sa.Column('canceled_at', sa.TIMESTAMP(timezone=True)),
        sa.Column('reviewed_by_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_bookings_user_id', 'bookings', ['user_id'])
    op.create_index('ix_bookings_booking_date', 'bookings', ['booking_date'])
    op.create_index('ix_bookings_status', 'bookings', ['status'])

    op.create_table(
        'booking_roomslots',
        sa.Column('booking_id', sa.Integer(), sa.ForeignKey('bookings.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('room_id', sa.Integer(), primary_key=True),
        sa.Column('slot_id', sa.Integer(), primary_key=True),
        sa.ForeignKeyConstraint(['room_id', 'slot_id'], ['roomslots.room_id', 'roomslots.slot_id']),
    )

    op.bulk_insert(
        slots,
        [
            {"slot_number": number, "start_time": start, "end_time": end}
            for number, start, end in SLOTS
        ]
    )


def downgrade() -> None:
    op.drop_table('booking_roomslots')
    op.drop_index('ix_bookings_status', table_name='bookings')
    op.drop_index('ix_bookings_booking_date', table_name='bookings')
    op.drop_index('ix_bookings_user_id', table_name='bookings')
    op.drop_table('bookings')
    op.drop_table('roomslots')
    op.drop_table('slots')
    op.drop_index('ix_rooms_campus_id', table_name='rooms')
    op.drop_table('rooms')
    op.drop_table('campuses')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
