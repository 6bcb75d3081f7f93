"""create flight, ground transportation and lodging tables

Revision ID: 20261019_0920_create_bookings
Revises: 20261019_0910_create_travel_group_members
Create Date: 2026-10-19 09:20:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_0920_create_bookings'
down_revision = '20261019_0910_create_travel_group_members'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'flight_coordination',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('flight_number', sa.String(64), nullable=False),
        sa.Column('airline', sa.String(255), nullable=False),
        sa.Column('departure_airport', sa.String(255), nullable=False),
        sa.Column('arrival_airport', sa.String(255), nullable=False),
        sa.Column('departure_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('arrival_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('total_seats', sa.Integer(), nullable=True),
        sa.Column('booked_seats', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('group_id', sa.String(36), sa.ForeignKey('travel_groups.id', ondelete='SET NULL'), nullable=True),
        sa.Column('is_group_flight', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('booking_reference', sa.String(64), nullable=True),
        sa.Column('ticket_class', sa.String(32), nullable=False, server_default='economy'),
        sa.Column('fare_type', sa.String(32), nullable=False, server_default='standard'),
        sa.Column('status', sa.String(32), nullable=False, server_default='scheduled'),
        sa.Column('event_id', sa.String(36), nullable=True),
        sa.Column('tour_id', sa.String(36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_flight_coordination_group_id', 'flight_coordination', ['group_id'])
    op.create_index('ix_flight_coordination_event_id', 'flight_coordination', ['event_id'])
    op.create_index('ix_flight_coordination_tour_id', 'flight_coordination', ['tour_id'])

    op.create_table(
        'ground_transportation_coordination',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('transport_type', sa.String(32), nullable=False),
        sa.Column('provider_name', sa.String(255), nullable=True),
        sa.Column('pickup_location', sa.String(255), nullable=False),
        sa.Column('dropoff_location', sa.String(255), nullable=False),
        sa.Column('pickup_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('estimated_dropoff_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('vehicle_capacity', sa.Integer(), nullable=True),
        sa.Column('assigned_passengers', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('group_id', sa.String(36), sa.ForeignKey('travel_groups.id', ondelete='SET NULL'), nullable=True),
        sa.Column('driver_name', sa.String(255), nullable=True),
        sa.Column('driver_phone', sa.String(64), nullable=True),
        sa.Column('vehicle_plate', sa.String(32), nullable=True),
        sa.Column('status', sa.String(32), nullable=False, server_default='scheduled'),
        sa.Column('event_id', sa.String(36), nullable=True),
        sa.Column('tour_id', sa.String(36), nullable=True),
        sa.Column('flight_id', sa.String(36), sa.ForeignKey('flight_coordination.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_ground_transportation_coordination_group_id', 'ground_transportation_coordination', ['group_id'])
    op.create_index('ix_ground_transportation_coordination_event_id', 'ground_transportation_coordination', ['event_id'])
    op.create_index('ix_ground_transportation_coordination_tour_id', 'ground_transportation_coordination', ['tour_id'])

    op.create_table(
        'lodging_bookings',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('booking_number', sa.String(64), nullable=False),
        sa.Column('provider_name', sa.String(255), nullable=True),
        sa.Column('event_id', sa.String(36), nullable=True),
        sa.Column('tour_id', sa.String(36), nullable=True),
        sa.Column('group_id', sa.String(36), sa.ForeignKey('travel_groups.id', ondelete='SET NULL'), nullable=True),
        sa.Column('check_in_date', sa.Date(), nullable=False),
        sa.Column('check_out_date', sa.Date(), nullable=False),
        sa.Column('rooms_booked', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('guests_per_room', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('total_guests', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('primary_guest_name', sa.String(255), nullable=False),
        sa.Column('status', sa.String(32), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_lodging_bookings_booking_number', 'lodging_bookings', ['booking_number'])
    op.create_index('ix_lodging_bookings_group_id', 'lodging_bookings', ['group_id'])
    op.create_index('ix_lodging_bookings_event_id', 'lodging_bookings', ['event_id'])
    op.create_index('ix_lodging_bookings_tour_id', 'lodging_bookings', ['tour_id'])

def downgrade() -> None:
    op.drop_table('lodging_bookings')
    op.drop_table('ground_transportation_coordination')
    op.drop_table('flight_coordination')
