"""create flight and transportation passenger assignment tables

Revision ID: 20261019_0930_create_passenger_assignments
Revises: 20261019_0920_create_bookings
Create Date: 2026-10-19 09:30:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_0930_create_passenger_assignments'
down_revision = '20261019_0920_create_bookings'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'flight_passenger_assignments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('flight_id', sa.String(36), sa.ForeignKey('flight_coordination.id', ondelete='CASCADE'), nullable=False),
        sa.Column('group_member_id', sa.String(36), sa.ForeignKey('travel_group_members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('seat_class', sa.String(32), nullable=False, server_default='economy'),
        sa.Column('status', sa.String(32), nullable=False, server_default='confirmed'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_flight_passenger_assignments_flight_id', 'flight_passenger_assignments', ['flight_id'])
    op.create_index('ix_flight_passenger_assignments_group_member_id', 'flight_passenger_assignments', ['group_member_id'])

    op.create_table(
        'transportation_passenger_assignments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column(
            'transportation_id',
            sa.String(36),
            sa.ForeignKey('ground_transportation_coordination.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('group_member_id', sa.String(36), sa.ForeignKey('travel_group_members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(32), nullable=False, server_default='confirmed'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_transportation_passenger_assignments_transportation_id', 'transportation_passenger_assignments', ['transportation_id'])
    op.create_index('ix_transportation_passenger_assignments_group_member_id', 'transportation_passenger_assignments', ['group_member_id'])

def downgrade() -> None:
    op.drop_table('transportation_passenger_assignments')
    op.drop_table('flight_passenger_assignments')
