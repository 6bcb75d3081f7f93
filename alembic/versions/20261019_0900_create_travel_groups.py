"""create travel_groups table

Revision ID: 20261019_0900_create_travel_groups
Revises:
Create Date: 2026-10-19 09:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_0900_create_travel_groups'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'travel_groups',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('group_type', sa.String(32), nullable=False),
        sa.Column('department', sa.String(255), nullable=True),
        sa.Column('priority_level', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('arrival_date', sa.Date(), nullable=True),
        sa.Column('departure_date', sa.Date(), nullable=True),
        sa.Column('arrival_location', sa.String(255), nullable=True),
        sa.Column('departure_location', sa.String(255), nullable=True),
        sa.Column('group_leader_id', sa.String(36), nullable=True),
        sa.Column('backup_contact_id', sa.String(36), nullable=True),
        sa.Column('special_requirements', sa.JSON(), nullable=False),
        sa.Column('dietary_restrictions', sa.JSON(), nullable=False),
        sa.Column('accessibility_needs', sa.JSON(), nullable=False),
        sa.Column('total_members', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('confirmed_members', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(32), nullable=False, server_default='planning'),
        sa.Column('flights_done', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('hotels_done', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('transport_done', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('event_id', sa.String(36), nullable=True),
        sa.Column('tour_id', sa.String(36), nullable=True),
        sa.Column('created_by', sa.String(36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('confirmed_members <= total_members', name='ck_travel_groups_confirmed_le_total'),
        sa.CheckConstraint('priority_level BETWEEN 1 AND 5', name='ck_travel_groups_priority_range'),
    )
    op.create_index('ix_travel_groups_group_type', 'travel_groups', ['group_type'])
    op.create_index('ix_travel_groups_status', 'travel_groups', ['status'])
    op.create_index('ix_travel_groups_event_id', 'travel_groups', ['event_id'])
    op.create_index('ix_travel_groups_tour_id', 'travel_groups', ['tour_id'])

def downgrade() -> None:
    op.drop_index('ix_travel_groups_tour_id', table_name='travel_groups')
    op.drop_index('ix_travel_groups_event_id', table_name='travel_groups')
    op.drop_index('ix_travel_groups_status', table_name='travel_groups')
    op.drop_index('ix_travel_groups_group_type', table_name='travel_groups')
    op.drop_table('travel_groups')
