"""create travel_group_members table

Revision ID: 20261019_0910_create_travel_group_members
Revises: 20261019_0900_create_travel_groups
Create Date: 2026-10-19 09:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_0910_create_travel_group_members'
down_revision = '20261019_0900_create_travel_groups'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'travel_group_members',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('group_id', sa.String(36), sa.ForeignKey('travel_groups.id', ondelete='CASCADE'), nullable=False),
        sa.Column('member_name', sa.String(255), nullable=False),
        sa.Column('member_email', sa.String(255), nullable=False, server_default=''),
        sa.Column('member_phone', sa.String(64), nullable=False, server_default=''),
        sa.Column('member_role', sa.String(255), nullable=False, server_default=''),
        sa.Column('staff_id', sa.String(36), nullable=True),
        sa.Column('seat_preference', sa.String(64), nullable=False, server_default=''),
        sa.Column('meal_preference', sa.String(64), nullable=False, server_default=''),
        sa.Column('special_assistance', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('wheelchair_required', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('mobility_assistance', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(32), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_travel_group_members_group_id', 'travel_group_members', ['group_id'])
    op.create_index('ix_travel_group_members_status', 'travel_group_members', ['status'])

def downgrade() -> None:
    op.drop_index('ix_travel_group_members_status', table_name='travel_group_members')
    op.drop_index('ix_travel_group_members_group_id', table_name='travel_group_members')
    op.drop_table('travel_group_members')
