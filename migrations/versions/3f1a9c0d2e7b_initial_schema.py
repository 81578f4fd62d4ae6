"""initial schema: resources, projects, assignments, id counters

Revision ID: 3f1a9c0d2e7b
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a9c0d2e7b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns():
    return [
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'id_counters',
        sa.Column('prefix', sa.String(length=16), primary_key=True),
        sa.Column('value', sa.Integer(), nullable=False, server_default='0'),
    )

    op.create_table(
        'employees',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('employee_number', sa.String(length=64), nullable=True),
        sa.Column('government_id', sa.String(length=64), nullable=True),
        sa.Column('tier', sa.SmallInteger(), nullable=True),
        sa.Column('position', sa.String(length=120), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('certifications', sa.JSON(), nullable=False),
        sa.Column('availability', sa.String(length=16), nullable=False, server_default='available'),
        sa.Column('utilization', sa.Float(), nullable=False, server_default='0'),
        sa.Column('location', sa.String(length=120), nullable=True),
        sa.Column('experience', sa.Float(), nullable=False, server_default='0'),
        sa.Column('avatar', sa.JSON(), nullable=True),
        sa.Column('wage', sa.Float(), nullable=False, server_default='0'),
        sa.Column('cost_per_hour', sa.Float(), nullable=False, server_default='0'),
        sa.Column('is_indirect', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('resource_master_id', sa.String(length=32), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_emp_availability', 'employees', ['availability'])
    op.create_index('ix_emp_location', 'employees', ['location'])
    op.create_index('ix_employees_resource_master_id', 'employees', ['resource_master_id'])
    op.create_index('ix_employees_is_deleted', 'employees', ['is_deleted'])

    op.create_table(
        'equipment',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('make', sa.String(length=120), nullable=False),
        sa.Column('model', sa.String(length=120), nullable=False),
        sa.Column('availability', sa.String(length=16), nullable=False, server_default='available'),
        sa.Column('utilization', sa.Float(), nullable=False, server_default='0'),
        sa.Column('location', sa.String(length=120), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('last_maintenance', sa.Date(), nullable=False),
        sa.Column('next_maintenance', sa.Date(), nullable=False),
        sa.Column('maintenance', sa.String(length=16), nullable=False, server_default='current'),
        sa.Column('value', sa.Float(), nullable=False, server_default='0'),
        sa.Column('cost_per_hour', sa.Float(), nullable=False, server_default='0'),
        sa.Column('depreciation_rate', sa.Float(), nullable=False, server_default='0'),
        sa.Column('resource_master_id', sa.String(length=32), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_eq_availability', 'equipment', ['availability'])
    op.create_index('ix_eq_location', 'equipment', ['location'])
    op.create_index('ix_equipment_resource_master_id', 'equipment', ['resource_master_id'])
    op.create_index('ix_equipment_is_deleted', 'equipment', ['is_deleted'])

    op.create_table(
        'projects',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='planning'),
        sa.Column('priority', sa.String(length=16), nullable=False, server_default='medium'),
        sa.Column('location', sa.String(length=120), nullable=True),
        sa.Column('progress', sa.Float(), nullable=False, server_default='0'),
        sa.Column('budget', sa.Float(), nullable=False, server_default='0'),
        sa.Column('actual_cost', sa.Float(), nullable=False, server_default='0'),
        sa.Column('resource_requirements', sa.JSON(), nullable=False),
        sa.Column('assigned_resources', sa.JSON(), nullable=False),
        *_audit_columns(),
    )
    op.create_index('ix_projects_start_date', 'projects', ['start_date'])
    op.create_index('ix_projects_end_date', 'projects', ['end_date'])
    op.create_index('ix_projects_is_deleted', 'projects', ['is_deleted'])

    op.create_table(
        'business_centers',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=64), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('current_occupancy', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('manager', sa.String(length=120), nullable=True),
        sa.Column('contact', sa.String(length=120), nullable=True),
        sa.Column('location', sa.String(length=120), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_business_centers_is_deleted', 'business_centers', ['is_deleted'])

    op.create_table(
        'resource_groups',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('group_type', sa.String(length=32), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('member_ids', sa.JSON(), nullable=False),
        sa.Column('member_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('average_cost_per_hour', sa.Float(), nullable=False, server_default='0'),
        sa.Column('total_capacity', sa.Float(), nullable=False, server_default='0'),
        sa.Column('location', sa.String(length=120), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_resource_groups_group_type', 'resource_groups', ['group_type'])
    op.create_index('ix_resource_groups_is_deleted', 'resource_groups', ['is_deleted'])

    op.create_table(
        'resource_masters',
        sa.Column('resource_id', sa.String(length=32), primary_key=True),
        sa.Column('resource_name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('resource_type', sa.String(length=16), nullable=False),
        *_audit_columns(),
    )
    op.create_index('ix_resource_masters_is_deleted', 'resource_masters', ['is_deleted'])

    op.create_table(
        'assignments',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('project_id', sa.String(length=32), nullable=False),
        sa.Column('resource_id', sa.String(length=32), nullable=False),
        sa.Column('resource_type', sa.String(length=16), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='active'),
        sa.Column('schedule', sa.JSON(), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_assignments_project_id', 'assignments', ['project_id'])
    op.create_index('ix_assignments_resource_id', 'assignments', ['resource_id'])
    op.create_index('ix_asg_range', 'assignments', ['start_date', 'end_date'])
    op.create_index('ix_assignments_is_deleted', 'assignments', ['is_deleted'])


def downgrade() -> None:
    for table in ('assignments', 'resource_masters', 'resource_groups', 'business_centers',
                  'projects', 'equipment', 'employees', 'id_counters'):
        op.drop_table(table)
