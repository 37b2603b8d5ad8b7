"""initial camp schema

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '1a2b3c4d5e6f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'children',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("gender in ('male','female','other')", name='ck_children_gender'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_children_name', 'children', ['name'], unique=False)

    op.create_table(
        'groups',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'disciplines',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('result_type', sa.String(length=32), nullable=False),
        sa.Column('aggregation_method', sa.String(length=32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "result_type in ('one_time','multiple_times','number','multiple_numbers')",
            name='ck_disciplines_result_type',
        ),
        sa.CheckConstraint(
            "aggregation_method in ('best_result','sum','mean')",
            name='ck_disciplines_aggregation_method',
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_disciplines_created_at', 'disciplines', ['created_at'], unique=False)

    op.create_table(
        'child_groups',
        sa.Column('child_id', sa.Integer(), nullable=False),
        sa.Column('group_id', sa.Integer(), nullable=False),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['child_id'], ['children.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('child_id', 'group_id'),
    )
    op.create_index('idx_child_groups_group_id', 'child_groups', ['group_id'], unique=False)

    op.create_table(
        'child_disciplines',
        sa.Column('child_id', sa.Integer(), nullable=False),
        sa.Column('discipline_id', sa.Integer(), nullable=False),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['child_id'], ['children.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['discipline_id'], ['disciplines.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('child_id', 'discipline_id'),
    )
    op.create_index('idx_child_disciplines_discipline_id', 'child_disciplines', ['discipline_id'], unique=False)

    op.create_table(
        'measurements',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('child_id', sa.Integer(), nullable=False),
        sa.Column('discipline_id', sa.Integer(), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('attempt_number', sa.Integer(), nullable=False),
        sa.Column('recorded_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('attempt_number >= 1', name='ck_measurements_attempt_number'),
        sa.ForeignKeyConstraint(['child_id'], ['children.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['discipline_id'], ['disciplines.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_measurements_discipline_id', 'measurements', ['discipline_id'], unique=False)
    op.create_index('idx_measurements_child_discipline', 'measurements', ['child_id', 'discipline_id'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_measurements_child_discipline', table_name='measurements')
    op.drop_index('idx_measurements_discipline_id', table_name='measurements')
    op.drop_table('measurements')
    op.drop_index('idx_child_disciplines_discipline_id', table_name='child_disciplines')
    op.drop_table('child_disciplines')
    op.drop_index('idx_child_groups_group_id', table_name='child_groups')
    op.drop_table('child_groups')
    op.drop_index('idx_disciplines_created_at', table_name='disciplines')
    op.drop_table('disciplines')
    op.drop_table('groups')
    op.drop_index('idx_children_name', table_name='children')
    op.drop_table('children')
