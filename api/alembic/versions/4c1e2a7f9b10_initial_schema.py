"""initial_schema

Revision ID: 4c1e2a7f9b10
Revises:
Create Date: 2018-09-24 10:12:40.512311

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e2a7f9b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('user_id'),
        sa.UniqueConstraint('email')
    )

    op.create_table(
        'store_hives',
        sa.Column('hive_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=5), nullable=False),
        sa.Column('name', sa.String(length=60), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('last_updated_by', sa.Integer(), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('hive_id')
    )
    op.create_index(op.f('ix_store_hives_hive_id'), 'store_hives', ['hive_id'], unique=False)
    op.create_index(op.f('ix_store_hives_code'), 'store_hives', ['code'], unique=False)

    op.create_table(
        'store_hive_sections',
        sa.Column('hive_section_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=5), nullable=False),
        sa.Column('name', sa.String(length=60), nullable=False),
        sa.Column('store_hive_id', sa.Integer(), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('last_updated_by', sa.Integer(), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['store_hive_id'], ['store_hives.hive_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('hive_section_id')
    )
    op.create_index(op.f('ix_store_hive_sections_hive_section_id'), 'store_hive_sections', ['hive_section_id'], unique=False)
    op.create_index(op.f('ix_store_hive_sections_code'), 'store_hive_sections', ['code'], unique=False)
    op.create_index(op.f('ix_store_hive_sections_store_hive_id'), 'store_hive_sections', ['store_hive_id'], unique=False)

    op.create_table(
        'product_categories',
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=60), nullable=False),
        sa.PrimaryKeyConstraint('category_id')
    )


def downgrade() -> None:
    op.drop_table('product_categories')
    op.drop_index(op.f('ix_store_hive_sections_store_hive_id'), table_name='store_hive_sections')
    op.drop_index(op.f('ix_store_hive_sections_code'), table_name='store_hive_sections')
    op.drop_index(op.f('ix_store_hive_sections_hive_section_id'), table_name='store_hive_sections')
    op.drop_table('store_hive_sections')
    op.drop_index(op.f('ix_store_hives_code'), table_name='store_hives')
    op.drop_index(op.f('ix_store_hives_hive_id'), table_name='store_hives')
    op.drop_table('store_hives')
    op.drop_table('users')
