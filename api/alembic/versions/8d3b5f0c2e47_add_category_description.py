"""add_category_description

Revision ID: 8d3b5f0c2e47
Revises: 4c1e2a7f9b10
Create Date: 2018-10-02 18:12:11.204519

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d3b5f0c2e47'
down_revision: Union[str, None] = '4c1e2a7f9b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        'product_categories',
        sa.Column('category_description', sa.String(length=300), nullable=True)
    )


def downgrade() -> None:
    op.drop_column('product_categories', 'category_description')
