"""Create categories and products tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories and products tables."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False, index=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('discount', sa.Float(), nullable=False, server_default='0'),
        sa.Column('image', sa.String(1000), nullable=False, server_default=''),
        sa.Column('status', sa.String(50), nullable=False, server_default='active', index=True),
        sa.Column('category_id', sa.String(36),
                  sa.ForeignKey('categories.id'), nullable=False, index=True),
        sa.Column('product_code', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    # Generated product codes must be unique
    op.create_unique_constraint(
        'uq_products_product_code',
        'products',
        ['product_code'],
    )


def downgrade() -> None:
    """Drop products and categories tables."""
    op.drop_table('products')
    op.drop_table('categories')
