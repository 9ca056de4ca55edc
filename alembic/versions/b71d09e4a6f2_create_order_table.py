"""create order table

Revision ID: b71d09e4a6f2
Revises: 8f24b6c1e3a0
Create Date: 2024-03-09 10:26:03.114580

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b71d09e4a6f2'
down_revision: Union[str, None] = '8f24b6c1e3a0'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "orders",
        sa.Column("order_number", sa.String(), nullable=False),
        sa.Column("date", sa.String(), nullable=False),
        sa.Column("item_title", sa.String(), nullable=False),
        sa.Column("item_id", sa.String(), nullable=False),
        sa.Column("buyer_username", sa.String(), nullable=False),
        sa.Column("buyer_name", sa.String(), nullable=False),
        sa.Column("city", sa.String(), nullable=False),
        sa.Column("state", sa.String(), nullable=False),
        sa.Column("zip", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("item_subtotal", sa.Float(), nullable=False),
        sa.Column("shipping_handling", sa.Float(), nullable=False),
        sa.Column("ebay_collected_tax", sa.Float(), nullable=False),
        sa.Column("fv_fixed", sa.Float(), nullable=False),
        sa.Column("fv_variable", sa.Float(), nullable=False),
        sa.Column("international_fee", sa.Float(), nullable=False),
        sa.Column("gross_amount", sa.Float(), nullable=False),
        sa.Column("net_amount", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("order_number"),
    )


def downgrade() -> None:
    op.drop_table("orders")
