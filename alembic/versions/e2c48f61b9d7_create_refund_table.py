"""create refund table

Revision ID: e2c48f61b9d7
Revises: d5a93c27f08e
Create Date: 2024-03-16 14:02:38.471906

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'e2c48f61b9d7'
down_revision: Union[str, None] = 'd5a93c27f08e'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "refunds",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("gross_amount", sa.Float(), nullable=False),
        sa.Column("refund_type", sa.String(), nullable=False),
        sa.Column("fv_fixed_credit", sa.Float(), nullable=False),
        sa.Column("fv_variable_credit", sa.Float(), nullable=False),
        sa.Column("ebay_tax_refunded", sa.Float(), nullable=False),
        sa.Column("net_amount", sa.Float(), nullable=False),
        sa.Column("date", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("refunds")
