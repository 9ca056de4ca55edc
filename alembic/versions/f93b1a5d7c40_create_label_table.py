"""create label table

Revision ID: f93b1a5d7c40
Revises: e2c48f61b9d7
Create Date: 2024-04-02 09:17:20.336052

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'f93b1a5d7c40'
down_revision: Union[str, None] = 'e2c48f61b9d7'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "labels",
        sa.Column("tracking_number", sa.String(), nullable=False),
        sa.Column("order_number", sa.String(), nullable=False),
        sa.Column("shipping_service", sa.String(), nullable=False),
        sa.Column("cost", sa.Float(), nullable=False),
        sa.Column("date", sa.String(), nullable=False),
        sa.Column("buyer_username", sa.String(), nullable=False),
        sa.Column("notes", sa.String(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("tracking_number"),
    )
    op.create_index("ix_labels_order_number", "labels", ["order_number"])


def downgrade() -> None:
    op.drop_index("ix_labels_order_number", table_name="labels")
    op.drop_table("labels")
