"""create menu tables

Revision ID: 5c1e2f7a9b30
Revises:
Create Date: 2026-10-19 10:12:41.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1e2f7a9b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    # 1) sections
    op.create_table(
        "sections",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("display_order", sa.Integer(), server_default="0", nullable=False),
    )

    # 2) items (options is JSON text)
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("section_id", sa.Integer(), sa.ForeignKey("sections.id"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), server_default="0", nullable=False),
        sa.Column("available", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("options", sa.Text(), nullable=True),
    )
    op.create_index("idx_items_section", "items", ["section_id"])
    op.create_index("idx_items_name", "items", ["name"])

    # 3) standard_names (linked to items.name by value only)
    op.create_table(
        "standard_names",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False, unique=True),
    )


def downgrade():
    op.drop_table("standard_names")
    op.drop_index("idx_items_name", table_name="items")
    op.drop_index("idx_items_section", table_name="items")
    op.drop_table("items")
    op.drop_table("sections")
