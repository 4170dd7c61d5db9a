"""Create designs table

Revision ID: 3c1e9b7d2a40
Revises:
Create Date: 2026-10-19 09:12:41.118305

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1e9b7d2a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "designs",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("design_code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("number_of_rooms", sa.Integer(), nullable=False),
        sa.Column("square_meters", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("images", postgresql.ARRAY(sa.Text()), nullable=False),
        sa.Column("created_by", sa.String(length=100), nullable=False),
        sa.Column("is_loan_offer", sa.Boolean(), nullable=False),
        sa.Column("max_loan_term", sa.Integer(), nullable=True),
        sa.Column("loan_term_type", sa.String(length=10), nullable=False),
        sa.Column("interest_rate", sa.Numeric(precision=7, scale=4), nullable=True),
        sa.Column("interest_rate_type", sa.String(length=10), nullable=False),
        sa.Column("estimated_downpayment", sa.Numeric(precision=14, scale=2), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("price >= 0", name="ck_designs_price_non_negative"),
        sa.CheckConstraint("number_of_rooms >= 1", name="ck_designs_rooms_positive"),
        sa.CheckConstraint("interest_rate IS NULL OR interest_rate >= 0", name="ck_designs_rate"),
        sa.CheckConstraint(
            "loan_term_type IN ('months', 'years')", name="ck_designs_loan_term_type"
        ),
        sa.CheckConstraint(
            "interest_rate_type IN ('monthly', 'yearly')", name="ck_designs_interest_rate_type"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("design_code"),
    )
    op.create_index(op.f("ix_designs_category"), "designs", ["category"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_designs_category"), table_name="designs")
    op.drop_table("designs")
