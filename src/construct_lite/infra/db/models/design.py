from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from construct_lite.infra.db.models.base import Base


class DesignRow(Base):
    __tablename__ = "designs"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_designs_price_non_negative"),
        CheckConstraint("number_of_rooms >= 1", name="ck_designs_rooms_positive"),
        CheckConstraint("interest_rate IS NULL OR interest_rate >= 0", name="ck_designs_rate"),
        CheckConstraint(
            "loan_term_type IN ('months', 'years')", name="ck_designs_loan_term_type"
        ),
        CheckConstraint(
            "interest_rate_type IN ('monthly', 'yearly')", name="ck_designs_interest_rate_type"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    design_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    price: Mapped[Decimal] = mapped_column(Numeric(precision=14, scale=2), nullable=False)
    number_of_rooms: Mapped[int] = mapped_column(Integer, nullable=False)
    square_meters: Mapped[Decimal] = mapped_column(Numeric(precision=10, scale=2), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    images: Mapped[list[str]] = mapped_column(ARRAY(Text), nullable=False, default=list)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False, default="Admin")

    is_loan_offer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    max_loan_term: Mapped[int | None] = mapped_column(Integer, nullable=True)
    loan_term_type: Mapped[str] = mapped_column(String(10), nullable=False, default="years")
    interest_rate: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=7, scale=4), nullable=True
    )
    interest_rate_type: Mapped[str] = mapped_column(String(10), nullable=False, default="yearly")
    estimated_downpayment: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=14, scale=2), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
