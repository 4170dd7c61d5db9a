from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from construct_lite.domain.amortization import (
    LoanSummary,
    PaymentScheduleRow,
    RateBasis,
)
from construct_lite.domain.design import Design
from construct_lite.domain.errors import ConflictError


DEFAULT_DOWNPAYMENT_RATIO = Decimal("0.20")
QUOTATION_VALIDITY_DAYS = 30

_MONTH_ABBREVIATIONS = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)


class LoanNotOfferedError(ConflictError):
    """The design has no usable loan offer (not flagged, or misconfigured)."""

    error_code: str = "LOAN_NOT_OFFERED"


@dataclass(frozen=True, slots=True)
class CompanyProfile:
    """Letterhead printed on exported quotations."""

    name: str
    address: str
    contact: str
    website: str


@dataclass(frozen=True, slots=True)
class LoanQuotation:
    quotation_id: str
    design: Design
    quoted_on: date
    valid_until: date
    price: Decimal
    downpayment: Decimal
    downpayment_percentage: Decimal
    loan_amount: Decimal
    term_months: int
    term_display: str
    interest_rate: Decimal
    interest_rate_basis: RateBasis
    schedule: list[PaymentScheduleRow]
    summary: LoanSummary

    @property
    def total_project_cost(self) -> Decimal:
        return self.summary.total_amount_paid + self.downpayment


def generate_quotation_id(today: date, rng: random.Random | None = None) -> str:
    """
    Build a quotation id: 'Q' + month abbreviation + 2-digit day + 3 random digits.

    Example: QOCT19042
    """
    digits = (rng or random).randint(0, 999)
    return f"Q{_MONTH_ABBREVIATIONS[today.month - 1]}{today.day:02d}{digits:03d}"


def quotation_valid_until(quoted_on: date) -> date:
    return quoted_on + timedelta(days=QUOTATION_VALIDITY_DAYS)


def format_long_date(value: date) -> str:
    """Date as printed on quotations, e.g. October 19, 2026."""
    return f"{value:%B} {value.day}, {value.year}"


def default_downpayment(design: Design) -> Decimal:
    """The design's estimated downpayment when set, else 20% of its price."""
    if design.estimated_downpayment is not None and design.estimated_downpayment > 0:
        return design.estimated_downpayment
    return (design.price * DEFAULT_DOWNPAYMENT_RATIO).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )


def downpayment_percentage(price: Decimal, downpayment: Decimal) -> Decimal:
    if price <= 0:
        return Decimal("0.0")
    return (downpayment / price * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
