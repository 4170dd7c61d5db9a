"""Fixed-payment loan amortization.

Pure functions shared by the calculator endpoint, the quotation preview and
the quotation export.

Rounding policy:
- All arithmetic uses Decimal, never float
- The level payment is rounded once to cents (ROUND_HALF_UP)
- Each period's interest is rounded to cents (ROUND_HALF_UP)
- The principal portion is payment - interest, capped at the open balance
- The final period absorbs whatever balance remains, so the schedule ends at 0
  and the principal portions add up to the financed amount exactly
- The principal itself is rounded to cents before anything else; an amount
  that rounds to 0.00 (e.g. 0.004) finances nothing and gets an empty schedule
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Sequence, Union

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
MONTHS_PER_YEAR = 12
MAX_TERM_MONTHS = 600  # 50 years

Number = Union[Decimal, int, float, str]


class TermUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class RateBasis(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True, slots=True)
class LoanTerms:
    """Loan terms as configured on a design or typed into the calculator."""

    principal: Decimal
    term_length: int
    interest_rate: Decimal
    interest_rate_basis: RateBasis = RateBasis.YEARLY
    term_unit: TermUnit = TermUnit.YEARS

    @property
    def term_in_months(self) -> int:
        return normalize_term_months(self.term_length, self.term_unit) or 0

    @property
    def monthly_rate(self) -> Decimal | None:
        return normalize_monthly_rate(self.interest_rate, self.interest_rate_basis)


@dataclass(frozen=True, slots=True)
class PaymentScheduleRow:
    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True, slots=True)
class LoanSummary:
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount_paid: Decimal
    loan_amount: Decimal


def _to_decimal(value: Number | None) -> Decimal | None:
    """Coerce a number to a finite Decimal, or None when that is impossible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_term_months(term_length: Number, term_unit: TermUnit | str) -> int | None:
    """
    Convert a term expressed in ``term_unit`` to a whole number of months.

    Returns None when the unit is unknown or the result is not a whole
    number of months between 1 and MAX_TERM_MONTHS.
    """
    try:
        unit = TermUnit(term_unit)
    except ValueError:
        return None

    length = _to_decimal(term_length)
    if length is None:
        return None

    months = length * MONTHS_PER_YEAR if unit is TermUnit.YEARS else length
    if not 1 <= months <= MAX_TERM_MONTHS or months != months.to_integral_value():
        return None
    return int(months)


def normalize_monthly_rate(
    interest_rate: Number, interest_rate_basis: RateBasis | str
) -> Decimal | None:
    """
    Convert a percentage rate on the given basis to a monthly decimal rate.

    12 (yearly) -> 0.01; 1 (monthly) -> 0.01. Returns None for negative,
    non-finite or unparseable rates and unknown bases.
    """
    try:
        basis = RateBasis(interest_rate_basis)
    except ValueError:
        return None

    rate = _to_decimal(interest_rate)
    if rate is None or rate < 0:
        return None

    monthly_rate = rate / Decimal(100)
    if basis is RateBasis.YEARLY:
        monthly_rate = monthly_rate / MONTHS_PER_YEAR
    return monthly_rate


def level_payment(principal: Decimal, term_months: int, monthly_rate: Decimal) -> Decimal:
    """Standard amortized payment M = P*r / (1 - (1+r)^-n), rounded to cents."""
    if monthly_rate == 0:
        return _to_cents(principal / term_months)

    one = Decimal(1)
    return _to_cents(principal * monthly_rate / (one - (one + monthly_rate) ** -term_months))


def compute_payment_schedule(
    principal: Number,
    term_length: Number,
    interest_rate: Number,
    interest_rate_basis: RateBasis | str = RateBasis.YEARLY,
    term_unit: TermUnit | str = TermUnit.YEARS,
) -> list[PaymentScheduleRow]:
    """
    Build a fixed-payment amortization schedule.

    Out-of-domain input (a principal under half a cent, a term that does not
    normalize to 1..MAX_TERM_MONTHS whole months, a negative rate) yields an
    empty list: callers treat "no loan" and "invalid loan configuration" alike.

    Args:
        principal: Amount financed
        term_length: Term expressed in ``term_unit``
        interest_rate: Percentage rate expressed on ``interest_rate_basis``
        interest_rate_basis: Whether the rate is quoted per month or per year
        term_unit: Whether the term is expressed in months or years

    Returns:
        One row per month, ascending, ending with a remaining balance of 0
    """
    amount = _to_decimal(principal)
    term_months = normalize_term_months(term_length, term_unit)
    monthly_rate = normalize_monthly_rate(interest_rate, interest_rate_basis)

    balance = _to_cents(amount) if amount is not None else None

    if balance is None or balance <= 0 or term_months is None or monthly_rate is None:
        logger.debug(
            "Loan terms out of domain, returning empty schedule",
            extra={
                "principal": str(principal),
                "term_length": str(term_length),
                "term_unit": str(term_unit),
                "interest_rate": str(interest_rate),
                "interest_rate_basis": str(interest_rate_basis),
            },
        )
        return []

    payment = level_payment(balance, term_months, monthly_rate)

    schedule: list[PaymentScheduleRow] = []
    for month in range(1, term_months + 1):
        interest_portion = _to_cents(balance * monthly_rate)
        if month == term_months:
            principal_portion = balance
        else:
            principal_portion = min(payment - interest_portion, balance)
        balance -= principal_portion

        schedule.append(
            PaymentScheduleRow(
                month=month,
                payment=principal_portion + interest_portion,
                principal_portion=principal_portion,
                interest_portion=interest_portion,
                remaining_balance=balance,
            )
        )

    return schedule


def compute_schedule_for_terms(terms: LoanTerms) -> list[PaymentScheduleRow]:
    return compute_payment_schedule(
        principal=terms.principal,
        term_length=terms.term_length,
        interest_rate=terms.interest_rate,
        interest_rate_basis=terms.interest_rate_basis,
        term_unit=terms.term_unit,
    )


def summarize(
    schedule: Sequence[PaymentScheduleRow], loan_amount: Number | None = None
) -> LoanSummary:
    """
    Reduce a schedule to its headline figures.

    ``loan_amount`` defaults to the sum of the principal portions, which
    equals the financed amount for any schedule built by
    ``compute_payment_schedule``.
    """
    zero = Decimal("0.00")
    total_principal = sum((row.principal_portion for row in schedule), zero)
    amount = _to_decimal(loan_amount)

    return LoanSummary(
        monthly_payment=schedule[0].payment if schedule else zero,
        total_interest=sum((row.interest_portion for row in schedule), zero),
        total_amount_paid=sum((row.payment for row in schedule), zero),
        loan_amount=amount if amount is not None else total_principal,
    )


def format_currency(amount: Number, symbol: str = "₱") -> str:
    """Render money with two decimals and thousands separators, e.g. ₱1,234.50."""
    value = _to_decimal(amount)
    if value is None:
        value = Decimal(0)
    return f"{symbol}{_to_cents(value):,.2f}"


def format_term(term_months: int, term_unit: TermUnit | str = TermUnit.MONTHS) -> str:
    """Display a term in the unit the design is configured with: '2 years', '18 months'."""
    if term_months <= 0:
        return "N/A"

    if TermUnit(term_unit) is TermUnit.YEARS:
        years = round(term_months / MONTHS_PER_YEAR)
        return f"{years} year" if years == 1 else f"{years} years"

    return f"{term_months} month" if term_months == 1 else f"{term_months} months"
