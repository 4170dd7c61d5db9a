from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from construct_lite.domain.amortization import (
    LoanSummary,
    LoanTerms,
    PaymentScheduleRow,
    compute_schedule_for_terms,
    summarize,
)


@dataclass(frozen=True, slots=True)
class PaymentSchedulePlan:
    terms: LoanTerms
    term_months: int
    monthly_rate: Decimal | None
    schedule: list[PaymentScheduleRow]
    summary: LoanSummary

    @property
    def is_empty(self) -> bool:
        return not self.schedule


class CalculatePaymentSchedule:
    """
    Stand-alone amortization calculator.

    An empty schedule is a valid outcome (no loan for these terms), not an
    error; the summary is then all zeros.
    """

    def execute(self, terms: LoanTerms) -> PaymentSchedulePlan:
        schedule = compute_schedule_for_terms(terms)
        loan_amount = terms.principal if schedule else Decimal("0.00")

        return PaymentSchedulePlan(
            terms=terms,
            term_months=terms.term_in_months,
            monthly_rate=terms.monthly_rate,
            schedule=schedule,
            summary=summarize(schedule, loan_amount=loan_amount),
        )
