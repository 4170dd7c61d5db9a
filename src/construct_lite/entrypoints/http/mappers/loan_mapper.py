from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Sequence

from construct_lite.domain.amortization import (
    LoanSummary,
    LoanTerms,
    PaymentScheduleRow,
    RateBasis,
    TermUnit,
)
from construct_lite.domain.errors import ValidationError
from construct_lite.domain.quotation import LoanQuotation
from construct_lite.entrypoints.http.dtos.loans import (
    LoanQuotationQueryDTO,
    LoanQuotationResponseDTO,
    LoanSummaryDTO,
    PaymentScheduleRequestDTO,
    PaymentScheduleResponseDTO,
    PaymentScheduleRowDTO,
)
from construct_lite.use_cases.calculate_payment_schedule import PaymentSchedulePlan
from construct_lite.use_cases.prepare_loan_quotation import PrepareLoanQuotationRequest


def _parse_decimal(field: str, raw: str, errors: list[dict[str, str]]) -> Decimal:
    try:
        return Decimal(raw)
    except (InvalidOperation, ValueError):
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {raw}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Decimal("0")  # Placeholder to continue validation


class LoanMapper:
    """Maps between REST DTOs and domain models for schedules and quotations."""

    @staticmethod
    def to_loan_terms(dto: PaymentScheduleRequestDTO) -> LoanTerms:
        """
        Converts the calculator payload to domain LoanTerms (str → Decimal).

        Raises:
            ValidationError: If monetary or rate strings are not valid decimals
        """
        errors: list[dict[str, str]] = []
        principal = _parse_decimal("principal", dto.principal, errors)
        interest_rate = _parse_decimal("interest_rate", dto.interest_rate, errors)

        if errors:
            raise ValidationError(errors=errors)

        return LoanTerms(
            principal=principal,
            term_length=dto.term_length,
            interest_rate=interest_rate,
            interest_rate_basis=RateBasis(dto.interest_rate_basis),
            term_unit=TermUnit(dto.term_unit),
        )

    @staticmethod
    def to_quotation_request(
        design_id: str, dto: LoanQuotationQueryDTO
    ) -> PrepareLoanQuotationRequest:
        errors: list[dict[str, str]] = []
        downpayment = (
            _parse_decimal("downpayment", dto.downpayment, errors)
            if dto.downpayment is not None
            else None
        )

        if errors:
            raise ValidationError(errors=errors)

        return PrepareLoanQuotationRequest(
            design_id=design_id,
            downpayment=downpayment,
            term_months=dto.term_months,
        )

    @staticmethod
    def to_row_response(row: PaymentScheduleRow) -> PaymentScheduleRowDTO:
        return PaymentScheduleRowDTO(
            month=row.month,
            payment=str(row.payment),
            principal_portion=str(row.principal_portion),
            interest_portion=str(row.interest_portion),
            remaining_balance=str(row.remaining_balance),
        )

    @staticmethod
    def to_summary_response(summary: LoanSummary) -> LoanSummaryDTO:
        return LoanSummaryDTO(
            monthly_payment=str(summary.monthly_payment),
            total_interest=str(summary.total_interest),
            total_amount_paid=str(summary.total_amount_paid),
            loan_amount=str(summary.loan_amount),
        )

    @staticmethod
    def to_rows_response(
        schedule: Sequence[PaymentScheduleRow], preview_months: int | None
    ) -> list[PaymentScheduleRowDTO]:
        """Truncates the displayed rows without touching the computed schedule."""
        shown = schedule if preview_months is None else schedule[:preview_months]
        return [LoanMapper.to_row_response(row) for row in shown]

    @staticmethod
    def to_schedule_response(
        plan: PaymentSchedulePlan, preview_months: int | None = None
    ) -> PaymentScheduleResponseDTO:
        return PaymentScheduleResponseDTO(
            term_months=plan.term_months,
            monthly_rate=str(plan.monthly_rate) if plan.monthly_rate is not None else None,
            payment_count=len(plan.schedule),
            summary=LoanMapper.to_summary_response(plan.summary),
            schedule=LoanMapper.to_rows_response(plan.schedule, preview_months),
        )

    @staticmethod
    def to_quotation_response(
        quotation: LoanQuotation, preview_months: int | None = None
    ) -> LoanQuotationResponseDTO:
        return LoanQuotationResponseDTO(
            quotation_id=quotation.quotation_id,
            design_id=quotation.design.id,
            design_name=quotation.design.name,
            quoted_on=quotation.quoted_on,
            valid_until=quotation.valid_until,
            price=str(quotation.price),
            downpayment=str(quotation.downpayment),
            downpayment_percentage=str(quotation.downpayment_percentage),
            loan_amount=str(quotation.loan_amount),
            term_months=quotation.term_months,
            term_display=quotation.term_display,
            interest_rate=str(quotation.interest_rate),
            interest_rate_basis=quotation.interest_rate_basis.value,
            total_project_cost=str(quotation.total_project_cost),
            payment_count=len(quotation.schedule),
            summary=LoanMapper.to_summary_response(quotation.summary),
            schedule=LoanMapper.to_rows_response(quotation.schedule, preview_months),
        )
