from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable

from construct_lite.domain.amortization import (
    TermUnit,
    compute_payment_schedule,
    format_term,
    summarize,
)
from construct_lite.domain.design import Design
from construct_lite.domain.errors import NotFoundError, ValidationError
from construct_lite.domain.quotation import (
    LoanNotOfferedError,
    LoanQuotation,
    default_downpayment,
    downpayment_percentage,
    generate_quotation_id,
    quotation_valid_until,
)
from construct_lite.ports.design_catalog_repository import DesignCatalogRepository
from construct_lite.use_cases.get_design_by_id import ensure_design_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PrepareLoanQuotationRequest:
    design_id: str
    downpayment: Decimal | None = None  # Defaults to the design's estimate, else 20% of price
    term_months: int | None = None  # Defaults to the design's maximum term


class PrepareLoanQuotation:
    """
    Build a loan quotation for a catalog design.

    The schedule is built by domain.amortization.compute_payment_schedule
    with the term expressed in months.
    """

    def __init__(
        self,
        design_catalog_repository: DesignCatalogRepository,
        today: Callable[[], date] = date.today,
        rng: random.Random | None = None,
    ) -> None:
        self._design_catalog_repository = design_catalog_repository
        self._today = today
        self._rng = rng

    def execute(self, request: PrepareLoanQuotationRequest) -> LoanQuotation:
        """
        Raises:
            ValidationError: Invalid design id, downpayment or term
            NotFoundError: No design has the given id
            LoanNotOfferedError: Design is not offered on loan or its loan
                configuration yields no schedule
        """
        ensure_design_id(request.design_id)
        design = self._design_catalog_repository.get_by_id(request.design_id)
        if design is None:
            raise NotFoundError(resource="Design", identifier=request.design_id)

        if not design.has_loan_configuration:
            raise LoanNotOfferedError(
                "Loan details are not fully configured for this design",
                design_id=design.id,
            )

        downpayment = (
            request.downpayment if request.downpayment is not None else default_downpayment(design)
        )
        term_months = (
            request.term_months if request.term_months is not None else design.max_term_months
        )
        self._validate_selection(design, downpayment, term_months)

        loan_amount = design.price - downpayment
        schedule = compute_payment_schedule(
            principal=loan_amount,
            term_length=term_months,
            interest_rate=design.interest_rate,
            interest_rate_basis=design.interest_rate_type,
            term_unit=TermUnit.MONTHS,
        )
        if not schedule:
            raise LoanNotOfferedError(
                "Invalid loan configuration. Please check term or interest rate.",
                design_id=design.id,
            )

        quoted_on = self._today()
        quotation = LoanQuotation(
            quotation_id=generate_quotation_id(quoted_on, self._rng),
            design=design,
            quoted_on=quoted_on,
            valid_until=quotation_valid_until(quoted_on),
            price=design.price,
            downpayment=downpayment,
            downpayment_percentage=downpayment_percentage(design.price, downpayment),
            loan_amount=loan_amount,
            term_months=term_months,
            term_display=format_term(term_months, design.loan_term_type),
            interest_rate=design.interest_rate,
            interest_rate_basis=design.interest_rate_type,
            schedule=schedule,
            summary=summarize(schedule, loan_amount=loan_amount),
        )

        logger.info(
            "Loan quotation prepared",
            extra={
                "quotation_id": quotation.quotation_id,
                "design_id": design.id,
                "term_months": term_months,
                "loan_amount": str(loan_amount),
            },
        )
        return quotation

    def _validate_selection(self, design: Design, downpayment: Decimal, term_months: int) -> None:
        errors: list[dict[str, str]] = []

        if downpayment < 0:
            errors.append(
                {
                    "field": "downpayment",
                    "message": "Must be greater than or equal to 0",
                    "code": "INVALID_VALUE",
                }
            )
        elif downpayment >= design.price:
            errors.append(
                {
                    "field": "downpayment",
                    "message": "Must be less than the design price",
                    "code": "INVALID_VALUE",
                }
            )

        if not design.min_term_months <= term_months <= design.max_term_months:
            errors.append(
                {
                    "field": "term_months",
                    "message": (
                        f"Must be between {design.min_term_months} "
                        f"and {design.max_term_months} months"
                    ),
                    "code": "INVALID_RANGE",
                }
            )
        elif term_months % design.term_step_months != 0:
            errors.append(
                {
                    "field": "term_months",
                    "message": f"Must be a multiple of {design.term_step_months} months",
                    "code": "INVALID_VALUE",
                }
            )

        if errors:
            raise ValidationError(errors=errors)
