from fastapi import APIRouter, Depends

from construct_lite.entrypoints.http.dependencies import get_calculate_payment_schedule_use_case
from construct_lite.entrypoints.http.dtos.loans import (
    PaymentScheduleRequestDTO,
    PaymentScheduleResponseDTO,
)
from construct_lite.entrypoints.http.mappers.loan_mapper import LoanMapper
from construct_lite.use_cases.calculate_payment_schedule import CalculatePaymentSchedule


router = APIRouter(tags=["Loans"])


@router.post(
    "/loans/schedule",
    response_model=PaymentScheduleResponseDTO,
    summary="Compute a payment schedule",
    description="""
    Compute a level-payment amortization schedule.

    ## Monetary Values
    - All monetary values are strings (e.g., "1200000.00")
    - Amounts are rounded to cents; the last row absorbs any residual
      so the remaining balance always ends at exactly "0.00"

    ## Terms
    - term_unit: "years" (default) or "months"
    - term_length: at most 600; the term may not exceed 600 months (50 years)
    - interest_rate_basis: "yearly" (default) or "monthly"
    - interest_rate is a percentage ("12" = 12%); "0" gives an interest-free schedule

    ## Empty Schedules
    A zero principal or a term outside 1..600 months yields an empty
    schedule with all summary figures at "0.00". This is not an error.

    ## Example
    ```
    POST /v1/loans/schedule
    {
        "principal": "1200000.00",
        "term_length": 12,
        "term_unit": "months",
        "interest_rate": "12",
        "interest_rate_basis": "yearly"
    }
    ```
    """,
    responses={
        200: {
            "description": "Successful calculation",
            "content": {
                "application/json": {
                    "example": {
                        "term_months": 12,
                        "monthly_rate": "0.01",
                        "payment_count": 12,
                        "summary": {
                            "monthly_payment": "106618.55",
                            "total_interest": "79422.56",
                            "total_amount_paid": "1279422.56",
                            "loan_amount": "1200000.00",
                        },
                        "schedule": [
                            {
                                "month": 1,
                                "payment": "106618.55",
                                "principal_portion": "94618.55",
                                "interest_portion": "12000.00",
                                "remaining_balance": "1105381.45",
                            }
                        ],
                    }
                }
            },
        },
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid request parameters",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "term_unit",
                                "message": "String should match pattern '^(months|years)$'",
                                "code": "string_pattern_mismatch",
                            }
                        ],
                    }
                }
            },
        },
    },
)
def calculate_payment_schedule(
    payload: PaymentScheduleRequestDTO,
    use_case: CalculatePaymentSchedule = Depends(get_calculate_payment_schedule_use_case),
) -> PaymentScheduleResponseDTO:
    """Schedule endpoint following parse → map → execute → map."""
    # 1. Map to domain terms (string → Decimal)
    terms = LoanMapper.to_loan_terms(payload)

    # 2. Execute use case
    plan = use_case.execute(terms)

    # 3. Map to response, truncating only the displayed rows
    return LoanMapper.to_schedule_response(plan, preview_months=payload.preview_months)
