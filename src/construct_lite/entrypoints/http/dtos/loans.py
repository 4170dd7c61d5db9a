from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from construct_lite.domain.amortization import MAX_TERM_MONTHS
from construct_lite.entrypoints.http.dtos.design_catalog import MONEY_PATTERN


RATE_PATTERN = r"^\d+(\.\d{1,4})?$"


class ExportFormat(str, Enum):
    XLSX = "xlsx"
    PDF = "pdf"


class PaymentScheduleRowDTO(BaseModel):
    month: int
    payment: str
    principal_portion: str
    interest_portion: str
    remaining_balance: str


class LoanSummaryDTO(BaseModel):
    monthly_payment: str
    total_interest: str
    total_amount_paid: str
    loan_amount: str


class PaymentScheduleRequestDTO(BaseModel):
    """Request payload for the stand-alone amortization calculator."""

    principal: str = Field(
        description="Amount to finance as decimal string",
        examples=["1200000.00"],
        pattern=MONEY_PATTERN,
    )
    term_length: int = Field(
        description="Loan term expressed in term_unit; at most 600 months or 50 years",
        examples=[12],
        ge=0,
        le=MAX_TERM_MONTHS,
    )
    term_unit: str = Field(
        default="years",
        description="Unit of term_length",
        pattern=r"^(months|years)$",
        examples=["months"],
    )
    interest_rate: str = Field(
        description="Interest rate percentage as decimal string (e.g. '12' = 12%)",
        examples=["12"],
        pattern=RATE_PATTERN,
    )
    interest_rate_basis: str = Field(
        default="yearly",
        description="Whether interest_rate is quoted per month or per year",
        pattern=r"^(monthly|yearly)$",
        examples=["yearly"],
    )
    preview_months: int | None = Field(
        default=None,
        description="Return only the first N schedule rows (summary still covers all rows)",
        examples=[12],
        ge=1,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "1200000.00",
                "term_length": 12,
                "term_unit": "months",
                "interest_rate": "12",
                "interest_rate_basis": "yearly",
                "preview_months": 12,
            }
        }
    )


class PaymentScheduleResponseDTO(BaseModel):
    """Computed schedule; an empty schedule means no loan for these terms."""

    term_months: int
    monthly_rate: str | None
    payment_count: int
    summary: LoanSummaryDTO
    schedule: list[PaymentScheduleRowDTO]


class LoanQuotationQueryDTO(BaseModel):
    """Query parameters for a design's loan quotation."""

    downpayment: str | None = Field(
        default=None,
        description="Downpayment as decimal string; defaults to the design's estimate or 20% of price",
        examples=["500000.00"],
        pattern=MONEY_PATTERN,
    )
    term_months: int | None = Field(
        default=None,
        description="Selected term in months; defaults to the design's maximum term",
        examples=[120],
        ge=1,
        le=MAX_TERM_MONTHS,
    )
    preview_months: int = Field(
        default=12,
        description="Number of schedule rows to include in the response",
        examples=[12],
        ge=1,
    )


class LoanQuotationResponseDTO(BaseModel):
    quotation_id: str
    design_id: str
    design_name: str
    quoted_on: date
    valid_until: date
    price: str
    downpayment: str
    downpayment_percentage: str
    loan_amount: str
    term_months: int
    term_display: str
    interest_rate: str
    interest_rate_basis: str
    total_project_cost: str
    payment_count: int
    summary: LoanSummaryDTO
    schedule: list[PaymentScheduleRowDTO]
