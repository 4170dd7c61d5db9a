"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "downpayment",
                "message": "Must be less than the design price",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Design with identifier '...' not found", "code": "NOT_FOUND"}

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "term_months", "message": "Must be between 12 and 240 months",
                     "code": "INVALID_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Design with identifier '...' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Loan details are not fully configured for this design",
                    "code": "LOAN_NOT_OFFERED",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "downpayment",
                            "message": "Must be less than the design price",
                            "code": "INVALID_VALUE",
                        },
                        {
                            "field": "term_months",
                            "message": "Must be a multiple of 12 months",
                            "code": "INVALID_VALUE",
                        },
                    ],
                },
            ]
        }
    )
