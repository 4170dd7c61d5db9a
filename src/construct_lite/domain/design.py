from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from construct_lite.domain.amortization import (
    MONTHS_PER_YEAR,
    RateBasis,
    TermUnit,
)
from construct_lite.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


MAX_PAGE_SIZE = 200


@dataclass(frozen=True)
class Design:
    """A house design offered in the catalog, optionally with a loan offer."""

    id: str
    design_code: str
    name: str
    price: Decimal
    number_of_rooms: int
    square_meters: Decimal
    category: str
    description: str = ""
    images: tuple[str, ...] = ()
    created_by: str = "Admin"
    is_loan_offer: bool = False
    max_loan_term: int | None = None  # Expressed in loan_term_type units
    loan_term_type: TermUnit = TermUnit.YEARS
    interest_rate: Decimal | None = None  # Percentage on interest_rate_type basis
    interest_rate_type: RateBasis = RateBasis.YEARLY
    estimated_downpayment: Decimal | None = None

    @property
    def max_term_months(self) -> int:
        if not self.max_loan_term or self.max_loan_term <= 0:
            return 0
        if self.loan_term_type is TermUnit.YEARS:
            return self.max_loan_term * MONTHS_PER_YEAR
        return self.max_loan_term

    @property
    def term_step_months(self) -> int:
        return MONTHS_PER_YEAR if self.loan_term_type is TermUnit.YEARS else 1

    @property
    def min_term_months(self) -> int:
        return self.term_step_months

    @property
    def has_loan_configuration(self) -> bool:
        return (
            self.is_loan_offer
            and self.max_term_months > 0
            and self.interest_rate is not None
            and self.interest_rate >= 0
        )


@dataclass(frozen=True, slots=True)
class DesignFilters:
    category: str | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    rooms_min: int | None = None
    loan_offer: bool | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        if self.rooms_min is not None and self.rooms_min < 1:
            raise FilterValidationError("rooms_min must be >= 1")
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_SIZE:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_SIZE}")
