"""Business failures raised by the catalog, calculator and quotation code.

None of these know about HTTP; entrypoints.http.exception_handlers picks
the status code from the class.
"""

from typing import Any

FieldError = dict[str, str]


class DomainError(Exception):
    """Root of the hierarchy. Unmapped subclasses surface as 400."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """Rejected input that passed type checks but breaks a business rule.

    Examples:
        - price_min above price_max in a catalog search
        - downpayment at or above the design price
        - term_months outside the design's loan offer

    ``errors`` carries one ``{"field", "message", "code"}`` entry per
    offending field when the failure can be pinned to fields.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[FieldError] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """Lookup by identifier found nothing, e.g. an unknown design id."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        message = (
            f"{resource} with identifier '{identifier}' not found"
            if identifier
            else f"{resource} not found"
        )
        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """The request is well formed but the design's current state refuses it."""

    error_code: str = "CONFLICT"


class UnauthorizedError(DomainError):
    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    error_code: str = "FORBIDDEN"


class InternalError(DomainError):
    """An invariant the code relies on did not hold. Logged at ERROR."""

    error_code: str = "INTERNAL_ERROR"
