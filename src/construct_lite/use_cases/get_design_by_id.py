"""Get design by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from construct_lite.domain.design import Design
from construct_lite.domain.errors import NotFoundError, ValidationError
from construct_lite.ports.design_catalog_repository import DesignCatalogRepository


@dataclass(frozen=True, slots=True)
class GetDesignByIdRequest:
    design_id: str


@dataclass(frozen=True, slots=True)
class GetDesignByIdResponse:
    design: Design


def ensure_design_id(design_id: str) -> None:
    """
    Raises:
        ValidationError: If design_id is not a valid UUID string
    """
    try:
        UUID(design_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "design_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        ) from None


class GetDesignById:
    """
    Use case for retrieving a single design by ID.

    Responsibilities:
    - Validate design_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the design doesn't exist
    """

    def __init__(self, design_catalog_repository: DesignCatalogRepository) -> None:
        self._design_catalog_repository = design_catalog_repository

    def execute(self, request: GetDesignByIdRequest) -> GetDesignByIdResponse:
        """
        Raises:
            ValidationError: If design_id is not a valid UUID format
            NotFoundError: If no design has the given id
        """
        ensure_design_id(request.design_id)

        design = self._design_catalog_repository.get_by_id(request.design_id)

        if design is None:
            raise NotFoundError(resource="Design", identifier=request.design_id)

        return GetDesignByIdResponse(design=design)
