from __future__ import annotations

from dataclasses import dataclass

from construct_lite.domain.design import Design, DesignFilters, Paging
from construct_lite.ports.design_catalog_repository import DesignCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchDesignCatalogRequest:
    filters: DesignFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchDesignCatalogResponse:
    designs: list[Design]
    total_count: int | None = None  # Total matching designs before paging (None if not calculated)


class SearchDesignCatalog:
    """
    Design catalog search with filters and pagination.

    Validates paging and filter parameters, then delegates filtering
    to the repository adapter. No filtering logic exists in the use case.
    """

    def __init__(self, design_catalog_repository: DesignCatalogRepository) -> None:
        self._design_catalog_repository = design_catalog_repository

    def execute(self, request: SearchDesignCatalogRequest) -> SearchDesignCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Search parameters (filters and paging)

        Returns:
            Response containing matching designs and optional total count

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._design_catalog_repository.search(
            filters=request.filters,
            paging=request.paging,
        )

        return SearchDesignCatalogResponse(
            designs=result.designs,
            total_count=result.total_count,
        )
