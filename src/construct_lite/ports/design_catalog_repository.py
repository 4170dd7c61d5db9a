from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from construct_lite.domain.design import Design, DesignFilters, Paging


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including pagination metadata."""

    designs: list[Design]
    total_count: int | None = None  # Total matching designs before paging (None if not calculated)


class DesignCatalogRepository(ABC):
    """
    Port for design catalog data access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, filters: DesignFilters, paging: Paging) -> SearchResult:
        """
        Search catalog with filters and paging.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult containing matching designs and optional total count
        """
        ...

    @abstractmethod
    def get_by_id(self, design_id: str) -> Design | None:
        """Return the design with the given id, or None when it does not exist."""
        ...
