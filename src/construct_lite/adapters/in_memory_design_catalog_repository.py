from __future__ import annotations

from construct_lite.domain.design import Design, DesignFilters, Paging
from construct_lite.ports.design_catalog_repository import (
    DesignCatalogRepository,
    SearchResult,
)


class InMemoryDesignCatalogRepository(DesignCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Stores designs in insertion order
    - Applies AND-semantics filtering
    - Applies paging AFTER filtering
    - Returns total_count of matching designs before paging
    """

    def __init__(self, designs: list[Design]) -> None:
        self._designs = designs

    def search(self, filters: DesignFilters, paging: Paging) -> SearchResult:
        matches = [design for design in self._designs if self._matches(design, filters)]
        total_count = len(matches)

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(designs=matches[start:end], total_count=total_count)

    def get_by_id(self, design_id: str) -> Design | None:
        return next((design for design in self._designs if design.id == design_id), None)

    def _matches(self, design: Design, filters: DesignFilters) -> bool:
        if filters.category and design.category.lower() != filters.category.lower():
            return False
        if filters.price_min is not None and design.price < filters.price_min:
            return False
        if filters.price_max is not None and design.price > filters.price_max:
            return False
        if filters.rooms_min is not None and design.number_of_rooms < filters.rooms_min:
            return False
        if filters.loan_offer is not None and design.is_loan_offer != filters.loan_offer:
            return False
        return True
