"""PostgreSQL implementation of DesignCatalogRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from construct_lite.domain.amortization import RateBasis, TermUnit
from construct_lite.domain.design import Design, DesignFilters, Paging
from construct_lite.infra.db.models.design import DesignRow
from construct_lite.ports.design_catalog_repository import (
    DesignCatalogRepository,
    SearchResult,
)

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresDesignCatalogRepository(DesignCatalogRepository):
    """
    PostgreSQL implementation of DesignCatalogRepository.

    - Applies filters using SQL WHERE clauses
    - Returns total_count via COUNT(*) over the filtered query
    - Orders by creation time then id so paging is stable
    - Converts DesignRow (infrastructure) to Design (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: DesignFilters, paging: Paging) -> SearchResult:
        """
        Search catalog with filters and paging.

        Executes two queries:
        1. COUNT(*) to get total matching designs (before paging)
        2. SELECT with OFFSET/LIMIT to get the requested page

        Args:
            filters: Filter criteria (AND semantics) - must be pre-validated
            paging: Pagination parameters - must be pre-validated

        Returns:
            SearchResult with designs and total_count
        """
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = (
            query.order_by(DesignRow.created_at, DesignRow.id)
            .offset(paging.offset)
            .limit(paging.limit)
        )

        rows = self._session.execute(query).scalars().all()
        designs = [self._to_domain(row) for row in rows]

        return SearchResult(designs=designs, total_count=total_count)

    def get_by_id(self, design_id: str) -> Design | None:
        try:
            key = UUID(design_id)
        except ValueError:  # Invalid UUID format
            return None

        query = select(DesignRow).where(DesignRow.id == key)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _build_query(self, filters: DesignFilters) -> Select[tuple[DesignRow]]:
        query = select(DesignRow)

        # Case-insensitive exact match for category
        if filters.category:
            query = query.where(func.lower(DesignRow.category) == func.lower(filters.category))

        # Price range filters (inclusive)
        if filters.price_min is not None:
            query = query.where(DesignRow.price >= filters.price_min)
        if filters.price_max is not None:
            query = query.where(DesignRow.price <= filters.price_max)

        if filters.rooms_min is not None:
            query = query.where(DesignRow.number_of_rooms >= filters.rooms_min)
        if filters.loan_offer is not None:
            query = query.where(DesignRow.is_loan_offer.is_(filters.loan_offer))

        return query

    def _to_domain(self, row: DesignRow) -> Design:
        return Design(
            id=str(row.id),
            design_code=row.design_code,
            name=row.name,
            description=row.description or "",
            price=row.price,
            number_of_rooms=row.number_of_rooms,
            square_meters=row.square_meters,
            category=row.category,
            images=tuple(row.images or ()),
            created_by=row.created_by or "Admin",
            is_loan_offer=bool(row.is_loan_offer),
            max_loan_term=row.max_loan_term,
            loan_term_type=TermUnit(row.loan_term_type or TermUnit.YEARS.value),
            interest_rate=row.interest_rate,
            interest_rate_type=RateBasis(row.interest_rate_type or RateBasis.YEARLY.value),
            estimated_downpayment=row.estimated_downpayment,
        )
