"""
Unit test suite for PostgresDesignCatalogRepository.

Uses a mocked Session; the SQL is checked by compiling the statements the
repository hands to Session.execute.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session

from construct_lite.adapters.postgres_design_catalog_repository import (
    PostgresDesignCatalogRepository,
)
from construct_lite.domain.amortization import RateBasis, TermUnit
from construct_lite.domain.design import Design, DesignFilters, Paging
from construct_lite.infra.db.models.design import DesignRow
from construct_lite.ports.design_catalog_repository import SearchResult

FIRST_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
SECOND_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def sample_rows() -> list[DesignRow]:
    return [
        DesignRow(
            id=FIRST_ID,
            design_code="RES-0001",
            name="Azure Bungalow",
            description="85 sqm bungalow",
            price=Decimal("2500000.00"),
            number_of_rooms=3,
            square_meters=Decimal("85.00"),
            category="residential",
            images=["a.jpg", "b.jpg"],
            created_by="Admin",
            is_loan_offer=True,
            max_loan_term=36,
            loan_term_type="months",
            interest_rate=Decimal("1.2500"),
            interest_rate_type="monthly",
            estimated_downpayment=Decimal("500000.00"),
        ),
        DesignRow(
            id=SECOND_ID,
            design_code="COM-0002",
            name="Harbor Showroom",
            description=None,
            price=Decimal("5200000.00"),
            number_of_rooms=6,
            square_meters=Decimal("240.00"),
            category="commercial",
            images=None,
            created_by=None,
            is_loan_offer=False,
            max_loan_term=None,
            loan_term_type=None,
            interest_rate=None,
            interest_rate_type=None,
            estimated_downpayment=None,
        ),
    ]


def _mock_search(mock_session: Mock, rows: list[DesignRow], count: int | None) -> None:
    count_result = Mock()
    count_result.scalar.return_value = count
    select_result = Mock()
    select_result.scalars.return_value.all.return_value = rows
    mock_session.execute.side_effect = [count_result, select_result]


def _compiled(statement) -> str:
    return str(
        statement.compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


# ==============================================================================
# Search
# ==============================================================================


def test_search_executes_count_then_select(
    mock_session: Mock, sample_rows: list[DesignRow]
) -> None:
    _mock_search(mock_session, sample_rows, 2)
    repo = PostgresDesignCatalogRepository(mock_session)

    result = repo.search(filters=DesignFilters(), paging=Paging())

    assert mock_session.execute.call_count == 2
    assert isinstance(result, SearchResult)
    assert result.total_count == 2
    assert [d.id for d in result.designs] == [str(FIRST_ID), str(SECOND_ID)]

    count_sql = _compiled(mock_session.execute.call_args_list[0].args[0])
    assert "count(*)" in count_sql


def test_search_applies_every_filter(mock_session: Mock) -> None:
    _mock_search(mock_session, [], 0)
    repo = PostgresDesignCatalogRepository(mock_session)

    repo.search(
        filters=DesignFilters(
            category="Residential",
            price_min=Decimal("1000000.00"),
            price_max=Decimal("3000000.00"),
            rooms_min=2,
            loan_offer=True,
        ),
        paging=Paging(),
    )

    sql = _compiled(mock_session.execute.call_args_list[1].args[0])
    assert "lower(designs.category) = lower('Residential')" in sql
    assert "designs.price >= 1000000.00" in sql
    assert "designs.price <= 3000000.00" in sql
    assert "designs.number_of_rooms >= 2" in sql
    assert "designs.is_loan_offer IS true" in sql


def test_search_without_filters_has_no_where_clause(mock_session: Mock) -> None:
    _mock_search(mock_session, [], 0)
    repo = PostgresDesignCatalogRepository(mock_session)

    repo.search(filters=DesignFilters(), paging=Paging())

    sql = _compiled(mock_session.execute.call_args_list[1].args[0])
    assert "WHERE" not in sql


def test_search_orders_and_pages(mock_session: Mock) -> None:
    _mock_search(mock_session, [], 0)
    repo = PostgresDesignCatalogRepository(mock_session)

    repo.search(filters=DesignFilters(), paging=Paging(offset=40, limit=20))

    sql = _compiled(mock_session.execute.call_args_list[1].args[0])
    assert "ORDER BY designs.created_at, designs.id" in sql
    assert "LIMIT 20" in sql
    assert "OFFSET 40" in sql


def test_search_treats_null_count_as_zero(mock_session: Mock) -> None:
    _mock_search(mock_session, [], None)
    repo = PostgresDesignCatalogRepository(mock_session)

    result = repo.search(filters=DesignFilters(), paging=Paging())

    assert result.total_count == 0
    assert result.designs == []


# ==============================================================================
# Get by id
# ==============================================================================


def test_get_by_id_returns_domain_design(
    mock_session: Mock, sample_rows: list[DesignRow]
) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = sample_rows[0]
    repo = PostgresDesignCatalogRepository(mock_session)

    design = repo.get_by_id(str(FIRST_ID))

    assert isinstance(design, Design)
    assert design.id == str(FIRST_ID)
    mock_session.execute.assert_called_once()


def test_get_by_id_returns_none_when_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None
    repo = PostgresDesignCatalogRepository(mock_session)

    assert repo.get_by_id(str(SECOND_ID)) is None


def test_get_by_id_skips_query_for_malformed_id(mock_session: Mock) -> None:
    repo = PostgresDesignCatalogRepository(mock_session)

    assert repo.get_by_id("not-a-uuid") is None
    mock_session.execute.assert_not_called()


# ==============================================================================
# Row → domain conversion
# ==============================================================================


def test_to_domain_maps_loan_offer_fields(sample_rows: list[DesignRow]) -> None:
    design = PostgresDesignCatalogRepository(Mock(spec=Session))._to_domain(sample_rows[0])

    assert design == Design(
        id=str(FIRST_ID),
        design_code="RES-0001",
        name="Azure Bungalow",
        description="85 sqm bungalow",
        price=Decimal("2500000.00"),
        number_of_rooms=3,
        square_meters=Decimal("85.00"),
        category="residential",
        images=("a.jpg", "b.jpg"),
        created_by="Admin",
        is_loan_offer=True,
        max_loan_term=36,
        loan_term_type=TermUnit.MONTHS,
        interest_rate=Decimal("1.2500"),
        interest_rate_type=RateBasis.MONTHLY,
        estimated_downpayment=Decimal("500000.00"),
    )
    assert design.max_term_months == 36


def test_to_domain_fills_defaults_for_nulls(sample_rows: list[DesignRow]) -> None:
    design = PostgresDesignCatalogRepository(Mock(spec=Session))._to_domain(sample_rows[1])

    assert design.description == ""
    assert design.images == ()
    assert design.created_by == "Admin"
    assert design.loan_term_type is TermUnit.YEARS
    assert design.interest_rate_type is RateBasis.YEARLY
    assert design.has_loan_configuration is False
