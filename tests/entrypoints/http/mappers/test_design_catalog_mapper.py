"""Tests for DesignCatalogMapper."""

from __future__ import annotations

from decimal import Decimal

from construct_lite.domain.amortization import RateBasis, TermUnit
from construct_lite.domain.design import Design, DesignFilters, Paging
from construct_lite.entrypoints.http.dtos.design_catalog import (
    DesignResponseDTO,
    DesignSearchQueryDTO,
    DesignSearchResponseDTO,
)
from construct_lite.entrypoints.http.mappers.design_catalog_mapper import DesignCatalogMapper
from construct_lite.use_cases.search_design_catalog import (
    SearchDesignCatalogRequest,
    SearchDesignCatalogResponse,
)


def make_design(**overrides) -> Design:
    fields = dict(
        id="550e8400-e29b-41d4-a716-446655440000",
        design_code="RES-0001",
        name="Azure Bungalow",
        description="Three bedroom bungalow",
        price=Decimal("2500000.00"),
        number_of_rooms=3,
        square_meters=Decimal("85.50"),
        category="residential",
        images=("front.jpg", "plan.jpg"),
        is_loan_offer=True,
        max_loan_term=10,
        loan_term_type=TermUnit.YEARS,
        interest_rate=Decimal("8.5000"),
        interest_rate_type=RateBasis.YEARLY,
        estimated_downpayment=Decimal("500000.00"),
    )
    fields.update(overrides)
    return Design(**fields)


# ==============================================================================
# DTO → domain
# ==============================================================================


def test_to_domain_filters_converts_prices_to_decimal() -> None:
    dto = DesignSearchQueryDTO(
        category="residential",
        price_min="1000000.00",
        price_max="3500000",
        rooms_min=2,
        loan_offer=True,
    )

    filters = DesignCatalogMapper.to_domain_filters(dto)

    assert filters == DesignFilters(
        category="residential",
        price_min=Decimal("1000000.00"),
        price_max=Decimal("3500000"),
        rooms_min=2,
        loan_offer=True,
    )
    assert isinstance(filters.price_min, Decimal)


def test_to_domain_filters_keeps_missing_values_as_none() -> None:
    filters = DesignCatalogMapper.to_domain_filters(DesignSearchQueryDTO())

    assert filters == DesignFilters()


def test_to_domain_request_combines_filters_and_paging() -> None:
    dto = DesignSearchQueryDTO(category="office", offset=40, limit=20)

    request = DesignCatalogMapper.to_domain_request(dto)

    assert isinstance(request, SearchDesignCatalogRequest)
    assert request.filters.category == "office"
    assert request.paging == Paging(offset=40, limit=20)


# ==============================================================================
# domain → DTO
# ==============================================================================


def test_to_design_response_stringifies_decimals_and_enums() -> None:
    dto = DesignCatalogMapper.to_design_response(make_design())

    assert isinstance(dto, DesignResponseDTO)
    assert dto.price == "2500000.00"
    assert dto.square_meters == "85.50"
    assert dto.interest_rate == "8.5000"
    assert dto.estimated_downpayment == "500000.00"
    assert dto.loan_term_type == "years"
    assert dto.interest_rate_type == "yearly"
    assert dto.images == ["front.jpg", "plan.jpg"]


def test_to_design_response_without_loan_offer() -> None:
    design = make_design(
        is_loan_offer=False,
        max_loan_term=None,
        interest_rate=None,
        estimated_downpayment=None,
    )

    dto = DesignCatalogMapper.to_design_response(design)

    assert dto.is_loan_offer is False
    assert dto.max_loan_term is None
    assert dto.interest_rate is None
    assert dto.estimated_downpayment is None


def test_to_response_adds_paging_metadata() -> None:
    result = SearchDesignCatalogResponse(designs=[make_design()], total_count=31)

    response = DesignCatalogMapper.to_response(result, offset=20, limit=10)

    assert isinstance(response, DesignSearchResponseDTO)
    assert len(response.designs) == 1
    assert response.total == 31
    assert response.offset == 20
    assert response.limit == 10


def test_to_response_reports_zero_when_total_unknown() -> None:
    result = SearchDesignCatalogResponse(designs=[], total_count=None)

    assert DesignCatalogMapper.to_response(result, offset=0, limit=20).total == 0
