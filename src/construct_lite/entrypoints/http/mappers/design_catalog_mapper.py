from __future__ import annotations

from decimal import Decimal

from construct_lite.domain.design import Design, DesignFilters, Paging
from construct_lite.entrypoints.http.dtos.design_catalog import (
    DesignResponseDTO,
    DesignSearchQueryDTO,
    DesignSearchResponseDTO,
)
from construct_lite.use_cases.search_design_catalog import (
    SearchDesignCatalogRequest,
    SearchDesignCatalogResponse,
)


def _optional_str(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


class DesignCatalogMapper:
    """Maps between REST DTOs and domain models for the design catalog."""

    @staticmethod
    def to_domain_filters(dto: DesignSearchQueryDTO) -> DesignFilters:
        """Converts query params to domain filters, handling Decimal conversion."""
        return DesignFilters(
            category=dto.category,
            price_min=Decimal(dto.price_min) if dto.price_min else None,
            price_max=Decimal(dto.price_max) if dto.price_max else None,
            rooms_min=dto.rooms_min,
            loan_offer=dto.loan_offer,
        )

    @staticmethod
    def to_domain_paging(dto: DesignSearchQueryDTO) -> Paging:
        return Paging(offset=dto.offset, limit=dto.limit)

    @staticmethod
    def to_domain_request(dto: DesignSearchQueryDTO) -> SearchDesignCatalogRequest:
        return SearchDesignCatalogRequest(
            filters=DesignCatalogMapper.to_domain_filters(dto),
            paging=DesignCatalogMapper.to_domain_paging(dto),
        )

    @staticmethod
    def to_design_response(design: Design) -> DesignResponseDTO:
        """
        Converts domain Design entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return DesignResponseDTO(
            id=design.id,
            design_code=design.design_code,
            name=design.name,
            description=design.description,
            price=str(design.price),
            number_of_rooms=design.number_of_rooms,
            square_meters=str(design.square_meters),
            category=design.category,
            images=list(design.images),
            is_loan_offer=design.is_loan_offer,
            max_loan_term=design.max_loan_term,
            loan_term_type=design.loan_term_type.value,
            interest_rate=_optional_str(design.interest_rate),
            interest_rate_type=design.interest_rate_type.value,
            estimated_downpayment=_optional_str(design.estimated_downpayment),
        )

    @staticmethod
    def to_response(
        result: SearchDesignCatalogResponse,
        offset: int,
        limit: int,
    ) -> DesignSearchResponseDTO:
        """Converts domain search result to REST response with pagination metadata."""
        return DesignSearchResponseDTO(
            designs=[DesignCatalogMapper.to_design_response(d) for d in result.designs],
            total=result.total_count or 0,  # Handle None from repository
            offset=offset,
            limit=limit,
        )
