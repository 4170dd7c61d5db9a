from fastapi import APIRouter, Depends
from fastapi.responses import Response

from construct_lite.entrypoints.http.dependencies import (
    get_design_by_id_use_case,
    get_export_loan_quotation_use_case,
    get_prepare_loan_quotation_use_case,
    get_search_design_catalog_use_case,
)
from construct_lite.entrypoints.http.dtos.design_catalog import (
    DesignResponseDTO,
    DesignSearchQueryDTO,
    DesignSearchResponseDTO,
)
from construct_lite.entrypoints.http.dtos.loans import (
    LoanQuotationQueryDTO,
    LoanQuotationResponseDTO,
)
from construct_lite.entrypoints.http.error_responses import ErrorResponse
from construct_lite.entrypoints.http.mappers.design_catalog_mapper import DesignCatalogMapper
from construct_lite.entrypoints.http.mappers.loan_mapper import LoanMapper
from construct_lite.use_cases.export_loan_quotation import ExportLoanQuotation
from construct_lite.use_cases.get_design_by_id import GetDesignById, GetDesignByIdRequest
from construct_lite.use_cases.prepare_loan_quotation import PrepareLoanQuotation
from construct_lite.use_cases.search_design_catalog import SearchDesignCatalog


router = APIRouter(tags=["Designs"])

_NOT_FOUND = {
    "model": ErrorResponse,
    "description": "Design not found",
    "content": {
        "application/json": {
            "example": {
                "detail": "Design with identifier '550e8400-e29b-41d4-a716-446655440000' not found",
                "code": "NOT_FOUND",
            }
        }
    },
}

_LOAN_NOT_OFFERED = {
    "model": ErrorResponse,
    "description": "Design has no usable loan configuration",
    "content": {
        "application/json": {
            "example": {
                "detail": "Loan details are not fully configured for this design",
                "code": "LOAN_NOT_OFFERED",
            }
        }
    },
}

_QUOTATION_VALIDATION = {
    "model": ErrorResponse,
    "description": "Validation error",
    "content": {
        "application/json": {
            "examples": {
                "invalid_uuid": {
                    "summary": "Malformed design id",
                    "value": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "design_id",
                                "message": "Must be a valid UUID format",
                                "code": "INVALID_UUID",
                            }
                        ],
                    },
                },
                "term_out_of_range": {
                    "summary": "Term outside the design's offer",
                    "value": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "term_months",
                                "message": "Must be between 12 and 120 months",
                                "code": "INVALID_RANGE",
                            }
                        ],
                    },
                },
                "downpayment_too_high": {
                    "summary": "Downpayment >= price",
                    "value": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "downpayment",
                                "message": "Must be less than the design price",
                                "code": "INVALID_VALUE",
                            }
                        ],
                    },
                },
            }
        }
    },
}


@router.get(
    "/designs",
    response_model=DesignSearchResponseDTO,
    summary="Search design catalog",
    description="""
    Browse the house design catalog with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - Category: case-insensitive exact match
    - Price: inclusive range; rooms_min: inclusive lower bound
    - loan_offer: only designs offered (or not offered) on loan

    ## Pagination
    - Default limit: 20
    - Max limit: 200

    ## Example
    ```
    GET /v1/designs?category=residential&loan_offer=true&limit=10
    ```
    """,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "price_min cannot be greater than price_max",
                        "code": "VALIDATION_ERROR",
                    }
                }
            },
        },
    },
)
def search_designs(
    query: DesignSearchQueryDTO = Depends(),
    use_case: SearchDesignCatalog = Depends(get_search_design_catalog_use_case),
) -> DesignSearchResponseDTO:
    """Search designs endpoint following parse → execute → map → return pattern."""
    request = DesignCatalogMapper.to_domain_request(query)
    result = use_case.execute(request)
    return DesignCatalogMapper.to_response(result=result, offset=query.offset, limit=query.limit)


@router.get(
    "/designs/{design_id}",
    response_model=DesignResponseDTO,
    summary="Get a design",
    responses={404: _NOT_FOUND, 422: _QUOTATION_VALIDATION},
)
def get_design(
    design_id: str,
    use_case: GetDesignById = Depends(get_design_by_id_use_case),
) -> DesignResponseDTO:
    result = use_case.execute(GetDesignByIdRequest(design_id=design_id))
    return DesignCatalogMapper.to_design_response(result.design)


@router.get(
    "/designs/{design_id}/quotation",
    response_model=LoanQuotationResponseDTO,
    summary="Preview a loan quotation",
    description="""
    Quote a loan for a design offered on loan.

    ## Defaults
    - downpayment: the design's estimated downpayment, else 20% of price
    - term_months: the design's maximum loan term
    - preview_months: 12 schedule rows are returned; the summary and
      payment_count always cover the full schedule

    ## Term Selection
    Terms step by 12 months for designs configured in years and by
    1 month for designs configured in months, from one step up to the
    design's maximum.

    ## Example
    ```
    GET /v1/designs/550e8400-e29b-41d4-a716-446655440000/quotation?downpayment=500000.00&term_months=120
    ```
    """,
    responses={404: _NOT_FOUND, 409: _LOAN_NOT_OFFERED, 422: _QUOTATION_VALIDATION},
)
def preview_loan_quotation(
    design_id: str,
    query: LoanQuotationQueryDTO = Depends(),
    use_case: PrepareLoanQuotation = Depends(get_prepare_loan_quotation_use_case),
) -> LoanQuotationResponseDTO:
    request = LoanMapper.to_quotation_request(design_id, query)
    quotation = use_case.execute(request)
    return LoanMapper.to_quotation_response(quotation, preview_months=query.preview_months)


@router.get(
    "/designs/{design_id}/quotation/export",
    response_class=Response,
    summary="Download a loan quotation document",
    description="""
    Same figures as the quotation preview, rendered with the company
    letterhead and every schedule row as an attachment named
    `Loan-Quotation-<quotation id>.<format>`.

    ## Formats
    - xlsx (default): spreadsheet with numeric schedule cells
    - pdf: printable A4 document

    ## Example
    ```
    GET /v1/designs/550e8400-e29b-41d4-a716-446655440000/quotation/export?format=pdf
    ```
    """,
    responses={
        200: {
            "description": "Quotation attachment",
            "content": {
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {},
                "application/pdf": {},
            },
        },
        404: _NOT_FOUND,
        409: _LOAN_NOT_OFFERED,
        422: _QUOTATION_VALIDATION,
    },
)
def export_loan_quotation(
    design_id: str,
    query: LoanQuotationQueryDTO = Depends(),
    use_case: ExportLoanQuotation = Depends(get_export_loan_quotation_use_case),
) -> Response:
    request = LoanMapper.to_quotation_request(design_id, query)
    document = use_case.execute(request)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
