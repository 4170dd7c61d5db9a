"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless collaborators are shared.
"""

from __future__ import annotations

from typing import Callable, Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from construct_lite.adapters.pdf_quotation_exporter import PdfQuotationExporter
from construct_lite.adapters.postgres_design_catalog_repository import (
    PostgresDesignCatalogRepository,
)
from construct_lite.adapters.xlsx_quotation_exporter import XlsxQuotationExporter
from construct_lite.domain.quotation import CompanyProfile
from construct_lite.entrypoints.http.dtos.loans import ExportFormat
from construct_lite.infra.config import company_profile
from construct_lite.infra.db.session import get_session
from construct_lite.ports.design_catalog_repository import DesignCatalogRepository
from construct_lite.ports.quotation_exporter import QuotationExporter
from construct_lite.use_cases.calculate_payment_schedule import CalculatePaymentSchedule
from construct_lite.use_cases.export_loan_quotation import ExportLoanQuotation
from construct_lite.use_cases.get_design_by_id import GetDesignById
from construct_lite.use_cases.prepare_loan_quotation import PrepareLoanQuotation
from construct_lite.use_cases.search_design_catalog import SearchDesignCatalog


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() context manager commits on success,
    rolls back on exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_design_catalog_repository(db: Session = Depends(get_db)) -> DesignCatalogRepository:
    return PostgresDesignCatalogRepository(session=db)


def get_search_design_catalog_use_case(
    repository: DesignCatalogRepository = Depends(get_design_catalog_repository),
) -> SearchDesignCatalog:
    return SearchDesignCatalog(design_catalog_repository=repository)


def get_design_by_id_use_case(
    repository: DesignCatalogRepository = Depends(get_design_catalog_repository),
) -> GetDesignById:
    return GetDesignById(design_catalog_repository=repository)


def get_calculate_payment_schedule_use_case() -> CalculatePaymentSchedule:
    return CalculatePaymentSchedule()


def get_prepare_loan_quotation_use_case(
    repository: DesignCatalogRepository = Depends(get_design_catalog_repository),
) -> PrepareLoanQuotation:
    return PrepareLoanQuotation(design_catalog_repository=repository)


_EXPORTERS: dict[ExportFormat, Callable[[CompanyProfile], QuotationExporter]] = {
    ExportFormat.XLSX: XlsxQuotationExporter,
    ExportFormat.PDF: PdfQuotationExporter,
}


def get_quotation_exporter(format: ExportFormat = ExportFormat.XLSX) -> QuotationExporter:
    """Exporter for the `format` query parameter; unknown formats are a 422."""
    return _EXPORTERS[format](company_profile())


def get_export_loan_quotation_use_case(
    prepare: PrepareLoanQuotation = Depends(get_prepare_loan_quotation_use_case),
    exporter: QuotationExporter = Depends(get_quotation_exporter),
) -> ExportLoanQuotation:
    return ExportLoanQuotation(prepare_loan_quotation=prepare, exporter=exporter)
