"""
Unit tests for FastAPI dependency functions.

- get_db() yields one session per request from get_session()
- Use case providers wire the right adapters
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest

from construct_lite.adapters.pdf_quotation_exporter import PdfQuotationExporter
from construct_lite.adapters.postgres_design_catalog_repository import (
    PostgresDesignCatalogRepository,
)
from construct_lite.adapters.xlsx_quotation_exporter import XlsxQuotationExporter
from construct_lite.entrypoints.http.dependencies import (
    get_calculate_payment_schedule_use_case,
    get_db,
    get_design_by_id_use_case,
    get_design_catalog_repository,
    get_export_loan_quotation_use_case,
    get_prepare_loan_quotation_use_case,
    get_quotation_exporter,
    get_search_design_catalog_use_case,
)
from construct_lite.entrypoints.http.dtos.loans import ExportFormat
from construct_lite.use_cases.calculate_payment_schedule import CalculatePaymentSchedule
from construct_lite.use_cases.export_loan_quotation import ExportLoanQuotation
from construct_lite.use_cases.get_design_by_id import GetDesignById
from construct_lite.use_cases.prepare_loan_quotation import PrepareLoanQuotation
from construct_lite.use_cases.search_design_catalog import SearchDesignCatalog

GET_SESSION = "construct_lite.entrypoints.http.dependencies.get_session"


def _session_context(session: Mock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = session
    context.__exit__.return_value = None
    return context


# ==============================================================================
# get_db()
# ==============================================================================


def test_get_db_yields_session_and_closes_context() -> None:
    session = Mock()
    context = _session_context(session)

    with patch(GET_SESSION, return_value=context) as mock_get_session:
        generator = get_db()
        assert next(generator) is session

        with pytest.raises(StopIteration):
            next(generator)

    mock_get_session.assert_called_once()
    context.__exit__.assert_called_once()


def test_get_db_is_generator() -> None:
    with patch(GET_SESSION):
        assert isinstance(get_db(), GeneratorType)


def test_get_db_exits_context_when_request_fails() -> None:
    context = _session_context(Mock())

    with patch(GET_SESSION, return_value=context):
        generator = get_db()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("request failed"))

    exc_type = context.__exit__.call_args.args[0]
    assert exc_type is RuntimeError


def test_get_db_opens_a_new_session_per_call() -> None:
    first, second = Mock(), Mock()

    with patch(GET_SESSION, side_effect=[_session_context(first), _session_context(second)]):
        assert next(get_db()) is first
        assert next(get_db()) is second


# ==============================================================================
# Providers
# ==============================================================================


def test_repository_wraps_request_session() -> None:
    session = Mock()

    repository = get_design_catalog_repository(db=session)

    assert isinstance(repository, PostgresDesignCatalogRepository)
    assert repository._session is session


def test_catalog_use_cases_share_the_given_repository() -> None:
    repository = Mock()

    search = get_search_design_catalog_use_case(repository=repository)
    by_id = get_design_by_id_use_case(repository=repository)
    prepare = get_prepare_loan_quotation_use_case(repository=repository)

    assert isinstance(search, SearchDesignCatalog)
    assert isinstance(by_id, GetDesignById)
    assert isinstance(prepare, PrepareLoanQuotation)
    assert search._design_catalog_repository is repository
    assert by_id._design_catalog_repository is repository
    assert prepare._design_catalog_repository is repository


def test_calculator_needs_no_database() -> None:
    assert isinstance(get_calculate_payment_schedule_use_case(), CalculatePaymentSchedule)


def test_quotation_exporter_uses_company_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("COMPANY_NAME", "ACME BUILDERS")

    exporter = get_quotation_exporter()

    assert isinstance(exporter, XlsxQuotationExporter)
    assert exporter._company.name == "ACME BUILDERS"


def test_pdf_format_selects_pdf_exporter(monkeypatch) -> None:
    monkeypatch.setenv("COMPANY_NAME", "ACME BUILDERS")

    exporter = get_quotation_exporter(ExportFormat.PDF)

    assert isinstance(exporter, PdfQuotationExporter)
    assert exporter.media_type == "application/pdf"
    assert exporter._company.name == "ACME BUILDERS"


def test_export_use_case_wires_prepare_and_exporter() -> None:
    prepare, exporter = Mock(), Mock()

    use_case = get_export_loan_quotation_use_case(prepare=prepare, exporter=exporter)

    assert isinstance(use_case, ExportLoanQuotation)
    assert use_case._prepare_loan_quotation is prepare
    assert use_case._exporter is exporter
