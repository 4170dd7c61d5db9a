from __future__ import annotations

import logging
from dataclasses import dataclass

from construct_lite.ports.quotation_exporter import QuotationExporter
from construct_lite.use_cases.prepare_loan_quotation import (
    PrepareLoanQuotation,
    PrepareLoanQuotationRequest,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuotationDocument:
    quotation_id: str
    filename: str
    media_type: str
    content: bytes


class ExportLoanQuotation:
    """Prepare a quotation and render it, with every schedule row, to a file."""

    def __init__(
        self,
        prepare_loan_quotation: PrepareLoanQuotation,
        exporter: QuotationExporter,
    ) -> None:
        self._prepare_loan_quotation = prepare_loan_quotation
        self._exporter = exporter

    def execute(self, request: PrepareLoanQuotationRequest) -> QuotationDocument:
        quotation = self._prepare_loan_quotation.execute(request)
        content = self._exporter.render(quotation)

        logger.info(
            "Loan quotation exported",
            extra={
                "quotation_id": quotation.quotation_id,
                "media_type": self._exporter.media_type,
                "size_bytes": len(content),
            },
        )

        return QuotationDocument(
            quotation_id=quotation.quotation_id,
            filename=f"Loan-Quotation-{quotation.quotation_id}.{self._exporter.file_extension}",
            media_type=self._exporter.media_type,
            content=content,
        )
