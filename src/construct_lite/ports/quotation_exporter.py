from __future__ import annotations

from abc import ABC, abstractmethod

from construct_lite.domain.quotation import LoanQuotation


class QuotationExporter(ABC):
    """Port for rendering a loan quotation into a downloadable document."""

    media_type: str
    file_extension: str

    @abstractmethod
    def render(self, quotation: LoanQuotation) -> bytes:
        """Render the full quotation (every schedule row) to file content."""
        ...
