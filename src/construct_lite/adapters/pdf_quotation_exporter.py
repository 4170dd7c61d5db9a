"""Printable PDF rendering of a loan quotation (reportlab)."""

from __future__ import annotations

from decimal import Decimal
from html import escape
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.flowables import HRFlowable

from construct_lite.domain.amortization import format_currency
from construct_lite.domain.quotation import CompanyProfile, LoanQuotation, format_long_date
from construct_lite.ports.quotation_exporter import QuotationExporter


SCHEDULE_HEADERS = (
    "Month",
    "Payment (PHP)",
    "Principal (PHP)",
    "Interest (PHP)",
    "Remaining Balance (PHP)",
)
MARGIN = 14 * mm
COLUMN_WIDTHS = (22 * mm, 36 * mm, 36 * mm, 36 * mm, 52 * mm)

SCHEDULE_STYLE = TableStyle(
    [
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("TEXTCOLOR", (0, 0), (-1, -1), colors.black),
        ("GRID", (0, 0), (-1, -1), 0.3, colors.black),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("ALIGN", (0, 1), (0, -1), "CENTER"),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
)


def _php(amount: Decimal) -> str:
    return format_currency(amount, symbol="PHP ")


def schedule_rows(quotation: LoanQuotation) -> list[list[str]]:
    """Header plus one text row per month, as printed in the schedule table."""
    rows = [list(SCHEDULE_HEADERS)]
    for entry in quotation.schedule:
        rows.append(
            [
                str(entry.month),
                _php(entry.payment),
                _php(entry.principal_portion),
                _php(entry.interest_portion),
                _php(entry.remaining_balance),
            ]
        )
    return rows


class PdfQuotationExporter(QuotationExporter):
    """
    Black and white A4 quotation.

    Sections follow the spreadsheet export: letterhead, title, project
    details, financial details, the full payment schedule (header row
    repeated on every page), financial summary, footer.
    """

    media_type = "application/pdf"
    file_extension = "pdf"

    def __init__(self, company: CompanyProfile) -> None:
        self._company = company

        styles = getSampleStyleSheet()
        body = styles["BodyText"]
        self._letterhead = body.clone("Letterhead", alignment=TA_CENTER, fontSize=10, leading=13)
        self._company_name = self._letterhead.clone(
            "CompanyName", fontName="Helvetica-Bold", fontSize=16, leading=20
        )
        self._title = self._letterhead.clone("QuotationTitle", fontSize=16, leading=20)
        self._heading = body.clone("SectionHeading", fontName="Helvetica-Bold", fontSize=11)
        self._line = body.clone("DetailLine", leftIndent=6 * mm, spaceBefore=0, spaceAfter=0)
        self._footer = self._letterhead.clone("Footer", fontSize=9, leading=12)

    def render(self, quotation: LoanQuotation) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Loan Quotation {quotation.quotation_id}",
            author=self._company.name,
        )
        doc.build(self._story(quotation))
        return buffer.getvalue()

    def _story(self, quotation: LoanQuotation) -> list[Flowable]:
        company = self._company
        story: list[Flowable] = [
            Paragraph(escape(company.name), self._company_name),
            Paragraph(escape(company.address), self._letterhead),
            Paragraph(escape(company.contact), self._footer),
            Paragraph(escape(f"Website: {company.website}"), self._footer),
            Spacer(1, 10 * mm),
            Paragraph("LOAN QUOTATION", self._title),
            HRFlowable(width="100%", thickness=0.5, color=colors.black, spaceBefore=3 * mm),
            Spacer(1, 8 * mm),
        ]

        story += self._section(
            "Project Details",
            [
                f"Project: {quotation.design.name}",
                f"Quotation Date: {format_long_date(quotation.quoted_on)}",
                f"Quotation ID: {quotation.quotation_id}",
            ],
        )
        story += self._section("Financial Details", self._financial_details(quotation))

        story.append(Paragraph("Payment Schedule", self._heading))
        table = Table(schedule_rows(quotation), colWidths=COLUMN_WIDTHS, repeatRows=1)
        table.setStyle(SCHEDULE_STYLE)
        story += [table, Spacer(1, 8 * mm)]

        story += self._section(
            "Financial Summary",
            [
                f"Downpayment Paid: {_php(quotation.downpayment)}",
                f"Total Loan Payments: {_php(quotation.summary.total_amount_paid)}",
                f"Total Interest Paid: {_php(quotation.summary.total_interest)}",
                f"Total Project Cost: {_php(quotation.total_project_cost)}",
            ],
        )

        story.append(HRFlowable(width="100%", thickness=0.5, color=colors.black, spaceAfter=4 * mm))
        for text in (
            f"Generated by {company.name.title()}",
            f"Quotation ID: {quotation.quotation_id}",
            f"Valid Until: {format_long_date(quotation.valid_until)}",
        ):
            story.append(Paragraph(escape(text), self._footer))

        return story

    def _financial_details(self, quotation: LoanQuotation) -> list[str]:
        return [
            f"Total Project Price: {_php(quotation.price)}",
            f"Downpayment Amount: {_php(quotation.downpayment)} "
            f"({quotation.downpayment_percentage}%)",
            f"Loan Amount: {_php(quotation.loan_amount)}",
            f"Loan Term: {quotation.term_display}",
            f"Interest Rate: {quotation.interest_rate.normalize():f}% "
            f"({quotation.interest_rate_basis.value})",
            f"Monthly Payment: {_php(quotation.summary.monthly_payment)}",
            f"Total Interest: {_php(quotation.summary.total_interest)}",
            f"Total Loan Payments: {_php(quotation.summary.total_amount_paid)}",
            f"Total Project Cost: {_php(quotation.total_project_cost)}",
        ]

    def _section(self, title: str, lines: list[str]) -> list[Flowable]:
        flowables: list[Flowable] = [Paragraph(title, self._heading)]
        flowables += [Paragraph(escape(line), self._line) for line in lines]
        flowables.append(Spacer(1, 6 * mm))
        return flowables
