"""Spreadsheet rendering of a loan quotation (openpyxl)."""

from __future__ import annotations

from decimal import Decimal
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from construct_lite.domain.amortization import format_currency
from construct_lite.domain.quotation import CompanyProfile, LoanQuotation, format_long_date
from construct_lite.ports.quotation_exporter import QuotationExporter


SHEET_TITLE = "Loan Quotation"
SCHEDULE_HEADERS = (
    "Month",
    "Payment (PHP)",
    "Principal (PHP)",
    "Interest (PHP)",
    "Remaining Balance (PHP)",
)
COLUMN_WIDTHS = (15, 20, 20, 20, 25)
MONEY_FORMAT = '"PHP" #,##0.00'
LAST_COLUMN = get_column_letter(len(SCHEDULE_HEADERS))

_thin = Side(style="thin")
THIN_BORDER = Border(left=_thin, right=_thin, top=_thin, bottom=_thin)
ORANGE_FILL = PatternFill(start_color="FFA500", end_color="FFA500", fill_type="solid")
HEADER_FILL = PatternFill(start_color="F5F5F5", end_color="F5F5F5", fill_type="solid")
WHITE = "FFFFFF"


def _php(amount: Decimal) -> str:
    return format_currency(amount, symbol="PHP ")


class XlsxQuotationExporter(QuotationExporter):
    """
    Lays a quotation out on a single worksheet.

    Sections, top to bottom: company letterhead, title, project details,
    financial details, the full payment schedule, financial summary, footer.
    Schedule cells hold numbers (not strings) with a currency number format.
    """

    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    file_extension = "xlsx"

    def __init__(self, company: CompanyProfile) -> None:
        self._company = company

    def render(self, quotation: LoanQuotation) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE
        wb.properties.creator = self._company.name

        for index, width in enumerate(COLUMN_WIDTHS, 1):
            ws.column_dimensions[get_column_letter(index)].width = width

        row = self._write_letterhead(ws, 1)
        row = self._write_banner(ws, row + 1, "LOAN QUOTATION", Font(size=18, bold=True))
        row = self._write_pairs(
            ws,
            row + 1,
            [
                ("Project:", quotation.design.name),
                ("Quotation Date:", format_long_date(quotation.quoted_on)),
                ("Quotation ID:", quotation.quotation_id),
            ],
        )
        row = self._write_section(ws, row + 1, "FINANCIAL DETAILS")
        row = self._write_pairs(ws, row, self._financial_details(quotation))
        row = self._write_section(ws, row + 1, "PAYMENT SCHEDULE")
        row = self._write_schedule(ws, row, quotation)
        row = self._write_section(ws, row + 1, "FINANCIAL SUMMARY")
        row = self._write_pairs(
            ws,
            row,
            [
                ("Downpayment Paid:", _php(quotation.downpayment)),
                ("Total Loan Payments:", _php(quotation.summary.total_amount_paid)),
                ("Total Interest Paid:", _php(quotation.summary.total_interest)),
                ("Total Project Cost:", _php(quotation.total_project_cost)),
            ],
        )
        self._write_footer(ws, row + 1, quotation)

        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    def _financial_details(self, quotation: LoanQuotation) -> list[tuple[str, str]]:
        return [
            ("Total Project Price:", _php(quotation.price)),
            ("Downpayment Amount:", _php(quotation.downpayment)),
            ("Downpayment Percentage:", f"{quotation.downpayment_percentage}%"),
            ("Loan Amount:", _php(quotation.loan_amount)),
            ("Loan Term:", quotation.term_display),
            (
                "Interest Rate:",
                f"{quotation.interest_rate.normalize():f}% ({quotation.interest_rate_basis.value})",
            ),
            ("Monthly Payment:", _php(quotation.summary.monthly_payment)),
            ("Total Interest:", _php(quotation.summary.total_interest)),
            ("Total Loan Payments:", _php(quotation.summary.total_amount_paid)),
            ("Total Project Cost:", _php(quotation.total_project_cost)),
        ]

    def _write_letterhead(self, ws: Worksheet, row: int) -> int:
        lines = (
            (self._company.name, 20, True),
            (self._company.address, 14, False),
            (self._company.contact, 12, False),
            (f"Website: {self._company.website}", 12, False),
        )
        for text, size, bold in lines:
            self._merged_row(ws, row, text, Font(size=size, bold=bold, color=WHITE), ORANGE_FILL)
            row += 1
        return row

    def _write_banner(self, ws: Worksheet, row: int, text: str, font: Font) -> int:
        self._merged_row(ws, row, text, font)
        return row + 1

    def _write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = Font(bold=True)
        return row + 1

    def _write_pairs(self, ws: Worksheet, row: int, pairs: list[tuple[str, str]]) -> int:
        for label, value in pairs:
            ws.cell(row=row, column=1, value=label)
            ws.cell(row=row, column=2, value=value)
            row += 1
        return row

    def _write_schedule(self, ws: Worksheet, row: int, quotation: LoanQuotation) -> int:
        for column, header in enumerate(SCHEDULE_HEADERS, 1):
            cell = ws.cell(row=row, column=column, value=header)
            cell.font = Font(bold=True)
            cell.fill = HEADER_FILL
            cell.alignment = Alignment(horizontal="center")
            cell.border = THIN_BORDER
        row += 1

        for entry in quotation.schedule:
            month_cell = ws.cell(row=row, column=1, value=entry.month)
            month_cell.alignment = Alignment(horizontal="center")
            month_cell.border = THIN_BORDER

            amounts = (
                entry.payment,
                entry.principal_portion,
                entry.interest_portion,
                entry.remaining_balance,
            )
            for column, amount in enumerate(amounts, 2):
                # openpyxl writes Decimal as a numeric cell
                cell = ws.cell(row=row, column=column, value=amount)
                cell.number_format = MONEY_FORMAT
                cell.alignment = Alignment(horizontal="right")
                cell.border = THIN_BORDER
            row += 1

        return row

    def _write_footer(self, ws: Worksheet, row: int, quotation: LoanQuotation) -> int:
        lines = (
            f"Generated by {self._company.name.title()}",
            f"Quotation ID: {quotation.quotation_id}",
            f"Valid Until: {format_long_date(quotation.valid_until)}",
        )
        for text in lines:
            self._merged_row(ws, row, text, Font(size=11, color=WHITE), ORANGE_FILL)
            row += 1
        return row

    def _merged_row(
        self,
        ws: Worksheet,
        row: int,
        text: str,
        font: Font,
        fill: PatternFill | None = None,
    ) -> None:
        ws.merge_cells(f"A{row}:{LAST_COLUMN}{row}")
        cell = ws.cell(row=row, column=1, value=text)
        cell.font = font
        cell.alignment = Alignment(horizontal="center", vertical="center")
        if fill is not None:
            cell.fill = fill
