from __future__ import annotations

import csv
import io

from ..common.datetime_utils import format_display_date
from ..common.money import format_money
from ..core.constants import DEFAULT_CURRENCY_SYMBOL
from .model import PaymentReport

CSV_COLUMNS = [
    "Date",
    "Employee",
    "Amount",
    "Payment Method",
    "Period Type",
    "Period Start",
    "Period End",
    "Present Days",
    "Half Days",
    "Absent Days",
    "Overtime Hours",
    "Base Wage",
    "Overtime Amount",
    "Half-Day Amount",
    "Advances",
    "Gross Amount",
    "Net Amount",
    "Notes",
]


def export_filename(report: PaymentReport) -> str:
    return f"payroll-report-{report.start.isoformat()}-to-{report.end.isoformat()}.csv"


def export_csv(report: PaymentReport, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render a payment report as CSV text.

    Layout: a header block (title, period, payment count, total amount), a
    blank line, the column header row, then one row per payment. Text cells
    are quoted; counts and hours are written bare.
    """

    def money(value) -> str:
        return format_money(value, currency_symbol)

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")

    writer.writerow(["Payment Report"])
    writer.writerow([])
    writer.writerow([f"Period: {format_display_date(report.start)} to {format_display_date(report.end)}"])
    writer.writerow([f"Total Payments: {report.payment_count}"])
    writer.writerow([f"Total Amount: {money(report.total_amount)}"])
    writer.writerow([])

    writer.writerow(CSV_COLUMNS)
    for row in report.rows:
        payment = row.payment
        calc = row.calculation
        b = calc.breakdown
        writer.writerow(
            [
                format_display_date(payment.payment_date),
                row.employee.name,
                money(payment.amount),
                payment.payment_method.value if payment.payment_method else "N/A",
                calc.period_type.value,
                format_display_date(calc.period_start),
                format_display_date(calc.period_end),
                b.present_days,
                b.half_days,
                b.absent_days,
                b.total_overtime_hours,
                money(b.base_wage),
                money(b.overtime_amount),
                money(b.half_day_amount),
                money(b.total_advances),
                money(b.gross_amount),
                money(b.net_amount),
                payment.notes or "",
            ]
        )

    return out.getvalue()
