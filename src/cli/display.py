"""Terminal output for repayment figures and amortization schedules."""

from typing import Callable, Optional

from src.config import settings
from src.models.loan import RepaymentSummary, ScheduleRow, YearlySummary

Writer = Callable[[str], None]

WELCOME = (
    "------------------------------------"
    "\nWelcome to the Mortgage Calculator!"
    "\n------------------------------------"
)


def fmt_currency(
    value: float,
    symbol: Optional[str] = None,
    decimals: Optional[int] = None,
) -> str:
    """Format number as $X,XXX.XX, negatives as -$X.XX."""
    symbol = settings.currency_symbol if symbol is None else symbol
    decimals = settings.currency_decimals if decimals is None else decimals
    rounded = round(value, decimals)
    # Float residue like -1e-9 should not print as "-$0.00"
    if rounded == 0:
        rounded = 0.0
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"


def _header(title: str, write: Writer) -> None:
    write(f"\n{'=' * 84}")
    write(f"  {title}")
    write(f"{'=' * 84}")


def print_welcome(write: Writer = print) -> None:
    write(WELCOME)


def print_summary(summary: RepaymentSummary, write: Writer = print) -> None:
    write(f"\nMonthly Repayment Amount: {fmt_currency(summary.monthly_payment)}")
    write(f"Total Interest Paid: {fmt_currency(summary.total_interest)}")
    write(f"Total Amount Paid: {fmt_currency(summary.total_paid)}")


def print_schedule(rows: list[ScheduleRow], write: Writer = print) -> None:
    _header("Amortization Schedule", write)
    write(
        f"  {'Payment #':>9}  {'Payment Amount':>16}  {'Interest Paid':>16}"
        f"  {'Principal Paid':>16}  {'Remaining Balance':>18}"
    )
    for row in rows:
        write(
            f"  {row.period:>9}  {fmt_currency(row.payment):>16}  {fmt_currency(row.interest):>16}"
            f"  {fmt_currency(row.principal):>16}  {fmt_currency(row.balance):>18}"
        )


def print_yearly(yearly: list[YearlySummary], write: Writer = print) -> None:
    _header("Yearly Summary", write)
    write(
        f"  {'Year':>9}  {'Paid':>16}  {'Interest':>16}"
        f"  {'Principal':>16}  {'Ending Balance':>18}"
    )
    for y in yearly:
        write(
            f"  {y.year:>9}  {fmt_currency(y.payment):>16}  {fmt_currency(y.interest):>16}"
            f"  {fmt_currency(y.principal):>16}  {fmt_currency(y.ending_balance):>18}"
        )
