"""Fixed-rate mortgage repayment and amortization schedule.

Pure functions: floats in, dataclasses out. No I/O, no rounding.

Rates are annual percentages (6.0 means 6%). A rate of exactly zero makes the
annuity formula divide by zero; callers are expected to reject it before
calling in.
"""

import math

from src.models.loan import LoanParameters, RepaymentSummary, ScheduleRow, YearlySummary


def monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 12 / 100


def number_of_payments(term_years: int) -> int:
    return term_years * 12


def monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Calculate fixed monthly mortgage payment."""
    r = monthly_rate(annual_rate_pct)
    n = number_of_payments(term_years)
    # M = P * r / (1 - (1 + r)^-n)
    # expm1/log1p keep the denominator nonzero when 1 + r rounds to 1.0
    return principal * r / -math.expm1(-n * math.log1p(r))


def total_paid(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Sum of all payments over the life of the loan."""
    return monthly_payment(principal, annual_rate_pct, term_years) * number_of_payments(term_years)


def total_interest(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Interest paid over the life of the loan."""
    return total_paid(principal, annual_rate_pct, term_years) - principal


def repayment_summary(params: LoanParameters) -> RepaymentSummary:
    args = (params.principal, params.annual_rate_pct, params.term_years)
    return RepaymentSummary(
        monthly_payment=monthly_payment(*args),
        total_interest=total_interest(*args),
        total_paid=total_paid(*args),
    )


def amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    term_years: int,
) -> list[ScheduleRow]:
    """Generate the full amortization schedule.

    The payment is computed once and held fixed, so float error accumulates
    in the balance and the last row can end a fraction of a cent away from
    zero. That residual is left as is.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate in percent (e.g. 4.5)
        term_years: Loan term in years
    """
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    r = monthly_rate(annual_rate_pct)

    rows: list[ScheduleRow] = []
    balance = principal

    for period in range(1, number_of_payments(term_years) + 1):
        interest = balance * r
        principal_paid = pmt - interest
        balance -= principal_paid

        rows.append(ScheduleRow(
            period=period,
            payment=pmt,
            interest=interest,
            principal=principal_paid,
            balance=balance,
        ))

    return rows


def yearly_summary(schedule: list[ScheduleRow]) -> list[YearlySummary]:
    """Aggregate an amortization schedule by loan year.

    A schedule that does not end on a 12-month boundary gets a final partial year.
    """
    yearly: list[YearlySummary] = []
    year_payment = 0.0
    year_interest = 0.0
    year_principal = 0.0

    for row in schedule:
        year_payment += row.payment
        year_interest += row.interest
        year_principal += row.principal

        if row.period % 12 == 0 or row.period == len(schedule):
            yearly.append(YearlySummary(
                year=(row.period - 1) // 12 + 1,
                payment=year_payment,
                interest=year_interest,
                principal=year_principal,
                ending_balance=row.balance,
            ))
            year_payment = 0.0
            year_interest = 0.0
            year_principal = 0.0

    return yearly
