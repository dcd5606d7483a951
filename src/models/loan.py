"""Loan value types shared by the engine and the CLI.

All monetary fields are plain floats; nothing here is rounded.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    annual_rate_pct: float  # e.g. 6.0 for 6%
    term_years: int


@dataclass(frozen=True)
class RepaymentSummary:
    monthly_payment: float
    total_interest: float
    total_paid: float


@dataclass(frozen=True)
class ScheduleRow:
    period: int
    payment: float
    interest: float
    principal: float
    balance: float  # Remaining after this payment


@dataclass(frozen=True)
class YearlySummary:
    year: int
    payment: float
    interest: float
    principal: float
    ending_balance: float
