"""Shared loan fixtures.

Fixture: $100K, 6%, 30yr fixed (the textbook $599.55/mo loan).
"""

import pytest

from src.models.loan import LoanParameters


@pytest.fixture
def standard_loan() -> LoanParameters:
    return LoanParameters(principal=100000.0, annual_rate_pct=6.0, term_years=30)


@pytest.fixture
def fifteen_year_loan() -> LoanParameters:
    return LoanParameters(principal=200000.0, annual_rate_pct=4.5, term_years=15)


@pytest.fixture
def one_year_loan() -> LoanParameters:
    return LoanParameters(principal=50000.0, annual_rate_pct=5.0, term_years=1)


@pytest.fixture
def scripted_io():
    """Feed canned answers to a prompt loop and capture everything it writes."""

    def make(answers):
        remaining = iter(answers)
        prompts: list[str] = []
        output: list[str] = []

        def read(prompt: str) -> str:
            prompts.append(prompt)
            return next(remaining)

        return read, output.append, prompts, output

    return make
