"""Console input collection for loan parameters and the repeat menu.

The parse_* functions return the parsed value, or None when the text is not
acceptable. The prompt loops keep asking until a parser accepts the answer.
"""

import logging
import math
from typing import Callable, Optional, TypeVar

from src.models.loan import LoanParameters

logger = logging.getLogger(__name__)

T = TypeVar("T")

Reader = Callable[[str], str]
Writer = Callable[[str], None]

LOAN_AMOUNT_PROMPT = "\nEnter the loan amount: "
ANNUAL_RATE_PROMPT = "\nEnter the annual interest rate (in percentage): "
TERM_YEARS_PROMPT = "\nEnter the loan term in years: "
REPEAT_PROMPT = "\nDo you want to do another calculation? (Y or n): "

INVALID_AMOUNTS = (
    "\n----------------------------"
    "\nPlease enter valid amounts."
    "\n----------------------------"
)


def _clean_number(text: str) -> str:
    """Drop surrounding whitespace and thousands separators."""
    return text.strip().replace(",", "")


def parse_positive_float(text: str) -> Optional[float]:
    try:
        value = float(_clean_number(text))
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_positive_int(text: str) -> Optional[int]:
    """Whole years only: "30" is accepted, "30.5" and "1,000" are not."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    if value <= 0:
        return None
    return value


def parse_repeat_answer(text: str) -> Optional[bool]:
    """Map the repeat-menu answer to continue (True), stop (False) or invalid (None).

    Only a literal "n" stops; "y" and an empty line both continue. Case and
    surrounding whitespace are significant.
    """
    if text == "n":
        return False
    if text in ("y", ""):
        return True
    return None


def prompt_until_valid(
    prompt: str,
    parser: Callable[[str], Optional[T]],
    read: Reader = input,
    write: Writer = print,
) -> T:
    while True:
        raw = read(prompt)
        value = parser(raw)
        if value is not None:
            return value
        logger.debug("Rejected input %r for prompt %r", raw, prompt.strip())
        write(INVALID_AMOUNTS)


def collect_loan_parameters(read: Reader = input, write: Writer = print) -> LoanParameters:
    """Prompt for loan amount, annual rate and term, in that order."""
    principal = prompt_until_valid(LOAN_AMOUNT_PROMPT, parse_positive_float, read, write)
    annual_rate_pct = prompt_until_valid(ANNUAL_RATE_PROMPT, parse_positive_float, read, write)
    term_years = prompt_until_valid(TERM_YEARS_PROMPT, parse_positive_int, read, write)
    return LoanParameters(
        principal=principal,
        annual_rate_pct=annual_rate_pct,
        term_years=term_years,
    )


def ask_repeat(read: Reader = input) -> bool:
    """Ask whether to run another calculation, re-asking on unrecognised answers."""
    while True:
        raw = read(REPEAT_PROMPT)
        answer = parse_repeat_answer(raw)
        if answer is not None:
            return answer
        logger.debug("Unrecognised repeat answer %r", raw)
