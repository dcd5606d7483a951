"""Interactive mortgage calculator.

Usage:
    python -m src.cli.main
    python -m src.cli.main --principal 300000 --rate 6.5 --years 30 --yearly --no-schedule
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from src.cli.display import print_schedule, print_summary, print_welcome, print_yearly
from src.cli.inputs import (
    Reader,
    Writer,
    ask_repeat,
    collect_loan_parameters,
    parse_positive_float,
    parse_positive_int,
)
from src.config import settings
from src.engine.amortization import amortization_schedule, repayment_summary, yearly_summary
from src.models.loan import LoanParameters

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def run_once(
    params: LoanParameters,
    write: Writer = print,
    show_schedule: bool = True,
    yearly: bool = False,
) -> None:
    """Compute and print everything for one set of loan parameters."""
    summary = repayment_summary(params)
    print_summary(summary, write)

    if show_schedule or yearly:
        schedule = amortization_schedule(params.principal, params.annual_rate_pct, params.term_years)
        if show_schedule:
            print_schedule(schedule, write)
        if yearly:
            print_yearly(yearly_summary(schedule), write)

    logger.info(
        "Calculated %s at %s%% over %d years: payment %.2f",
        params.principal, params.annual_rate_pct, params.term_years, summary.monthly_payment,
    )


def interactive_loop(
    read: Reader = input,
    write: Writer = print,
    show_schedule: bool = True,
    yearly: bool = False,
) -> None:
    print_welcome(write)
    while True:
        params = collect_loan_parameters(read, write)
        run_once(params, write, show_schedule=show_schedule, yearly=yearly)
        if not ask_repeat(read):
            break


def _arg_type(parse: Callable, description: str) -> Callable[[str], object]:
    def convert(text: str):
        value = parse(text)
        if value is None:
            raise argparse.ArgumentTypeError(f"{text!r} is not {description}")
        return value
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-rate mortgage repayment calculator")
    parser.add_argument(
        "--principal",
        type=_arg_type(parse_positive_float, "a positive amount"),
        help="Loan amount (one-shot mode with --rate and --years)",
    )
    parser.add_argument(
        "--rate",
        type=_arg_type(parse_positive_float, "a positive percentage"),
        help="Annual interest rate in percent, e.g. 6.5",
    )
    parser.add_argument(
        "--years",
        type=_arg_type(parse_positive_int, "a positive whole number of years"),
        help="Loan term in years",
    )
    parser.add_argument(
        "--schedule",
        action=argparse.BooleanOptionalAction,
        default=settings.show_schedule,
        help="Print the monthly amortization schedule",
    )
    parser.add_argument("--yearly", action="store_true", help="Print a per-year summary")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    one_shot = (args.principal, args.rate, args.years)
    if any(v is not None for v in one_shot):
        if any(v is None for v in one_shot):
            parser.error("--principal, --rate and --years must be given together")
        params = LoanParameters(principal=args.principal, annual_rate_pct=args.rate, term_years=args.years)
        run_once(params, show_schedule=args.schedule, yearly=args.yearly)
        return 0

    try:
        interactive_loop(show_schedule=args.schedule, yearly=args.yearly)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
