"""
Demonstration scenario

Opens a savings and a current account, deposits into the first,
withdraws from the second, merges the savings balance into the current
account, and prints both statements after each step.
"""

import sys
from decimal import Decimal
from typing import Optional, TextIO, Tuple

from .accounts import Account, open_savings_account, open_current_account
from .config import get_config
from .logging_config import setup_logging
from .operations import OperationResult, deposit, withdraw, merge_into
from .presentation import render


def _report(result: OperationResult, out: TextIO) -> None:
    if result.rejected:
        out.write(result.notice + "\n")


def _show(out: TextIO, *accounts: Account) -> None:
    for account in accounts:
        out.write(render(account))


def run_scenario(out: Optional[TextIO] = None) -> Tuple[Account, Account]:
    """
    Run the scenario, writing statements to ``out`` (stdout by default).

    Returns:
        The (savings, current) accounts in their final state
    """
    out = out or sys.stdout

    savings = open_savings_account("S123", "John Doe", Decimal('1000'), Decimal('0.02'))
    current = open_current_account("C456", "Jane Doe", Decimal('2000'), Decimal('500'))
    _show(out, savings, current)

    _report(deposit(savings, Decimal('500')), out)
    _report(withdraw(current, Decimal('1000')), out)

    out.write("\nAccount Details after deposit and withdrawal:\n")
    _show(out, savings, current)

    merge_into(current, savings)

    out.write("\nAccount Details after transfer:\n")
    _show(out, savings, current)

    return savings, current


def main() -> int:
    """Console entry point"""
    config = get_config()
    setup_logging(config.log_level, "simple_bank", config.log_format)
    run_scenario()
    return 0


if __name__ == "__main__":
    sys.exit(main())
