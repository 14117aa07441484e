"""
Account statement rendering.
"""

from decimal import Decimal

from .accounts import Account, AccountKind


def format_rate(rate: Decimal) -> str:
    """Show a fractional rate as a percentage without trailing zeros (0.02 -> '2')"""
    return format((rate * 100).normalize(), 'f')


def render(account: Account) -> str:
    """
    Render an account as a multi-line statement block.

    Savings accounts add their interest rate, current accounts their
    overdraft limit. Every line ends with a newline.
    """
    lines = [
        f"Account Details for {account.account_number}:",
        f"   Holder: {account.holder}",
        f"   Balance: {account.balance.to_display()}",
    ]

    if account.kind == AccountKind.SAVINGS:
        lines.append(f"   Interest Rate: {format_rate(account.interest_rate)}%")
    elif account.kind == AccountKind.CURRENT:
        lines.append(f"   Overdraft Limit: {account.overdraft_limit.to_display()}")

    return "".join(line + "\n" for line in lines)
