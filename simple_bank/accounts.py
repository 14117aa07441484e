"""
Account Module

Defines the closed set of account kinds and the Account record, which
carries identity, the current balance and the policy parameters its kind
needs for withdrawals. Identity and policy are fixed once the account is
opened; only the balance changes afterwards.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Optional
from enum import Enum

from .currency import Money, Currency, to_decimal, to_money
from .config import get_config
from .logging_config import get_logger, log_action


logger = get_logger("simple_bank.accounts")


def _as_rate(value) -> Decimal:
    try:
        return to_decimal(value)
    except ValueError:
        raise ValueError("Interest rate must be a non-negative number")


class AccountKind(Enum):
    """Account variants, each with its own withdrawal policy"""
    BASE = "base"        # Withdraw only up to the balance
    SAVINGS = "savings"  # Keep a minimum balance, informational interest rate
    CURRENT = "current"  # Overdraft up to a fixed limit


@dataclass(eq=False)
class Account:
    """
    Bank account with identity, balance and per-kind policy parameters
    """
    account_number: str
    holder: str
    balance: Money
    kind: AccountKind = AccountKind.BASE
    interest_rate: Optional[Decimal] = None    # SAVINGS only, never applied
    minimum_balance: Optional[Money] = None    # SAVINGS only
    overdraft_limit: Optional[Money] = None    # CURRENT only

    def __post_init__(self):
        if not self.account_number:
            raise ValueError("Account number must not be empty")

        if not isinstance(self.balance, Money):
            raise ValueError("Balance must be a Money value")
        if not self.balance.is_finite():
            raise ValueError("Balance must be a finite amount")

        if self.interest_rate is not None:
            self.interest_rate = _as_rate(self.interest_rate)

        self._validate_policy()

        # Freeze everything but the balance from here on
        object.__setattr__(self, "_opened", True)

    def _validate_policy(self) -> None:
        if self.kind == AccountKind.SAVINGS:
            if self.interest_rate is None:
                raise ValueError("Savings account requires an interest rate")
            if self.minimum_balance is None:
                raise ValueError("Savings account requires a minimum balance")
        else:
            if self.interest_rate is not None:
                raise ValueError("Interest rate is only valid for savings accounts")
            if self.minimum_balance is not None:
                raise ValueError("Minimum balance is only valid for savings accounts")

        if self.kind == AccountKind.CURRENT:
            if self.overdraft_limit is None:
                raise ValueError("Current account requires an overdraft limit")
        elif self.overdraft_limit is not None:
            raise ValueError("Overdraft limit is only valid for current accounts")

        if self.interest_rate is not None:
            if not self.interest_rate.is_finite() or self.interest_rate < 0:
                raise ValueError("Interest rate must be a non-negative number")

        if self.minimum_balance is not None:
            if not isinstance(self.minimum_balance, Money):
                raise ValueError("Minimum balance must be a Money value")
            if self.minimum_balance.currency != self.currency:
                raise ValueError("Minimum balance currency must match account currency")

        if self.overdraft_limit is not None:
            if not isinstance(self.overdraft_limit, Money):
                raise ValueError("Overdraft limit must be a Money value")
            if self.overdraft_limit.currency != self.currency:
                raise ValueError("Overdraft limit currency must match account currency")
            if not self.overdraft_limit.is_finite() or self.overdraft_limit.is_negative():
                raise ValueError("Overdraft limit must not be negative")

    def __setattr__(self, name, value):
        if getattr(self, "_opened", False):
            if name != "balance":
                raise AttributeError(f"Account field '{name}' cannot be changed after opening")
            if not isinstance(value, Money) or value.currency != self.currency:
                raise ValueError("Balance must be Money in the account currency")
        object.__setattr__(self, name, value)

    @property
    def currency(self) -> Currency:
        return self.balance.currency

    @property
    def is_savings(self) -> bool:
        return self.kind == AccountKind.SAVINGS

    @property
    def is_current(self) -> bool:
        return self.kind == AccountKind.CURRENT

    def __repr__(self) -> str:
        return f"Account({self.kind.value}, {self.account_number}, balance={self.balance.to_string()})"


def _resolve_currency(currency: Optional[Currency]) -> Currency:
    return currency or get_config().currency


def _log_opened(account: Account) -> None:
    log_action(
        logger, "info", f"Account opened: {account.kind.value}",
        action="open_account", resource=f"account:{account.account_number}",
        extra={
            "kind": account.kind.value,
            "holder": account.holder,
            "balance": account.balance.to_string(),
        }
    )


def open_account(account_number: str, holder: str, balance,
                 currency: Optional[Currency] = None) -> Account:
    """
    Open a base account.

    Args:
        account_number: Unique account identifier
        holder: Name of the account holder
        balance: Opening balance (Money, Decimal, int or numeric string)
        currency: Account currency (configured default if omitted)

    Returns:
        Created Account object
    """
    currency = _resolve_currency(currency)
    account = Account(
        account_number=account_number,
        holder=holder,
        balance=to_money(balance, currency),
    )
    _log_opened(account)
    return account


def open_savings_account(account_number: str, holder: str, balance,
                         interest_rate, minimum_balance=None,
                         currency: Optional[Currency] = None) -> Account:
    """
    Open a savings account.

    The interest rate is a fraction (0.02 for 2%) shown on statements but
    never credited. The minimum balance defaults to the configured
    savings floor.
    """
    currency = _resolve_currency(currency)
    if minimum_balance is None:
        minimum_balance = get_config().savings_minimum_balance

    account = Account(
        account_number=account_number,
        holder=holder,
        balance=to_money(balance, currency),
        kind=AccountKind.SAVINGS,
        interest_rate=_as_rate(interest_rate),
        minimum_balance=to_money(minimum_balance, currency),
    )
    _log_opened(account)
    return account


def open_current_account(account_number: str, holder: str, balance,
                         overdraft_limit, currency: Optional[Currency] = None) -> Account:
    """Open a current account that may overdraw down to -overdraft_limit"""
    currency = _resolve_currency(currency)
    account = Account(
        account_number=account_number,
        holder=holder,
        balance=to_money(balance, currency),
        kind=AccountKind.CURRENT,
        overdraft_limit=to_money(overdraft_limit, currency),
    )
    _log_opened(account)
    return account
