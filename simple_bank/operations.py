"""
Account Operations Module

Deposits, withdrawals and balance merges. Withdrawal policy is chosen by
account kind through a single dispatch table, and every operation that
can be refused returns an OperationResult so callers can tell an applied
change from a rejected one without re-reading the balance. Nothing here
prints; callers decide what to show.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
from enum import Enum

from .accounts import Account, AccountKind
from .currency import Money, fits_precision, to_decimal
from .errors import InvalidAmountError, AccountKindError
from .logging_config import get_logger, log_action


logger = get_logger("simple_bank.operations")


class OperationStatus(Enum):
    APPLIED = "applied"
    REJECTED = "rejected"


class RejectionReason(Enum):
    """Why a withdrawal was refused; the value is the customer notice"""
    INSUFFICIENT_BALANCE = "Insufficient balance."
    MINIMUM_BALANCE = "Insufficient balance (minimum balance requirement)."
    OVERDRAFT_LIMIT_EXCEEDED = "Overdraft limit exceeded."

    @property
    def notice(self) -> str:
        return self.value


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a deposit or withdrawal"""
    operation: str
    status: OperationStatus
    account_number: str
    amount: Money
    balance_before: Money
    balance_after: Money
    reason: Optional[RejectionReason] = None

    @property
    def applied(self) -> bool:
        return self.status == OperationStatus.APPLIED

    @property
    def rejected(self) -> bool:
        return self.status == OperationStatus.REJECTED

    @property
    def notice(self) -> Optional[str]:
        """Customer notice for a rejection, None when applied"""
        return self.reason.notice if self.reason else None


def _validate_amount(account: Account, amount) -> Money:
    """
    Normalise an amount into the account currency and reject anything
    negative, non-finite, non-numeric or finer than the currency's
    smallest unit before the balance is touched.
    """
    if isinstance(amount, Money):
        money = amount
    else:
        try:
            raw = to_decimal(amount)
        except ValueError as e:
            raise InvalidAmountError(str(e)) from e
        # Money rounds to the currency precision, so check the raw value first
        if raw.is_finite() and not fits_precision(raw, account.currency):
            raise InvalidAmountError(
                f"Amount {raw} has more than {account.currency.precision} decimal places"
            )
        money = Money(raw, account.currency)

    if money.currency != account.currency:
        raise InvalidAmountError(
            f"Amount currency {money.currency.code} does not match account currency {account.currency.code}"
        )
    if not money.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {money.amount}")
    if money.is_negative():
        raise InvalidAmountError(f"Amount must not be negative, got {money.to_string()}")
    return money


def _apply(operation: str, account: Account, amount: Money, new_balance: Money) -> OperationResult:
    before = account.balance
    account.balance = new_balance

    log_action(
        logger, "info", f"{operation.capitalize()} applied",
        action=operation, resource=f"account:{account.account_number}",
        extra={
            "amount": amount.to_string(),
            "balance_before": before.to_string(),
            "balance_after": new_balance.to_string(),
        }
    )

    return OperationResult(
        operation=operation,
        status=OperationStatus.APPLIED,
        account_number=account.account_number,
        amount=amount,
        balance_before=before,
        balance_after=new_balance,
    )


def _reject(operation: str, account: Account, amount: Money,
            reason: RejectionReason) -> OperationResult:
    log_action(
        logger, "warning", f"{operation.capitalize()} rejected: {reason.notice}",
        action=operation, resource=f"account:{account.account_number}",
        extra={
            "amount": amount.to_string(),
            "balance": account.balance.to_string(),
            "reason": reason.name,
        }
    )

    return OperationResult(
        operation=operation,
        status=OperationStatus.REJECTED,
        account_number=account.account_number,
        amount=amount,
        balance_before=account.balance,
        balance_after=account.balance,
        reason=reason,
    )


def deposit(account: Account, amount) -> OperationResult:
    """
    Add ``amount`` to the account balance.

    Deposits are never refused once the amount is valid; zero is a no-op.

    Raises:
        InvalidAmountError: If the amount is negative, not finite, not a
            number, finer than the currency allows, or in another currency
    """
    money = _validate_amount(account, amount)
    return _apply("deposit", account, money, account.balance + money)


def _withdraw_base(account: Account, amount: Money) -> OperationResult:
    if account.balance >= amount:
        return _apply("withdraw", account, amount, account.balance - amount)
    return _reject("withdraw", account, amount, RejectionReason.INSUFFICIENT_BALANCE)


def _withdraw_savings(account: Account, amount: Money) -> OperationResult:
    # The floor is checked first, then the base rule still has to pass
    if account.balance - amount >= account.minimum_balance:
        return _withdraw_base(account, amount)
    return _reject("withdraw", account, amount, RejectionReason.MINIMUM_BALANCE)


def _withdraw_current(account: Account, amount: Money) -> OperationResult:
    if account.balance + account.overdraft_limit >= amount:
        return _apply("withdraw", account, amount, account.balance - amount)
    return _reject("withdraw", account, amount, RejectionReason.OVERDRAFT_LIMIT_EXCEEDED)


WITHDRAWAL_POLICIES: Dict[AccountKind, Callable[[Account, Money], OperationResult]] = {
    AccountKind.BASE: _withdraw_base,
    AccountKind.SAVINGS: _withdraw_savings,
    AccountKind.CURRENT: _withdraw_current,
}


def withdraw(account: Account, amount) -> OperationResult:
    """
    Withdraw ``amount`` under the policy of the account's kind.

    BASE accounts can withdraw up to their balance. SAVINGS accounts must
    stay at or above their minimum balance and also pass the base rule.
    CURRENT accounts can go negative down to their overdraft limit.

    A refused withdrawal leaves the balance unchanged and comes back as a
    REJECTED result carrying the reason.

    Raises:
        InvalidAmountError: If the amount is not a valid non-negative amount
        AccountKindError: If the account kind has no withdrawal policy
    """
    money = _validate_amount(account, amount)
    policy = WITHDRAWAL_POLICIES.get(account.kind)
    if policy is None:
        raise AccountKindError(f"No withdrawal policy for account kind {account.kind!r}")
    return policy(account, money)


def merge_into(target: Account, source: Account) -> Account:
    """
    Add the savings ``source`` balance into the current ``target`` account.

    The source balance is copied, not moved: ``source`` keeps its balance.
    Returns ``target`` so calls can be chained.

    Raises:
        AccountKindError: Unless target is CURRENT and source is SAVINGS
    """
    if target.kind != AccountKind.CURRENT:
        raise AccountKindError(
            f"Merge target {target.account_number} must be a current account, not {target.kind.value}"
        )
    if source.kind != AccountKind.SAVINGS:
        raise AccountKindError(
            f"Merge source {source.account_number} must be a savings account, not {source.kind.value}"
        )

    # Raises ValueError on currency mismatch before anything changes
    merged = target.balance + source.balance
    before = target.balance
    target.balance = merged

    log_action(
        logger, "info", "Balance merged",
        action="merge_balance", resource=f"account:{target.account_number}",
        extra={
            "source": source.account_number,
            "amount": source.balance.to_string(),
            "balance_before": before.to_string(),
            "balance_after": merged.to_string(),
        }
    )
    return target
