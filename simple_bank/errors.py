"""
Banking Error Types

Exceptions raised for caller mistakes. Policy refusals (insufficient
balance, minimum balance, overdraft limit) are not errors and are
reported through OperationResult instead.
"""


class BankError(Exception):
    """Base class for all simple_bank errors"""


class InvalidAmountError(BankError, ValueError):
    """
    Raised when a deposit or withdrawal amount is negative, not finite,
    not a number, or in a different currency from the account.
    """


class AccountKindError(BankError, ValueError):
    """Raised when an operation is applied to an account of the wrong kind"""
