"""
Currency and Money Module

ISO 4217 currency codes with their display precision and symbol, and an
immutable Money value. NEVER uses float for monetary values.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from dataclasses import dataclass
from enum import Enum
import re

# Set global decimal context for financial precision
getcontext().prec = 28


class Currency(Enum):
    """ISO 4217 Currency Codes with precision and display symbol"""
    USD = ("USD", 2, "$")
    EUR = ("EUR", 2, "€")
    GBP = ("GBP", 2, "£")
    JPY = ("JPY", 0, "¥")

    def __init__(self, code: str, precision: int, symbol: str):
        self.code = code
        self.precision = precision
        self.symbol = symbol


@dataclass(frozen=True)
class Money:
    """
    Immutable money representation with currency and proper precision.
    Balances, limits and amounts all use this class.
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Round to currency precision; NaN and infinities are left for callers to reject
        if self.amount.is_finite():
            rounded = self.amount.quantize(
                Decimal('0.1') ** self.currency.precision,
                rounding=ROUND_HALF_UP
            )
            object.__setattr__(self, 'amount', rounded)

    @classmethod
    def zero(cls, currency: Currency) -> 'Money':
        return cls(Decimal('0'), currency)

    def _check_currency(self, other: 'Money', verb: str) -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot {verb} {self.currency.code} and {other.currency.code}")

    def __add__(self, other: 'Money') -> 'Money':
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        self._check_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def __neg__(self) -> 'Money':
        return Money(-self.amount, self.currency)

    def __abs__(self) -> 'Money':
        return Money(abs(self.amount), self.currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount >= other.amount

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.amount == Decimal('0')

    def is_positive(self) -> bool:
        """Check if amount is positive"""
        return self.amount > Decimal('0')

    def is_negative(self) -> bool:
        """Check if amount is negative"""
        return self.amount < Decimal('0')

    def is_finite(self) -> bool:
        return self.amount.is_finite()

    def to_string(self) -> str:
        """Format with currency code, e.g. 'USD 1,500.00'"""
        return f"{self.currency.code} {self.amount:,.{self.currency.precision}f}"

    def to_display(self) -> str:
        """Format with currency symbol for statements, e.g. '$1500.00'"""
        return f"{self.currency.symbol}{self.amount:.{self.currency.precision}f}"


_SYMBOLS_AND_SPACE = re.compile(
    "[\\s" + re.escape("".join(sorted(c.symbol for c in Currency))) + "]"
)


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    # Remove currency symbols and whitespace only; anything else must parse
    clean_value = _SYMBOLS_AND_SPACE.sub("", value)

    # Both comma and dot - assume comma is thousands separator
    if ',' in clean_value and '.' in clean_value:
        clean_value = clean_value.replace(',', '')
    elif ',' in clean_value and clean_value.count(',') == 1:
        parts = clean_value.split(',')
        if len(parts[1]) <= 2:
            clean_value = clean_value.replace(',', '.')
        else:
            clean_value = clean_value.replace(',', '')

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")


def to_decimal(value) -> Decimal:
    """
    Read a Decimal, int, float or numeric string as an unrounded Decimal.

    Floats go through ``str()`` so 0.1 stays 0.1.

    Raises:
        ValueError: If the value cannot be read as a number
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot use {value!r} as an amount")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        return decimal_from_string(value)
    raise ValueError(f"Cannot use {value!r} as an amount")


def fits_precision(value: Decimal, currency: Currency) -> bool:
    """Check that a finite value has no more decimal places than the currency allows"""
    return value.normalize().as_tuple().exponent >= -currency.precision


def to_money(value, currency: Currency) -> Money:
    """
    Coerce a Money, Decimal, int or numeric string into Money.

    Non-Money values are taken to be in ``currency``. A Money value is
    returned unchanged, whatever its currency; callers that care compare
    currencies.

    Raises:
        ValueError: If the value cannot be read as a number
    """
    if isinstance(value, Money):
        return value
    return Money(to_decimal(value), currency)
