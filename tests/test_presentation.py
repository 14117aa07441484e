"""
Test suite for statement rendering
"""

from decimal import Decimal

from simple_bank.currency import Currency
from simple_bank.accounts import open_account, open_savings_account, open_current_account
from simple_bank.operations import withdraw
from simple_bank.presentation import render, format_rate


class TestRender:
    """Test the account statement block"""

    def test_base_account(self):
        account = open_account("A001", "Ann Lee", Decimal('42.5'))
        assert render(account) == (
            "Account Details for A001:\n"
            "   Holder: Ann Lee\n"
            "   Balance: $42.50\n"
        )

    def test_savings_account_adds_interest_rate(self):
        account = open_savings_account("S123", "John Doe", 1000, Decimal('0.02'))
        assert render(account) == (
            "Account Details for S123:\n"
            "   Holder: John Doe\n"
            "   Balance: $1000.00\n"
            "   Interest Rate: 2%\n"
        )

    def test_current_account_adds_overdraft_limit(self):
        account = open_current_account("C456", "Jane Doe", 2000, 500)
        assert render(account) == (
            "Account Details for C456:\n"
            "   Holder: Jane Doe\n"
            "   Balance: $2000.00\n"
            "   Overdraft Limit: $500.00\n"
        )

    def test_overdrawn_balance(self):
        account = open_current_account("C457", "Jane Doe", 0, 500)
        withdraw(account, 250)
        assert "   Balance: $-250.00\n" in render(account)

    def test_currency_symbol(self):
        account = open_account("A002", "Ann Lee", 10, currency=Currency.GBP)
        assert "   Balance: £10.00\n" in render(account)


class TestFormatRate:

    def test_whole_and_fractional_percentages(self):
        assert format_rate(Decimal('0.02')) == "2"
        assert format_rate(Decimal('0.025')) == "2.5"
        assert format_rate(Decimal('0.1')) == "10"
        assert format_rate(Decimal('0')) == "0"
