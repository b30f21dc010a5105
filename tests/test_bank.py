"""
Tests for the bank module.

This module contains tests for customer registration, account creation
and the money movements orchestrated by Bank.
"""

import logging

import pytest
from decimal import Decimal

from bank_app.bank import ACCOUNT_NOT_FOUND, Bank
from bank_app.exceptions import CustomerNotRegisteredError, UnknownAccountTypeError
from bank_app.models import CurrentAccount, SavingsAccount


EMAIL = "JohnDoe@example.com"
PASSWORD = "Password@123"


@pytest.fixture
def bank():
    """Create a Bank with one registered customer."""
    bank = Bank()
    assert bank.register_customer(EMAIL, PASSWORD) is True
    return bank


@pytest.fixture
def funded_bank(bank):
    """Bank with a savings account (5000) and a current account (3000)."""
    bank.create_account(EMAIL, "savings", "1234567890")
    bank.create_account(EMAIL, "current", "0987654321")
    bank.deposit("1234567890", Decimal('5000'))
    bank.deposit("0987654321", Decimal('3000'))
    return bank


class TestRegisterCustomer:
    """Test customer registration."""

    def test_register_valid_customer(self):
        bank = Bank()

        assert bank.register_customer("a@b.com", "Password@123") is True
        assert bank.is_registered("a@b.com") is True
        assert bank.customers == frozenset({"a@b.com"})
        assert isinstance(bank.customers, frozenset)

    def test_register_invalid_email(self):
        bank = Bank()

        assert bank.register_customer("bad-email", "Password@123") is False
        assert bank.customers == frozenset()

    def test_register_weak_password(self):
        bank = Bank()

        assert bank.register_customer("a@b.com", "short") is False
        assert bank.is_registered("a@b.com") is False

    def test_reregistration_overwrites(self, bank):
        """Re-registering a known email silently replaces the password."""
        assert bank.register_customer(EMAIL, "NewPass#9") is True
        assert bank.customers == frozenset({EMAIL})

    def test_failed_reregistration_keeps_customer(self, bank):
        assert bank.register_customer(EMAIL, "weak") is False
        assert bank.is_registered(EMAIL) is True

    def test_rejection_is_logged(self, caplog):
        bank = Bank()

        with caplog.at_level(logging.INFO, logger="bank_app.bank"):
            bank.register_customer("bad-email", PASSWORD)

        assert "invalid email" in caplog.text


class TestCreateAccount:
    """Test account creation."""

    def test_create_savings_account(self, bank):
        account = bank.create_account(EMAIL, "savings", "1234567890")

        assert isinstance(account, SavingsAccount)
        assert account.account_holder == EMAIL
        assert account.balance == Decimal('0')
        assert bank.get_account("1234567890") is account

    def test_create_current_account_mixed_case(self, bank):
        account = bank.create_account(EMAIL, "CuRrEnT", "0987654321")

        assert isinstance(account, CurrentAccount)

    def test_unregistered_customer_raises(self, bank):
        with pytest.raises(CustomerNotRegisteredError) as exc_info:
            bank.create_account("nobody@example.com", "savings", "1")

        assert str(exc_info.value) == "Customer not registered"
        assert exc_info.value.email == "nobody@example.com"
        assert bank.accounts == {}

    def test_unknown_type_raises(self, bank):
        with pytest.raises(UnknownAccountTypeError):
            bank.create_account(EMAIL, "crypto", "1")

        assert bank.get_account("1") is None

    def test_duplicate_number_overwrites(self, funded_bank):
        """An existing account with the same number is silently replaced."""
        replacement = funded_bank.create_account(EMAIL, "current", "1234567890")

        assert funded_bank.get_account("1234567890") is replacement
        assert replacement.balance == Decimal('0')

    def test_accounts_view_is_read_only(self, funded_bank):
        with pytest.raises(TypeError):
            funded_bank.accounts["new"] = None

        assert set(funded_bank.accounts) == {"1234567890", "0987654321"}


class TestDepositWithdraw:
    """Test deposit and withdraw through the bank."""

    def test_deposit_to_existing_account(self, funded_bank):
        assert funded_bank.deposit("1234567890", Decimal('250')) is True
        assert funded_bank.get_account("1234567890").balance == Decimal('5250')

    def test_deposit_to_unknown_account(self, funded_bank):
        assert funded_bank.deposit("missing", Decimal('250')) is False

    def test_withdraw_respects_savings_minimum(self, funded_bank):
        assert funded_bank.withdraw("1234567890", Decimal('2000')) is True
        assert funded_bank.withdraw("1234567890", Decimal('2000.01')) is False
        assert funded_bank.get_account("1234567890").balance == Decimal('3000')

    def test_withdraw_respects_current_floor(self, funded_bank):
        assert funded_bank.withdraw("0987654321", Decimal('3000')) is True
        assert funded_bank.withdraw("0987654321", Decimal('0.01')) is False

    def test_withdraw_from_unknown_account(self, funded_bank):
        assert funded_bank.withdraw("missing", Decimal('1')) is False


class TestStatement:
    """Test statements through the bank."""

    def test_statement_for_known_account(self, funded_bank):
        assert funded_bank.get_statement("0987654321") == (
            "Current Account - Number: 0987654321, "
            "Holder: JohnDoe@example.com, Balance: $3,000.00"
        )

    def test_statement_for_unknown_account(self, funded_bank):
        assert funded_bank.get_statement("missing") == ACCOUNT_NOT_FOUND
        assert ACCOUNT_NOT_FOUND == "Account not found"


class TestTransfer:
    """Test transfers between accounts."""

    def test_transfer_success(self, funded_bank):
        assert funded_bank.transfer("0987654321", "1234567890", Decimal('1000')) is True

        assert funded_bank.get_account("0987654321").balance == Decimal('2000')
        assert funded_bank.get_account("1234567890").balance == Decimal('6000')

    def test_transfer_declined_leaves_state_unchanged(self, funded_bank):
        assert funded_bank.transfer("1234567890", "0987654321", Decimal('4500')) is False

        assert funded_bank.get_account("1234567890").balance == Decimal('5000')
        assert funded_bank.get_account("0987654321").balance == Decimal('3000')

    def test_transfer_from_unknown_account(self, funded_bank):
        assert funded_bank.transfer("missing", "1234567890", Decimal('1')) is False
        assert funded_bank.get_account("1234567890").balance == Decimal('5000')

    def test_transfer_to_unknown_account_loses_funds(self, funded_bank, caplog):
        """
        Known defect: the result reflects only the withdrawal.

        The destination is never created and the source keeps the reduced
        balance, so the amount disappears from the bank.
        """
        with caplog.at_level(logging.WARNING, logger="bank_app.bank"):
            result = funded_bank.transfer("0987654321", "does-not-exist", Decimal('500'))

        assert result is True
        assert funded_bank.get_account("does-not-exist") is None
        assert funded_bank.get_account("0987654321").balance == Decimal('2500')
        assert "funds were not credited" in caplog.text
