"""
Data models for the bank application.

This module contains the account types and the two account variants.
"""

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


MINIMUM_BALANCE = Decimal('1000.00')
CURRENCY_SYMBOL = "$"
CENTS = Decimal('0.01')


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CURRENT = "current"

    @property
    def label(self) -> str:
        """Capitalized name used in statements."""
        return self.value.capitalize()


def to_decimal(amount) -> Decimal:
    """Convert an amount to Decimal."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount


def format_currency(amount: Decimal) -> str:
    """Format currency for display, rounding half-cents away from zero."""
    amount = to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    if amount < 0:
        return f"-{CURRENCY_SYMBOL}{-amount:,.2f}"
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


class Account(ABC):
    """Represents a bank account."""

    account_type: AccountType

    def __init__(self, account_number: str, account_holder: str):
        self._account_number = account_number
        self._account_holder = account_holder
        self._balance = Decimal('0.00')

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def account_holder(self) -> str:
        return self._account_holder

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    @abstractmethod
    def balance_floor(self) -> Decimal:
        """Lowest balance a withdrawal may leave behind."""

    def deposit(self, amount: Decimal) -> None:
        """Deposit money to account."""
        # Sign is not checked; a negative deposit lowers the balance.
        self._balance += to_decimal(amount)

    def can_withdraw(self, amount: Decimal) -> bool:
        """Check if withdrawal keeps the balance at or above the floor."""
        return self._balance - to_decimal(amount) >= self.balance_floor

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money from account."""
        amount = to_decimal(amount)
        if not self.can_withdraw(amount):
            return False

        self._balance -= amount
        return True

    def get_statement(self) -> str:
        """Build a one-line account summary."""
        return (
            f"{self.account_type.label} Account - Number: {self.account_number}, "
            f"Holder: {self.account_holder}, Balance: {format_currency(self.balance)}"
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}(account_number={self.account_number!r}, "
            f"account_holder={self.account_holder!r}, balance={self.balance!r})"
        )


class SavingsAccount(Account):
    """Account that must keep MINIMUM_BALANCE after every withdrawal."""

    account_type = AccountType.SAVINGS

    @property
    def balance_floor(self) -> Decimal:
        return MINIMUM_BALANCE


class CurrentAccount(Account):
    """Account that may be drawn down to zero but not overdrawn."""

    account_type = AccountType.CURRENT

    @property
    def balance_floor(self) -> Decimal:
        return Decimal('0.00')
