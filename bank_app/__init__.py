"""
Bank Application

An in-memory banking demo with a CLI interface.
Supports customer registration, savings and current accounts, deposits,
withdrawals, transfers and statements.
"""

__version__ = "0.1.0"

from .exceptions import BankError, CustomerNotRegisteredError, UnknownAccountTypeError
from .models import Account, AccountType, CurrentAccount, SavingsAccount, format_currency
from .factory import AccountFactory
from .bank import Bank, ACCOUNT_NOT_FOUND
from .cli import main


__all__ = [
    "Account",
    "AccountType",
    "SavingsAccount",
    "CurrentAccount",
    "AccountFactory",
    "Bank",
    "ACCOUNT_NOT_FOUND",
    "BankError",
    "CustomerNotRegisteredError",
    "UnknownAccountTypeError",
    "format_currency",
    "main"
]
