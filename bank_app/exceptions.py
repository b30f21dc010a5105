"""
Exceptions for the bank application.

Only account creation raises; every other operation reports failure through
its return value.
"""


class BankError(Exception):
    """Base class for bank errors."""


class CustomerNotRegisteredError(BankError):
    """Raised when an account is requested for an unknown customer."""

    def __init__(self, email: str):
        super().__init__("Customer not registered")
        self.email = email


class UnknownAccountTypeError(BankError, ValueError):
    """Raised when the factory gets an account type it cannot build."""

    def __init__(self, account_type):
        super().__init__(f"Invalid account type: {account_type}")
        self.account_type = account_type
