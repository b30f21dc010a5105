"""
Bank aggregate for the bank application.

This module contains the business logic for customers, accounts and the
money movements between them.
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Union

from .exceptions import CustomerNotRegisteredError
from .factory import AccountFactory
from .models import Account, AccountType
from .validators import is_valid_email, is_valid_password


ACCOUNT_NOT_FOUND = "Account not found"


class Bank:
    """Owns customers and accounts and orchestrates operations on them."""

    def __init__(self):
        """Initialize an empty bank."""
        self._accounts: Dict[str, Account] = {}
        self._customers: Dict[str, str] = {}
        self.logger = logging.getLogger(__name__)

    @property
    def accounts(self) -> Mapping[str, Account]:
        """Read-only view of accounts keyed by account number."""
        return MappingProxyType(self._accounts)

    @property
    def customers(self) -> FrozenSet[str]:
        """Emails of registered customers."""
        return frozenset(self._customers)

    def register_customer(self, email: str, password: str) -> bool:
        """Register a customer, overwriting the password of a known email."""
        if not is_valid_email(email):
            self.logger.info(f"Rejected registration: invalid email {email!r}")
            return False

        if not is_valid_password(password):
            self.logger.info(f"Rejected registration for {email}: weak password")
            return False

        # Plaintext storage, demo only
        self._customers[email] = password
        self.logger.debug(f"Registered customer {email}")
        return True

    def is_registered(self, email: str) -> bool:
        """Check whether the email belongs to a registered customer."""
        return email in self._customers

    def create_account(self, email: str, account_type: Union[str, AccountType],
                       account_number: str) -> Account:
        """Open an account for a registered customer."""
        if not self.is_registered(email):
            raise CustomerNotRegisteredError(email)

        account = AccountFactory.create_account(account_type, account_number, email)
        if account_number in self._accounts:
            self.logger.warning(f"Replacing existing account {account_number}")

        self._accounts[account_number] = account
        self.logger.debug(f"Created {account.account_type.value} account {account_number} for {email}")
        return account

    def get_account(self, account_number: str) -> Optional[Account]:
        """Get account by account number."""
        return self._accounts.get(account_number)

    def deposit(self, account_number: str, amount: Decimal) -> bool:
        """Deposit money to an account."""
        account = self._accounts.get(account_number)
        if not account:
            self.logger.info(f"Deposit failed: account {account_number} not found")
            return False

        account.deposit(amount)
        self.logger.debug(f"Deposited {amount} to {account_number}")
        return True

    def withdraw(self, account_number: str, amount: Decimal) -> bool:
        """Withdraw money from an account."""
        account = self._accounts.get(account_number)
        if not account:
            self.logger.info(f"Withdrawal failed: account {account_number} not found")
            return False

        if not account.withdraw(amount):
            self.logger.info(f"Withdrawal of {amount} from {account_number} declined")
            return False

        self.logger.debug(f"Withdrew {amount} from {account_number}")
        return True

    def get_statement(self, account_number: str) -> str:
        """Get the statement of an account."""
        account = self._accounts.get(account_number)
        if not account:
            return ACCOUNT_NOT_FOUND
        return account.get_statement()

    def transfer(self, from_account_number: str, to_account_number: str,
                 amount: Decimal) -> bool:
        """
        Transfer money between accounts.

        The result reflects only the withdrawal. When the destination does not
        exist the withdrawn amount is not credited anywhere and True is still
        returned.
        """
        if not self.withdraw(from_account_number, amount):
            return False

        if not self.deposit(to_account_number, amount):
            self.logger.warning(
                f"Transfer of {amount} from {from_account_number} to unknown "
                f"account {to_account_number}: funds were not credited"
            )
        return True
