"""
Account factory for the bank application.
"""

from typing import Dict, List, Type, Union

from .exceptions import UnknownAccountTypeError
from .models import Account, AccountType, CurrentAccount, SavingsAccount


class AccountFactory:
    """Builds account variants from a type tag."""

    _constructors: Dict[AccountType, Type[Account]] = {
        AccountType.SAVINGS: SavingsAccount,
        AccountType.CURRENT: CurrentAccount,
    }

    @classmethod
    def supported_types(cls) -> List[str]:
        """Tags accepted by create_account."""
        return sorted(account_type.value for account_type in cls._constructors)

    @classmethod
    def resolve_type(cls, account_type: Union[str, AccountType]) -> AccountType:
        """Map a tag (any letter casing) to an AccountType."""
        if isinstance(account_type, AccountType):
            return account_type

        if not isinstance(account_type, str):
            raise UnknownAccountTypeError(account_type)

        try:
            return AccountType(account_type.lower())
        except ValueError:
            raise UnknownAccountTypeError(account_type) from None

    @classmethod
    def create_account(cls, account_type: Union[str, AccountType],
                       account_number: str, account_holder: str) -> Account:
        """Create an account with a zero balance."""
        constructor = cls._constructors[cls.resolve_type(account_type)]
        return constructor(account_number, account_holder)
