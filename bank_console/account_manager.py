"""
Account manager for the bank console.

This module contains the in-memory registry that owns every account for the
lifetime of the process, plus the operations the console drives through it.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator, List, Optional, Union

from .exceptions import DuplicateAccountError, InvalidArgumentError
from .models import AccountType, BankAccount, FixedDepositAccount, SavingsAccount

logger = logging.getLogger(__name__)

Account = Union[BankAccount, SavingsAccount, FixedDepositAccount]


class AccountManager:
    """Ordered in-memory registry of accounts keyed by account number."""

    def __init__(self):
        """Initialize an empty registry."""
        self._accounts: List[Account] = []

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.list_all())

    def __contains__(self, account_number: str) -> bool:
        return self.find(account_number) is not None

    def add(self, account: Account) -> Account:
        """Register an account; account numbers are unique ignoring case."""
        if self.find(account.account_number) is not None:
            logger.warning(f"Rejected duplicate account number {account.account_number}")
            raise DuplicateAccountError(f"Account {account.account_number} already exists")

        self._accounts.append(account)
        logger.info(f"Registered {account.get_account_type()} {account.account_number}")
        return account

    def find(self, account_number: str) -> Optional[Account]:
        """Find account by number, case-insensitive."""
        if account_number is None:
            return None

        key = account_number.casefold()
        for account in self._accounts:
            if account.account_number.casefold() == key:
                return account
        return None

    def list_all(self) -> List[Account]:
        """Get all accounts in insertion order."""
        return list(self._accounts)

    def create_account(self, account_type: AccountType, account_number: str,
                       owner_name: Optional[str] = None,
                       initial_balance: Decimal = Decimal('0.00'),
                       interest_rate: Decimal = Decimal('0.00'),
                       maturity_date: Optional[datetime] = None) -> Account:
        """Build an account of the given variant and register it."""
        if account_type is AccountType.SAVINGS:
            account = SavingsAccount(account_number, owner_name, initial_balance,
                                     interest_rate=interest_rate)
        elif account_type is AccountType.FIXED_DEPOSIT:
            account = FixedDepositAccount(account_number, owner_name, initial_balance,
                                          maturity_date=maturity_date)
        elif account_type is AccountType.GENERIC:
            account = BankAccount(account_number, owner_name, initial_balance)
        else:
            raise InvalidArgumentError(f"Unknown account type: {account_type!r}")

        return self.add(account)

    def deposit(self, account: Account, amount: Decimal) -> None:
        account.deposit(amount)

    def withdraw(self, account: Account, amount: Decimal) -> bool:
        return account.withdraw(amount)

    def get_balance(self, account: Account) -> Decimal:
        return account.get_balance()

    def apply_interest_to_all_savings(self) -> List[SavingsAccount]:
        """
        Apply interest to every savings account in the registry.

        Other account types are skipped.

        Returns:
            The savings accounts processed, in registry order
        """
        processed = []
        for account in self._accounts:
            if account.account_type is not AccountType.SAVINGS:
                continue
            interest = account.apply_interest()
            logger.info(f"Applied interest {interest} to {account.account_number}")
            processed.append(account)
        return processed

    def seed_demo_data(self, fixed_deposit_term_days: int = 30) -> None:
        """Populate the registry with one account of each type."""
        self.create_account(AccountType.GENERIC, "B100", "Alice", Decimal('500'))
        self.create_account(AccountType.SAVINGS, "S200", "Bob", Decimal('1500'),
                            interest_rate=Decimal('0.03'))
        self.create_account(AccountType.FIXED_DEPOSIT, "F300", "Charlie", Decimal('5000'),
                            maturity_date=datetime.now() + timedelta(days=fixed_deposit_term_days))
