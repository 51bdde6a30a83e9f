"""
Tests for the account manager module.

This module contains tests for the in-memory registry: registration,
lookup, listing, the account factory and bulk interest application.
"""

import logging
import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from bank_console.account_manager import AccountManager
from bank_console.exceptions import DuplicateAccountError, InvalidArgumentError
from bank_console.models import AccountType, BankAccount, FixedDepositAccount, SavingsAccount


class TestAccountManager:
    """Test registry operations."""

    @pytest.fixture
    def account_manager(self):
        """Create an empty AccountManager."""
        return AccountManager()

    @pytest.fixture
    def seeded_manager(self):
        """Create an AccountManager holding one account of each type."""
        manager = AccountManager()
        manager.seed_demo_data()
        return manager

    def test_empty_registry(self, account_manager):
        assert len(account_manager) == 0
        assert account_manager.list_all() == []
        assert account_manager.find("B100") is None

    def test_add_and_find(self, account_manager):
        account = BankAccount("B100", "Alice", Decimal('500'))

        assert account_manager.add(account) is account
        assert account_manager.find("B100") is account

    def test_find_is_case_insensitive(self, seeded_manager):
        account = seeded_manager.find("s200")

        assert account is not None
        assert account.account_number == "S200"
        assert "f300" in seeded_manager

    def test_find_missing(self, seeded_manager):
        assert seeded_manager.find("X999") is None
        assert seeded_manager.find(None) is None
        assert "X999" not in seeded_manager

    def test_duplicate_rejected(self, account_manager, caplog):
        account_manager.add(BankAccount("B100", "Alice"))

        with caplog.at_level(logging.WARNING):
            with pytest.raises(DuplicateAccountError):
                account_manager.add(SavingsAccount("b100", "Bob"))

        assert len(account_manager) == 1
        assert account_manager.find("B100").owner_name == "Alice"
        assert "duplicate" in caplog.text

    def test_duplicate_error_is_invalid_argument(self, account_manager):
        account_manager.add(BankAccount("B100"))
        with pytest.raises(InvalidArgumentError):
            account_manager.create_account(AccountType.GENERIC, "B100")

    def test_list_all_preserves_insertion_order(self, account_manager):
        for number in ["Z1", "A2", "M3"]:
            account_manager.add(BankAccount(number))

        numbers = [a.account_number for a in account_manager.list_all()]
        assert numbers == ["Z1", "A2", "M3"]
        # Restartable
        assert [a.account_number for a in account_manager.list_all()] == numbers
        assert [a.account_number for a in account_manager] == numbers

    def test_list_all_returns_copy(self, seeded_manager):
        accounts = seeded_manager.list_all()
        accounts.clear()
        assert len(seeded_manager) == 3

    def test_seed_demo_data(self, seeded_manager):
        b100, s200, f300 = seeded_manager.list_all()

        assert (b100.owner_name, b100.balance) == ("Alice", Decimal('500'))
        assert isinstance(s200, SavingsAccount)
        assert s200.interest_rate == Decimal('0.03')
        assert isinstance(f300, FixedDepositAccount)
        assert f300.maturity_date > datetime.now()


class TestCreateAccount:
    """Test the account factory."""

    @pytest.fixture
    def account_manager(self):
        return AccountManager()

    def test_create_generic(self, account_manager):
        account = account_manager.create_account(AccountType.GENERIC, "B100", "Alice", Decimal('500'))

        assert type(account) is BankAccount
        assert account_manager.find("B100") is account

    def test_create_savings(self, account_manager):
        account = account_manager.create_account(AccountType.SAVINGS, "S200", "Bob", Decimal('1500'),
                                                 interest_rate=Decimal('0.03'))

        assert isinstance(account, SavingsAccount)
        assert account.get_account_type() == "SavingsAccount"
        assert account.interest_rate == Decimal('0.03')

    def test_create_fixed_deposit(self, account_manager):
        maturity = datetime.now() + timedelta(days=10)
        account = account_manager.create_account(AccountType.FIXED_DEPOSIT, "F300", "Charlie",
                                                 Decimal('5000'), maturity_date=maturity)

        assert isinstance(account, FixedDepositAccount)
        assert account.maturity_date == maturity

    def test_create_with_empty_number_registers_nothing(self, account_manager):
        with pytest.raises(InvalidArgumentError):
            account_manager.create_account(AccountType.GENERIC, "  ", "Alice")
        assert len(account_manager) == 0

    def test_create_unknown_type(self, account_manager):
        with pytest.raises(InvalidArgumentError):
            account_manager.create_account("checking", "B100")


class TestRegistryOperations:
    """Test delegating operations and interest application."""

    @pytest.fixture
    def account_manager(self):
        manager = AccountManager()
        manager.seed_demo_data()
        return manager

    def test_deposit_and_balance(self, account_manager):
        account = account_manager.find("B100")

        account_manager.deposit(account, Decimal('100'))

        assert account_manager.get_balance(account) == Decimal('600')

    def test_deposit_non_positive(self, account_manager):
        account = account_manager.find("B100")
        with pytest.raises(InvalidArgumentError):
            account_manager.deposit(account, Decimal('0'))

    def test_withdraw(self, account_manager):
        assert account_manager.withdraw(account_manager.find("B100"), Decimal('100')) is True
        assert account_manager.withdraw(account_manager.find("S200"), Decimal('1450')) is False
        assert account_manager.withdraw(account_manager.find("F300"), Decimal('1')) is False

    def test_apply_interest_to_all_savings(self, account_manager):
        account_manager.add(SavingsAccount("S201", "Dana", Decimal('1000'), Decimal('0')))

        processed = account_manager.apply_interest_to_all_savings()

        assert [a.account_number for a in processed] == ["S200", "S201"]
        assert account_manager.find("S200").balance == Decimal('1545.00')
        assert account_manager.find("S201").balance == Decimal('1000')
        assert account_manager.find("B100").balance == Decimal('500')
        assert account_manager.find("F300").balance == Decimal('5000')

    def test_apply_interest_without_savings(self):
        manager = AccountManager()
        manager.add(BankAccount("B100", "Alice", Decimal('500')))

        assert manager.apply_interest_to_all_savings() == []
        assert manager.find("B100").balance == Decimal('500')

    def test_retagging_registered_account_is_refused(self):
        manager = AccountManager()
        account = manager.add(BankAccount("B100", "Alice", Decimal('500')))

        with pytest.raises(AttributeError):
            account.account_type = AccountType.SAVINGS

        assert manager.apply_interest_to_all_savings() == []
        assert account.balance == Decimal('500')
