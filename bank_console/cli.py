"""
CLI interface for the bank console.

This module provides the interactive text menu that drives the account
registry for a single session.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from .account_manager import AccountManager
from .config import BankConfig
from .exceptions import BankError
from .models import CURRENCY_SYMBOL, AccountType, format_currency

logger = logging.getLogger(__name__)

MENU = (
    "=== BankAccount Console ===",
    "1. Create account",
    "2. Deposit",
    "3. Withdraw",
    "4. Show balance",
    "5. List accounts",
    "6. Apply interest to savings",
    "7. Exit",
)

ACCOUNT_TYPE_CHOICES = {
    'bank': AccountType.GENERIC,
    'savings': AccountType.SAVINGS,
    'fixed': AccountType.FIXED_DEPOSIT,
}


def ask(label: str) -> str:
    """Prompt for a line of input, allowing an empty answer."""
    return click.prompt(label, default='', show_default=False).strip()


class BankCLI:
    """Menu-driven wrapper around the account registry."""

    def __init__(self, config: Optional[BankConfig] = None,
                 account_manager: Optional[AccountManager] = None):
        """Initialize CLI with a registry, seeding demo accounts if configured."""
        self.config = config if config is not None else BankConfig()
        self.account_manager = account_manager if account_manager is not None else AccountManager()
        if account_manager is None and self.config.seed_demo_data:
            self.account_manager.seed_demo_data(self.config.fixed_deposit_term_days)

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return format_currency(amount)

    def parse_amount(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            clean_str = amount_str.replace(CURRENCY_SYMBOL, '').replace(',', '').strip()
            value = Decimal(clean_str)
        except (InvalidOperation, ValueError, AttributeError):
            raise ValueError(f"Invalid amount: {amount_str}")
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")
        return value

    def parse_date(self, date_str: str) -> Optional[datetime]:
        """Parse a date in the configured format, None if it doesn't match."""
        try:
            return datetime.strptime(date_str.strip(), self.config.date_format)
        except ValueError:
            return None

    def create_account(self):
        type_name = ask("Account type (bank/savings/fixed)").lower()
        account_number = ask("Account number")
        owner_name = ask("Owner name")

        try:
            initial = self.parse_amount(ask("Initial balance"))
        except ValueError:
            initial = Decimal('0')

        account_type = ACCOUNT_TYPE_CHOICES.get(type_name, AccountType.GENERIC)
        manager = self.account_manager

        if account_type is AccountType.SAVINGS:
            try:
                rate = self.parse_amount(ask("Interest rate (e.g., 0.03 for 3%)"))
            except ValueError:
                rate = Decimal('0')
            manager.create_account(account_type, account_number, owner_name, initial,
                                   interest_rate=rate)
            click.echo("Savings account created.")
        elif account_type is AccountType.FIXED_DEPOSIT:
            maturity = self.parse_date(ask("Maturity date (yyyy-MM-dd)"))
            if maturity is None:
                maturity = datetime.now() + timedelta(days=self.config.fixed_deposit_term_days)
                click.echo(f"Invalid date, defaulting to {maturity.strftime(self.config.date_format)}")
            manager.create_account(account_type, account_number, owner_name, initial,
                                   maturity_date=maturity)
            click.echo("Fixed deposit account created.")
        else:
            manager.create_account(account_type, account_number, owner_name, initial)
            click.echo("Bank account created.")

    def _lookup(self):
        account = self.account_manager.find(ask("Account number"))
        if account is None:
            click.echo("Account not found")
        return account

    def _ask_amount(self) -> Optional[Decimal]:
        try:
            return self.parse_amount(ask("Amount"))
        except ValueError:
            click.echo("Invalid amount")
            return None

    def deposit(self):
        account = self._lookup()
        if account is None:
            return
        amount = self._ask_amount()
        if amount is None:
            return

        self.account_manager.deposit(account, amount)
        new_balance = self.account_manager.get_balance(account)
        click.echo(f"Deposit successful. New balance: {self.format_currency(new_balance)}")

    def withdraw(self):
        account = self._lookup()
        if account is None:
            return
        amount = self._ask_amount()
        if amount is None:
            return

        if self.account_manager.withdraw(account, amount):
            new_balance = self.account_manager.get_balance(account)
            click.echo(f"Withdraw successful. New balance: {self.format_currency(new_balance)}")
        else:
            click.echo("Withdraw failed (insufficient funds or rule)")

    def show_balance(self):
        account = self._lookup()
        if account is not None:
            click.echo(account.describe())

    def list_accounts(self):
        for account in self.account_manager.list_all():
            click.echo(account.describe())

    def apply_interest(self):
        for account in self.account_manager.apply_interest_to_all_savings():
            click.echo(f"Applied interest to {account.account_number}")
        click.echo("Done.")

    def run_menu(self):
        """Read and dispatch menu choices until Exit or end of input."""
        actions = {
            '1': self.create_account,
            '2': self.deposit,
            '3': self.withdraw,
            '4': self.show_balance,
            '5': self.list_accounts,
            '6': self.apply_interest,
        }

        while True:
            click.echo()
            for line in MENU:
                click.echo(line)

            choice = ''
            try:
                choice = ask("Choose")
                if choice == '7':
                    break

                action = actions.get(choice)
                if action is None:
                    click.echo("Invalid choice")
                    continue
                action()
            except click.Abort:
                break
            except (BankError, ValueError) as e:
                logger.info(f"Menu action {choice} failed: {e}")
                click.echo(f"Error: {e}")


@click.command()
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (overrides BANK_LOG_LEVEL)')
@click.option('--seed/--no-seed', default=None,
              help='Load the demo accounts (overrides BANK_SEED_DEMO)')
def cli(log_level, seed):
    """Bank Account Console"""
    config = BankConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    if seed is not None:
        config.seed_demo_data = seed

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    BankCLI(config).run_menu()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
