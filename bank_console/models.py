"""
Account models for the bank console.

This module contains the three account variants and the rules governing
their deposits, withdrawals and interest accrual.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from enum import Enum
from typing import Any, Callable, ClassVar, Optional

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MINIMUM_SAVINGS_BALANCE = Decimal('100')
INTEREST_QUANTUM = Decimal('0.01')
# Banker's rounding: 0.005 goes to the nearest even cent
INTEREST_ROUNDING = ROUND_HALF_EVEN
CURRENCY_SYMBOL = "₹"
DEFAULT_OWNER_NAME = "Unknown"


class AccountType(Enum):
    """Account variants; the value is the display tag."""
    GENERIC = "BankAccount"
    SAVINGS = "SavingsAccount"
    FIXED_DEPOSIT = "FixedDeposit"


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgumentError(f"Invalid amount: {value!r}") from e


def format_currency(amount: Decimal) -> str:
    """Format currency for display."""
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


@dataclass
class BankAccount:
    """Generic bank account with a plain sufficient-funds withdrawal rule."""

    account_type: ClassVar[AccountType] = AccountType.GENERIC
    _identity_fields: ClassVar[frozenset] = frozenset({'account_number', 'owner_name'})

    account_number: str
    owner_name: str = DEFAULT_OWNER_NAME
    balance: Decimal = Decimal('0.00')

    def __post_init__(self):
        """Validate identity and clamp the opening balance."""
        if self.account_number is None or not str(self.account_number).strip():
            raise InvalidArgumentError("Account number is required")

        owner = (self.owner_name or "").strip() or DEFAULT_OWNER_NAME
        object.__setattr__(self, 'owner_name', owner)

        self.balance = to_decimal(self.balance)
        if not self.balance.is_finite():
            raise InvalidArgumentError(f"Invalid initial balance: {self.balance}")
        if self.balance < 0:
            self.balance = Decimal('0.00')

    def __setattr__(self, name, value):
        if name == 'account_type' or (name in self._identity_fields and name in self.__dict__):
            raise AttributeError(f"{name} cannot be changed after creation")
        super().__setattr__(name, value)

    def deposit(self, amount: Decimal) -> None:
        """Deposit money to account."""
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidArgumentError("Amount must be positive")
        self.balance += amount

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money if funds allow; never goes below zero."""
        amount = to_decimal(amount)

        if not amount.is_finite() or amount <= 0:
            return False

        if amount > self.balance:
            logger.debug(f"Withdrawal of {amount} from {self.account_number} rejected: insufficient funds")
            return False

        self.balance -= amount
        return True

    def get_balance(self) -> Decimal:
        return self.balance

    def get_account_type(self) -> str:
        return self.account_type.value

    def describe(self) -> str:
        """One-line summary used for balance and list display."""
        return (f"{self.account_number} | {self.owner_name} | "
                f"{self.get_account_type()} balance: {format_currency(self.balance)}")

    def __str__(self) -> str:
        return self.describe()


@dataclass
class SavingsAccount(BankAccount):
    """Savings account with a minimum balance and flat-rate interest."""

    account_type: ClassVar[AccountType] = AccountType.SAVINGS

    interest_rate: Decimal = Decimal('0.00')  # Fraction, 0.03 is 3%

    def __post_init__(self):
        super().__post_init__()
        self.interest_rate = to_decimal(self.interest_rate)
        if not self.interest_rate.is_finite():
            raise InvalidArgumentError(f"Invalid interest rate: {self.interest_rate}")
        if self.interest_rate < 0:
            self.interest_rate = Decimal('0.00')

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw unless the balance would fall below the minimum."""
        amount = to_decimal(amount)

        if not amount.is_finite() or amount <= 0:
            return False

        if self.balance - amount < MINIMUM_SAVINGS_BALANCE:
            logger.debug(
                f"Withdrawal of {amount} from {self.account_number} rejected: "
                f"minimum balance {MINIMUM_SAVINGS_BALANCE}"
            )
            return False

        return super().withdraw(amount)

    def apply_interest(self) -> Decimal:
        """
        Credit one period of interest at the account's flat rate.

        Interest is rounded to cents with banker's rounding and credited
        through deposit(). Amounts that round to zero are skipped.

        Returns:
            The amount credited, Decimal('0.00') if nothing was applied.
        """
        if self.interest_rate <= 0:
            return Decimal('0.00')

        interest = (self.balance * self.interest_rate).quantize(
            INTEREST_QUANTUM, rounding=INTEREST_ROUNDING
        )
        if interest <= 0:
            return Decimal('0.00')

        self.deposit(interest)
        return interest


@dataclass
class FixedDepositAccount(BankAccount):
    """Fixed deposit that only allows withdrawals once matured."""

    account_type: ClassVar[AccountType] = AccountType.FIXED_DEPOSIT

    maturity_date: Optional[datetime] = None
    clock: Optional[Callable[[], datetime]] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        super().__post_init__()
        if self.maturity_date is None:
            raise InvalidArgumentError("Maturity date is required")

    def is_mature(self) -> bool:
        maturity = self.maturity_date
        if self.clock is None:
            now = datetime.now(maturity.tzinfo)
        else:
            now = self.clock()

        # Naive datetimes are local time
        if now.tzinfo is None and maturity.tzinfo is not None:
            now = now.astimezone(maturity.tzinfo)
        elif now.tzinfo is not None and maturity.tzinfo is None:
            now = now.astimezone().replace(tzinfo=None)

        return now >= maturity

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw under the generic rule, but only on or after maturity."""
        if not self.is_mature():
            logger.debug(f"Withdrawal from {self.account_number} rejected: matures {self.maturity_date}")
            return False

        return super().withdraw(amount)
