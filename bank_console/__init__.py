"""
Bank Account Console

An in-memory bank account simulator with an interactive text menu.
Supports generic, savings and fixed-deposit accounts with deposits,
withdrawals, balance inquiries and interest application.
"""

__version__ = "0.1.0"

from .models import (
    AccountType,
    BankAccount,
    SavingsAccount,
    FixedDepositAccount,
    MINIMUM_SAVINGS_BALANCE,
)
from .exceptions import BankError, InvalidArgumentError, DuplicateAccountError
from .config import BankConfig
from .account_manager import AccountManager
from .cli import main


__all__ = [
    "AccountType",
    "BankAccount",
    "SavingsAccount",
    "FixedDepositAccount",
    "MINIMUM_SAVINGS_BALANCE",
    "BankError",
    "InvalidArgumentError",
    "DuplicateAccountError",
    "BankConfig",
    "AccountManager",
    "main"
]
