"""Exception hierarchy for the bank console."""


class BankError(Exception):
    """Base exception for all bank console errors."""


class InvalidArgumentError(BankError, ValueError):
    """Raised when an account is built or operated on with invalid input."""


class DuplicateAccountError(InvalidArgumentError):
    """Raised when an account number is already registered."""
