"""Custom exception hierarchy for branch-ledger."""


class LedgerError(Exception):
    """Base exception for all branch-ledger errors."""


class RecordFormatError(LedgerError, ValueError):
    """Raised when a stored line is not a well-formed account record."""


class InvalidProfileError(LedgerError, ValueError):
    """Raised when identity data is out of range at construction."""


class InvalidAccountError(LedgerError, ValueError):
    """Raised when an account is built with a number or balance out of bounds."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class StoreError(LedgerError):
    """Raised when the account store cannot read or write its file."""
