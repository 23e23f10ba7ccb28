"""Enumeration types for ledger entities."""

from enum import Enum


class AccountStatus(str, Enum):
    """One-character status flag stored in the last record column."""

    ACTIVE = "Y"
    CLOSED = "N"


class ResultCode(str, Enum):
    """Outcome of a ledger operation.

    Business-rule failures are ordinary outcomes the caller branches on,
    not exceptions.
    """

    INVALID_AMOUNT = "INVALID_AMOUNT"
    EXCEEDS_MAXIMUM = "EXCEEDS_MAXIMUM"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    SUCCESS = "SUCCESS"

    @property
    def ok(self) -> bool:
        return self is ResultCode.SUCCESS
