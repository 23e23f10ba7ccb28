"""Pytest configuration and fixtures."""

from decimal import Decimal
from pathlib import Path

import pytest

from branch_ledger.models import IdentityProfile, LedgerAccount


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_profile() -> IdentityProfile:
    """Profile whose text fields all fit their record columns."""
    return IdentityProfile(
        pin=1234,
        dob=19900105,
        phone=5555551234,
        first_name="Ryan",
        last_name="Wilson",
        street_address="123 Main St",
        city="Springfield",
        state="Illinois",
        postal_code="62701",
    )


@pytest.fixture
def other_profile() -> IdentityProfile:
    """A second, independent profile."""
    return IdentityProfile(
        pin=5555,
        dob=19751231,
        phone=2015550199,
        first_name="Maria",
        last_name="Gonzalez",
        street_address="77 Ocean Ave",
        city="Newark",
        state="NJ",
        postal_code="07102",
    )


@pytest.fixture
def sample_account(sample_profile: IdentityProfile) -> LedgerAccount:
    """Active account holding 100.00."""
    return LedgerAccount(
        account_number=123456789,
        profile=sample_profile,
        balance=Decimal("100.00"),
    )


@pytest.fixture
def other_account(other_profile: IdentityProfile) -> LedgerAccount:
    """Active account holding 50.00."""
    return LedgerAccount(
        account_number=123456790,
        profile=other_profile,
        balance=Decimal("50.00"),
    )


@pytest.fixture
def ledger_path(tmp_path: Path) -> Path:
    """Path of a ledger file that does not exist yet."""
    return tmp_path / "accounts-db.txt"
