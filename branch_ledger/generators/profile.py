"""Identity profile and opening-balance generators for sample ledgers."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from branch_ledger.generators.base import BaseGenerator
from branch_ledger.models.account import ACCOUNT_MAXIMUM, to_money
from branch_ledger.models.profile import STATE_ABBREVIATIONS, IdentityProfile
from branch_ledger.records.layout import FIELDS_BY_NAME


def _fit(text: str, field_name: str) -> str:
    """Cut generated text to its record column so round-trips stay exact."""
    return text[: FIELDS_BY_NAME[field_name].width].rstrip()


class ProfileGenerator(BaseGenerator):
    """Generate synthetic identity profiles that fit the record layout."""

    STATES = sorted(STATE_ABBREVIATIONS)

    def generate(self) -> IdentityProfile:
        """Generate a single profile.

        Returns
        -------
        IdentityProfile
            Generated profile.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[IdentityProfile]:
        """Generate multiple profiles.

        Parameters
        ----------
        count : int
            Number of profiles to generate.

        Yields
        ------
        IdentityProfile
            Generated profiles.
        """
        for _ in range(count):
            yield self._generate_one()

    def opening_deposit(self) -> Decimal:
        """Random opening deposit, log-normal around a few thousand dollars."""
        amount = random.lognormvariate(mu=8.0, sigma=1.2)
        return min(to_money(max(amount, 0.01)), ACCOUNT_MAXIMUM)

    def _generate_one(self) -> IdentityProfile:
        born = self.fake.date_of_birth(minimum_age=18, maximum_age=90)
        return IdentityProfile(
            pin=random.randint(0, 9999),
            dob=born.year * 10000 + born.month * 100 + born.day,
            phone=random.randint(2000000000, 9999999999),
            first_name=_fit(self.fake.first_name(), "first_name"),
            last_name=_fit(self.fake.last_name(), "last_name"),
            street_address=_fit(self.fake.street_address(), "street_address"),
            city=_fit(self.fake.city(), "city"),
            state=random.choice(self.STATES),
            postal_code=self.fake.zipcode(),
        )
