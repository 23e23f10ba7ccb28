"""Account ledger entity and its balance operations."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from branch_ledger.exceptions import InvalidAccountError
from branch_ledger.models.enums import AccountStatus, ResultCode
from branch_ledger.models.profile import IdentityProfile, abbreviate_state, is_valid_postal_code

ACCOUNT_MAXIMUM = Decimal("999999999999.99")
ACCOUNT_NUMBER_MAX = 999999999
CENT = Decimal("0.01")


def to_money(value: str | int | float | Decimal) -> Decimal:
    """Convert a value to a cent-quantized Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary expansion.

    Raises
    ------
    decimal.InvalidOperation
        If the value is not a finite number.
    """
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise InvalidOperation(f"Amount must be finite, got {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _coerce_amount(value: str | int | float | Decimal) -> Decimal | None:
    """Return the amount in cents, or ``None`` when it is not a usable number.

    Amounts with digits below the cent are unusable rather than rounded, so
    no operation moves money the caller did not supply.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        cents = to_money(amount)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if cents != amount or cents <= 0:
        return None
    return cents


@dataclass
class LedgerAccount:
    """Bank account holding a balance and an exclusively owned identity profile.

    ``0 <= balance <= ACCOUNT_MAXIMUM`` holds at all times. Every operation
    runs its checks before touching any balance, so a rejected operation
    leaves the account exactly as it was.

    An instance is meant to be held by one caller at a time; concurrent
    mutation needs locking outside this class.
    """

    account_number: int
    profile: IdentityProfile
    balance: Decimal = field(default_factory=lambda: Decimal("0.00"))
    status: AccountStatus = AccountStatus.ACTIVE

    def __post_init__(self) -> None:
        if not 0 < self.account_number <= ACCOUNT_NUMBER_MAX:
            raise InvalidAccountError(
                f"Account number must be a positive 9-digit value, got {self.account_number}"
            )
        try:
            self.balance = to_money(self.balance)
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidAccountError(f"Balance {self.balance!r} is not a number") from None
        if not 0 <= self.balance <= ACCOUNT_MAXIMUM:
            raise InvalidAccountError(
                f"Balance must be between 0 and {ACCOUNT_MAXIMUM}, got {self.balance}"
            )
        self.status = AccountStatus(self.status)

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    # --- Balance operations ---

    def deposit(self, amount: str | int | float | Decimal) -> ResultCode:
        """Add ``amount`` to the balance.

        Returns ``INVALID_AMOUNT`` for non-positive amounts or amounts with
        more than 2 decimal places, and ``EXCEEDS_MAXIMUM`` when the new
        balance would pass ``ACCOUNT_MAXIMUM``.
        """
        value = _coerce_amount(amount)
        outcome = self._check_deposit(value)
        if outcome is ResultCode.SUCCESS:
            self.balance += value
        return outcome

    def withdraw(self, amount: str | int | float | Decimal) -> ResultCode:
        """Remove ``amount`` from the balance.

        Returns ``INVALID_AMOUNT`` for non-positive amounts or amounts with
        more than 2 decimal places, and ``INSUFFICIENT_FUNDS`` when
        ``amount`` exceeds the balance.
        """
        value = _coerce_amount(amount)
        outcome = self._check_withdrawal(value)
        if outcome is ResultCode.SUCCESS:
            self.balance -= value
        return outcome

    def transfer(
        self,
        destination: "LedgerAccount | None",
        amount: str | int | float | Decimal,
    ) -> ResultCode:
        """Move ``amount`` from this account to ``destination``.

        ``destination`` is ``None`` when the lookup by account number found
        nothing, which yields ``ACCOUNT_NOT_FOUND``. The withdrawal checks
        on this account and the deposit checks on the destination both run
        before either balance changes, so a rejected transfer touches
        neither side and a successful one conserves the combined balance.
        """
        if destination is None:
            return ResultCode.ACCOUNT_NOT_FOUND

        value = _coerce_amount(amount)
        outcome = self._check_withdrawal(value)
        if outcome is not ResultCode.SUCCESS:
            return outcome

        if destination is not self:
            outcome = destination._check_deposit(value)
            if outcome is not ResultCode.SUCCESS:
                return outcome

        self.balance -= value
        destination.balance += value
        return ResultCode.SUCCESS

    def close(self) -> None:
        """Mark the account closed. The record is kept, not deleted."""
        self.status = AccountStatus.CLOSED

    # --- Profile passthroughs ---

    def change_pin(self, current_pin: int, new_pin: int) -> bool:
        return self.profile.set_pin(current_pin, new_pin)

    def change_phone(self, phone: int) -> bool:
        return self.profile.set_phone(phone)

    def change_address(self, street_address: str, city: str, state: str, postal_code: str) -> bool:
        """Replace the full postal address.

        The state and postal code are checked first; when the state matches
        no known state or the postal code is not 5 digits, nothing is changed
        and ``False`` is returned.
        """
        if not abbreviate_state(state) or not is_valid_postal_code(postal_code):
            return False
        self.profile.set_state(state)
        self.profile.set_street_address(street_address)
        self.profile.set_city(city)
        self.profile.set_postal_code(postal_code)
        return True

    # --- Checks ---

    def _check_deposit(self, value: Decimal | None) -> ResultCode:
        if value is None:
            return ResultCode.INVALID_AMOUNT
        if self.balance + value > ACCOUNT_MAXIMUM:
            return ResultCode.EXCEEDS_MAXIMUM
        return ResultCode.SUCCESS

    def _check_withdrawal(self, value: Decimal | None) -> ResultCode:
        if value is None:
            return ResultCode.INVALID_AMOUNT
        if value > self.balance:
            return ResultCode.INSUFFICIENT_FUNDS
        return ResultCode.SUCCESS
