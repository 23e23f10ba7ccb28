"""Flat-file account store: one fixed-width record per line."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Iterator

from branch_ledger.config import StoreConfig
from branch_ledger.exceptions import RecordFormatError, StoreError
from branch_ledger.logging import get_logger
from branch_ledger.models.account import ACCOUNT_NUMBER_MAX, LedgerAccount
from branch_ledger.models.profile import IdentityProfile
from branch_ledger.records.codec import deserialize, fits, record_account_number, serialize
from branch_ledger.records.layout import RECORD_LAYOUT

logger = get_logger(__name__)


def _line_account_number(line: str) -> int | None:
    """Account number column of a stored line, or ``None`` when unreadable."""
    if len(line) < RECORD_LAYOUT[0].width:
        return None
    try:
        return record_account_number(line)
    except RecordFormatError:
        return None


class FlatFileAccountStore:
    """Account store backed by a text file that is the system of record.

    Closed accounts stay in the file but are invisible to lookups. Lines
    that fail to decode are skipped on read and carried through untouched
    on write.

    Parameters
    ----------
    path : str | Path
        Ledger file. A missing file is treated as an empty ledger.
    first_account_number : int
        Number given to the first account of an empty ledger.
    """

    def __init__(self, path: str | Path, first_account_number: int = 100000001) -> None:
        self.path = Path(path)
        self.first_account_number = first_account_number

    @classmethod
    def from_config(cls, config: StoreConfig) -> FlatFileAccountStore:
        return cls(config.path, first_account_number=config.first_account_number)

    # --- File access ---

    def _read_lines(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise StoreError(f"Cannot read ledger file {self.path}: {e}") from e

    def _write_lines(self, lines: list[str]) -> None:
        content = "".join(f"{line}\n" for line in lines)
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Cannot write ledger file {self.path}: {e}") from e
        logger.debug(
            "Rewrote %s with %d records",
            self.path,
            len(lines),
            extra={"ledger_path": str(self.path), "records": len(lines)},
        )

    def _decode_all(self) -> Iterator[tuple[str, LedgerAccount]]:
        for line_no, line in enumerate(self._read_lines(), start=1):
            if not line.strip():
                continue
            try:
                yield line, deserialize(line)
            except RecordFormatError as e:
                logger.warning(
                    "Skipping malformed record at %s:%d: %s",
                    self.path,
                    line_no,
                    e,
                    extra={"ledger_path": str(self.path), "line_no": line_no},
                )

    # --- Lookups ---

    def iter_accounts(self, include_closed: bool = False) -> Iterator[LedgerAccount]:
        """Yield every decodable account, active ones only by default."""
        for _, account in self._decode_all():
            if include_closed or account.is_active:
                yield account

    def find(self, account_number: int) -> str | None:
        """Return the stored record of an active account, or ``None``."""
        for line, account in self._decode_all():
            if account.is_active and account.account_number == account_number:
                return line
        return None

    def get_account(self, account_number: int) -> LedgerAccount | None:
        """Load an active account by number, or ``None`` when absent or closed."""
        for account in self.iter_accounts():
            if account.account_number == account_number:
                return account
        return None

    def authenticate(self, account_number: int, pin: int) -> LedgerAccount | None:
        """Return the active account when ``pin`` matches its profile."""
        account = self.get_account(account_number)
        if account is None or not account.profile.matches_pin(pin):
            logger.info(
                "Rejected login for account %09d",
                account_number,
                extra={"account_number": account_number},
            )
            return None
        return account

    def max_account_number(self) -> int:
        """Highest number in the file, closed accounts included.

        Lines that fail to decode still count when their number column is
        readable, so a damaged record never has its number handed out again.
        Returns ``first_account_number - 1`` for an empty ledger.
        """
        numbers = [n for n in map(_line_account_number, self._read_lines()) if n is not None]
        return max(numbers, default=self.first_account_number - 1)

    def next_account_number(self) -> int:
        number = self.max_account_number() + 1
        if number > ACCOUNT_NUMBER_MAX:
            raise StoreError("Account numbers exhausted")
        return number

    # --- Writes ---

    def upsert(self, account: LedgerAccount, other: LedgerAccount | None = None) -> None:
        """Persist one account, or both sides of a transfer.

        Existing well-formed records are replaced in place; new accounts are
        appended. Malformed lines are never overwritten.
        The whole file is rewritten.
        """
        pending: dict[int, str] = {}
        for item in (account, other):
            if item is None:
                continue
            truncated = fits(item)
            if truncated:
                logger.warning(
                    "Account %09d fields truncated on write: %s",
                    item.account_number,
                    ", ".join(truncated),
                    extra={"account_number": item.account_number},
                )
            pending[item.account_number] = serialize(item)

        lines = self._read_lines()
        for index, line in enumerate(lines):
            try:
                number = deserialize(line).account_number
            except RecordFormatError:
                continue
            if number in pending:
                lines[index] = pending.pop(number)

        lines.extend(pending.values())
        self._write_lines(lines)

    def open_account(self, profile: IdentityProfile) -> LedgerAccount:
        """Create and persist a new active account with a zero balance."""
        account = LedgerAccount(
            account_number=self.next_account_number(),
            profile=profile,
        )
        self.upsert(account)
        logger.info(
            "Opened account %09d for %s",
            account.account_number,
            profile.full_name,
            extra={"account_number": account.account_number},
        )
        return account

    def close_account(self, account: LedgerAccount) -> None:
        """Mark the account closed and persist it; the record is kept."""
        account.close()
        self.upsert(account)
        logger.info(
            "Closed account %09d",
            account.account_number,
            extra={"account_number": account.account_number},
        )

    def summary(self) -> dict[str, int | Decimal]:
        """Return counts of active and closed accounts and the total balance held."""
        active = closed = 0
        total = Decimal("0.00")
        for account in self.iter_accounts(include_closed=True):
            if account.is_active:
                active += 1
                total += account.balance
            else:
                closed += 1
        return {"active": active, "closed": closed, "total_balance": total}
