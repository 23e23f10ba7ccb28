"""Fixed-width record codec for ledger accounts.

Each account is stored as a single line of ``RECORD_LENGTH`` characters
with no delimiters. ``serialize`` and ``deserialize`` are exact inverses
for accounts whose text fields fit their columns; longer text is
truncated on the way out, so callers should check ``fits`` first.
"""

import re
from decimal import Decimal
from typing import Any

from branch_ledger.exceptions import InvalidAccountError, InvalidProfileError, RecordFormatError
from branch_ledger.models.account import LedgerAccount
from branch_ledger.models.enums import AccountStatus
from branch_ledger.models.profile import IdentityProfile
from branch_ledger.records.layout import RECORD_LAYOUT, RECORD_LENGTH, FieldKind, FieldSpec

_MONEY_PATTERN = re.compile(r"^(\d+\.\d{2}) *$")
_PROFILE_FIELDS = (
    "pin",
    "dob",
    "phone",
    "first_name",
    "last_name",
    "street_address",
    "city",
    "state",
    "postal_code",
)


def _field_values(account: LedgerAccount) -> dict[str, Any]:
    """Flatten an account and its profile into ``{column name: value}``."""
    values: dict[str, Any] = {name: getattr(account.profile, name) for name in _PROFILE_FIELDS}
    values["account_number"] = account.account_number
    values["balance"] = account.balance
    values["status"] = account.status
    return values


def _format_field(spec: FieldSpec, value: Any) -> str:
    if spec.kind is FieldKind.NUMERIC:
        text = f"{value:0{spec.width}d}"
        if len(text) > spec.width:
            raise ValueError(f"{spec.name} value {value} does not fit in {spec.width} digits")
        return text
    if spec.kind is FieldKind.MONEY:
        return f"{value:<{spec.width}.2f}"
    if spec.kind is FieldKind.FLAG:
        return AccountStatus(value).value
    return f"{value[: spec.width]:<{spec.width}}"


def _parse_field(spec: FieldSpec, raw: str) -> Any:
    if spec.kind is FieldKind.NUMERIC:
        if not (raw.isascii() and raw.isdigit()):
            raise RecordFormatError(f"Field {spec.name!r} is not numeric: {raw!r}")
        return int(raw)
    if spec.kind is FieldKind.MONEY:
        match = _MONEY_PATTERN.match(raw)
        if match is None:
            raise RecordFormatError(f"Field {spec.name!r} is not a 2-place amount: {raw!r}")
        return Decimal(match.group(1))
    if spec.kind is FieldKind.FLAG:
        try:
            return AccountStatus(raw)
        except ValueError:
            raise RecordFormatError(f"Unknown account status flag {raw!r}") from None
    return raw.rstrip(" ")


def serialize(account: LedgerAccount) -> str:
    """Render ``account`` as one fixed-width record (no line terminator)."""
    values = _field_values(account)
    return "".join(_format_field(spec, values[spec.name]) for spec in RECORD_LAYOUT)


def deserialize(line: str) -> LedgerAccount:
    """Build an account from one stored record.

    A trailing line terminator is ignored. Any structural problem raises
    ``RecordFormatError``; no partially decoded account is ever returned.
    """
    record = line.rstrip("\r\n")
    if len(record) != RECORD_LENGTH:
        raise RecordFormatError(
            f"Record must be {RECORD_LENGTH} characters, got {len(record)}"
        )

    values = {spec.name: _parse_field(spec, spec.slice(record)) for spec in RECORD_LAYOUT}

    try:
        profile = IdentityProfile(**{name: values[name] for name in _PROFILE_FIELDS})
        return LedgerAccount(
            account_number=values["account_number"],
            profile=profile,
            balance=values["balance"],
            status=values["status"],
        )
    except (InvalidProfileError, InvalidAccountError) as e:
        raise RecordFormatError(f"Record holds out-of-range data: {e}") from e


def fits(account: LedgerAccount) -> list[str]:
    """Return the names of text fields that ``serialize`` would truncate."""
    values = _field_values(account)
    return [
        spec.name
        for spec in RECORD_LAYOUT
        if spec.kind is FieldKind.TEXT and len(values[spec.name]) > spec.width
    ]


def record_account_number(line: str) -> int:
    """Read only the account number column of a record.

    Lets a store match records without decoding the whole line.
    """
    spec = RECORD_LAYOUT[0]
    return _parse_field(spec, spec.slice(line))
