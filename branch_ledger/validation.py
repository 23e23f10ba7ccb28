"""Validators for human-entered account data.

Callers run these before building or mutating a profile so that rejected
input never reaches the ledger, and before persisting so that no text
column is silently truncated.
"""

from datetime import datetime

from branch_ledger.models.profile import abbreviate_state
from branch_ledger.records.layout import FIELDS_BY_NAME


def _is_digits(text: str, length: int) -> bool:
    return len(text) == length and text.isascii() and text.isdigit()


def is_valid_text(text: str | None, field_name: str | None = None) -> bool:
    """Non-empty text that fits its record column when ``field_name`` is given."""
    if not text:
        return False
    if field_name is not None and len(text) > FIELDS_BY_NAME[field_name].width:
        return False
    return True


def parse_dob(text: str) -> int:
    """Convert ``MM/DD/YYYY`` to a ``YYYYMMDD`` integer.

    Raises
    ------
    ValueError
        If the text is not a calendar date in that format.
    """
    if len(text) != 10:
        raise ValueError(f"Date of birth must be MM/DD/YYYY, got {text!r}")
    born = datetime.strptime(text, "%m/%d/%Y")
    return born.year * 10000 + born.month * 100 + born.day


def is_valid_dob(text: str | None) -> bool:
    if text is None:
        return False
    try:
        parse_dob(text)
    except ValueError:
        return False
    return True


def is_valid_phone(text: str | None) -> bool:
    """Exactly 10 digits, not starting with 0."""
    return text is not None and _is_digits(text, 10) and text[0] != "0"


def is_valid_state(text: str | None) -> bool:
    """A full state name or 2-letter abbreviation, in any case."""
    return text is not None and len(text) >= 2 and abbreviate_state(text) != ""


def is_valid_postal_code(text: str | None) -> bool:
    return text is not None and _is_digits(text, 5)


def is_valid_pin(text: str | None) -> bool:
    return text is not None and _is_digits(text, 4)


def is_valid_account_number(text: str | None) -> bool:
    """Exactly 9 digits; account numbers start at 1."""
    return text is not None and _is_digits(text, 9) and int(text) > 0
