"""Fixed-width persistence format for ledger accounts."""

from branch_ledger.records.codec import deserialize, fits, record_account_number, serialize
from branch_ledger.records.formatting import describe_account, format_money
from branch_ledger.records.layout import RECORD_LAYOUT, RECORD_LENGTH, FieldKind, FieldSpec

__all__ = [
    "FieldKind",
    "FieldSpec",
    "RECORD_LAYOUT",
    "RECORD_LENGTH",
    "describe_account",
    "deserialize",
    "fits",
    "format_money",
    "record_account_number",
    "serialize",
]
