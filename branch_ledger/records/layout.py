"""Column layout of a stored account record.

Field boundaries are purely positional; offsets are derived from the
widths below so a width change cannot leave a stale offset behind.
"""

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    NUMERIC = "NUMERIC"  # digits only, zero-padded
    MONEY = "MONEY"  # 2 decimal places, left-justified
    TEXT = "TEXT"  # left-justified, space-padded, truncated to width
    FLAG = "FLAG"  # single status character


@dataclass(frozen=True)
class FieldSpec:
    """One fixed-width column."""

    name: str
    width: int
    kind: FieldKind
    offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + self.width

    def slice(self, line: str) -> str:
        return line[self.offset : self.end]


def _build_layout(columns: list[tuple[str, int, FieldKind]]) -> tuple[FieldSpec, ...]:
    """Assign cumulative offsets to ``(name, width, kind)`` columns."""
    specs = []
    offset = 0
    for name, width, kind in columns:
        specs.append(FieldSpec(name=name, width=width, kind=kind, offset=offset))
        offset += width
    return tuple(specs)


RECORD_LAYOUT: tuple[FieldSpec, ...] = _build_layout(
    [
        ("account_number", 9, FieldKind.NUMERIC),
        ("pin", 4, FieldKind.NUMERIC),
        ("balance", 15, FieldKind.MONEY),
        ("last_name", 20, FieldKind.TEXT),
        ("first_name", 15, FieldKind.TEXT),
        ("dob", 8, FieldKind.NUMERIC),
        ("phone", 10, FieldKind.NUMERIC),
        ("street_address", 30, FieldKind.TEXT),
        ("city", 30, FieldKind.TEXT),
        ("state", 2, FieldKind.TEXT),
        ("postal_code", 5, FieldKind.TEXT),
        ("status", 1, FieldKind.FLAG),
    ]
)

RECORD_LENGTH: int = RECORD_LAYOUT[-1].end

FIELDS_BY_NAME: dict[str, FieldSpec] = {spec.name: spec for spec in RECORD_LAYOUT}
