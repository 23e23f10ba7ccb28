"""Tests for the fixed-width record codec."""

from decimal import Decimal

import pytest

from branch_ledger.exceptions import RecordFormatError
from branch_ledger.models import ACCOUNT_MAXIMUM, AccountStatus, IdentityProfile, LedgerAccount
from branch_ledger.records import (
    RECORD_LAYOUT,
    RECORD_LENGTH,
    FieldKind,
    deserialize,
    fits,
    record_account_number,
    serialize,
)


def _expected_line() -> str:
    """Record of the ``sample_account`` fixture, assembled column by column."""
    return (
        "123456789"
        + "1234"
        + "100.00".ljust(15)
        + "Wilson".ljust(20)
        + "Ryan".ljust(15)
        + "19900105"
        + "5555551234"
        + "123 Main St".ljust(30)
        + "Springfield".ljust(30)
        + "IL"
        + "62701"
        + "Y"
    )


class TestRecordLayout:
    """Tests for the column table."""

    def test_offsets(self) -> None:
        offsets = [(spec.offset, spec.end) for spec in RECORD_LAYOUT]

        assert offsets == [
            (0, 9),
            (9, 13),
            (13, 28),
            (28, 48),
            (48, 63),
            (63, 71),
            (71, 81),
            (81, 111),
            (111, 141),
            (141, 143),
            (143, 148),
            (148, 149),
        ]

    def test_record_length(self) -> None:
        assert RECORD_LENGTH == 149

    def test_kinds(self) -> None:
        kinds = {spec.name: spec.kind for spec in RECORD_LAYOUT}

        assert kinds["balance"] is FieldKind.MONEY
        assert kinds["status"] is FieldKind.FLAG
        assert kinds["dob"] is FieldKind.NUMERIC
        assert kinds["postal_code"] is FieldKind.TEXT


class TestSerialize:
    """Tests for serialize."""

    def test_exact_layout(self, sample_account: LedgerAccount) -> None:
        assert serialize(sample_account) == _expected_line()

    def test_zero_padded_numbers(self, sample_profile: IdentityProfile) -> None:
        sample_profile.set_pin(1234, 7)
        account = LedgerAccount(account_number=42, profile=sample_profile)

        line = serialize(account)

        assert line[0:9] == "000000042"
        assert line[9:13] == "0007"
        assert line[13:28] == "0.00           "

    def test_maximum_balance_fills_column(self, sample_profile: IdentityProfile) -> None:
        account = LedgerAccount(account_number=1, profile=sample_profile, balance=ACCOUNT_MAXIMUM)

        line = serialize(account)

        assert len(line) == RECORD_LENGTH
        assert line[13:28] == "999999999999.99"

    def test_closed_flag(self, sample_account: LedgerAccount) -> None:
        sample_account.close()

        assert serialize(sample_account)[-1] == "N"

    def test_empty_state_is_blank(self, sample_account: LedgerAccount) -> None:
        sample_account.profile.set_state("zz")

        assert serialize(sample_account)[141:143] == "  "

    def test_long_text_truncated(self, sample_account: LedgerAccount) -> None:
        sample_account.profile.set_city("X" * 40)

        line = serialize(sample_account)

        assert len(line) == RECORD_LENGTH
        assert line[111:141] == "X" * 30


class TestDeserialize:
    """Tests for deserialize."""

    def test_reads_every_field(self) -> None:
        account = deserialize(_expected_line())

        assert account.account_number == 123456789
        assert account.balance == Decimal("100.00")
        assert account.status is AccountStatus.ACTIVE
        profile = account.profile
        assert profile.pin == 1234
        assert profile.last_name == "Wilson"
        assert profile.first_name == "Ryan"
        assert profile.dob == 19900105
        assert profile.phone == 5555551234
        assert profile.street_address == "123 Main St"
        assert profile.city == "Springfield"
        assert profile.state == "IL"
        assert profile.postal_code == "62701"

    def test_round_trip(self, sample_account: LedgerAccount) -> None:
        assert deserialize(serialize(sample_account)) == sample_account

    def test_round_trip_edge_values(self, other_profile: IdentityProfile) -> None:
        other_profile.set_pin(5555, 0)
        other_profile.set_state("nowhere")
        account = LedgerAccount(
            account_number=999999999,
            profile=other_profile,
            balance=ACCOUNT_MAXIMUM,
            status=AccountStatus.CLOSED,
        )

        assert deserialize(serialize(account)) == account

    def test_line_terminator_ignored(self, sample_account: LedgerAccount) -> None:
        assert deserialize(serialize(sample_account) + "\n") == sample_account
        assert deserialize(serialize(sample_account) + "\r\n") == sample_account

    @pytest.mark.parametrize("delta", [-1, 1])
    def test_wrong_length(self, delta: int) -> None:
        line = _expected_line()
        bad = line[:delta] if delta < 0 else line + "Y"

        with pytest.raises(RecordFormatError):
            deserialize(bad)

    @pytest.mark.parametrize(
        "start,replacement",
        [
            (0, "12345678A"),  # account number
            (9, "12 4"),  # PIN
            (13, "abc.de         "),  # balance
            (13, "100.0          "),  # balance, one decimal place
            (63, "1990-1-5"),  # dob
            (71, " 555555123"),  # phone
        ],
    )
    def test_non_numeric_columns(self, start: int, replacement: str) -> None:
        line = _expected_line()
        bad = line[:start] + replacement + line[start + len(replacement) :]

        with pytest.raises(RecordFormatError):
            deserialize(bad)

    def test_unknown_status(self) -> None:
        with pytest.raises(RecordFormatError):
            deserialize(_expected_line()[:-1] + "X")

    def test_out_of_range_profile_data(self) -> None:
        line = _expected_line()
        bad = line[:63] + "19901340" + line[71:]

        with pytest.raises(RecordFormatError):
            deserialize(bad)

    def test_non_digit_postal_code(self) -> None:
        line = _expected_line()
        bad = line[:143] + "6270A" + line[148:]

        with pytest.raises(RecordFormatError):
            deserialize(bad)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            deserialize("")


class TestFits:
    """Tests for fits."""

    def test_everything_fits(self, sample_account: LedgerAccount) -> None:
        assert fits(sample_account) == []

    def test_reports_truncated_columns(self, sample_account: LedgerAccount) -> None:
        sample_account.profile.set_street_address("1" * 31)
        sample_account.profile.set_city("C" * 31)

        assert fits(sample_account) == ["street_address", "city"]


class TestRecordAccountNumber:
    """Tests for record_account_number."""

    def test_reads_first_column(self) -> None:
        assert record_account_number(_expected_line()) == 123456789

    def test_rejects_letters(self) -> None:
        with pytest.raises(RecordFormatError):
            record_account_number("ABCDEFGHI" + _expected_line()[9:])
