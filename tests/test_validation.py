"""Tests for input validators."""

import pytest

from branch_ledger.validation import (
    is_valid_account_number,
    is_valid_dob,
    is_valid_phone,
    is_valid_pin,
    is_valid_postal_code,
    is_valid_state,
    is_valid_text,
    parse_dob,
)


class TestText:
    """Tests for is_valid_text."""

    def test_empty_and_none(self) -> None:
        assert not is_valid_text(None)
        assert not is_valid_text("")
        assert is_valid_text("Ryan")

    def test_column_width(self) -> None:
        assert is_valid_text("A" * 30, "city")
        assert not is_valid_text("A" * 31, "city")
        assert not is_valid_text("A" * 16, "first_name")


class TestDob:
    """Tests for date-of-birth parsing."""

    def test_parse(self) -> None:
        assert parse_dob("01/05/1990") == 19900105
        assert parse_dob("12/31/1975") == 19751231

    @pytest.mark.parametrize("text", ["1/5/1990", "1990/01/05", "13/01/1990", "02/30/1990", "ab/cd/efgh"])
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_dob(text)

    def test_is_valid(self) -> None:
        assert is_valid_dob("01/05/1990")
        assert not is_valid_dob("01-05-1990")
        assert not is_valid_dob(None)


class TestNumericInputs:
    """Tests for digit-only validators."""

    def test_phone(self) -> None:
        assert is_valid_phone("5555551234")
        assert not is_valid_phone("0555551234")
        assert not is_valid_phone("555555123")
        assert not is_valid_phone("555-555-12")
        assert not is_valid_phone(None)

    def test_postal_code(self) -> None:
        assert is_valid_postal_code("07102")
        assert not is_valid_postal_code("7102")
        assert not is_valid_postal_code("0710A")

    def test_pin(self) -> None:
        assert is_valid_pin("0000")
        assert is_valid_pin("9999")
        assert not is_valid_pin("123")
        assert not is_valid_pin("12345")
        assert not is_valid_pin("12a4")

    def test_account_number(self) -> None:
        assert is_valid_account_number("100000001")
        assert not is_valid_account_number("000000000")
        assert not is_valid_account_number("10000000")
        assert not is_valid_account_number("1000000001")


class TestState:
    """Tests for is_valid_state."""

    @pytest.mark.parametrize("text", ["CA", "ca", "California", "DISTRICT OF COLUMBIA"])
    def test_valid(self, text: str) -> None:
        assert is_valid_state(text)

    @pytest.mark.parametrize("text", ["C", "zz", "Ontario", ""])
    def test_invalid(self, text: str) -> None:
        assert not is_valid_state(text)
