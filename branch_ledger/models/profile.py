"""Identity profile embedded in every ledger account."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime

from branch_ledger.exceptions import InvalidProfileError

# 50 states plus the federal district, keyed by lowercase full name
US_STATES: dict[str, str] = {
    "alabama": "AL",
    "alaska": "AK",
    "arizona": "AZ",
    "arkansas": "AR",
    "california": "CA",
    "colorado": "CO",
    "connecticut": "CT",
    "delaware": "DE",
    "florida": "FL",
    "georgia": "GA",
    "hawaii": "HI",
    "idaho": "ID",
    "illinois": "IL",
    "indiana": "IN",
    "iowa": "IA",
    "kansas": "KS",
    "kentucky": "KY",
    "louisiana": "LA",
    "maine": "ME",
    "maryland": "MD",
    "massachusetts": "MA",
    "michigan": "MI",
    "minnesota": "MN",
    "mississippi": "MS",
    "missouri": "MO",
    "montana": "MT",
    "nebraska": "NE",
    "nevada": "NV",
    "new hampshire": "NH",
    "new jersey": "NJ",
    "new mexico": "NM",
    "new york": "NY",
    "north carolina": "NC",
    "north dakota": "ND",
    "ohio": "OH",
    "oklahoma": "OK",
    "oregon": "OR",
    "pennsylvania": "PA",
    "rhode island": "RI",
    "south carolina": "SC",
    "south dakota": "SD",
    "tennessee": "TN",
    "texas": "TX",
    "utah": "UT",
    "vermont": "VT",
    "virginia": "VA",
    "washington": "WA",
    "west virginia": "WV",
    "wisconsin": "WI",
    "wyoming": "WY",
    "district of columbia": "DC",
}

STATE_ABBREVIATIONS: frozenset[str] = frozenset(US_STATES.values())

PIN_MIN = 0
PIN_MAX = 9999
PHONE_MIN = 1000000000  # 10 digits, no leading zero
PHONE_MAX = 9999999999


def abbreviate_state(text: str) -> str:
    """Return the uppercase 2-letter abbreviation for a state, or ``""``.

    Accepts either a known abbreviation or a full state name, in any case.
    """
    candidate = text.strip()
    if candidate.upper() in STATE_ABBREVIATIONS:
        return candidate.upper()
    return US_STATES.get(candidate.lower(), "")


def _is_valid_pin(pin: int) -> bool:
    return PIN_MIN <= pin <= PIN_MAX


def _is_valid_phone(phone: int) -> bool:
    return PHONE_MIN <= phone <= PHONE_MAX


def is_valid_postal_code(postal_code: str) -> bool:
    return len(postal_code) == 5 and postal_code.isascii() and postal_code.isdigit()


def _dob_to_date(dob: int) -> date:
    return datetime.strptime(f"{dob:08d}", "%Y%m%d").date()


@dataclass
class IdentityProfile:
    """Personal information record owned by exactly one account.

    ``dob`` is stored as an 8-digit ``YYYYMMDD`` integer and ``state``
    always holds an uppercase 2-letter abbreviation (or ``""`` when the
    input matched no known state).

    Mutators return ``True`` when the change was applied and ``False``
    when it was rejected and nothing changed.
    """

    pin: int
    dob: int
    phone: int
    first_name: str
    last_name: str
    street_address: str
    city: str
    state: str
    postal_code: str

    def __post_init__(self) -> None:
        if not _is_valid_pin(self.pin):
            raise InvalidProfileError(f"PIN must be between 0 and 9999, got {self.pin}")
        if not 10000000 <= self.dob <= 99999999:
            raise InvalidProfileError(f"Date of birth must be 8 digits (YYYYMMDD), got {self.dob}")
        try:
            _dob_to_date(self.dob)
        except ValueError:
            raise InvalidProfileError(f"Date of birth {self.dob} is not a calendar date") from None
        if not _is_valid_phone(self.phone):
            raise InvalidProfileError(
                f"Phone must be 10 digits without a leading zero, got {self.phone}"
            )
        if not is_valid_postal_code(self.postal_code):
            raise InvalidProfileError(f"Postal code must be 5 digits, got {self.postal_code!r}")
        self.state = abbreviate_state(self.state)

    # --- Mutators ---

    def set_pin(self, current_pin: int, new_pin: int) -> bool:
        """Replace the PIN when ``current_pin`` matches and ``new_pin`` is in range."""
        if not _is_valid_pin(new_pin) or current_pin != self.pin:
            return False
        self.pin = new_pin
        return True

    def set_phone(self, phone: int) -> bool:
        """Replace the phone number if it is 10 digits without a leading zero."""
        if not _is_valid_phone(phone):
            return False
        self.phone = phone
        return True

    def set_street_address(self, street_address: str) -> None:
        self.street_address = street_address

    def set_city(self, city: str) -> None:
        self.city = city

    def set_state(self, text: str) -> bool:
        """Store a state given as abbreviation or full name.

        A known 2-letter code is stored uppercased. Anything else is looked
        up by full name; unmatched input (including unknown 2-letter codes
        such as ``"zz"``) stores ``""`` and returns ``False``.
        """
        self.state = abbreviate_state(text)
        return self.state != ""

    def set_postal_code(self, postal_code: str) -> bool:
        """Replace the postal code if it is exactly 5 digits."""
        if not is_valid_postal_code(postal_code):
            return False
        self.postal_code = postal_code
        return True

    def matches_pin(self, pin: int) -> bool:
        return self.pin == pin

    # --- Display ---

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def date_of_birth(self) -> date:
        return _dob_to_date(self.dob)

    @property
    def formatted_phone(self) -> str:
        """Phone as ``(555) 555-5555``."""
        digits = f"{self.phone:010d}"
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"

    @property
    def formatted_dob(self) -> str:
        """Date of birth as ``January 5, 1990``."""
        born = self.date_of_birth
        return f"{calendar.month_name[born.month]} {born.day}, {born.year}"

    @property
    def formatted_address(self) -> str:
        """City, state and postal code as ``City, ST 12345``."""
        return f"{self.city}, {self.state} {self.postal_code}"
