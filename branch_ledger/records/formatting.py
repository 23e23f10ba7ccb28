"""Human-readable rendering of ledger values."""

from decimal import Decimal

from branch_ledger.models.account import LedgerAccount, to_money


def format_money(amount: str | int | float | Decimal) -> str:
    """Format an amount as US currency, e.g. ``$1,234.56``."""
    value = to_money(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def describe_account(account: LedgerAccount) -> list[str]:
    """Return the account summary lines shown to an account holder."""
    profile = account.profile
    return [
        f"Account # : {account.account_number:09d}",
        f"Account Holder : {profile.full_name}",
        f"Address : {profile.street_address}",
        f"          {profile.formatted_address}",
        f"Date of Birth : {profile.formatted_dob}",
        f"Telephone : {profile.formatted_phone}",
        f"Balance : {format_money(account.balance)}",
    ]
