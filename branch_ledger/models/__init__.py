"""Domain models for the account ledger."""

from branch_ledger.models.account import ACCOUNT_MAXIMUM, LedgerAccount, to_money
from branch_ledger.models.enums import AccountStatus, ResultCode
from branch_ledger.models.profile import US_STATES, IdentityProfile, abbreviate_state

__all__ = [
    "ACCOUNT_MAXIMUM",
    "AccountStatus",
    "IdentityProfile",
    "LedgerAccount",
    "ResultCode",
    "US_STATES",
    "abbreviate_state",
    "to_money",
]
