"""Account stores persisting ledger accounts."""

from branch_ledger.store.flat_file import FlatFileAccountStore

__all__ = ["FlatFileAccountStore"]
