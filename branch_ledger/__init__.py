"""Single-branch account ledger persisted as fixed-width text records."""

__version__ = "0.1.0"
