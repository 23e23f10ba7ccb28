"""Sample-data generators."""

from branch_ledger.generators.profile import ProfileGenerator

__all__ = ["ProfileGenerator"]
