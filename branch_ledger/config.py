"""Configuration management for branch-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from branch_ledger.exceptions import ConfigurationError


@dataclass
class StoreConfig:
    """Flat-file account store configuration."""

    path: Path = field(default_factory=lambda: Path("accounts-db.txt"))
    first_account_number: int = 100000001

    def __post_init__(self) -> None:
        if not 0 < self.first_account_number <= 999999999:
            raise ConfigurationError(
                f"First account number must fit in 9 digits, got {self.first_account_number}"
            )


@dataclass
class LedgerConfig:
    """Main configuration for branch-ledger."""

    store: StoreConfig = field(default_factory=StoreConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        first_number = os.getenv("LEDGER_FIRST_ACCOUNT_NUMBER", "100000001")
        try:
            first_account_number = int(first_number)
        except ValueError:
            raise ConfigurationError(
                f"LEDGER_FIRST_ACCOUNT_NUMBER must be an integer, got {first_number!r}"
            ) from None

        store = StoreConfig(
            path=Path(os.getenv("LEDGER_DB_PATH", "accounts-db.txt")),
            first_account_number=first_account_number,
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            store=store,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
