#!/usr/bin/env python3
"""Seed a ledger file with sample accounts.

Opens ``--accounts`` new accounts with generated identity profiles, makes
an opening deposit into each, and persists them to the ledger file. The
file is created when missing and appended to otherwise.
"""

import argparse
import logging
from pathlib import Path

from branch_ledger.config import LedgerConfig
from branch_ledger.generators import ProfileGenerator
from branch_ledger.logging import setup_logging
from branch_ledger.records import format_money
from branch_ledger.store import FlatFileAccountStore

logger = logging.getLogger("branch_ledger.scripts.seed_ledger")


def seed_ledger(store: FlatFileAccountStore, generator: ProfileGenerator, count: int) -> None:
    """Open ``count`` funded accounts in ``store``."""
    for profile in generator.generate_batch(count):
        account = store.open_account(profile)
        outcome = account.deposit(generator.opening_deposit())
        if not outcome.ok:
            logger.warning("Opening deposit rejected for %09d: %s", account.account_number, outcome.value)
            continue
        store.upsert(account)
        logger.debug("Funded %09d with %s", account.account_number, format_money(account.balance))


def main() -> None:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Seed a ledger file with sample accounts")
    parser.add_argument(
        "--accounts",
        type=int,
        default=10,
        help="Number of accounts to open (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=config.store.path,
        help=f"Ledger file (default: {config.store.path})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    args = parser.parse_args()

    if args.accounts < 1:
        parser.error("--accounts must be at least 1")

    setup_logging(level=args.log_level, format_type=config.log_format)

    store = FlatFileAccountStore(args.db, first_account_number=config.store.first_account_number)
    seed_ledger(store, ProfileGenerator(seed=args.seed), args.accounts)

    summary = store.summary()
    logger.info("Ledger: %s", store.path)
    logger.info("  active accounts: %d", summary["active"])
    logger.info("  closed accounts: %d", summary["closed"])
    logger.info("  total balance:   %s", format_money(summary["total_balance"]))


if __name__ == "__main__":
    main()
