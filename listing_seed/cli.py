"""Command-line entry point for seeding a store."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from listing_seed.config import BACKENDS, SeedConfig
from listing_seed.exceptions import SeedError
from listing_seed.generators import FakerPool
from listing_seed.logging import get_logger, setup_logging
from listing_seed.orchestrator import SeedOrchestrator
from listing_seed.sinks import JsonFileSink
from listing_seed.store import DocumentStore, InMemoryDocumentStore

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Options left unset fall back to the environment (see
    :meth:`SeedConfig.from_env`).
    """
    parser = argparse.ArgumentParser(
        prog="listing-seed",
        description="Clear a store and fill it with synthetic accounts and property listings",
    )
    parser.add_argument("--accounts", type=int, default=None, help="Number of accounts (default: 50)")
    parser.add_argument("--listings", type=int, default=None, help="Number of listings (default: 200)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--backend", choices=BACKENDS, default=None, help="Document store backend")
    parser.add_argument(
        "--postgres-url",
        type=str,
        default=None,
        help="PostgreSQL connection string (implies --backend postgres)",
    )
    parser.add_argument("--bcrypt-rounds", type=int, default=None, help="bcrypt cost factor (default: 10)")
    parser.add_argument(
        "--use-pool",
        action="store_true",
        help="Pre-generate Faker values (faster for large batches)",
    )
    parser.add_argument("--export-dir", type=str, default=None, help="Also write the batch to JSON files")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print exported JSON")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: INFO)")
    parser.add_argument("--log-format", choices=["standard", "json"], default=None)
    return parser


def load_config(args: argparse.Namespace) -> SeedConfig:
    """Environment configuration with command-line overrides applied."""
    config = SeedConfig.from_env()
    if args.accounts is not None:
        config.batch.num_accounts = args.accounts
    if args.listings is not None:
        config.batch.num_listings = args.listings
    if args.bcrypt_rounds is not None:
        config.batch.bcrypt_rounds = args.bcrypt_rounds
    if args.seed is not None:
        config.seed = args.seed
    if args.backend is not None:
        config.backend = args.backend
    if args.postgres_url is not None:
        config.backend = "postgres"
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    config.validate()
    return config


def build_store(config: SeedConfig, postgres_url: str | None = None) -> DocumentStore:
    """Create the configured document store (not yet connected)."""
    if config.backend == "postgres":
        from listing_seed.store.postgres import PostgresDocumentStore

        return PostgresDocumentStore(postgres_url or config.postgres.connection_string)
    return InMemoryDocumentStore()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one seeding batch.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 on any seeding error.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except SeedError as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        return 1

    setup_logging(level=config.log_level, format_type=config.log_format)

    pool = FakerPool(locale=config.locale, seed=config.seed) if args.use_pool else None
    orchestrator = SeedOrchestrator(
        build_store(config, args.postgres_url),
        config=config.batch,
        seed=config.seed,
        locale=config.locale,
        pool=pool,
    )

    try:
        report = orchestrator.seed_database()
    except SeedError as e:
        logger.error("Error seeding database: %s", e)
        return 1

    if args.export_dir:
        sink = JsonFileSink(args.export_dir, pretty=args.pretty)
        sink.write_batch("accounts", report.accounts)
        sink.write_batch("listings", report.listings)
        sink.close()

    return 0
