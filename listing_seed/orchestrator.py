"""End-to-end seeding run: reset, accounts, listings, summary."""

from __future__ import annotations

import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable

from faker import Faker

from listing_seed.config import BatchConfig
from listing_seed.generators import (
    AttributeSynthesizer,
    FakerPool,
    IdentityAllocator,
    MediaGenerator,
    NarrativeComposer,
    PriceModel,
)
from listing_seed.logging import BatchLoggerAdapter
from listing_seed.models import Account, Listing, ListingType
from listing_seed.provisioning import AccountProvisioner, ListingProvisioner
from listing_seed.store.base import DocumentStore

logger = logging.getLogger(__name__)


@dataclass
class SeedSummary:
    """Counts and statistics over one run (created listings only)."""

    accounts_created: int
    listings_requested: int
    listings_created: int
    average_sale_price: float | None  # None when no sale listing was created
    average_rent_price: float | None
    offers: int
    furnished: int
    parking: int

    @property
    def listings_skipped(self) -> int:
        return self.listings_requested - self.listings_created


@dataclass
class SeedReport:
    """Everything one run created."""

    accounts: list[Account] = field(default_factory=list)
    listings: list[Listing] = field(default_factory=list)
    summary: SeedSummary | None = None


def _average(values: list[int]) -> float | None:
    return sum(values) / len(values) if values else None


def summarize(accounts: list[Account], listings: list[Listing], listings_requested: int) -> SeedSummary:
    """Compute run statistics."""
    sale_prices = [listing.regular_price for listing in listings if listing.type == ListingType.SALE]
    rent_prices = [listing.regular_price for listing in listings if listing.type == ListingType.RENT]
    return SeedSummary(
        accounts_created=len(accounts),
        listings_requested=listings_requested,
        listings_created=len(listings),
        average_sale_price=_average(sale_prices),
        average_rent_price=_average(rent_prices),
        offers=sum(1 for listing in listings if listing.offer),
        furnished=sum(1 for listing in listings if listing.furnished),
        parking=sum(1 for listing in listings if listing.parking),
    )


def _money(value: float | None) -> str:
    return "n/a" if value is None else f"${round(value):,}"


class SeedOrchestrator:
    """Drive one seeding batch against a document store.

    All generators share one ``random.Random`` and one Faker instance, so
    a given ``seed`` reproduces the same batch (apart from the clock-based
    identity suffixes).

    Parameters
    ----------
    store : DocumentStore
        Target store. Released at the end of :meth:`seed_database`.
    config : BatchConfig | None
        Batch sizes and policies.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale.
    pool : FakerPool | None
        Optional pre-generated value pool.
    clock : Callable[[], float]
        Time source for identity suffixes.
    release_store : bool
        Close the store when the run ends.
    """

    def __init__(
        self,
        store: DocumentStore,
        config: BatchConfig | None = None,
        seed: int | None = None,
        locale: str = "en_US",
        pool: FakerPool | None = None,
        clock: Callable[[], float] = time.time,
        release_store: bool = True,
    ) -> None:
        self.store = store
        self.config = config or BatchConfig()
        self.release_store = release_store

        self.rng = random.Random(seed)
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
        shared = {"rng": self.rng, "fake": self.fake, "pool": pool}

        media = MediaGenerator(**shared)
        self.account_provisioner = AccountProvisioner(
            store,
            identities=IdentityAllocator(clock=clock, **shared),
            media=media,
            password=self.config.password,
            bcrypt_rounds=self.config.bcrypt_rounds,
            max_attempts=self.config.max_account_attempts,
        )
        self.listing_provisioner = ListingProvisioner(
            store,
            attributes=AttributeSynthesizer(**shared),
            prices=PriceModel(**shared),
            narrative=NarrativeComposer(**shared),
            media=media,
        )

    def seed_database(self) -> SeedReport:
        """Clear the store and rebuild it with a fresh batch.

        Returns
        -------
        SeedReport
            Created accounts, created listings and the summary.

        Raises
        ------
        FatalBatchError
            If an account could not be created; no listing is attempted.
        """
        log = BatchLoggerAdapter(logger, {"run_id": uuid.uuid4().hex[:8]})
        try:
            self._reset(log)
            accounts = self._provision_accounts(log.with_phase("accounts"))
            listings = self._provision_listings(accounts, log.with_phase("listings"))

            summary = summarize(accounts, listings, self.config.num_listings)
            self._report(summary, log)
            return SeedReport(accounts=accounts, listings=listings, summary=summary)
        finally:
            if self.release_store:
                self.store.close()

    def _reset(self, log: BatchLoggerAdapter) -> None:
        removed_accounts = self.store.delete_all_accounts()
        removed_listings = self.store.delete_all_listings()
        log.info("Cleared store: %d accounts, %d listings removed", removed_accounts, removed_listings)

    def _provision_accounts(self, log: BatchLoggerAdapter) -> list[Account]:
        # Uniqueness is tracked per run; nothing carries over between runs.
        used_usernames: set[str] = set()
        used_emails: set[str] = set()
        accounts: list[Account] = []

        log.info("Creating %d accounts...", self.config.num_accounts)
        for i in range(self.config.num_accounts):
            outcome = self.account_provisioner.provision(i, used_usernames, used_emails, accounts)
            if not outcome.ok:
                log.error("Aborting: %s", outcome.error)
            outcome.unwrap()  # Raises the FatalBatchError of a failed account

            if i % self.config.account_progress_every == 0:
                log.info("Created %d accounts...", i)

        return accounts

    def _provision_listings(self, accounts: list[Account], log: BatchLoggerAdapter) -> list[Listing]:
        listings: list[Listing] = []

        log.info("Creating %d listings...", self.config.num_listings)
        for i in range(self.config.num_listings):
            outcome = self.listing_provisioner.provision(i, accounts)
            if not outcome.ok:
                log.error("Error creating listing %d: %s", i, outcome.error)
                continue
            listings.append(outcome.unwrap())

            if i % self.config.listing_progress_every == 0:
                log.info("Created %d listings...", i)

        return listings

    @staticmethod
    def _report(summary: SeedSummary, log: BatchLoggerAdapter) -> None:
        log.info("=" * 60)
        log.info("Seeding Summary:")
        log.info("  - Created %d accounts", summary.accounts_created)
        log.info(
            "  - Created %d listings (%d skipped)",
            summary.listings_created,
            summary.listings_skipped,
        )
        log.info("Quick Statistics:")
        log.info("  - Average sale price: %s", _money(summary.average_sale_price))
        log.info("  - Average rent price: %s", _money(summary.average_rent_price))
        log.info("  - Properties with offers: %d", summary.offers)
        log.info("  - Furnished properties: %d", summary.furnished)
        log.info("  - Properties with parking: %d", summary.parking)
        log.info("=" * 60)
