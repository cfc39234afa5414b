"""In-memory document store with referential integrity."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from listing_seed.exceptions import ReferentialIntegrityError, StoreError
from listing_seed.models import Account, Listing

logger = logging.getLogger(__name__)


@dataclass
class InMemoryDocumentStore:
    """Dict-backed store for accounts and listings.

    Mirrors the constraints of the real collections: usernames and emails
    are unique, and every listing must reference an existing account.
    """

    accounts: dict[str, Account] = field(default_factory=dict)
    listings: dict[str, Listing] = field(default_factory=dict)

    # Unique indexes
    _usernames: set[str] = field(default_factory=set)
    _emails: set[str] = field(default_factory=set)

    def delete_all_accounts(self) -> int:
        """Remove every account."""
        count = len(self.accounts)
        self.accounts.clear()
        self._usernames.clear()
        self._emails.clear()
        return count

    def delete_all_listings(self) -> int:
        """Remove every listing."""
        count = len(self.listings)
        self.listings.clear()
        return count

    def create_account(self, account: Account) -> str:
        """Add an account to the store."""
        if account.username in self._usernames:
            raise StoreError(f"Duplicate username: {account.username}")
        if account.email in self._emails:
            raise StoreError(f"Duplicate email: {account.email}")

        account.account_id = uuid.uuid4().hex
        if account.created_at is None:
            account.created_at = datetime.now()
        self.accounts[account.account_id] = account
        self._usernames.add(account.username)
        self._emails.add(account.email)
        return account.account_id

    def create_listing(self, listing: Listing) -> str:
        """Add a listing to the store."""
        if listing.user_ref not in self.accounts:
            raise ReferentialIntegrityError(f"Account {listing.user_ref} not found")

        listing.listing_id = uuid.uuid4().hex
        if listing.created_at is None:
            listing.created_at = datetime.now()
        self.listings[listing.listing_id] = listing
        return listing.listing_id

    def close(self) -> None:
        logger.debug("In-memory store released (%d accounts, %d listings)",
                     len(self.accounts), len(self.listings))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "accounts": len(self.accounts),
            "listings": len(self.listings),
        }
