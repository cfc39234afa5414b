"""Document store interface consumed by the provisioners."""

from typing import Protocol, runtime_checkable

from listing_seed.models import Account, Listing


@runtime_checkable
class DocumentStore(Protocol):
    """Persistence operations needed to seed accounts and listings.

    ``create_*`` assign the store identifier to the record (``account_id``
    / ``listing_id``) and return it. Failures raise ``StoreError``.
    """

    def delete_all_accounts(self) -> int: ...

    def delete_all_listings(self) -> int: ...

    def create_account(self, account: Account) -> str: ...

    def create_listing(self, listing: Listing) -> str: ...

    def close(self) -> None: ...
