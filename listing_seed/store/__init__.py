"""Document stores for seeded accounts and listings."""

from listing_seed.store.base import DocumentStore
from listing_seed.store.memory import InMemoryDocumentStore

__all__ = ["DocumentStore", "InMemoryDocumentStore"]
