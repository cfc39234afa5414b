"""Custom exception hierarchy for listing-seed."""


class SeedError(Exception):
    """Base exception for all listing-seed errors."""


class TransientProvisioningError(SeedError):
    """Raised when a single record could not be persisted."""

    def __init__(self, message: str, kind: str = "record", index: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.index = index


class FatalBatchError(SeedError):
    """Raised when an invariant of the whole batch cannot be satisfied."""


class IdentityExhaustedError(FatalBatchError):
    """Raised when no unused username or email could be generated."""


class StoreError(SeedError):
    """Raised when a document store operation fails."""


class ReferentialIntegrityError(StoreError):
    """Raised when a listing references an account that does not exist."""


class ConfigurationError(SeedError):
    """Raised when configuration is invalid or missing."""
