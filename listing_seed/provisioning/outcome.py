"""Tagged result of one provisioning attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from listing_seed.exceptions import SeedError

T = TypeVar("T")


class OutcomeStatus(str, Enum):
    SUCCESS = "SUCCESS"
    RETRYABLE = "RETRYABLE"  # Record skipped, batch may continue
    FATAL = "FATAL"  # Batch must abort


@dataclass(frozen=True)
class ProvisioningOutcome(Generic[T]):
    """Outcome of provisioning a single record.

    Provisioners return outcomes instead of raising so that the caller
    decides, per phase, whether a failure is skipped or escalated.
    """

    status: OutcomeStatus
    record: T | None = None
    error: SeedError | None = None
    attempts: int = 1

    @classmethod
    def success(cls, record: T, attempts: int = 1) -> ProvisioningOutcome[T]:
        return cls(OutcomeStatus.SUCCESS, record=record, attempts=attempts)

    @classmethod
    def retryable(cls, error: SeedError, attempts: int = 1) -> ProvisioningOutcome[T]:
        return cls(OutcomeStatus.RETRYABLE, error=error, attempts=attempts)

    @classmethod
    def fatal(cls, error: SeedError, attempts: int = 1) -> ProvisioningOutcome[T]:
        return cls(OutcomeStatus.FATAL, error=error, attempts=attempts)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    def unwrap(self) -> T:
        """Return the record, or raise the carried error."""
        if self.status != OutcomeStatus.SUCCESS:
            raise self.error
        return self.record
