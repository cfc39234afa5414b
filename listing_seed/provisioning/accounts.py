"""Account provisioning with bounded retry."""

from __future__ import annotations

import logging

import bcrypt

from listing_seed.exceptions import (
    FatalBatchError,
    IdentityExhaustedError,
    TransientProvisioningError,
)
from listing_seed.generators import IdentityAllocator, MediaGenerator
from listing_seed.models import Account
from listing_seed.provisioning.outcome import ProvisioningOutcome
from listing_seed.store.base import DocumentStore

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    """Salted bcrypt hash of ``password``."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


class AccountProvisioner:
    """Persist one account per call, retrying with a new identity on failure.

    Parameters
    ----------
    store : DocumentStore
        Target store.
    identities : IdentityAllocator
        Source of unique usernames and emails.
    media : MediaGenerator
        Source of avatar URLs.
    password : str
        Placeholder password shared by all seeded accounts.
    bcrypt_rounds : int
        bcrypt cost factor.
    max_attempts : int
        Attempts per account before the failure becomes fatal.
    """

    def __init__(
        self,
        store: DocumentStore,
        identities: IdentityAllocator,
        media: MediaGenerator,
        password: str = "password123",
        bcrypt_rounds: int = 10,
        max_attempts: int = 3,
    ) -> None:
        self.store = store
        self.identities = identities
        self.media = media
        self.password = password
        self.bcrypt_rounds = bcrypt_rounds
        self.max_attempts = max_attempts

    def provision(
        self,
        index: int,
        used_usernames: set[str],
        used_emails: set[str],
        accounts: list[Account],
    ) -> ProvisioningOutcome[Account]:
        """Create and persist one account.

        Each attempt allocates a fresh identity against the used sets.
        On success the account is appended to ``accounts``.

        Returns
        -------
        ProvisioningOutcome[Account]
            SUCCESS with the stored account, or FATAL carrying a
            ``FatalBatchError`` once every attempt has failed.
        """
        last_error: TransientProvisioningError | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                identity = self.identities.allocate_random(used_usernames, used_emails)
            except IdentityExhaustedError as e:
                return ProvisioningOutcome.fatal(e, attempts=attempt)

            try:
                account = Account(
                    username=identity.username,
                    email=identity.email,
                    password_hash=hash_password(self.password, self.bcrypt_rounds),
                    avatar_url=self.media.avatar_url(identity.username),
                )
                self.store.create_account(account)
            except Exception as e:  # retried with a new identity
                last_error = TransientProvisioningError(
                    f"Account {index} attempt {attempt} failed: {e}", kind="account", index=index
                )
                last_error.__cause__ = e
                logger.warning("%s", last_error)
                continue

            accounts.append(account)
            return ProvisioningOutcome.success(account, attempts=attempt)

        error = FatalBatchError(
            f"Failed to create account {index} after {self.max_attempts} attempts"
        )
        error.__cause__ = last_error
        return ProvisioningOutcome.fatal(error, attempts=self.max_attempts)
