"""Collision-free username and email allocation."""

from __future__ import annotations

import logging
import time
from typing import Callable

from listing_seed.exceptions import IdentityExhaustedError
from listing_seed.generators.base import BaseGenerator
from listing_seed.models.account import Identity

logger = logging.getLogger(__name__)


class IdentityAllocator(BaseGenerator):
    """Allocate ``(username, email)`` pairs that are unique within a batch.

    Candidates are built from the lower-cased name plus a 4-digit suffix
    taken from the wall clock (milliseconds) and a 3-digit random suffix::

        janedoe4821093
        jane.doe4821093@example.com

    Username and email are drawn independently and both suffixes are
    redrawn on every collision. The caller owns the two "used" sets; an
    accepted value is added to its set before :meth:`allocate` returns.
    """

    EMAIL_DOMAIN = "example.com"
    MAX_ATTEMPTS = 1000

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        max_attempts: int = MAX_ATTEMPTS,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._clock = clock
        self.max_attempts = max_attempts

    def random_name(self) -> tuple[str, str]:
        """Return a random ``(first_name, last_name)``."""
        return self._first_name(), self._last_name()

    def candidate_username(self, first_name: str, last_name: str) -> str:
        """Build one username candidate."""
        return f"{first_name.lower()}{last_name.lower()}{self._suffix()}"

    def candidate_email(self, first_name: str, last_name: str) -> str:
        """Build one email candidate."""
        return f"{first_name.lower()}.{last_name.lower()}{self._suffix()}@{self.EMAIL_DOMAIN}"

    def allocate(
        self,
        first_name: str,
        last_name: str,
        used_usernames: set[str],
        used_emails: set[str],
    ) -> Identity:
        """Allocate an identity for the given name.

        Parameters
        ----------
        first_name, last_name : str
            Name the identity is derived from.
        used_usernames, used_emails : set[str]
            Values already taken in this batch. Updated in place.

        Returns
        -------
        Identity
            Registered identity.

        Raises
        ------
        IdentityExhaustedError
            If no free candidate was found within ``max_attempts`` draws.
        """
        username = self._claim(
            lambda: self.candidate_username(first_name, last_name), used_usernames, "username"
        )
        email = self._claim(
            lambda: self.candidate_email(first_name, last_name), used_emails, "email"
        )
        return Identity(username=username, email=email)

    def allocate_random(self, used_usernames: set[str], used_emails: set[str]) -> Identity:
        """Allocate an identity for a freshly generated name."""
        first_name, last_name = self.random_name()
        return self.allocate(first_name, last_name, used_usernames, used_emails)

    def _claim(self, make_candidate: Callable[[], str], used: set[str], label: str) -> str:
        for attempt in range(self.max_attempts):
            candidate = make_candidate()
            if candidate not in used:
                used.add(candidate)
                return candidate
            logger.debug("%s collision on attempt %d: %s", label, attempt + 1, candidate)
        raise IdentityExhaustedError(
            f"No unused {label} found after {self.max_attempts} attempts"
        )

    def _suffix(self) -> str:
        millis = int(self._clock() * 1000)
        return f"{millis % 10000:04d}{self.rng.randint(0, 999):03d}"
