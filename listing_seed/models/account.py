"""Account models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Identity:
    """Generated login identity; unique within one batch."""

    username: str
    email: str


@dataclass
class Account:
    """Marketplace user account."""

    username: str
    email: str
    password_hash: str  # bcrypt, salted
    avatar_url: str
    account_id: str | None = None  # Assigned by the document store
    created_at: datetime | None = None
