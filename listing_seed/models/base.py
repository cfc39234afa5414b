"""Base models shared by accounts and listings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """US-style street address.

    Rendered as ``"{number} {street}, {city}, {state} {postal_code}"``
    when stored on a listing.
    """

    number: str
    street: str
    city: str
    state: str
    postal_code: str

    def __str__(self) -> str:
        return f"{self.number} {self.street}, {self.city}, {self.state} {self.postal_code}"
