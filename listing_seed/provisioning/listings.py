"""Listing provisioning with skip-on-error."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from listing_seed.exceptions import TransientProvisioningError
from listing_seed.generators import (
    AttributeSynthesizer,
    MediaGenerator,
    NarrativeComposer,
    PriceModel,
)
from listing_seed.models import Account, Listing, PropertyAttributes
from listing_seed.provisioning.outcome import ProvisioningOutcome
from listing_seed.store.base import DocumentStore

logger = logging.getLogger(__name__)


class ListingProvisioner:
    """Synthesize and persist one listing per call.

    A failure is never retried: it is returned as a RETRYABLE outcome so
    the batch can move on to the next listing.
    """

    def __init__(
        self,
        store: DocumentStore,
        attributes: AttributeSynthesizer,
        prices: PriceModel,
        narrative: NarrativeComposer,
        media: MediaGenerator,
    ) -> None:
        self.store = store
        self.attributes = attributes
        self.prices = prices
        self.narrative = narrative
        self.media = media

    def build(self, owner_id: str, attributes: PropertyAttributes | None = None) -> Listing:
        """Assemble a listing owned by ``owner_id`` without persisting it."""
        listing_type = self.attributes.listing_type()
        attrs = attributes or self.attributes.synthesize()
        quote = self.prices.quote(listing_type, attrs.bedrooms, attrs.luxury)

        return Listing(
            name=self.narrative.compose_name(attrs.style, listing_type),
            description=self.narrative.compose_description(
                attrs.bedrooms, attrs.style, attrs.amenities
            ),
            address=str(attrs.address),
            regular_price=quote.regular_price,
            discount_price=quote.discount_price,
            bathrooms=attrs.bathrooms,
            bedrooms=attrs.bedrooms,
            furnished=self.attributes.furnished(),
            parking=self.attributes.parking(),
            type=listing_type,
            offer=quote.has_offer,
            image_urls=self.media.listing_images(attrs.luxury),
            user_ref=owner_id,
        )

    def provision(self, index: int, accounts: Sequence[Account]) -> ProvisioningOutcome[Listing]:
        """Create and persist listing number ``index``.

        The owner is drawn uniformly from ``accounts``.

        Returns
        -------
        ProvisioningOutcome[Listing]
            SUCCESS with the stored listing, or RETRYABLE carrying a
            ``TransientProvisioningError``.
        """
        if not accounts:
            return ProvisioningOutcome.retryable(
                TransientProvisioningError(
                    f"Listing {index} has no account to reference", kind="listing", index=index
                )
            )

        owner = self.attributes.rng.choice(accounts)
        try:
            listing = self.build(owner.account_id)
            self.store.create_listing(listing)
        except Exception as e:
            error = TransientProvisioningError(
                f"Listing {index} failed: {e}", kind="listing", index=index
            )
            error.__cause__ = e
            return ProvisioningOutcome.retryable(error)

        return ProvisioningOutcome.success(listing)
