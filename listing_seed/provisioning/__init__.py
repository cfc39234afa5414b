"""Provisioners that persist synthesized records."""

from listing_seed.provisioning.accounts import AccountProvisioner, hash_password
from listing_seed.provisioning.listings import ListingProvisioner
from listing_seed.provisioning.outcome import OutcomeStatus, ProvisioningOutcome

__all__ = [
    "AccountProvisioner",
    "ListingProvisioner",
    "OutcomeStatus",
    "ProvisioningOutcome",
    "hash_password",
]
