"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- no address lookup service is wired in (e.g. the card-config CLI)
- we want to test parsing end-to-end without external dependencies

Mock clients must follow the SAME interface as the host application's providers.
"""

from .address_lookup import StaticAddressLookupProvider

__all__ = ["StaticAddressLookupProvider"]
