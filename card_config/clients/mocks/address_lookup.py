"""
Mock Address Lookup Provider.

Purpose:
- Serves address suggestions from an in-memory list
- Does NOT make any network calls
- Returns deterministic results so flows can be exercised end-to-end

Swap:
Pass the host application's real AddressLookupProvider to
CardConfigurationParser instead of this one.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from card_config.contracts.interfaces import AddressLookupProvider, PostalAddress

logger = logging.getLogger(__name__)


class StaticAddressLookupProvider(AddressLookupProvider):
    def __init__(self, addresses: Optional[Iterable[PostalAddress]] = None) -> None:
        self.addresses: List[PostalAddress] = list(addresses or [])

    def lookup(self, search_term: str) -> List[PostalAddress]:
        term = (search_term or "").strip().lower()
        if not term:
            return []
        matches = [
            address
            for address in self.addresses
            if any(term in (value or "").lower() for value in (address.street, address.city, address.postal_code))
        ]
        logger.debug("Address lookup for %r returned %d result(s)", search_term, len(matches))
        return matches

    def complete(self, address: PostalAddress) -> PostalAddress:
        for known in self.addresses:
            if known.postal_code == address.postal_code and known.country == address.country:
                return known
        return address
