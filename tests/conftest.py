"""Pytest fixtures for card configuration tests."""

import pytest

from card_config.clients.mocks import StaticAddressLookupProvider
from card_config.contracts.interfaces import PostalAddress
from card_config.parser import CardConfigurationParser


@pytest.fixture
def provider():
    """In-memory address lookup provider."""
    return StaticAddressLookupProvider(
        [
            PostalAddress(street="Simon Carmiggeltstraat", house_number_or_name="6", city="Amsterdam", postal_code="1011 DJ", country="NL"),
            PostalAddress(street="Market Street", house_number_or_name="1", city="San Francisco", postal_code="94105", country="US"),
        ]
    )


@pytest.fixture
def make_parser(provider):
    def _make(payload):
        return CardConfigurationParser(payload, provider)

    return _make
