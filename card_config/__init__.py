"""
Card configuration parsing.

Builds typed card component and drop-in configurations from a raw
configuration dict:

    parser = CardConfigurationParser(payload, provider)
    parser.configuration         # CardComponentConfiguration
    parser.dropin_configuration  # DropInCardConfiguration
"""

from .contracts import (
    AddressFormMode,
    AddressFormType,
    AddressLookupProvider,
    BillingAddressConfiguration,
    CardBrand,
    CardComponentConfiguration,
    CardType,
    DropInCardConfiguration,
    FieldVisibility,
    FormComponentStyle,
    PostalAddress,
    StoredCardConfiguration,
)
from .keys import CardKeys
from .parser import CardConfigurationParser
from .utils.config_loader import CardConfigLoadError, load_card_payload, parse_card_payload

__all__ = [
    "AddressFormMode", "AddressFormType", "AddressLookupProvider",
    "BillingAddressConfiguration", "CardBrand", "CardComponentConfiguration",
    "CardConfigLoadError", "CardConfigurationParser", "CardKeys", "CardType",
    "DropInCardConfiguration", "FieldVisibility", "FormComponentStyle",
    "PostalAddress", "StoredCardConfiguration",
    "load_card_payload", "parse_card_payload",
]
