"""
Contracts (data models).

Typed shapes produced by the card configuration parser and the capability
interface it consumes. Mock clients and the parser both use these models,
so the presentation layer never has to read raw configuration dicts.
"""

from .components import (
    BillingAddressConfiguration,
    CardComponentConfiguration,
    DropInCardConfiguration,
    FormComponentStyle,
    StoredCardConfiguration,
)
from .interfaces import (
    AddressFormMode,
    AddressFormType,
    AddressLookupProvider,
    CardBrand,
    CardType,
    FieldVisibility,
    PostalAddress,
)

__all__ = [
    # interfaces
    "AddressFormMode", "AddressFormType", "AddressLookupProvider",
    "CardBrand", "CardType", "FieldVisibility", "PostalAddress",
    # components
    "BillingAddressConfiguration", "CardComponentConfiguration",
    "DropInCardConfiguration", "FormComponentStyle", "StoredCardConfiguration",
]
