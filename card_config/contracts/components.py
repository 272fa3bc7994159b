"""
Component configuration contracts.

Output shapes handed to the presentation layer:
- CardComponentConfiguration for the standalone card component
- DropInCardConfiguration for the card step of the drop-in checkout

Both are built by CardConfigurationParser and share every card field.
The component variant also carries style, shopper information,
localization and installments, which are not configured through the
parser and stay at their empty defaults.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .interfaces import AddressFormMode, CardType, FieldVisibility


class _ConfigurationModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    dump_exclude: ClassVar[Dict[str, Any]] = {}

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible dump; the address lookup provider is left out."""
        return self.model_dump(mode="json", exclude=self.dump_exclude or None)


class FormComponentStyle(_ConfigurationModel):
    """Placeholder for component styling. Styling is owned by the host UI."""


class StoredCardConfiguration(_ConfigurationModel):
    shows_security_code_field: bool = True


class BillingAddressConfiguration(_ConfigurationModel):
    country_codes: Optional[List[str]] = None
    mode: AddressFormMode = Field(default_factory=AddressFormMode.none)

    dump_exclude: ClassVar[Dict[str, Any]] = {"mode": {"provider"}}


class DropInCardConfiguration(_ConfigurationModel):
    shows_holder_name_field: bool = False
    shows_store_payment_method_field: bool = True
    shows_security_code_field: bool = True
    korean_authentication_mode: FieldVisibility = FieldVisibility.HIDE
    social_security_number_mode: FieldVisibility = FieldVisibility.HIDE
    stored_card_configuration: StoredCardConfiguration = Field(default_factory=StoredCardConfiguration)
    allowed_card_types: Optional[List[CardType]] = None
    installment_configuration: Optional[Dict[str, Any]] = None
    billing_address: BillingAddressConfiguration = Field(default_factory=BillingAddressConfiguration)

    dump_exclude: ClassVar[Dict[str, Any]] = {"billing_address": {"mode": {"provider"}}}

    @field_serializer("allowed_card_types")
    def _serialize_card_types(self, value: Optional[List[CardType]]) -> Optional[List[str]]:
        if value is None:
            return None
        return [card_type.raw_value for card_type in value]


class CardComponentConfiguration(DropInCardConfiguration):
    style: FormComponentStyle = Field(default_factory=FormComponentStyle)
    shopper_information: Optional[Dict[str, Any]] = None
    localization_parameters: Optional[Dict[str, Any]] = None
