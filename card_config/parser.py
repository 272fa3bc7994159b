"""
Card configuration parser.

Turns the loosely-typed configuration dict delivered by the host bridge into
the typed card component and drop-in configurations.

Parsing never fails: a missing key or a value of the wrong type falls back to
the field's default, so every derived value is always defined.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from card_config.contracts.components import (
    BillingAddressConfiguration,
    CardComponentConfiguration,
    DropInCardConfiguration,
    FormComponentStyle,
    StoredCardConfiguration,
)
from card_config.contracts.interfaces import (
    AddressFormMode,
    AddressLookupProvider,
    CardType,
    FieldVisibility,
)
from card_config.keys import CardKeys
from card_config.utils.config_loader import parse_card_payload

logger = logging.getLogger(__name__)

_MISSING = object()


class CardConfigurationParser:
    """Derives typed card settings from a raw configuration mapping.

    Every property is recomputed from the raw mapping on access; nothing is
    cached and the mapping is never modified.
    """

    def __init__(self, configuration: Optional[Mapping], provider: AddressLookupProvider):
        self.provider = provider
        configuration = configuration if isinstance(configuration, Mapping) else {}
        node = configuration.get(CardKeys.ROOT)
        self._config: Mapping = node if isinstance(node, Mapping) else configuration

    @classmethod
    def from_json(cls, text: Union[str, bytes], provider: AddressLookupProvider) -> "CardConfigurationParser":
        """Build a parser from a JSON payload.

        Raises:
            CardConfigLoadError: If the text is not a JSON object
        """
        return cls(parse_card_payload(text), provider)

    # -- Flags --

    @property
    def shows_store_payment_method_field(self) -> bool:
        return self._get(CardKeys.SHOW_STORE_PAYMENT_FIELD, bool, True)

    @property
    def shows_holder_name_field(self) -> bool:
        return self._get(CardKeys.HOLDER_NAME_REQUIRED, bool, False)

    @property
    def shows_security_code_field(self) -> bool:
        return not self._get(CardKeys.HIDE_CVC, bool, False)

    @property
    def shows_stored_security_code_field(self) -> bool:
        return not self._get(CardKeys.HIDE_CVC_STORED_CARD, bool, False)

    # -- Modes --

    @property
    def address_visibility(self) -> AddressFormMode:
        value = self._get(CardKeys.ADDRESS_VISIBILITY, str, None)
        if value is None:
            return AddressFormMode.none()
        return AddressFormMode.from_raw(value, self.provider)

    @property
    def kcp_visibility(self) -> FieldVisibility:
        return self._parse_visibility(CardKeys.KCP_VISIBILITY)

    @property
    def social_security_visibility(self) -> FieldVisibility:
        return self._parse_visibility(CardKeys.SOCIAL_SECURITY)

    # -- Lists --

    @property
    def allowed_card_types(self) -> Optional[List[CardType]]:
        strings = self._get_strings(CardKeys.ALLOWED_CARD_TYPES)
        if strings is None:
            return None
        return [CardType.from_raw(value) for value in strings]

    @property
    def billing_address_country_codes(self) -> Optional[List[str]]:
        return self._get_strings(CardKeys.BILLING_ADDRESS_COUNTRY_CODES)

    # -- Aggregates --

    @property
    def stored_card_configuration(self) -> StoredCardConfiguration:
        return StoredCardConfiguration(shows_security_code_field=self.shows_stored_security_code_field)

    @property
    def billing_address_configuration(self) -> BillingAddressConfiguration:
        return BillingAddressConfiguration(
            country_codes=self.billing_address_country_codes,
            mode=self.address_visibility,
        )

    @property
    def configuration(self) -> CardComponentConfiguration:
        return CardComponentConfiguration(
            style=FormComponentStyle(),
            shopper_information=None,
            localization_parameters=None,
            installment_configuration=None,
            **self._card_fields(),
        )

    @property
    def dropin_configuration(self) -> DropInCardConfiguration:
        return DropInCardConfiguration(installment_configuration=None, **self._card_fields())

    def _card_fields(self) -> Dict[str, Any]:
        return {
            "shows_holder_name_field": self.shows_holder_name_field,
            "shows_store_payment_method_field": self.shows_store_payment_method_field,
            "shows_security_code_field": self.shows_security_code_field,
            "korean_authentication_mode": self.kcp_visibility,
            "social_security_number_mode": self.social_security_visibility,
            "stored_card_configuration": self.stored_card_configuration,
            "allowed_card_types": self.allowed_card_types,
            "billing_address": self.billing_address_configuration,
        }

    # -- Helpers --

    def _get(self, key: str, expected: Union[Type, Tuple[Type, ...]], default: Any) -> Any:
        value = self._config.get(key, _MISSING)
        if value is _MISSING:
            return default
        # bool is an int subclass; keep the two apart in both directions
        if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
            logger.debug("Ignoring card config %r: expected %s, got %s", key, expected, type(value).__name__)
            return default
        return value

    def _get_strings(self, key: str) -> Optional[List[str]]:
        values = self._get(key, (list, tuple), None)
        if not values:
            return None
        if not all(isinstance(value, str) for value in values):
            logger.debug("Ignoring card config %r: expected a list of strings", key)
            return None
        return list(values)

    def _parse_visibility(self, key: str) -> FieldVisibility:
        value = self._get(key, str, None)
        if value == "show":
            return FieldVisibility.SHOW
        return FieldVisibility.HIDE
