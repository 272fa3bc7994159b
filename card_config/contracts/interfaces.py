from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class FieldVisibility(str, Enum):
    SHOW = "show"
    HIDE = "hide"


class AddressFormType(str, Enum):
    NONE = "none"
    POSTAL_CODE = "postalCode"
    FULL = "full"
    LOOKUP = "lookup"


class CardBrand(str, Enum):
    VISA = "visa"
    MASTERCARD = "mc"
    AMERICAN_EXPRESS = "amex"
    DINERS = "diners"
    DISCOVER = "discover"
    JCB = "jcb"
    MAESTRO = "maestro"
    CARTE_BANCAIRE = "cartebancaire"
    CHINA_UNION_PAY = "cup"
    BANCONTACT = "bcmc"
    ELO = "elo"
    HIPERCARD = "hipercard"
    KOREAN_LOCAL_CARD = "kcp"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

class CardType(BaseModel):
    """A card brand identifier.

    Any string is accepted; unknown brands keep their raw value and report
    no ``brand``.
    """

    model_config = ConfigDict(frozen=True)

    raw_value: str

    @classmethod
    def from_raw(cls, value: str) -> "CardType":
        return cls(raw_value=value)

    @property
    def brand(self) -> Optional[CardBrand]:
        try:
            return CardBrand(self.raw_value)
        except ValueError:
            return None

    @property
    def is_known(self) -> bool:
        return self.brand is not None

    def __str__(self) -> str:
        return self.raw_value


class PostalAddress(BaseModel):
    street: Optional[str] = None
    house_number_or_name: Optional[str] = None
    apartment: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    state_or_province: Optional[str] = None
    country: Optional[str] = None


# ---------------------------------------------------------------------------
# Abstract provider interface
# ---------------------------------------------------------------------------

class AddressLookupProvider(ABC):
    """Address lookup capability supplied by the host application."""

    @abstractmethod
    def lookup(self, search_term: str) -> List[PostalAddress]:
        """Return candidate addresses for a partial search term."""

    def complete(self, address: PostalAddress) -> PostalAddress:
        """Fill in the remaining fields of a selected address."""
        return address


class AddressFormMode(BaseModel):
    """Billing address form mode. Only ``lookup`` carries a provider.

    The provider is stored as given: any object with a ``lookup`` method is
    accepted, subclass of AddressLookupProvider or not.
    """

    model_config = ConfigDict(frozen=True)

    type: AddressFormType = AddressFormType.NONE
    provider: Any = None

    @classmethod
    def none(cls) -> "AddressFormMode":
        return cls(type=AddressFormType.NONE)

    @classmethod
    def postal_code(cls) -> "AddressFormMode":
        return cls(type=AddressFormType.POSTAL_CODE)

    @classmethod
    def full(cls) -> "AddressFormMode":
        return cls(type=AddressFormType.FULL)

    @classmethod
    def lookup(cls, provider: AddressLookupProvider) -> "AddressFormMode":
        return cls(type=AddressFormType.LOOKUP, provider=provider)

    @classmethod
    def from_raw(cls, value: str, provider: AddressLookupProvider) -> "AddressFormMode":
        """Map a free-form mode string, case-insensitively, to a form mode."""
        lowered = value.lower()
        if lowered in ("postalcode", "postal_code", "postal"):
            return cls.postal_code()
        if lowered == "full":
            return cls.full()
        if lowered == "lookup":
            return cls.lookup(provider)
        return cls.none()
