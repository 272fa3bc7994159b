"""Literal key spellings of the card configuration payload."""


class CardKeys:
    ROOT = "card"
    SHOW_STORE_PAYMENT_FIELD = "showStorePaymentField"
    HOLDER_NAME_REQUIRED = "holderNameRequired"
    HIDE_CVC = "hideCvc"
    HIDE_CVC_STORED_CARD = "hideCvcStoredCard"
    ADDRESS_VISIBILITY = "addressVisibility"
    KCP_VISIBILITY = "kcpVisibility"
    SOCIAL_SECURITY = "socialSecurity"
    ALLOWED_CARD_TYPES = "supported"
    BILLING_ADDRESS_COUNTRY_CODES = "allowedAddressCountryCodes"
