"""
Integration clients.

Implementations of the capability interfaces in card_config.contracts.
Only mocks live here; the host application supplies real providers.
"""
