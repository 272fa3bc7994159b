"""
Utility modules for card configuration
"""
from .config_loader import CardConfigLoadError, load_card_payload, parse_card_payload, resolve_config_path

__all__ = [
    'CardConfigLoadError',
    'load_card_payload',
    'parse_card_payload',
    'resolve_config_path',
]
