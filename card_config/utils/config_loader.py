"""
Card configuration payload loader.

Reads the raw configuration dict that CardConfigurationParser consumes, from a
YAML or JSON file or from JSON text received over the bridge.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "card_config.yml"


class CardConfigLoadError(ValueError):
    def __init__(self, message: str, *, path: Optional[Path] = None, payload: Any = None) -> None:
        super().__init__(message)
        self.path = path
        self.payload = payload


def resolve_config_path(config_path: Optional[Union[str, Path]] = None) -> Path:
    """Explicit path, then CARD_CONFIG_PATH (from the environment or .env), then the bundled default."""
    if config_path is not None:
        return Path(config_path)
    load_dotenv()
    env_path = os.getenv("CARD_CONFIG_PATH")
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_card_payload(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a raw card configuration payload from a YAML or JSON file

    Args:
        config_path: Path to the payload. Defaults to CARD_CONFIG_PATH or config/card_config.yml

    Returns:
        The payload mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        CardConfigLoadError: If the file can't be decoded or isn't a mapping
    """
    path = resolve_config_path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Card config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error("Card config %s could not be decoded: %s", path, e)
        raise CardConfigLoadError(f"Invalid card config file {path}: {e}", path=path) from e

    if data is None:
        data = {}
    payload = _ensure_mapping(data, path=path)
    logger.info("Successfully loaded card config from %s", path)
    return payload


def parse_card_payload(text: Union[str, bytes]) -> Dict[str, Any]:
    """Decode a JSON card configuration payload into a dict."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Card config payload is not valid JSON: %s", e)
        raise CardConfigLoadError(f"Invalid card config payload: {e}") from e
    return _ensure_mapping(data)


def _ensure_mapping(data: Any, *, path: Optional[Path] = None) -> Dict[str, Any]:
    if not isinstance(data, dict):
        logger.error("Card config root must be a mapping, got %s", type(data).__name__)
        raise CardConfigLoadError(
            f"Card config root must be a mapping, got {type(data).__name__}",
            path=path,
            payload=data,
        )
    return data
