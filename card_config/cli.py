#!/usr/bin/env python3
"""
Print the configurations derived from a card configuration payload.

Usage:
    card-config                      # CARD_CONFIG_PATH, or config/card_config.yml in a source checkout
    card-config payload.json --dropin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from card_config.clients.mocks import StaticAddressLookupProvider
from card_config.parser import CardConfigurationParser
from card_config.utils.config_loader import CardConfigLoadError, load_card_payload

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Show the card configuration derived from a payload file",
        epilog="The bundled config/card_config.yml sample only exists in a source checkout; "
        "an installed package needs PATH or CARD_CONFIG_PATH.",
    )
    ap.add_argument("path", nargs="?", default=None, help="YAML or JSON payload (default: CARD_CONFIG_PATH, else config/card_config.yml in a source checkout)")
    ap.add_argument("--dropin", action="store_true", help="Print the drop-in configuration instead of the component one")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    setup_logging(args.verbose)

    try:
        payload = load_card_payload(args.path)
    except (FileNotFoundError, CardConfigLoadError) as e:
        logger.error("Could not load card config: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = CardConfigurationParser(payload, StaticAddressLookupProvider())
    result = parser.dropin_configuration if args.dropin else parser.configuration
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
