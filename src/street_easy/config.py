"""Configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .client import StreetEasyConfig
from .constants import SORT_ATTRIBUTES, SORT_DIRECTIONS, parse_area

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML. Without an explicit path a missing file yields {}."""
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
    else:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return {}
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping: {path}")
    return data


def get_client_config(config: dict[str, Any]) -> StreetEasyConfig:
    """Extract client settings from the `client` section."""
    return StreetEasyConfig.from_mapping(config.get("client") or {})


def get_search_defaults(config: dict[str, Any]) -> dict[str, Any]:
    """Extract search defaults from the `search` section."""
    s = config.get("search") or {}
    sort_attribute = str(s.get("sort_attribute", "RECOMMENDED")).upper()
    sort_direction = str(s.get("sort_direction", "DESCENDING")).upper()
    if sort_attribute not in SORT_ATTRIBUTES:
        raise ValueError(f"Unknown sort_attribute: {sort_attribute}")
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort_direction: {sort_direction}")
    max_price = s.get("max_price")
    return {
        "areas": [int(parse_area(a)) for a in s.get("areas", ["ALL_NYC_AND_NJ"])],
        "per_page": int(s.get("per_page", 20)),
        "sort_attribute": sort_attribute,
        "sort_direction": sort_direction,
        "max_price": float(max_price) if max_price is not None else None,
    }
