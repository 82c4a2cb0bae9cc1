"""Global app configuration (default participant count, display currency)."""

from pathlib import Path
from typing import Any

from .core import data_dir, read_json, write_json

_CONFIG_DEFAULTS: dict[str, Any] = {
    "default_pax": 1,
    "currency": "INR",
}


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    stored = read_json(_config_path(), default={})
    for key in _CONFIG_DEFAULTS:
        if key in stored:
            config[key] = stored[key]
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into config and persist. Returns full config.

    Raises ValueError for a default_pax below 1.
    """
    config = get_config()
    if "default_pax" in fields:
        pax = fields["default_pax"]
        if not isinstance(pax, int) or isinstance(pax, bool) or pax < 1:
            raise ValueError(f"default_pax must be a positive integer, got {pax!r}")
        config["default_pax"] = pax
    if "currency" in fields:
        config["currency"] = str(fields["currency"])
    write_json(_config_path(), config)
    return config
