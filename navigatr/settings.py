# navigatr/settings.py
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from .url_input import DEFAULT_SEARCH_URL

DEFAULTS = {
    "search": {"url": DEFAULT_SEARCH_URL},
    "adblock": {"enabled": True, "extra_domains": []},
    "home": {"url": "https://duckduckgo.com/"},
    "log": {"level": "INFO"},
}


def _config_path() -> Path:
    base = Path.home() / ".config" / "navigatr"
    return base / "config.json"


def _merge(stored: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay stored sections on the defaults, one level deep."""
    merged = copy.deepcopy(DEFAULTS)
    for section, values in stored.items():
        if isinstance(merged.get(section), dict):
            if isinstance(values, dict):
                merged[section].update(values)
        else:
            merged[section] = values

    # only a real bool is accepted for the ad-block flag
    if not isinstance(merged["adblock"].get("enabled"), bool):
        merged["adblock"]["enabled"] = DEFAULTS["adblock"]["enabled"]
    if not isinstance(merged["adblock"].get("extra_domains"), list):
        merged["adblock"]["extra_domains"] = []
    return merged


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    p = path or _config_path()
    if not p.exists():
        save_settings(DEFAULTS, p)
        return copy.deepcopy(DEFAULTS)
    try:
        stored = json.loads(p.read_text())
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read settings from {p}: {e}")
        return copy.deepcopy(DEFAULTS)
    if not isinstance(stored, dict):
        logger.warning(f"Ignoring settings in {p}: not a JSON object")
        return copy.deepcopy(DEFAULTS)
    return _merge(stored)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    p = path or _config_path()
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, indent=2))
    except OSError as e:
        logger.error(f"Failed to save settings to {p}: {e}")


def set_adblock_enabled(enabled: bool, path: Optional[Path] = None) -> Dict[str, Any]:
    data = load_settings(path)
    data["adblock"]["enabled"] = bool(enabled)
    save_settings(data, path)
    return data
