"""CLI configuration helpers for room value settings."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from stsmap.domain.room_values import RoomValues

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "stsmap"
        return Path.home() / "stsmap"
    return Path.home() / ".config" / "stsmap"


def get_default_config_path() -> Path:
    """Return the default per-user room values path."""
    return get_user_data_dir() / "room_values.json"


def load_room_values(path: Path | None = None) -> RoomValues:
    """Load room values from disk, falling back to defaults when absent.

    A file that exists but cannot be parsed is an error; a missing default
    file is not.
    """
    config_path = path or get_default_config_path()
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        if path is not None:
            raise
        logger.debug("No room values at %s, using defaults", config_path)
        return RoomValues()
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise ValueError(f"Room values in {config_path} must be a JSON object.")
    return RoomValues.from_mapping(raw)
