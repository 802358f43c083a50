"""Where the bundled maps live."""
from __future__ import annotations

from pathlib import Path


def get_repo_root() -> Path:
    """Checkout root, three levels above the ``stsmap`` package directory."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Directory holding ``maps.json``; ``base_path`` overrides the bundled one."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data" / "maps"
