"""Shared loading for repositories backed by a bundled map file."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, TypeVar

from stsmap.data.errors import DataValidationError
from stsmap.data.json_loader import load_json
from stsmap.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Reads one JSON object of ``{id: payload}`` on first use and keeps the parsed entries.

    Subclasses turn each payload into a typed value in ``_build``.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._entries: Dict[str, T] | None = None

    @property
    def file_path(self) -> Path:
        """Location of the backing file inside the maps directory."""
        return paths.get_definitions_path(self._base_path) / self._filename

    def _load_raw(self) -> dict[str, object]:
        raw = load_json(self.file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"{self.file_path} must hold an object keyed by map id.")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        raise NotImplementedError

    def _entries_by_id(self) -> Dict[str, T]:
        if self._entries is None:
            self._entries = self._build(self._load_raw())
        return self._entries

    def get(self, entry_id: str) -> T:
        """Return one parsed entry; unknown ids raise ``KeyError``."""
        entries = self._entries_by_id()
        if entry_id not in entries:
            raise KeyError(entry_id)
        return entries[entry_id]

    def ids(self) -> list[str]:
        return sorted(self._entries_by_id())

    def all(self) -> list[T]:
        """Parsed entries in id order."""
        entries = self._entries_by_id()
        return [entries[entry_id] for entry_id in sorted(entries)]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be a JSON object.")
        return value
