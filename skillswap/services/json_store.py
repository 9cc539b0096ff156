"""JSON document storage shared by the profile, chat and account stores.

存储格式:
{
    "version": 1,
    "<items_key>": [ {...}, {...} ]
}

Invalid records are rejected on load (logged and skipped) so that only
validated dataclasses leave the store. The raw entries rejected by the last
load are written back untouched by the next save, so a write never erases
records it could not read.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Iterable, TypeVar

from skillswap.models import SCHEMA_VERSION, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreError(Exception):
    """Raised when a stored document cannot be read or written."""
    pass


class JsonDocument:
    """One versioned JSON file holding a list of records."""

    def __init__(self, path: Path, items_key: str):
        self.path = Path(path)
        self.items_key = items_key
        self._rejected: list[Any] = []

    def load(self, parse: Callable[[Any], T]) -> list[T]:
        """Read and validate every record; a missing file is an empty list.

        Raises:
            StoreError: If the file is unreadable or of an unsupported version
        """
        if not self.path.exists():
            self._rejected = []
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"{self.path} is not a versioned document")
        version = data.get("version")
        if version != SCHEMA_VERSION:
            raise StoreError(f"{self.path} has unsupported version {version!r}")

        records: list[T] = []
        rejected: list[Any] = []
        for idx, raw in enumerate(data.get(self.items_key) or []):
            try:
                records.append(parse(raw))
            except ValidationError as e:
                logger.warning("[store] rejected %s[%d] in %s: %s", self.items_key, idx, self.path, e)
                rejected.append(raw)
        self._rejected = rejected
        return records

    def save(self, records: Iterable[Any]) -> None:
        """Write all records atomically (temp file + replace).

        Entries rejected by the previous load() are appended as they were read.
        """
        payload = {
            "version": SCHEMA_VERSION,
            self.items_key: [r.to_dict() for r in records] + list(self._rejected),
        }
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e
