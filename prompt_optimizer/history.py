"""Prompt history kept in an injected key-value store."""

from __future__ import annotations

import json
import logging
import time
import uuid

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

from prompt_optimizer.exceptions import HistoryError
from prompt_optimizer.types import RewriteResult

HISTORY_KEY = "po_prompt_history"
RECENT_LIMIT = 10
LOGGER = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string store the history is persisted through."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Process-local store, mainly for tests and one-shot sessions."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Persists all keys into one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise HistoryError(
                f"History file '{self.path}' is not valid JSON"
            ) from exc
        if not isinstance(data, dict):
            raise HistoryError(f"History file '{self.path}' is malformed")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    prompt: str
    rewritten_prompt: str
    settings: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = 0.0
    favorite: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        try:
            return cls(
                id=str(data["id"]),
                prompt=str(data["prompt"]),
                rewritten_prompt=str(data["rewritten_prompt"]),
                settings=dict(data.get("settings") or {}),
                timestamp=float(data.get("timestamp", 0.0)),
                favorite=bool(data.get("favorite", False)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise HistoryError(f"Malformed history entry: {data!r}") from exc


class PromptHistory:
    """Newest-first list of past rewrites with favorites."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        max_items: int = 50,
        key: str = HISTORY_KEY,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        self._store = store
        self._max_items = max(1, max_items)
        self._key = key
        self._clock = clock
        self._id_factory = id_factory

    @property
    def entries(self) -> List[HistoryEntry]:
        raw = self._store.get(self._key)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise HistoryError("Stored history is not valid JSON") from exc
        if not isinstance(items, list):
            raise HistoryError("Stored history must be a list")
        return [HistoryEntry.from_dict(item) for item in items]

    def _save(self, entries: List[HistoryEntry]) -> None:
        payload = [asdict(entry) for entry in entries[: self._max_items]]
        self._store.set(self._key, json.dumps(payload, ensure_ascii=False))

    def add(self, prompt: str, result: RewriteResult) -> HistoryEntry:
        entry = HistoryEntry(
            id=self._id_factory(),
            prompt=prompt,
            rewritten_prompt=result.rewritten_prompt,
            settings=result.parameters.as_dict(),
            timestamp=self._clock(),
        )
        self._save([entry, *self.entries])
        LOGGER.debug("Stored history entry %s", entry.id)
        return entry

    def toggle_favorite(self, entry_id: str) -> Optional[HistoryEntry]:
        updated: Optional[HistoryEntry] = None
        entries = []
        for entry in self.entries:
            if entry.id == entry_id:
                entry = replace(entry, favorite=not entry.favorite)
                updated = entry
            entries.append(entry)
        if updated is not None:
            self._save(entries)
        return updated

    def remove(self, entry_id: str) -> bool:
        entries = self.entries
        kept = [entry for entry in entries if entry.id != entry_id]
        if len(kept) == len(entries):
            return False
        self._save(kept)
        return True

    def clear(self) -> None:
        self._save([])

    @property
    def favorites(self) -> List[HistoryEntry]:
        return [entry for entry in self.entries if entry.favorite]

    @property
    def recent(self) -> List[HistoryEntry]:
        return self.entries[:RECENT_LIMIT]


__all__ = [
    "HistoryEntry",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PromptHistory",
]
