"""Key-value storage backends for the persisted task list.

Values are opaque strings, as in browser local storage. `FileStore` keeps one
file per key under a directory; `MemoryStore` backs tests and throwaway
sessions; `AsyncFileStore` exposes a synchronous backend through coroutines
for the async store.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from checkmark.log import get_logger

logger = get_logger("storage")


class KeyValueStore(Protocol):
    """Synchronous string key-value storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class AsyncKeyValueStore(Protocol):
    """Asynchronous string key-value storage."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...


class MemoryStore:
    """In-process storage backed by a dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class FileStore:
    """Directory-backed storage, one `<key>.json` file per key."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        """Get the file path that holds a key."""
        return self.root / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write beside the target then swap, so readers never see half a list
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)
        logger.debug("Wrote %d bytes to %s", len(value), path)

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        if path.exists():
            path.unlink()
            logger.debug("Removed %s", path)


class AsyncFileStore:
    """Runs a synchronous backend's calls in a worker thread."""

    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self.backend.get, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self.backend.set, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self.backend.remove, key)
