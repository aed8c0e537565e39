"""AsyncTodoStore - the task store over asynchronous storage.

Mutations keep the synchronous contract of `TodoStore`: they apply to the
in-memory list immediately and return. The write that follows is dispatched
onto the running event loop and handed back by `persist()` as an awaitable.
Writes are chained so they land in the order the mutations happened.
"""

from __future__ import annotations

import asyncio

from checkmark.ids import IdGenerator
from checkmark.log import get_logger
from checkmark.models import SchemaVersion, Task, decode_tasks
from checkmark.storage import AsyncKeyValueStore
from checkmark.store import STORAGE_KEY, TodoStore

logger = get_logger("async_store")


class AsyncTodoStore(TodoStore):
    """Task store whose persistence runs on the event loop.

    Mutating methods must be called while an event loop is running.
    """

    def __init__(
        self,
        storage: AsyncKeyValueStore,
        key: str = STORAGE_KEY,
        schema: SchemaVersion = "v2",
        ids: IdGenerator | None = None,
    ) -> None:
        super().__init__(storage, key=key, schema=schema, ids=ids)  # type: ignore[arg-type]
        self._async_storage = storage
        self._pending: asyncio.Task[None] | None = None

    async def load(self) -> list[Task]:  # type: ignore[override]
        """Rehydrate the list from storage, discarding a corrupted payload."""
        try:
            tasks = decode_tasks(await self._async_storage.get(self.key))
        except OSError as exc:
            logger.error("Could not read tasks under %r: %s", self.key, exc)
            self._writable = False
            return self._rehydrate([])
        except ValueError as exc:
            self._log_discard(exc)
            try:
                await self._async_storage.remove(self.key)
            except OSError as remove_exc:
                logger.error("Could not remove corrupted tasks under %r: %s", self.key, remove_exc)
            tasks = []

        self._writable = True
        return self._rehydrate(tasks)

    def persist(self) -> asyncio.Task[None]:  # type: ignore[override]
        """Dispatch a write of the current list.

        The payload is captured now; the returned task completes once it has
        been written (or the failure has been logged).
        """
        if self._write_blocked():
            return asyncio.get_running_loop().create_task(self.flush())

        payload = self._payload()
        previous = self._pending
        self._pending = asyncio.get_running_loop().create_task(self._write(payload, previous))
        return self._pending

    async def flush(self) -> None:
        """Wait for the most recent write to land."""
        if self._pending is not None:
            await self._pending

    async def _write(self, payload: str, previous: asyncio.Task[None] | None) -> None:
        if previous is not None:
            await asyncio.gather(previous, return_exceptions=True)

        try:
            await self._async_storage.set(self.key, payload)
        except OSError as exc:
            logger.error("Could not persist tasks under %r: %s", self.key, exc)
