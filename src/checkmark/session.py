"""Build the configured store and run one load/act/flush session."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from checkmark.async_store import AsyncTodoStore
from checkmark.config import CheckmarkConfig
from checkmark.ids import make_id_generator
from checkmark.storage import AsyncFileStore, FileStore
from checkmark.store import TodoStore

T = TypeVar("T")


def create_store(config: CheckmarkConfig) -> TodoStore:
    """Create the store described by the config (not yet loaded)."""
    backend = FileStore(Path(config.storage.directory))
    ids = make_id_generator(config.ids.strategy, config.ids.start)

    if config.storage.backend == "async":
        return AsyncTodoStore(
            AsyncFileStore(backend),
            key=config.storage.key,
            schema=config.storage.schema_version,
            ids=ids,
        )

    return TodoStore(
        backend,
        key=config.storage.key,
        schema=config.storage.schema_version,
        ids=ids,
    )


def run_session(config: CheckmarkConfig, action: Callable[[TodoStore], T]) -> T:
    """Load the store, apply `action` to it and make sure writes have landed.

    With the async backend the whole session runs inside one event loop so
    the store can dispatch its writes; the loop is only left after `flush()`.
    """
    store = create_store(config)

    if isinstance(store, AsyncTodoStore):
        async_store = store

        async def _session() -> T:
            await async_store.load()
            result = action(async_store)
            await async_store.flush()
            return result

        return asyncio.run(_session())

    store.load()
    return action(store)
