"""TodoStore - owns the task list and keeps it in sync with storage.

Every mutation runs synchronously and then rewrites the whole persisted list
under a single key (last writer wins). Nothing in the mutation API raises:
blank text and unknown ids are no-ops, corrupted storage is discarded on
load, and failed writes are logged.
"""

from __future__ import annotations

from datetime import date as Date

from pydantic import ValidationError

from checkmark.ids import CounterIds, IdGenerator
from checkmark.log import get_logger
from checkmark.models import (
    DEFAULT_CATEGORY,
    Category,
    SchemaVersion,
    Summary,
    Task,
    decode_tasks,
    encode_tasks,
    summarize,
)
from checkmark.storage import KeyValueStore

logger = get_logger("store")

STORAGE_KEY = "todos"


class TodoStore:
    """In-memory task list with write-through persistence.

    Example:
        store = TodoStore(FileStore(".checkmark"))
        store.load()
        task = store.add("Buy milk")
        store.toggle_complete(task.id)
        store.summary()  # Summary(completed=1, total=1)
    """

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = STORAGE_KEY,
        schema: SchemaVersion = "v2",
        ids: IdGenerator | None = None,
    ) -> None:
        self._storage = storage
        self.key = key
        self.schema = schema
        self._ids: IdGenerator = ids or CounterIds()
        self._tasks: list[Task] = []
        self._show_hidden = False
        # Cleared by a failed read; persist() is skipped until a load succeeds
        self._writable = True

    # -------------------- queries --------------------
    @property
    def tasks(self) -> list[Task]:
        """Copies of all tasks, in insertion order."""
        return [task.model_copy() for task in self._tasks]

    @property
    def show_hidden(self) -> bool:
        return self._show_hidden

    def get(self, task_id: int) -> Task | None:
        """Get a copy of a task by ID."""
        task = self._find(task_id)
        return task.model_copy() if task else None

    def visible_tasks(self) -> list[Task]:
        """Tasks passing the show-hidden filter."""
        return [task.model_copy() for task in self._tasks if task.is_visible(self._show_hidden)]

    def summary(self) -> Summary:
        """Return (completed, total) for the whole list."""
        return summarize(self._tasks)

    # -------------------- mutations --------------------
    def add(
        self,
        text: str,
        category: Category = DEFAULT_CATEGORY,
        date: Date | None = None,
        time: str | None = None,
    ) -> Task | None:
        """Append a new task.

        Returns the created task, or None when the text is blank or the
        metadata is invalid.
        """
        text = text.strip()
        if not text:
            logger.debug("Ignoring add with blank text")
            return None

        try:
            task = Task.model_validate(
                {
                    "id": self._ids.allocate(),
                    "text": text,
                    "category": category,
                    "date": date,
                    "time": time,
                }
            )
        except ValidationError as exc:
            logger.warning("Ignoring add of %r: %s", text, exc)
            return None

        self._tasks.append(task)
        self._changed()
        return task.model_copy()

    def toggle_complete(self, task_id: int) -> Task | None:
        """Flip a task's completion (and with it, its hidden flag).

        Returns the updated task, or None when no task has that ID.
        """
        task = self._find(task_id)
        if task is None:
            logger.debug("Ignoring toggle of unknown task %s", task_id)
            return None

        task.completed = not task.completed
        self._changed()
        return task.model_copy()

    def delete(self, task_id: int) -> bool:
        """Remove a task permanently. Returns True if one was removed."""
        task = self._find(task_id)
        if task is None:
            logger.debug("Ignoring delete of unknown task %s", task_id)
            return False

        self._tasks.remove(task)
        self._changed()
        return True

    def set_show_hidden(self, show_hidden: bool) -> None:
        """Set the view filter. Not persisted."""
        self._show_hidden = show_hidden

    # -------------------- persistence --------------------
    def load(self) -> list[Task]:
        """Rehydrate the list from storage.

        A payload that fails to decode is removed from storage and the store
        starts empty.
        """
        try:
            tasks = decode_tasks(self._storage.get(self.key))
        except OSError as exc:
            logger.error("Could not read tasks under %r: %s", self.key, exc)
            self._writable = False
            return self._rehydrate([])
        except ValueError as exc:
            self._log_discard(exc)
            try:
                self._storage.remove(self.key)
            except OSError as remove_exc:
                logger.error("Could not remove corrupted tasks under %r: %s", self.key, remove_exc)
            tasks = []

        self._writable = True
        return self._rehydrate(tasks)

    def persist(self) -> None:
        """Write the full list to storage, replacing what was there.

        Skipped while the last load could not read storage.
        """
        if self._write_blocked():
            return

        payload = self._payload()
        try:
            self._storage.set(self.key, payload)
        except OSError as exc:
            logger.error("Could not persist %d tasks under %r: %s", len(self._tasks), self.key, exc)

    # -------------------- internals --------------------
    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _changed(self) -> None:
        self.persist()

    def _write_blocked(self) -> bool:
        if self._writable:
            return False
        logger.error("Not persisting tasks under %r: the stored list could not be read", self.key)
        return True

    def _payload(self) -> str:
        return encode_tasks(self._tasks, self.schema)

    def _rehydrate(self, tasks: list[Task]) -> list[Task]:
        self._tasks = tasks
        self._ids.seed(task.id for task in tasks)
        logger.debug("Loaded %d tasks from %r", len(tasks), self.key)
        return self.tasks

    def _log_discard(self, exc: Exception) -> None:
        logger.warning("Discarding corrupted task list under %r: %s", self.key, exc)
