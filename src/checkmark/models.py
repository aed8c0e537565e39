"""Task model and persisted record layout for checkmark.

Two record shapes exist on disk. Schema v1 carries only id, text, completed
and hidden; schema v2 adds category, date and time. Records of either shape
load into the same `Task`: missing fields take their defaults and unknown
fields are ignored.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from datetime import date as Date
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

Category = Literal["school", "work", "leisure"]
SchemaVersion = Literal["v1", "v2"]

CATEGORIES: tuple[str, ...] = ("school", "work", "leisure")
DEFAULT_CATEGORY: Category = "school"

V1_FIELDS: tuple[str, ...] = ("id", "text", "completed", "hidden")

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Task(BaseModel):
    """A single to-do entry.

    `hidden` is derived from `completed`: a task drops out of the default
    view exactly when it is marked complete. It is still written to disk so
    the persisted layout keeps its `hidden` field.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    text: str
    completed: bool = False
    category: Category = DEFAULT_CATEGORY
    date: Date | None = None
    time: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hidden(self) -> bool:
        return self.completed

    @field_validator("text")
    @classmethod
    def check_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("text must not be blank")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        # Date pickers serialise to a full ISO timestamp; keep the calendar day.
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            if "T" in value:
                return value.split("T", 1)[0]
        return value

    @field_validator("time", mode="before")
    @classmethod
    def check_time(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("time must be an HH:MM string")
        value = value.strip()
        if not value:
            return None
        if not TIME_PATTERN.match(value):
            raise ValueError(f"time must be HH:MM, got {value!r}")
        return value

    def is_visible(self, show_hidden: bool) -> bool:
        """Check whether the task is shown under the given filter."""
        return show_hidden or not self.hidden

    def to_record(self, schema: SchemaVersion = "v2") -> dict[str, Any]:
        """Convert to a JSON-ready record in the given schema version."""
        record = self.model_dump(mode="json")
        if schema == "v1":
            return {key: record[key] for key in V1_FIELDS}
        return record

    def __str__(self) -> str:
        status = "✓" if self.completed else "○"
        return f"[{status}] {self.text}"


class Summary(NamedTuple):
    """Completion counts for a list of tasks."""

    completed: int
    total: int

    @property
    def remaining(self) -> int:
        return self.total - self.completed

    @property
    def ratio(self) -> float:
        """Share of completed tasks, 0.0 for an empty list."""
        if not self.total:
            return 0.0
        return self.completed / self.total


def summarize(tasks: Iterable[Task]) -> Summary:
    """Count completed and total tasks in a single pass."""
    completed = 0
    total = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
    return Summary(completed, total)


def encode_tasks(tasks: Iterable[Task], schema: SchemaVersion = "v2") -> str:
    """Serialise tasks to the persisted JSON array."""
    return json.dumps([task.to_record(schema) for task in tasks], indent=2)


def decode_tasks(raw: str | None) -> list[Task]:
    """Parse a persisted JSON array into tasks.

    Returns an empty list when nothing has been persisted yet.

    Raises:
        ValueError: The payload is not valid JSON, is not an array, holds a
            record that fails validation, or repeats an identifier.
    """
    if raw is None:
        return []

    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array of tasks, got {type(data).__name__}")
        tasks = [Task.model_validate(item) for item in data]
    except RecursionError as exc:
        raise ValueError("task list nested too deeply") from exc

    seen: set[int] = set()
    for task in tasks:
        if task.id in seen:
            raise ValueError(f"duplicate task id {task.id}")
        seen.add(task.id)

    return tasks
