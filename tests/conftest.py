"""Shared fixtures for checkmark tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from checkmark.storage import MemoryStore
from checkmark.store import STORAGE_KEY, TodoStore


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_checkmark_dir(temp_project: Path) -> Path:
    """Create a temporary .checkmark directory."""
    checkmark_dir = temp_project / ".checkmark"
    checkmark_dir.mkdir()
    return checkmark_dir


@pytest.fixture
def memory_storage() -> MemoryStore:
    """Empty in-memory key-value storage."""
    return MemoryStore()


@pytest.fixture
def store(memory_storage: MemoryStore) -> TodoStore:
    """A loaded store over empty in-memory storage."""
    todo_store = TodoStore(memory_storage)
    todo_store.load()
    return todo_store


@pytest.fixture
def v1_records() -> list[dict]:
    """Records in the narrow v1 layout."""
    return [
        {"id": 1700000000000, "text": "Buy milk", "completed": False, "hidden": False},
        {"id": 1700000000500, "text": "Walk dog", "completed": True, "hidden": True},
    ]


@pytest.fixture
def v2_records() -> list[dict]:
    """Records in the v2 layout with category and schedule fields."""
    return [
        {
            "id": 0,
            "text": "Essay draft",
            "completed": False,
            "hidden": False,
            "category": "school",
            "date": "2026-10-20",
            "time": "09:30",
        },
        {
            "id": 1,
            "text": "Quarterly report",
            "completed": True,
            "hidden": True,
            "category": "work",
            "date": "2026-10-18T22:00:00.000Z",
            "time": None,
        },
        {
            "id": 4,
            "text": "Climbing",
            "completed": False,
            "hidden": False,
            "category": "leisure",
            "date": None,
            "time": "18:00",
        },
    ]


@pytest.fixture
def seeded_storage(v2_records: list[dict]) -> MemoryStore:
    """In-memory storage holding the v2 records."""
    return MemoryStore({STORAGE_KEY: json.dumps(v2_records)})
