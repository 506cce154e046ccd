"""Tests for the document store adapter."""

from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from src.exceptions import PersistenceFailure
from src.services.store import TASKS, USERS


def add_task(store, owner_id="user-1", title="Read"):
    return store.add(
        TASKS,
        {
            "owner_id": owner_id,
            "title": title,
            "description": "Chapter 3",
            "scheduled_at": datetime(2025, 1, 2, 3, 4),
        },
    )


def test_add_assigns_unique_ids(store):
    first = add_task(store)
    second = add_task(store)
    assert first and second
    assert first != second


def test_get(store):
    task_id = add_task(store)

    doc = store.get(TASKS, task_id)
    assert doc.id == task_id
    assert doc.data == {
        "owner_id": "user-1",
        "title": "Read",
        "description": "Chapter 3",
        "scheduled_at": datetime(2025, 1, 2, 3, 4),
    }


def test_get_missing_returns_none(store):
    assert store.get(TASKS, "missing") is None


def test_where_matches_exact_value(store):
    add_task(store, owner_id="user-1", title="First")
    add_task(store, owner_id="user-1", title="Second")
    add_task(store, owner_id="user-10")

    docs = store.where(TASKS, "owner_id", "user-1")
    assert sorted(doc.data["title"] for doc in docs) == ["First", "Second"]


def test_update_merges_fields(store):
    task_id = add_task(store)

    store.update(TASKS, task_id, {"title": "Write"})

    doc = store.get(TASKS, task_id)
    assert doc.data["title"] == "Write"
    assert doc.data["description"] == "Chapter 3"


def test_delete(store):
    task_id = add_task(store)
    store.delete(TASKS, task_id)
    assert store.get(TASKS, task_id) is None


def test_unknown_collection(store):
    with pytest.raises(ValueError):
        store.get("projects", "x")


def test_errors_become_persistence_failure(store, db):
    error = OperationalError("INSERT INTO usuarios", {}, Exception("database is locked"))
    with patch.object(db, "commit", side_effect=error):
        with pytest.raises(PersistenceFailure):
            store.add(USERS, {"email": "a@b.com", "password_hash": "x", "phone": "1", "name": "A"})
    assert store.where(USERS, "email", "a@b.com") == []
