"""Task service for the scheduled task lifecycle."""

import logging
from typing import Any

from src.exceptions import MissingFields, NoFieldsProvided, NotFound
from src.services.schedule import format_display, parse_display
from src.services.store import TASKS, Document, DocumentStore

logger = logging.getLogger(__name__)


class TaskService:
    """Create, list, update and delete tasks scoped by owner id."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def create_task(
        self,
        owner_id: str | None,
        title: str | None,
        description: str | None,
        scheduled: str | None,
    ) -> str:
        """Create a task and return its id.

        ``scheduled`` must be a "DD/MM/YYYY HH:mm" string.
        """
        if not owner_id or not title or not description or not scheduled:
            raise MissingFields("All fields are required!")

        task_id = self.store.add(
            TASKS,
            {
                "owner_id": owner_id,
                "title": title,
                "description": description,
                "scheduled_at": parse_display(scheduled),
            },
        )
        logger.info(f"Created task {task_id} for user {owner_id}")
        return task_id

    def list_tasks(self, owner_id: str | None) -> list[dict[str, Any]]:
        """List an owner's tasks with ``scheduledAt`` in display format.

        An empty list means the owner has no tasks; callers decide how to
        report that.
        """
        if not owner_id:
            raise MissingFields("The user ID is required!")

        return [_present(doc) for doc in self.store.where(TASKS, "owner_id", owner_id)]

    def update_task(
        self,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
        scheduled: str | None = None,
    ) -> None:
        """Merge the provided fields into an existing task."""
        if not title and not description and not scheduled:
            raise NoFieldsProvided("No fields to update were provided!")

        self._get_or_404(task_id)

        updates: dict[str, Any] = {}
        if title:
            updates["title"] = title
        if description:
            updates["description"] = description
        if scheduled:
            updates["scheduled_at"] = parse_display(scheduled)

        self.store.update(TASKS, task_id, updates)
        logger.info(f"Updated task {task_id}: {sorted(updates)}")

    def delete_task(self, task_id: str) -> None:
        """Delete a task after confirming it exists."""
        self._get_or_404(task_id)
        self.store.delete(TASKS, task_id)
        logger.info(f"Deleted task {task_id}")

    def _get_or_404(self, task_id: str) -> Document:
        doc = self.store.get(TASKS, task_id)
        if doc is None:
            raise NotFound("Task not found!")
        return doc


def _present(doc: Document) -> dict[str, Any]:
    return {
        "id": doc.id,
        "ownerId": doc.data["owner_id"],
        "title": doc.data["title"],
        "description": doc.data["description"],
        "scheduledAt": format_display(doc.data["scheduled_at"]),
    }
