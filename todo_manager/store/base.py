"""
Task Store - Abstract persistence boundary for task records.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from todo_manager.models import Task


class TaskStore(ABC):
    """
    A single collection of tasks.

    Implementations own the canonical copy of every task. Each method is one
    atomic store operation; ``insert`` applies defaults and rejects records
    without ``text`` by raising TaskValidationError. Lookups by id signal a
    missing record by returning ``None``.
    """

    backend_name = "store"

    @abstractmethod
    def insert(self, record: Dict[str, Any]) -> Task:
        """Persist a new task built from *record* and return it with its generated id."""

    @abstractmethod
    def find(self, criteria: Optional[Dict[str, Any]] = None) -> List[Task]:
        """Return every task whose fields equal all values in *criteria*."""

    @abstractmethod
    def find_by_id_and_update(self, task_id: str, fields: Dict[str, Any]) -> Optional[Task]:
        """Merge *fields* into the task and return the updated version, or None if absent."""

    @abstractmethod
    def find_by_id_and_delete(self, task_id: str) -> Optional[Task]:
        """Remove the task and return it, or None if absent."""

    def close(self) -> None:
        """Release any resources held by the store."""
