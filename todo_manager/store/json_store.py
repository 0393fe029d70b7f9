"""
JSON Task Store - File-based persistence for tasks.

One JSON document per task, named ``<id>.json``, inside a storage directory.
"""

import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from todo_manager.models import Task
from todo_manager.utils.exceptions import StoreError
from todo_manager.utils.logger import get_logger

from .base import TaskStore

logger = get_logger(__name__)


class JsonTaskStore(TaskStore):
    """File-based persistence for task documents."""

    backend_name = "json"

    def __init__(self, storage_dir: str = "data/todos"):
        self.storage_dir = Path(storage_dir)
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError("open", f"Cannot create storage directory {self.storage_dir}", original_error=e)
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.RLock()
        self._load_all()
        logger.info(f"[JSON] Opened task store at {self.storage_dir} ({len(self._tasks)} tasks)")

    def _load_all(self):
        """Load all task documents from disk."""
        for path in sorted(self.storage_dir.glob("*.json")):
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                task = Task.from_dict(data)
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning(f"[JSON] Skipping corrupted task file {path.name}: {e}")
                continue
            self._tasks[task.id] = task

    def _path_for(self, task_id: str) -> Path:
        return self.storage_dir / f"{task_id}.json"

    def _save(self, task: Task):
        """Persist a task to disk, replacing any previous version atomically."""
        path = self._path_for(task.id)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(json.dumps(task.to_dict(), indent=2), encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise StoreError("save", f"Cannot write {path.name}", original_error=e)

    def insert(self, record: Dict[str, Any]) -> Task:
        task = Task.new(record.get("text"), record.get("completed"))
        with self._lock:
            self._save(task)
            self._tasks[task.id] = task
        return task

    def find(self, criteria: Optional[Dict[str, Any]] = None) -> List[Task]:
        criteria = criteria or {}
        with self._lock:
            return [task for task in self._tasks.values() if task.matches(criteria)]

    def find_by_id_and_update(self, task_id: str, fields: Dict[str, Any]) -> Optional[Task]:
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return None
            updated = current.merged(fields)
            self._save(updated)
            self._tasks[task_id] = updated
            return updated

    def find_by_id_and_delete(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            path = self._path_for(task_id)
            try:
                if path.exists():
                    path.unlink()
            except OSError as e:
                raise StoreError("delete", f"Cannot remove {path.name}", original_error=e)
            del self._tasks[task_id]
            return task
