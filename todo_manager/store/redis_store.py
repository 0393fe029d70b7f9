"""
Redis Task Store - Task persistence on a Redis server

Each task is a Redis Hash at ``<namespace>:task:<id>``; the ids of all
stored tasks are kept in the Set ``<namespace>:ids``.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import redis

from todo_manager.models import Task
from todo_manager.utils.exceptions import StoreError, StoreUnavailableError
from todo_manager.utils.logger import get_logger

from .base import TaskStore

logger = get_logger(__name__)


class RedisTaskStore(TaskStore):
    """
    Redis-backed task store.

    Uses Redis Hashes for the task fields and a Set as the collection index.
    Writes that touch both go through a MULTI/EXEC pipeline; updates and
    deletes WATCH the task key so a concurrent delete is never resurrected.

    Usage:
        store = RedisTaskStore.from_url("redis://localhost:6379/0")

        task = store.insert({"text": "buy milk"})
        store.find({"completed": False})
        store.find_by_id_and_update(task.id, {"completed": True})
    """

    backend_name = "redis"

    def __init__(self, client: "redis.Redis", namespace: str = "todo"):
        """
        Wrap an existing client and verify the server answers.

        Args:
            client: Redis client created with ``decode_responses=True``
            namespace: Key prefix for every key this store writes

        Raises:
            StoreUnavailableError: if the server does not answer PING
        """
        self.client = client
        self.namespace = namespace
        self._index_key = f"{namespace}:ids"

        try:
            self.client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise StoreUnavailableError("redis", str(e), original_error=e)
        logger.info(f"[REDIS] Connected to Redis (namespace={namespace})")

    @classmethod
    def from_url(cls, url: str, namespace: str = "todo") -> "RedisTaskStore":
        """Create a store from a ``redis://`` or ``rediss://`` connection string."""
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            health_check_interval=30,
        )
        return cls(client, namespace=namespace)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def _key(self, task_id: str) -> str:
        return f"{self.namespace}:task:{task_id}"

    @staticmethod
    def _encode(task: Task) -> Dict[str, str]:
        return {
            "id": task.id,
            "text": task.text,
            "completed": "1" if task.completed else "0",
        }

    @staticmethod
    def _decode(data: Dict[str, str]) -> Task:
        return Task(id=data["id"], text=data["text"], completed=data.get("completed") == "1")

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        """Translate redis-py exceptions into store errors."""
        try:
            yield
        except redis.WatchError as e:
            raise StoreError(operation, "Task was modified concurrently", original_error=e)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise StoreUnavailableError("redis", str(e), original_error=e)
        except redis.RedisError as e:
            raise StoreError(operation, str(e), original_error=e)

    # ------------------------------------------------------------------
    # TaskStore API
    # ------------------------------------------------------------------

    def insert(self, record: Dict[str, Any]) -> Task:
        task = Task.new(record.get("text"), record.get("completed"))
        with self._guard("insert"):
            with self.client.pipeline() as pipe:
                pipe.hset(self._key(task.id), mapping=self._encode(task))
                pipe.sadd(self._index_key, task.id)
                pipe.execute()
        return task

    def find(self, criteria: Optional[Dict[str, Any]] = None) -> List[Task]:
        criteria = criteria or {}
        with self._guard("find"):
            task_ids = sorted(self.client.smembers(self._index_key))
            if not task_ids:
                return []
            with self.client.pipeline(transaction=False) as pipe:
                for task_id in task_ids:
                    pipe.hgetall(self._key(task_id))
                rows = pipe.execute()

        tasks = [self._decode(row) for row in rows if row]
        return [task for task in tasks if task.matches(criteria)]

    def find_by_id_and_update(self, task_id: str, fields: Dict[str, Any]) -> Optional[Task]:
        key = self._key(task_id)
        with self._guard("update"):
            with self.client.pipeline() as pipe:
                pipe.watch(key)
                data = pipe.hgetall(key)
                if not data:
                    return None
                updated = self._decode(data).merged(fields)
                pipe.multi()
                pipe.hset(key, mapping=self._encode(updated))
                pipe.execute()
        return updated

    def find_by_id_and_delete(self, task_id: str) -> Optional[Task]:
        key = self._key(task_id)
        with self._guard("delete"):
            with self.client.pipeline() as pipe:
                pipe.watch(key)
                data = pipe.hgetall(key)
                if not data:
                    return None
                pipe.multi()
                pipe.delete(key)
                pipe.srem(self._index_key, task_id)
                pipe.execute()
        return self._decode(data)

    def close(self) -> None:
        with self._guard("close"):
            self.client.close()
