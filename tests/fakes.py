"""
Test doubles for the store layer.

FakeRedis implements just the redis-py surface RedisTaskStore uses, with
MULTI/EXEC pipelines that buffer commands and WATCH switching the pipeline
to immediate execution the way redis-py does.
"""

from typing import Any, Dict, List, Optional, Set

from todo_manager.store import TaskStore
from todo_manager.utils.exceptions import StoreUnavailableError


class FakePipeline:
    def __init__(self, client: "FakeRedis"):
        self.client = client
        self._queue: List[tuple] = []
        self._immediate = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.reset()

    def reset(self):
        self._queue = []
        self._immediate = False

    def watch(self, *keys):
        self.client._check()
        self.client.watched.extend(keys)
        self._immediate = True

    def multi(self):
        self._immediate = False

    def execute(self):
        self.client._check()
        results = [getattr(self.client, name)(*args, **kwargs) for name, args, kwargs in self._queue]
        self._queue = []
        return results

    def __getattr__(self, name):
        method = getattr(self.client, name)

        def call(*args, **kwargs):
            if self._immediate:
                return method(*args, **kwargs)
            self._queue.append((name, args, kwargs))
            return self

        return call


class FakeRedis:
    def __init__(self):
        self.hashes: Dict[str, Dict[str, str]] = {}
        self.sets: Dict[str, Set[str]] = {}
        self.watched: List[str] = []
        self.fail_with: Optional[Exception] = None
        self.closed = False

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def ping(self):
        self._check()
        return True

    def hset(self, name, key=None, value=None, mapping=None):
        self._check()
        data = self.hashes.setdefault(name, {})
        before = len(data)
        if mapping:
            data.update({k: str(v) for k, v in mapping.items()})
        if key is not None:
            data[key] = str(value)
        return len(data) - before

    def hgetall(self, name):
        self._check()
        return dict(self.hashes.get(name, {}))

    def delete(self, *names):
        self._check()
        removed = 0
        for name in names:
            removed += int(self.hashes.pop(name, None) is not None)
            removed += int(self.sets.pop(name, None) is not None)
        return removed

    def sadd(self, name, *values):
        self._check()
        members = self.sets.setdefault(name, set())
        added = len(set(values) - members)
        members.update(values)
        return added

    def srem(self, name, *values):
        self._check()
        members = self.sets.get(name, set())
        removed = len(members & set(values))
        members.difference_update(values)
        return removed

    def smembers(self, name):
        self._check()
        return set(self.sets.get(name, set()))

    def pipeline(self, transaction=True):
        return FakePipeline(self)

    def close(self):
        self.closed = True


class UnavailableStore(TaskStore):
    """A store whose backend is down: every operation fails."""

    def _fail(self, *args: Any, **kwargs: Any):
        raise StoreUnavailableError("fake", "connection refused")

    insert = _fail
    find = _fail
    find_by_id_and_update = _fail
    find_by_id_and_delete = _fail
