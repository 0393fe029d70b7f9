"""
Store factory - Pick a TaskStore backend from a connection string.
"""

from todo_manager.utils.exceptions import ConfigurationError

from .base import TaskStore
from .json_store import JsonTaskStore
from .redis_store import RedisTaskStore

REDIS_SCHEMES = ("redis://", "rediss://")
FILE_SCHEME = "file://"


def create_store(url: str) -> TaskStore:
    """
    Open the store named by *url*.

    - ``redis://host:port/db`` or ``rediss://...``: RedisTaskStore
    - ``file://path`` or a bare filesystem path: JsonTaskStore

    Raises:
        ConfigurationError: for an empty URL or an unsupported scheme
        StoreUnavailableError: if a Redis server does not answer
    """
    url = (url or "").strip()
    if not url:
        raise ConfigurationError("store_url", "Store URL must not be empty")

    if url.startswith(REDIS_SCHEMES):
        return RedisTaskStore.from_url(url)

    if url.startswith(FILE_SCHEME):
        return JsonTaskStore(url[len(FILE_SCHEME):])

    if "://" in url:
        raise ConfigurationError(
            "store_url", "Unsupported store scheme",
            expected_value="redis://, rediss:// or file://",
            actual_value=url.split("://", 1)[0] + "://",
        )

    return JsonTaskStore(url)
