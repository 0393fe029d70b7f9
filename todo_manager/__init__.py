"""
Todo Manager - Task-tracking core for the Todo API

Provides the Task model, the status-filter predicate, the persistence
backends (JSON files or Redis) and the configuration and logging stack the
HTTP server in ``web`` is built on.

Configuration:
    Create a config.properties (or .env) file at the project root:

    PORT=5000
    TODO_STORE_URL=file://./data/todos
    TODO_CORS_ORIGINS=http://localhost:5173

Example:
    >>> from todo_manager import ServerConfig, create_store, build_status_filter
    >>>
    >>> config = ServerConfig.from_env()
    >>> store = create_store(config.store_url)
    >>> task = store.insert({"text": "buy milk"})
    >>> store.find(build_status_filter("active"))
"""

__version__ = "1.0.0"

from .config import ConfigProperties, ServerConfig
from .models import Task, TaskStatusFilter, build_status_filter
from .store import TaskStore, JsonTaskStore, RedisTaskStore, create_store
from .utils import (
    get_logger,
    TodoManagerError,
    ConfigurationError,
    StoreError,
    StoreUnavailableError,
    TaskValidationError,
)

__all__ = [
    'ConfigProperties',
    'ServerConfig',
    'Task',
    'TaskStatusFilter',
    'build_status_filter',
    'TaskStore',
    'JsonTaskStore',
    'RedisTaskStore',
    'create_store',
    'get_logger',
    'TodoManagerError',
    'ConfigurationError',
    'StoreError',
    'StoreUnavailableError',
    'TaskValidationError',
]
