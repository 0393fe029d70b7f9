"""
Store module - Task persistence backends
"""

from .base import TaskStore
from .json_store import JsonTaskStore
from .redis_store import RedisTaskStore
from .factory import create_store

__all__ = [
    'TaskStore',
    'JsonTaskStore',
    'RedisTaskStore',
    'create_store',
]
