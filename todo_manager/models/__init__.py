"""
Models module - Data structures for the Todo API
"""

from .task import Task
from .enums import TaskStatusFilter
from .query import build_status_filter

__all__ = [
    'Task',
    'TaskStatusFilter',
    'build_status_filter',
]
