"""
Enums module - Status filter values accepted by the list endpoints
"""

from enum import Enum


class TaskStatusFilter(str, Enum):
    """Values of the ``status`` query parameter that narrow a task listing"""
    ACTIVE = "active"
    COMPLETED = "completed"
