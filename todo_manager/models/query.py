"""
Query module - Predicate construction for task listings
"""

from typing import Dict, Optional

from .enums import TaskStatusFilter


def build_status_filter(status: Optional[str]) -> Dict[str, bool]:
    """
    Map a ``status`` query value to store criteria.

    ``"active"`` selects open tasks, ``"completed"`` selects finished ones,
    and anything else (including no value) selects every task.
    """
    if status == TaskStatusFilter.ACTIVE.value:
        return {"completed": False}
    if status == TaskStatusFilter.COMPLETED.value:
        return {"completed": True}
    return {}
