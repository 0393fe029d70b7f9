"""
Task module - The single persisted to-do item
"""

import uuid
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from todo_manager.utils.exceptions import TaskValidationError


def validate_text(text: Any) -> str:
    """Return *text* if it is a non-empty string, otherwise raise TaskValidationError."""
    if text is None:
        raise TaskValidationError("text", "is required")
    if not isinstance(text, str):
        raise TaskValidationError("text", "must be a string", value=text)
    if not text:
        raise TaskValidationError("text", "must not be empty", value=text)
    return text


def validate_completed(completed: Any) -> bool:
    if not isinstance(completed, bool):
        raise TaskValidationError("completed", "must be a boolean", value=completed)
    return completed


@dataclass
class Task:
    """A to-do item. ``id`` is assigned by the store and never changes."""
    id: str
    text: str
    completed: bool = False

    @classmethod
    def new(cls, text: Any, completed: Optional[bool] = None) -> "Task":
        """Build a fresh task with a generated id, applying defaults and required-field checks."""
        return cls(
            id=uuid.uuid4().hex,
            text=validate_text(text),
            completed=False if completed is None else validate_completed(completed),
        )

    def merged(self, fields: Dict[str, Any]) -> "Task":
        """
        Return a copy with the updatable fields in *fields* applied.

        Keys that are absent or ``None`` leave the current value untouched;
        unknown keys are ignored.
        """
        updated = Task(id=self.id, text=self.text, completed=self.completed)
        if fields.get("text") is not None:
            updated.text = validate_text(fields["text"])
        if fields.get("completed") is not None:
            updated.completed = validate_completed(fields["completed"])
        return updated

    def matches(self, criteria: Dict[str, Any]) -> bool:
        """True when every key in *criteria* equals the task's value for it."""
        data = self.to_dict()
        return all(key in data and data[key] == value for key, value in criteria.items())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=data["id"],
            text=data["text"],
            completed=bool(data.get("completed", False)),
        )
