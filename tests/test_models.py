"""
Unit tests for the Task model and the status filter predicate.
"""

import unittest

from todo_manager.models import Task, TaskStatusFilter, build_status_filter
from todo_manager.utils.exceptions import TaskValidationError, StoreError


class TestTaskModel(unittest.TestCase):
    """Tests for Task."""

    def test_new_task_defaults(self):
        """A new task gets an id and starts incomplete."""
        task = Task.new("buy milk")

        self.assertTrue(task.id)
        self.assertEqual(task.text, "buy milk")
        self.assertFalse(task.completed)

    def test_new_task_ids_are_unique(self):
        ids = {Task.new("x").id for _ in range(50)}
        self.assertEqual(len(ids), 50)

    def test_missing_text_rejected(self):
        with self.assertRaises(TaskValidationError) as ctx:
            Task.new(None)
        self.assertEqual(ctx.exception.field_name, "text")
        self.assertEqual(ctx.exception.error_code, "VALIDATION_ERROR")

    def test_whitespace_only_text_accepted(self):
        task = Task.new("   ")
        self.assertEqual(task.text, "   ")

    def test_empty_text_rejected(self):
        with self.assertRaises(TaskValidationError):
            Task.new("")

    def test_non_string_text_rejected(self):
        with self.assertRaises(TaskValidationError):
            Task.new(42)

    def test_validation_error_is_store_error(self):
        """Validation failures are reported through the store error family."""
        self.assertTrue(issubclass(TaskValidationError, StoreError))

    def test_merged_applies_only_given_fields(self):
        task = Task(id="t1", text="buy milk", completed=False)

        updated = task.merged({"completed": True})

        self.assertEqual(updated.text, "buy milk")
        self.assertTrue(updated.completed)
        self.assertFalse(task.completed)

    def test_merged_ignores_none_and_unknown_fields(self):
        task = Task(id="t1", text="buy milk", completed=True)

        updated = task.merged({"text": None, "id": "other", "colour": "red"})

        self.assertEqual(updated, task)

    def test_merged_validates_text(self):
        task = Task(id="t1", text="buy milk")
        with self.assertRaises(TaskValidationError):
            task.merged({"text": ""})

    def test_merged_validates_completed(self):
        task = Task(id="t1", text="buy milk")
        with self.assertRaises(TaskValidationError):
            task.merged({"completed": "yes"})

    def test_matches(self):
        task = Task(id="t1", text="buy milk", completed=True)

        self.assertTrue(task.matches({}))
        self.assertTrue(task.matches({"completed": True}))
        self.assertFalse(task.matches({"completed": False}))
        self.assertFalse(task.matches({"missing": 1}))

    def test_dict_round_trip(self):
        task = Task(id="t1", text="buy milk", completed=True)
        data = task.to_dict()

        self.assertEqual(data, {"id": "t1", "text": "buy milk", "completed": True})
        self.assertEqual(Task.from_dict(data), task)

    def test_from_dict_defaults_completed(self):
        self.assertFalse(Task.from_dict({"id": "t1", "text": "a"}).completed)


class TestStatusFilter:
    """Tests for build_status_filter."""

    def test_active(self):
        assert build_status_filter("active") == {"completed": False}

    def test_completed(self):
        assert build_status_filter("completed") == {"completed": True}

    def test_enum_values(self):
        assert build_status_filter(TaskStatusFilter.ACTIVE.value) == {"completed": False}
        assert build_status_filter(TaskStatusFilter.COMPLETED) == {"completed": True}

    def test_absent_matches_all(self):
        assert build_status_filter(None) == {}

    def test_unknown_matches_all(self):
        assert build_status_filter("ACTIVE") == {}
        assert build_status_filter("") == {}
        assert build_status_filter("archived") == {}


if __name__ == '__main__':
    unittest.main()
