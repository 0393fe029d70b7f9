"""
Tests for the logging stack.
"""

import logging

from todo_manager.utils import get_logger
from todo_manager.utils.comprehensive_logger import ComprehensiveLogger, TaskLogger


class TestTaskLogger:
    """Test TaskLogger output."""

    def setup_method(self):
        self.config = {"log_level": "DEBUG", "enable_console": False, "enable_file": True,
                       "max_bytes": 1024 * 1024, "backup_count": 1}

    def test_file_handler_writes_messages(self, tmp_path):
        logger = TaskLogger("todo.test.file", str(tmp_path), self.config)

        logger.info("Todo created", extra={"id": "t1"})
        logger.flush()

        content = (tmp_path / "todo.test.file.log").read_text(encoding="utf-8")
        assert "Todo created" in content
        assert '"id": "t1"' in content

    def test_log_exception_includes_traceback(self, tmp_path):
        logger = TaskLogger("todo.test.exc", str(tmp_path), self.config)

        try:
            raise RuntimeError("store exploded")
        except RuntimeError as exc:
            logger.log_exception("Failed to create todo", exc=exc)
        logger.flush()

        content = (tmp_path / "todo.test.exc.log").read_text(encoding="utf-8")
        assert "Failed to create todo" in content
        assert "RuntimeError: store exploded" in content

    def test_log_performance(self, tmp_path, caplog):
        logger = TaskLogger("todo.test.perf", str(tmp_path), self.config)
        logger.logger.propagate = True

        with caplog.at_level(logging.DEBUG, logger="todo.test.perf"):
            logger.log_performance("insert", 0.0123)
            logger.log_performance("find", 0.5, success=False)

        messages = [record.getMessage() for record in caplog.records]
        assert any(m.startswith("insert ok in 12.3ms") for m in messages)
        assert any(m.startswith("find failed in 500.0ms") for m in messages)
        assert caplog.records[-1].levelno == logging.WARNING


class TestGetLogger:
    """Test the get_logger entry point."""

    def test_returns_cached_task_logger(self):
        first = get_logger("todo.test.cached")
        second = get_logger("todo.test.cached")

        assert isinstance(first, TaskLogger)
        assert first is second
        assert ComprehensiveLogger.get_logger("todo.test.cached") is first

    def test_level_override(self):
        logger = get_logger("todo.test.level", level="error")
        assert logger.logger.level == logging.ERROR
