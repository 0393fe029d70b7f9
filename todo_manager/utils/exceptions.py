"""
Standardized Exception Hierarchy for TodoManager

This module provides the exception hierarchy used by the store backends,
the configuration layer and the HTTP server.

Exception Categories:
- Configuration Errors: Invalid settings or unsupported store URLs
- Store Errors: Backend failures, unreachable backends and rejected records

Usage:
    from todo_manager.utils.exceptions import (
        StoreError,
        TaskValidationError,
    )

    if not text:
        raise TaskValidationError("text", "Task text is required")

    try:
        store.insert({"text": text})
    except StoreError as e:
        logger.log_exception("Insert failed", exc=e)
"""

from typing import Optional, Any, Dict


# ============================================================================
# Base Exception
# ============================================================================

class TodoManagerError(Exception):
    """
    Base exception for all TodoManager errors.

    All custom exceptions inherit from this class so the server can treat
    them uniformly when logging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for categorization
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(TodoManagerError):
    """Raised when there's an issue with configuration or settings."""

    def __init__(
        self,
        setting_name: str,
        message: str,
        expected_value: Optional[Any] = None,
        actual_value: Optional[Any] = None
    ):
        details = {"setting_name": setting_name}
        if expected_value is not None:
            details["expected_value"] = str(expected_value)
        if actual_value is not None:
            details["actual_value"] = str(actual_value)

        super().__init__(
            message=f"Configuration error for '{setting_name}': {message}",
            error_code="CONFIG_ERROR",
            details=details
        )
        self.setting_name = setting_name


# ============================================================================
# Store Errors
# ============================================================================

class StoreError(TodoManagerError):
    """Raised when a store operation fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        original_error: Optional[Exception] = None,
        error_code: str = "STORE_ERROR"
    ):
        details: Dict[str, Any] = {"operation": operation}
        if original_error is not None:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=f"Store operation '{operation}' failed: {message}",
            error_code=error_code,
            details=details
        )
        self.operation = operation
        self.original_error = original_error


class StoreUnavailableError(StoreError):
    """Raised when the store backend cannot be reached."""

    def __init__(
        self,
        backend: str,
        message: str,
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            operation="connect",
            message=f"{backend} unavailable: {message}",
            original_error=original_error,
            error_code="STORE_UNAVAILABLE"
        )
        self.backend = backend


class TaskValidationError(StoreError):
    """Raised when a task record is missing a required field or holds a bad value."""

    def __init__(self, field_name: str, message: str, value: Optional[Any] = None):
        super().__init__(
            operation="validate",
            message=f"Field '{field_name}': {message}",
            error_code="VALIDATION_ERROR"
        )
        self.field_name = field_name
        self.details["field_name"] = field_name
        if value is not None:
            self.details["value"] = repr(value)[:100]
