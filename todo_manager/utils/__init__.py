"""
Utilities module - Logging and exception helpers
"""

from .logger import get_logger
from .comprehensive_logger import ComprehensiveLogger, TaskLogger
from .exceptions import (
    TodoManagerError,
    ConfigurationError,
    StoreError,
    StoreUnavailableError,
    TaskValidationError,
)

__all__ = [
    'get_logger',
    'ComprehensiveLogger',
    'TaskLogger',
    'TodoManagerError',
    'ConfigurationError',
    'StoreError',
    'StoreUnavailableError',
    'TaskValidationError',
]
