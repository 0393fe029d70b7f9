"""
Logger module - Logging configuration and utilities

This module provides logging configuration with support for:
- File and console logging
- Configuration from config.properties / .env
- Structured logging with context
"""

import logging
import sys
from typing import Optional, Any

# Flag to track if ComprehensiveLogger has been initialized
_comprehensive_logger_initialized = False


def _ensure_comprehensive_logger_initialized():
    """
    Initialize ComprehensiveLogger with environment configuration on first use.
    This is called automatically by get_logger().
    """
    global _comprehensive_logger_initialized

    if _comprehensive_logger_initialized:
        return

    _comprehensive_logger_initialized = True

    from .comprehensive_logger import ComprehensiveLogger
    from todo_manager.config import ConfigProperties

    try:
        ConfigProperties.load_env_file()
        ComprehensiveLogger.initialize(**ConfigProperties.get_logging_config())
    except (OSError, ValueError) as e:
        # Fallback to basic logging if the configured log folder is unusable
        ComprehensiveLogger.initialize(enable_file=False)
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            stream=sys.stdout,
        )
        logging.getLogger(__name__).warning(
            f"Failed to initialize ComprehensiveLogger: {e}. Using console logging only."
        )


def get_logger(name: str, level: Optional[str] = None) -> Any:
    """
    Get or create a logger with standard formatting and environment configuration.

    This function initializes the ComprehensiveLogger system on first call,
    which loads configuration from config.properties / .env and enables file
    and console logging.

    Args:
        name: Logger name (typically __name__)
        level: Optional logging level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured TaskLogger instance
    """
    _ensure_comprehensive_logger_initialized()

    from .comprehensive_logger import ComprehensiveLogger

    logger = ComprehensiveLogger.get_logger(name)
    if level:
        logger.logger.setLevel(level.upper())
    return logger
