"""
Configuration Properties - single source of truth for app configuration.

Reads config.properties (and a .env file, if present) and injects its plain
keys into os.environ, where ServerConfig.from_env() and the logging setup
read them through the env-var accessors below.
"""

import os
import json
from pathlib import Path
from typing import Optional, Dict, Any, List

from dotenv import load_dotenv


class ConfigProperties:
    """
    Unified configuration loader and accessor.

    Reads config.properties once at startup, injects all plain-key values
    into os.environ, and exposes typed env-var accessors.

    Quick usage::

        # Bootstrap (call once at process start)
        ConfigProperties.load_env_file()   # load + inject into os.environ

        # Env-var accessors (reads os.environ, respects OS overrides)
        ConfigProperties.get_bool_env("TODO_CORS_ALLOW_CREDENTIALS", True)
        ConfigProperties.get_list_env("TODO_CORS_ORIGINS")
        ConfigProperties.get_logging_config()
    """

    _instance: Optional["ConfigProperties"] = None
    _properties: Dict[str, str] = {}
    _loaded: bool = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Optional[str] = None) -> "ConfigProperties":
        """
        Parse config.properties and return the singleton instance.

        Args:
            path: Explicit path to config.properties; auto-discovered if omitted.
        """
        if cls._instance and cls._loaded:
            return cls._instance

        cls._instance = cls()
        cls._properties = {}

        config_path = Path(path) if path else cls._find_file("config.properties")

        if config_path and config_path.exists():
            cls._parse_file(config_path)

        cls._loaded = True
        return cls._instance

    @classmethod
    def load_env_file(cls, path: Optional[str] = None) -> bool:
        """
        Load config.properties and .env, injecting plain keys into os.environ.

        Variables already present in the process environment are never
        overwritten.

        Args:
            path: Explicit path to config.properties; auto-discovered if omitted.

        Returns:
            True if either config.properties or .env was found and loaded.
        """
        cls.load(path)
        cls.load_to_env()

        dotenv_path = cls._find_file(".env")
        loaded_dotenv = bool(dotenv_path) and load_dotenv(dotenv_path, override=False)
        return bool(cls._properties) or bool(loaded_dotenv)

    @classmethod
    def load_to_env(cls) -> None:
        """
        Populate os.environ from config.properties (plain keys only).

        - OS/container env vars already set are **never** overwritten.
        - Dot-notation keys are skipped; they are not valid env-var
          identifiers.
        """
        if not cls._loaded:
            cls.load()

        for key, value in cls._properties.items():
            if "." in key:
                continue
            if key not in os.environ:
                os.environ[key] = value

    @classmethod
    def reload(cls, path: Optional[str] = None) -> "ConfigProperties":
        """Force a fresh re-parse of config.properties."""
        cls._loaded = False
        cls._properties = {}
        cls._instance = None
        return cls.load(path)

    # ------------------------------------------------------------------
    # Env-var-style accessors  (reads os.environ, respects OS overrides)
    # ------------------------------------------------------------------

    @staticmethod
    def get_bool_env(key: str, default: bool = False) -> bool:
        """Get a boolean from an environment variable."""
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    @staticmethod
    def get_list_env(key: str, default: Optional[List[str]] = None) -> List[str]:
        """
        Get a list from an environment variable.

        Accepts either a JSON array or a comma-separated string; blank items
        are dropped.
        """
        value = os.getenv(key)
        if not value:
            return list(default or [])
        value = value.strip()
        if value.startswith("["):
            try:
                items = json.loads(value)
            except json.JSONDecodeError:
                return list(default or [])
            return [str(item).strip() for item in items if str(item).strip()]
        return [item.strip() for item in value.split(",") if item.strip()]

    # ------------------------------------------------------------------
    # Logging configuration helper
    # ------------------------------------------------------------------

    @staticmethod
    def get_logging_config() -> Dict[str, Any]:
        """
        Return a ``ComprehensiveLogger.initialize()``-compatible dict
        built from the current environment (populated by ``load_to_env``).
        """
        return {
            "log_folder":     os.getenv("TODO_LOG_FOLDER", "./logs"),
            "log_level":      os.getenv("TODO_LOG_LEVEL", "INFO"),
            "enable_console": os.getenv("TODO_ENABLE_CONSOLE_LOGGING", "true").lower() in ("true", "1", "yes"),
            "enable_file":    os.getenv("TODO_ENABLE_FILE_LOGGING", "true").lower() in ("true", "1", "yes"),
            "max_bytes":      int(os.getenv("TODO_LOG_MAX_BYTES", "10485760")),
            "backup_count":   int(os.getenv("TODO_LOG_BACKUP_COUNT", "5")),
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @classmethod
    def _find_file(cls, name: str) -> Optional[Path]:
        """Search for *name* at the project root, then in cwd and up to 3 parents."""
        fixed = Path(__file__).parent.parent.parent / name
        if fixed.exists():
            return fixed

        current = Path.cwd()
        for _ in range(4):
            candidate = current / name
            if candidate.exists():
                return candidate
            if current.parent == current:
                break
            current = current.parent

        return None

    @classmethod
    def _parse_file(cls, path: Path) -> None:
        """Parse a Java-style .properties file into ``_properties``."""
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or line.startswith("!"):
                    continue
                for sep in ("=", ":"):
                    if sep in line:
                        key, value = line.split(sep, 1)
                        cls._properties[key.strip()] = value.strip()
                        break
