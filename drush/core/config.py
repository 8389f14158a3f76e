"""
Configuration for Drush
Environment-backed defaults plus the key-based store served as the 'config' service
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("true", "1", "yes")


class Config:
    """Configuration class for Drush"""

    # Debug mode (set DRUSH_DEBUG=true to enable)
    DEBUG: bool = _env_flag("DRUSH_DEBUG")

    # Simulated mode default (overridden by --simulate)
    SIMULATE: bool = _env_flag("DRUSH_SIMULATE")

    # Site root used by the bootstrap manager
    ROOT: Optional[str] = os.getenv("DRUSH_ROOT")

    # Custom log format for the drush loggers
    LOG_FORMAT: Optional[str] = os.getenv("DRUSH_LOG_FORMAT")

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration"""
        if cls.ROOT and not Path(cls.ROOT).is_dir():
            return False
        return True


class ConfigStore:
    """
    Key-based configuration object

    Keys are dotted paths ("runtime.debug"); values are stored flat so
    lookups never walk nested structures.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    @classmethod
    def from_env(cls) -> "ConfigStore":
        """Seed a store from the environment-backed Config defaults"""
        return cls({
            "runtime.debug": Config.DEBUG,
            "runtime.simulate": Config.SIMULATE,
            "options.root": Config.ROOT,
        })

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> "ConfigStore":
        self._values[key] = value
        return self

    def has(self, key: str) -> bool:
        return key in self._values

    def export(self) -> Dict[str, Any]:
        """Return a copy of every stored key"""
        return dict(self._values)
