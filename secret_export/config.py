"""
Centralized configuration for secret-service-export.

Defaults come from environment variables; command line flags override them.

Usage:
    from secret_export.config import get_config
    cfg = get_config()
    print(cfg.format)       # "paw"
    print(cfg.file_mode)    # 0o660
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_FORMAT = "paw"
DEFAULT_FILE_MODE = 0o660


@dataclass(frozen=True)
class Config:
    """Top-level export configuration."""

    format: str = DEFAULT_FORMAT
    collection: str = ""  # empty = list mode
    log_level: str = "WARNING"
    file_mode: int = DEFAULT_FILE_MODE

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


# Singleton
_config: Config | None = None


def get_config() -> Config:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_from_env() -> Config:
    """Load configuration from environment variables."""
    raw_mode = os.environ.get("SECRET_EXPORT_FILE_MODE", "")
    try:
        file_mode = int(raw_mode, 8) if raw_mode else DEFAULT_FILE_MODE
    except ValueError:
        file_mode = DEFAULT_FILE_MODE

    return Config(
        format=os.environ.get("SECRET_EXPORT_FORMAT", DEFAULT_FORMAT),
        collection=os.environ.get("SECRET_EXPORT_COLLECTION", ""),
        log_level=os.environ.get("SECRET_EXPORT_LOG_LEVEL", "WARNING"),
        file_mode=file_mode,
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
