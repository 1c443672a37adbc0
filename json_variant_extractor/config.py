"""
Settings for the extractor UI.

Loaded from defaults (this file), overridden by JVE_* environment variables.
"""
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class Settings:
    log_level: str = "INFO"
    export_dir: str = field(default_factory=tempfile.gettempdir)
    server_name: str = "127.0.0.1"
    server_port: int = 7860


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from defaults and JVE_* environment variables."""
    if env is None:
        env = os.environ
    settings = Settings()
    settings.log_level = env.get("JVE_LOG_LEVEL", settings.log_level).upper()
    settings.export_dir = env.get("JVE_EXPORT_DIR") or settings.export_dir
    settings.server_name = env.get("JVE_SERVER_NAME") or settings.server_name
    settings.server_port = _env_int(env, "JVE_SERVER_PORT", settings.server_port)
    return settings


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once; call from the application entry point."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
