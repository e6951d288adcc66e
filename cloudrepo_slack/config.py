"""the beautiful world start from here."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from cloudrepo_slack.errors import ConfigurationError

load_dotenv()

MODES = ("push", "pull")
DEFAULT_PORT = 8080


def read_value(key: str, default: str = "", config_dir: str | None = None) -> str:
    """
    Read one config value.

    Lookup order
    ------------
    1. Environment variable ``KEY`` (upper-cased, ``.env`` included).
    2. File ``{CONFIG_DIR}/{key}`` (one value per file, trimmed).
    3. ``default``.
    """
    value = os.getenv(key.upper())
    if value is not None:
        return value.strip()
    base = Path(config_dir or os.getenv("CONFIG_DIR", "config"))
    path = base / key
    if path.is_file():
        return path.read_text(encoding="utf-8").strip()
    return default


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    mode: str = "pull"
    slack_url: str = ""
    port: int = DEFAULT_PORT
    project_id: str = ""
    subscription: str = ""
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_dir: str | None = None) -> "Settings":
        """Build settings from the environment and the config directory."""
        raw_port = read_value("port", str(DEFAULT_PORT), config_dir)
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ConfigurationError(f"port must be an integer, got {raw_port!r}") from exc
        return cls(
            mode=read_value("mode", "pull", config_dir).lower() or "pull",
            slack_url=read_value("slack_url", "", config_dir),
            port=port,
            project_id=read_value("project_id", "", config_dir),
            subscription=read_value("subscription", "", config_dir),
            log_level=read_value("log_level", "INFO", config_dir).upper() or "INFO",
        )

    def validate(self) -> "Settings":
        """Raise ``ConfigurationError`` when the selected mode cannot start."""
        if self.mode not in MODES:
            raise ConfigurationError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.mode == "pull":
            missing = [
                key for key in ("project_id", "subscription") if not getattr(self, key)
            ]
            if missing:
                raise ConfigurationError(
                    f"pull mode requires {', '.join(missing)}"
                )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"unknown log_level {self.log_level!r}")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"port out of range: {self.port}")
        return self
