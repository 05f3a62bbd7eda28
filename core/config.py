"""Configuration loader shared by the Lambda entry point and the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "USERSAPI_CONFIG"
CONFIG_PATH = Path("usersapi.yml")

DEFAULTS = {
    "service_name": "users",
    "log_level": "INFO",
    "strict_user_id": False,
    "default_format": "json",
}


@dataclass(slots=True)
class Settings:
    service_name: str = DEFAULTS["service_name"]
    log_level: str = DEFAULTS["log_level"]
    strict_user_id: bool = DEFAULTS["strict_user_id"]
    default_format: str = DEFAULTS["default_format"]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Settings":
        return cls(
            service_name=str(data.get("service_name", DEFAULTS["service_name"])),
            log_level=str(data.get("log_level", DEFAULTS["log_level"])).upper(),
            strict_user_id=bool(data.get("strict_user_id", DEFAULTS["strict_user_id"])),
            default_format=data.get("default_format", DEFAULTS["default_format"]),
        )

    def merge_cli(
        self,
        format_override: str | None = None,
        log_level: str | None = None,
        strict_user_id: bool | None = None,
    ) -> "Settings":
        return Settings(
            service_name=self.service_name,
            log_level=(log_level or self.log_level).upper(),
            strict_user_id=self.strict_user_id if strict_user_id is None else strict_user_id,
            default_format=format_override or self.default_format,
        )


def load_settings(path: Path) -> Settings:
    if not path.exists():
        return Settings()

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    if not isinstance(data, dict):
        raise ValueError("Configuration file must be a mapping of keys to values.")

    return Settings.from_mapping(data)


def settings_path() -> Path:
    """Return the settings file the Lambda runtime should read."""
    override = os.getenv(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


__all__ = ["Settings", "load_settings", "settings_path"]
