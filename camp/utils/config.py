"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Literal, TypedDict, cast


SettingKey = Literal[
    "log_level",
    "cors_origins",
    "server_host",
    "server_port",
]


class SettingValues(TypedDict):
    log_level: str
    cors_origins: List[str]
    server_host: str
    server_port: int


@dataclass(frozen=True)
class SettingDefinition:
    env_var: str
    default: str


_SETTING_DEFINITIONS: Dict[SettingKey, SettingDefinition] = {
    "log_level": SettingDefinition("LOG_LEVEL", "INFO"),
    "cors_origins": SettingDefinition(
        "CORS_ORIGINS",
        "http://localhost,http://localhost:3000,http://localhost:5173",
    ),
    "server_host": SettingDefinition("SERVER_HOST", "0.0.0.0"),
    "server_port": SettingDefinition("SERVER_PORT", "2022"),
}


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _normalize_port(value: str, default: str) -> int:
    try:
        port = int(value.strip())
    except (AttributeError, ValueError):
        return int(default)
    if not 0 < port < 65536:
        return int(default)
    return port


@lru_cache(maxsize=None)
def get_settings() -> SettingValues:
    """Return the cached settings sourced from the environment."""
    raw: Dict[SettingKey, str] = {}
    for key, definition in _SETTING_DEFINITIONS.items():
        value = os.getenv(definition.env_var)
        raw[key] = value if value not in (None, "") else definition.default

    values = {
        "log_level": raw["log_level"].strip().upper(),
        "cors_origins": _split_csv(raw["cors_origins"]),
        "server_host": raw["server_host"].strip(),
        "server_port": _normalize_port(raw["server_port"], _SETTING_DEFINITIONS["server_port"].default),
    }
    return cast(SettingValues, values)


def get_setting(key: SettingKey):
    """Return a single setting value."""
    return get_settings()[key]


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
