"""Configuration — JSON config file with environment overrides."""

__version__ = "0.1.0"

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_CONFIG_PATH = "config.json"

DEFAULT_PREFIX = "meow!"
DEFAULT_AUTHORIZED_USER_ID = "556682219171741706"
DEFAULT_VANITY_ROLE_NAME = "🅥🅐🅝🅘🅣🅨 🅡🅞🅛🅔🅢"
DEFAULT_ROLE_CACHE_PATH = "roleCache.json"


class ConfigError(Exception):
    """Raised when the config file is missing or unreadable."""


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class MartenConfig:
    token: str = ""
    prefix: str = DEFAULT_PREFIX
    authorized_user_id: str = DEFAULT_AUTHORIZED_USER_ID
    vanity_role_name: str = DEFAULT_VANITY_ROLE_NAME
    role_cache_path: str = DEFAULT_ROLE_CACHE_PATH

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "MartenConfig":
        return cls(
            token=os.getenv("MARTEN_TOKEN", raw.get("token", "")),
            prefix=raw.get("prefix", DEFAULT_PREFIX),
            authorized_user_id=str(
                os.getenv("MEOW_AUTHORIZED_USER_ID", raw.get("authorizedUserId", DEFAULT_AUTHORIZED_USER_ID))
            ),
            vanity_role_name=os.getenv(
                "MEOW_VANITY_ROLE_NAME", raw.get("vanityRoleName", DEFAULT_VANITY_ROLE_NAME)
            ),
            role_cache_path=os.getenv(
                "MEOW_ROLE_CACHE_PATH", raw.get("roleCachePath", DEFAULT_ROLE_CACHE_PATH)
            ),
        )


@dataclass
class WeaselConfig:
    token: str = ""
    guild_id: Optional[int] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "WeaselConfig":
        guild_id = os.getenv("WEASEL_GUILD_ID", raw.get("guildId"))
        try:
            guild_id = int(guild_id) if guild_id not in (None, "") else None
        except (TypeError, ValueError):
            _stderr_print(f"Invalid Weasel guildId={guild_id!r}, ignoring")
            guild_id = None
        return cls(
            token=os.getenv("WEASEL_TOKEN", raw.get("token", "")),
            guild_id=guild_id,
        )


@dataclass
class StatusConfig:
    enabled: bool = False
    host: str = "127.0.0.1"
    port: int = 3000

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StatusConfig":
        port = os.getenv("MEOW_STATUS_PORT", raw.get("port", 3000))
        try:
            port = int(port)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid status port: {port!r}")
        if not 0 < port < 65536:
            raise ConfigError(f"Status port out of range: {port}")
        return cls(
            enabled=_env_bool("MEOW_STATUS_ENABLED", bool(raw.get("enabled", False))),
            host=os.getenv("MEOW_STATUS_HOST", raw.get("host", "127.0.0.1")),
            port=port,
        )


@dataclass
class AppConfig:
    """Typed configuration for both bots and the status server."""

    marten: MartenConfig = field(default_factory=MartenConfig)
    weasel: WeaselConfig = field(default_factory=WeaselConfig)
    status: StatusConfig = field(default_factory=StatusConfig)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AppConfig":
        return cls(
            marten=MartenConfig.from_dict(raw.get("marten") or {}),
            weasel=WeaselConfig.from_dict(raw.get("weasel") or {}),
            status=StatusConfig.from_dict(raw.get("status") or {}),
        )

    @classmethod
    def from_file(cls, path: str) -> "AppConfig":
        """Create AppConfig from a JSON config file; env vars take precedence."""
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            raw = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}")
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_path} must hold a JSON object")
        return cls.from_dict(raw)


def load_config(path: Optional[str] = None) -> AppConfig:
    return AppConfig.from_file(path or os.getenv("MEOW_CONFIG", DEFAULT_CONFIG_PATH))
