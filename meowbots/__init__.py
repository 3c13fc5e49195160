"""meow-bots — Marten (role management) and Weasel Discord bots."""

from meowbots.config import AppConfig, ConfigError, MartenConfig, WeaselConfig, __version__, load_config
from meowbots.domain.role_slots import RoleSlotStore
from meowbots.domain.router import CommandRouter

__all__ = [
    "AppConfig",
    "ConfigError",
    "MartenConfig",
    "WeaselConfig",
    "__version__",
    "load_config",
    "RoleSlotStore",
    "CommandRouter",
]
