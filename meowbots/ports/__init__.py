"""Port interfaces (Hexagonal Architecture)."""

from meowbots.ports.inbound import IncomingMessage
from meowbots.ports.outbound import (
    ChannelPort,
    GuildPort,
    PlatformResult,
    RoleInfo,
    RoleSlotStorePort,
)

__all__ = [
    "IncomingMessage",
    "ChannelPort",
    "GuildPort",
    "PlatformResult",
    "RoleInfo",
    "RoleSlotStorePort",
]
