"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from typing import Optional

from meowbots.ports.outbound import ChannelPort, GuildPort


@dataclass
class IncomingMessage:
    """Discord/CLI-agnostic message representation.

    ``guild`` is None for direct messages.
    """

    content: str
    author_id: str
    author_name: str
    is_bot: bool
    channel: ChannelPort
    guild: Optional[GuildPort] = None
