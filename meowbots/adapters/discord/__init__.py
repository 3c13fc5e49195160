"""Discord adapters."""

from meowbots.adapters.discord.marten_bot import MartenBot
from meowbots.adapters.discord.platform import DiscordChannelAdapter, DiscordGuildAdapter
from meowbots.adapters.discord.weasel_bot import WeaselBot

__all__ = ["MartenBot", "WeaselBot", "DiscordChannelAdapter", "DiscordGuildAdapter"]
