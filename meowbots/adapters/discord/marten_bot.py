"""Marten bot — bridges discord.Client to CommandRouter.

Converts discord.Message -> IncomingMessage and lets the router do the rest.
"""

import sys
from typing import Optional

import discord

from meowbots.adapters.discord.platform import DiscordChannelAdapter, DiscordGuildAdapter
from meowbots.config import MartenConfig
from meowbots.domain.router import CommandRouter
from meowbots.ports.inbound import IncomingMessage
from meowbots.ports.outbound import RoleSlotStorePort


def _log(msg: str):
    print(msg, file=sys.stderr)


class MartenBot(discord.Client):
    """Role management and channel cleanup bot (``meow!`` commands)."""

    bot_name = "Marten"

    def __init__(self, router: CommandRouter, **discord_kwargs):
        intents = discord.Intents.default()
        intents.guilds = True
        intents.messages = True
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self.router = router
        self.ready = False

    @classmethod
    def from_config(cls, config: MartenConfig, store: RoleSlotStorePort) -> "MartenBot":
        router = CommandRouter(
            store=store,
            authorized_user_id=config.authorized_user_id,
            vanity_role_name=config.vanity_role_name,
            prefix=config.prefix,
            bot_name=cls.bot_name,
        )
        return cls(router)

    def _to_incoming(self, message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        guild: Optional[DiscordGuildAdapter] = None
        if message.guild is not None:
            guild = DiscordGuildAdapter(message.guild)
        return IncomingMessage(
            content=message.content,
            author_id=str(message.author.id),
            author_name=str(message.author),
            is_bot=message.author.bot,
            channel=DiscordChannelAdapter(message.channel),
            guild=guild,
        )

    async def on_ready(self):
        self.ready = True
        _log(f"[{self.bot_name}] Bot is online! Logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user:
            return
        if message.author.bot:
            return
        await self.router.handle(self._to_incoming(message))
