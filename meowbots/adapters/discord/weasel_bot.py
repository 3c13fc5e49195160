"""Weasel bot — logs in and reports which guild it serves. Nothing else yet."""

import sys
from typing import Optional

import discord

from meowbots.config import WeaselConfig


def _log(msg: str):
    print(msg, file=sys.stderr)


class WeaselBot(discord.Client):
    bot_name = "Weasel"

    def __init__(self, guild_id: Optional[int] = None, **discord_kwargs):
        intents = discord.Intents.default()
        intents.guilds = True
        intents.messages = True
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self.guild_id = guild_id
        self.ready = False

    @classmethod
    def from_config(cls, config: WeaselConfig) -> "WeaselBot":
        return cls(guild_id=config.guild_id)

    def ready_message(self) -> str:
        return f"Logged in as {self.user} in guild: {self.guild_id}"

    async def on_ready(self):
        self.ready = True
        _log(f"[{self.bot_name}] {self.ready_message()}")
