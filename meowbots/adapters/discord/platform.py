"""discord.py implementations of GuildPort and ChannelPort.

Every Discord API failure is turned into a PlatformResult with
``success=False`` so callers never see discord exceptions.
"""

import sys
from datetime import timedelta
from typing import Optional

import discord

from meowbots.ports.outbound import PlatformResult, RoleInfo


# Discord rejects bulk deletes of more than 100 messages or of messages older than 14 days
BULK_DELETE_MAX = 100
BULK_DELETE_MAX_AGE = timedelta(days=14)


def _log(msg: str):
    print(msg, file=sys.stderr)


def _colour(value: Optional[int]) -> discord.Colour:
    return discord.Colour(value) if value is not None else discord.Colour.default()


def role_info(role: discord.Role) -> RoleInfo:
    color = role.colour.value
    return RoleInfo(
        role_id=str(role.id),
        name=role.name,
        position=role.position,
        color=color or None,
    )


class DiscordGuildAdapter:
    """GuildPort implementation using a discord.Guild."""

    def __init__(self, guild: discord.Guild):
        self._guild = guild

    async def _resolve(self, role_id: str) -> Optional[discord.Role]:
        try:
            rid = int(role_id)
        except (TypeError, ValueError):
            return None
        role = self._guild.get_role(rid)
        if role is not None:
            return role
        roles = await self._guild.fetch_roles()
        return discord.utils.get(roles, id=rid)

    def find_role_by_name(self, name: str) -> Optional[RoleInfo]:
        role = discord.utils.get(self._guild.roles, name=name)
        return role_info(role) if role else None

    async def fetch_role(self, role_id: str) -> PlatformResult:
        try:
            role = await self._resolve(role_id)
        except discord.HTTPException as e:
            return PlatformResult(success=False, error=str(e))
        if role is None:
            return PlatformResult(success=False, not_found=True, error=f"role {role_id} not found")
        return PlatformResult(success=True, role=role_info(role))

    async def create_role(
        self, name: str, color: Optional[int], reason: Optional[str] = None,
    ) -> PlatformResult:
        try:
            role = await self._guild.create_role(name=name, colour=_colour(color), reason=reason)
        except discord.HTTPException as e:
            return PlatformResult(success=False, error=str(e))
        return PlatformResult(success=True, role=role_info(role))

    async def edit_role(self, role_id: str, name: str, color: Optional[int]) -> PlatformResult:
        try:
            role = await self._resolve(role_id)
            if role is None:
                return PlatformResult(success=False, not_found=True, error=f"role {role_id} not found")
            # "default" resets the colour rather than leaving it unchanged
            edited = await role.edit(name=name, colour=_colour(color))
        except discord.HTTPException as e:
            return PlatformResult(success=False, error=str(e))
        return PlatformResult(success=True, role=role_info(edited or role))

    async def move_role(self, role_id: str, position: int) -> PlatformResult:
        try:
            role = await self._resolve(role_id)
            if role is None:
                return PlatformResult(success=False, not_found=True, error=f"role {role_id} not found")
            moved = await role.edit(position=position)
        except (discord.HTTPException, ValueError) as e:
            return PlatformResult(success=False, error=str(e))
        return PlatformResult(success=True, role=role_info(moved or role))

    async def delete_role(self, role_id: str, reason: Optional[str] = None) -> PlatformResult:
        try:
            role = await self._resolve(role_id)
            if role is None:
                return PlatformResult(success=False, not_found=True, error=f"role {role_id} not found")
            await role.delete(reason=reason)
        except discord.HTTPException as e:
            return PlatformResult(success=False, error=str(e))
        return PlatformResult(success=True, role=RoleInfo(role_id=str(role_id), name=role.name, position=0))


class DiscordChannelAdapter:
    """ChannelPort implementation using a messageable discord channel."""

    def __init__(self, channel):
        self._channel = channel

    async def send(self, text: str) -> None:
        try:
            # Split long messages
            while text:
                await self._channel.send(text[:2000])
                text = text[2000:]
        except discord.HTTPException as e:
            _log(f"send failed in channel {getattr(self._channel, 'id', '?')}: {e}")

    async def delete_recent(self, limit: int) -> PlatformResult:
        """Fetch up to ``limit`` recent messages and delete them one by one."""
        deleted = 0
        errors = []
        try:
            async for message in self._channel.history(limit=limit):
                try:
                    await message.delete()
                    deleted += 1
                except discord.HTTPException as e:
                    errors.append(str(e))
        except discord.HTTPException as e:
            return PlatformResult(success=False, count=deleted, error=str(e))
        if errors and not deleted:
            return PlatformResult(success=False, error=errors[0])
        return PlatformResult(success=True, count=deleted, error=errors[0] if errors else None)

    async def bulk_delete(self, limit: int) -> PlatformResult:
        """One bulk-delete request for the recent messages Discord allows.

        At most 100 messages are fetched, and those older than 14 days are
        skipped rather than deleted one by one.
        """
        if not hasattr(self._channel, "delete_messages"):
            return PlatformResult(success=False, error="channel does not support bulk delete")
        cutoff = discord.utils.utcnow() - BULK_DELETE_MAX_AGE
        try:
            messages = [
                message
                async for message in self._channel.history(limit=min(limit, BULK_DELETE_MAX))
                if message.created_at > cutoff
            ]
            if messages:
                await self._channel.delete_messages(messages)
        except discord.HTTPException as e:
            return PlatformResult(success=False, error=str(e))
        return PlatformResult(success=True, count=len(messages))
