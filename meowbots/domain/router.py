"""CommandRouter — Marten's command handling, no framework dependencies.

Each message is matched against a fixed, ordered list of commands and only
the first match runs. Handlers talk to the platform through GuildPort and
ChannelPort and record role ownership in a RoleSlotStorePort.
"""

import sys
from typing import Optional, Tuple

from meowbots.config import DEFAULT_AUTHORIZED_USER_ID, DEFAULT_PREFIX, DEFAULT_VANITY_ROLE_NAME
from meowbots.domain.command_parser import parse_color, parse_command, parse_count, parse_slot
from meowbots.domain.help_text import general_help, pretty_help
from meowbots.domain.models import CommandResult, ErrorKind, ParsedCommand
from meowbots.domain.role_slots import ORIGINAL_SLOT
from meowbots.ports.inbound import IncomingMessage
from meowbots.ports.outbound import RoleSlotStorePort


def _log(msg: str):
    print(msg, file=sys.stderr)


OBLITERATE_LIMIT = 100
ROLE_CREATE_REASON = "Role created by meow!pretty command"

# (text after the prefix, handler name), checked in order with startswith
COMMANDS = (
    ("help", "help"),
    ("obliterate", "obliterate"),
    ("disintigrate", "disintegrate"),
    ("disintegrate", "disintegrate"),
    ("pretty delete", "delete_role"),
    ("pretty", "pretty"),
)

# User-facing replies
MSG_PRETTY_USAGE = 'Please provide a role name in quotes and hex color code or "default".'
MSG_BAD_COLOR = 'Invalid hex color code. Please use a format like #RRGGBB, or use "default" for no color.'
MSG_BAD_SLOT = "Mrow, the role number has to be a whole number of 1 or more!"
MSG_GUILD_ONLY = "Mrow, role commands only work inside a server!"
MSG_NO_VANITY = 'Could not find the "{name}" role.'
MSG_ROLE_SAVED = "Meow, your role has been created/updated! Meow, meow!"
MSG_ROLE_SAVE_FAILED = "Grr, there was an error creating or updating the role!"
MSG_NO_ROLES = "Mrow, you don’t have any roles to delete!"
MSG_NO_ROLE_IN_SLOT = "Mrow, no role to delete!"
MSG_ROLE_MISSING = "Grr, couldn’t find the role to delete!"
MSG_ROLE_DELETED = "Meow, the role has been deleted! Meow, meow!"
MSG_ROLE_DELETE_FAILED = "Grr, there was an error deleting the role!"
MSG_OBLITERATED = "Grr, yeeted all messages and threads in this channel! 😾"
MSG_OBLITERATE_FAILED = "Grr, there was an error trying to delete messages!"
MSG_NOT_ALLOWED = "Grr, you’re not allowed to use this command!"
MSG_COUNT_PROMPT = "Mrow, how many messages do you want to delete? Specify a number, silly!"
MSG_DISINTEGRATED = "Mrow, yeeted {count} messages into oblivion!"
MSG_DISINTEGRATE_FAILED = "Grr, there was an error trying to delete messages!"


class CommandRouter:
    """Routes ``meow!`` commands to their handlers.

    Handles:
    - help [pretty]
    - obliterate / disintigrate (authorized user only)
    - pretty delete [slot]
    - pretty "<name>" <#hex|default> [slot]
    """

    def __init__(
        self,
        store: RoleSlotStorePort,
        authorized_user_id: str = DEFAULT_AUTHORIZED_USER_ID,
        vanity_role_name: str = DEFAULT_VANITY_ROLE_NAME,
        prefix: str = DEFAULT_PREFIX,
        bot_name: str = "Marten",
    ):
        self.store = store
        self.authorized_user_id = str(authorized_user_id)
        self.vanity_role_name = vanity_role_name
        self.prefix = prefix
        self.bot_name = bot_name

    def is_authorized(self, author_id: str) -> bool:
        return str(author_id) == self.authorized_user_id

    def match(self, content: str) -> Optional[Tuple[str, ParsedCommand]]:
        """First command whose ``prefix + keyword`` starts the message."""
        for keyword, name in COMMANDS:
            cmd = parse_command(content, self.prefix, keyword)
            if cmd is not None:
                return name, cmd
        return None

    async def handle(self, msg: IncomingMessage) -> CommandResult:
        """Dispatch one message and send the handler's reply, if any."""
        if msg.is_bot:
            return CommandResult.ignored()

        matched = self.match(msg.content)
        if matched is None:
            return CommandResult.ignored()
        name, cmd = matched

        _log(f"[{self.bot_name}] {name} from {msg.author_name} ({msg.author_id})")
        handler = getattr(self, f"_handle_{name}")
        try:
            result = await handler(cmd, msg)
        except Exception as e:
            _log(f"[{self.bot_name}] {name} failed: {e}")
            result = CommandResult.failure(ErrorKind.PLATFORM, _GENERIC_FAILURES[name])

        if result.reply:
            await msg.channel.send(result.reply)
        return result

    # -- help --

    async def _handle_help(self, cmd: ParsedCommand, msg: IncomingMessage) -> CommandResult:
        if cmd.args and cmd.args[0].lower() == "pretty":
            return CommandResult(reply=pretty_help(self.prefix))
        return CommandResult(reply=general_help(self.prefix))

    # -- bulk deletion --

    async def _handle_obliterate(self, cmd: ParsedCommand, msg: IncomingMessage) -> CommandResult:
        if not self.is_authorized(msg.author_id):
            _log(f"[{self.bot_name}] unauthorized obliterate by {msg.author_id}")
            return CommandResult.failure(ErrorKind.UNAUTHORIZED)

        # Two independent passes; either may fail without stopping the other
        individual = await msg.channel.delete_recent(OBLITERATE_LIMIT)
        if not individual.success:
            _log(f"[{self.bot_name}] obliterate: individual pass failed: {individual.error}")
        bulk = await msg.channel.bulk_delete(OBLITERATE_LIMIT)
        if not bulk.success:
            _log(f"[{self.bot_name}] obliterate: bulk pass failed: {bulk.error}")

        if not individual.success and not bulk.success:
            return CommandResult.failure(ErrorKind.PLATFORM, MSG_OBLITERATE_FAILED)
        _log(f"[{self.bot_name}] obliterate removed {individual.count} + {bulk.count} messages")
        return CommandResult(reply=MSG_OBLITERATED)

    async def _handle_disintegrate(self, cmd: ParsedCommand, msg: IncomingMessage) -> CommandResult:
        if not self.is_authorized(msg.author_id):
            _log(f"[{self.bot_name}] unauthorized user: {msg.author_id}")
            return CommandResult.failure(ErrorKind.UNAUTHORIZED, MSG_NOT_ALLOWED)

        count = parse_count(cmd.args[0] if cmd.args else None)
        _log(f"[{self.bot_name}] parsed number: {count}")
        if count is None:
            return CommandResult.failure(ErrorKind.VALIDATION, MSG_COUNT_PROMPT)

        result = await msg.channel.bulk_delete(count)
        if not result.success:
            _log(f"[{self.bot_name}] error during bulk delete: {result.error}")
            return CommandResult.failure(ErrorKind.PLATFORM, MSG_DISINTEGRATE_FAILED)
        _log(f"[{self.bot_name}] deleted {result.count} messages")
        return CommandResult(reply=MSG_DISINTEGRATED.format(count=result.count))

    # -- roles --

    async def _handle_delete_role(self, cmd: ParsedCommand, msg: IncomingMessage) -> CommandResult:
        user_slots = self.store.slots(msg.author_id)
        if not user_slots:
            return CommandResult.failure(ErrorKind.NOT_FOUND, MSG_NO_ROLES)

        if cmd.args:
            slot = parse_slot(cmd.args[0])
            if slot is None:
                return CommandResult.failure(ErrorKind.VALIDATION, MSG_BAD_SLOT)
        else:
            slot = max(user_slots)

        role_id = user_slots.get(slot)
        if not role_id:
            return CommandResult.failure(ErrorKind.NOT_FOUND, MSG_NO_ROLE_IN_SLOT)
        if msg.guild is None:
            return CommandResult.failure(ErrorKind.VALIDATION, MSG_GUILD_ONLY)

        fetched = await msg.guild.fetch_role(role_id)
        if not fetched.success:
            if fetched.not_found:
                # Role is gone on the platform side; forget the stale slot
                self.store.delete(msg.author_id, slot)
                self.store.save()
                return CommandResult.failure(ErrorKind.NOT_FOUND, MSG_ROLE_MISSING)
            _log(f"[{self.bot_name}] error fetching role {role_id}: {fetched.error}")
            return CommandResult.failure(ErrorKind.PLATFORM, MSG_ROLE_DELETE_FAILED)

        deleted = await msg.guild.delete_role(role_id)
        if not deleted.success:
            _log(f"[{self.bot_name}] error deleting role {role_id}: {deleted.error}")
            return CommandResult.failure(ErrorKind.PLATFORM, MSG_ROLE_DELETE_FAILED)

        self.store.delete(msg.author_id, slot)
        self.store.save()
        return CommandResult(reply=MSG_ROLE_DELETED)

    async def _handle_pretty(self, cmd: ParsedCommand, msg: IncomingMessage) -> CommandResult:
        if len(cmd.args) < 2 or not cmd.args[0].strip():
            return CommandResult.failure(ErrorKind.VALIDATION, MSG_PRETTY_USAGE)

        role_name, color_token = cmd.args[0], cmd.args[1]
        valid, color = parse_color(color_token)
        if not valid:
            return CommandResult.failure(ErrorKind.VALIDATION, MSG_BAD_COLOR)

        slot = ORIGINAL_SLOT
        if len(cmd.args) > 2:
            slot = parse_slot(cmd.args[2])
            if slot is None:
                return CommandResult.failure(ErrorKind.VALIDATION, MSG_BAD_SLOT)

        guild = msg.guild
        if guild is None:
            return CommandResult.failure(ErrorKind.VALIDATION, MSG_GUILD_ONLY)

        vanity = guild.find_role_by_name(self.vanity_role_name)
        if vanity is None:
            return CommandResult.failure(
                ErrorKind.NOT_FOUND, MSG_NO_VANITY.format(name=self.vanity_role_name),
            )

        role = None
        existing_id = self.store.get(msg.author_id, slot)
        if existing_id:
            fetched = await guild.fetch_role(existing_id)
            if fetched.success:
                role = fetched.role

        if role is not None:
            saved = await guild.edit_role(role.role_id, role_name, color)
        else:
            saved = await guild.create_role(role_name, color, reason=ROLE_CREATE_REASON)
        if not saved.success or saved.role is None:
            _log(f"[{self.bot_name}] error creating/updating role: {saved.error}")
            return CommandResult.failure(ErrorKind.PLATFORM, MSG_ROLE_SAVE_FAILED)
        role = saved.role

        # Directly under the vanity role; position 0 belongs to @everyone
        moved = await guild.move_role(role.role_id, max(vanity.position - 1, 1))
        if not moved.success:
            _log(f"[{self.bot_name}] error positioning role {role.role_id}: {moved.error}")
            return CommandResult.failure(ErrorKind.PLATFORM, MSG_ROLE_SAVE_FAILED)

        self.store.set(msg.author_id, slot, role.role_id)
        self.store.save()
        return CommandResult(reply=MSG_ROLE_SAVED)


_GENERIC_FAILURES = {
    "help": None,
    "obliterate": MSG_OBLITERATE_FAILED,
    "disintegrate": MSG_DISINTEGRATE_FAILED,
    "delete_role": MSG_ROLE_DELETE_FAILED,
    "pretty": MSG_ROLE_SAVE_FAILED,
}
