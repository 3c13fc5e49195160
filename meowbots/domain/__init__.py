"""Domain layer — pure Python, no framework dependencies."""

from meowbots.domain.models import CommandResult, ErrorKind, ParsedCommand
from meowbots.domain.command_parser import parse_arguments, parse_color, parse_command, parse_slot
from meowbots.domain.role_slots import ORIGINAL_SLOT, RoleSlotStore
from meowbots.domain.router import CommandRouter

__all__ = [
    "CommandResult",
    "ErrorKind",
    "ParsedCommand",
    "parse_arguments",
    "parse_color",
    "parse_command",
    "parse_slot",
    "ORIGINAL_SLOT",
    "RoleSlotStore",
    "CommandRouter",
]
