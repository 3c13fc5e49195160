"""Command text parsing — tokenizer and argument validators.

Pure Python, no framework dependencies.
"""

import re
from typing import List, Optional, Tuple

from meowbots.domain.models import ParsedCommand

# A double-quoted span is one token; otherwise split on whitespace
TOKEN_RE = re.compile(r'"([^"]+)"|(\S+)')

COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

# ASCII digits only, no sign or underscores
NUMBER_RE = re.compile(r"^[0-9]+$")

DEFAULT_COLOR = "default"


def parse_arguments(text: str) -> List[str]:
    """Tokenize command text, keeping quoted spans together without quotes."""
    return [quoted or bare for quoted, bare in TOKEN_RE.findall(text)]


def parse_command(content: str, prefix: str, keyword: str) -> Optional[ParsedCommand]:
    """Match ``content`` against the literal ``prefix + keyword``.

    The comparison is a plain, case-sensitive ``startswith``. On a match the
    text after ``prefix + keyword`` is tokenized into the args.
    """
    head = prefix + keyword
    if not content.startswith(head):
        return None
    rest = content[len(head):].strip()
    return ParsedCommand(keyword=keyword, args=parse_arguments(rest), rest=rest)


def parse_slot(token: Optional[str]) -> Optional[int]:
    """Return a positive slot number, or None when the token isn't one."""
    if token is None:
        return None
    token = token.strip()
    if not NUMBER_RE.match(token):
        return None
    slot = int(token)
    return slot if slot >= 1 else None


def parse_count(token: Optional[str]) -> Optional[int]:
    """Positive message count for bulk deletion."""
    return parse_slot(token)


def parse_color(token: str) -> Tuple[bool, Optional[int]]:
    """Parse ``#RRGGBB`` or ``default``.

    Returns (valid, value). ``default`` is valid with value None.
    """
    if token.lower() == DEFAULT_COLOR:
        return True, None
    if not COLOR_RE.match(token):
        return False, None
    return True, int(token[1:], 16)
