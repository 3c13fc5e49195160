"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    PLATFORM = "platform"


@dataclass
class ParsedCommand:
    """Matched command keyword (prefix removed) plus the tokens after it."""

    keyword: str
    args: List[str] = field(default_factory=list)
    rest: str = ""  # raw text after the keyword


@dataclass
class CommandResult:
    """Outcome of a handler: what to reply, and why it failed if it did."""

    handled: bool = True
    reply: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.handled and self.error_kind is None

    @classmethod
    def ignored(cls) -> "CommandResult":
        return cls(handled=False)

    @classmethod
    def failure(cls, kind: ErrorKind, reply: Optional[str] = None) -> "CommandResult":
        return cls(handled=True, reply=reply, error_kind=kind)
