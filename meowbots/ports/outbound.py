"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, runtime_checkable


@dataclass
class RoleInfo:
    """Snapshot of a platform role, referenced by its opaque id."""

    role_id: str
    name: str
    position: int
    color: Optional[int] = None


@dataclass
class PlatformResult:
    """Unified result type for chat platform operations."""

    success: bool
    role: Optional[RoleInfo] = None
    count: int = 0
    error: Optional[str] = None
    not_found: bool = False


@runtime_checkable
class GuildPort(Protocol):
    """Role operations on a single guild."""

    def find_role_by_name(self, name: str) -> Optional[RoleInfo]: ...

    async def fetch_role(self, role_id: str) -> PlatformResult: ...

    async def create_role(
        self, name: str, color: Optional[int], reason: Optional[str] = None,
    ) -> PlatformResult: ...

    async def edit_role(self, role_id: str, name: str, color: Optional[int]) -> PlatformResult: ...

    async def move_role(self, role_id: str, position: int) -> PlatformResult: ...

    async def delete_role(self, role_id: str, reason: Optional[str] = None) -> PlatformResult: ...


@runtime_checkable
class ChannelPort(Protocol):
    """Message operations on a single channel."""

    async def send(self, text: str) -> None: ...

    async def delete_recent(self, limit: int) -> PlatformResult: ...

    async def bulk_delete(self, limit: int) -> PlatformResult: ...


@runtime_checkable
class RoleSlotStorePort(Protocol):
    """Interface for the per-user role slot mapping."""

    def get(self, user_id: str, slot: int) -> Optional[str]: ...
    def set(self, user_id: str, slot: int, role_id: str) -> None: ...
    def delete(self, user_id: str, slot: int) -> bool: ...
    def slots(self, user_id: str) -> Dict[int, str]: ...
    def users(self) -> List[str]: ...
    def save(self) -> None: ...
