"""FastAPI status app — read-only view of the bots and the role slot store."""

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from meowbots.config import __version__
from meowbots.domain.role_slots import RoleSlotStore


class StatusResponse(BaseModel):
    version: str
    bots: Dict[str, bool]
    users: int
    roles: int


class UserRolesResponse(BaseModel):
    user_id: str
    slots: Dict[str, str]


def create_app(
    store: RoleSlotStore,
    bots: Optional[Dict[str, Any]] = None,
) -> FastAPI:
    """Build the status app. ``bots`` maps bot name -> client with a ``ready`` flag."""
    app = FastAPI(title="meow-bots status")
    registry: Dict[str, Any] = bots if bots is not None else {}

    @app.get("/status", response_model=StatusResponse)
    async def status():
        """Bot readiness and role slot totals"""
        return StatusResponse(
            version=__version__,
            bots={name: bool(getattr(bot, "ready", False)) for name, bot in registry.items()},
            users=len(store.users()),
            roles=store.role_count(),
        )

    @app.get("/roles/{user_id}", response_model=UserRolesResponse)
    async def user_roles(user_id: str):
        slots = store.slots(user_id)
        if not slots:
            raise HTTPException(status_code=404, detail="No roles for this user")
        return UserRolesResponse(
            user_id=user_id,
            slots={str(slot): role_id for slot, role_id in sorted(slots.items())},
        )

    return app
