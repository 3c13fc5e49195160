"""Role slot store — which roles each user owns, keyed by slot number.

Pure domain logic, no framework dependencies. Persistence is delegated to
subclasses through ``save``; the base class keeps everything in memory.
"""

from typing import Dict, List, Optional

ORIGINAL_SLOT = 1


class RoleSlotStore:
    """In-memory ``{user_id: {slot: role_id}}`` mapping.

    Users with no slots are never kept around as empty entries.
    """

    def __init__(self, data: Optional[Dict[str, Dict[int, str]]] = None):
        self._data: Dict[str, Dict[int, str]] = {}
        for user_id, slots in (data or {}).items():
            for slot, role_id in slots.items():
                self.set(user_id, slot, role_id)

    def get(self, user_id: str, slot: int) -> Optional[str]:
        return self._data.get(str(user_id), {}).get(int(slot))

    def set(self, user_id: str, slot: int, role_id: str) -> None:
        slot = int(slot)
        if slot < ORIGINAL_SLOT:
            raise ValueError(f"slot must be >= {ORIGINAL_SLOT}, got {slot}")
        self._data.setdefault(str(user_id), {})[slot] = str(role_id)

    def delete(self, user_id: str, slot: int) -> bool:
        """Remove one slot. Returns True if it existed."""
        user_id = str(user_id)
        slots = self._data.get(user_id)
        if not slots or int(slot) not in slots:
            return False
        del slots[int(slot)]
        if not slots:
            del self._data[user_id]
        return True

    def slots(self, user_id: str) -> Dict[int, str]:
        return dict(self._data.get(str(user_id), {}))

    def highest_slot(self, user_id: str) -> Optional[int]:
        slots = self._data.get(str(user_id))
        return max(slots) if slots else None

    def users(self) -> List[str]:
        return list(self._data)

    def role_count(self) -> int:
        return sum(len(s) for s in self._data.values())

    def to_json(self) -> Dict[str, Dict[str, str]]:
        """JSON-shaped copy: slot keys become strings."""
        return {
            user_id: {str(slot): role_id for slot, role_id in sorted(slots.items())}
            for user_id, slots in self._data.items()
        }

    @classmethod
    def from_json(cls, raw: Dict[str, Dict[str, str]]) -> "RoleSlotStore":
        store = cls()
        store._load_json(raw)
        return store

    def _load_json(self, raw: Dict[str, Dict[str, str]]) -> None:
        self._data.clear()
        for user_id, slots in raw.items():
            if not isinstance(slots, dict):
                continue
            for slot, role_id in slots.items():
                try:
                    self.set(user_id, int(slot), role_id)
                except ValueError:
                    continue

    def save(self) -> None:
        """Persist the mapping. No-op for the in-memory store."""
