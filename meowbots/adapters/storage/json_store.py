"""JSON file-based role slot storage — implements RoleSlotStorePort."""

import json
import os
import sys
import tempfile
from pathlib import Path

from meowbots.domain.role_slots import RoleSlotStore


def _log(msg: str):
    print(msg, file=sys.stderr)


class JsonRoleSlotStore(RoleSlotStore):
    """RoleSlotStore that rewrites the whole mapping to one JSON file on save."""

    def __init__(self, path: str = "roleCache.json"):
        super().__init__()
        self._path = Path(path)
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Read the file into memory; a missing or broken file means empty."""
        if not self._path.exists():
            self._load_json({})
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except Exception as e:
            _log(f"Could not read role cache {self._path}: {e}")
            raw = {}
        self._load_json(raw if isinstance(raw, dict) else {})

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(self.to_json(), ensure_ascii=False, indent=2)
        # Atomic write
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self._path.parent), suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, str(self._path))
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
