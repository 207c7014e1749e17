"""JSON-file cache for the access/refresh token pair.

Each CLI invocation is a fresh process, so the tokens are kept on disk
between commands. The file is removed on sign-out.
"""

from __future__ import annotations

import json
import os
from pathlib import Path


class SessionCache:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> tuple[str, str] | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return raw["access_token"], raw["refresh_token"]
        except (ValueError, KeyError, TypeError):
            # Unreadable cache is treated as signed out.
            self.clear()
            return None

    def save(self, access_token: str, refresh_token: str) -> None:
        self._ensure_dir()
        self._file_path.write_text(
            json.dumps(
                {"access_token": access_token, "refresh_token": refresh_token},
                indent=2,
            ) + "\n",
            encoding="utf-8",
        )
        os.chmod(self._file_path, 0o600)

    def clear(self) -> None:
        if self._file_path.exists():
            self._file_path.unlink()

    def _ensure_dir(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
