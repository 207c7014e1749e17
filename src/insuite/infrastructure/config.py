"""Runtime configuration, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_EMAIL_REDIRECT = "https://insuite.netlify.app/auth/callback"
DEFAULT_SESSION_FILE = Path.home() / ".insuite" / "session.json"


def _bool(val: str) -> bool:
    return val.strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    email_redirect_to: str = DEFAULT_EMAIL_REDIRECT
    session_file: Path = DEFAULT_SESSION_FILE
    compensate_failed_sales: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        session_file = os.getenv("INSUITE_SESSION_FILE")
        return cls(
            supabase_url=os.getenv("SUPABASE_URL"),
            supabase_key=os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY"),
            email_redirect_to=os.getenv("INSUITE_EMAIL_REDIRECT", DEFAULT_EMAIL_REDIRECT),
            session_file=Path(session_file).expanduser() if session_file else DEFAULT_SESSION_FILE,
            compensate_failed_sales=_bool(os.getenv("INSUITE_COMPENSATE_FAILED_SALES", "false")),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )
