"""Environment driven settings for the SongPad application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from songpad.core import BREAK_MARKER

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: Optional[str]) -> bool:
    if not value:
        return False
    return str(value).strip().lower() in _TRUTHY


def _env_port(value: Optional[str], default: int) -> int:
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return port if 0 < port < 65536 else default


@dataclass(frozen=True)
class AppConfig:
    break_marker: str = BREAK_MARKER
    log_level: Optional[str] = None
    share: bool = False
    server_name: str = "0.0.0.0"
    server_port: int = 7860

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from ``SONGPAD_*`` variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        defaults = cls()

        marker = (env.get("SONGPAD_BREAK_MARKER") or "").strip()
        log_level = (env.get("SONGPAD_LOG_LEVEL") or "").strip()
        server_name = (env.get("SONGPAD_SERVER_NAME") or "").strip()

        return cls(
            break_marker=marker or defaults.break_marker,
            log_level=log_level or None,
            share=_env_flag(env.get("SONGPAD_SHARE")),
            server_name=server_name or defaults.server_name,
            server_port=_env_port(env.get("SONGPAD_SERVER_PORT"), defaults.server_port),
        )


__all__ = ["AppConfig"]
