"""Buffer editing commands offered next to the editor."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional, Tuple

from songpad.core import BREAK_MARKER

__all__ = [
    "DEFAULT_EXPORT_NAME",
    "insert_break",
    "remove_blank_lines",
    "clear_buffer",
    "export_buffer",
]

DEFAULT_EXPORT_NAME = "lyrics.txt"

_export_dir: Optional[Path] = None


def insert_break(
    text: Optional[str],
    cursor: Optional[int] = None,
    marker: str = BREAK_MARKER,
) -> Tuple[str, int]:
    """Insert a section break at ``cursor`` and return the new text and cursor.

    ``cursor`` defaults to the end of the buffer and is clamped to it. The
    returned cursor sits right after the inserted marker line.
    """

    buffer = text or ""
    position = len(buffer) if cursor is None else min(max(0, int(cursor)), len(buffer))
    inserted = f"\n{marker}\n"
    return buffer[:position] + inserted + buffer[position:], position + len(inserted)


def remove_blank_lines(text: Optional[str], marker: str = BREAK_MARKER) -> str:
    """Drop whitespace-only lines.

    Lyric lines are kept as is. Break lines are kept and written as ``marker``
    without the surrounding whitespace.
    """

    kept = []
    for line in (text or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        kept.append(marker if trimmed == marker else line)
    return "\n".join(kept)


def clear_buffer() -> str:
    return ""


def _default_export_dir() -> Path:
    global _export_dir

    if _export_dir is None or not _export_dir.is_dir():
        _export_dir = Path(tempfile.mkdtemp(prefix="songpad-"))
    return _export_dir


def export_buffer(
    text: Optional[str],
    directory: Optional[Path | str] = None,
    filename: str = DEFAULT_EXPORT_NAME,
) -> Path:
    """Write ``text`` to ``filename`` under ``directory`` for download.

    When ``directory`` is omitted every export goes to one temporary
    directory created on first use, so repeated downloads overwrite the same
    file.
    """

    target_dir = Path(directory) if directory is not None else _default_export_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / filename
    target.write_text(text or "", encoding="utf-8")
    return target
