"""Ingest utilities shared by CLI commands.

Reading files is kept out of the parsing core: the adapters only ever see the
text of an export. This helper is the thin file-to-text step used by the CLI.
"""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

DEFAULT_ENCODING = "utf-8-sig"


def resolve_encoding(encoding: str | None = None) -> str:
    """Return ``encoding`` or ``CAMPAIGN_FINANCE_ENCODING`` or UTF-8 (BOM-tolerant)."""

    if encoding:
        return encoding
    env_val = (os.getenv("CAMPAIGN_FINANCE_ENCODING") or "").strip()
    return env_val or DEFAULT_ENCODING


def read_export(path: str | PathLike[str], encoding: str | None = None) -> str:
    """Read one export file into text.

    ``newline=""`` keeps line endings untouched so quoted newlines reach the
    tokenizer as written. ``FileNotFoundError``, ``PermissionError`` and
    ``UnicodeDecodeError`` propagate to the caller.
    """

    p = Path(path)
    with p.open(encoding=resolve_encoding(encoding), newline="") as f:
        return f.read()


__all__ = ["DEFAULT_ENCODING", "read_export", "resolve_encoding"]
