"""
trackpack.utils - Display helpers for the menu, summary table and
command echo.
"""

from __future__ import annotations

import shlex
from pathlib import Path


def format_size(path: Path) -> str:
    """Human-readable size of a file, or "-" when it is missing."""
    if not path.is_file():
        return "-"
    size = float(path.stat().st_size)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            break
        size /= 1024
    else:
        unit = "TB"
    return f"{size:.1f} {unit}"


def format_command(cmd: list[str]) -> str:
    """Render a command line the way a shell would accept it."""
    return " ".join(shlex.quote(str(part)) for part in cmd)
