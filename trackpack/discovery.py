"""
trackpack.discovery - Media file discovery and menu selection.

Walks the working directory for candidate videos and resolves the
user's 1-based menu choice to one of them.
"""

from __future__ import annotations

import os
from pathlib import Path

from trackpack.exceptions import DiscoveryError, SelectionError
from trackpack.logging import logger


def find_media_files(root: Path, extension: str = ".mp4") -> list[Path]:
    """Recursively find regular files whose name ends with ``extension``.

    The match is an exact, case-sensitive suffix match. The walk is
    depth-first in lexical name order, so a subdirectory's files appear
    where the subdirectory's name sorts among its siblings.

    Args:
        root: Directory to walk
        extension: File name suffix to match (default ".mp4")

    Returns:
        Matching paths joined onto ``root``, in traversal order

    Raises:
        DiscoveryError: If the tree cannot be walked
    """
    if not root.is_dir():
        raise DiscoveryError(f"Cannot scan {root}: not a directory")

    files: list[Path] = []
    _walk(root, extension, files)

    logger.debug("Found %d %s file(s) under %s", len(files), extension, root)
    return files


def _walk(directory: Path, extension: str, files: list[Path]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise DiscoveryError(f"Cannot scan directory tree: {e}") from e

    for entry in entries:
        path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            _walk(path, extension, files)
        elif entry.name.endswith(extension) and entry.is_file():
            files.append(path)


def select_file(files: list[Path], raw: str) -> Path:
    """Resolve a typed 1-based menu index to a candidate file.

    Raises:
        SelectionError: If the input is not an integer in 1..len(files)
    """
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise SelectionError(f"Invalid selection: {text!r} is not a number")
    index = int(text)

    if index < 1 or index > len(files):
        raise SelectionError(f"Invalid selection: {index} is not between 1 and {len(files)}")

    return files[index - 1]
