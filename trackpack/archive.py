"""
trackpack.archive - Zip packaging of extracted audio files.
"""

from __future__ import annotations

import zipfile
from pathlib import Path

from trackpack.exceptions import ArchiveError
from trackpack.logging import logger


def archive_path_for(output_dir: Path, source_stem: str, suffix: str = "_output") -> Path:
    """Return ``<output_dir>/<source_stem><suffix>.zip``."""
    return output_dir / f"{source_stem}{suffix}.zip"


def write_archive(archive_path: Path, files: list[Path]) -> Path:
    """Write files into a new deflate-compressed zip archive.

    Entries are stored under their base names, in the order given.
    An existing archive at the same path is replaced; a partly written
    archive is removed on failure.

    Args:
        archive_path: Destination zip file
        files: Files to add

    Returns:
        The archive path

    Raises:
        ArchiveError: If the archive cannot be created or a file cannot be read
    """
    try:
        zf = zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED)
    except OSError as e:
        raise ArchiveError(f"Could not create archive {archive_path}: {e}") from e

    try:
        with zf:
            for path in files:
                logger.debug("Adding %s to %s", path.name, archive_path.name)
                zf.write(path, arcname=path.name)
    except OSError as e:
        # only the file opened above is removed
        archive_path.unlink(missing_ok=True)
        raise ArchiveError(f"Could not write archive {archive_path}: {e}") from e

    return archive_path
