"""
trackpack.pipeline - Extraction and packaging for one selected video.

Creates the per-video output directory, extracts every track, and zips
the results. Any failure aborts the run; audio files already written
stay on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from trackpack.archive import archive_path_for, write_archive
from trackpack.config import TrackpackConfig
from trackpack.exceptions import OutputDirectoryError
from trackpack.extract.audio import extract_tracks
from trackpack.logging import logger
from trackpack.tracks import TrackSpec, duplicate_labels


def output_dir_for(source: Path, root: Path) -> Path:
    """Output directory for a source video: ``<root>/<stem>``."""
    return root / source.stem


def prepare_output_dir(path: Path) -> Path:
    """Create the output directory if it does not exist.

    Raises:
        OutputDirectoryError: If the directory cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"Could not create output directory {path}: {e}") from e
    return path


def run_pipeline(
    source: Path,
    tracks: list[TrackSpec],
    root: Path,
    config: TrackpackConfig,
    console=None,
) -> dict[str, Any]:
    """Extract all tracks from a video and package them into a zip.

    Args:
        source: Selected source video
        tracks: Parsed track specs, sorted by ordinal
        root: Directory the output directory is created in
        config: Run configuration
        console: Optional rich console for output

    Returns:
        Dict with source, output_dir, audio_files and archive paths

    Raises:
        OutputDirectoryError: If the output directory cannot be created
        ExternalProcessError: If any FFmpeg invocation fails
        ArchiveError: If the zip cannot be written
    """
    output_dir = prepare_output_dir(output_dir_for(source, root))

    labels = [config.default_label] + [track.label for track in tracks]
    for label in duplicate_labels(labels):
        logger.warning("Label %r is used more than once; later tracks overwrite earlier files", label)

    audio_files = extract_tracks(source, tracks, output_dir, config, console=console)

    archive = write_archive(
        archive_path_for(output_dir, source.stem, config.archive_suffix),
        audio_files,
    )

    return {
        "source": source,
        "output_dir": output_dir,
        "audio_files": audio_files,
        "archive": archive,
    }
