"""
trackpack.extract.audio - FFmpeg audio track extraction.

Builds one extraction job per track and runs FFmpeg for each, in order:
- the default audio stream (0:1) as bz.mp3, always first
- stream ordinal + 1 as <label>.mp3 for every declared track

FFmpeg output is not captured; it streams straight to the terminal.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from trackpack.config import TrackpackConfig
from trackpack.exceptions import ExternalProcessError
from trackpack.logging import logger
from trackpack.tracks import TrackSpec
from trackpack.utils import format_command


@dataclass(frozen=True)
class ExtractionJob:
    """One FFmpeg invocation: a source stream mapped to an output file."""

    source_file: Path
    stream_index: int
    output_path: Path


def build_jobs(
    source: Path,
    tracks: list[TrackSpec],
    output_dir: Path,
    config: TrackpackConfig,
) -> list[ExtractionJob]:
    """Build the default job followed by one job per track, in track order."""
    ext = config.audio_format
    jobs = [
        ExtractionJob(
            source_file=source,
            stream_index=config.default_stream_index,
            output_path=output_dir / f"{config.default_label}.{ext}",
        )
    ]
    for track in tracks:
        jobs.append(
            ExtractionJob(
                source_file=source,
                stream_index=track.stream_index,
                output_path=output_dir / f"{track.label}.{ext}",
            )
        )
    return jobs


def build_command(job: ExtractionJob, config: TrackpackConfig) -> list[str]:
    """Build the FFmpeg argument list for a job."""
    return [
        config.ffmpeg_binary,
        "-i",
        str(job.source_file),
        "-map",
        f"0:{job.stream_index}",
        "-b:a",
        config.audio_bitrate,
        "-f",
        config.audio_format,
        "-vn",
        str(job.output_path),
    ]


def run_job(job: ExtractionJob, config: TrackpackConfig, console=None) -> Path:
    """Run FFmpeg for a single job.

    Args:
        job: Extraction job to run
        config: Run configuration
        console: Optional rich console used to echo the command

    Returns:
        Path of the produced audio file

    Raises:
        ExternalProcessError: If FFmpeg cannot be launched or exits non-zero
    """
    cmd = build_command(job, config)
    command_line = format_command(cmd)

    if console:
        console.print(f"[dim]Running: {escape(command_line)}[/dim]")
    logger.debug("Running %s", command_line)

    try:
        proc = subprocess.run(cmd)
    except OSError as e:
        raise ExternalProcessError(cmd, f"Could not launch {cmd[0]}: {e}") from e

    if proc.returncode != 0:
        raise ExternalProcessError(
            cmd,
            f"FFmpeg exited with code {proc.returncode} extracting stream "
            f"0:{job.stream_index} to {job.output_path.name}",
            returncode=proc.returncode,
        )

    return job.output_path


def extract_tracks(
    source: Path,
    tracks: list[TrackSpec],
    output_dir: Path,
    config: TrackpackConfig,
    console=None,
) -> list[Path]:
    """Extract the default track and every declared track from a video.

    Jobs run one at a time. The first failure aborts the whole run.

    Args:
        source: Source video file
        tracks: Track specs, already sorted by ordinal
        output_dir: Directory receiving the audio files
        config: Run configuration
        console: Optional rich console for output

    Returns:
        Produced audio files, default track first

    Raises:
        ExternalProcessError: If any FFmpeg invocation fails
    """
    audio_files: list[Path] = []
    for job in build_jobs(source, tracks, output_dir, config):
        audio_files.append(run_job(job, config, console=console))
    return audio_files
