"""
trackpack.cli - Typer CLI entry point.

Interactive flow: pick a video from a numbered menu, type the track list,
then extract and zip the audio tracks.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackpack import __version__
from trackpack.config import build_config
from trackpack.discovery import find_media_files, select_file
from trackpack.exceptions import ConfigError, TrackpackError
from trackpack.logging import configure_logging
from trackpack.pipeline import run_pipeline
from trackpack.tracks import parse_track_specs
from trackpack.utils import format_size

app = typer.Typer(
    name="trackpack",
    help="Extract named audio tracks from MP4 files with FFmpeg and zip them.",
    add_completion=False,
)
console = Console()

TRACKS_EXAMPLE = "[{'rownum': 1, 'typeName': 'english'}]"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"trackpack {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Trackpack - extract named audio tracks from MP4 files and zip them."""
    pass


def read_line(prompt: str) -> str:
    """Print a prompt and read one line from stdin ("" at end of input)."""
    console.print(prompt, end="")
    return sys.stdin.readline().strip()


def wait_for_exit(pause: bool) -> None:
    """Hold the terminal open until the user presses Enter."""
    if not pause:
        return
    console.print("Press Enter to exit...")
    sys.stdin.readline()


def abort(message: str, pause: bool) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    wait_for_exit(pause)
    raise typer.Exit(1)


def candidates_table(files: list[Path], root: Path) -> Table:
    table = Table(title="Video Files")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("File", style="green", overflow="fold")
    table.add_column("Size", style="yellow")
    for number, path in enumerate(files, start=1):
        table.add_row(str(number), escape(str(path.relative_to(root))), format_size(path))
    return table


@app.command("run")
def run_command(
    path: str = typer.Option(".", "--dir", "-d", help="Directory to scan for videos"),
    ffmpeg: str | None = typer.Option(
        None, "--ffmpeg", help="FFmpeg binary (default: ./ffmpeg, ./ffmpeg.exe on Windows)"
    ),
    extension: str | None = typer.Option(
        None, "--extension", "-e", help="Video file extension to look for (default: .mp4)"
    ),
    audio_format: str | None = typer.Option(
        None, "--format", "-f", help="Audio output format (default: mp3)"
    ),
    bitrate: str | None = typer.Option(None, "--bitrate", "-b", help="Audio bitrate (default: 129k)"),
    pause: bool = typer.Option(
        True, "--pause/--no-pause", help="Wait for Enter before exiting"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """Pick a video, extract its audio tracks, and zip them.

    Prompts for the video number and for the track list, e.g.
    [{'rownum': 1, 'typeName': 'english'}]. Stream 0:1 is always extracted
    first as bz.mp3; each track then maps stream rownum + 1 to <typeName>.mp3.
    """
    configure_logging(verbose)

    try:
        config = build_config(
            ffmpeg_binary=ffmpeg,
            media_extension=extension,
            audio_format=audio_format,
            audio_bitrate=bitrate,
            pause_on_exit=pause,
        )
    except ConfigError as e:
        abort(f"Invalid option: {e}", pause=False)

    root = Path(path)

    try:
        files = find_media_files(root, config.media_extension)
    except TrackpackError as e:
        abort(str(e), config.pause_on_exit)

    if not files:
        console.print(f"[yellow]No {config.media_extension} files found in {escape(str(root))}[/yellow]")
        wait_for_exit(config.pause_on_exit)
        raise typer.Exit(0)

    console.print(candidates_table(files, root))

    try:
        source = select_file(files, read_line("Enter the number of the video file: "))
    except TrackpackError as e:
        abort(str(e), config.pause_on_exit)

    console.print(f"[dim]Example: {escape(TRACKS_EXAMPLE)}[/dim]")

    try:
        tracks = parse_track_specs(read_line("Enter the track list (JSON): "))
    except TrackpackError as e:
        abort(str(e), config.pause_on_exit)

    try:
        result = run_pipeline(source, tracks, root, config, console=console)
    except TrackpackError as e:
        abort(str(e), config.pause_on_exit)

    table = Table(title="Extracted Audio")
    table.add_column("File", style="cyan")
    table.add_column("Size", style="green")
    for audio_file in result["audio_files"]:
        table.add_row(escape(audio_file.name), format_size(audio_file))
    console.print(table)

    console.print(
        f"[green]✓[/green] Packed {len(result['audio_files'])} audio file(s) into "
        f"{escape(str(result['archive']))}"
    )
    wait_for_exit(config.pause_on_exit)


@app.command("list")
def list_command(
    path: str = typer.Option(".", "--dir", "-d", help="Directory to scan for videos"),
    extension: str = typer.Option(".mp4", "--extension", "-e", help="Video file extension"),
) -> None:
    """List the video files the run command would offer."""
    try:
        config = build_config(media_extension=extension)
        root = Path(path)
        files = find_media_files(root, config.media_extension)
    except TrackpackError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not files:
        console.print(f"[yellow]No {extension} files found in {escape(path)}[/yellow]")
        return

    console.print(candidates_table(files, root))


if __name__ == "__main__":
    app()
