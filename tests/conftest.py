"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


class FakeFFmpeg:
    """Stand-in for subprocess.run that records FFmpeg calls.

    Writes a small file at the output path (the last argument) unless the
    mapped stream is listed in ``fail_streams``.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.fail_streams: set[str] = set()
        self.returncode = 1

    def __call__(self, cmd, *args, **kwargs) -> subprocess.CompletedProcess:
        cmd = [str(part) for part in cmd]
        self.calls.append(cmd)
        stream = cmd[cmd.index("-map") + 1]
        if stream in self.fail_streams:
            return subprocess.CompletedProcess(cmd, self.returncode)
        Path(cmd[-1]).write_bytes(f"audio {stream}".encode())
        return subprocess.CompletedProcess(cmd, 0)

    @property
    def streams(self) -> list[str]:
        return [call[call.index("-map") + 1] for call in self.calls]

    @property
    def outputs(self) -> list[str]:
        return [Path(call[-1]).name for call in self.calls]


@pytest.fixture
def fake_ffmpeg(monkeypatch: pytest.MonkeyPatch) -> FakeFFmpeg:
    """Replace subprocess.run used by the extractor with a FakeFFmpeg."""
    fake = FakeFFmpeg()
    monkeypatch.setattr("trackpack.extract.audio.subprocess.run", fake)
    return fake


@pytest.fixture
def media_tree(tmp_path: Path) -> Path:
    """Create a directory of videos and unrelated files.

    Layout::

        videos/
            b_movie.mp4
            movie.mp4
            notes.txt
            shout.MP4
            clips/
                clip.mp4
            folder.mp4/
    """
    root = tmp_path / "videos"
    root.mkdir()
    (root / "movie.mp4").write_bytes(b"fake movie")
    (root / "b_movie.mp4").write_bytes(b"fake b movie")
    (root / "shout.MP4").write_bytes(b"upper case extension")
    (root / "notes.txt").write_text("not a video")
    (root / "clips").mkdir()
    (root / "clips" / "clip.mp4").write_bytes(b"fake clip")
    (root / "folder.mp4").mkdir()
    return root


@pytest.fixture
def single_video(tmp_path: Path) -> Path:
    """Create a directory holding exactly one video, movie.mp4."""
    root = tmp_path / "single"
    root.mkdir()
    (root / "movie.mp4").write_bytes(b"fake movie")
    return root


@pytest.fixture
def track_text() -> str:
    """Track list as a user would type it: single quotes, unsorted."""
    return (
        "[{'rownum': 3, 'typeName': 'commentary'}, "
        "{'rownum': 1, 'typeName': 'english'}, "
        "{'rownum': 2, 'typeName': 'french'}]"
    )
