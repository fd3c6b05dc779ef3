"""Tests for trackpack.discovery module."""

from __future__ import annotations

from pathlib import Path

import pytest

from trackpack.discovery import find_media_files, select_file
from trackpack.exceptions import DiscoveryError, SelectionError


class TestFindMediaFiles:
    def test_finds_nested_videos_in_walk_order(self, media_tree: Path) -> None:
        files = find_media_files(media_tree)
        assert files == [
            media_tree / "b_movie.mp4",
            media_tree / "clips" / "clip.mp4",
            media_tree / "movie.mp4",
        ]

    def test_subdirectory_files_sort_at_directory_name(self, tmp_path: Path) -> None:
        (tmp_path / "b.mp4").write_bytes(b"b")
        (tmp_path / "a_dir").mkdir()
        (tmp_path / "a_dir" / "x.mp4").write_bytes(b"x")
        (tmp_path / "c_dir").mkdir()
        (tmp_path / "c_dir" / "y.mp4").write_bytes(b"y")
        assert find_media_files(tmp_path) == [
            tmp_path / "a_dir" / "x.mp4",
            tmp_path / "b.mp4",
            tmp_path / "c_dir" / "y.mp4",
        ]

    def test_suffix_match_is_case_sensitive(self, media_tree: Path) -> None:
        names = [f.name for f in find_media_files(media_tree)]
        assert "shout.MP4" not in names

    def test_other_extension(self, media_tree: Path) -> None:
        files = find_media_files(media_tree, ".MP4")
        assert files == [media_tree / "shout.MP4"]

    def test_directories_are_not_candidates(self, media_tree: Path) -> None:
        files = find_media_files(media_tree)
        assert media_tree / "folder.mp4" not in files

    def test_empty_directory_returns_empty_list(self, tmp_path: Path) -> None:
        assert find_media_files(tmp_path) == []

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DiscoveryError):
            find_media_files(tmp_path / "missing")

    def test_discovery_error_is_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            find_media_files(tmp_path / "missing")


class TestSelectFile:
    @pytest.fixture
    def files(self) -> list[Path]:
        return [Path("a.mp4"), Path("b.mp4"), Path("c.mp4")]

    def test_one_based_index(self, files: list[Path]) -> None:
        assert select_file(files, "1") == Path("a.mp4")
        assert select_file(files, "3") == Path("c.mp4")

    def test_whitespace_is_ignored(self, files: list[Path]) -> None:
        assert select_file(files, "  2\n") == Path("b.mp4")

    @pytest.mark.parametrize("raw", ["0", "4", "-1", "99"])
    def test_out_of_range_raises(self, files: list[Path], raw: str) -> None:
        with pytest.raises(SelectionError, match="not between 1 and 3"):
            select_file(files, raw)

    def test_explicit_plus_sign(self, files: list[Path]) -> None:
        assert select_file(files, "+2") == Path("b.mp4")

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "one", "1_0", "\u0662", "+", "- 1"])
    def test_non_integer_raises(self, files: list[Path], raw: str) -> None:
        with pytest.raises(SelectionError, match="not a number"):
            select_file(files, raw)
