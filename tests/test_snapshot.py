from __future__ import annotations

from pathlib import Path

from cache_manager.snapshot import SnapshotStatus, check_snapshot, format_snapshot


def test_format_sorts_by_code_point() -> None:
    snap = {"b": "2", "a": "1", "B": "3", "a10": "x y"}
    assert format_snapshot(snap) == "B=3\na=1\na10=x y\nb=2"


def test_format_empty() -> None:
    assert format_snapshot({}) == ""


def test_check_snapshot_creates_then_compares(tmp_path: Path) -> None:
    path = tmp_path / "state" / "cache_state_unlimited.txt"

    assert check_snapshot(path, "a=1\nb=2") is SnapshotStatus.CREATED
    assert path.read_bytes() == b"a=1\nb=2"
    assert check_snapshot(path, "a=1\nb=2") is SnapshotStatus.CONSISTENT
    assert check_snapshot(path, "a=1") is SnapshotStatus.INCONSISTENT


def test_check_snapshot_is_newline_exact(tmp_path: Path) -> None:
    path = tmp_path / "s.txt"
    path.write_bytes(b"a=1\r\nb=2")
    assert check_snapshot(path, "a=1\nb=2") is SnapshotStatus.INCONSISTENT
