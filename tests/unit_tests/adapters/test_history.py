"""Unit tests for the flat-file history store."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from shiftjis2utf8.adapters import history as history_module
from shiftjis2utf8.adapters.history import FileHistoryStore, HistoryRecord, normalize_path
from shiftjis2utf8.errors import HistoryError, HomeDirectoryError


def test_load_missing_file_returns_empty_record(tmp_path: Path) -> None:
    record = FileHistoryStore(tmp_path / "history").load()
    assert len(record) == 0


def test_save_writes_one_path_per_line(tmp_path: Path) -> None:
    store = FileHistoryStore(tmp_path / "history")
    record = HistoryRecord()
    record.mark_converted("/data/b.txt")
    record.mark_converted("/data/a.txt")
    record.mark_converted("/data/a.txt")

    store.save(record)

    assert (tmp_path / "history").read_text(encoding="utf-8") == "/data/a.txt\n/data/b.txt\n"
    loaded = store.load()
    assert loaded.is_converted("/data/a.txt")
    assert loaded.is_converted("/data/b.txt")
    assert not loaded.is_converted("/data/A.txt")


def test_load_ignores_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "history"
    path.write_text("/x/one.txt\n\n/x/two.txt\n", encoding="utf-8")
    assert list(FileHistoryStore(path).load()) == ["/x/one.txt", "/x/two.txt"]


def test_save_failure_raises_history_error(tmp_path: Path) -> None:
    target = tmp_path / "as_dir"
    target.mkdir()
    with pytest.raises(HistoryError):
        FileHistoryStore(target).save(HistoryRecord(["/x"]))


def test_clear_removes_file_and_tolerates_missing(tmp_path: Path) -> None:
    path = tmp_path / "history"
    path.write_text("/x\n", encoding="utf-8")
    store = FileHistoryStore(path)

    store.clear()
    assert not path.exists()
    store.clear()


def test_default_location_is_under_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(history_module.Path, "home", classmethod(lambda cls: tmp_path))
    assert FileHistoryStore.default().path == tmp_path / ".local.shiftjis2utf8"


def test_unresolvable_home_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def _no_home(cls: type[Path]) -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(history_module.Path, "home", classmethod(_no_home))
    with pytest.raises(HomeDirectoryError):
        history_module.default_history_path()


def test_normalize_path_is_absolute(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert normalize_path("sub/../a.txt") == os.path.join(os.getcwd(), "a.txt")


def test_history_written_as_raw_bytes_is_loaded(tmp_path: Path) -> None:
    """Entries that are not valid UTF-8 load as the names os.walk reports."""
    raw_name = "テスト".encode("cp932") + b".txt"
    path = tmp_path / "history"
    path.write_bytes(b"/data/" + raw_name + b"\n/data/plain.txt\n")

    record = FileHistoryStore(path).load()

    assert record.is_converted("/data/" + os.fsdecode(raw_name))
    assert record.is_converted("/data/plain.txt")


def test_undecodable_paths_round_trip_through_save(tmp_path: Path) -> None:
    entry = "/data/" + os.fsdecode("表".encode("cp932") + b".log")
    path = tmp_path / "history"
    store = FileHistoryStore(path)

    store.save(HistoryRecord([entry]))

    assert path.read_bytes() == b"/data/" + "表".encode("cp932") + b".log\n"
    assert store.load().is_converted(entry)


def test_unencodable_entry_raises_history_error(tmp_path: Path) -> None:
    """A lone surrogate outside the escape range maps to HistoryError."""
    with pytest.raises(HistoryError):
        FileHistoryStore(tmp_path / "history").save(HistoryRecord(["/data/\ud800.txt"]))
