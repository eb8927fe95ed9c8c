"""Unit tests for in-place Shift_JIS to UTF-8 transcoding."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from shiftjis2utf8.adapters.detection import Utf8Detector
from shiftjis2utf8.adapters.transcoding import ShiftJisConverter
from shiftjis2utf8.errors import ConversionError, DecodeError

TEXT = "変換テスト：①ｶﾀｶﾅ\r\n二行目\n"


def test_convert_rewrites_file_as_utf8(tmp_path: Path) -> None:
    path = tmp_path / "sjis.txt"
    raw = TEXT.encode("cp932")
    path.write_bytes(raw)

    report = ShiftJisConverter().convert(path)

    assert path.read_bytes() == TEXT.encode("utf-8")
    assert report.bytes_read == len(raw)
    assert report.bytes_written == len(TEXT.encode("utf-8"))
    assert Utf8Detector().is_canonical(path) is True


def test_malformed_input_leaves_file_untouched(tmp_path: Path) -> None:
    path = tmp_path / "broken.txt"
    raw = "前半".encode("cp932") + b"\x81\x20" + "後半".encode("cp932")
    path.write_bytes(raw)

    with pytest.raises(DecodeError):
        ShiftJisConverter().convert(path)

    assert path.read_bytes() == raw


def test_missing_file_raises_conversion_error(tmp_path: Path) -> None:
    with pytest.raises(ConversionError, match="Could not open file"):
        ShiftJisConverter().convert(tmp_path / "missing.txt")


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_permission_bits_are_preserved(tmp_path: Path) -> None:
    path = tmp_path / "script.sh"
    path.write_bytes("echo テスト\n".encode("cp932"))
    path.chmod(0o750)

    ShiftJisConverter().convert(path)

    assert stat.S_IMODE(path.stat().st_mode) == 0o750
