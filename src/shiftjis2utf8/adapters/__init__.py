"""Filesystem adapters implementing the application ports."""

from shiftjis2utf8.adapters.detection import Utf8Detector
from shiftjis2utf8.adapters.history import FileHistoryStore, HistoryRecord
from shiftjis2utf8.adapters.transcoding import ShiftJisConverter

__all__ = ["FileHistoryStore", "HistoryRecord", "ShiftJisConverter", "Utf8Detector"]
