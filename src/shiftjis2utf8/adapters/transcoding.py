"""In-place Shift_JIS to UTF-8 transcoding."""

from __future__ import annotations

import logging
from pathlib import Path

from shiftjis2utf8.application.results import ConversionReport
from shiftjis2utf8.errors import ConversionError, DecodeError

logger = logging.getLogger(__name__)

LEGACY_ENCODING = "cp932"
CANONICAL_ENCODING = "utf-8"


class ShiftJisConverter:
    """Decode whole files from the legacy encoding and rewrite them as UTF-8.

    Parameters
    ----------
    source_encoding : str, default="cp932"
        Python codec name of the legacy encoding (Windows Shift_JIS).
    """

    def __init__(self, source_encoding: str = LEGACY_ENCODING) -> None:
        self.source_encoding = source_encoding

    def convert(self, path: Path) -> ConversionReport:
        """Rewrite ``path`` as UTF-8.

        The file is left untouched unless decoding succeeds. Writing truncates
        the existing file, so its permission bits are kept; a failure during
        the write can leave partial content behind.

        Raises
        ------
        DecodeError
            If the content is not valid in the legacy encoding.
        ConversionError
            If the file cannot be read or written.
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConversionError(f"Could not open file: {exc}") from exc

        try:
            text = raw.decode(self.source_encoding, errors="strict")
        except UnicodeDecodeError as exc:
            raise DecodeError(
                f"Invalid {self.source_encoding} byte sequence at offset {exc.start}"
            ) from exc

        payload = text.encode(CANONICAL_ENCODING)
        try:
            with path.open("wb") as handle:
                handle.write(payload)
        except OSError as exc:
            raise ConversionError(f"Failed to write file: {exc}") from exc

        logger.debug("rewrote %s: %d -> %d bytes", path, len(raw), len(payload))
        return ConversionReport(
            path=str(path), bytes_read=len(raw), bytes_written=len(payload)
        )
