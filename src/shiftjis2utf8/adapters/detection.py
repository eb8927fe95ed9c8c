"""UTF-8 detection by prefix sampling."""

from __future__ import annotations

import codecs
from pathlib import Path

DEFAULT_SAMPLE_SIZE = 4096


def is_valid_utf8_sample(sample: bytes, *, final: bool) -> bool:
    """Strictly validate ``sample`` as UTF-8.

    With ``final=False`` an incomplete multi-byte sequence at the very end is
    buffered by the incremental decoder instead of being reported as invalid.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    try:
        decoder.decode(sample, final=final)
    except UnicodeDecodeError:
        return False
    return True


class Utf8Detector:
    """Classify files by validating a bounded prefix as UTF-8."""

    def __init__(self, sample_size: int = DEFAULT_SAMPLE_SIZE) -> None:
        if sample_size <= 0:
            raise ValueError("sample_size must be positive.")
        self.sample_size = sample_size

    def is_canonical(self, path: Path) -> bool:
        """Return ``True`` if the sampled prefix of ``path`` is valid UTF-8.

        Raises
        ------
        OSError
            If the file cannot be opened or read.
        """
        with Path(path).open("rb") as handle:
            sample = handle.read(self.sample_size)
        # A short read means the sample already ends at EOF.
        return is_valid_utf8_sample(sample, final=len(sample) < self.sample_size)
