# services/extraction/encoding.py
"""
Repair text that was decoded as Latin-1 while the bytes were really UTF-8.

Every character of such text has a code point 0–255 that equals the raw byte
it came from, so encoding it back as Latin-1 recovers the original bytes.
Characters above U+00FF cannot have come from that decode and are left alone.

Only call this on fields known to have been mis-decoded: correct non-ASCII
Latin-1 text (``"café"``) is *not* preserved.
"""

import re

_SINGLE_BYTE_RUN = re.compile(r"[\x00-\xff]+")

SOURCE_ENCODING = "latin-1"
TARGET_ENCODING = "utf-8"


def _repair_run(match: re.Match) -> str:
    raw = match.group(0).encode(SOURCE_ENCODING)
    # Invalid sequences become U+FFFD instead of raising.
    return raw.decode(TARGET_ENCODING, errors="replace")


def repair_encoding(s: str) -> str:
    """
    >>> repair_encoding("\\xe6\\x93\\x8d")
    '操'
    """
    if not s:
        return s
    return _SINGLE_BYTE_RUN.sub(_repair_run, s)
