"""
Pytest configuration for HDB SDK tests.

Shared helpers are defined here so every test file can import them:
- ``to_cesu8`` builds expected CESU-8 bytes from Python's own UTF-16 and
  ``surrogatepass`` codecs, independently of the code under test.
"""

import sys

import pytest

_UTF16_NATIVE = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"

GRINNING_FACE = "\U0001f600"
GRINNING_FACE_UTF8 = b"\xf0\x9f\x98\x80"
GRINNING_FACE_CESU8 = b"\xed\xa0\xbd\xed\xb8\x80"


def to_cesu8(text: str) -> bytes:
    """Encode text as CESU-8 by splitting it into UTF-16 code units first."""
    units = memoryview(text.encode(_UTF16_NATIVE)).cast("H")
    return "".join(map(chr, units)).encode("utf-8", "surrogatepass")


@pytest.fixture
def mixed_text() -> str:
    """Text mixing ASCII, 2 and 3 byte runs and supplementary codepoints."""
    return f"HANA {GRINNING_FACE} café €10 \U00010348 end"
