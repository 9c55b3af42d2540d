"""
Rune-level CESU-8 and UTF-8 encoding tables.

CESU-8 is the text encoding of the HANA wire protocol. It is identical to
UTF-8 for codepoints up to U+FFFF. Codepoints above U+FFFF are written as the
UTF-16 surrogate pair of the codepoint, each surrogate encoded as its own
3-byte unit (6 bytes in total instead of the 4 bytes UTF-8 uses).

Byte layout of the encoded forms:
- 1 byte:  0xxxxxxx                                (U+0000..U+007F)
- 2 bytes: 110xxxxx 10xxxxxx                       (U+0080..U+07FF)
- 3 bytes: 1110xxxx 10xxxxxx 10xxxxxx              (U+0800..U+FFFF)
- UTF-8 4 bytes:  11110xxx 10xxxxxx 10xxxxxx 10xxxxxx
- CESU-8 6 bytes: 11101101 1010xxxx 10xxxxxx 11101101 1011xxxx 10xxxxxx

Decoding is strict on both sides: overlong forms, codepoints above U+10FFFF
and lone surrogates are malformed.
"""

from __future__ import annotations

from ..exceptions import InvalidUtf8Error, TruncatedInputError

Buffer = bytes | bytearray | memoryview

RUNE_SELF = 0x80
MAX_RUNE = 0x10FFFF
UTF8_MAX = 4
CESU8_MAX = 6

SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF
LOW_SURROGATE_MIN = 0xDC00
SURROGATE_SELF = 0x10000

# Scan states returned by scan_rune and scan_utf8_rune
FULL = 0
SHORT = 1
INVALID = 2


def _accept_table(overrides: dict[int, tuple[int, int, int]]) -> tuple[tuple[int, int, int], ...]:
    """Build a 256 entry table of (size, second byte low, second byte high) per lead byte."""
    table = [(0, 0, 0)] * 256
    for lead in range(0xC2, 0xE0):
        table[lead] = (2, 0x80, 0xBF)
    for lead in range(0xE1, 0xF0):
        table[lead] = (3, 0x80, 0xBF)
    table[0xE0] = (3, 0xA0, 0xBF)
    for lead, entry in overrides.items():
        table[lead] = entry
    return tuple(table)


_UTF8_ACCEPT = _accept_table(
    {
        0xED: (3, 0x80, 0x9F),
        0xF0: (4, 0x90, 0xBF),
        0xF1: (4, 0x80, 0xBF),
        0xF2: (4, 0x80, 0xBF),
        0xF3: (4, 0x80, 0xBF),
        0xF4: (4, 0x80, 0x8F),
    }
)

# CESU-8 units may encode surrogates; 4-byte forms are not allowed.
_CESU8_ACCEPT = _accept_table({})

# A unit following a high surrogate must be a low surrogate (ED B0..BF xx).
_LOW_SURROGATE_ACCEPT = tuple((3, 0xB0, 0xBF) if lead == 0xED else (0, 0, 0) for lead in range(256))


def _scan(buf: Buffer, offset: int, accept: tuple[tuple[int, int, int], ...]) -> tuple[int | None, int, int]:
    """
    Scan one encoded unit.

    Returns (codepoint, n, state). For incomplete and malformed units the
    codepoint is None and n is the length of the valid prefix (at least 1
    for a malformed unit).
    """
    end = len(buf)
    if offset >= end:
        return None, 0, SHORT
    lead = buf[offset]
    if lead < RUNE_SELF:
        return lead, 1, FULL
    size, low, high = accept[lead]
    if size == 0:
        return None, 1, INVALID
    cp = lead & (0x7F >> size)
    for k in range(1, size):
        if offset + k >= end:
            return None, k, SHORT
        b = buf[offset + k]
        if k == 1:
            valid = low <= b <= high
        else:
            valid = 0x80 <= b <= 0xBF
        if not valid:
            return None, k, INVALID
        cp = (cp << 6) | (b & 0x3F)
    return cp, size, FULL


def _scan_cesu8(buf: Buffer, offset: int) -> tuple[int | None, int, int]:
    cp, n, state = _scan(buf, offset, _CESU8_ACCEPT)
    if state != FULL or not SURROGATE_MIN <= cp <= SURROGATE_MAX:
        return cp, n, state
    if cp >= LOW_SURROGATE_MIN:
        return None, n, INVALID
    low, m, low_state = _scan(buf, offset + n, _LOW_SURROGATE_ACCEPT)
    if low_state == SHORT:
        return None, n + m, SHORT
    if low_state == INVALID or low < LOW_SURROGATE_MIN:
        return None, n, INVALID
    return SURROGATE_SELF + ((cp - SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN), n + m, FULL


def _pack(cp: int) -> bytes:
    """UTF-8 style packing of a single value up to U+10FFFF, surrogates included."""
    if cp < 0x80:
        return bytes((cp,))
    if cp < 0x800:
        return bytes((0xC0 | (cp >> 6), 0x80 | (cp & 0x3F)))
    if cp < 0x10000:
        return bytes((0xE0 | (cp >> 12), 0x80 | ((cp >> 6) & 0x3F), 0x80 | (cp & 0x3F)))
    return bytes(
        (
            0xF0 | (cp >> 18),
            0x80 | ((cp >> 12) & 0x3F),
            0x80 | ((cp >> 6) & 0x3F),
            0x80 | (cp & 0x3F),
        )
    )


def _write(buf: bytearray | memoryview, offset: int, run: bytes) -> int:
    n = len(run)
    if len(buf) - offset < n:
        raise ValueError(f"buffer too small: need {n} bytes at offset {offset}")
    buf[offset : offset + n] = run
    return n


# ── CESU-8 ──────────────────────────────────────────────────────────


def rune_len(cp: int) -> int:
    """Return the number of bytes required to CESU-8 encode cp, or -1 if cp has no encoding."""
    if cp < 0:
        return -1
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if SURROGATE_MIN <= cp <= SURROGATE_MAX:
        return -1
    if cp < 0x10000:
        return 3
    if cp <= MAX_RUNE:
        return CESU8_MAX
    return -1


def rune_bytes(cp: int) -> bytes:
    """
    Return the CESU-8 encoding of a single codepoint.

    Raises:
        ValueError: If cp is a surrogate or outside [0, U+10FFFF]
    """
    if rune_len(cp) == -1:
        raise ValueError(f"codepoint {cp:#x} has no CESU-8 encoding")
    if cp < SURROGATE_SELF:
        return _pack(cp)
    cp -= SURROGATE_SELF
    return _pack(SURROGATE_MIN + (cp >> 10)) + _pack(LOW_SURROGATE_MIN + (cp & 0x3FF))


def encode_rune(buf: bytearray | memoryview, offset: int, cp: int) -> int:
    """
    Write the CESU-8 encoding of cp into buf at offset.

    Args:
        buf: Writable destination buffer
        offset: Position of the first byte to write
        cp: Codepoint to encode

    Returns:
        Number of bytes written

    Raises:
        ValueError: If cp cannot be encoded or buf has no room for it
    """
    return _write(buf, offset, rune_bytes(cp))


def scan_rune(buf: Buffer, offset: int = 0) -> tuple[int | None, int, int]:
    """
    Scan the CESU-8 run starting at offset in a single pass.

    Returns:
        (codepoint, size, state) with state FULL, SHORT (valid but incomplete
        prefix) or INVALID. The codepoint is None unless state is FULL.
    """
    return _scan_cesu8(buf, offset)


def decode_rune(buf: Buffer, offset: int = 0) -> tuple[int | None, int]:
    """
    Decode the CESU-8 run starting at offset.

    A high surrogate unit followed by a low surrogate unit decodes to one
    supplementary codepoint spanning 6 bytes.

    Returns:
        (codepoint, size). The codepoint is None for a malformed or truncated
        run; size is then the length of the valid prefix (0 for empty input).
    """
    cp, n, state = _scan_cesu8(buf, offset)
    if state != FULL:
        return None, n
    return cp, n


def full_rune(buf: Buffer, offset: int = 0) -> bool:
    """Report whether the bytes at offset hold a complete CESU-8 run or an already invalid one."""
    return _scan_cesu8(buf, offset)[2] != SHORT


def size(buf: Buffer) -> int:
    """
    Return the CESU-8 length of UTF-8 encoded bytes.

    Raises:
        InvalidUtf8Error: If buf is not valid UTF-8
        TruncatedInputError: If buf ends inside a multi-byte run
    """
    total = 0
    i = 0
    end = len(buf)
    while i < end:
        _, n, state = _scan(buf, i, _UTF8_ACCEPT)
        if state == SHORT:
            raise TruncatedInputError(f"truncated input at pos: {i}", i)
        if state == INVALID:
            raise InvalidUtf8Error(i)
        total += CESU8_MAX if n == UTF8_MAX else n
        i += n
    return total


def string_size(text: str) -> int:
    """Return the CESU-8 length of text."""
    total = 0
    for ch in text:
        n = rune_len(ord(ch))
        if n == -1:
            raise ValueError(f"codepoint {ord(ch):#x} has no CESU-8 encoding")
        total += n
    return total


# ── UTF-8 ───────────────────────────────────────────────────────────


def utf8_rune_len(cp: int) -> int:
    """Return the number of bytes required to UTF-8 encode cp, or -1 if cp has no encoding."""
    if cp < 0:
        return -1
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if SURROGATE_MIN <= cp <= SURROGATE_MAX:
        return -1
    if cp < 0x10000:
        return 3
    if cp <= MAX_RUNE:
        return UTF8_MAX
    return -1


def utf8_rune_bytes(cp: int) -> bytes:
    """Return the UTF-8 encoding of a single codepoint."""
    if utf8_rune_len(cp) == -1:
        raise ValueError(f"codepoint {cp:#x} has no UTF-8 encoding")
    return _pack(cp)


def encode_utf8_rune(buf: bytearray | memoryview, offset: int, cp: int) -> int:
    """Write the UTF-8 encoding of cp into buf at offset and return the number of bytes written."""
    return _write(buf, offset, utf8_rune_bytes(cp))


def scan_utf8_rune(buf: Buffer, offset: int = 0) -> tuple[int | None, int, int]:
    """Scan the UTF-8 run starting at offset in a single pass. Same return contract as scan_rune."""
    return _scan(buf, offset, _UTF8_ACCEPT)


def decode_utf8_rune(buf: Buffer, offset: int = 0) -> tuple[int | None, int]:
    """Decode the UTF-8 run starting at offset. Same return contract as decode_rune."""
    cp, n, state = _scan(buf, offset, _UTF8_ACCEPT)
    if state != FULL:
        return None, n
    return cp, n


def full_utf8_rune(buf: Buffer, offset: int = 0) -> bool:
    """Report whether the bytes at offset hold a complete UTF-8 run or an already invalid one."""
    return _scan(buf, offset, _UTF8_ACCEPT)[2] != SHORT


__all__ = [
    "RUNE_SELF",
    "MAX_RUNE",
    "UTF8_MAX",
    "CESU8_MAX",
    "FULL",
    "SHORT",
    "INVALID",
    "rune_len",
    "rune_bytes",
    "scan_rune",
    "encode_rune",
    "decode_rune",
    "full_rune",
    "size",
    "string_size",
    "utf8_rune_len",
    "utf8_rune_bytes",
    "scan_utf8_rune",
    "encode_utf8_rune",
    "decode_utf8_rune",
    "full_utf8_rune",
]
