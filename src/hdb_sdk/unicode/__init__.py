"""
HDB SDK Unicode Module.

Converts text between UTF-8 and CESU-8, the encoding the HANA wire protocol
uses for character data.

The transformers in :mod:`.transform` work on caller supplied buffers and can
be driven chunk by chunk. The helpers below convert a complete value in one
call and raise on malformed or truncated input.
"""

import logging

from ..exceptions import InternalTransformError, InvalidCesu8Error, InvalidUtf8Error, TruncatedInputError
from . import cesu8
from .cesu8 import Buffer
from .transform import (
    CESU8_TO_UTF8,
    UTF8_TO_CESU8,
    Cesu8ToUtf8Transformer,
    Transformer,
    TransformResult,
    TransformStatus,
    Utf8ToCesu8Transformer,
)

logger = logging.getLogger(__name__)


def _run(transformer: Transformer, data: Buffer, capacity: int) -> bytes:
    dst = bytearray(capacity)
    result = transformer.transform(dst, data, at_eof=True)
    if result.status == TransformStatus.SHORT_SRC:
        logger.debug(f"Input truncated at pos {result.n_src} of {len(data)}")
        raise TruncatedInputError(f"truncated input at pos: {result.n_src}", result.n_src)
    if result.status == TransformStatus.INVALID_SOURCE:
        if isinstance(result.error, InvalidCesu8Error):
            raise result.error
        raise InvalidUtf8Error(result.n_src)
    if result.status == TransformStatus.SHORT_DST:
        # capacity is the worst case growth
        raise InternalTransformError(f"destination of {capacity} bytes too small for {len(data)} source bytes")
    return bytes(dst[: result.n_dst])


def utf8_to_cesu8(data: Buffer) -> bytes:
    """
    Convert complete UTF-8 bytes to CESU-8.

    Args:
        data: UTF-8 encoded bytes

    Returns:
        CESU-8 encoded bytes

    Raises:
        InvalidUtf8Error: If data is not valid UTF-8
        TruncatedInputError: If data ends inside a multi-byte run
    """
    # A 4 byte UTF-8 run grows to 6 bytes; nothing else grows.
    return _run(UTF8_TO_CESU8, data, (len(data) * 3 + 1) // 2)


def cesu8_to_utf8(data: Buffer) -> bytes:
    """
    Convert complete CESU-8 bytes to UTF-8.

    Raises:
        InvalidCesu8Error: If data is not valid CESU-8
        TruncatedInputError: If data ends inside a run or surrogate pair
    """
    return _run(CESU8_TO_UTF8, data, len(data))


def encode(text: str) -> bytes:
    """Encode text as CESU-8."""
    return utf8_to_cesu8(text.encode("utf-8"))


def decode(data: Buffer) -> str:
    """Decode CESU-8 bytes to text."""
    return cesu8_to_utf8(data).decode("utf-8")


__all__ = [
    "cesu8",
    "Transformer",
    "TransformResult",
    "TransformStatus",
    "Utf8ToCesu8Transformer",
    "Cesu8ToUtf8Transformer",
    "UTF8_TO_CESU8",
    "CESU8_TO_UTF8",
    "utf8_to_cesu8",
    "cesu8_to_utf8",
    "encode",
    "decode",
]
