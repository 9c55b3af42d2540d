"""
UTF-8 to CESU-8 and CESU-8 to UTF-8 transformers.

A transformer converts as much of a source buffer as fits into a destination
buffer and reports how far it got. It never writes a partial run and keeps no
state between calls, so the caller resumes a stream simply by calling again
from ``n_src`` with the unconsumed tail (plus any new bytes) and a drained or
larger destination.

Usage:
    dst = bytearray(64)
    result = UTF8_TO_CESU8.transform(dst, "grin \\U0001F600".encode())
    if result.status is TransformStatus.OK:
        payload = bytes(dst[: result.n_dst])
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from ..exceptions import EncodingError, InternalTransformError, InvalidCesu8Error, InvalidUtf8Error
from . import cesu8
from .cesu8 import FULL, RUNE_SELF, SHORT, Buffer

logger = logging.getLogger(__name__)


class TransformStatus(str, Enum):
    """Outcome of a single transform call."""

    OK = "ok"
    SHORT_DST = "short_dst"
    SHORT_SRC = "short_src"
    INVALID_SOURCE = "invalid_source"


@dataclass(frozen=True)
class TransformResult:
    """
    Result of a single transform call.

    Attributes:
        n_dst: Number of bytes written to the destination
        n_src: Number of bytes consumed from the source
        status: OK or the reason the scan stopped
        error: The encoding error for INVALID_SOURCE, None otherwise
    """

    n_dst: int
    n_src: int
    status: TransformStatus = TransformStatus.OK
    error: EncodingError | None = None

    @property
    def ok(self) -> bool:
        """Check if the whole source was transformed."""
        return self.status == TransformStatus.OK

    @property
    def is_short(self) -> bool:
        """Check if the call stalled on a buffer the caller can refill or enlarge."""
        return self.status in (TransformStatus.SHORT_DST, TransformStatus.SHORT_SRC)


class Transformer(ABC):
    """Base class of the stateless transformers."""

    __slots__ = ()

    @abstractmethod
    def transform(self, dst: bytearray | memoryview, src: Buffer, at_eof: bool = False) -> TransformResult:
        """
        Transform src into dst.

        Args:
            dst: Writable destination; its length is the available capacity
            src: Source bytes
            at_eof: Whether src is the final chunk of the stream. Accepted for
                interface compatibility; a truncated trailing run is reported
                as SHORT_SRC either way.

        Returns:
            TransformResult with the bytes written and consumed
        """

    def reset(self) -> None:
        """No-op: transformers hold no state between calls."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Utf8ToCesu8Transformer(Transformer):
    """Transforms UTF-8 into CESU-8."""

    __slots__ = ()

    def transform(self, dst: bytearray | memoryview, src: Buffer, at_eof: bool = False) -> TransformResult:
        i, j = 0, 0
        src_len, dst_len = len(src), len(dst)
        while i < src_len:
            b = src[i]
            if b < RUNE_SELF:
                if j >= dst_len:
                    return TransformResult(j, i, TransformStatus.SHORT_DST)
                dst[j] = b
                i += 1
                j += 1
                continue
            cp, n, state = cesu8.scan_utf8_rune(src, i)
            if state == SHORT:
                return TransformResult(j, i, TransformStatus.SHORT_SRC)
            if state != FULL or cp is None:
                logger.debug(f"Invalid UTF-8 at pos {i}")
                # fieldless: the fault offset is n_src
                return TransformResult(j, i, TransformStatus.INVALID_SOURCE, InvalidUtf8Error())
            m = cesu8.rune_len(cp)
            if m == -1:
                raise InternalTransformError("internal UTF-8 to CESU-8 transformation error")
            if j + m > dst_len:
                return TransformResult(j, i, TransformStatus.SHORT_DST)
            dst[j : j + m] = cesu8.rune_bytes(cp)
            i += n
            j += m
        return TransformResult(j, i)


class Cesu8ToUtf8Transformer(Transformer):
    """Transforms CESU-8 into UTF-8."""

    __slots__ = ()

    def transform(self, dst: bytearray | memoryview, src: Buffer, at_eof: bool = False) -> TransformResult:
        i, j = 0, 0
        src_len, dst_len = len(src), len(dst)
        while i < src_len:
            b = src[i]
            if b < RUNE_SELF:
                if j >= dst_len:
                    return TransformResult(j, i, TransformStatus.SHORT_DST)
                dst[j] = b
                i += 1
                j += 1
                continue
            cp, n, state = cesu8.scan_rune(src, i)
            if state == SHORT:
                return TransformResult(j, i, TransformStatus.SHORT_SRC)
            if state != FULL or cp is None:
                # error.value must not alias src
                error = InvalidCesu8Error(i, bytes(src[i : i + n]))
                logger.debug(f"Invalid CESU-8 at pos {i}: {error.value.hex()}")
                return TransformResult(j, i, TransformStatus.INVALID_SOURCE, error)
            m = cesu8.utf8_rune_len(cp)
            if m == -1:
                raise InternalTransformError("internal CESU-8 to UTF-8 transformation error")
            if j + m > dst_len:
                return TransformResult(j, i, TransformStatus.SHORT_DST)
            dst[j : j + m] = cesu8.utf8_rune_bytes(cp)
            i += n
            j += m
        return TransformResult(j, i)


UTF8_TO_CESU8 = Utf8ToCesu8Transformer()
CESU8_TO_UTF8 = Cesu8ToUtf8Transformer()


__all__ = [
    "TransformStatus",
    "TransformResult",
    "Transformer",
    "Utf8ToCesu8Transformer",
    "Cesu8ToUtf8Transformer",
    "UTF8_TO_CESU8",
    "CESU8_TO_UTF8",
]
