"""
HDB SDK Exceptions.

Custom exception hierarchy for the SDK.
"""


class HDBError(Exception):
    """Base exception for all HDB SDK errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class EncodingError(HDBError):
    """Raised when text cannot be transcoded between UTF-8 and CESU-8."""

    def __init__(self, message: str, position: int | None = None, code: int | None = None):
        self.position = position
        super().__init__(message, code)


class InvalidUtf8Error(EncodingError):
    """Raised when a transformer detects invalid UTF-8 data.

    The UTF-8 to CESU-8 transformer returns one shared instance without a
    position; the offset of the fault is the ``n_src`` of the result.
    """

    def __init__(self, position: int | None = None):
        message = "invalid UTF-8" if position is None else f"invalid UTF-8 at pos: {position}"
        super().__init__(message, position)


class InvalidCesu8Error(EncodingError):
    """Raised when a transformer detects invalid CESU-8 data.

    Attributes:
        position: Offset of the offending run in the source buffer
        value: Copy of the offending run
    """

    def __init__(self, position: int, value: bytes | bytearray | memoryview):
        self.value = bytes(value)
        super().__init__(f"invalid CESU-8: {self.value.hex()} at pos: {position}", position)


class TruncatedInputError(EncodingError):
    """Raised when complete input ends in the middle of an encoded run."""

    pass


class InternalTransformError(RuntimeError):
    """Raised when a decoded codepoint has no encoding in the target encoding.

    Valid input never triggers this; it signals a defect in the rune tables.
    """

    pass
