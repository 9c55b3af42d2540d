"""
HDB SDK - text encoding support for SAP HANA clients.

The HANA wire protocol carries character data as CESU-8. This SDK provides
the conversion between UTF-8 and CESU-8 a driver needs to encode outgoing
text parameters and decode incoming text results.

Supports:
- Stateless, resumable UTF-8 <-> CESU-8 transformers
- One-shot conversion helpers for complete values
- Rune-level CESU-8 tables (lengths, encode, decode)
- Connection metadata types
"""

from .unicode import (
    CESU8_TO_UTF8,
    UTF8_TO_CESU8,
    Cesu8ToUtf8Transformer,
    Transformer,
    TransformResult,
    TransformStatus,
    Utf8ToCesu8Transformer,
    cesu8_to_utf8,
    decode,
    encode,
    utf8_to_cesu8,
)
from .types import DBConnectInfo, DriverConn, ServerInfo
from .exceptions import (
    HDBError,
    EncodingError,
    InvalidUtf8Error,
    InvalidCesu8Error,
    TruncatedInputError,
    InternalTransformError,
)

__version__ = "0.1.0"
__all__ = [
    # Transformers
    "Transformer",
    "TransformResult",
    "TransformStatus",
    "Utf8ToCesu8Transformer",
    "Cesu8ToUtf8Transformer",
    "UTF8_TO_CESU8",
    "CESU8_TO_UTF8",
    # Helpers
    "utf8_to_cesu8",
    "cesu8_to_utf8",
    "encode",
    "decode",
    # Types
    "DBConnectInfo",
    "DriverConn",
    "ServerInfo",
    # Exceptions
    "HDBError",
    "EncodingError",
    "InvalidUtf8Error",
    "InvalidCesu8Error",
    "TruncatedInputError",
    "InternalTransformError",
]
