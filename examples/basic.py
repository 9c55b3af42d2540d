# HDB SDK Examples

# Select a part of the code and execute it as a cell with Shift+Enter (Jupyter notebook like).
# Use the comments as cell definitions.

import logging

from hdb_sdk import (
    CESU8_TO_UTF8,
    UTF8_TO_CESU8,
    DBConnectInfo,
    TransformStatus,
    decode,
    encode,
)
from hdb_sdk.unicode import cesu8

logging.basicConfig(level=logging.DEBUG)

# One-shot conversion of a text parameter

payload = encode("Grüße \U0001f600")
print(payload.hex(" "))
print(decode(payload))
print(cesu8.string_size("Grüße \U0001f600"))  # length field of the parameter

# Chunked conversion: the caller keeps track of where it left off

chunks = [b"caf\xc3", b"\xa9 \xf0\x9f", b"\x98\x80!"]
out = bytearray()
pending = b""
for chunk in chunks:
    src = pending + chunk
    dst = bytearray(len(src) * 2)
    result = UTF8_TO_CESU8.transform(dst, src)
    out += dst[: result.n_dst]
    pending = src[result.n_src :]
    print(result.status, result.n_src, result.n_dst)
print(out.hex(" "), pending)

# Malformed input is reported with the offending bytes

result = CESU8_TO_UTF8.transform(bytearray(16), b"ok\xed\xa0\xbd!")
if result.status is TransformStatus.INVALID_SOURCE:
    print(result.error)

# Connection metadata

info = DBConnectInfo(database_name="HXE", host="localhost", port=39041, is_connected=True)
print(info)
