"""Unit tests for hdb_sdk.exceptions — SDK exception hierarchy."""

from hdb_sdk.exceptions import (
    EncodingError,
    HDBError,
    InternalTransformError,
    InvalidCesu8Error,
    InvalidUtf8Error,
    TruncatedInputError,
)


class TestHDBError:
    def test_init_message_only(self) -> None:
        err = HDBError("something broke")
        assert err.message == "something broke"
        assert err.code is None
        assert str(err) == "something broke"

    def test_init_with_code(self) -> None:
        err = HDBError("server error", code=500)
        assert err.code == 500

    def test_is_exception(self) -> None:
        assert isinstance(HDBError("test"), Exception)


class TestEncodingError:
    def test_position(self) -> None:
        err = EncodingError("bad bytes", position=7)
        assert err.position == 7
        assert err.message == "bad bytes"

    def test_inherits_hdb_error(self) -> None:
        assert isinstance(EncodingError("x"), HDBError)


class TestInvalidUtf8Error:
    def test_without_position(self) -> None:
        err = InvalidUtf8Error()
        assert err.position is None
        assert str(err) == "invalid UTF-8"

    def test_with_position(self) -> None:
        err = InvalidUtf8Error(4)
        assert err.position == 4
        assert str(err) == "invalid UTF-8 at pos: 4"

    def test_inherits_encoding_error(self) -> None:
        assert isinstance(InvalidUtf8Error(), EncodingError)


class TestInvalidCesu8Error:
    def test_message(self) -> None:
        err = InvalidCesu8Error(5, b"\xed\xa0\xbd")
        assert str(err) == "invalid CESU-8: eda0bd at pos: 5"
        assert err.position == 5

    def test_value_is_copied(self) -> None:
        source = bytearray(b"\x80\x81")
        err = InvalidCesu8Error(0, source)
        source[0] = 0x41
        assert err.value == b"\x80\x81"
        assert isinstance(err.value, bytes)

    def test_inherits_encoding_error(self) -> None:
        assert isinstance(InvalidCesu8Error(0, b"\x80"), EncodingError)


class TestTruncatedInputError:
    def test_inherits_encoding_error(self) -> None:
        err = TruncatedInputError("truncated", 3)
        assert isinstance(err, EncodingError)
        assert err.position == 3


class TestInternalTransformError:
    def test_outside_hdb_error_channel(self) -> None:
        err = InternalTransformError("tables broken")
        assert isinstance(err, RuntimeError)
        assert not isinstance(err, HDBError)
