"""Unit tests for hdb_sdk.types — connection metadata types."""

import pytest
from pydantic import ValidationError

from hdb_sdk.types import DBConnectInfo, DriverConn, ServerInfo


class TestDBConnectInfo:
    def test_fields(self) -> None:
        info = DBConnectInfo(database_name="HXE", host="hana.local", port=39041)
        assert info.database_name == "HXE"
        assert info.host == "hana.local"
        assert info.port == 39041
        assert info.is_connected is False

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_range(self, port: int) -> None:
        with pytest.raises(ValidationError):
            DBConnectInfo(database_name="HXE", host="hana.local", port=port)

    def test_frozen(self) -> None:
        info = DBConnectInfo(database_name="HXE", host="hana.local", port=39041, is_connected=True)
        with pytest.raises(ValidationError):
            info.port = 1  # type: ignore[misc]


class TestServerInfo:
    def test_version_parts(self) -> None:
        info = ServerInfo("2.00.054.00.1611906357")
        assert (info.major, info.minor, info.patch) == (2, 0, 54)
        assert str(info) == "2.00.054.00.1611906357"

    def test_missing_parts(self) -> None:
        info = ServerInfo("4")
        assert (info.major, info.minor, info.patch) == (4, 0, 0)

    def test_non_numeric(self) -> None:
        assert ServerInfo("dev").major == 0


class TestDriverConn:
    def test_protocol(self) -> None:
        class Conn:
            def server_info(self) -> ServerInfo:
                return ServerInfo("2.00.054")

        assert isinstance(Conn(), DriverConn)
        assert not isinstance(object(), DriverConn)
