"""
Type definitions for HDB SDK connection metadata.

Plain descriptions of a connection and the server behind it. They carry no
behavior; drivers fill them in and hand them to callers.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class DBConnectInfo(BaseModel):
    """
    Connection information of a tenant database.

    Attributes:
        database_name: Name of the tenant database
        host: Host serving the database
        port: SQL port of the database
        is_connected: Whether the database accepted a connection
    """

    model_config = ConfigDict(frozen=True)

    database_name: str
    host: str
    port: int = Field(ge=0, le=65535)
    is_connected: bool = False


@dataclass(frozen=True)
class ServerInfo:
    """
    Information reported by a connected server.

    Attributes:
        version: Full server version string, e.g. "2.00.054.00.1611906357"
    """

    version: str

    def __str__(self) -> str:
        return self.version

    def _part(self, index: int) -> int:
        parts = self.version.split(".")
        if index < len(parts) and parts[index].isdigit():
            return int(parts[index])
        return 0

    @property
    def major(self) -> int:
        """Major version number, 0 if absent."""
        return self._part(0)

    @property
    def minor(self) -> int:
        return self._part(1)

    @property
    def patch(self) -> int:
        return self._part(2)


@runtime_checkable
class DriverConn(Protocol):
    """A driver connection exposing server information."""

    def server_info(self) -> ServerInfo: ...


__all__ = ["DBConnectInfo", "ServerInfo", "DriverConn"]
