"""Monitoring snapshot consumed by the tables."""
from __future__ import annotations

from dataclasses import dataclass, field

from network.connection import Connection, IpAddress


@dataclass
class NetworkData:
    """Aggregate for a process or a remote address."""
    bytes_uploaded: int = 0
    bytes_downloaded: int = 0
    connection_count: int = 0

    def total_bytes_uploaded(self) -> int:
        return self.bytes_uploaded

    def total_bytes_downloaded(self) -> int:
        return self.bytes_downloaded


@dataclass
class ConnectionData:
    """Counters for a single connection plus who owns it and where it runs."""
    process_name: str
    interface_name: str
    bytes_uploaded: int = 0
    bytes_downloaded: int = 0

    def total_bytes_uploaded(self) -> int:
        return self.bytes_uploaded

    def total_bytes_downloaded(self) -> int:
        return self.bytes_downloaded


@dataclass
class UIState:
    processes: dict[str, NetworkData] = field(default_factory=dict)
    remote_addresses: dict[IpAddress, NetworkData] = field(default_factory=dict)
    connections: dict[Connection, ConnectionData] = field(default_factory=dict)
    total_bytes_uploaded: int = 0
    total_bytes_downloaded: int = 0
