"""Connection model and text formatting for connection/address columns."""
from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class Protocol(Enum):
    TCP = "tcp"
    UDP = "udp"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Socket:
    ip: IpAddress
    port: int

    @classmethod
    def parse(cls, ip: str, port: int) -> Socket:
        return cls(ipaddress.ip_address(ip), port)


@dataclass(frozen=True)
class Connection:
    """A local port talking to a remote socket over one protocol."""
    remote_socket: Socket
    protocol: Protocol
    local_port: int


def display_ip_or_host(ip: IpAddress, ip_to_host: Mapping[IpAddress, str]) -> str:
    """Resolved hostname when known, otherwise the address itself."""
    return ip_to_host.get(ip, str(ip))


def display_connection_string(
    connection: Connection,
    ip_to_host: Mapping[IpAddress, str],
    interface_name: str,
) -> str:
    return (
        f"<{interface_name}>:{connection.local_port} => "
        f"{display_ip_or_host(connection.remote_socket.ip, ip_to_host)}:"
        f"{connection.remote_socket.port} ({connection.protocol})"
    )
