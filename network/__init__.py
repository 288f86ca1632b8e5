"""Network model and address resolution."""

from .connection import (
    Connection,
    IpAddress,
    Protocol,
    Socket,
    display_connection_string,
    display_ip_or_host,
)
from .dns_resolver import IpResolver

__all__ = [
    "Connection",
    "IpAddress",
    "Protocol",
    "Socket",
    "display_connection_string",
    "display_ip_or_host",
    "IpResolver",
]
