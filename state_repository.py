"""State repository for clean data access."""
from __future__ import annotations

import threading
from dataclasses import replace

from display.ui_state import ConnectionData, NetworkData, UIState
from network.connection import Connection


class StateRepository:
    """
    Repository for per-connection byte counters.
    Provides thread-safe writes and immutable snapshots for the UI.

    Per-process and per-remote-address aggregates are derived from the
    connection counters each time a snapshot is taken.
    """

    def __init__(self) -> None:
        self._connections: dict[Connection, ConnectionData] = {}
        self._total_uploaded = 0
        self._total_downloaded = 0
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Get the state lock for atomic operations."""
        return self._lock

    def record(
        self,
        connection: Connection,
        process_name: str,
        interface_name: str,
        uploaded: int = 0,
        downloaded: int = 0,
    ) -> None:
        """Add observed bytes to a connection, creating it on first sight."""
        if uploaded < 0 or downloaded < 0:
            raise ValueError("byte counts must be non-negative")
        with self._lock:
            data = self._connections.get(connection)
            if data is None:
                data = ConnectionData(process_name=process_name, interface_name=interface_name)
                self._connections[connection] = data
            data.bytes_uploaded += uploaded
            data.bytes_downloaded += downloaded
            self._total_uploaded += uploaded
            self._total_downloaded += downloaded

    def forget(self, connection: Connection) -> None:
        """Drop a closed connection; its bytes stay in the overall totals."""
        with self._lock:
            self._connections.pop(connection, None)

    def reset(self) -> None:
        with self._lock:
            self._connections.clear()
            self._total_uploaded = 0
            self._total_downloaded = 0

    def snapshot(self) -> UIState:
        """Get immutable snapshot for UI."""
        with self._lock:
            state = UIState(
                total_bytes_uploaded=self._total_uploaded,
                total_bytes_downloaded=self._total_downloaded,
            )
            for connection, data in self._connections.items():
                state.connections[connection] = replace(data)

                process = state.processes.setdefault(data.process_name, NetworkData())
                process.bytes_uploaded += data.bytes_uploaded
                process.bytes_downloaded += data.bytes_downloaded
                process.connection_count += 1

                remote = state.remote_addresses.setdefault(connection.remote_socket.ip, NetworkData())
                remote.bytes_uploaded += data.bytes_uploaded
                remote.bytes_downloaded += data.bytes_downloaded
                remote.connection_count += 1
            return state
