#!/usr/bin/env python3
"""
Demo traffic for running the dashboard without packet capture.

Feeds a StateRepository with synthetic, repeatable per-connection traffic so
layouts, ranking and truncation can be watched on any terminal size.

Safe for screenshots - all data is fake!
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from network.connection import Connection, Protocol, Socket
from state_repository import StateRepository

SCENARIOS = ("steady", "burst", "idle")


@dataclass(frozen=True)
class FakeFlow:
    """One synthetic connection and its base rates in bytes per tick."""
    process_name: str
    interface_name: str
    local_port: int
    remote_ip: str
    remote_port: int
    protocol: Protocol
    up_rate: int
    down_rate: int

    @property
    def connection(self) -> Connection:
        return Connection(Socket.parse(self.remote_ip, self.remote_port), self.protocol, self.local_port)


# Fixed flow table, identical on every run
FLOWS: tuple[FakeFlow, ...] = (
    FakeFlow("firefox", "eth0", 51234, "93.184.216.34", 443, Protocol.TCP, 12_000, 480_000),
    FakeFlow("firefox", "eth0", 51240, "151.101.1.69", 443, Protocol.TCP, 4_500, 96_000),
    FakeFlow("firefox", "eth0", 51252, "2606:4700:4700::1111", 443, Protocol.TCP, 900, 15_000),
    FakeFlow("syncthing-relay-worker", "eth0", 22000, "198.51.100.23", 22067, Protocol.TCP, 1_250_000, 40_000),
    FakeFlow("ssh", "wlan0", 40022, "203.0.113.7", 22, Protocol.TCP, 2_100, 3_800),
    FakeFlow("systemd-resolved", "eth0", 53011, "1.1.1.1", 53, Protocol.UDP, 150, 420),
    FakeFlow("systemd-resolved", "eth0", 53012, "8.8.8.8", 53, Protocol.UDP, 140, 390),
    FakeFlow("spotify", "wlan0", 57001, "35.186.224.25", 4070, Protocol.TCP, 3_000, 320_000),
    FakeFlow("docker-proxy", "docker0", 8080, "172.17.0.2", 80, Protocol.TCP, 64_000, 64_000),
)


class TrafficSimulator:
    """
    Generates traffic ticks for a scenario.

    Scenarios:
    - steady: every flow at its base rate with a slow wave
    - burst:  one flow at a time spikes far above the rest
    - idle:   only DNS and SSH trickle
    """

    def __init__(self, repository: StateRepository, scenario: str = "steady") -> None:
        if scenario not in SCENARIOS:
            raise ValueError(f"unknown scenario {scenario!r}, expected one of {', '.join(SCENARIOS)}")
        self.repository = repository
        self.scenario = scenario
        self.ticks = 0

    def _factor(self, index: int) -> float:
        wave = 1.0 + 0.5 * math.sin((self.ticks + index * 3) / 4.0)
        if self.scenario == "burst":
            spiking = (self.ticks // 5) % len(FLOWS)
            return wave * (20.0 if index == spiking else 0.2)
        return wave

    def tick(self) -> None:
        """Record one interval worth of traffic for every active flow."""
        for index, flow in enumerate(FLOWS):
            if self.scenario == "idle" and flow.process_name not in ("systemd-resolved", "ssh"):
                continue
            factor = self._factor(index)
            self.repository.record(
                flow.connection,
                flow.process_name,
                flow.interface_name,
                uploaded=int(flow.up_rate * factor),
                downloaded=int(flow.down_rate * factor),
            )
        self.ticks += 1


__all__ = ["FakeFlow", "FLOWS", "SCENARIOS", "TrafficSimulator"]
