from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from demo_mode import TrafficSimulator  # noqa: E402
from display.components.table import (  # noqa: E402
    CONNECTIONS_TITLE,
    PROCESSES_TITLE,
    REMOTE_ADDRESSES_TITLE,
)
from state_repository import StateRepository  # noqa: E402
from ui import DashboardUI  # noqa: E402
from ui_protocols.protocols import UIStateProvider  # noqa: E402


class FakeResolver:
    def __init__(self, cache=None, pending=0, enabled=True):
        self.enabled = enabled
        self.cache = dict(cache or {})
        self.pending_count = pending
        self.requested = []

    def resolve(self, ips):
        self.requested.extend(ips)


def _render(ui: DashboardUI, console: Console) -> str:
    console.print(ui.generate_layout())
    return console.export_text()


def _dashboard(width: int, height: int, resolver=None) -> tuple[DashboardUI, Console]:
    console = Console(width=width, height=height, file=io.StringIO(), record=True, color_system=None)
    repo = StateRepository()
    TrafficSimulator(repo, "steady").tick()
    return DashboardUI(console, repo, resolver), console


@pytest.mark.parametrize(
    "width,height,expected",
    [
        (100, 20, []),
        (160, 20, ["row"]),
        (100, 40, ["column"]),
        (130, 40, ["column", "row"]),
        (160, 40, ["row", "column"]),
        (119, 29, []),
        (120, 29, ["row"]),
        (119, 30, ["column"]),
        (150, 30, ["row", "column"]),
    ],
)
def test_split_directions_by_terminal_size(width, height, expected):
    assert DashboardUI.split_directions(width, height) == expected


def test_repository_satisfies_provider_protocol():
    assert isinstance(StateRepository(), UIStateProvider)


def test_wide_terminal_shows_all_tables():
    ui, console = _dashboard(160, 40)
    text = _render(ui, console)
    assert "Total Rate Up / Down:" in text
    for title in (PROCESSES_TITLE, CONNECTIONS_TITLE, REMOTE_ADDRESSES_TITLE):
        assert title in text


def test_standard_terminal_shows_all_tables():
    ui, console = _dashboard(130, 40)
    text = _render(ui, console)
    for title in (PROCESSES_TITLE, CONNECTIONS_TITLE, REMOTE_ADDRESSES_TITLE):
        assert title in text


def test_small_terminal_shows_processes_only():
    ui, console = _dashboard(100, 20)
    text = _render(ui, console)
    assert PROCESSES_TITLE in text
    assert CONNECTIONS_TITLE not in text
    assert REMOTE_ADDRESSES_TITLE not in text
    assert "firefox" in text


def test_narrow_tall_terminal_stacks_two_tables():
    ui, console = _dashboard(100, 40)
    text = _render(ui, console)
    assert PROCESSES_TITLE in text
    assert CONNECTIONS_TITLE in text
    assert REMOTE_ADDRESSES_TITLE not in text


def test_footer_reports_resolution_state():
    ui, console = _dashboard(100, 20)
    assert "hostname resolution off" in _render(ui, console)

    ui, console = _dashboard(100, 20, FakeResolver(pending=3))
    assert "resolving 3 hostnames" in _render(ui, console)


def test_build_tables_uses_cache_and_schedules_lookups():
    resolver = FakeResolver()
    ui, _ = _dashboard(160, 40, resolver)
    state = ui.data_provider.snapshot()
    first = next(iter(state.remote_addresses))
    resolver.cache = {first: "edge.example.net"}

    processes, connections, remotes = ui.build_tables(state)

    assert processes.title == PROCESSES_TITLE
    assert set(resolver.requested) == set(state.remote_addresses)
    assert any(row[0] == "edge.example.net" for row in remotes.rows)
    assert any("edge.example.net:" in row[0] for row in connections.rows)
