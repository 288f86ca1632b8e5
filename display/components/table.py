"""
Responsive bandwidth tables.

A table owns fully formatted rows for every logical column and a set of width
breakpoints. At render time the current region width picks a breakpoint, which
decides how many columns are visible, how wide each one is and how much space
goes between them; cells are then shortened from the middle to fit.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Sequence, TypeVar

from rich import box
from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text

from config import UI_THEME, get_theme
from display.bandwidth import display_upload_and_download
from display.ui_state import UIState
from network.connection import IpAddress, display_connection_string, display_ip_or_host
from ui_protocols.protocols import Bandwidth

K = TypeVar("K")
B = TypeVar("B", bound=Bandwidth)

TRUNCATION_MARKER = "[..]"
# Narrowest width that still keeps one character on each side of the marker
TRUNCATE_MIN_WIDTH = 6
# Smallest region that fits both borders plus one row
MIN_PANEL_WIDTH = 8
MIN_PANEL_HEIGHT = 3

theme = get_theme(UI_THEME)


class ColumnCount(Enum):
    TWO = 2
    THREE = 3
    FOUR = 4

    def as_int(self) -> int:
        return self.value

    @property
    def indices(self) -> tuple[int, ...]:
        """Logical columns shown for this count. TWO always loses the middle column."""
        if self is ColumnCount.TWO:
            return (0, 2)
        if self is ColumnCount.THREE:
            return (0, 1, 2)
        return (0, 1, 2, 3)


@dataclass(frozen=True)
class ColumnData:
    column_count: ColumnCount
    column_widths: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.column_widths) != self.column_count.as_int():
            raise ValueError(
                f"{self.column_count.name} layout needs {self.column_count.as_int()} widths, "
                f"got {len(self.column_widths)}"
            )


@dataclass(frozen=True)
class ResolvedLayout:
    column_count: ColumnCount
    column_widths: tuple[int, ...]
    column_spacing: int


def truncate_middle(text: str, max_width: int) -> str:
    """Shorten text to max_width by replacing its middle with "[..]"."""
    if len(text) <= max_width:
        return text
    if max_width < TRUNCATE_MIN_WIDTH:
        return text[:max(max_width, 0)]
    keep = max_width // 2 - 2
    return f"{text[:keep]}{TRUNCATION_MARKER}{text[len(text) - keep:]}"


def _dominant_bandwidth(bandwidth: Bandwidth) -> int:
    return max(bandwidth.total_bytes_downloaded(), bandwidth.total_bytes_uploaded())


def sort_by_bandwidth(entries: Iterable[tuple[K, B]]) -> list[tuple[K, B]]:
    """Busiest first, by whichever direction carried more bytes."""
    return sorted(entries, key=lambda entry: _dominant_bandwidth(entry[1]), reverse=True)


def resolve_layout(breakpoints: Mapping[int, ColumnData], terminal_width: int) -> ResolvedLayout:
    """
    Pick the column layout for a region width.

    The highest breakpoint whose key is strictly below the width wins. A width
    that is not above any key (only 0 in practice) gets the smallest breakpoint.
    Leftover width is shared evenly between columns; spacing never goes negative.
    """
    if not breakpoints:
        raise ValueError("at least one breakpoint is required")
    ordered = sorted(breakpoints.items())
    selected = ordered[0][1]
    matched = False
    for min_width, column_data in ordered:
        if min_width < terminal_width:
            selected = column_data
            matched = True
    if not matched:
        logging.debug(f"No breakpoint below width {terminal_width}, using the narrowest layout")

    count = selected.column_count.as_int()
    total_width = sum(selected.column_widths)
    if terminal_width < total_width - count:
        column_spacing = 0
    else:
        column_spacing = max(0, (terminal_width - total_width) // count)
    return ResolvedLayout(selected.column_count, selected.column_widths, column_spacing)


class Table:
    """
    A titled bandwidth table.

    Rows keep one cell per logical column; narrow layouts drop columns at
    render time only. Instances are rebuilt from fresh state every frame.
    """

    def __init__(
        self,
        title: str,
        column_names: Sequence[str],
        rows: Sequence[Sequence[str]],
        breakpoints: Mapping[int, ColumnData],
    ) -> None:
        if 0 not in breakpoints:
            raise ValueError(f"{title!r}: a breakpoint at width 0 is required")
        for column_data in breakpoints.values():
            if max(column_data.column_count.indices) >= len(column_names):
                raise ValueError(
                    f"{title!r}: {column_data.column_count.name} layout needs more than "
                    f"{len(column_names)} columns"
                )
        for row in rows:
            if len(row) != len(column_names):
                raise ValueError(f"{title!r}: row has {len(row)} cells, expected {len(column_names)}")
        self.title = title
        self.column_names = tuple(column_names)
        self.rows = [tuple(row) for row in rows]
        self.breakpoints = dict(sorted(breakpoints.items()))

    def resolve(self, width: int) -> ResolvedLayout:
        return resolve_layout(self.breakpoints, width)

    def visible_column_names(self, layout: ResolvedLayout) -> list[str]:
        return [self.column_names[idx] for idx in layout.column_count.indices]

    def visible_rows(self, layout: ResolvedLayout) -> list[list[str]]:
        indices = layout.column_count.indices
        return [
            [truncate_middle(row[idx], width) for idx, width in zip(indices, layout.column_widths)]
            for row in self.rows
        ]

    def render(self, width: int, height: int | None = None) -> RenderableType:
        """Bordered, titled block sized for a region of the given width."""
        if width < MIN_PANEL_WIDTH or (height is not None and height < MIN_PANEL_HEIGHT):
            # No room for borders: show as much of the title as fits
            return Text(self.title, no_wrap=True, overflow="crop", end="")
        layout = self.resolve(width)
        grid = RichTable(
            box=None,
            show_edge=False,
            pad_edge=False,
            padding=(0, layout.column_spacing, 0, 0),
            header_style=f"bold {theme.header}",
            style=theme.text,
        )
        for name, col_width in zip(self.visible_column_names(layout), layout.column_widths):
            grid.add_column(Text(name), width=col_width, no_wrap=True, overflow="crop")
        for row in self.visible_rows(layout):
            grid.add_row(*(Text(cell) for cell in row))

        return Panel(
            grid,
            title=Text(self.title, style=f"bold {theme.title}"),
            title_align="left",
            border_style=theme.border,
            box=box.SQUARE,
            width=width,
            height=height,
            padding=0,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self.render(options.max_width, options.height)


def _breakpoints(layouts: Mapping[int, tuple[ColumnCount, tuple[int, ...]]]) -> dict[int, ColumnData]:
    return {min_width: ColumnData(count, widths) for min_width, (count, widths) in layouts.items()}


CONNECTIONS_TITLE = "Utilization by connection"
CONNECTIONS_COLUMNS = ("Connection", "Process", "Rate Up / Down")
CONNECTIONS_BREAKPOINTS = _breakpoints({
    0: (ColumnCount.TWO, (20, 23)),
    70: (ColumnCount.THREE, (30, 12, 23)),
    100: (ColumnCount.THREE, (60, 12, 23)),
    140: (ColumnCount.THREE, (100, 12, 23)),
})

PROCESSES_TITLE = "Utilization by process name"
PROCESSES_COLUMNS = ("Process", "Connections", "Rate Up / Down")
PROCESSES_BREAKPOINTS = _breakpoints({
    0: (ColumnCount.TWO, (12, 23)),
    50: (ColumnCount.THREE, (12, 12, 23)),
    100: (ColumnCount.THREE, (40, 12, 23)),
    140: (ColumnCount.THREE, (40, 12, 23)),
})

REMOTE_ADDRESSES_TITLE = "Utilization by remote address"
REMOTE_ADDRESSES_COLUMNS = ("Remote Address", "Connections", "Rate Up / Down")
REMOTE_ADDRESSES_BREAKPOINTS = dict(CONNECTIONS_BREAKPOINTS)


def create_connections_table(state: UIState, ip_to_host: Mapping[IpAddress, str]) -> Table:
    rows = [
        [
            display_connection_string(connection, ip_to_host, data.interface_name),
            data.process_name,
            display_upload_and_download(data),
        ]
        for connection, data in sort_by_bandwidth(state.connections.items())
    ]
    return Table(CONNECTIONS_TITLE, CONNECTIONS_COLUMNS, rows, CONNECTIONS_BREAKPOINTS)


def create_processes_table(state: UIState) -> Table:
    rows = [
        [process_name, str(data.connection_count), display_upload_and_download(data)]
        for process_name, data in sort_by_bandwidth(state.processes.items())
    ]
    return Table(PROCESSES_TITLE, PROCESSES_COLUMNS, rows, PROCESSES_BREAKPOINTS)


def create_remote_addresses_table(state: UIState, ip_to_host: Mapping[IpAddress, str]) -> Table:
    rows = [
        [
            display_ip_or_host(remote_address, ip_to_host),
            str(data.connection_count),
            display_upload_and_download(data),
        ]
        for remote_address, data in sort_by_bandwidth(state.remote_addresses.items())
    ]
    return Table(REMOTE_ADDRESSES_TITLE, REMOTE_ADDRESSES_COLUMNS, rows, REMOTE_ADDRESSES_BREAKPOINTS)


__all__ = [
    "ColumnCount",
    "ColumnData",
    "ResolvedLayout",
    "Table",
    "truncate_middle",
    "sort_by_bandwidth",
    "resolve_layout",
    "create_connections_table",
    "create_processes_table",
    "create_remote_addresses_table",
]
