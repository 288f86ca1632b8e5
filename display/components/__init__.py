"""Renderable dashboard components."""

from .table import (
    ColumnCount,
    ColumnData,
    ResolvedLayout,
    Table,
    create_connections_table,
    create_processes_table,
    create_remote_addresses_table,
    resolve_layout,
    sort_by_bandwidth,
    truncate_middle,
)

__all__ = [
    "ColumnCount",
    "ColumnData",
    "ResolvedLayout",
    "Table",
    "create_connections_table",
    "create_processes_table",
    "create_remote_addresses_table",
    "resolve_layout",
    "sort_by_bandwidth",
    "truncate_middle",
]
