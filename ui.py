from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.layout import Layout
from rich.text import Text

from config import (
    UI_HEIGHT_BREAKPOINT,
    UI_THEME,
    UI_WIDE_BREAKPOINT,
    UI_WIDTH_BREAKPOINT,
    get_theme,
)
from display.bandwidth import DisplayBandwidth
from display.components.table import (
    Table,
    create_connections_table,
    create_processes_table,
    create_remote_addresses_table,
)
from ui_protocols.protocols import UIStateProvider

if TYPE_CHECKING:
    from display.ui_state import UIState
    from network.dns_resolver import IpResolver

# ═══════════════════════════════════════════════════════════════════════════════
# Style constants
# ═══════════════════════════════════════════════════════════════════════════════

theme = get_theme(UI_THEME)

_BG = theme.bg
_TEXT_DIM = theme.text_dim
_TITLE = theme.title
_UPLOAD = theme.upload
_DOWNLOAD = theme.download

# "row" places the next table beside the remaining space, "column" above it
SplitDirection = Literal["row", "column"]


class DashboardUI:
    """
    Rich-based UI for bandwidth utilization.

    Tables are shown in order: processes, connections, remote addresses.
    How many fit, and how they are arranged, depends on terminal size:
      - short and narrow: processes only
      - short:            two tables side by side
      - narrow:           two tables stacked
      - standard width:   three tables, top half then a side-by-side bottom
      - wide:             three tables, left half then a stacked right side
    Every table picks its own column layout for the region it lands in.
    """

    def __init__(
        self,
        console: Console,
        data_provider: UIStateProvider,
        resolver: IpResolver | None = None,
    ) -> None:
        self.console = console
        self._data_provider = data_provider
        self._resolver = resolver

    @property
    def data_provider(self) -> UIStateProvider:
        return self._data_provider

    # ═══════════════════════════════════════════════════════════════════════════
    # Arrangement
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def split_directions(width: int, height: int) -> list[SplitDirection]:
        """One entry per split; the number of tables shown is len() + 1."""
        if height < UI_HEIGHT_BREAKPOINT and width < UI_WIDTH_BREAKPOINT:
            return []
        if height < UI_HEIGHT_BREAKPOINT:
            return ["row"]
        if width < UI_WIDTH_BREAKPOINT:
            return ["column"]
        if width < UI_WIDE_BREAKPOINT:
            return ["column", "row"]
        return ["row", "column"]

    @staticmethod
    def _progressive_split(body: Layout, tables: list[Table], directions: list[SplitDirection]) -> None:
        """Each split gives half of the remaining region to the next table."""
        current = body
        for idx, direction in enumerate(directions):
            first = Layout(tables[idx], name=f"table_{idx}")
            rest = Layout(name=f"rest_{idx}")
            if direction == "row":
                current.split_row(first, rest)
            else:
                current.split_column(first, rest)
            current = rest
        current.update(tables[len(directions)])

    # ═══════════════════════════════════════════════════════════════════════════
    # Render sections
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _render_header(state: UIState) -> Text:
        up = DisplayBandwidth(state.total_bytes_uploaded)
        down = DisplayBandwidth(state.total_bytes_downloaded)
        return Text.from_markup(
            f" [bold {_TITLE}]Total Rate Up / Down:[/bold {_TITLE}] "
            f"[{_UPLOAD}]{up}[/{_UPLOAD}] / [{_DOWNLOAD}]{down}[/{_DOWNLOAD}]",
            style=f"on {_BG}",
        )

    def _render_footer(self) -> Text:
        txt = f" [{_TEXT_DIM}]Press <Ctrl+C> to quit[/{_TEXT_DIM}]"
        if self._resolver is None or not self._resolver.enabled:
            txt += f"  [{_TEXT_DIM}]│ hostname resolution off[/{_TEXT_DIM}]"
        else:
            pending = self._resolver.pending_count
            if pending:
                txt += f"  [{_TEXT_DIM}]│ resolving {pending} hostnames...[/{_TEXT_DIM}]"
        return Text.from_markup(txt, style=f"on {_BG}")

    def build_tables(self, state: UIState) -> list[Table]:
        ip_to_host = {}
        if self._resolver is not None:
            ip_to_host = self._resolver.cache
            self._resolver.resolve(state.remote_addresses.keys())
        return [
            create_processes_table(state),
            create_connections_table(state, ip_to_host),
            create_remote_addresses_table(state, ip_to_host),
        ]

    # ═══════════════════════════════════════════════════════════════════════════
    # Layout generation: single snapshot per frame
    # ═══════════════════════════════════════════════════════════════════════════

    def generate_layout(self) -> Layout:
        w = self.console.size.width
        h = self.console.size.height

        # Single snapshot for entire render cycle
        state = self._data_provider.snapshot()
        tables = self.build_tables(state)

        layout = Layout(name="root")
        layout.split_column(
            Layout(self._render_header(state), size=1, name="header"),
            Layout(name="body", ratio=1),
            Layout(self._render_footer(), size=1, name="footer"),
        )
        self._progressive_split(layout["body"], tables, self.split_directions(w, h))
        return layout


__all__ = ["DashboardUI"]
