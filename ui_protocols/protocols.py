"""
UI data provider protocols.

Defines the interfaces the dashboard depends on, following Dependency Inversion Principle.
Tables and the UI depend on these abstractions, not on the concrete repository or
the demo traffic generator.
"""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from display.ui_state import UIState


@runtime_checkable
class Bandwidth(Protocol):
    """
    Anything that reports lifetime byte totals in both directions.

    Both counters are monotonic and non-negative for the entity's observed lifetime.
    """

    def total_bytes_uploaded(self) -> int:
        ...

    def total_bytes_downloaded(self) -> int:
        ...


@runtime_checkable
class UIStateProvider(Protocol):
    """
    Protocol defining access to monitoring state.

    Any class that implements these methods can be used with DashboardUI:
    - StateRepository
    - a test double returning a fixed UIState
    """

    def snapshot(self) -> UIState:
        """
        Get an immutable snapshot of current monitoring state.

        The snapshot is not touched by writers after it is returned, so a whole
        table construction pass reads consistent counters.
        """
        ...
