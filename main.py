from __future__ import annotations

import logging
import signal
import threading
from typing import Any

from rich.console import Console
from rich.live import Live

from config import DEMO_SCENARIO, REFRESH_INTERVAL, RESOLVE_HOSTNAMES
from demo_mode import TrafficSimulator
from network.dns_resolver import IpResolver
from state_repository import StateRepository
from ui import DashboardUI


class BandviewApp:
    """
    Redraw loop: one traffic interval per tick, one fresh set of tables per frame.

    Counters are cleared after every frame, so each frame shows the bytes moved
    during the last interval, i.e. the current rate.
    """

    def __init__(
        self,
        scenario: str = DEMO_SCENARIO,
        refresh_interval: float = REFRESH_INTERVAL,
        resolve_hostnames: bool = RESOLVE_HOSTNAMES,
        console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.refresh_interval = refresh_interval
        self.repository = StateRepository()
        self.simulator = TrafficSimulator(self.repository, scenario)
        self.resolver = IpResolver(enabled=resolve_hostnames)
        self.ui = DashboardUI(self.console, self.repository, self.resolver)
        self.stop_event = threading.Event()

    def _install_signal_handlers(self) -> None:
        def handler(sig: int, frame: Any) -> None:
            logging.info(f"Received signal {sig}, stopping")
            self.stop_event.set()

        signal.signal(signal.SIGINT, handler)
        if hasattr(signal, "SIGTERM"):
            signal.signal(signal.SIGTERM, handler)

    def step(self) -> None:
        """Advance traffic by one interval."""
        self.simulator.tick()

    def run(self) -> None:
        self._install_signal_handlers()
        logging.info(
            f"Starting dashboard (scenario={self.simulator.scenario}, "
            f"interval={self.refresh_interval}s, resolve={self.resolver.enabled})"
        )
        try:
            self.step()
            with Live(
                self.ui.generate_layout(),
                console=self.console,
                refresh_per_second=4,
                screen=True,
                transient=False,
            ) as live:
                while not self.stop_event.wait(self.refresh_interval):
                    self.repository.reset()
                    self.step()
                    live.update(self.ui.generate_layout())
        except Exception as exc:  # pragma: no cover - runtime logging
            logging.error(f"Main loop error: {exc}", exc_info=True)
        finally:
            self.resolver.shutdown()
            logging.info("Dashboard stopped")


def run_main(**kwargs: Any) -> None:
    app = BandviewApp(**kwargs)
    app.run()


__all__ = ["BandviewApp", "run_main"]
