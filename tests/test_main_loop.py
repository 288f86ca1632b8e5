import io
import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import main  # noqa: E402
from main import BandviewApp  # noqa: E402


@pytest.fixture
def app(monkeypatch):
    # Keep the session's own SIGINT handling intact
    installed = []
    monkeypatch.setattr(main.signal, "signal", lambda sig, handler: installed.append(sig))
    console = Console(width=160, height=40, file=io.StringIO(), color_system=None)
    application = BandviewApp(scenario="steady", refresh_interval=0.01, resolve_hostnames=False, console=console)
    application.resolver.shutdown = MagicMock(wraps=application.resolver.shutdown)
    application.installed_signals = installed
    return application


def test_step_feeds_the_repository(app):
    app.step()
    state = app.repository.snapshot()
    assert state.connections
    assert state.total_bytes_downloaded > 0


def test_run_stops_when_event_is_set_and_shuts_resolver_down(app):
    app.stop_event.set()
    app.run()

    app.resolver.shutdown.assert_called_once_with()
    assert main.signal.SIGINT in app.installed_signals
    assert app.simulator.ticks == 1


def test_run_logs_loop_errors_and_still_shuts_down(app, caplog):
    app.simulator.tick = MagicMock(side_effect=RuntimeError("capture lost"))
    app.stop_event.set()

    with caplog.at_level(logging.ERROR):
        app.run()

    assert "Main loop error: capture lost" in caplog.text
    app.resolver.shutdown.assert_called_once_with()


def test_signal_handler_sets_stop_event(app, monkeypatch):
    handlers = {}
    monkeypatch.setattr(main.signal, "signal", lambda sig, handler: handlers.setdefault(sig, handler))
    app._install_signal_handlers()

    handlers[main.signal.SIGINT](main.signal.SIGINT, None)

    assert app.stop_event.is_set()
