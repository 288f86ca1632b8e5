"""Human-scaled byte-rate text."""
from __future__ import annotations

from ui_protocols.protocols import Bandwidth


class DisplayBandwidth:
    """A byte count that formats itself with an auto-selected unit."""

    def __init__(self, value: float) -> None:
        self.value = float(value)

    def __str__(self) -> str:
        if self.value > 999_999_999:
            return f"{self.value / 1_000_000_000:.2f}GBps"
        if self.value > 999_999:
            return f"{self.value / 1_000_000:.2f}MBps"
        if self.value > 999:
            return f"{self.value / 1_000:.2f}KBps"
        return f"{int(self.value)}Bps"


def display_upload_and_download(bandwidth: Bandwidth) -> str:
    return (
        f"{DisplayBandwidth(bandwidth.total_bytes_uploaded())} / "
        f"{DisplayBandwidth(bandwidth.total_bytes_downloaded())}"
    )
