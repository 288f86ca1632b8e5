"""Display layer: monitoring snapshot types, rate formatting and tables."""

from .bandwidth import DisplayBandwidth, display_upload_and_download
from .ui_state import ConnectionData, NetworkData, UIState

__all__ = [
    "DisplayBandwidth",
    "display_upload_and_download",
    "ConnectionData",
    "NetworkData",
    "UIState",
]
