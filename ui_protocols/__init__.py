"""
UI package for bandview.

This package provides:
- protocols: Interface definitions (DIP-compliant)
"""

from .protocols import Bandwidth, UIStateProvider

__all__ = [
    "Bandwidth",
    "UIStateProvider",
]
