# hex_display/__init__.py

"""Hex Display package.

Re-exports the hex view and its helpers for convenient imports.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .logic import (
    Hex,
    HexBytes,
    hex_view,
    upper_hex_view,
    to_hex_string,
    to_upper_hex_string,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Logic
    "Hex", "HexBytes",
    "hex_view", "upper_hex_view",
    "to_hex_string", "to_upper_hex_string",
]
