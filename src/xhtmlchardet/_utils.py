"""Internal shared utilities for xhtmlchardet."""

from __future__ import annotations

#: Default number of bytes buffered from the source for sniffing.
DEFAULT_MAX_BYTES: int = 4096

#: How many ASCII characters of the window may hold the XML declaration.
XML_DECLARATION_LIMIT: int = 1024

#: How many ASCII characters of the window are scanned for ``<meta>`` tags.
META_SCAN_LIMIT: int = 4096


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
