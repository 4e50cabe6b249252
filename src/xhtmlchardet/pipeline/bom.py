"""Stage 1: BOM (Byte Order Mark) detection and byte layout."""

from __future__ import annotations

from xhtmlchardet.enums import ByteOrder, SignalSource
from xhtmlchardet.pipeline import ASCII_LAYOUT, Layout, Signal

# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32-LE BOM starts with the same bytes as UTF-16-LE BOM)
_BOMS: tuple[tuple[bytes, str, Layout], ...] = (
    (b"\x00\x00\xfe\xff", "utf-32be", Layout(4, ByteOrder.BIG_ENDIAN, 4)),
    (b"\xff\xfe\x00\x00", "utf-32le", Layout(4, ByteOrder.LITTLE_ENDIAN, 4)),
    (b"\xef\xbb\xbf", "utf-8", Layout(1, ByteOrder.NOT_APPLICABLE, 3)),
    (b"\xfe\xff", "utf-16be", Layout(2, ByteOrder.BIG_ENDIAN, 2)),
    (b"\xff\xfe", "utf-16le", Layout(2, ByteOrder.LITTLE_ENDIAN, 2)),
)

# XML 1.0 Appendix F: how "<" or "<?" looks without a BOM.
_BOMLESS_PATTERNS: tuple[tuple[bytes, Layout], ...] = (
    (b"\x00\x00\x00\x3c", Layout(4, ByteOrder.BIG_ENDIAN)),
    (b"\x3c\x00\x00\x00", Layout(4, ByteOrder.LITTLE_ENDIAN)),
    (b"\x00\x3c\x00\x3f", Layout(2, ByteOrder.BIG_ENDIAN)),
    (b"\x3c\x00\x3f\x00", Layout(2, ByteOrder.LITTLE_ENDIAN)),
)


def _match_bom(data: bytes) -> tuple[str, Layout] | None:
    for bom_bytes, encoding, layout in _BOMS:
        if data.startswith(bom_bytes):
            return encoding, layout
    return None


def detect_bom(data: bytes) -> Signal | None:
    """Check for a BOM at the start of data. Returns a signal or None."""
    match = _match_bom(data[:4])
    if match is None:
        return None
    return Signal(source=SignalSource.BOM, charset=match[0])


def detect_layout(data: bytes) -> Layout:
    """Work out how markup characters are laid out in *data*.

    A BOM fixes the layout and tells how many bytes to skip.  Without one,
    the first four bytes are compared against the shapes ``<`` and ``<?``
    take in 16- and 32-bit encodings; anything else is read as an
    ASCII-compatible 8-bit encoding.
    """
    head = data[:4]
    match = _match_bom(head)
    if match is not None:
        return match[1]
    for pattern, layout in _BOMLESS_PATTERNS:
        if head == pattern:
            return layout
    return ASCII_LAYOUT
