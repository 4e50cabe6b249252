"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from xhtmlchardet.enums import ByteOrder, SignalSource


@dataclasses.dataclass(frozen=True, slots=True)
class Signal:
    """A charset name found by one pipeline stage.

    Signals only live for the duration of one detection call; the
    reconciler turns them into the plain list of names callers see.
    """

    source: SignalSource
    charset: str


@dataclasses.dataclass(frozen=True, slots=True)
class Layout:
    """How ASCII markup characters are stored in the sniffing window.

    *width* is the code-unit size in bytes (1, 2 or 4) and *order* the byte
    order of multi-byte units.  *skip* is the number of leading BOM bytes.
    """

    width: int = 1
    order: ByteOrder = ByteOrder.NOT_APPLICABLE
    skip: int = 0

    def ascii_view(self, data: bytes, limit: int) -> bytes:
        """Return up to *limit* ASCII characters of *data* under this layout.

        For multi-byte layouts only the low-order byte of each code unit is
        kept, which is the whole character for anything in the ASCII range.
        Trailing partial code units are dropped.
        """
        body = data[self.skip :]
        if self.width == 1:
            return body[:limit]
        offset = self.width - 1 if self.order is ByteOrder.BIG_ENDIAN else 0
        usable = len(body) - len(body) % self.width
        return body[offset:usable : self.width][:limit]


#: Layout of ASCII-compatible single-byte and UTF-8 documents.
ASCII_LAYOUT = Layout()
