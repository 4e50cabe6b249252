"""Reading the sniffing window from caller-owned sources."""

from __future__ import annotations

import io
from typing import BinaryIO, Union

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]


class SourceReadError(OSError):
    """Reading the sniffing window from the source failed."""


def read_window(source: ByteSource, max_bytes: int) -> bytes:
    """Return the first *max_bytes* bytes of *source* without consuming them.

    Bytes-like sources are sliced.  File-like sources are read from their
    current position; when the stream is seekable the position is restored
    afterwards so the caller can still parse the whole document.  Readers
    that cannot seek keep the window consumed, so callers must buffer it
    themselves or use :class:`~xhtmlchardet.detector.StreamingDetector`.

    :raises SourceReadError: If the underlying read fails or the file is
        closed.  Seekable sources are rewound in either case.
    :raises TypeError: If *source* is neither bytes-like nor readable.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source[:max_bytes])
    if not hasattr(source, "read"):
        msg = f"expected bytes or a binary file object, got {type(source).__name__}"
        raise TypeError(msg)

    position = None
    try:
        if _seekable(source):
            position = source.tell()
        chunks = bytearray()
        # Raw streams may return short reads before EOF.
        while len(chunks) < max_bytes:
            chunk = source.read(max_bytes - len(chunks))
            if not chunk:
                break
            if isinstance(chunk, str):
                msg = "source must be opened in binary mode"
                raise TypeError(msg)
            chunks.extend(chunk)
    except (OSError, ValueError) as exc:
        # ValueError covers reads from a closed file.
        msg = f"could not read the sniffing window: {exc}"
        raise SourceReadError(msg) from exc
    finally:
        if position is not None:
            source.seek(position)
    return bytes(chunks)


def _seekable(source: BinaryIO) -> bool:
    try:
        return bool(source.seekable())
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return False
