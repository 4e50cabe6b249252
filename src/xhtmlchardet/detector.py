"""StreamingDetector — incremental charset detection for chunked input."""

from __future__ import annotations

from xhtmlchardet._utils import DEFAULT_MAX_BYTES, _validate_max_bytes
from xhtmlchardet.pipeline.reconcile import run_pipeline


class StreamingDetector:
    """Charset detector for documents that arrive in chunks.

    Implements a feed/close pattern for sources that cannot be rewound,
    such as a response body read off a socket.  Chunks are buffered until
    the sniffing window is full; the caller keeps its own copy of the data.

    .. code::

            detector = StreamingDetector(hint=header_charset)
            for chunk in response.iter_content():
                detector.feed(chunk)
                if detector.done:
                    break
            charsets = detector.close()
    """

    def __init__(
        self, hint: str | None = None, max_bytes: int = DEFAULT_MAX_BYTES
    ) -> None:
        """Initialize the detector.

        :param hint: Externally declared charset, e.g. from an HTTP header.
        :param max_bytes: Size of the sniffing window to buffer.
        """
        _validate_max_bytes(max_bytes)
        self._hint = hint
        self._max_bytes = max_bytes
        self._buffer = bytearray()
        self._closed = False
        self._result: list[str] | None = None

    def feed(self, byte_str: bytes | bytearray) -> None:
        """Feed a chunk of bytes to the detector.

        Bytes beyond the sniffing window are ignored.

        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        remaining = self._max_bytes - len(self._buffer)
        if remaining > 0:
            self._buffer.extend(byte_str[:remaining])

    def close(self) -> list[str]:
        """Finalize detection and return the detected charset names."""
        if not self._closed:
            self._closed = True
            self._result = run_pipeline(bytes(self._buffer), self._hint)
        return self.result

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._closed = False
        self._result = None

    @property
    def done(self) -> bool:
        """Whether the sniffing window is full and no more data is needed."""
        return self._closed or len(self._buffer) >= self._max_bytes

    @property
    def result(self) -> list[str]:
        """The detected charset names; empty until :meth:`close` is called."""
        if self._result is None:
            return []
        return list(self._result)
