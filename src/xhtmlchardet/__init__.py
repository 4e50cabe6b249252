"""Character set detection for XML and HTML documents."""

from __future__ import annotations

from xhtmlchardet._utils import DEFAULT_MAX_BYTES, _validate_max_bytes
from xhtmlchardet.detector import StreamingDetector
from xhtmlchardet.names import canonical_name
from xhtmlchardet.pipeline.reconcile import run_pipeline
from xhtmlchardet.source import ByteSource, SourceReadError, read_window

__version__ = "1.0.0"
__all__ = [
    "SourceReadError",
    "StreamingDetector",
    "canonical_name",
    "detect",
]


def detect(
    source: ByteSource,
    hint: str | None = None,
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> list[str]:
    """Detect the likely charsets of an XML or HTML document.

    Looks at the byte order mark, the XML declaration and the first
    ``<meta>`` charset declaration, in that order of trust, and appends
    *hint* last.

    :param source: The document as bytes, or a binary file object
        positioned at its start.  Seekable files are rewound to where they
        were.
    :param hint: Charset declared outside the document, such as the
        ``charset`` parameter of an HTTP ``Content-Type`` header.
    :param max_bytes: How many bytes from the start of the document to
        inspect.
    :returns: Lowercase canonical charset names, most likely first.  An
        empty list means nothing could be determined.
    :raises SourceReadError: If reading from *source* fails, including reads
        from a closed file.

    >>> detect(b'<?xml version="1.0" encoding="ISO-8859-1"?><channel/>')
    ['iso-8859-1']
    """
    _validate_max_bytes(max_bytes)
    data = read_window(source, max_bytes)
    return run_pipeline(data, hint)
