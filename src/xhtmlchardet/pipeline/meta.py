"""Stage 3: HTML ``<meta>`` charset extraction."""

from __future__ import annotations

import logging
import re

from xhtmlchardet._utils import META_SCAN_LIMIT
from xhtmlchardet.enums import SignalSource
from xhtmlchardet.names import canonical_name, with_byte_order
from xhtmlchardet.pipeline import Layout, Signal

logger = logging.getLogger(__name__)

_META_TAG_RE = re.compile(rb"<meta(?=[\s/>])([^>]*)>", re.IGNORECASE)
_ATTRIBUTE_RE = re.compile(
    rb"""([^\s=/>"']+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+)))?"""
)
_CONTENT_CHARSET_RE = re.compile(
    rb"""charset\s*=\s*["']?\s*([^\s"';>]+)""", re.IGNORECASE
)
_NAME_RE = re.compile(rb"""[^\s"';>/]+""")


def _parse_attributes(tag_body: bytes) -> dict[bytes, bytes]:
    """Return the attributes of a tag, names lowercased, first one wins."""
    attributes: dict[bytes, bytes] = {}
    for match in _ATTRIBUTE_RE.finditer(tag_body):
        name = match.group(1).lower()
        value = next((v for v in match.group(2, 3, 4) if v is not None), b"")
        attributes.setdefault(name, value)
    return attributes


def _charset_from_tag(attributes: dict[bytes, bytes]) -> bytes | None:
    """Return the raw charset label a ``<meta>`` tag declares, if any.

    An empty ``bytes`` means the tag is a charset declaration whose value
    could not be read.
    """
    if b"charset" in attributes:
        name = _NAME_RE.search(attributes[b"charset"])
        return name.group() if name else b""
    if attributes.get(b"http-equiv", b"").strip().lower() != b"content-type":
        return None
    match = _CONTENT_CHARSET_RE.search(attributes.get(b"content", b""))
    return match.group(1) if match else None


def detect_meta_charset(data: bytes, layout: Layout) -> Signal | None:
    """Scan the head of *data* for a ``<meta>`` charset declaration.

    Recognises both forms, in any attribute order and quoting style:

    1. ``<meta charset="...">``
    2. ``<meta http-equiv="Content-Type" content="...; charset=...">``

    Only the first ``<meta>`` tag declaring a charset is considered; if its
    name is not a known encoding the scan still stops there.

    :param data: The sniffing window, BOM included.
    :param layout: Layout of the window.
    :returns: A signal, or ``None``.
    """
    head = layout.ascii_view(data, META_SCAN_LIMIT)
    for tag in _META_TAG_RE.finditer(head):
        raw = _charset_from_tag(_parse_attributes(tag.group(1)))
        if raw is None:
            continue
        charset = canonical_name(raw)
        if charset is None:
            logger.debug("<meta> tag names unknown encoding %r", raw)
            return None
        return Signal(
            source=SignalSource.HTML_META,
            charset=with_byte_order(charset, layout.width, layout.order),
        )
    return None
