"""Stage 2: XML declaration encoding extraction."""

from __future__ import annotations

import logging
import re

from xhtmlchardet._utils import XML_DECLARATION_LIMIT
from xhtmlchardet.enums import ByteOrder, SignalSource
from xhtmlchardet.names import canonical_name, with_byte_order
from xhtmlchardet.pipeline import Layout, Signal

logger = logging.getLogger(__name__)

# The declaration must open the document and ends at the first "?>".
_DECLARATION_RE = re.compile(rb"\A\s*<\?xml(?=[\s?])(.*?)\?>", re.DOTALL)
_DECLARATION_START_RE = re.compile(rb"\A\s*<\?xml(?=[\s?])")
_ENCODING_ATTR_RE = re.compile(rb"\sencoding\s*=", re.IGNORECASE)
_QUOTED_VALUE_RE = re.compile(rb"""\s*(?:"([^"]*)"|'([^']*)')""")

_IMPLICIT_DEFAULTS: dict[tuple[int, ByteOrder], str] = {
    (2, ByteOrder.LITTLE_ENDIAN): "utf-16le",
    (2, ByteOrder.BIG_ENDIAN): "utf-16be",
    (4, ByteOrder.LITTLE_ENDIAN): "utf-32le",
    (4, ByteOrder.BIG_ENDIAN): "utf-32be",
}


def _implicit_default(layout: Layout) -> str:
    return _IMPLICIT_DEFAULTS.get((layout.width, layout.order), "utf-8")


def detect_xml_declaration(data: bytes, layout: Layout) -> Signal | None:
    """Extract the encoding named by the XML declaration opening *data*.

    Only a declaration at the very start of the document (after the BOM and
    optional whitespace) counts.  A declaration without an ``encoding``
    pseudo-attribute implies UTF-8, or the UTF-16/UTF-32 variant matching
    *layout* for documents stored in wider code units.

    :param data: The sniffing window, BOM included.
    :param layout: Layout of the window, from
        :func:`~xhtmlchardet.pipeline.bom.detect_layout`.
    :returns: A signal, or ``None`` for a missing, malformed, or unusable
        declaration.
    """
    head = layout.ascii_view(data, XML_DECLARATION_LIMIT)
    match = _DECLARATION_RE.match(head)
    if match is None:
        if _DECLARATION_START_RE.match(head):
            logger.debug("XML declaration is not terminated within the window")
        return None

    body = match.group(1)
    attr = _ENCODING_ATTR_RE.search(body)
    if attr is None:
        charset = _implicit_default(layout)
        logger.debug("XML declaration without encoding, assuming %s", charset)
        return Signal(source=SignalSource.XML_DECLARATION, charset=charset)

    value = _QUOTED_VALUE_RE.match(body, attr.end())
    if value is None:
        logger.debug("XML declaration has a malformed encoding value")
        return None

    raw = value.group(1) if value.group(1) is not None else value.group(2)
    charset = canonical_name(raw)
    if charset is None:
        logger.debug("XML declaration names unknown encoding %r", raw)
        return None
    return Signal(
        source=SignalSource.XML_DECLARATION,
        charset=with_byte_order(charset, layout.width, layout.order),
    )
