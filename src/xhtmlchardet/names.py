"""Charset name canonicalisation.

Every name that leaves the detector goes through :func:`canonical_name`, so
that equivalent labels (``UTF8``, ``utf_8``, ``utf-8-sig``) compare equal and
are reported with a single lowercase spelling.

The codec registry decides which labels are real encodings; the registry's
own spelling (``iso8859-1``, ``cp1252``, ``utf-16-le``) is then rewritten to
the label web content actually uses (``iso-8859-1``, ``windows-1252``,
``utf-16le``).
"""

from __future__ import annotations

import codecs
import re

from xhtmlchardet.enums import ByteOrder

# Web labels the codec registry does not know, mapped to a registry name.
_WEB_LABELS: dict[str, str] = {
    "windows-874": "cp874",
    "windows-31j": "cp932",
    "x-sjis": "shift_jis",
    "x-mac-roman": "mac-roman",
    "x-cp1252": "cp1252",
    "x-euc-jp": "euc_jp",
    "x-gbk": "gbk",
    "iso-8859-8-i": "iso8859-8",
}

# Applied in order to the codec registry's name; first match wins.
_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^utf-8-sig$"), "utf-8"),
    (re.compile(r"^iso8859-(\d+)$"), r"iso-8859-\1"),
    (re.compile(r"^cp(125\d|874)$"), r"windows-\1"),
    (re.compile(r"^cp932$"), "windows-31j"),
    (re.compile(r"^big5hkscs$"), "big5-hkscs"),
    (re.compile(r"^utf-(16|32)-(le|be)$"), r"utf-\1\2"),
    (re.compile(r"^iso2022_"), "iso-2022-"),
)

# Registry names that keep their underscores on the web.
_KEEP_UNDERSCORES: frozenset[str] = frozenset(
    {"shift_jis", "shift_jis_2004", "shift_jisx0213"}
)

# Text codecs that never label a document.
_NOT_CHARSETS: frozenset[str] = frozenset(
    {"idna", "punycode", "unicode-escape", "raw-unicode-escape", "utf-7"}
)

# Encodings whose byte order can be resolved from the document layout,
# keyed by the code-unit width they use.
_ENDIAN_FAMILIES: dict[str, int] = {"utf-16": 2, "utf-32": 4}

_ORDER_SUFFIX: dict[ByteOrder, str] = {
    ByteOrder.LITTLE_ENDIAN: "le",
    ByteOrder.BIG_ENDIAN: "be",
}


def canonical_name(label: str | bytes | None) -> str | None:
    """Return the canonical lowercase name for *label*.

    :param label: A charset label as found in a document or header.
    :returns: The canonical name, or ``None`` if *label* is empty, does
        not name a text encoding known to Python, or names a codec that
        never labels a document (``idna``, ``utf-7``).
    """
    if label is None:
        return None
    if isinstance(label, bytes):
        try:
            label = label.decode("ascii")
        except UnicodeDecodeError:
            return None
    text = label.strip().lower()
    if not text:
        return None
    try:
        name = codecs.lookup(_WEB_LABELS.get(text, text)).name
        # Rejects bytes-to-bytes codecs such as base64 or zlib.
        "".encode(name)
    except (LookupError, ValueError):
        return None
    if name in _NOT_CHARSETS:
        return None

    for pattern, replacement in _REWRITES:
        rewritten, count = pattern.subn(replacement, name)
        if count:
            name = rewritten
            break
    if name not in _KEEP_UNDERSCORES:
        name = name.replace("_", "-")
    return name


def with_byte_order(name: str, width: int, order: ByteOrder) -> str:
    """Make an endian-less UTF-16/UTF-32 *name* explicit.

    A document declaring plain ``utf-16`` whose markup is laid out in
    little-endian 16-bit units is reported as ``utf-16le``.  Names from
    other families, or layouts that do not match the family's width, are
    returned unchanged.
    """
    suffix = _ORDER_SUFFIX.get(order)
    if suffix is None or _ENDIAN_FAMILIES.get(name) != width:
        return name
    return name + suffix
