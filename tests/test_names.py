# tests/test_names.py
from __future__ import annotations

import pytest

from xhtmlchardet.enums import ByteOrder
from xhtmlchardet.names import canonical_name, with_byte_order


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("utf-8", "utf-8"),
        ("UTF-8", "utf-8"),
        ("UTF8", "utf-8"),
        ("utf_8", "utf-8"),
        ("utf-8-sig", "utf-8"),
        (" utf-8 ", "utf-8"),
        ("latin1", "iso-8859-1"),
        ("ISO-8859-1", "iso-8859-1"),
        ("ISO_8859-1", "iso-8859-1"),
        ("iso-8859-15", "iso-8859-15"),
        ("windows-1252", "windows-1252"),
        ("cp1251", "windows-1251"),
        ("utf-16", "utf-16"),
        ("utf_16_le", "utf-16le"),
        ("UTF-16BE", "utf-16be"),
        ("utf-32le", "utf-32le"),
        ("us-ascii", "ascii"),
        ("shift-jis", "shift_jis"),
        ("Shift_JIS", "shift_jis"),
        ("euc-jp", "euc-jp"),
        ("EUC-KR", "euc-kr"),
        ("iso-2022-jp", "iso-2022-jp"),
        ("gb2312", "gb2312"),
        ("koi8-r", "koi8-r"),
        ("windows-874", "windows-874"),
        ("cp874", "windows-874"),
        ("windows-31j", "windows-31j"),
        ("cp932", "windows-31j"),
        ("x-sjis", "shift_jis"),
        ("x-mac-roman", "mac-roman"),
        ("x-cp1252", "windows-1252"),
        ("iso-8859-8-i", "iso-8859-8"),
        ("big5-hkscs", "big5-hkscs"),
        ("big5hkscs", "big5-hkscs"),
    ],
)
def test_canonical_name(label, expected):
    assert canonical_name(label) == expected


def test_canonical_name_is_idempotent():
    for label in (
        "UTF8",
        "latin1",
        "cp1252",
        "utf_16_le",
        "euc_jp",
        "sjis",
        "cp874",
        "ms_kanji",
        "x-sjis",
        "big5_hkscs",
    ):
        once = canonical_name(label)
        assert once is not None
        assert canonical_name(once) == once


def test_bytes_label():
    assert canonical_name(b"Windows-1252") == "windows-1252"


def test_non_ascii_bytes_label():
    assert canonical_name(b"utf-8\xff") is None


@pytest.mark.parametrize("label", [None, "", "   ", "not-a-charset", "ebcdic"])
def test_unknown_labels(label):
    assert canonical_name(label) is None


@pytest.mark.parametrize("label", ["base64", "zlib", "hex", "rot13"])
def test_non_text_codecs_rejected(label):
    assert canonical_name(label) is None


@pytest.mark.parametrize(
    "label",
    ["idna", "punycode", "unicode_escape", "raw-unicode-escape", "utf-7", "UTF7"],
)
def test_codecs_that_never_label_documents_rejected(label):
    assert canonical_name(label) is None


def test_with_byte_order_utf16():
    assert with_byte_order("utf-16", 2, ByteOrder.LITTLE_ENDIAN) == "utf-16le"
    assert with_byte_order("utf-16", 2, ByteOrder.BIG_ENDIAN) == "utf-16be"


def test_with_byte_order_utf32():
    assert with_byte_order("utf-32", 4, ByteOrder.LITTLE_ENDIAN) == "utf-32le"
    assert with_byte_order("utf-32", 4, ByteOrder.BIG_ENDIAN) == "utf-32be"


def test_with_byte_order_needs_known_order():
    assert with_byte_order("utf-16", 1, ByteOrder.NOT_APPLICABLE) == "utf-16"


def test_with_byte_order_needs_matching_width():
    assert with_byte_order("utf-16", 4, ByteOrder.LITTLE_ENDIAN) == "utf-16"


def test_with_byte_order_leaves_other_names():
    assert with_byte_order("utf-8", 2, ByteOrder.LITTLE_ENDIAN) == "utf-8"
    assert with_byte_order("utf-16be", 2, ByteOrder.LITTLE_ENDIAN) == "utf-16be"
