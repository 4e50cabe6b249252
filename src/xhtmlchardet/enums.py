"""Enumerations for xhtmlchardet."""

import enum


class SignalSource(enum.IntEnum):
    """Where a charset signal came from.

    The integer value is the signal's rank: lower values are more
    trustworthy and are emitted first.
    """

    BOM = 0
    XML_DECLARATION = 1
    HTML_META = 2
    HINT = 3


class ByteOrder(enum.Enum):
    """Byte order of the code units holding the markup characters."""

    NOT_APPLICABLE = "n/a"
    BIG_ENDIAN = "be"
    LITTLE_ENDIAN = "le"
