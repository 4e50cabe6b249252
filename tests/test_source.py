# tests/test_source.py
from __future__ import annotations

import io

import pytest

from xhtmlchardet import SourceReadError, detect
from xhtmlchardet.source import read_window


class _Unseekable(io.RawIOBase):
    """A reader that cannot seek and returns at most three bytes per read."""

    def __init__(self, data: bytes) -> None:
        self._data = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        chunk = self._data.read(min(len(b), 3))
        b[: len(chunk)] = chunk
        return len(chunk)


class _FailsAfterFirstRead(io.RawIOBase):
    """A seekable reader whose connection drops after five bytes."""

    def __init__(self, data: bytes) -> None:
        self._data = io.BytesIO(data)
        self._reads = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def tell(self) -> int:
        return self._data.tell()

    def seek(self, pos: int, whence: int = io.SEEK_SET) -> int:
        return self._data.seek(pos, whence)

    def readinto(self, b) -> int:
        self._reads += 1
        if self._reads > 1:
            raise ConnectionResetError("connection reset by peer")
        chunk = self._data.read(min(len(b), 5))
        b[: len(chunk)] = chunk
        return len(chunk)


class _FailingReader(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        raise ConnectionResetError("connection reset by peer")


def test_bytes_sliced():
    assert read_window(b"abcdef", 4) == b"abcd"


def test_shorter_than_window():
    assert read_window(b"ab", 4) == b"ab"


def test_seekable_position_restored():
    f = io.BytesIO(b"0123456789")
    f.seek(2)
    assert read_window(f, 4) == b"2345"
    assert f.tell() == 2


def test_short_reads_are_joined():
    reader = _Unseekable(b"<meta charset='utf-8'>")
    assert read_window(reader, 10) == b"<meta char"


def test_unseekable_reader_is_consumed():
    reader = _Unseekable(b"0123456789")
    assert read_window(reader, 4) == b"0123"
    assert reader.read(3) == b"456"


def test_read_failure_raises_source_read_error():
    with pytest.raises(SourceReadError) as excinfo:
        read_window(_FailingReader(), 16)
    assert isinstance(excinfo.value.__cause__, ConnectionResetError)


def test_source_read_error_is_os_error():
    assert issubclass(SourceReadError, OSError)


def test_detect_propagates_read_error():
    with pytest.raises(SourceReadError):
        detect(_FailingReader(), hint="utf-8")


def test_text_mode_stream_rejected():
    with pytest.raises(TypeError, match="binary"):
        read_window(io.StringIO("<html>"), 16)


def test_position_restored_when_read_fails():
    reader = _FailsAfterFirstRead(b'<meta charset="utf-8"><p>text</p>')
    with pytest.raises(SourceReadError):
        detect(reader)
    assert reader.tell() == 0


def test_position_restored_from_offset_when_read_fails():
    reader = _FailsAfterFirstRead(b"0123456789" * 4)
    reader.seek(3)
    with pytest.raises(SourceReadError):
        read_window(reader, 16)
    assert reader.tell() == 3


def test_closed_file_raises_source_read_error():
    f = io.BytesIO(b'<meta charset="utf-8">')
    f.close()
    with pytest.raises(SourceReadError) as excinfo:
        detect(f)
    assert isinstance(excinfo.value.__cause__, ValueError)
