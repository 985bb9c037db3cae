"""Tests for the primitive .idx field reader."""

import io
import pytest
from stardict.lib.exceptions import EndOfStream, MalformedIndexError
from stardict.lib.reader import IndexReader


class TrickleStream:
    """A stream that returns at most one byte per read, like a slow pipe."""

    def __init__(self, data: bytes):
        self.data = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        return self.data.read(min(size, 1))


def test_read_text():
    """Reads a headword and consumes its terminator."""
    reader = IndexReader(io.BytesIO(b"cat\x00dog\x00"))

    assert reader.read_text() == "cat"
    assert reader.position == 4
    assert reader.read_text() == "dog"
    assert reader.position == 8


def test_read_text_empty_word():
    """A lone NUL is an empty headword, not end of stream."""
    reader = IndexReader(io.BytesIO(b"\x00"))

    assert reader.read_text() == ""


def test_read_text_utf8():
    """Headwords are decoded as UTF-8."""
    reader = IndexReader(io.BytesIO("naïve\x00".encode("utf-8")))

    assert reader.read_text() == "naïve"


def test_read_text_invalid_utf8_is_replaced():
    """Undecodable bytes do not abort the read."""
    reader = IndexReader(io.BytesIO(b"ab\xffc\x00"))

    assert reader.read_text() == "ab\ufffdc"


def test_read_text_end_of_stream():
    """Nothing left before the headword is a clean end of stream."""
    reader = IndexReader(io.BytesIO(b""))

    with pytest.raises(EndOfStream):
        reader.read_text()


def test_read_text_unterminated():
    """Running out of data inside a headword is malformed."""
    reader = IndexReader(io.BytesIO(b"cat"))

    with pytest.raises(MalformedIndexError, match="not NUL-terminated"):
        reader.read_text()


@pytest.mark.parametrize(
    "data,width,expected",
    [
        (b"\x00\x00\x00\x10", 4, 16),
        (b"\xff\xff\xff\xff", 4, 0xFFFFFFFF),
        (b"\x00\x00\x00\x01\x00\x00\x00\x00", 8, 1 << 32),
        (b"\xff\xff\xff\xff\xff\xff\xff\xff", 8, 0xFFFFFFFFFFFFFFFF),
    ],
)
def test_read_uint(data, width, expected):
    """Integers are big-endian and unsigned."""
    reader = IndexReader(io.BytesIO(data))

    assert reader.read_uint(width) == expected
    assert reader.position == width


def test_read_uint32_and_uint64():
    """The fixed-width helpers read 4 and 8 bytes."""
    reader = IndexReader(io.BytesIO(b"\x00\x00\x00\x05" + b"\x00\x00\x00\x00\x00\x00\x01\x00"))

    assert reader.read_uint32() == 5
    assert reader.read_uint64() == 256


@pytest.mark.parametrize("width", [4, 8])
def test_read_uint_end_of_stream(width):
    """Nothing left before the integer is a clean end of stream."""
    reader = IndexReader(io.BytesIO(b""))

    with pytest.raises(EndOfStream):
        reader.read_uint(width)


@pytest.mark.parametrize("width,available", [(4, 1), (4, 3), (8, 4), (8, 7)])
def test_read_uint_truncated(width, available):
    """A partial integer is malformed."""
    reader = IndexReader(io.BytesIO(b"\x01" * available))

    with pytest.raises(MalformedIndexError, match="Truncated"):
        reader.read_uint(width)


def test_read_uint_unsupported_width():
    """Only 4 and 8 byte integers exist in an index."""
    reader = IndexReader(io.BytesIO(b"\x00\x00"))

    with pytest.raises(ValueError):
        reader.read_uint(2)


def test_short_reads_are_retried():
    """Fields are assembled from short reads."""
    reader = IndexReader(TrickleStream(b"word\x00\x00\x00\x00\x2a\x00\x00\x00\x00\x00\x00\x00\x07"))

    assert reader.read_text() == "word"
    assert reader.read_uint32() == 42
    assert reader.read_uint64() == 7


def test_reader_does_not_read_ahead():
    """Each field consumes exactly its own bytes from the stream."""
    stream = io.BytesIO(b"a\x00\x00\x00\x00\x01rest")
    reader = IndexReader(stream)

    reader.read_text()
    reader.read_uint32()

    assert stream.tell() == 6
    assert stream.read() == b"rest"


def test_closed_stream_is_malformed():
    """Reading a closed stream is reported as an index error."""
    stream = io.BytesIO(b"cat\x00")
    stream.close()
    reader = IndexReader(stream)

    with pytest.raises(MalformedIndexError, match="I/O error") as excinfo:
        reader.read_text()

    assert isinstance(excinfo.value.__cause__, ValueError)
