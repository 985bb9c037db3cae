"""Forward-only primitive reader for .idx streams."""

from typing import BinaryIO, Optional
from .exceptions import EndOfStream, MalformedIndexError
from .text_utils import decode_headword
import struct


class IndexReader:
    """
    Reads the primitive fields of a StarDict index from a binary stream.

    The stream is consumed strictly forward, one field at a time, and is
    never seeked or closed. Every read distinguishes two kinds of end of
    input:

    - EndOfStream: nothing at all was available when the field started.
      At a record boundary this is how a well-formed index ends.
    - MalformedIndexError: the field was started but the stream ran out
      before it was complete.

    From `StarDictFileFormat`:
    word_str;  // a utf-8 string terminated by '\\0'.
    word_data_offset;  // word data's offset in .dict file
    word_data_size;  // word data's total size in .dict file

    word_data_offset is a 32 or 64 bit unsigned number (see idxoffsetbits
    in the .ifo file) and word_data_size is always 32 bit, both in network
    byte order (big-endian).
    """

    UINT_FORMATS = {
        4: ">I",
        8: ">Q",
    }

    def __init__(self, stream: BinaryIO, encoding: Optional[str] = None):
        self.stream = stream
        self.encoding = encoding
        self.position = 0

    def read_text(self) -> str:
        """
        Reads a NUL-terminated string and returns it without the terminator.

        Raises:
            EndOfStream: if the stream is exhausted before the first byte
            MalformedIndexError: if the stream ends before the NUL byte
        """
        start = self.position
        buffer = bytearray()

        while True:
            byte = self._read_stream(1)
            if not byte:
                if start == self.position:
                    raise EndOfStream(f"End of stream at offset {start}")
                raise MalformedIndexError(
                    f"Headword starting at offset {start} is not NUL-terminated "
                    f"({len(buffer)} bytes read before end of stream)"
                )
            self.position += 1
            if byte == b"\x00":
                break
            buffer += byte

        return decode_headword(bytes(buffer), self.encoding)

    def read_uint(self, width: int) -> int:
        """
        Reads a big-endian unsigned integer of 4 or 8 bytes.

        Raises:
            EndOfStream: if the stream is exhausted before the first byte
            MalformedIndexError: if fewer than width bytes remain
        """
        if width not in self.UINT_FORMATS:
            raise ValueError(f"Unsupported integer width: {width} (expected 4 or 8)")

        start = self.position
        raw_bytes = self._read(width)

        if not raw_bytes:
            raise EndOfStream(f"End of stream at offset {start}")
        if len(raw_bytes) < width:
            raise MalformedIndexError(
                f"Truncated {width * 8}-bit integer at offset {start}: "
                f"{len(raw_bytes)} of {width} bytes available"
            )

        return struct.unpack(self.UINT_FORMATS[width], raw_bytes)[0]

    def read_uint32(self) -> int:
        return self.read_uint(4)

    def read_uint64(self) -> int:
        return self.read_uint(8)

    def _read(self, size: int) -> bytes:
        """Reads up to size bytes, retrying short reads until the stream is exhausted."""
        chunks = []
        remaining = size

        while remaining > 0:
            chunk = self._read_stream(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

        data = b"".join(chunks)
        self.position += len(data)
        return data

    def _read_stream(self, size: int) -> Optional[bytes]:
        """Reads from the underlying stream, turning I/O faults into MalformedIndexError."""
        try:
            return self.stream.read(size)
        except (OSError, ValueError) as e:
            # ValueError is what a closed file raises
            raise MalformedIndexError(f"I/O error reading index at offset {self.position}: {e}") from e
