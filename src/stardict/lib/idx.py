"""Parser for the .idx index file."""

from typing import BinaryIO, List, Optional
from .exceptions import ConfigurationError, EndOfStream, MalformedIndexError
from .index import DictionaryIndex, IndexEntry
from .info import DictionaryInfo, OffsetFormat
from .reader import IndexReader
import io
import logging


class IdxParser:
    """
    Parses a StarDict .idx file into a DictionaryIndex.

    The .idx file has no header and no trailer, only records back to back:

    From `StarDictFileFormat`:
    The word list is a sorted list of word entries.
    Each entry in the word list contains three fields, one after the other:
         word_str;  // a utf-8 string terminated by '\\0'.
         word_data_offset;  // word data's offset in .dict file
         word_data_size;  // word data's total size in .dict file

    The expected number of records and the offset width come from the
    .ifo file. A record count that disagrees with the .ifo is an error,
    unless tolerate_info_mismatch is set, in which case it is logged as a
    warning and the index is returned as parsed.
    """

    def __init__(
        self,
        info: DictionaryInfo,
        tolerate_info_mismatch: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self.info = info
        self.tolerate_info_mismatch = tolerate_info_mismatch
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, stream: BinaryIO) -> DictionaryIndex:
        """
        Parses the index from a binary stream positioned at its first record.

        The stream is read to the end but not closed.

        Raises:
            MalformedIndexError: if the index is truncated, holds more records
                than the .ifo declares, fails to read, or (in strict mode)
                holds fewer records than declared
            ConfigurationError: if the offset format is not 32 or 64 bit
        """
        self.logger.debug(
            f"Parsing index: {self.info.word_count} words expected, offset format {self.info.idx_offset_format}"
        )

        entries = self._read_entries(IndexReader(stream))
        self._validate_entries(entries)

        self.logger.debug(f"Parsed {len(entries)} index entries")
        return DictionaryIndex(entries=tuple(entries))

    def _read_entries(self, reader: IndexReader) -> List[IndexEntry]:
        """
        Reads records until the stream ends at a record boundary.

        Running out of data is only acceptable before the first byte of a
        headword. Once a headword has been read, the offset and size must
        follow.
        """
        entries = []
        in_record = False

        try:
            while True:
                in_record = False
                word = reader.read_text()
                in_record = True

                data_offset = self._read_data_offset(reader)
                data_size = reader.read_uint32()

                entries.append(IndexEntry(word=word, data_offset=data_offset, data_size=data_size))

                if len(entries) > self.info.word_count:
                    raise MalformedIndexError(
                        f"Found more words than declared in info: record {len(entries)} "
                        f"ends at offset {reader.position}, wordcount is {self.info.word_count}"
                    )
        except EndOfStream as e:
            if in_record:
                raise MalformedIndexError(
                    f"Partial record at end of index: stream ended at offset {reader.position} "
                    f"before the entry for {word!r} was complete"
                ) from e

        return entries

    def _read_data_offset(self, reader: IndexReader) -> int:
        """Reads the data offset with the width given by idxoffsetbits."""
        offset_format = self.info.idx_offset_format

        if offset_format == OffsetFormat.OFFSET_64:
            return reader.read_uint64()
        elif offset_format == OffsetFormat.OFFSET_32:
            return reader.read_uint32()
        else:
            raise ConfigurationError(f"DictionaryInfo contains an unknown offset format: {offset_format!r}")

    def _validate_entries(self, entries: List[IndexEntry]):
        """Checks the number of records read against the .ifo wordcount."""
        if len(entries) == self.info.word_count:
            return

        message = (
            f"Info and index word counts did not match: "
            f"index has {len(entries)}, info declares {self.info.word_count}"
        )
        if self.tolerate_info_mismatch:
            self.logger.warning(message)
        else:
            raise MalformedIndexError(message)


def parse_idx_bytes(
    data: bytes,
    info: DictionaryInfo,
    tolerate_info_mismatch: bool = False,
    logger: Optional[logging.Logger] = None,
) -> DictionaryIndex:
    """Parses an index held in memory."""
    parser = IdxParser(info, tolerate_info_mismatch=tolerate_info_mismatch, logger=logger)
    return parser.parse(io.BytesIO(data))


def parse_idx_file(
    filepath: str,
    info: DictionaryInfo,
    tolerate_info_mismatch: bool = False,
    logger: Optional[logging.Logger] = None,
) -> DictionaryIndex:
    """Opens an .idx file, parses it and closes it again."""
    parser = IdxParser(info, tolerate_info_mismatch=tolerate_info_mismatch, logger=logger)
    with open(filepath, "rb") as f:
        return parser.parse(f)
