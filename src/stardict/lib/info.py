"""Dictionary metadata read from the .ifo file."""

from enum import IntEnum
from pydantic import BaseModel, Field
from typing import Optional
from .exceptions import ConfigurationError, InvalidInfoFileError

IFO_MAGIC = "StarDict's dict ifo file"


class OffsetFormat(IntEnum):
    """
    Width of the data offset stored in each .idx record.
    The value is the idxoffsetbits value from the .ifo file.
    """

    OFFSET_32 = 32
    OFFSET_64 = 64

    @property
    def width(self) -> int:
        """Width of the offset field in bytes."""
        return self.value // 8


class DictionaryInfo(BaseModel):
    """
    Parses the .ifo file, which describes the dictionary and tells the
    index reader how many records to expect and how wide their offsets are.

    From `StarDictFileFormat`:
    StarDict's dict ifo file
    version=2.4.2
    [options]

    The "wordcount" is the count of word entries in .idx file, it must be
    right. "idxoffsetbits" can be 64 or 32, its default is 32.
    """

    word_count: int = Field(..., ge=0, description="Number of records in the .idx file")
    idx_offset_format: OffsetFormat = Field(OffsetFormat.OFFSET_32, description="Width of .idx data offsets")
    version: Optional[str] = None
    bookname: Optional[str] = None
    idx_file_size: Optional[int] = None
    syn_word_count: Optional[int] = None
    author: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    same_type_sequence: Optional[str] = None
    raw_data: dict = {}

    @classmethod
    def from_ifo_file(cls, filepath: str) -> "DictionaryInfo":
        """Reads and parses an .ifo file from disk."""
        with open(filepath, "r", encoding="utf-8") as f:
            return cls.from_ifo_text(f.read())

    @classmethod
    def from_ifo_text(cls, text: str) -> "DictionaryInfo":
        """
        Parses the text of an .ifo file.

        Raises:
            InvalidInfoFileError: if the magic line, a key=value line or
                the wordcount is invalid
            ConfigurationError: if idxoffsetbits is neither 32 nor 64
        """
        lines = text.lstrip("\ufeff").splitlines()
        if not lines or lines[0].strip() != IFO_MAGIC:
            raise InvalidInfoFileError(f"Invalid .ifo header, expected {IFO_MAGIC!r}")

        options = {}
        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            key, separator, value = line.partition("=")
            if not separator:
                raise InvalidInfoFileError(f"Line {line_number} is not a key=value pair: {line!r}")
            options[key.strip()] = value

        if "wordcount" not in options:
            raise InvalidInfoFileError("Missing required key 'wordcount'")

        parsed = {
            "word_count": cls._parse_count(options, "wordcount"),
            "idx_offset_format": cls._parse_offset_format(options.get("idxoffsetbits", "32")),
            "version": options.get("version"),
            "bookname": options.get("bookname"),
            "idx_file_size": cls._parse_count(options, "idxfilesize"),
            "syn_word_count": cls._parse_count(options, "synwordcount"),
            "author": options.get("author"),
            "email": options.get("email"),
            "website": options.get("website"),
            "description": options.get("description"),
            "date": options.get("date"),
            "same_type_sequence": options.get("sametypesequence"),
        }

        return cls(**parsed, raw_data={"raw": text, "parsed": options})

    @staticmethod
    def _parse_count(options: dict, key: str) -> Optional[int]:
        if key not in options:
            return None
        try:
            value = int(options[key].strip())
        except ValueError:
            raise InvalidInfoFileError(f"Invalid {key}: {options[key]!r}")
        if value < 0:
            raise InvalidInfoFileError(f"Invalid {key}: {value} is negative")
        return value

    @staticmethod
    def _parse_offset_format(value: str) -> OffsetFormat:
        try:
            return OffsetFormat(int(value.strip()))
        except ValueError:
            raise ConfigurationError(f"Unsupported idxoffsetbits: {value!r} (expected 32 or 64)")
