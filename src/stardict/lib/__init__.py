"""
stardict.lib - Core library components

Modules for parsing StarDict dictionary files.
"""

from .idx import IdxParser, parse_idx_bytes, parse_idx_file
from .index import DictionaryIndex, IndexEntry
from .info import DictionaryInfo, OffsetFormat
from .reader import IndexReader
from .exceptions import (
    StarDictError,
    EndOfStream,
    MalformedIndexError,
    ConfigurationError,
    InvalidInfoFileError,
)

__all__ = [
    "IdxParser",
    "parse_idx_bytes",
    "parse_idx_file",
    "DictionaryIndex",
    "IndexEntry",
    "DictionaryInfo",
    "OffsetFormat",
    "IndexReader",
    "StarDictError",
    "EndOfStream",
    "MalformedIndexError",
    "ConfigurationError",
    "InvalidInfoFileError",
]
