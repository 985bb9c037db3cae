"""
stardict - StarDict index library for Python

A pure Python library for reading the .idx index of StarDict dictionaries.
"""

from .lib.idx import IdxParser, parse_idx_bytes, parse_idx_file
from .lib.index import DictionaryIndex, IndexEntry
from .lib.info import DictionaryInfo, OffsetFormat
from .lib.exceptions import StarDictError, MalformedIndexError, ConfigurationError, InvalidInfoFileError

__version__ = "0.0.1"

__all__ = [
    "IdxParser",
    "parse_idx_bytes",
    "parse_idx_file",
    "DictionaryIndex",
    "IndexEntry",
    "DictionaryInfo",
    "OffsetFormat",
    "StarDictError",
    "MalformedIndexError",
    "ConfigurationError",
    "InvalidInfoFileError",
]
