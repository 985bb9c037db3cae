"""In-memory model of a parsed .idx file."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Iterator, List, Optional, Tuple


class IndexEntry(BaseModel):
    """
    A single .idx record: a headword and the location of its definition
    in the .dict file.
    """

    model_config = ConfigDict(frozen=True)

    word: str
    data_offset: int = Field(..., ge=0, description="Offset of the definition in the .dict file")
    data_size: int = Field(..., ge=0, description="Size of the definition in bytes")


class DictionaryIndex(BaseModel):
    """
    The parsed index, entries in the order they appear in the .idx file.

    StarDict sorts the index so that lookups can binary search it, so the
    file order is kept exactly. Headwords are not guaranteed to be unique.
    """

    model_config = ConfigDict(frozen=True)

    entries: Tuple[IndexEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self.entries)

    def __getitem__(self, position: int) -> IndexEntry:
        return self.entries[position]

    def words(self) -> List[str]:
        """Get all headwords in file order."""
        return [entry.word for entry in self.entries]

    def get_entry(self, word: str) -> Optional[IndexEntry]:
        """
        Get the first entry for a headword.

        Args:
            word: Headword to look up, matched exactly

        Returns:
            The first matching entry or None if not found
        """
        for entry in self.entries:
            if entry.word == word:
                return entry
        return None

    def get_entries(self, word: str) -> List[IndexEntry]:
        """Get every entry for a headword, in file order."""
        return [entry for entry in self.entries if entry.word == word]
