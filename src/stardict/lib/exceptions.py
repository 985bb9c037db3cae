"""Custom exceptions for the StarDict index reader library."""


class StarDictError(Exception):
    """Base class for exceptions in this module."""

    pass


class EndOfStream(StarDictError):
    """Raised when the stream is exhausted before the first byte of a field."""

    pass


class MalformedIndexError(StarDictError):
    """Raised when the .idx data does not describe a valid index."""

    pass


class ConfigurationError(StarDictError):
    """Raised when dictionary metadata carries a value the reader cannot use."""

    pass


class InvalidInfoFileError(StarDictError):
    """Raised when the .ifo file is not a valid StarDict info file."""

    pass
