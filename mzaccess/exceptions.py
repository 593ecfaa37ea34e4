"""
Exception hierarchy for mzaccess.

Absent values are returned as ``None`` by the accessors and never raised.
Everything in this module describes a failure the caller can recover from:
nothing here is meant to abort the interpreter.
"""


class MzAccessError(Exception):
    """Base exception class for the mzaccess library."""
    pass


class ReaderOpenError(MzAccessError, OSError):
    """Raised when a file cannot be opened or recognised as a spectrum source."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open {path}: {reason}")


class ReaderClosedError(MzAccessError, ValueError):
    """Raised when a reader is used after ``close()``."""
    pass


class NotFoundError(MzAccessError, LookupError):
    """Base class for lookups that found nothing."""
    pass


class SpectrumNotFound(NotFoundError, IndexError):
    """Raised when a spectrum index or native id does not exist in the file."""

    def __init__(self, key):
        self.key = key
        if isinstance(key, int):
            message = f"No spectrum at index {key}"
        else:
            message = f"No spectrum with id {key!r}"
        super().__init__(message)


class ScanNotFound(NotFoundError, IndexError):
    """Raised when a scan event index is outside an acquisition."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Scan index {index} out of range for acquisition with {count} scan(s)")


class ParamValueParseError(MzAccessError, ValueError):
    """Raised when a parameter value cannot be coerced to the requested type."""

    def __init__(self, name: str, requested: str, value):
        self.name = name
        self.requested = requested
        self.value = value
        super().__init__(f"Cannot interpret value {value!r} of param {name!r} as {requested}")


class CURIEParseError(MzAccessError, ValueError):
    """Raised when text is not a ``PREFIX:ACCESSION`` term identifier."""
    pass


class ArrayRetrievalError(MzAccessError, LookupError):
    """Raised when a record lacks a signal array an operation depends on."""
    pass


class ReleasedHandleError(MzAccessError, RuntimeError):
    """Raised when a view is used after the record that owns it was released."""
    pass
