"""Error types raised by recordkit.

Absence is not an error: lookups return ``None`` when nothing matches.
"""


class RecordkitError(Exception):
    """Base class for every error recordkit raises."""


class InvalidInputError(RecordkitError, ValueError):
    """A required field was empty or had the wrong type."""


class ExportIOError(RecordkitError, OSError):
    """The export destination could not be opened, written, or read."""


class SerializationError(RecordkitError, ValueError):
    """A record set could not be encoded to or decoded from structured text."""


class ScaffoldIOError(RecordkitError, OSError):
    """A project skeleton could not be written to its target directory."""
