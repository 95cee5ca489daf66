"""
Exception types raised by the decxor engine.

Setup problems (bad key, bad direction, missing input directory) abort a run
before any file is touched. Per-file I/O problems are raised as
`FileOpenError` / `FileWriteError`; the batch loop reports them and moves on
to the next file. Every class also derives from the builtin a caller would
naturally catch (`ValueError`, `FileNotFoundError`, `OSError`).
"""


class DecxorError(Exception):
    """Base class for every decxor failure."""


class InvalidKeyFormat(DecxorError, ValueError):
    """The key is empty or contains something other than ASCII digits."""


class InvalidDirection(DecxorError, ValueError):
    """The direction selector is neither forward (enc) nor inverse (dec)."""


class MissingInputDirectory(DecxorError, FileNotFoundError):
    """The input directory does not exist or is not a directory."""


class FileOpenError(DecxorError, OSError):
    """An input file could not be opened or read."""


class FileWriteError(DecxorError, OSError):
    """An output file could not be created or written."""


__all__ = [
    "DecxorError",
    "FileOpenError",
    "FileWriteError",
    "InvalidDirection",
    "InvalidKeyFormat",
    "MissingInputDirectory",
]
