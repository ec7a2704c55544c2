"""Custom exception hierarchy for the crossword engine."""


class CrosserError(Exception):
    """Base exception for engine failures."""


class PuzzleIOError(CrosserError):
    """Raised when a puzzle file cannot be read or written."""


class PuzzleFormatError(CrosserError):
    """Raised when a persisted puzzle document cannot be parsed."""


class UnknownEntryError(CrosserError, LookupError):
    """Raised when no entry exists for a label on the requested axis."""
