"""
Error types raised by the seed alignment core.
"""

from typing import Optional


class SeedAlignmentError(ValueError):
    """Base class for all seed alignment errors."""


class MissingReferenceError(SeedAlignmentError):
    """The Stockholm text ended without an RF (reference mask) line."""


class EmptyAlignmentError(SeedAlignmentError):
    """A column-wise operation was requested on an alignment with no rows."""


class UnsupportedTagError(SeedAlignmentError):
    """A multi-valued #=GF tag was repeated; only single-valued tags are stored."""


class MalformedAlignmentError(SeedAlignmentError):
    """Row lengths disagree with each other or with the reference mask."""

    def __init__(self, message: str, seq_id: Optional[str] = None,
                 expected: Optional[int] = None, found: Optional[int] = None):
        super().__init__(message)
        self.seq_id = seq_id
        self.expected = expected
        self.found = found


class FormatConsistencyError(SeedAlignmentError):
    """A2M conversion produced a different number of match columns for a row."""

    def __init__(self, seq_id: str, expected: int, found: int, alignment: str = ""):
        message = (
            f"Error converting to A2M format. The number of match columns is not "
            f"consistent (was {expected} and now {found}) for sequence '{seq_id}'"
        )
        if alignment:
            message += f". Offending line: {alignment}"
        super().__init__(message)
        self.seq_id = seq_id
        self.expected = expected
        self.found = found
