"""
Seed alignment toolkit: Stockholm parsing, consensus calling, quality
summaries and A2M conversion for transposable element seed alignments.
"""

# Version info - keep at top
__version__ = "1.0.0"
__description__ = "Stockholm seed alignment parsing, consensus calling and A2M conversion"

from .core import (
    SeedAlignmentError,
    MissingReferenceError,
    EmptyAlignmentError,
    FormatConsistencyError,
    MalformedAlignmentError,
    UnsupportedTagError,
    AlignmentRow,
    SeedAlignment,
    Orientation,
    AlignmentSummary,
    A2MAlignment,
    ScoringParams,
    StockholmParser,
    parse_stockholm,
    majority_consensus,
    scored_consensus,
    summarize,
    to_a2m,
)

__all__ = [
    'SeedAlignmentError',
    'MissingReferenceError',
    'EmptyAlignmentError',
    'FormatConsistencyError',
    'MalformedAlignmentError',
    'UnsupportedTagError',
    'AlignmentRow',
    'SeedAlignment',
    'Orientation',
    'AlignmentSummary',
    'A2MAlignment',
    'ScoringParams',
    'StockholmParser',
    'parse_stockholm',
    'majority_consensus',
    'scored_consensus',
    'summarize',
    'to_a2m',
    '__version__',
    '__description__',
]
