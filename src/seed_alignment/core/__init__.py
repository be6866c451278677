"""
Core modules for seed alignment parsing and derivation.
"""

from .exceptions import (
    SeedAlignmentError,
    MissingReferenceError,
    EmptyAlignmentError,
    FormatConsistencyError,
    MalformedAlignmentError,
    UnsupportedTagError
)

from .models import (
    AlignmentRow,
    SeedAlignment,
    Diagnostic,
    Orientation,
    SummaryRecord,
    AlignmentSummary,
    A2MRecord,
    A2MAlignment,
    is_match_column,
    validate_alignment
)

from .scoring import (
    ALPHABET,
    SUBSTITUTION_MATRIX,
    ScoringParams
)

from .stockholm import (
    StockholmParser,
    parse_stockholm,
    classify_line,
    LINE_MATCHERS
)

from .consensus import (
    majority_consensus,
    scored_consensus,
    cpg_correction,
    consensus_for
)

from .summary import (
    decode_sequence_id,
    summarize
)

from .a2m import (
    reference_mask,
    to_a2m,
    verify_match_columns
)

__all__ = [
    # Errors
    'SeedAlignmentError',
    'MissingReferenceError',
    'EmptyAlignmentError',
    'FormatConsistencyError',
    'MalformedAlignmentError',
    'UnsupportedTagError',

    # Data model
    'AlignmentRow',
    'SeedAlignment',
    'Diagnostic',
    'Orientation',
    'SummaryRecord',
    'AlignmentSummary',
    'A2MRecord',
    'A2MAlignment',
    'is_match_column',
    'validate_alignment',

    # Scoring
    'ALPHABET',
    'SUBSTITUTION_MATRIX',
    'ScoringParams',

    # Parser
    'StockholmParser',
    'parse_stockholm',
    'classify_line',
    'LINE_MATCHERS',

    # Consensus
    'majority_consensus',
    'scored_consensus',
    'cpg_correction',
    'consensus_for',

    # Summary
    'decode_sequence_id',
    'summarize',

    # A2M
    'reference_mask',
    'to_a2m',
    'verify_match_columns',
]
