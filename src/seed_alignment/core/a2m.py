"""
Conversion of a seed alignment to A2M.

From https://compbio.soe.ucsc.edu/a2m-desc.html: uppercase characters and
'-' represent alignment columns, and there must be exactly the same number
of alignment columns per sequence. Lowercase characters (and '.')
represent insertions between alignment columns; the '.' placeholders are
dropped here.

For example the stockholm alignment

    cons:   AAA.CCT....CGGGATC
    seq1:   AAA.CCTAGTGCGGGATC
    seq2:   .....CT....CG.TATC
    seq3:   ..A.C......CGGGATC
    seq4:   AAAACCT....CG.....

becomes

    seq1    AAACCTagtgCGGGATC
    seq2    ----CTCG-TATC
    seq3    --AC--CGGGATC
    seq4    AAAaCCTCG-----
"""

import logging
from typing import Optional

from .consensus import scored_consensus
from .exceptions import FormatConsistencyError
from .models import (
    DELETION,
    GAP,
    INSERT_MARK,
    MATCH_MARK,
    A2MAlignment,
    A2MRecord,
    SeedAlignment,
    is_match_column,
    validate_alignment,
)
from .scoring import ScoringParams

logger = logging.getLogger(__name__)

DEFAULT_STRAND = '+'


def reference_mask(alignment: SeedAlignment, params: Optional[ScoringParams] = None) -> str:
    """
    The RF line when present, otherwise a mask inferred from the scored
    consensus: non-gap consensus columns are match columns.
    """
    if alignment.reference is not None:
        return alignment.reference
    logger.debug("No RF line, inferring reference mask from consensus")
    consensus = scored_consensus(alignment, params)
    return ''.join(INSERT_MARK if c == GAP else MATCH_MARK for c in consensus)


def verify_match_columns(a2m: A2MAlignment) -> int:
    """
    Check that every record has as many match columns as the first one and
    return that count (0 for an empty alignment).
    """
    expected = None
    for record in a2m.records:
        found = record.match_columns
        if expected is None:
            expected = found
        elif found != expected:
            raise FormatConsistencyError(record.seq_id, expected, found, record.a2m_seq)
    return expected or 0


def to_a2m(alignment: SeedAlignment, params: Optional[ScoringParams] = None) -> A2MAlignment:
    """
    Convert every row to A2M.

    Raises:
        MalformedAlignmentError: a row is not as long as the reference mask
        FormatConsistencyError: a row ends up with a different number of
            match columns than the first row
    """
    mask = reference_mask(alignment, params)
    validate_alignment(alignment, mask)

    result = A2MAlignment()

    for row in alignment.alignments:
        # Consistent starting point: uppercase with '.' for every gap
        buf = list(row.alignment.upper().replace(DELETION, GAP))
        seq_len = sum(1 for c in buf if c != GAP)

        rf_pos = 0
        model_start = None
        model_end = None
        for j, base in enumerate(buf):
            if not is_match_column(mask[j]):
                if base != GAP:
                    buf[j] = base.lower()
            else:
                rf_pos += 1
                if base == GAP:
                    buf[j] = DELETION
                else:
                    if model_start is None:
                        model_start = rf_pos
                    model_end = rf_pos

        a2m_seq = ''.join(c for c in buf if c != GAP)

        result.records.append(A2MRecord(
            seq_id=row.seqid,
            seq_start=row.start or 1,
            seq_end=row.end or seq_len,
            a2m_seq=a2m_seq,
            strand=row.strand or DEFAULT_STRAND,
            model_start=model_start,
            model_end=model_end,
        ))

    match_cols = verify_match_columns(result)
    logger.debug(f"Converted {len(result)} rows to A2M with {match_cols} match columns")
    return result
