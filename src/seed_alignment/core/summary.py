"""
Per-instance quality summary of a seed alignment for visualization.

Each instance is compared to the scored consensus and its aligned model
positions are scored in fixed size windows (quality blocks).
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .consensus import scored_consensus
from .models import (
    DIVERGENCE_PLACEHOLDER,
    GAP,
    AlignmentSummary,
    Orientation,
    SeedAlignment,
    SummaryRecord,
    aligned_span,
)
from .scoring import ScoringParams

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 10

# species:assembly:sequence:start-end, species and assembly optional
ID_NOMENCLATURE_RE = re.compile(r'^(?:([^:\s]+):)?(?:([^:\s]+):)?(\S+):(\d+)-(\d+)$')
# sequence_start_end[_R]
LEGACY_NOMENCLATURE_RE = re.compile(r'^(\S+)_(\d+)_(\d+)(?:_(R))?$')
REFERENCE_PREFIX = 'ref:'


@dataclass(frozen=True)
class DecodedId:
    name: str
    start: int
    end: int
    orientation: Orientation


def decode_sequence_id(seq_id: str) -> DecodedId:
    """
    Decode coordinates and orientation from an instance identifier.

    Recognised forms, tried in order:
      [species:][assembly:]sequence:start-end   start > end means reverse strand
      sequence_start_end[_R]                    legacy; start/end are taken as given
    Anything else keeps the whole identifier as the name with zero
    coordinates and unknown orientation.
    """
    match = ID_NOMENCLATURE_RE.match(seq_id)
    if match:
        start, end = int(match.group(4)), int(match.group(5))
        if start <= end:
            return DecodedId(match.group(3), start, end, Orientation.FORWARD)
        return DecodedId(match.group(3), end, start, Orientation.REVERSE)

    match = LEGACY_NOMENCLATURE_RE.match(seq_id)
    if match:
        orientation = Orientation.REVERSE if match.group(4) == 'R' else Orientation.FORWARD
        return DecodedId(match.group(1), int(match.group(2)), int(match.group(3)), orientation)

    return DecodedId(seq_id, 0, 0, Orientation.UNKNOWN)


def window_score(window_size: int, mismatches: int, deletions: int, insertions: int) -> int:
    score = window_size - (mismatches + deletions)
    if insertions:
        score -= 1
    return max(score, 1)


def _summarize_row(seq_id: str, sequence: str, consensus: str, window_size: int) -> SummaryRecord:
    decoded = decode_sequence_id(seq_id)
    scores = []
    consensus_start = 0
    aligned = 0

    span = aligned_span(sequence)
    if span is not None:
        align_start, align_end = span
        insertions = deletions = mismatches = 0
        model_pos = 0

        for j in range(align_end + 1):
            c_base = consensus[j] if j < len(consensus) else GAP
            if c_base != GAP:
                model_pos += 1

            if j < align_start:
                continue

            if consensus_start == 0:
                consensus_start = model_pos

            a_base = sequence[j]
            if c_base == GAP:
                if a_base != GAP:
                    insertions += 1
                continue

            aligned += 1
            if a_base == GAP:
                deletions += 1
            elif c_base.upper() != a_base.upper():
                mismatches += 1

            if aligned % window_size == 0:
                scores.append(window_score(window_size, mismatches, deletions, insertions))
                insertions = deletions = mismatches = 0

        # Partial trailing window
        if mismatches or deletions or insertions:
            scores.append(window_score(window_size, mismatches, deletions, insertions))

    return SummaryRecord(
        seq_id=decoded.name,
        consensus_start=consensus_start,
        aligned_length=aligned,
        window_scores=scores,
        orientation=decoded.orientation,
        divergence=DIVERGENCE_PLACEHOLDER,
        seq_start=decoded.start,
        seq_end=decoded.end,
    )


def summarize(alignment: SeedAlignment, window_size: int = DEFAULT_WINDOW_SIZE,
              params: Optional[ScoringParams] = None) -> AlignmentSummary:
    """
    Build the AlignmentSummary for every instance row.

    Rows whose identifier starts with 'ref:' are the reference track and
    are left out.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be positive, got {window_size}")

    consensus = scored_consensus(alignment, params)
    summary = AlignmentSummary(
        quality_block_len=window_size,
        length=sum(1 for c in consensus if c != GAP),
    )

    for row in alignment.alignments:
        if row.seqid.startswith(REFERENCE_PREFIX):
            continue
        summary.records.append(_summarize_row(row.seqid, row.alignment, consensus, window_size))

    logger.debug(f"Summarized {summary.num_alignments} of {alignment.num_rows} rows, "
                 f"consensus length {summary.length}")
    return summary
