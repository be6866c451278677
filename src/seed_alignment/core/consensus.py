"""
Consensus calling from a seed alignment.

Two callers are provided:
  - majority_consensus: simple majority rule over RF model columns
  - scored_consensus: substitution-matrix scoring per column followed by a
    CpG correction pass, one symbol per alignment column
"""

import logging
from collections import Counter
from typing import List, Optional, Sequence

import numpy as np

from .exceptions import EmptyAlignmentError
from .models import GAP, SeedAlignment, aligned_span, column_char, is_match_column
from .scoring import (
    ALPHABET,
    DEFAULT_PARAMS,
    SUBSTITUTION_MATRIX,
    UNAMBIGUOUS_BASES,
    ScoringParams,
    normalize_symbol,
    score,
    symbol_index,
)

logger = logging.getLogger(__name__)

NO_CALL = 'N'

CONSENSUS_METHODS = ('scored', 'majority')


def _column_tallies(width: int) -> List[Counter]:
    # Counter preserves insertion order, which decides majority ties
    return [Counter() for _ in range(width)]


# ================================================================
# Majority rule
# ================================================================
def majority_consensus(alignment: SeedAlignment) -> str:
    """
    Majority rule consensus over the model columns of the RF line.

    For every model column (any RF mark other than a gap mark) the most
    frequent non-gap residue is emitted; on a tie the residue seen first (in
    row order) wins. A model column with no residues at all is emitted as
    'N'. Insert columns are skipped, so the result has one symbol per model
    column of RF.
    """
    reference = alignment.reference or ''
    tallies = _column_tallies(len(reference))

    for row in alignment.alignments:
        for j, base in enumerate(row.alignment[:len(reference)]):
            if base != GAP:
                tallies[j][base.upper()] += 1

    consensus = []
    for j, mark in enumerate(reference):
        if not is_match_column(mark):
            continue
        high_base = NO_CALL
        high_count = 0
        for base, count in tallies[j].items():
            if count > high_count:
                high_base, high_count = base, count
        consensus.append(high_base)

    return ''.join(consensus)


# ================================================================
# Scored consensus
# ================================================================
def _tally_trimmed(alignment: SeedAlignment, width: int) -> np.ndarray:
    """
    Per-column symbol counts over each row's aligned span (leading and
    trailing gaps excluded, internal gaps included).

    Returns an array of shape (width, len(ALPHABET)).
    """
    counts = np.zeros((width, len(ALPHABET)), dtype=np.int64)
    for row in alignment.alignments:
        span = aligned_span(row.alignment)
        if span is None:
            continue
        first, last = span
        for j in range(first, min(last, width - 1) + 1):
            counts[j, symbol_index(row.alignment[j])] += 1
    return counts


def _best_symbol(column_scores: np.ndarray) -> str:
    """
    Highest scoring symbol. Later candidates only displace an equal score
    when they are plain nucleotides.
    """
    best = None
    max_score = None
    for idx, sym in enumerate(ALPHABET):
        s = column_scores[idx]
        if max_score is None or s > max_score:
            best, max_score = sym, s
        elif s == max_score and sym in UNAMBIGUOUS_BASES:
            best = sym
    return best


def cpg_correction(consensus: Sequence[str], rows: Sequence[str],
                   params: ScoringParams = DEFAULT_PARAMS) -> List[str]:
    """
    Re-call adjacent consensus pairs as CpG where the instances support it.

    Pairs are consecutive non-gap consensus positions (gap-only columns in
    between are skipped). For each pair the as-is score of the consensus
    dinucleotide is compared against a deamination-aware CG score; CA/TG
    instances count as evidence for an ancestral CG. When the CG score
    wins both positions are rewritten to 'C' and 'G'. Pairs are visited
    left to right and a rewrite is visible to the next pair.
    """
    cons = list(consensus)
    rewrites = 0
    anchors = [i for i, sym in enumerate(cons) if sym != GAP]

    for left, right in zip(anchors, anchors[1:]):
        cons_left = cons[left]
        cons_right = cons[right]
        cg_score = 0
        dn_score = 0

        for row in rows:
            hit_left = normalize_symbol(column_char(row, left))
            hit_right = normalize_symbol(column_char(row, right))
            if hit_left == GAP or hit_right == GAP:
                continue

            dn_score += score(cons_left, hit_left) + score(cons_right, hit_right)

            dinuc = hit_left + hit_right
            if dinuc in ('CA', 'TG'):
                cg_score += params.cg_param
            elif dinuc == 'TA':
                cg_score += params.ta_param
            elif dinuc in ('TC', 'TT'):
                # C->T transition; transversion scored normally
                cg_score += params.cg_trans_param + score('G', hit_right)
            elif dinuc in ('AA', 'GA'):
                cg_score += params.cg_trans_param + score('C', hit_left)
            else:
                cg_score += score('C', hit_left) + score('G', hit_right)

        if cg_score > dn_score:
            cons[left] = 'C'
            cons[right] = 'G'
            rewrites += 1

    if rewrites:
        logger.debug(f"CpG correction rewrote {rewrites} dinucleotide(s)")
    return cons


def scored_consensus(alignment: SeedAlignment, params: Optional[ScoringParams] = None) -> str:
    """
    Consensus refined with a substitution matrix and CpG correction.

    The result has one symbol per alignment column; '.' marks columns that
    score best as gap (or that no row covers).

    Raises:
        EmptyAlignmentError: the alignment has no rows
    """
    if not alignment.alignments:
        raise EmptyAlignmentError("Cannot compute a scored consensus for an alignment with no rows")
    params = params or DEFAULT_PARAMS

    width = alignment.width
    counts = _tally_trimmed(alignment, width)
    # scores[j, c] = sum_b counts[j, b] * matrix[c, b]
    scores = counts @ SUBSTITUTION_MATRIX.T
    covered = counts.sum(axis=1) > 0

    consensus = [
        _best_symbol(scores[j]) if covered[j] else GAP
        for j in range(width)
    ]

    rows = [row.alignment for row in alignment.alignments]
    consensus = cpg_correction(consensus, rows, params)
    return ''.join(consensus)


def consensus_for(alignment: SeedAlignment, method: str = 'scored',
                  params: Optional[ScoringParams] = None) -> str:
    """Consensus by method name; the scored consensus is returned without gaps."""
    if method == 'majority':
        return majority_consensus(alignment)
    if method == 'scored':
        return scored_consensus(alignment, params).replace(GAP, '')
    raise ValueError(f"Unknown consensus method '{method}', expected one of {CONSENSUS_METHODS}")
