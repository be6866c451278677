"""
Data model for seed alignments and the artifacts derived from them.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional

from .exceptions import MalformedAlignmentError

GAP = '.'
DELETION = '-'

# Reference mask marks; any RF character other than a gap mark is a model column
MATCH_MARK = 'x'
INSERT_MARK = '.'
INSERT_MARKS = frozenset('.-~')

# Placeholder reported for divergence; the summary does not compute it
DIVERGENCE_PLACEHOLDER = '0.0'

# ================================================================
# Parsed alignment
# ================================================================
@dataclass(frozen=True)
class AlignmentRow:
    seqid: str                       # identifier, often encodes provenance/coordinates
    alignment: str                   # aligned residues, '.' for gaps
    start: Optional[int] = None      # optional source coordinates used by A2M
    end: Optional[int] = None
    strand: Optional[str] = None

    def __len__(self) -> int:
        return len(self.alignment)


@dataclass
class SeedAlignment:
    """
    A single Stockholm record: #=GF headers plus ordered alignment rows.

    After parsing, headers always contain 'RF', the reference mask with one
    character per column ('x' = model column, '.' = insert column). The
    instance is treated as read-only by every derivation.

    Only single-valued #=GF tags are stored (last occurrence wins);
    multi-valued tags such as CC or DR are not accumulated.
    """
    headers: Dict[str, str] = field(default_factory=dict)
    alignments: List[AlignmentRow] = field(default_factory=list)
    version: Optional[str] = None
    diagnostics: List["Diagnostic"] = field(default_factory=list)

    @property
    def reference(self) -> Optional[str]:
        return self.headers.get('RF')

    @property
    def num_rows(self) -> int:
        return len(self.alignments)

    @property
    def width(self) -> int:
        """Column width: the longest of the RF line and every row."""
        lengths = [len(row.alignment) for row in self.alignments]
        lengths.append(len(self.reference or ''))
        return max(lengths)


@dataclass(frozen=True)
class Diagnostic:
    line_number: int   # 1-based
    content: str
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}: {self.content!r}"


def validate_alignment(alignment: SeedAlignment, mask: Optional[str] = None) -> None:
    """
    Check that every row has the same length as the reference mask.

    Raises MalformedAlignmentError naming the first offending row.
    """
    if mask is None:
        mask = alignment.reference
    expected = len(mask) if mask is not None else None

    for row in alignment.alignments:
        if expected is None:
            expected = len(row.alignment)
            continue
        if len(row.alignment) != expected:
            raise MalformedAlignmentError(
                f"Row '{row.seqid}' has {len(row.alignment)} columns, "
                f"expected {expected}",
                seq_id=row.seqid,
                expected=expected,
                found=len(row.alignment),
            )


def is_match_column(mark: str) -> bool:
    return mark not in INSERT_MARKS


def column_char(sequence: str, index: int) -> str:
    """Character at a column; columns past the end of a short row read as gap."""
    if index < len(sequence):
        return sequence[index]
    return GAP


def aligned_span(sequence: str) -> Optional[tuple]:
    """
    Return (first, last) non-gap column indices of a row, or None for a row
    made entirely of gaps.
    """
    stripped = sequence.strip(GAP)
    if not stripped:
        return None
    first = len(sequence) - len(sequence.lstrip(GAP))
    last = len(sequence.rstrip(GAP)) - 1
    return first, last


# ================================================================
# Summary
# ================================================================
class Orientation(str, Enum):
    FORWARD = 'F'
    REVERSE = 'R'
    UNKNOWN = ''


@dataclass
class SummaryRecord:
    seq_id: str
    consensus_start: int
    aligned_length: int
    window_scores: List[int]
    orientation: Orientation
    divergence: str
    seq_start: int
    seq_end: int

    def to_row(self) -> list:
        return [
            self.seq_id,
            self.consensus_start,
            self.aligned_length,
            list(self.window_scores),
            self.orientation.value,
            self.divergence,
            self.seq_start,
            self.seq_end,
        ]


@dataclass
class AlignmentSummary:
    quality_block_len: int
    length: int
    records: List[SummaryRecord] = field(default_factory=list)

    @property
    def num_alignments(self) -> int:
        return len(self.records)

    def to_viewer_dict(self) -> dict:
        """Payload layout consumed by the alignment summary viewer."""
        return {
            'qualityBlockLen': self.quality_block_len,
            'length': self.length,
            'alignments': [r.to_row() for r in self.records],
            'num_alignments': self.num_alignments,
        }


# ================================================================
# A2M
# ================================================================
@dataclass
class A2MRecord:
    seq_id: str
    seq_start: int
    seq_end: int
    a2m_seq: str
    strand: str
    model_start: Optional[int]
    model_end: Optional[int]

    @property
    def match_columns(self) -> int:
        """Number of uppercase residues plus '-' deletions."""
        return sum(1 for c in self.a2m_seq if c == DELETION or ('A' <= c <= 'Z'))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class A2MAlignment:
    records: List[A2MRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
