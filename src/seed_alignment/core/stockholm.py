"""
Stockholm format parser for single-record seed alignments.

Only the first record is read: parsing stops at the '//' terminator.
Splitting multi-record files is left to the caller.

Format restrictions:
  - gaps must be written as '.'; rows using '-' do not match the sequence
    line grammar and are skipped with a diagnostic
  - #=GF tags are single valued (last occurrence wins); repeating a
    multi-valued tag such as CC or DR is rejected in strict mode
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from .exceptions import MissingReferenceError, UnsupportedTagError
from .models import AlignmentRow, Diagnostic, SeedAlignment, validate_alignment

logger = logging.getLogger(__name__)

SEQUENCE_ALPHABET = 'ACGTUMRWSYKVHDBNacgtumrwsykvhdbn.'

# Stockholm #=GF tags that may legitimately repeat
MULTI_VALUED_TAGS = frozenset(['CC', 'DR', 'RN', 'RM', 'RT', 'RA', 'RL', 'RC', 'WK', '**'])

# ================================================================
# Line grammar (ordered; first match wins)
# ================================================================
BLANK = 'blank'
VERSION = 'version'
FILE_TAG = 'gf'
REFERENCE = 'rf'
SEQUENCE = 'sequence'
TERMINATOR = 'terminator'

LINE_MATCHERS: Tuple[Tuple[str, "re.Pattern"], ...] = (
    (BLANK, re.compile(r'^\s*$')),
    (VERSION, re.compile(r'^#\s+STOCKHOLM\s+([.\d]+)')),
    (FILE_TAG, re.compile(r'^#=GF\s+(\S+)(?:\s+(.*?))?\s*$')),
    (REFERENCE, re.compile(r'^#=GC\s+RF\s+(\S+)')),
    (SEQUENCE, re.compile(r'^\s*(\S+)\s+([' + re.escape(SEQUENCE_ALPHABET) + r']+)\s*$')),
    (TERMINATOR, re.compile(r'^//\s*$')),
)


def classify_line(line: str) -> Tuple[Optional[str], Optional["re.Match"]]:
    """Return (kind, match) for the first matching grammar rule, or (None, None)."""
    for kind, pattern in LINE_MATCHERS:
        match = pattern.match(line)
        if match is not None:
            return kind, match
    return None, None


def log_diagnostic(diagnostic: Diagnostic) -> None:
    logger.warning(f"Skipped Stockholm {diagnostic}")


class StockholmParser:
    """
    Parses Stockholm text into a SeedAlignment.

    Args:
        diagnostic_sink: called with each Diagnostic for skipped or suspicious
            lines (defaults to logging a warning)
        strict_tags: reject repeated multi-valued #=GF tags
        validate_lengths: require every row to be as long as the RF line
    """

    def __init__(
        self,
        diagnostic_sink: Optional[Callable[[Diagnostic], None]] = None,
        strict_tags: bool = True,
        validate_lengths: bool = True
    ):
        self.diagnostic_sink = diagnostic_sink or log_diagnostic
        self.strict_tags = strict_tags
        self.validate_lengths = validate_lengths

    def parse(self, text: Optional[str]) -> SeedAlignment:
        seed = SeedAlignment()
        lines = (text or '').splitlines()

        for lineno, line in enumerate(lines, start=1):
            kind, match = classify_line(line)

            if kind == BLANK:
                continue
            elif kind == VERSION:
                seed.version = match.group(1)
            elif kind == FILE_TAG:
                self._set_tag(seed, match.group(1), match.group(2) or '', lineno, line)
            elif kind == REFERENCE:
                seed.headers['RF'] = match.group(1)
            elif kind == SEQUENCE:
                seed.alignments.append(AlignmentRow(seqid=match.group(1),
                                                    alignment=match.group(2)))
            elif kind == TERMINATOR:
                break
            else:
                self._report(seed, Diagnostic(lineno, line, "Unknown line"))

        if seed.headers.get('RF') is None:
            raise MissingReferenceError(
                "Missing #=GC RF line: not a consensus based multiple alignment"
            )

        if self.validate_lengths:
            validate_alignment(seed)

        logger.debug(f"Parsed Stockholm record: {len(seed.alignments)} rows, "
                     f"{len(seed.headers['RF'])} columns")
        return seed

    def _set_tag(self, seed: SeedAlignment, tag: str, value: str, lineno: int, line: str):
        if tag in seed.headers:
            if tag in MULTI_VALUED_TAGS and self.strict_tags:
                raise UnsupportedTagError(
                    f"Multi-valued #=GF tag '{tag}' repeated on line {lineno}; "
                    f"only single-valued tags are supported"
                )
            self._report(seed, Diagnostic(lineno, line, f"Tag '{tag}' repeated, keeping last value"))
        seed.headers[tag] = value

    def _report(self, seed: SeedAlignment, diagnostic: Diagnostic):
        seed.diagnostics.append(diagnostic)
        self.diagnostic_sink(diagnostic)


def parse_stockholm(text: Optional[str], **kwargs) -> SeedAlignment:
    """Parse Stockholm text with a one-off StockholmParser."""
    return StockholmParser(**kwargs).parse(text)
