"""
Nucleotide substitution scoring used by the consensus caller.

The matrix assumes an A/T biased genome (good for mammals) and is indexed
[consensus symbol][observed symbol] over ALPHABET.
"""

from dataclasses import dataclass

import numpy as np

ALPHABET = ('A', 'R', 'G', 'C', 'Y', 'T', 'K', 'M', 'S', 'W', 'N', 'X', 'Z', '.')
SYMBOL_INDEX = {sym: i for i, sym in enumerate(ALPHABET)}
GAP_INDEX = SYMBOL_INDEX['.']

#                               A    R    G    C    Y    T    K    M    S    W    N    X    Z    .
SUBSTITUTION_MATRIX = np.array([
                              [  9,   0,  -8, -15, -16, -17, -13,  -3, -11,  -4,  -2,  -7,  -3,  -6],  # A
                              [  2,   1,   1, -15, -15, -16,  -7,  -6,  -6,  -7,  -2,  -7,  -3,  -6],  # R
                              [ -4,   3,  10, -14, -14, -15,  -2,  -9,  -2,  -9,  -2,  -7,  -3,  -6],  # G
                              [-15, -14, -14,  10,   3,  -4,  -9,  -2,  -2,  -9,  -2,  -7,  -3,  -6],  # C
                              [-16, -15, -15,   1,   1,   2,  -6,  -7,  -6,  -7,  -2,  -7,  -3,  -6],  # Y
                              [-17, -16, -15,  -8,   0,   9,  -3, -13, -11,  -4,  -2,  -7,  -3,  -6],  # T
                              [-11,  -6,  -2, -11,  -7,  -3,  -2, -11,  -6,  -7,  -2,  -7,  -3,  -6],  # K
                              [ -3,  -7, -11,  -2,  -6, -11, -11,  -2,  -6,  -7,  -2,  -7,  -3,  -6],  # M
                              [ -9,  -5,  -2,  -2,  -5,  -9,  -5,  -5,  -2,  -9,  -2,  -7,  -3,  -6],  # S
                              [ -4,  -8, -11, -11,  -8,  -4,  -8,  -8, -11,  -4,  -2,  -7,  -3,  -6],  # W
                              [ -2,  -2,  -2,  -2,  -2,  -2,  -2,  -2,  -2,  -2,  -1,  -7,  -3,  -6],  # N
                              [ -7,  -7,  -7,  -7,  -7,  -7,  -7,  -7,  -7,  -7,  -7,  -7,  -3,  -6],  # X
                              [ -3,  -3,  -3,  -3,  -3,  -3,  -3,  -3,  -3,  -3,  -3,  -3,  -3,  -6],  # Z
                              [ -6,  -6,  -6,  -6,  -6,  -6,  -6,  -6,  -6,  -6,  -6,  -6,  -6,   3],  # .
], dtype=np.int64)
SUBSTITUTION_MATRIX.setflags(write=False)

# Residues outside the scoring alphabet and what they score as
SYMBOL_ALIASES = {'U': 'T', 'B': 'N', 'D': 'N', 'H': 'N', 'V': 'N'}

UNAMBIGUOUS_BASES = frozenset('ACGT')


@dataclass(frozen=True)
class ScoringParams:
    """
    CpG correction parameters.

    cg_param: added when an instance dinucleotide is CA or TG
              (a TG or CA match would score 19, a TG <-> CA mismatch -12)
    ta_param: added for TA, slightly worse than a TG/CA -> TA mismatch
    cg_trans_param: bonus for transition/transversion pairs that could
                    have arisen from a CpG site
    """
    cg_param: int = 12
    ta_param: int = -5
    cg_trans_param: int = 2

    @classmethod
    def from_config(cls, params: dict) -> "ScoringParams":
        params = params or {}
        defaults = cls()
        return cls(
            cg_param=int(params.get('cg_param', defaults.cg_param)),
            ta_param=int(params.get('ta_param', defaults.ta_param)),
            cg_trans_param=int(params.get('cg_trans_param', defaults.cg_trans_param)),
        )


DEFAULT_PARAMS = ScoringParams()


def normalize_symbol(ch: str) -> str:
    """Uppercase a residue and map it onto the scoring alphabet."""
    ch = ch.upper()
    if ch in SYMBOL_INDEX:
        return ch
    return SYMBOL_ALIASES.get(ch, 'N')


def symbol_index(ch: str) -> int:
    return SYMBOL_INDEX[normalize_symbol(ch)]


def score(consensus: str, observed: str) -> int:
    """Substitution score of an observed residue against a consensus symbol."""
    return int(SUBSTITUTION_MATRIX[symbol_index(consensus), symbol_index(observed)])
