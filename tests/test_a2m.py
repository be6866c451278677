import pytest

from seed_alignment.core.a2m import reference_mask, to_a2m, verify_match_columns
from seed_alignment.core.exceptions import FormatConsistencyError, MalformedAlignmentError
from seed_alignment.core.models import A2MAlignment, A2MRecord, AlignmentRow, SeedAlignment
from seed_alignment.core.stockholm import parse_stockholm

SEED = """# STOCKHOLM 1.0
#=GF ID    DF0000001
seq1    AAA.CCTAGTGCGGGATC
seq2    .....CT....CG.TATC
seq3    ..A.C......CGGGATC
seq4    AAAACCT....CG.....
#=GC RF xxx.xxx....xxxxxxx
//
"""


def match_columns(a2m_seq):
    return sum(1 for c in a2m_seq if c == '-' or c.isupper())


def test_a2m_example():
    a2m = to_a2m(parse_stockholm(SEED))
    assert [r.a2m_seq for r in a2m] == [
        "AAACCTagtgCGGGATC",
        "----CTCG-TATC",
        "--AC--CGGGATC",
        "AAAaCCTCG-----",
    ]


def test_match_column_counts_are_identical():
    a2m = to_a2m(parse_stockholm(SEED))
    counts = {match_columns(r.a2m_seq) for r in a2m}
    assert counts == {13}
    assert verify_match_columns(a2m) == 13


def test_lowercase_runs_fall_in_insert_columns():
    seed = parse_stockholm(SEED)
    mask = seed.reference
    for row, record in zip(seed.alignments, to_a2m(seed)):
        lowered = [j for j, c in enumerate(row.alignment) if c != '.' and mask[j] == '.']
        assert sum(1 for c in record.a2m_seq if c.islower()) == len(lowered)


def test_model_coordinates():
    a2m = to_a2m(parse_stockholm(SEED))
    coords = [(r.model_start, r.model_end) for r in a2m]
    # seq2 starts at model column 5, seq4 stops at model column 8
    assert coords == [(1, 13), (5, 13), (3, 13), (1, 8)]


def test_sequence_defaults():
    a2m = to_a2m(parse_stockholm(SEED))
    first = a2m.records[0]
    assert first.seq_id == "seq1"
    assert (first.seq_start, first.seq_end) == (1, 17)
    assert first.strand == '+'
    assert a2m.records[1].seq_end == 8


def test_row_metadata_overrides_defaults():
    seed = SeedAlignment(
        headers={'RF': 'xxxx'},
        alignments=[AlignmentRow('s1', 'ACGT', start=101, end=104, strand='-')],
    )
    record = to_a2m(seed).records[0]
    assert (record.seq_start, record.seq_end, record.strand) == (101, 104, '-')


def test_dash_gaps_and_lowercase_input():
    seed = SeedAlignment(
        headers={'RF': 'xx.x'},
        alignments=[
            AlignmentRow('s1', 'ac-t'),
            AlignmentRow('s2', 'A-GT'),
        ],
    )
    a2m = to_a2m(seed)
    assert [r.a2m_seq for r in a2m] == ["ACT", "A-gT"]


def test_row_without_match_residues():
    seed = SeedAlignment(
        headers={'RF': 'x.x'},
        alignments=[AlignmentRow('s1', 'ACG'), AlignmentRow('s2', '.T.')],
    )
    record = to_a2m(seed).records[1]
    assert record.a2m_seq == "-t-"
    assert record.model_start is None
    assert record.model_end is None


def test_mask_inferred_without_rf():
    seed = SeedAlignment(
        headers={},
        alignments=[
            AlignmentRow('s1', 'AC.GT'),
            AlignmentRow('s2', 'AC.GT'),
            AlignmentRow('s3', 'ACAGT'),
        ],
    )
    assert reference_mask(seed) == "xx.xx"
    assert [r.a2m_seq for r in to_a2m(seed)] == ["ACGT", "ACGT", "ACaGT"]


def test_row_length_must_match_mask():
    seed = SeedAlignment(
        headers={'RF': 'xxxx'},
        alignments=[AlignmentRow('s1', 'ACGT'), AlignmentRow('s2', 'ACG')],
    )
    with pytest.raises(MalformedAlignmentError):
        to_a2m(seed)


def test_inconsistent_match_columns():
    a2m = A2MAlignment(records=[
        A2MRecord('s1', 1, 4, "ACGT", '+', 1, 4),
        A2MRecord('s2', 1, 3, "ACg", '+', 1, 2),
    ])
    with pytest.raises(FormatConsistencyError) as excinfo:
        verify_match_columns(a2m)
    assert excinfo.value.seq_id == 's2'
    assert excinfo.value.expected == 4
    assert excinfo.value.found == 2
    assert "s2" in str(excinfo.value)


def test_empty_alignment():
    seed = SeedAlignment(headers={'RF': 'xxx'}, alignments=[])
    a2m = to_a2m(seed)
    assert len(a2m) == 0
    assert verify_match_columns(a2m) == 0
