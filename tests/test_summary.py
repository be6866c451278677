import pytest

from seed_alignment.core.models import AlignmentRow, Orientation, SeedAlignment
from seed_alignment.core.summary import (
    decode_sequence_id,
    summarize,
    window_score,
)


def make_seed(rows, rf=None):
    aligns = [AlignmentRow(seqid=seqid, alignment=seq) for seqid, seq in rows]
    headers = {'RF': rf if rf is not None else 'x' * len(rows[0][1])}
    return SeedAlignment(headers=headers, alignments=aligns)


# --------------------------
# Identifier decoding
# --------------------------

def test_decode_full_nomenclature():
    decoded = decode_sequence_id("human:hg38:chr1:100-200")
    assert decoded.name == "chr1"
    assert (decoded.start, decoded.end) == (100, 200)
    assert decoded.orientation == Orientation.FORWARD


def test_decode_reverse_coordinates_are_swapped():
    decoded = decode_sequence_id("chr1:200-100")
    assert decoded.name == "chr1"
    assert (decoded.start, decoded.end) == (100, 200)
    assert decoded.orientation == Orientation.REVERSE


def test_decode_numeric_not_lexical_comparison():
    decoded = decode_sequence_id("hg38:chr2:9-10")
    assert decoded.orientation == Orientation.FORWARD
    assert (decoded.start, decoded.end) == (9, 10)


def test_decode_legacy_nomenclature():
    decoded = decode_sequence_id("chr1_50_80_R")
    assert decoded.name == "chr1"
    assert (decoded.start, decoded.end) == (50, 80)
    assert decoded.orientation == Orientation.REVERSE

    decoded = decode_sequence_id("chr1_50_80")
    assert decoded.orientation == Orientation.FORWARD


def test_decode_fallback():
    decoded = decode_sequence_id("AluY_instance")
    assert decoded.name == "AluY_instance"
    assert (decoded.start, decoded.end) == (0, 0)
    assert decoded.orientation == Orientation.UNKNOWN


# --------------------------
# Window scores
# --------------------------

def test_window_score_floor_and_insertion_penalty():
    assert window_score(10, 0, 0, 0) == 10
    assert window_score(10, 2, 1, 0) == 7
    assert window_score(10, 2, 1, 3) == 6
    assert window_score(10, 12, 0, 1) == 1


def test_reference_rows_are_excluded():
    seed = make_seed([
        ("ref:chr1:1-10", "ACGTACGTAC"),
        ("chr1:1-10", "ACGTACGTAC"),
    ])
    summary = summarize(seed)
    assert summary.num_alignments == 1
    assert summary.records[0].seq_id == "chr1"


def test_perfect_rows_score_full_windows():
    row = "ACGTACGTAC" * 3
    seed = make_seed([("a:1-30", row), ("b:30-1", row)])
    summary = summarize(seed)

    assert summary.quality_block_len == 10
    assert summary.length == 30
    first, second = summary.records
    assert first.window_scores == [10, 10, 10]
    assert first.aligned_length == 30
    assert first.consensus_start == 1
    assert second.orientation == Orientation.REVERSE
    assert (second.seq_start, second.seq_end) == (1, 30)


def test_mismatches_deletions_and_partial_window():
    consensus_row = "ACGTACGTACGTA"
    rows = [
        ("c1:1-13", consensus_row),
        ("c2:1-13", consensus_row),
        ("c3:1-13", consensus_row),
        ("x:1-11", "ACTTAC.TACGTA"),
    ]
    summary = summarize(make_seed(rows))
    record = summary.records[-1]

    # Window 1: one mismatch (G->T), one deletion; window 2 is a clean partial
    assert record.aligned_length == 13
    assert record.window_scores == [8]


def test_partial_window_emitted_when_it_has_errors():
    consensus_row = "ACGTACGTACGTA"
    rows = [
        ("c1:1-13", consensus_row),
        ("c2:1-13", consensus_row),
        ("c3:1-13", consensus_row),
        ("x:1-13", "ACGTACGTACGTT"),
    ]
    record = summarize(make_seed(rows)).records[-1]
    assert record.window_scores == [10, 9]


def test_insertions_and_consensus_start():
    rows = [
        ("c1", "AC..GTACGTACGTAC"),
        ("c2", "AC..GTACGTACGTAC"),
        ("c3", "AC..GTACGTACGTAC"),
        ("x", "...GGTACGTACGTAC"),
    ]
    summary = summarize(make_seed(rows))
    assert summary.length == 14

    record = summary.records[-1]
    # Row starts in an insert column after two model positions
    assert record.consensus_start == 2
    assert record.orientation == Orientation.UNKNOWN
    # 12 aligned model columns, one insertion in the first window
    assert record.aligned_length == 12
    assert record.window_scores == [9]


def test_all_gap_row():
    rows = [("c1", "ACGT"), ("c2", "ACGT"), ("gap", "....")]
    record = summarize(make_seed(rows)).records[-1]
    assert record.aligned_length == 0
    assert record.window_scores == []
    assert record.consensus_start == 0


def test_window_count_tracks_aligned_length():
    row = "ACGTACGTAC" * 4 + "ACG"
    seed = make_seed([("a", row), ("b", row), ("c", row[:-1] + "T")])
    for record in summarize(seed).records:
        windows = len(record.window_scores)
        assert abs(windows * 10 - record.aligned_length) <= 10


def test_custom_window_size():
    row = "ACGTACGTAC" * 2
    summary = summarize(make_seed([("a", row), ("b", row)]), window_size=5)
    assert summary.quality_block_len == 5
    assert summary.records[0].window_scores == [5, 5, 5, 5]

    with pytest.raises(ValueError):
        summarize(make_seed([("a", row)]), window_size=0)


def test_viewer_dict_layout():
    row = "ACGTACGTAC"
    summary = summarize(make_seed([("hg38:chr5:11-20", row), ("chr5_1_10_R", row)]))
    payload = summary.to_viewer_dict()

    assert payload['qualityBlockLen'] == 10
    assert payload['length'] == 10
    assert payload['num_alignments'] == 2
    assert payload['alignments'][0] == ["chr5", 1, 10, [10], "F", "0.0", 11, 20]
    assert payload['alignments'][1] == ["chr5", 1, 10, [10], "R", "0.0", 1, 10]


def test_lowercase_residues_are_not_mismatches():
    seed = make_seed([
        ("chr1:1-10", "ACGTACGTAC"),
        ("chr2:1-10", "acgtacgtac"),
    ])
    summary = summarize(seed)
    assert [r.window_scores for r in summary.records] == [[10], [10]]
    assert summary.records[1].aligned_length == 10
