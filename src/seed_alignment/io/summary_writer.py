"""
Tabular and JSON output of alignment summaries.
"""

import json
import logging
from pathlib import Path
from typing import Union

import pandas as pd

from ..core.models import AlignmentSummary

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    'seq_id',
    'consensus_start',
    'aligned_length',
    'window_scores',
    'orientation',
    'divergence',
    'seq_start',
    'seq_end',
]


def summary_to_dataframe(summary: AlignmentSummary) -> pd.DataFrame:
    """One row per instance; window scores are kept as comma separated text."""
    rows = []
    for record in summary.records:
        rows.append({
            'seq_id': record.seq_id,
            'consensus_start': record.consensus_start,
            'aligned_length': record.aligned_length,
            'window_scores': ','.join(str(s) for s in record.window_scores),
            'orientation': record.orientation.value,
            'divergence': record.divergence,
            'seq_start': record.seq_start,
            'seq_end': record.seq_end,
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary_tsv(summary: AlignmentSummary, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    summary_to_dataframe(summary).to_csv(path, sep='\t', index=False)
    logger.info(f"Wrote summary table for {summary.num_alignments} sequences to {path}")
    return path


def write_summary_json(summary: AlignmentSummary, path: Union[str, Path]) -> Path:
    """Write the viewer payload (see AlignmentSummary.to_viewer_dict)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(summary.to_viewer_dict(), f, indent=2)
    logger.info(f"Wrote summary JSON to {path}")
    return path
