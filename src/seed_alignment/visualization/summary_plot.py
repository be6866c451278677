"""
Quality block heatmap for alignment summaries.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from ..core.models import AlignmentSummary

logger = logging.getLogger(__name__)


def summary_score_matrix(summary: AlignmentSummary) -> np.ndarray:
    """
    Window scores laid out on the model axis, one row per instance (a
    single empty row when there are none).

    Window k of an instance starting at model position p covers blocks from
    (p - 1) // block_len onwards. Blocks without a score are NaN.
    """
    block_len = summary.quality_block_len
    n_blocks = max(1, -(-summary.length // block_len))
    matrix = np.full((max(1, summary.num_alignments), n_blocks), np.nan)

    for i, record in enumerate(summary.records):
        offset = max(record.consensus_start - 1, 0) // block_len
        for k, score in enumerate(record.window_scores):
            col = offset + k
            if col < n_blocks:
                matrix[i, col] = score
    return matrix


def plot_summary_heatmap(
    summary: AlignmentSummary,
    save_path: Union[str, Path],
    title: Optional[str] = None
) -> Path:
    """
    Plot instance quality along the consensus.

    Args:
        summary: Summary produced by summarize()
        save_path: Output image path (format from extension)
        title: Optional plot title

    Returns:
        Path to the saved figure
    """
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    matrix = summary_score_matrix(summary)
    height = min(max(2.0, 0.25 * summary.num_alignments + 1.5), 40.0)
    fig, ax = plt.subplots(figsize=(12, height))

    image = ax.imshow(
        np.ma.masked_invalid(matrix),
        aspect='auto',
        cmap='RdYlGn',
        vmin=1,
        vmax=summary.quality_block_len,
        interpolation='nearest',
    )
    ax.set_xlabel(f"Consensus position (blocks of {summary.quality_block_len} bp)")
    ax.set_ylabel("Instance")
    if summary.num_alignments <= 50:
        ax.set_yticks(range(summary.num_alignments))
        ax.set_yticklabels([r.seq_id for r in summary.records], fontsize=6)
    ax.set_title(title or f"Seed alignment quality ({summary.num_alignments} sequences)")
    fig.colorbar(image, ax=ax, label="Block score")

    fig.tight_layout()
    fig.savefig(save_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info(f"Saved summary heatmap to {save_path}")
    return save_path
