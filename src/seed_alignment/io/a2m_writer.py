"""
Writing A2M alignments as FASTA records.
"""

import logging
from pathlib import Path
from typing import List, TextIO, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..core.a2m import verify_match_columns
from ..core.models import A2MAlignment, A2MRecord

logger = logging.getLogger(__name__)


def describe_record(record: A2MRecord) -> str:
    """FASTA description: seq_start-seq_end strand model_start-model_end."""
    model_start = record.model_start if record.model_start is not None else 0
    model_end = record.model_end if record.model_end is not None else 0
    return f"{record.seq_start}-{record.seq_end} {record.strand} {model_start}-{model_end}"


def a2m_to_records(a2m: A2MAlignment) -> List[SeqRecord]:
    return [
        SeqRecord(Seq(record.a2m_seq), id=record.seq_id, description=describe_record(record))
        for record in a2m.records
    ]


def write_a2m(a2m: A2MAlignment, handle: Union[str, Path, TextIO]) -> int:
    """
    Write A2M records in FASTA layout.

    Args:
        a2m: Converted alignment
        handle: Output path or open text handle

    Returns:
        Number of records written
    """
    verify_match_columns(a2m)
    records = a2m_to_records(a2m)

    if isinstance(handle, (str, Path)):
        Path(handle).parent.mkdir(parents=True, exist_ok=True)
        count = SeqIO.write(records, str(handle), "fasta")
        logger.info(f"Wrote {count} A2M records to {handle}")
        return count
    return SeqIO.write(records, handle, "fasta")
