from .stockholm_reader import (
    validate_stockholm_file,
    read_stockholm_text,
    read_stockholm
)

from .a2m_writer import (
    a2m_to_records,
    write_a2m
)

from .summary_writer import (
    summary_to_dataframe,
    write_summary_tsv,
    write_summary_json
)

__all__ = [
    # Stockholm reader functions
    'validate_stockholm_file',
    'read_stockholm_text',
    'read_stockholm',

    # A2M writer functions
    'a2m_to_records',
    'write_a2m',

    # Summary writer functions
    'summary_to_dataframe',
    'write_summary_tsv',
    'write_summary_json',
]
