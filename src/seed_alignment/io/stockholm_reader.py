"""
Reading Stockholm seed alignments from disk.
"""

import gzip
import logging
import os
from pathlib import Path
from typing import Tuple, Union

from ..core.models import SeedAlignment
from ..core.stockholm import StockholmParser

logger = logging.getLogger(__name__)

STOCKHOLM_EXTENSIONS = ('.stk', '.sto', '.stockholm')


def validate_stockholm_file(filepath: Union[str, Path]) -> Tuple[bool, str]:
    """
    Cheap sanity check of a Stockholm file before parsing.

    Returns:
        Tuple of (is_valid, message)
    """
    filepath = str(filepath)
    if not os.path.exists(filepath):
        return False, f"File does not exist: {filepath}"

    if not os.path.isfile(filepath):
        return False, f"Not a file: {filepath}"

    if os.path.getsize(filepath) == 0:
        return False, f"File is empty: {filepath}"

    try:
        text = read_stockholm_text(filepath)
    except UnicodeDecodeError:
        return False, f"File is not a valid text file: {filepath}"

    for line in text.splitlines():
        if line.strip():
            if not line.startswith('# STOCKHOLM'):
                return False, f"File does not start with a '# STOCKHOLM' header: {filepath}"
            break

    return True, f"Stockholm file {filepath}"


def read_stockholm_text(filepath: Union[str, Path]) -> str:
    """Read the raw text of a (optionally gzipped) Stockholm file."""
    filepath = str(filepath)
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Stockholm file not found: {filepath}")

    if filepath.endswith('.gz'):
        with gzip.open(filepath, 'rt', encoding='utf-8') as f:
            return f.read()
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


def read_stockholm(filepath: Union[str, Path], parser: StockholmParser = None) -> SeedAlignment:
    """
    Parse the first seed alignment record of a Stockholm file.

    Args:
        filepath: Path to a .stk/.sto file, optionally gzipped
        parser: Parser to use (defaults to a strict StockholmParser)
    """
    parser = parser or StockholmParser()
    text = read_stockholm_text(filepath)
    seed = parser.parse(text)
    logger.info(f"Read {seed.num_rows} aligned sequences from {filepath}")
    return seed
