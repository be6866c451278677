import sys
from pathlib import Path

SRC_DIR = Path(__file__).parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

__version__ = "1.0.0"
__description__ = "Test suite for seed alignment processing"

TEST_CATEGORIES = {
    'stockholm': 'Stockholm parser tests',
    'consensus': 'Majority and scored consensus tests',
    'summary': 'Alignment summary tests',
    'a2m': 'A2M conversion tests',
    'integration': 'Config, I/O and end-to-end tests',
}
