from .main_pipeline import (
    load_config,
    setup_logging,
    build_parser,
    process_seed_alignment
)

# Alias for convenience
run_pipeline = process_seed_alignment

__all__ = [
    'load_config',
    'setup_logging',
    'build_parser',
    'process_seed_alignment',
    'run_pipeline',
]
