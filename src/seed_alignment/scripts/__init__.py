from .process_seed import main as process_seed_main

__all__ = [
    'process_seed_main',
]
