from .config_loader import (
    ConfigLoader,
    DEFAULT_CONFIG_PATH,
    get_config
)

__all__ = [
    'ConfigLoader',
    'DEFAULT_CONFIG_PATH',
    'get_config',
]
