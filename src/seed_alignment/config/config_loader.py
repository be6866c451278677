"""
Configuration loader for seed alignment processing.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"


class ConfigLoader:
    """Loads and manages configuration from YAML files."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            config_path: YAML file to read (defaults to the packaged config)
            config: Already loaded configuration; no file is read when given
        """
        if config is not None:
            self.config_path = config.get('_source')
            self.config = config
            return
        self.config_path = str(config_path or DEFAULT_CONFIG_PATH)
        self.config = {}
        self.load_config()

    def load_config(self):
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, 'r') as f:
                self.config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Config file {self.config_path} not found. Using defaults.")
            self.config = self._get_default_config()
        except yaml.YAMLError as e:
            logger.error(f"Error loading config file: {e}")
            self.config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration if YAML file is not found."""
        return {
            'parser': {
                'strict_tags': True,
                'validate_lengths': True
            },
            'consensus': {
                'method': 'scored',
                'cg_param': 12,
                'ta_param': -5,
                'cg_trans_param': 2
            },
            'summary': {
                'window_size': 10
            },
            'output': {
                'dir': 'Results',
                'write_a2m': True,
                'write_summary': True,
                'plot_summary': False
            },
            'io': {
                'logs_dir': 'logs'
            },
            'debug': {
                'log_level': 'INFO'
            }
        }

    def get_parser_params(self) -> Dict[str, Any]:
        """Get Stockholm parser parameters."""
        return self.config.get('parser', {})

    def get_consensus_params(self) -> Dict[str, Any]:
        """Get consensus method and CpG correction parameters."""
        return self.config.get('consensus', {})

    def get_summary_params(self) -> Dict[str, Any]:
        """Get summary parameters."""
        return self.config.get('summary', {})

    def get_output_params(self) -> Dict[str, Any]:
        """Get output parameters."""
        return self.config.get('output', {})

    def get_io_params(self) -> Dict[str, Any]:
        """Get I/O parameters."""
        return self.config.get('io', {})

    def get_debug_params(self) -> Dict[str, Any]:
        """Get debug parameters."""
        return self.config.get('debug', {})

# Global config instance, created on first use
config_loader = None

def get_config() -> ConfigLoader:
    """Get the global config loader instance."""
    global config_loader
    if config_loader is None:
        config_loader = ConfigLoader()
    return config_loader
