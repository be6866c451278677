import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config.config_loader import DEFAULT_CONFIG_PATH, ConfigLoader, get_config
from ..core.a2m import to_a2m
from ..core.consensus import consensus_for
from ..core.scoring import ScoringParams
from ..core.stockholm import StockholmParser
from ..core.summary import DEFAULT_WINDOW_SIZE, summarize
from ..io.a2m_writer import write_a2m
from ..io.stockholm_reader import read_stockholm, validate_stockholm_file
from ..io.summary_writer import write_summary_json, write_summary_tsv

def load_config(config_path: str = None) -> Dict[str, Any]:
    """Load configuration from YAML file. Fails if file does not exist."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Invalid YAML format in {config_path}")

    config['_source'] = str(config_path.resolve())
    return config

def _settings(config: Optional[Dict[str, Any]]) -> ConfigLoader:
    """ConfigLoader over an explicit config, or the global one when None."""
    if config is None:
        return get_config()
    return ConfigLoader(config=config)

def setup_logging(config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Setup logging configuration."""
    settings = _settings(config)
    log_level_str = settings.get_debug_params().get('log_level', 'INFO')
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    logger = logging.getLogger('seed_alignment')
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # File handler
    logs_dir = settings.get_io_params().get('logs_dir')
    if logs_dir:
        log_dir = Path(logs_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / 'seed_alignment.log')
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    return logger

def build_parser(config: Optional[Dict[str, Any]] = None) -> StockholmParser:
    """StockholmParser configured from the 'parser' section."""
    params = _settings(config).get_parser_params()
    return StockholmParser(
        strict_tags=bool(params.get('strict_tags', True)),
        validate_lengths=bool(params.get('validate_lengths', True)),
    )

def process_seed_alignment(
    stockholm_path: str,
    config: Optional[Dict[str, Any]] = None,
    output_dir: Optional[str] = None
) -> Dict[str, Any]:
    """
    Parse one Stockholm seed alignment and derive all artifacts.

    Args:
        stockholm_path: Path to a single-record Stockholm file
        config: Configuration dictionary (see default_config.yaml); the
            global configuration from get_config() when None
        output_dir: Overrides output.dir when given

    Returns:
        Dictionary with 'seed', 'summary', 'consensus', 'a2m' and
        'saved_files' (artifact name -> path)
    """
    logger = logging.getLogger('seed_alignment')

    is_valid, message = validate_stockholm_file(stockholm_path)
    if not is_valid:
        raise ValueError(message)

    seed = read_stockholm(stockholm_path, build_parser(config))
    if seed.diagnostics:
        logger.warning(f"{len(seed.diagnostics)} line(s) skipped while parsing {stockholm_path}")

    settings = _settings(config)
    consensus_cfg = settings.get_consensus_params()
    params = ScoringParams.from_config(consensus_cfg)
    method = consensus_cfg.get('method', 'scored')
    window_size = int(settings.get_summary_params().get('window_size', DEFAULT_WINDOW_SIZE))

    summary = summarize(seed, window_size=window_size, params=params)
    consensus = consensus_for(seed, method, params)
    a2m = to_a2m(seed, params)

    logger.info(f"Consensus ({method}, {len(consensus)} bp), "
                f"{summary.num_alignments} summarized sequences, {len(a2m)} A2M records")

    output = settings.get_output_params()
    out_path = Path(output_dir or output.get('dir', 'Results'))
    stem = Path(stockholm_path).name
    for ext in ['.gz', '.stockholm', '.stk', '.sto']:
        stem = stem.replace(ext, '')

    saved_files = {}
    if output.get('write_a2m', True):
        saved_files['a2m'] = str(out_path / f"{stem}.a2m")
        write_a2m(a2m, saved_files['a2m'])

    if output.get('write_summary', True):
        saved_files['summary_json'] = str(write_summary_json(summary, out_path / f"{stem}_summary.json"))
        saved_files['summary_tsv'] = str(write_summary_tsv(summary, out_path / f"{stem}_summary.tsv"))

    if output.get('plot_summary', False):
        from ..visualization.summary_plot import plot_summary_heatmap
        saved_files['summary_plot'] = str(plot_summary_heatmap(summary, out_path / f"{stem}_summary.png"))

    if saved_files:
        consensus_path = out_path / f"{stem}_consensus.fa"
        out_path.mkdir(parents=True, exist_ok=True)
        with open(consensus_path, 'w') as f:
            f.write(f">{stem} consensus ({method})\n{consensus}\n")
        saved_files['consensus'] = str(consensus_path)

    return {
        'seed': seed,
        'summary': summary,
        'consensus': consensus,
        'a2m': a2m,
        'saved_files': saved_files,
    }
