"""
Command-line interface for seed alignment processing.
"""

import json
import sys
import argparse

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Seed alignment processing - Stockholm parsing, consensus calling, "
                    "quality summaries and A2M conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summary, consensus and A2M for one seed alignment
  %(prog)s family.stk

  # Majority rule consensus, custom output directory
  %(prog)s family.stk --consensus majority --output-dir out/

  # Print the viewer summary JSON to stdout
  %(prog)s family.stk --print-summary

Multi-record Stockholm files must be split on '//' beforehand; only the
first record is read.
        """
    )

    parser.add_argument(
        'stockholm',
        type=str,
        help='Path to a single-record Stockholm seed alignment (.stk, optionally .gz)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='YAML configuration file (default: packaged default_config.yaml)'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        help='Output directory for results (overrides output.dir)'
    )

    parser.add_argument(
        '--consensus',
        choices=['scored', 'majority'],
        help='Consensus method (overrides consensus.method)'
    )

    parser.add_argument(
        '--plot',
        action='store_true',
        help='Also save a quality heatmap of the summary'
    )

    parser.add_argument(
        '--print-summary',
        action='store_true',
        help='Print the summary viewer payload as JSON'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    from seed_alignment.pipeline.main_pipeline import (
        load_config,
        setup_logging,
        process_seed_alignment
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"ERROR: Could not load configuration: {e}", file=sys.stderr)
        return 1

    # Apply command-line overrides
    if args.consensus:
        config.setdefault('consensus', {})['method'] = args.consensus
    if args.plot:
        config.setdefault('output', {})['plot_summary'] = True
    if args.verbose:
        config.setdefault('debug', {})['log_level'] = 'DEBUG'

    logger = setup_logging(config)

    try:
        results = process_seed_alignment(args.stockholm, config, output_dir=args.output_dir)
    except (OSError, ValueError) as e:
        logger.error(f"Processing failed: {e}")
        if args.verbose:
            logger.exception("Traceback")
        return 1

    print(f"Consensus: {results['consensus']}")
    if args.print_summary:
        print(json.dumps(results['summary'].to_viewer_dict(), indent=2))

    for key, path in results['saved_files'].items():
        logger.info(f"Saved {key}: {path}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
