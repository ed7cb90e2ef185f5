"""Textcloud - Command Line Interface.

This module provides a command-line interface for generating word clouds.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv

from . import __version__
from .exceptions import InvalidInputError
from .pipeline import compute_word_frequencies
from .utils.file_io import ensure_directory_exists, load_config, load_stopwords
from .visualization import plot_word_frequencies, render_word_cloud

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    'max_words': 100,
    'stopwords': [],
    'min_scale': 0.5,
    'max_scale': 5.0,
    'width': 800,
    'height': 600,
    'background_color': 'white',
    'text_column': 'text',
}


def parse_args(args: List[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Options that can also come from a config file default to None so that
    resolve_options can tell whether they were given.

    Args:
        args: Command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description='Textcloud - Generate a word cloud from text')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('input', type=str, help='Input text, or path to a text/CSV file')
    parser.add_argument('--output', '-o', type=str, default='wordcloud.png',
                        help='Output image file (default: wordcloud.png)')
    parser.add_argument('--max-words', type=int,
                        help='Maximum number of words to include (default: 100)')
    parser.add_argument('--stopwords', type=str, nargs='+',
                        help='Words to exclude (lowercase)')
    parser.add_argument('--stopwords-file', type=str,
                        help='File with one stopword per line')
    parser.add_argument('--min-scale', type=float,
                        help='Scale of the least frequent words (default: 0.5)')
    parser.add_argument('--max-scale', type=float,
                        help='Scale of the most frequent word (default: 5.0)')
    parser.add_argument('--width', type=int, help='Image width in pixels (default: 800)')
    parser.add_argument('--height', type=int, help='Image height in pixels (default: 600)')
    parser.add_argument('--background-color', type=str,
                        help='Background color (default: white)')
    parser.add_argument('--text-column', type=str,
                        help='Column holding the text when the input is a CSV file (default: text)')
    parser.add_argument('--bar-chart', type=str,
                        help='Also save a bar chart of the top words to this file')
    parser.add_argument('--config', type=str, help='YAML file with default options')
    parser.add_argument('--show', action='store_true', help='Display the word cloud')

    return parser.parse_args(args)


def resolve_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge built-in defaults, the config file and command line flags.

    Later sources win: defaults, then the config file, then the flags.
    Stopwords from --stopwords-file are added to the others.
    """
    options = dict(DEFAULTS)
    if getattr(args, 'config', None):
        options.update(load_config(args.config))

    for key in DEFAULTS:
        value = getattr(args, key, None)
        if value is not None:
            options[key] = value

    stopwords = list(options.get('stopwords') or [])
    if getattr(args, 'stopwords_file', None):
        stopwords.extend(load_stopwords(args.stopwords_file))
    options['stopwords'] = stopwords
    return options


def generate_command(args: argparse.Namespace) -> int:
    """Generate the word cloud and optional bar chart.

    Args:
        args: Parsed command line arguments

    Returns:
        Process exit status
    """
    try:
        options = resolve_options(args)
        selection = compute_word_frequencies(
            args.input,
            max_words=options['max_words'],
            stopwords=options['stopwords'],
            text_column=options['text_column'],
        )
    except (InvalidInputError, OSError, UnicodeDecodeError, KeyError, ValueError) as e:
        logger.error(f"Could not compute word frequencies: {e}")
        return 1

    if not selection:
        logger.error("No words to plot after normalization and stopword removal")
        return 1

    for word, count in selection[:10]:
        print(f"{word}\t{count}")

    output_path = Path(args.output)
    ensure_directory_exists(str(output_path.parent))

    try:
        render_word_cloud(
            selection,
            min_scale=options['min_scale'],
            max_scale=options['max_scale'],
            width=options['width'],
            height=options['height'],
            background_color=options['background_color'],
            output_file=str(output_path),
            show=args.show,
        )
        if getattr(args, 'bar_chart', None):
            ensure_directory_exists(str(Path(args.bar_chart).parent))
            plot_word_frequencies(selection, output_file=args.bar_chart)
    except (OSError, ValueError) as e:
        logger.error(f"Could not render word cloud: {e}")
        return 1

    logger.info(f"Rendered {len(selection)} words to {output_path}")
    return 0


def main() -> None:
    """Main entry point for the Textcloud CLI."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    args = parse_args(sys.argv[1:])

    # Configure logging
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.getLogger().setLevel(log_level)

    sys.exit(generate_command(args))


if __name__ == "__main__":
    main()
