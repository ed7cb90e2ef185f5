"""
Word cloud pipeline.

Orchestrates:
1. Input resolution (text, text collection or file path)
2. Normalization
3. Term counting
4. Ranking
5. Rendering
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from wordcloud import WordCloud

from .frequency import build_term_frequencies, select_top_words
from .utils.file_io import load_documents, resolve_input
from .utils.text_processing import normalize_documents
from .visualization.wordcloud_mpl import render_word_cloud

logger = logging.getLogger(__name__)


def compute_word_frequencies(
    text: Any,
    max_words: int = 100,
    stopwords: Optional[Iterable[str]] = None,
    text_column: str = 'text',
) -> List[Tuple[str, int]]:
    """Run the pipeline up to the ranked selection.

    Args:
        text: A string, a collection of strings, or a file path
        max_words: Maximum number of words to keep
        stopwords: Lowercase words to exclude
        text_column: Column holding the text when the input is a CSV file

    Returns:
        List of (word, count) pairs, most frequent first

    Raises:
        InvalidInputError: If text is not text, a text collection or a path
        FileNotFoundError: If text is a path that does not exist
    """
    source = resolve_input(text)
    documents = load_documents(source, text_column=text_column)
    normalized = normalize_documents(documents, stopwords)
    frequencies = build_term_frequencies(normalized)
    logger.info(f"Counted {len(frequencies)} distinct words across {len(documents)} documents")

    if not frequencies:
        logger.warning("No words left after normalization")
    return select_top_words(frequencies, max_words=max_words)


def generate_word_cloud(
    text: Any,
    max_words: int = 100,
    stopwords: Optional[Iterable[str]] = None,
    text_column: str = 'text',
    **render_options: Any,
) -> WordCloud:
    """Generate a word cloud from text or a text file.

    Args:
        text: A string, a collection of strings, or a file path
        max_words: Maximum number of words to include
        stopwords: Lowercase words to exclude
        text_column: Column holding the text when the input is a CSV file
        **render_options: Passed to render_word_cloud (min_scale, max_scale,
            width, height, output_file, show, ...)

    Returns:
        The rendered WordCloud
    """
    selection = compute_word_frequencies(
        text, max_words=max_words, stopwords=stopwords, text_column=text_column
    )
    return render_word_cloud(selection, **render_options)
