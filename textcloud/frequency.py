"""Word counting and ranking for Textcloud."""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def tokenize(document: str) -> List[str]:
    """Split a normalized document into words on whitespace."""
    return document.split()


def build_document_term_matrix(documents: Iterable[str]) -> pd.DataFrame:
    """Build a sparse document-term matrix.

    Args:
        documents: Normalized documents

    Returns:
        DataFrame with one row per document and one sparse column per term,
        columns ordered by first appearance in the collection
    """
    n_docs = 0
    cells: Dict[str, Tuple[List[int], List[int]]] = {}
    for i, doc in enumerate(documents):
        n_docs += 1
        for term, count in Counter(tokenize(doc)).items():
            rows, counts = cells.setdefault(term, ([], []))
            rows.append(i)
            counts.append(count)

    columns = {}
    for term, (rows, counts) in cells.items():
        column = np.zeros(n_docs, dtype=np.int64)
        column[rows] = counts
        columns[term] = pd.arrays.SparseArray(column, fill_value=0)

    return pd.DataFrame(columns, index=pd.RangeIndex(n_docs))


def build_term_frequencies(documents: Iterable[str]) -> Dict[str, int]:
    """Count every word over the whole collection.

    Args:
        documents: Normalized documents

    Returns:
        Mapping of word to total count, in first-appearance order. Words that
        never occur are absent.
    """
    totals: Counter = Counter()
    for doc in documents:
        totals.update(tokenize(doc))
    return dict(totals)


def select_top_words(frequencies: Dict[str, int], max_words: int = 100) -> List[Tuple[str, int]]:
    """Rank words by frequency and keep the top max_words.

    Equal counts keep the table's order, so a word seen earlier in the
    collection ranks first.

    Args:
        frequencies: Word to count mapping
        max_words: Maximum number of words to keep

    Returns:
        List of (word, count) pairs, most frequent first

    Raises:
        ValueError: If max_words is not a positive integer
    """
    if isinstance(max_words, bool) or not isinstance(max_words, int) or max_words < 1:
        raise ValueError(f"max_words must be a positive integer, got {max_words!r}")

    ranked = sorted(frequencies.items(), key=lambda x: x[1], reverse=True)
    selection = ranked[:max_words]
    logger.debug(f"Selected {len(selection)} of {len(frequencies)} distinct words")
    return selection
