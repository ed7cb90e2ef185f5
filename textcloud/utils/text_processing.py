"""Text normalization utilities for Textcloud."""

from typing import Iterable, List, Optional
import re

_PUNCTUATION_RE = re.compile(r'[^\w\s]|_')
_NUMBERS_RE = re.compile(r'\d+')


def remove_punctuation(text: str) -> str:
    """Remove punctuation and symbol characters from text.

    Args:
        text: Text to clean

    Returns:
        Text with punctuation stripped
    """
    return _PUNCTUATION_RE.sub('', text)


def remove_numbers(text: str) -> str:
    """Remove all digits from text."""
    return _NUMBERS_RE.sub('', text)


def remove_words(text: str, words: Optional[Iterable[str]]) -> str:
    """Remove whole-word occurrences of the given words.

    Matching is case-sensitive, so the words should already be in the
    same case as the text (lowercase after normalization).

    Args:
        text: Text to filter
        words: Words to remove

    Returns:
        Text with the words removed
    """
    words = [w for w in (words or []) if w]
    if not words:
        return text
    # Longest first so that overlapping alternatives match greedily
    alternatives = '|'.join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))
    pattern = re.compile(r'(?<!\S)(?:' + alternatives + r')(?!\S)')
    return pattern.sub('', text)


def normalize_document(text: str, stopwords: Optional[Iterable[str]] = None) -> str:
    """Normalize a single document.

    Steps run in a fixed order: lowercase, punctuation removal, digit
    removal, stopword removal.

    Args:
        text: Raw document text
        stopwords: Optional stopwords to drop

    Returns:
        Normalized document
    """
    text = text.lower()
    text = remove_punctuation(text)
    text = remove_numbers(text)
    return remove_words(text, stopwords)


def normalize_documents(documents: Iterable[str],
                        stopwords: Optional[Iterable[str]] = None) -> List[str]:
    """Normalize every document in a collection."""
    stopwords = list(stopwords or [])
    return [normalize_document(doc, stopwords) for doc in documents]
