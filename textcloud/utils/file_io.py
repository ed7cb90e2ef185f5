"""File I/O utilities for Textcloud."""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd
import yaml

from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)

# Suffixes that mark a whitespace-free string as a file path rather than text
TEXT_FILE_SUFFIXES = {'.txt', '.text', '.md', '.csv', '.tsv', '.log', '.rst'}
# Prefixes that mark a whitespace-free string as a path
PATH_PREFIXES = (os.sep, "." + os.sep, ".." + os.sep, "~")

CONFIG_TYPES = {
    'max_words': (int,),
    'stopwords': (list,),
    'min_scale': (int, float),
    'max_scale': (int, float),
    'width': (int,),
    'height': (int,),
    'background_color': (str,),
    'text_column': (str,),
}


@dataclass(frozen=True)
class RawText:
    """Literal text supplied by the caller, one string per document."""
    documents: List[str]


@dataclass(frozen=True)
class FilePath:
    """A file whose contents form the document collection."""
    path: Path


InputSource = Union[RawText, FilePath]


def ensure_directory_exists(directory: str) -> None:
    """Ensure that a directory exists, creating it if necessary."""
    if directory:
        os.makedirs(directory, exist_ok=True)


def _looks_like_path(text: str) -> bool:
    if not text or any(ch.isspace() for ch in text):
        return False
    if text.startswith(PATH_PREFIXES) or (os.altsep and text.startswith(os.altsep)):
        return True
    return Path(text).suffix.lower() in TEXT_FILE_SUFFIXES


def resolve_input(text: Any) -> InputSource:
    """Decide whether the caller passed literal text or a file path.

    A string is a path when it names an existing file, or when it has no
    whitespace and either starts like a path (a separator, "./", "../" or
    "~") or ends in a text-file suffix. Any other string, including
    "and/or" or a URL, is literal text.

    Args:
        text: A string, a collection of strings, or a path

    Returns:
        RawText or FilePath

    Raises:
        InvalidInputError: If text is none of the accepted forms
    """
    if isinstance(text, os.PathLike):
        return FilePath(Path(text))

    if isinstance(text, str):
        if os.path.isfile(text) or _looks_like_path(text):
            return FilePath(Path(text))
        return RawText([text])

    if isinstance(text, (bytes, bytearray, Mapping)) or not isinstance(text, Iterable):
        raise InvalidInputError(
            "Invalid input. Please provide a string, a collection of strings or a valid file path; "
            f"got {type(text).__name__}."
        )

    documents = list(text)
    bad = [doc for doc in documents if not isinstance(doc, str)]
    if bad:
        raise InvalidInputError(
            f"Invalid input. All documents must be strings; found {type(bad[0]).__name__}."
        )
    return RawText(documents)


def read_text_lines(path: Path, encoding: str = 'utf-8') -> List[str]:
    """Read a text file, one document per line."""
    with open(path, 'r', encoding=encoding) as f:
        return [line.rstrip('\r\n') for line in f]


def read_csv_column(path: Path, text_column: str = 'text', encoding: str = 'utf-8') -> List[str]:
    """Read the non-empty values of one CSV column as documents.

    Raises:
        KeyError: If the column does not exist
    """
    df = pd.read_csv(path, encoding=encoding)
    if text_column not in df.columns:
        raise KeyError(f"Column '{text_column}' not found in {path}; available: {list(df.columns)}")
    return [str(value) for value in df[text_column].dropna()]


def load_documents(source: InputSource, text_column: str = 'text',
                   encoding: str = 'utf-8') -> List[str]:
    """Produce the document collection for a resolved input.

    Args:
        source: Output of resolve_input
        text_column: Column to use when the file is a CSV
        encoding: File encoding

    Returns:
        List of document strings
    """
    if isinstance(source, RawText):
        return list(source.documents)

    path = source.path
    if not path.exists():
        raise FileNotFoundError(f"No such file: '{path}'")

    if path.suffix.lower() == '.csv':
        documents = read_csv_column(path, text_column=text_column, encoding=encoding)
    else:
        documents = read_text_lines(path, encoding=encoding)
    logger.info(f"Loaded {len(documents)} documents from {path}")
    return documents


def load_stopwords(path: Union[str, Path], encoding: str = 'utf-8') -> List[str]:
    """Load stopwords from a file, one per line.

    Blank lines and lines starting with '#' are ignored.
    """
    words = []
    with open(path, 'r', encoding=encoding) as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith('#'):
                words.append(word)
    return words


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load run options from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Dictionary of options (empty if the file is empty)

    Raises:
        ValueError: If the file is not a mapping, or holds unknown keys or
            values of the wrong type
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse config file {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    unknown = set(config) - set(CONFIG_TYPES)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {sorted(map(str, unknown))}")

    # A single stopword may be written as a bare string, and none as an empty key
    if 'stopwords' in config:
        if config['stopwords'] is None:
            config['stopwords'] = []
        elif isinstance(config['stopwords'], str):
            config['stopwords'] = [config['stopwords']]

    for key, value in config.items():
        types = CONFIG_TYPES[key]
        if isinstance(value, bool) or not isinstance(value, types):
            expected = ' or '.join(t.__name__ for t in types)
            raise ValueError(f"Config key '{key}' in {path} must be {expected}, got {value!r}")

    stopwords = config.get('stopwords', [])
    if not all(isinstance(word, str) for word in stopwords):
        raise ValueError(f"Config key 'stopwords' in {path} must list strings, got {stopwords!r}")
    return config
