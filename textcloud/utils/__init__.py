"""Utility functions for Textcloud."""

from .file_io import (
    FilePath,
    RawText,
    ensure_directory_exists,
    load_config,
    load_documents,
    load_stopwords,
    resolve_input,
)
from .text_processing import normalize_document, normalize_documents

__all__ = [
    'FilePath',
    'RawText',
    'ensure_directory_exists',
    'load_config',
    'load_documents',
    'load_stopwords',
    'resolve_input',
    'normalize_document',
    'normalize_documents',
]
