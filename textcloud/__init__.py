"""
Textcloud - Word frequency counting and word cloud rendering for plain text.
"""

from .exceptions import InvalidInputError
from .frequency import build_term_frequencies, select_top_words
from .pipeline import compute_word_frequencies, generate_word_cloud
from .visualization import plot_word_frequencies, render_word_cloud

__version__ = "0.1.0"
__all__ = [
    'InvalidInputError',
    'build_term_frequencies',
    'select_top_words',
    'compute_word_frequencies',
    'generate_word_cloud',
    'plot_word_frequencies',
    'render_word_cloud'
]
