"""
Visualization module for Textcloud.
"""
from .wordcloud_mpl import (
    DARK2_PALETTE,
    plot_word_frequencies,
    render_word_cloud,
    scale_weights,
)

__all__ = [
    'DARK2_PALETTE',
    'plot_word_frequencies',
    'render_word_cloud',
    'scale_weights',
]
