"""Word cloud visualization using Matplotlib."""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import to_hex
from wordcloud import WordCloud

logger = logging.getLogger(__name__)

PALETTE_NAME = "Dark2"
DARK2_PALETTE: List[str] = [to_hex(c) for c in matplotlib.colormaps[PALETTE_NAME].colors]


def scale_weights(selection: Sequence[Tuple[str, int]], min_scale: float = 0.5,
                  max_scale: float = 5.0) -> Dict[str, float]:
    """Map word counts onto the [min_scale, max_scale] range.

    The most frequent word gets max_scale; the others shrink linearly with
    their count towards min_scale.

    Args:
        selection: Ranked (word, count) pairs
        min_scale: Scale of a word with a vanishing count
        max_scale: Scale of the most frequent word

    Returns:
        Mapping of word to scale, in selection order
    """
    if min_scale <= 0:
        raise ValueError(f"min_scale must be positive, got {min_scale}")
    if max_scale < min_scale:
        raise ValueError(f"max_scale ({max_scale}) must not be smaller than min_scale ({min_scale})")
    if not selection:
        return {}

    top = max(count for _, count in selection)
    return {
        word: min_scale + (max_scale - min_scale) * count / top
        for word, count in selection
    }


def palette_color_func(selection: Sequence[Tuple[str, int]], palette: Sequence[str] = DARK2_PALETTE):
    """Build a color function that cycles the palette by word rank."""
    ranks = {word: i for i, (word, _) in enumerate(selection)}

    def color_func(word, font_size, position, orientation, random_state=None, **kwargs):
        return palette[ranks.get(word, 0) % len(palette)]

    return color_func


def render_word_cloud(
    selection: Sequence[Tuple[str, int]],
    min_scale: float = 0.5,
    max_scale: float = 5.0,
    width: int = 800,
    height: int = 600,
    base_font_size: int = 20,
    background_color: str = "white",
    output_file: Optional[str] = None,
    show: bool = False,
    random_state: int = 42,
) -> WordCloud:
    """Render the selected words as a word cloud.

    Words are placed most frequent first without overlap. A word's font size
    is base_font_size times its scale (see scale_weights), and colors cycle
    through the 8-color Dark2 palette.

    Args:
        selection: Ranked (word, count) pairs
        min_scale: Smallest scale factor
        max_scale: Largest scale factor, used for the most frequent word
        width: Width of the canvas in pixels
        height: Height of the canvas in pixels
        base_font_size: Font size corresponding to a scale of 1
        background_color: Background color of the canvas
        output_file: If provided, save the rendered figure to this file
        show: Whether to display the plot
        random_state: Seed for the layout, fixed for reproducible output

    Returns:
        The fitted WordCloud object
    """
    try:
        weights = scale_weights(selection, min_scale=min_scale, max_scale=max_scale)

        # relative_scaling=1 makes font size proportional to the weight, so
        # each word lands at base_font_size * scale
        wc = WordCloud(
            width=width,
            height=height,
            background_color=background_color,
            max_words=max(len(selection), 1),
            max_font_size=int(round(base_font_size * max_scale)),
            min_font_size=max(1, int(base_font_size * min_scale) // 2),
            relative_scaling=1.0,
            prefer_horizontal=0.9,
            color_func=palette_color_func(selection),
            random_state=random_state,
        )
        wc.generate_from_frequencies(weights)

        fig = plt.figure(figsize=(width / 100, height / 100), dpi=100)
        plt.imshow(wc, interpolation='bilinear')
        plt.axis("off")
        plt.tight_layout(pad=0)

        if output_file:
            plt.savefig(output_file, bbox_inches='tight', dpi=300)
            logger.info(f"Word cloud saved to {output_file}")

        if show:
            plt.show()
        else:
            plt.close(fig)

        return wc

    except Exception as e:
        logger.error(f"Error creating word cloud: {str(e)}")
        raise


def plot_word_frequencies(
    selection: Sequence[Tuple[str, int]],
    top_n: int = 20,
    figsize: Tuple[int, int] = (12, 8),
    output_file: Optional[str] = None,
    show: bool = False
) -> None:
    """Plot a bar chart of the most frequent words.

    Args:
        selection: Ranked (word, count) pairs
        top_n: Number of top words to show
        figsize: Figure size (width, height)
        output_file: If provided, save the plot to this file
        show: Whether to display the plot
    """
    try:
        top = list(selection)[:top_n]
        if not top:
            raise ValueError("No words to plot")
        words, counts = zip(*top)

        fig = plt.figure(figsize=figsize)
        y_pos = np.arange(len(words))

        plt.barh(y_pos, counts, align='center', alpha=0.7,
                 color=[DARK2_PALETTE[i % len(DARK2_PALETTE)] for i in range(len(words))])
        plt.yticks(y_pos, words)
        plt.gca().invert_yaxis()
        plt.xlabel('Frequency')
        plt.title(f'Top {len(words)} Most Frequent Words')
        plt.tight_layout()

        if output_file:
            plt.savefig(output_file, bbox_inches='tight', dpi=300)
            logger.info(f"Word frequencies plot saved to {output_file}")

        if show:
            plt.show()
        else:
            plt.close(fig)

    except Exception as e:
        logger.error(f"Error plotting word frequencies: {str(e)}")
        raise
