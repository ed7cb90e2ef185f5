"""
Tests for visualization modules.
"""

import os
import tempfile

import pytest
from wordcloud import WordCloud

from textcloud.visualization import (
    DARK2_PALETTE,
    plot_word_frequencies,
    render_word_cloud,
    scale_weights,
)
from textcloud.visualization.wordcloud_mpl import palette_color_func

SAMPLE_SELECTION = [
    ("learning", 10),
    ("data", 8),
    ("model", 5),
    ("network", 3),
    ("science", 1),
]


def test_dark2_palette():
    """The palette has 8 fixed qualitative colors."""
    assert len(DARK2_PALETTE) == 8
    assert DARK2_PALETTE[0] == "#1b9e77"
    assert DARK2_PALETTE[-1] == "#666666"


def test_scale_weights():
    """The top word gets max_scale, the others shrink linearly."""
    weights = scale_weights([("a", 4), ("b", 2)], min_scale=0.5, max_scale=5.0)
    assert weights["a"] == pytest.approx(5.0)
    assert weights["b"] == pytest.approx(2.75)
    assert scale_weights([]) == {}


@pytest.mark.parametrize("min_scale,max_scale", [(0, 5.0), (-1, 5.0), (2.0, 1.0)])
def test_scale_weights_invalid(min_scale, max_scale):
    """Test scale range validation."""
    with pytest.raises(ValueError):
        scale_weights(SAMPLE_SELECTION, min_scale=min_scale, max_scale=max_scale)


def test_palette_color_func_cycles():
    """Colors cycle through the palette by rank."""
    selection = [(f"w{i}", 20 - i) for i in range(10)]
    color_func = palette_color_func(selection)
    assert color_func("w0", 10, (0, 0), None) == DARK2_PALETTE[0]
    assert color_func("w7", 10, (0, 0), None) == DARK2_PALETTE[7]
    assert color_func("w8", 10, (0, 0), None) == DARK2_PALETTE[0]


def test_render_word_cloud():
    """Test rendering a word cloud."""
    wc = render_word_cloud(SAMPLE_SELECTION)
    assert isinstance(wc, WordCloud)
    assert wc.to_image().size == (800, 600)

    placed = [entry[0][0] for entry in wc.layout_]
    assert placed[0] == "learning"
    # Most frequent words are placed first and drawn largest
    sizes = [entry[1] for entry in wc.layout_]
    assert sizes == sorted(sizes, reverse=True)


def test_render_word_cloud_font_sizes():
    """The top word is drawn at base_font_size * max_scale and the rest shrink linearly."""
    wc = render_word_cloud(SAMPLE_SELECTION, base_font_size=20, min_scale=0.5, max_scale=5.0)
    sizes = {entry[0][0]: entry[1] for entry in wc.layout_}
    # 20 * (0.5 + 4.5 * count / 10)
    assert sizes == {"learning": 100, "data": 82, "model": 55, "network": 37, "science": 19}


def test_render_word_cloud_deterministic():
    """The same selection gives the same layout."""
    first = render_word_cloud(SAMPLE_SELECTION)
    second = render_word_cloud(SAMPLE_SELECTION)
    assert first.layout_ == second.layout_


def test_render_word_cloud_output_file():
    """Test saving the word cloud to a file."""
    with tempfile.NamedTemporaryFile(suffix='.png', delete=False) as tmp:
        output_path = tmp.name
    try:
        render_word_cloud(SAMPLE_SELECTION, output_file=output_path)
        assert os.path.exists(output_path)
        assert os.path.getsize(output_path) > 0
    finally:
        if os.path.exists(output_path):
            os.unlink(output_path)


def test_render_word_cloud_empty():
    """An empty selection cannot be rendered."""
    with pytest.raises(ValueError):
        render_word_cloud([])


def test_plot_word_frequencies(tmp_path):
    """Test plotting word frequencies."""
    plot_word_frequencies(SAMPLE_SELECTION)

    output_path = tmp_path / "frequencies.png"
    plot_word_frequencies(SAMPLE_SELECTION, top_n=3, output_file=str(output_path))
    assert output_path.exists()
    assert output_path.stat().st_size > 0

    with pytest.raises(ValueError):
        plot_word_frequencies([])
