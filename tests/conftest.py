"""
Shared test fixtures and configuration.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def sample_documents():
    """Sample document collection for testing."""
    return [
        "The quick brown fox jumps over the lazy dog.",
        "The dog barks; the fox runs away!",
        "A fox, a dog and 3 cats.",
    ]


@pytest.fixture
def sample_text_file(tmp_path, sample_documents):
    """Create a temporary text file with one document per line."""
    file_path = tmp_path / "sample.txt"
    file_path.write_text("\n".join(sample_documents) + "\n", encoding="utf-8")
    return str(file_path)


@pytest.fixture
def sample_csv_file(tmp_path):
    """Create a temporary CSV file with a text column."""
    file_path = tmp_path / "reviews.csv"
    file_path.write_text(
        "id,text\n"
        "1,Great coffee great service\n"
        "2,\n"
        "3,Coffee was cold\n",
        encoding="utf-8",
    )
    return str(file_path)


@pytest.fixture
def stopwords_file(tmp_path):
    """Create a temporary stopword list."""
    file_path = tmp_path / "stopwords.txt"
    file_path.write_text("# common words\nthe\n\na\nand\n", encoding="utf-8")
    return str(file_path)
