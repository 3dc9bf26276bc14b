"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ws2markdown.core import WordStarConverter
from ws2markdown.parser import DocumentParser
from ws2markdown.translator import MarkdownTranslator
from tests.fixtures import (
    SAMPLE_LETTER_BODY,
    SAMPLE_TITLE_BODY,
    make_document,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def parser():
    """Create a document parser instance."""
    return DocumentParser()


@pytest.fixture
def translator():
    """Create a Markdown translator with the default margin marker."""
    return MarkdownTranslator()


@pytest.fixture
def converter():
    """Create a WordStar converter with default settings."""
    return WordStarConverter()


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def title_document_file(tmp_path):
    """Create a WordStar file with a title, a bold word and a page break."""
    file_path = tmp_path / "title.ws"
    file_path.write_bytes(make_document(SAMPLE_TITLE_BODY))
    return file_path


@pytest.fixture
def letter_document_file(tmp_path):
    """Create a DOS-style WordStar letter with margins and an inserted file."""
    file_path = tmp_path / "LETTER.WS5"
    file_path.write_bytes(make_document(SAMPLE_LETTER_BODY))
    return file_path


@pytest.fixture
def malformed_document_file(tmp_path):
    """Create a WordStar file whose last line is not terminated."""
    file_path = tmp_path / "broken.ws"
    file_path.write_bytes(make_document(".h1 Title\nno newline at the end"))
    return file_path
