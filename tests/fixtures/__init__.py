# Test fixtures
from .sample_documents import (
    BOLD,
    ITALIC,
    UNDERLINE,
    SOFT_CR,
    EOF_PADDING,
    SAMPLE_HEADER,
    SAMPLE_TITLE_BODY,
    SAMPLE_TITLE_MARKDOWN,
    SAMPLE_LETTER_BODY,
    SAMPLE_LETTER_MARKDOWN,
    make_document,
)

__all__ = [
    "BOLD",
    "ITALIC",
    "UNDERLINE",
    "SOFT_CR",
    "EOF_PADDING",
    "SAMPLE_HEADER",
    "SAMPLE_TITLE_BODY",
    "SAMPLE_TITLE_MARKDOWN",
    "SAMPLE_LETTER_BODY",
    "SAMPLE_LETTER_MARKDOWN",
    "make_document",
]
