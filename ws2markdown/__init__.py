"""
ws2markdown - WordStar to Markdown Converter

Converts WordStar documents into Markdown. The file header is skipped, the
body is parsed line by line into headers, normal text lines and dot
commands, and those are rendered as Markdown headings, emphasis, links and
horizontal rules.
"""

__version__ = "1.0.0"

from .core import WordStarConverter, convert_bytes, decode_document
from .document import ConversionError
from .parser import DocumentParser, MalformedDocument, parse_document
from .translator import InvalidMarginValue, MarkdownTranslator, MissingFileName, translate_records

__all__ = [
    "WordStarConverter",
    "convert_bytes",
    "decode_document",
    "ConversionError",
    "DocumentParser",
    "MalformedDocument",
    "parse_document",
    "MarkdownTranslator",
    "MissingFileName",
    "InvalidMarginValue",
    "translate_records",
]
