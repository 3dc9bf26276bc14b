"""
ws2markdown Core Engine

Turns raw WordStar file contents into Markdown: strips the fixed-size file
header, decodes the body, parses it into line records and translates those
into Markdown text. Reading and writing files is kept here too, so the CLI
only has to decide where input comes from and where output goes.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .parser import DocumentParser, MalformedDocument
from .translator import DEFAULT_MARGIN_MARKER, MarkdownTranslator

logger = logging.getLogger(__name__)

# WordStar reserves the first 128 bytes for its file header. Its contents are ignored.
HEADER_SIZE = 128

SUPPORTED_EXTENSIONS = {".ws", ".ws5", ".ws6", ".ws7"}

# Soft carriage return: 0x8D (CR with the high bit set) before LF.
SOFT_RETURN = b"\x8d\n"


def decode_document(data: bytes) -> str:
    """
    Strip the file header and decode the document body.

    Soft returns become plain newlines. Invalid byte sequences are replaced
    rather than rejected.

    Raises:
        MalformedDocument: If the data is shorter than the file header.
    """
    if len(data) < HEADER_SIZE:
        raise MalformedDocument(
            f"File is {len(data)} bytes, shorter than the {HEADER_SIZE}-byte WordStar header"
        )
    body = data[HEADER_SIZE:].replace(SOFT_RETURN, b"\n")
    return body.decode("utf-8", errors="replace")


class WordStarConverter:
    """Converts WordStar documents to clean Markdown."""

    SUPPORTED_EXTENSIONS = SUPPORTED_EXTENSIONS

    def __init__(self, margin_marker: str = DEFAULT_MARGIN_MARKER):
        self.parser = DocumentParser()
        self.translator = MarkdownTranslator(margin_marker=margin_marker)

    @staticmethod
    def can_handle(file_path: str | Path) -> bool:
        _, ext = os.path.splitext(str(file_path).lower())
        return ext in WordStarConverter.SUPPORTED_EXTENSIONS

    def convert_bytes(self, data: bytes) -> str:
        """
        Convert the full contents of a WordStar file to Markdown.

        Args:
            data: File contents, header included.

        Returns:
            The Markdown text.

        Raises:
            MalformedDocument: If the document cannot be parsed. No partial
                output is produced.
        """
        records = self.parser.parse(decode_document(data))
        return self.translator.translate(records)

    def convert_file(self, file_path: str | Path) -> str:
        """Read a WordStar file and convert it to Markdown."""
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        if not self.can_handle(path):
            logger.warning("%s does not have a WordStar extension, converting anyway", path.name)

        logger.debug("Converting %s", path)
        return self.convert_bytes(path.read_bytes())

    def convert(self, source: str | Path, output: Optional[str | Path] = None) -> str:
        """
        Convert a WordStar file, optionally saving the result.

        Args:
            source: Path to the WordStar file.
            output: If given, the Markdown is written to this path.

        Returns:
            The Markdown text
        """
        md_text = self.convert_file(source)

        if output is not None:
            out_path = Path(output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            with open(out_path, "w", encoding="utf-8") as f:
                f.write(md_text)
            logger.info("Saved %s", out_path)

        return md_text


def convert_bytes(data: bytes, margin_marker: str = DEFAULT_MARGIN_MARKER) -> str:
    """Convert WordStar file contents to Markdown with default settings."""
    return WordStarConverter(margin_marker=margin_marker).convert_bytes(data)
