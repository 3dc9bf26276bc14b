"""
Parser for the body of a WordStar document.

The body is everything after the 128-byte file header, already decoded to
text. The grammar, in PEG notation::

    document    <- line* eof_padding? EOI
    line        <- content terminator
    terminator  <- "\\r"? "\\n"
    eof_padding <- "\\x1a" .*
    content     <- (!"\\n" .)*

Soft returns are already plain newlines at this point (see
``ws2markdown.core``). Each line is then classified as a header line
(``.h1`` .. ``.h5``), a dot command line (any other line starting with
``.``) or a normal line. NUL and other control characters inside a line are
not structural and are dropped from normal lines.
"""

import logging
import re

from .document import (
    ConversionError,
    DotCommand,
    DotCommandLine,
    HeaderLine,
    LineRecord,
    Modifier,
    ModifierSegment,
    NormalLine,
    Segment,
    TextSegment,
)

logger = logging.getLogger(__name__)

EOF_MARKER = "\x1a"


class MalformedDocument(ConversionError):
    """Raised when the document body does not match the top-level grammar."""
    pass


class DocumentParser:
    """
    Parses a decoded WordStar document body into line records.

    The parser keeps no state between calls, so one instance can be shared.
    """

    PATTERNS = {
        "line": re.compile(r"([^\n]*?)\r?\n"),
        "header": re.compile(r"\.[hH]([1-5])(?:\s+(.*))?$", re.DOTALL),
        "dot_command": re.compile(r"\.(\S*)(?:\s+(.*))?$", re.DOTALL),
        "segment": re.compile(
            r"(?P<extended>\x1d[^\x1d\n]*\x1d)"
            r"|(?P<text>[^\x00-\x08\x0a-\x1f\x7f]+)"
            r"|(?P<modifier>[\x02\x13\x19])"
            r"|(?P<control>[\x00-\x08\x0a-\x1f\x7f])"
        ),
    }

    def parse(self, text: str) -> list[LineRecord]:
        """
        Parse a document body.

        Args:
            text: The decoded body, header already removed.

        Returns:
            Line records in document order.

        Raises:
            MalformedDocument: If the body is not a sequence of terminated lines.
        """
        body = self._strip_eof_padding(text)
        records = [
            self.parse_line(raw_line, line_no)
            for line_no, raw_line in enumerate(self._split_lines(body), start=1)
        ]
        logger.debug("Parsed %d lines", len(records))
        return records

    def parse_line(self, raw_line: str, line_no: int = 0) -> LineRecord:
        """Classify a single line, without its terminator."""
        if raw_line.startswith("."):
            header = self.PATTERNS["header"].match(raw_line)
            if header:
                return HeaderLine(
                    level=int(header.group(1)),
                    text=header.group(2) or "",
                    line_no=line_no,
                )
            return self._parse_dot_command(raw_line, line_no)
        return NormalLine(segments=self._parse_segments(raw_line, line_no), line_no=line_no)

    def _split_lines(self, body: str) -> list[str]:
        """Split the body into lines, enforcing the top-level grammar."""
        lines = []
        pos = 0
        line_pattern = self.PATTERNS["line"]
        while pos < len(body):
            match = line_pattern.match(body, pos)
            if match is None:
                raise MalformedDocument(
                    f"Unterminated line {len(lines) + 1} at end of document"
                )
            lines.append(match.group(1))
            pos = match.end()
        return lines

    def _parse_dot_command(self, raw_line: str, line_no: int) -> DotCommandLine:
        match = self.PATTERNS["dot_command"].match(raw_line)
        name = match.group(1)
        argument = (match.group(2) or "").strip() or None
        command = DotCommand.from_name(name)
        if command is DotCommand.OTHER:
            logger.debug("Line %d: ignoring dot command '.%s'", line_no, name)
        return DotCommandLine(command=command, name=name, argument=argument, line_no=line_no)

    def _parse_segments(self, raw_line: str, line_no: int) -> tuple[Segment, ...]:
        segments: list[Segment] = []
        for match in self.PATTERNS["segment"].finditer(raw_line):
            if match.group("extended") is not None:
                # WordStar 5+ embeds binary records as 0x1D <length> ... 0x1D.
                logger.debug("Line %d: skipping embedded WordStar record", line_no)
            elif match.group("text") is not None:
                segments.append(TextSegment(match.group("text")))
            elif match.group("modifier") is not None:
                segments.append(ModifierSegment(Modifier(match.group("modifier"))))
            else:
                logger.debug(
                    "Line %d: skipping control character 0x%02x",
                    line_no, ord(match.group("control")),
                )
        return tuple(segments)

    @staticmethod
    def _strip_eof_padding(text: str) -> str:
        """Drop everything from the first ^Z onward."""
        index = text.find(EOF_MARKER)
        return text if index == -1 else text[:index]


_default_parser = DocumentParser()


def parse_document(text: str) -> list[LineRecord]:
    """Parse a decoded document body with a shared parser instance."""
    return _default_parser.parse(text)
