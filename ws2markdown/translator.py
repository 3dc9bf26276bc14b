"""
Translation of parsed WordStar line records into Markdown.
"""

import logging
import re
from pathlib import PureWindowsPath
from typing import Iterable, Optional

from .document import (
    ConversionError,
    DotCommand,
    DotCommandLine,
    HeaderLine,
    LineRecord,
    Modifier,
    ModifierSegment,
    NormalLine,
    TextSegment,
    TranslationState,
)

logger = logging.getLogger(__name__)

DEFAULT_MARGIN_MARKER = "&nbsp;"
PAGE_BREAK = "\n----\n\n"

MODIFIER_TOKENS = {
    Modifier.BOLD: "**",
    Modifier.ITALIC: "*",
    Modifier.UNDERLINE: "__",
}

_MARGIN_PATTERN = re.compile(r"\+?[0-9]+")


class MissingFileName(ConversionError):
    """Raised when an insert-file command has no usable file name."""
    pass


class InvalidMarginValue(ConversionError):
    """Raised when a left-margin argument is not a non-negative integer."""
    pass


def file_basename(path: Optional[str]) -> str:
    """
    Return the final component of a path given to `.fi`.

    Both `/` and `\\` separators and DOS drive prefixes are understood,
    since WordStar documents usually come from DOS.

    Raises:
        MissingFileName: If the path is missing or has no final component.
    """
    if not path or not path.strip():
        raise MissingFileName("Insert-file command without a file name")
    name = PureWindowsPath(path.strip()).name
    if name in ("", ".", ".."):
        raise MissingFileName(f"No file name in insert-file path '{path}'")
    return name


def parse_margin(value: str) -> int:
    """
    Parse a `.lm` argument.

    Raises:
        InvalidMarginValue: If the value is not a non-negative decimal integer.
    """
    if not _MARGIN_PATTERN.fullmatch(value.strip()):
        raise InvalidMarginValue(f"Invalid left margin '{value}'")
    return int(value)


class MarkdownTranslator:
    """
    Walks line records once and renders them as Markdown.

    The translator holds configuration only. Each call to `translate` starts
    from a fresh `TranslationState`, so one instance can be reused.
    """

    def __init__(self, margin_marker: str = DEFAULT_MARGIN_MARKER):
        self.margin_marker = margin_marker

    def translate(self, records: Iterable[LineRecord]) -> str:
        """
        Render records to a single Markdown string.

        Raises:
            TypeError: If a record is not one of the known line kinds.
        """
        state = TranslationState()
        output: list[str] = []
        for record in records:
            match record:
                case HeaderLine():
                    self._translate_header(record, state, output)
                case NormalLine():
                    self._translate_normal(record, state, output)
                case DotCommandLine():
                    self._translate_dot_command(record, state, output)
                case _:
                    raise TypeError(f"Unsupported line record: {record!r}")
        return "".join(output)

    def _translate_header(self, record: HeaderLine, state: TranslationState, output: list[str]) -> None:
        output.append(f"{'#' * record.level} {record.text}\n")

    def _translate_normal(self, record: NormalLine, state: TranslationState, output: list[str]) -> None:
        output.append(self.margin_marker * state.left_margin)
        for segment in record.segments:
            match segment:
                case TextSegment(text=text):
                    output.append(text)
                case ModifierSegment(modifier=modifier):
                    output.append(MODIFIER_TOKENS[modifier])
                case _:
                    raise TypeError(f"Unsupported segment on line {record.line_no}: {segment!r}")
        output.append("\n")

    def _translate_dot_command(self, record: DotCommandLine, state: TranslationState, output: list[str]) -> None:
        match record.command:
            case DotCommand.INSERT_FILE:
                self._insert_file(record, state, output)
            case DotCommand.LEFT_MARGIN:
                self._left_margin(record, state, output)
            case DotCommand.PAGE_BREAK:
                self._page_break(record, state, output)
            case _:
                self._ignore(record, state, output)

    def _insert_file(self, record: DotCommandLine, state: TranslationState, output: list[str]) -> None:
        # Markdown has no include; the inserted file becomes a link instead.
        try:
            name = file_basename(record.argument)
        except MissingFileName as e:
            logger.warning("Line %d: %s, skipping", record.line_no, e)
            return
        output.append(f"\n[{name}]({record.argument})\n\n")

    def _left_margin(self, record: DotCommandLine, state: TranslationState, output: list[str]) -> None:
        if record.argument is None:
            state.reset_margin()
            return
        try:
            state.set_margin(parse_margin(record.argument))
        except InvalidMarginValue as e:
            logger.warning("Line %d: %s, resetting margin", record.line_no, e)
            state.reset_margin()

    def _page_break(self, record: DotCommandLine, state: TranslationState, output: list[str]) -> None:
        # No page breaks in Markdown, use a horizontal rule.
        output.append(PAGE_BREAK)

    def _ignore(self, record: DotCommandLine, state: TranslationState, output: list[str]) -> None:
        logger.debug("Line %d: no output for '.%s'", record.line_no, record.name)


def translate_records(
    records: Iterable[LineRecord],
    margin_marker: str = DEFAULT_MARGIN_MARKER,
) -> str:
    """Render records with a one-off translator."""
    return MarkdownTranslator(margin_marker=margin_marker).translate(records)
