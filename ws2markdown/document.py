"""
Line records produced by the WordStar parser and consumed by the translator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class ConversionError(Exception):
    """Base class for errors raised while converting a WordStar document."""
    pass


class LineKind(Enum):
    """The three classes of line in a WordStar document body."""
    HEADER = "header"
    NORMAL = "normal"
    DOT_COMMAND = "dot_command"


class SegmentKind(Enum):
    """Pieces a normal line is split into."""
    TEXT = "text"
    MODIFIER = "modifier"


class Modifier(Enum):
    """In-band print controls that toggle character formatting."""
    BOLD = "\x02"  # ^B
    ITALIC = "\x19"  # ^Y
    UNDERLINE = "\x13"  # ^S


class DotCommand(Enum):
    """Dot commands the translator knows how to render."""
    INSERT_FILE = "fi"
    LEFT_MARGIN = "lm"
    PAGE_BREAK = "pa"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "DotCommand":
        """Look up a command word, case-insensitively. Unknown words map to OTHER."""
        lowered = name.lower()
        for command in cls:
            if command is not cls.OTHER and command.value == lowered:
                return command
        return cls.OTHER


MAX_HEADING_LEVEL = 5


@dataclass(frozen=True)
class TextSegment:
    """Displayed text, passed through unchanged."""
    text: str
    kind: ClassVar[SegmentKind] = SegmentKind.TEXT


@dataclass(frozen=True)
class ModifierSegment:
    """A single bold/italic/underline toggle marker."""
    modifier: Modifier
    kind: ClassVar[SegmentKind] = SegmentKind.MODIFIER


Segment = Union[TextSegment, ModifierSegment]


@dataclass(frozen=True)
class HeaderLine:
    """A `.h1` .. `.h5` heading."""
    level: int
    text: str
    line_no: int = 0
    kind: ClassVar[LineKind] = LineKind.HEADER

    def __post_init__(self):
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be between 1 and {MAX_HEADING_LEVEL}, got {self.level}")


@dataclass(frozen=True)
class NormalLine:
    """
    An ordinary text line.

    Segments are kept in document order. Modifier markers are not paired;
    each one is rendered on its own.
    """
    segments: tuple[Segment, ...] = ()
    line_no: int = 0
    kind: ClassVar[LineKind] = LineKind.NORMAL

    @property
    def text(self) -> str:
        """The displayed text of the line with all markers removed."""
        return "".join(s.text for s in self.segments if s.kind is SegmentKind.TEXT)


@dataclass(frozen=True)
class DotCommandLine:
    """A line starting with a dot command, recognised or not."""
    command: DotCommand
    name: str
    argument: Optional[str] = None
    line_no: int = 0
    kind: ClassVar[LineKind] = LineKind.DOT_COMMAND


LineRecord = Union[HeaderLine, NormalLine, DotCommandLine]


@dataclass
class TranslationState:
    """Mutable state carried through a single translation pass."""
    left_margin: int = 0

    def __post_init__(self):
        if self.left_margin < 0:
            raise ValueError(f"Left margin cannot be negative, got {self.left_margin}")

    def set_margin(self, value: int) -> None:
        """Set the left margin used by every following normal line."""
        if value < 0:
            raise ValueError(f"Left margin cannot be negative, got {value}")
        self.left_margin = value

    def reset_margin(self) -> None:
        self.left_margin = 0
