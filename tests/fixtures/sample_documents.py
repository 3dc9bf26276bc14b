"""
Sample WordStar document data for use in tests.
"""

from ws2markdown.core import HEADER_SIZE

BOLD = "\x02"
ITALIC = "\x19"
UNDERLINE = "\x13"
SOFT_CR = b"\x8d\n"
EOF_PADDING = b"\x1a" * 16

# A WordStar 5+ style header: signature byte followed by zero padding.
SAMPLE_HEADER = b"\x1d\x7d" + b"\x00" * (HEADER_SIZE - 2)


# Body of the smallest document that uses all three line kinds
SAMPLE_TITLE_BODY = (
    ".h1 Title\n"
    f"Hello {BOLD}world{BOLD}!\n"
    ".pa\n"
)

SAMPLE_TITLE_MARKDOWN = (
    "# Title\n"
    "Hello **world**!\n"
    "\n----\n\n"
)

SAMPLE_LETTER_BODY = (
    "..Letter to the editor, draft 3\r\n"
    ".h2 Letters\r\n"
    ".lm 2\r\n"
    f"Dear {ITALIC}Sir{ITALIC},\r\n"
    "\r\n"
    f"I {UNDERLINE}strongly{UNDERLINE} object.\r\n"
    ".lm\r\n"
    ".fi C:\\WS\\SIGNATUR.WS\r\n"
    ".pa\r\n"
    "Yours\r\n"
)

SAMPLE_LETTER_MARKDOWN = (
    "## Letters\n"
    "&nbsp;&nbsp;Dear *Sir*,\n"
    "&nbsp;&nbsp;\n"
    "&nbsp;&nbsp;I __strongly__ object.\n"
    "\n[SIGNATUR.WS](C:\\WS\\SIGNATUR.WS)\n\n"
    "\n----\n\n"
    "Yours\n"
)


def make_document(body: str | bytes, header: bytes = SAMPLE_HEADER, padding: bytes = b"") -> bytes:
    """Build full WordStar file contents from a body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    return header + body + padding
