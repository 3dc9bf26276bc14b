#!/usr/bin/env python3
"""
ws2markdown CLI

Command-line interface for WordStar-to-Markdown conversion.

Usage:
    python -m ws2markdown <input> [output] [options]
    python -m ws2markdown letter.ws               # print Markdown to stdout
    python -m ws2markdown letter.ws letter.md     # write Markdown to a file
    python -m ws2markdown                         # pick the input file in a dialog

Options:
    --margin-marker TEXT   Text repeated once per left-margin column (default: &nbsp;)
    --formats              List the accepted file extensions
    -v, --verbose          Log what the parser and translator skip
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .core import WordStarConverter
from .parser import MalformedDocument
from .translator import DEFAULT_MARGIN_MARKER


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ws2markdown",
        description=(
            "WordStar to Markdown converter\n\n"
            "Converts WordStar documents into Markdown. Headings, bold,\n"
            "italic and underline, left margins, page breaks and inserted\n"
            "files are carried over."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  ws2markdown chapter1.ws                 # print to terminal\n"
            "  ws2markdown chapter1.ws chapter1.md     # write to a file\n"
            "  ws2markdown                             # choose a file in a dialog\n"
        ),
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="WordStar file to convert (a file dialog opens if omitted)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="Markdown file to write (printed to stdout if omitted)",
    )
    parser.add_argument(
        "--margin-marker",
        default=DEFAULT_MARGIN_MARKER,
        help=f"Text repeated once per left-margin column (default: {DEFAULT_MARGIN_MARKER})",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="List the accepted file extensions and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.formats:
        print("WordStar: " + " ".join(sorted(WordStarConverter.SUPPORTED_EXTENSIONS)))
        return 0

    try:
        if args.input:
            # The input has to exist already, the output does not.
            input_path = Path(args.input).resolve(strict=True)
        else:
            input_path = _pick_input_file()
            if input_path is None:
                print("[ERROR] No input file selected.", file=sys.stderr)
                return 1

        output_path = Path(args.output).absolute() if args.output else None

        engine = WordStarConverter(margin_marker=args.margin_marker)
        md_text = engine.convert(input_path, output=output_path)
    except (MalformedDocument, OSError, RuntimeError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if output_path is None:
        print(md_text)
    else:
        print("Done.")
    return 0


def _pick_input_file() -> Optional[Path]:
    """Ask for the input file in a native file dialog."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError:
        raise RuntimeError(
            "tkinter is not available. Pass the input file on the command line."
        ) from None

    patterns = " ".join(f"*{ext}" for ext in sorted(WordStarConverter.SUPPORTED_EXTENSIONS))
    try:
        root = tkinter.Tk()
    except tkinter.TclError as e:
        raise RuntimeError(
            f"Cannot open a file dialog ({e}). Pass the input file on the command line."
        ) from e
    root.withdraw()
    try:
        selected = filedialog.askopenfilename(
            title="Select a WordStar file",
            filetypes=[("WordStar File", patterns), ("All files", "*")],
            initialdir="/",
        )
    finally:
        root.destroy()

    return Path(selected).resolve() if selected else None


if __name__ == "__main__":
    sys.exit(main())
