"""havarot command line entry point.

This script can be invoked directly (``python -m havarot``) or through
the ``havarot`` console script.  It syllabifies pointed Hebrew given on
the command line, read from a file, or fetched from Sefaria, and prints
one line per word: the syllables joined by a middle dot, followed by
the flags of each syllable, C (closed), A (accented) and F (final).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import requests

from .config import AppConfig, SylOptions, get_app_config
from .connectors import get_default_connector
from .core.syllable import Syllable
from .core.text import Text
from .core.word import Word
from .utils.logger import configure_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="havarot",
        description="Split pointed Hebrew text into syllables.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="pointed Hebrew text")
    source.add_argument("--file", type=Path, help="read the text from a UTF-8 file")
    source.add_argument("--ref", help="fetch a reference from Sefaria, e.g. 'Genesis 1:1'")
    parser.add_argument("--schema", choices=["traditional", "tiberian"],
                        help="preset for the sheva options")
    parser.add_argument("--no-qamets-qatan", action="store_true",
                        help="do not convert qamets to qamets qatan")
    parser.add_argument("--holem-haser", choices=["remove"],
                        help="normalise holam haser for vav to holem")
    parser.add_argument("--structure", action="store_true",
                        help="print onset, nucleus and coda of each syllable")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log debugging output to stderr")
    return parser


def _options(args: argparse.Namespace, config: AppConfig) -> SylOptions:
    options = SylOptions.from_config(config)
    changes = {}
    if args.schema:
        changes["schema"] = args.schema
    if args.no_qamets_qatan:
        changes["qamets_qatan"] = False
    if args.holem_haser:
        changes["holem_haser"] = args.holem_haser
    return options.replace(**changes) if changes else options


def _read_source(args: argparse.Namespace, config: AppConfig) -> str:
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    if args.ref:
        connector = get_default_connector(config.get("connector", default={}))
        return connector.get_text(args.ref)
    return args.text


def _flags(syllable: Syllable) -> str:
    flags = [flag for flag, on in (("C", syllable.is_closed), ("A", syllable.is_accented),
                                   ("F", syllable.is_final)) if on]
    return "".join(flags) or "-"


def _describe_structure(syllable: Syllable) -> str:
    onset, nucleus, coda = syllable.structure
    return "{}|{}|{}".format(*("".join(p.text for p in group) for group in (onset, nucleus, coda)))


def format_word(word: Word, separator: str = "·", structure: bool = False) -> str:
    """Render a word as its syllables joined by ``separator`` plus flags."""
    syllables = word.syllables
    line = separator.join(s.text for s in syllables)
    line += "  [" + ", ".join(_flags(s) for s in syllables) + "]"
    if structure:
        line += "  " + " ".join(_describe_structure(s) for s in syllables)
    return line


def render(text: Text, out: TextIO, separator: str = "·", structure: bool = False) -> None:
    for word in text.words:
        out.write(format_word(word, separator, structure) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_app_config()
    level = "DEBUG" if args.verbose else config.get("logging", "level", default="WARNING")
    configure_logger(level, config.get("logging", "file"))

    try:
        options = _options(args, config)
        source = _read_source(args, config)
        text = Text(source, options)
        render(text, sys.stdout, config.get("output", "separator", default="·"), args.structure)
    except (ValueError, OSError, requests.RequestException) as exc:
        # SyllableStructureError and TextValidationError are ValueErrors;
        # ConnectionError is an OSError
        logger.debug("Failed", exc_info=True)
        print(f"havarot: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
