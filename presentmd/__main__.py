"""presentmd — Inspect a markdown presentation as a sequence of slides."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from .deck import Deck, parse_deck
from .lint import lint_document
from .themes import get_theme_config

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _configure_logging(log_file: str | None, verbose: bool) -> None:
    """Attach a handler to the package logger when asked to."""
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    elif verbose:
        handler = logging.StreamHandler(sys.stderr)
    else:
        return
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logging.getLogger("presentmd").setLevel(logging.DEBUG)
    logging.getLogger("presentmd").addHandler(handler)


def _deck_to_json(deck: Deck) -> str:
    return json.dumps(
        {
            "theme": deck.theme,
            "slide_count": deck.slide_count,
            "needs_separator": deck.needs_separator,
            "slides": [dataclasses.asdict(slide) for slide in deck.slides],
        },
        indent=2,
        ensure_ascii=False,
    )


def _print_summary(deck: Deck) -> None:
    print(f"Theme: {deck.theme}")
    print(f"Found {deck.slide_count} slide(s)")
    for slide in deck.slides:
        suffix = f" [{slide.css_class}]" if slide.css_class else ""
        print(f"  Slide {slide.index + 1}: {slide.title}{suffix}")
    if deck.needs_separator:
        print("Hint: add `---` to separate slides.")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="presentmd",
        description="Split a markdown presentation into slides and show their directives.",
    )
    parser.add_argument("input", help="Path to the markdown .md file")
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("--json", action="store_true",
                              help="Print every slide record as JSON")
    output_group.add_argument("--slide", type=int, default=None, metavar="N",
                              help="Print the cleaned markdown of slide N (1-based)")
    output_group.add_argument("--lint", action="store_true",
                              help="Print advisory diagnostics for the document")
    output_group.add_argument("--theme-config", action="store_true",
                              help="Print the resolved theme configuration as JSON")
    parser.add_argument("--log-file", help="Write debug logs to this file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Write debug logs to stderr")

    args = parser.parse_args()

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: {input_path} not found.", file=sys.stderr)
        sys.exit(1)

    _configure_logging(args.log_file, args.verbose)
    logger.info("CLI arguments: %s", vars(args))

    try:
        document = input_path.read_text(encoding="utf-8")
        deck = parse_deck(document)
        logger.info("Parsed %s: %d slide(s)", input_path, deck.slide_count)

        if args.json:
            print(_deck_to_json(deck))
        elif args.slide is not None:
            if not 1 <= args.slide <= deck.slide_count:
                print(
                    f"Error: slide {args.slide} requested but only "
                    f"{deck.slide_count} slide(s) exist.",
                    file=sys.stderr,
                )
                sys.exit(1)
            print(deck.slides[args.slide - 1].cleaned_content)
        elif args.lint:
            diagnostics = lint_document(document, deck)
            for diag in diagnostics:
                where = f"slide {diag.slide + 1}" if diag.slide is not None else f"offset {diag.start}"
                print(f"{diag.severity}: {diag.message} ({where})")
            if not diagnostics:
                print("No issues found.")
        elif args.theme_config:
            config = get_theme_config(deck.theme)
            print(json.dumps(dataclasses.asdict(config), indent=2))
        else:
            _print_summary(deck)

    except Exception:
        logger.exception("Parsing %s failed", input_path)
        raise


if __name__ == "__main__":
    main()
