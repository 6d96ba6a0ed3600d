"""Marp-aware advisory checks for a markdown deck.

Diagnostics are hints for an editor: they never raise and never stop a
document from being parsed or rendered.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .classify import find_heading
from .deck import Deck, parse_deck
from .segmenter import needs_separator, split_front_matter

logger = logging.getLogger(__name__)

WARNING = "warning"
INFO = "info"

_MARP_TRUE_RE = re.compile(r"^\s*marp\s*:\s*true\b", re.MULTILINE)
_QUOTED_TITLE_RE = re.compile(r"^\s*title:\s*([\"']).*\1\s*$", re.MULTILINE)


@dataclass(frozen=True)
class Diagnostic:
    message: str
    severity: str
    start: int = 0
    end: int = 0
    slide: int | None = None


def lint_document(document: str, deck: Deck | None = None) -> list[Diagnostic]:
    """Return advisory diagnostics for *document*, document-level ones first.

    Pass the already parsed *deck* to skip parsing *document* a second time.
    """
    document = document.replace("\r\n", "\n")
    diagnostics: list[Diagnostic] = []

    front_matter, body = split_front_matter(document)
    meta_length = 0
    if front_matter is None:
        diagnostics.append(Diagnostic(
            "Missing YAML front matter. Add `---` with `marp: true` "
            "and a `title: \"Your Title\"`.",
            WARNING,
            0,
            min(3, len(document)),
        ))
    else:
        meta_length = len(document) - len(body)
        if not _MARP_TRUE_RE.search(front_matter):
            diagnostics.append(Diagnostic(
                "Front matter should include `marp: true`.",
                WARNING,
                0,
                meta_length,
            ))
        if not _QUOTED_TITLE_RE.search(front_matter):
            diagnostics.append(Diagnostic(
                "Front matter should include a `title: \"Your Title\"`.",
                INFO,
                0,
                meta_length,
            ))

    if needs_separator(document):
        diagnostics.append(Diagnostic(
            "Add `---` to separate slides.",
            INFO,
            meta_length,
            min(meta_length + 10, len(document)),
        ))

    if deck is None:
        deck = parse_deck(document)
    for slide in deck.slides:
        if slide.cleaned_content and find_heading(slide.raw_content) is None:
            diagnostics.append(Diagnostic(
                f"Slide {slide.index + 1} has no heading.",
                INFO,
                slide=slide.index,
            ))

    logger.debug("Lint produced %d diagnostic(s)", len(diagnostics))
    return diagnostics
