"""Slide classification plus title and theme extraction."""

from __future__ import annotations

import re

from .directives import extract_class
from .models import DEFAULT_THEME, HEADING_RE, iter_fenced_lines, unquote

TITLE_SLIDE_CLASS = "title-slide"
SECOND_SLIDE_CLASS = "second-slide"

_TITLE_LINE_RE = re.compile(r"^title:\s*(.+)$")
_THEME_LINE_RE = re.compile(r"^theme:\s*(.+)$", re.MULTILINE)


def find_heading(slide: str) -> tuple[int, str] | None:
    """Return ``(level, text)`` of the first heading outside fenced code."""
    for line, fenced in iter_fenced_lines(slide):
        if fenced:
            continue
        match = HEADING_RE.match(line)
        if match:
            return len(match.group(1)), match.group(2).strip()
    return None


def determine_slide_class(slide: str) -> str:
    """Derive the display class for a raw slide.

    An explicit ``<!-- _class: ... -->`` directive wins.  Otherwise the
    first heading decides: ``#`` gives ``title-slide``, ``##`` gives
    ``second-slide``, anything deeper (or no heading) gives ``""``.
    """
    explicit = extract_class(slide)
    if explicit:
        return explicit

    heading = find_heading(slide)
    if heading is None:
        return ""
    level = heading[0]
    if level == 1:
        return TITLE_SLIDE_CLASS
    if level == 2:
        return SECOND_SLIDE_CLASS
    return ""


def extract_slide_title(slide: str, index: int) -> str:
    """Title from the first heading, then a ``title:`` line, then ``Slide N``."""
    heading = find_heading(slide)
    if heading is not None:
        return heading[1]

    for line, fenced in iter_fenced_lines(slide):
        if fenced:
            continue
        match = _TITLE_LINE_RE.match(line)
        if match:
            title = unquote(match.group(1))
            if title:
                return title
            break

    return f"Slide {index + 1}"


def extract_slide_titles(slides: list[str]) -> list[str]:
    return [extract_slide_title(slide, i) for i, slide in enumerate(slides)]


def extract_theme(document: str) -> str:
    """Return the first ``theme:`` value in *document*, or ``"default"``.

    Unknown theme names are returned as-is; resolving them is up to
    :func:`presentmd.themes.get_theme_config`.
    """
    match = _THEME_LINE_RE.search(document)
    if match:
        theme = unquote(match.group(1))
        if theme:
            return theme
    return DEFAULT_THEME
