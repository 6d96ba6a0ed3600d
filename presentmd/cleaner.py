"""Content cleaner — turns a raw slide into render-ready markdown."""

from __future__ import annotations

from collections.abc import Callable

from .directives import BACKGROUND_SYNTAX_RE, NOTES_RE
from .models import COMMENT_RE, METADATA_LINE_RE, iter_fenced_lines


def _map_outside_fences(text: str, func: Callable[[str], str]) -> str:
    """Apply *func* to every run of lines that is not inside a code fence."""
    chunks: list[tuple[bool, list[str]]] = []
    for line, fenced in iter_fenced_lines(text):
        if chunks and chunks[-1][0] == fenced:
            chunks[-1][1].append(line)
        else:
            chunks.append((fenced, [line]))
    return "\n".join(
        "\n".join(lines) if fenced else func("\n".join(lines))
        for fenced, lines in chunks
    )


def _strip_directives(text: str) -> str:
    # Comments first: directive comments (``_class`` included) and notes.
    text = COMMENT_RE.sub("", text)
    text = METADATA_LINE_RE.sub("", text)
    text = BACKGROUND_SYNTAX_RE.sub("", text)
    return NOTES_RE.sub("", text)


def _collapse_blank_lines(text: str) -> str:
    lines: list[str] = []
    prev_blank = False
    for line, fenced in iter_fenced_lines(text):
        blank = not fenced and not line.strip()
        if blank and prev_blank:
            continue
        lines.append("" if blank else line)
        prev_blank = blank
    return "\n".join(lines)


def clean_slide_content(slide: str) -> str:
    """Strip directives, metadata lines, background images and notes.

    Headings, emphasis, lists, links and fenced code pass through untouched;
    nothing inside a code fence is stripped.  Runs of blank lines collapse
    to a single blank line.  The ``_class`` directive is dropped along with
    the other comments; read it from the raw slide with
    :func:`~presentmd.classify.determine_slide_class` first.
    """
    text = slide.replace("\r\n", "\n")
    text = _map_outside_fences(text, _strip_directives)
    return _collapse_blank_lines(text).strip()
