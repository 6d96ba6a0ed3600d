"""Slide segmenter — splits a markdown document into raw slide blocks.

The document is scanned line by line: an optional front-matter block is
removed, the rest is split on ``---`` lines that sit outside fenced code,
metadata-only blocks are dropped, and persistent ``header:``/``footer:``
directives are carried forward onto the slides that follow them.
"""

from __future__ import annotations

import logging

from .directives import find_directive
from .metadata import is_metadata_line, is_metadata_only
from .models import HEADING_RE, is_separator, iter_fenced_lines

logger = logging.getLogger(__name__)


def _looks_like_front_matter(lines: list[str]) -> bool:
    """True if *lines* hold only metadata keys (plus blanks and YAML continuations)."""
    seen_key = False
    for line in lines:
        if not line.strip():
            continue
        if is_metadata_line(line):
            seen_key = True
            continue
        # Indented continuation of a multi-line value, e.g. ``style: |``.
        if seen_key and line[:1] in (" ", "\t"):
            continue
        return False
    return seen_key


def split_front_matter(document: str) -> tuple[str | None, str]:
    """Separate a leading front-matter block from the rest of *document*.

    Returns ``(front_matter, body)``.  ``front_matter`` is the text between
    the two delimiters, or ``None`` when the document has none.  A leading
    ``---`` that does not open real front matter is a plain separator: only
    that line is dropped so it cannot produce an empty first slide.
    """
    lines = document.split("\n")
    start = next((i for i, line in enumerate(lines) if line.strip()), None)
    if start is None or not is_separator(lines[start]):
        return None, document

    end = next(
        (i for i in range(start + 1, len(lines)) if is_separator(lines[i])),
        None,
    )
    if end is not None and _looks_like_front_matter(lines[start + 1 : end]):
        logger.debug("Front matter found on lines %d-%d", start + 1, end + 1)
        return "\n".join(lines[start + 1 : end]), "\n".join(lines[end + 1 :])

    logger.debug("Leading separator is not front matter, dropping it")
    return None, "\n".join(lines[start + 1 :])


def split_blocks(text: str) -> list[str]:
    """Split *text* on separator lines, never inside a fenced code block."""
    blocks: list[str] = []
    current: list[str] = []
    for line, fenced in iter_fenced_lines(text):
        if not fenced and is_separator(line):
            blocks.append("\n".join(current))
            current = []
            continue
        current.append(line)
    blocks.append("\n".join(current))
    return blocks


def apply_persistent_directives(blocks: list[str]) -> list[str]:
    """Carry ``header``/``footer`` directives forward across *blocks*.

    A directive with a value replaces the persistent one, an empty value
    clears it, and a block without the directive receives a synthesized
    comment holding the current value (if any).
    """
    header: str | None = None
    footer: str | None = None
    result: list[str] = []

    for i, block in enumerate(blocks):
        local_header = find_directive(block, "header")
        local_footer = find_directive(block, "footer")
        if local_header is not None:
            header = local_header or None
        if local_footer is not None:
            footer = local_footer or None

        if local_header is None and header:
            block = f'<!-- header: "{header}" -->\n{block}'
        if local_footer is None and footer:
            block = f'{block}\n<!-- footer: "{footer}" -->'

        logger.debug("  Block %d: header=%r, footer=%r", i + 1, header, footer)
        result.append(block)

    return result


def needs_separator(document: str) -> bool:
    """Advisory: does *document* look like it is missing a ``---`` separator?

    True when front matter is followed by no separator at all, or when a
    document without separators holds several level-1/level-2 headings.
    """
    document = document.replace("\r\n", "\n")
    separators = 0
    top_headings = 0
    for line, fenced in iter_fenced_lines(document):
        if fenced:
            continue
        if is_separator(line):
            separators += 1
        else:
            match = HEADING_RE.match(line)
            if match and len(match.group(1)) <= 2:
                top_headings += 1

    front_matter, _ = split_front_matter(document)
    if front_matter is not None:
        return separators <= 2
    return separators == 0 and top_headings >= 2


def parse_slides(document: str) -> list[str]:
    """Parse a markdown *document* into an ordered list of raw slide strings.

    Always returns at least one element; an empty document (or one holding
    nothing but metadata) gives ``[""]``.
    """
    document = document.replace("\r\n", "\n")
    if not document.strip():
        return [""]

    _, body = split_front_matter(document)
    blocks = [block.strip() for block in split_blocks(body)]
    slides = [block for block in blocks if not is_metadata_only(block)]
    logger.debug(
        "Split document into %d block(s), %d with content", len(blocks), len(slides)
    )

    if not slides:
        return [""]
    return apply_persistent_directives(slides)
