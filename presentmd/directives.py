"""Directive extractors — pull per-slide metadata out of raw slide text.

Every extractor works on the raw slide (before cleaning), ignores lines
inside fenced code and returns ``None`` when nothing matches.  None of
them raise.
"""

from __future__ import annotations

import functools
import re

from .models import (
    BACKGROUND_POSITIONS,
    COMMENT_RE,
    DEFAULT_BACKGROUND_POSITION,
    DIRECTIVE_COMMENT_RE,
    BackgroundImage,
    outside_fences,
    unquote,
)

# ![bg](url), ![bg left](url), ![bg contain](url "caption")
BACKGROUND_IMAGE_RE = re.compile(
    r"!\[bg(?:\s+(" + "|".join(BACKGROUND_POSITIONS) + r"))?\]"
    r"\(\s*([^)\s]+)(?:\s+[^)]*)?\)",
    re.IGNORECASE,
)

# Any ![bg ...](...) image, valid or not.  Used by the cleaner.
BACKGROUND_SYNTAX_RE = re.compile(r"!\[bg\b[^\]]*\]\([^)]*\)", re.IGNORECASE)

# "Notes:" at line start, running to a blank line, a separator or the end.
NOTES_RE = re.compile(
    r"^Notes:[ \t]*(.*?)(?=\n[ \t]*\n|\n[ \t]*---[ \t]*(?:\n|\Z)|\Z)",
    re.MULTILINE | re.DOTALL,
)

_SAFE_URL_PREFIXES = ("http://", "https://", "/", "./", "../")
_URL_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


@functools.lru_cache(maxsize=None)
def _directive_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(
        rf"<!--\s*{re.escape(keyword)}\s*:(.*?)-->",
        re.IGNORECASE | re.DOTALL,
    )


def find_directive(text: str, keyword: str) -> str | None:
    """Find the first ``<!-- keyword: value -->`` comment in *text*.

    Returns ``None`` when no such comment exists and the (unquoted, trimmed)
    value otherwise, which is ``""`` for a comment like ``<!-- footer: "" -->``.
    The two must stay distinct: an empty value clears a persistent directive.
    """
    match = _directive_pattern(keyword).search(outside_fences(text))
    if match is None:
        return None
    return unquote(match.group(1))


def extract_directive(
    text: str, keyword: str, *, reject_leading_dash: bool = False
) -> str | None:
    """Return the non-empty value of a directive comment, or ``None``."""
    value = find_directive(text, keyword)
    if not value:
        return None
    # A value like "-->" leaking in from a neighbouring comment.
    if reject_leading_dash and value.startswith("-"):
        return None
    return value


def extract_footer(text: str) -> str | None:
    return extract_directive(text, "footer")


def extract_header(text: str) -> str | None:
    return extract_directive(text, "header")


def extract_color(text: str) -> str | None:
    return extract_directive(text, "_color", reject_leading_dash=True)


def extract_background_color(text: str) -> str | None:
    return extract_directive(text, "_backgroundColor", reject_leading_dash=True)


def extract_class(text: str) -> str | None:
    """Return the ``_class`` directive with whitespace collapsed.

    ``<!-- _class:  lead   invert -->`` gives ``"lead invert"``.
    """
    value = extract_directive(text, "_class")
    if value is None:
        return None
    return " ".join(value.split()) or None


def is_allowed_image_url(url: str) -> bool:
    """Accept http(s) URLs, absolute and relative paths; reject other schemes."""
    if url.startswith(_SAFE_URL_PREFIXES):
        return True
    return _URL_SCHEME_RE.match(url) is None


def extract_background_image(text: str) -> BackgroundImage | None:
    """Return the first acceptable ``![bg <position>](url)`` image."""
    for match in BACKGROUND_IMAGE_RE.finditer(outside_fences(text)):
        position, url = match.group(1), match.group(2)
        if not is_allowed_image_url(url):
            continue
        return BackgroundImage(
            url=url,
            position=(position or DEFAULT_BACKGROUND_POSITION).lower(),
        )
    return None


def extract_speaker_notes(text: str) -> list[str]:
    """Collect speaker notes from comments and ``Notes:`` sections.

    Notes are returned in order of appearance.  Directive comments
    (``_class:``, ``header:``, ``footer:``, ``_color:``, ``_backgroundColor:``)
    are not notes, and empty notes are skipped.
    """
    text = outside_fences(text)
    found: list[tuple[int, str]] = []
    for match in COMMENT_RE.finditer(text):
        content = match.group(1).strip()
        if not content or DIRECTIVE_COMMENT_RE.match(content):
            continue
        found.append((match.start(), content))
    for match in NOTES_RE.finditer(text):
        content = match.group(1).strip()
        if content:
            found.append((match.start(), content))
    found.sort(key=lambda item: item[0])
    return [content for _, content in found]
