"""Shared data models and parsing constants."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

SEPARATOR = "---"

DEFAULT_THEME = "default"

BACKGROUND_POSITIONS = ("left", "right", "fit", "cover", "contain")
DEFAULT_BACKGROUND_POSITION = "cover"

# Keys that may appear as bare ``key: value`` lines in front matter or at the
# top of a slide.  Each may also carry a leading underscore (Marp spot
# directive form).
METADATA_KEYS = (
    "theme",
    "title",
    "class",
    "paginate",
    "marp",
    "size",
    "author",
    "date",
    "backgroundColor",
    "backgroundImage",
    "color",
    "footer",
    "header",
    "style",
    "transition",
    "math",
    "headingDivider",
    "inlineSVG",
    "html",
    "layout",
    "background",
)

_KEYS_ALT = "|".join(METADATA_KEYS)

# Matches HTML comments, including multi-line ones.
COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL)

# A whole metadata line, anchored at line start and case-sensitive.
METADATA_LINE_RE = re.compile(rf"^_?(?:{_KEYS_ALT}):.*$", re.MULTILINE)

# The content of a comment that is a directive rather than a speaker note.
# Case-sensitive, so a note like "Background: ..." stays a note.
DIRECTIVE_COMMENT_RE = re.compile(
    r"^\s*(?:_class|_?header|_?footer|_color|_backgroundColor)\s*:"
)

HEADING_RE = re.compile(r"^(#+)\s+(.+)$")

FENCE_MARKER = "```"


@dataclass(frozen=True)
class BackgroundImage:
    url: str
    position: str = DEFAULT_BACKGROUND_POSITION


@dataclass
class SlideRecord:
    index: int
    raw_content: str
    cleaned_content: str
    title: str
    css_class: str = ""
    header: str | None = None
    footer: str | None = None
    color: str | None = None
    background_color: str | None = None
    background_image: BackgroundImage | None = None
    speaker_notes: list[str] = field(default_factory=list)


def is_separator(line: str) -> bool:
    """True if *line* is exactly a slide separator (whitespace allowed)."""
    return line.strip() == SEPARATOR


def is_fence(line: str) -> bool:
    return line.lstrip().startswith(FENCE_MARKER)


def unquote(value: str) -> str:
    """Trim *value* and drop one pair of matching surrounding quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1].strip()
    return value


def outside_fences(text: str) -> str:
    """Blank out every fenced line of *text*, keeping the line count."""
    return "\n".join("" if fenced else line for line, fenced in iter_fenced_lines(text))


def iter_fenced_lines(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(line, in_fence)`` for every line of *text*.

    Fence lines themselves are reported as fenced, so callers only ever see
    ``in_fence=False`` for lines that are ordinary markdown structure.
    """
    in_fence = False
    for line in text.split("\n"):
        if is_fence(line):
            in_fence = not in_fence
            yield line, True
        else:
            yield line, in_fence
