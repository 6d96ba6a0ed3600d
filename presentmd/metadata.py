"""Detect blocks that carry only metadata and no slide content."""

from __future__ import annotations

import re

from .models import COMMENT_RE, METADATA_LINE_RE

# A residual YAML block left behind when a block still holds its delimiters.
_YAML_BLOCK_RE = re.compile(r"^---\s*[\s\S]*?---\s*", re.MULTILINE)


def is_metadata_line(line: str) -> bool:
    """True if *line* is a recognized ``key: value`` metadata line."""
    return METADATA_LINE_RE.fullmatch(line) is not None


def is_metadata_only(block: str) -> bool:
    """Return True if *block* has nothing left once metadata is removed.

    Metadata lines, any YAML-delimited block and HTML comments are stripped
    in that order; an empty remainder means the block has no real content.
    Works the same whether or not front matter was already removed.
    """
    if not block.strip():
        return True
    remainder = METADATA_LINE_RE.sub("", block)
    remainder = _YAML_BLOCK_RE.sub("", remainder)
    remainder = COMMENT_RE.sub("", remainder)
    return not remainder.strip()
