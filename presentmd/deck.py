"""Assemble slide records for a whole markdown document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .classify import determine_slide_class, extract_slide_title, extract_theme
from .cleaner import clean_slide_content
from .directives import (
    extract_background_color,
    extract_background_image,
    extract_color,
    extract_footer,
    extract_header,
    extract_speaker_notes,
)
from .models import DEFAULT_THEME, SlideRecord
from .segmenter import needs_separator, parse_slides

logger = logging.getLogger(__name__)


@dataclass
class Deck:
    slides: list[SlideRecord] = field(default_factory=list)
    theme: str = DEFAULT_THEME
    needs_separator: bool = False

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    @property
    def titles(self) -> list[str]:
        return [slide.title for slide in self.slides]

    @property
    def raw_slides(self) -> list[str]:
        """Pre-cleaning slide text, as handed to an exporter."""
        return [slide.raw_content for slide in self.slides]


def build_slide_record(raw: str, index: int) -> SlideRecord:
    """Run every extractor and the cleaner over one raw slide."""
    return SlideRecord(
        index=index,
        raw_content=raw,
        cleaned_content=clean_slide_content(raw),
        title=extract_slide_title(raw, index),
        css_class=determine_slide_class(raw),
        header=extract_header(raw),
        footer=extract_footer(raw),
        color=extract_color(raw),
        background_color=extract_background_color(raw),
        background_image=extract_background_image(raw),
        speaker_notes=extract_speaker_notes(raw),
    )


def parse_deck(document: str) -> Deck:
    """Parse *document* into a :class:`Deck` of dense, zero-based records.

    Slides whose cleaned content is empty are dropped.  The deck always
    holds at least one record: an empty fallback slide when nothing else
    survives.
    """
    raws = [raw for raw in parse_slides(document) if clean_slide_content(raw)]
    if not raws:
        logger.debug("No slide content found, using a single empty slide")
        raws = [""]

    slides = [build_slide_record(raw, i) for i, raw in enumerate(raws)]
    deck = Deck(
        slides=slides,
        theme=extract_theme(document),
        needs_separator=needs_separator(document),
    )
    logger.debug("Parsed deck: %d slide(s), theme=%s", deck.slide_count, deck.theme)
    return deck
