"""presentmd — split markdown presentations into slides with per-slide directives."""

from .deck import Deck, build_slide_record, parse_deck
from .models import BackgroundImage, SlideRecord
from .segmenter import parse_slides

__all__ = [
    "BackgroundImage",
    "Deck",
    "SlideRecord",
    "build_slide_record",
    "parse_deck",
    "parse_slides",
]
