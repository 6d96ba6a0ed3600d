"""Theme configurations consumed by slide-deck exporters."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .models import DEFAULT_THEME

logger = logging.getLogger(__name__)

MAX_THEME_NAME_LENGTH = 50

TITLE_FONT_SIZE = 52
TEXT_FONT_SIZE = 24

_UNSAFE_THEME_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]")


@dataclass(frozen=True)
class ThemeConfig:
    background_color: str
    title_color: str
    text_color: str
    accent_color: str
    title_font: str
    text_font: str
    title_font_size: int = TITLE_FONT_SIZE
    text_font_size: int = TEXT_FONT_SIZE
    background_image: str | None = None
    title_background_image: str | None = None


THEME_CONFIGS: dict[str, ThemeConfig] = {
    "space": ThemeConfig(
        background_color="#110e3b",
        title_color="#ffacfc",
        text_color="#ffffff",
        accent_color="#5c34d6",
        title_font="Orbitron",
        text_font="Roboto",
        background_image="/images/space-background.jpeg",
        title_background_image="/images/space-title.png",
    ),
    "desert": ThemeConfig(
        background_color="#f7e3da",
        title_color="#8b4513",
        text_color="#5e2c38",
        accent_color="#c29240",
        title_font="Montserrat",
        text_font="Roboto",
        background_image="/images/desert-background.jpg",
        title_background_image="/images/desert-title.jpg",
    ),
    DEFAULT_THEME: ThemeConfig(
        background_color="#ffffff",
        title_color="#224466",
        text_color="#222222",
        accent_color="#4488cc",
        title_font="Red Hat Display",
        text_font="Red Hat Display",
    ),
}


def sanitize_theme_name(name: str) -> str:
    """Keep only letters, digits, ``-`` and ``_`` so a name is safe as a path part."""
    return _UNSAFE_THEME_CHARS_RE.sub("", name)[:MAX_THEME_NAME_LENGTH]


def get_theme_config(name: str) -> ThemeConfig:
    """Look up *name*, falling back to the default theme for unknown names."""
    config = THEME_CONFIGS.get(sanitize_theme_name(name))
    if config is None:
        logger.debug("Unknown theme %r, using %s", name, DEFAULT_THEME)
        return THEME_CONFIGS[DEFAULT_THEME]
    return config
