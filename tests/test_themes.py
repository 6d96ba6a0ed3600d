"""Tests for presentmd.themes — theme configuration lookup."""

from __future__ import annotations

import pytest

from presentmd.themes import (
    MAX_THEME_NAME_LENGTH,
    THEME_CONFIGS,
    get_theme_config,
    sanitize_theme_name,
)


class TestThemeConfig:
    @pytest.mark.parametrize("name", ["default", "space", "desert"])
    def test_known_themes(self, name):
        assert get_theme_config(name) is THEME_CONFIGS[name]

    def test_unknown_falls_back_to_default(self):
        assert get_theme_config("gaia") is THEME_CONFIGS["default"]

    def test_space_fonts(self):
        config = get_theme_config("space")
        assert config.title_font == "Orbitron"
        assert config.background_image is not None

    def test_default_has_no_background_images(self):
        config = get_theme_config("default")
        assert config.background_image is None
        assert config.title_background_image is None


class TestSanitize:
    def test_strips_path_characters(self):
        assert sanitize_theme_name("../../etc/passwd") == "etcpasswd"

    def test_keeps_dash_and_underscore(self):
        assert sanitize_theme_name("my-theme_2") == "my-theme_2"

    def test_length_capped(self):
        assert len(sanitize_theme_name("a" * 200)) == MAX_THEME_NAME_LENGTH

    def test_lookup_uses_sanitized_name(self):
        assert get_theme_config("space;") is THEME_CONFIGS["space"]
