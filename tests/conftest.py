"""Shared fixtures for presentmd tests."""

from __future__ import annotations

import textwrap

import pytest


# ---------------------------------------------------------------------------
# Markdown decks (strings) used across multiple test modules
# ---------------------------------------------------------------------------

MINIMAL_DECK = textwrap.dedent("""\
    ---
    marp: true
    title: "Demo"
    theme: space
    ---

    # Slide One

    <!-- Hello world. -->

    ---

    ## Slide Two

    - point
    """)

PERSISTENT_DECK = textwrap.dedent("""\
    <!-- header: "H" -->
    # Slide 1

    ---

    # Slide 2

    ---

    # Slide 3

    <!-- footer: "F" -->

    ---

    <!-- header: "" -->
    # Slide 4

    ---

    # Slide 5
    """)

FENCED_DECK = "# A\n\n```\n---\n```\n\n---\n\n# B"

DIRECTIVE_SLIDE = textwrap.dedent("""\
    <!-- _class: lead invert -->
    <!-- _color: red -->
    <!-- _backgroundColor: #112233 -->
    ![bg right](https://example.com/bg.jpg)

    # Directives

    Body text.

    <!-- Remember to smile. -->
    """)


@pytest.fixture
def tmp_deck(tmp_path):
    """Write MINIMAL_DECK to a temp file and return its path."""
    p = tmp_path / "deck.md"
    p.write_text(MINIMAL_DECK)
    return p
