"""Tests for presentmd.cleaner — render-ready slide content."""

from __future__ import annotations

import re

import pytest

from presentmd.cleaner import clean_slide_content

from .conftest import DIRECTIVE_SLIDE


def _max_blank_run(text: str) -> int:
    runs = re.findall(r"\n((?:[ \t]*\n)+)", text)
    return max((run.count("\n") for run in runs), default=0)


# ---------------------------------------------------------------------------
# Stripping
# ---------------------------------------------------------------------------

class TestStripping:
    def test_metadata_and_comment_removed(self):
        cleaned = clean_slide_content("theme: x\n# Keep\n<!-- secret -->\nKeep body")
        assert cleaned == "# Keep\n\nKeep body"
        assert "theme" not in cleaned
        assert "secret" not in cleaned

    def test_multiline_comment_removed(self):
        cleaned = clean_slide_content("# T\n<!-- one\ntwo\nthree -->\nbody")
        assert cleaned == "# T\n\nbody"

    def test_class_directive_removed(self):
        assert clean_slide_content("<!-- _class: lead -->\n# Title") == "# Title"

    @pytest.mark.parametrize("line", [
        "marp: true",
        "paginate: false",
        "_paginate: false",
        "backgroundColor: #fff",
        "headingDivider: 2",
        "layout: center",
        "background: red",
    ])
    def test_metadata_lines_removed(self, line):
        assert clean_slide_content(f"{line}\n# Title") == "# Title"

    def test_unknown_key_line_kept(self):
        assert clean_slide_content("Speaker: Ada\n# Title") == "Speaker: Ada\n# Title"

    def test_indented_metadata_kept(self):
        assert clean_slide_content("# T\n  theme: x") == "# T\n  theme: x"

    def test_background_image_removed(self):
        cleaned = clean_slide_content("![bg left](img.jpg)\n# T\n\ntext")
        assert cleaned == "# T\n\ntext"

    def test_rejected_background_image_also_removed(self):
        assert clean_slide_content("![bg](javascript:x)\n# T") == "# T"

    def test_regular_image_kept(self):
        assert clean_slide_content("# T\n\n![chart](chart.png)") == "# T\n\n![chart](chart.png)"

    def test_notes_section_removed(self):
        cleaned = clean_slide_content("# T\n\nBody\n\nNotes: say this\nand this\n\nAfter")
        assert cleaned == "# T\n\nBody\n\nAfter"

    def test_full_directive_slide(self):
        assert clean_slide_content(DIRECTIVE_SLIDE) == "# Directives\n\nBody text."

    def test_injected_header_footer_removed(self):
        raw = '<!-- header: "H" -->\n# T\n<!-- footer: "F" -->'
        assert clean_slide_content(raw) == "# T"


# ---------------------------------------------------------------------------
# Structure preservation
# ---------------------------------------------------------------------------

class TestPreservation:
    def test_markdown_structure_untouched(self):
        slide = "# H1\n\n## H2\n\n- *em* and **strong**\n- [link](https://x.y)\n\n1. one"
        assert clean_slide_content(slide) == slide

    def test_fenced_code_untouched(self):
        slide = "# Code\n\n```html\n<!-- keep me -->\ntheme: keep\n\n\n\nend\n```"
        assert clean_slide_content(slide) == slide

    def test_blank_lines_collapsed(self):
        cleaned = clean_slide_content("# A\n\n\n\n\nB\n\n\n\nC")
        assert cleaned == "# A\n\nB\n\nC"

    def test_whitespace_only_lines_collapsed(self):
        cleaned = clean_slide_content("# A\n  \n\t\n   \nB")
        assert _max_blank_run(cleaned) == 1
        assert cleaned == "# A\n\nB"

    def test_hard_line_break_spaces_kept(self):
        assert clean_slide_content("line one  \nline two") == "line one  \nline two"

    def test_trimmed(self):
        assert clean_slide_content("\n\n  # T  \n\n") == "# T"

    def test_empty(self):
        assert clean_slide_content("") == ""

    def test_only_directives_cleans_to_empty(self):
        assert clean_slide_content("<!-- _class: lead -->\nmarp: true\n![bg](a.png)") == ""
