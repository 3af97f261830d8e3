from __future__ import annotations

from html2markdown.generator.text import (
    collapse_newlines,
    collapse_whitespace,
    escape_markdown,
    finalize,
    hoist_spaces,
    is_blank,
    normalize_text,
)
from html2markdown.models import Options


def test_collapse_whitespace_all_space_classes():
    assert collapse_whitespace("a \t\r\n\u00a0\u3000b") == "a b"
    assert collapse_whitespace("a  b   c") == "a b c"


def test_collapse_whitespace_keeps_other_characters():
    assert collapse_whitespace("x\u2003y") == "x\u2003y"


def test_is_blank():
    assert is_blank("")
    assert is_blank(" \n\t")
    assert is_blank("\u00a0\u3000")
    assert not is_blank(" a ")


def test_is_blank_uses_the_collapsed_whitespace_class():
    assert not is_blank("\u2003")
    assert not is_blank("\f")


def test_escape_markdown():
    assert escape_markdown("a*b[c]`d`_e") == "a\\*b\\[c\\]\\`d\\`\\_e"
    assert escape_markdown("plain # text") == "plain # text"


def test_normalize_text_escapes_after_collapsing():
    assert normalize_text("  *x*\n\n", escape=True) == " \\*x\\* "
    assert normalize_text("  *x*\n\n") == " *x* "


def test_hoist_spaces():
    assert hoist_spaces(" word ") == ("word", True, True)
    assert hoist_spaces(" word") == ("word", True, False)
    assert hoist_spaces("word ") == ("word", False, True)
    assert hoist_spaces("word") == ("word", False, False)


def test_hoist_spaces_removes_only_one_space():
    assert hoist_spaces("  word  ") == (" word ", True, True)


def test_collapse_newlines_caps_blank_lines():
    assert collapse_newlines("a\n\n\n\nb") == "a\n\nb"
    assert collapse_newlines("a\n\nb\nc") == "a\n\nb\nc"


def test_collapse_newlines_is_idempotent():
    text = "a\n\n\n\n\nb\n\n\nc\nd"
    once = collapse_newlines(text)
    assert collapse_newlines(once) == once


def test_finalize_mastodon_separates_links():
    text = "[#a](https://x/a)[#b](https://x/b)"
    assert finalize(text, Options(mastodon=True)) == "[#a](https://x/a) [#b](https://x/b)"
    assert finalize(text, Options()) == text


def test_finalize_splits_adjacent_bold_spans():
    assert finalize("**a****b**", Options(bold_tag=True)) == "**a** **b**"
    assert finalize("**a****b**", Options(bold_mention=True)) == "**a** **b**"
    assert finalize("**a****b**", Options()) == "**a****b**"


def test_finalize_strips_outer_whitespace():
    assert finalize("\n\n  text \n", Options()) == "text"
