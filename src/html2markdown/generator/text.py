"""Text-leaf normalization and whole-document post-passes."""

from __future__ import annotations

import re

from html2markdown.models import Options


# Ideographic space, no-break space, space, tab, LF, CR
_WHITESPACE_RE = re.compile("[\u3000\u00a0 \t\n\r]+")

# More than one blank line
_MULTI_NEWLINE_RE = re.compile(r"\n{3,}")

_ESCAPE_RE = re.compile(r"([*\[\]`_])")

SPACE = " "


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(SPACE, text)


def is_blank(text: str) -> bool:
    """True when the text holds nothing but whitespace-class characters."""
    return not _WHITESPACE_RE.sub("", text)


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that would otherwise read as Markdown."""
    return _ESCAPE_RE.sub(r"\\\1", text)


def normalize_text(raw: str, *, escape: bool = False) -> str:
    """Collapse whitespace runs in a text node and optionally escape it.

    Entity decoding has already happened in the parser, so ``raw`` holds
    literal characters.
    """
    text = collapse_whitespace(raw)
    if not text:
        return ""
    if escape:
        text = escape_markdown(text)
    return text


def hoist_spaces(text: str) -> tuple[str, bool, bool]:
    """Strip one leading and one trailing space so they can sit outside delimiters.

    Returns:
        The stripped text, and whether a leading and a trailing space were removed.
    """
    leading = text.startswith(SPACE)
    if leading:
        text = text[1:]
    trailing = text.endswith(SPACE)
    if trailing:
        text = text[:-1]
    return text, leading, trailing


def collapse_newlines(text: str) -> str:
    return _MULTI_NEWLINE_RE.sub("\n\n", text)


def finalize(markdown: str, options: Options) -> str:
    """Apply the document-level fixups to a fully rendered tree."""
    markdown = collapse_newlines(markdown)

    if options.mastodon:
        # Adjacent hashtag/mention links
        markdown = markdown.replace(")[", ") [")

    if options.bold_tag or options.bold_mention:
        # Adjacent bold hashtags/mentions
        markdown = markdown.replace("****", "** **")

    return markdown.strip()
