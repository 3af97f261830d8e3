"""Per-tag formatting rules, looked up by tag name."""

from __future__ import annotations

from bs4 import Tag

from html2markdown.generator.text import SPACE, hoist_spaces
from html2markdown.models import Context, Options


LINE_BREAK = "\n"
PARAGRAPH_BREAK = "\n\n"
BOLD = "**"
ITALIC = "*"
CODE = "`"
FENCE = "\n```\n"
ELLIPSIS = "…"


def _block_breaks(context: Context) -> tuple[bool, bool]:
    """Whether a block needs a break before and after it."""
    if Context.SINGLE_CHILD_IN_ROOT in context:
        return False, False
    return Context.FIRST_CHILD not in context, Context.FINAL_CHILD not in context


def _classes(node: Tag) -> list[str]:
    value = node.get("class")
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


class TagRule:
    """Transparent rule: children rendered as-is, no markup of its own."""

    def child_context(self, node: Tag, context: Context, options: Options) -> Context | None:
        """Context for the node's children, or None to skip them."""
        return Context.NONE

    def wrap(self, node: Tag, context: Context, index: int, inner: str, options: Options) -> str:
        return inner


class ParagraphRule(TagRule):
    def wrap(self, node, context, index, inner, options):
        before, after = _block_breaks(context)
        return (
            (LINE_BREAK if before else "")
            + inner.strip()
            + (LINE_BREAK if after else "")
        )


class HeadingRule(TagRule):
    def __init__(self, level: int) -> None:
        self.level = level

    def wrap(self, node, context, index, inner, options):
        before, after = _block_breaks(context)
        text = inner.strip()
        if options.swiftui:
            heading = f"{BOLD}{text}{BOLD}"
        else:
            heading = f"{'#' * self.level} {text}"
        return (
            (LINE_BREAK if before else "")
            + heading
            + (PARAGRAPH_BREAK if after else "")
        )


class LineBreakRule(TagRule):
    def child_context(self, node, context, options):
        return None

    def wrap(self, node, context, index, inner, options):
        return "" if Context.FINAL_CHILD in context else LINE_BREAK


class ListRule(TagRule):
    def __init__(self, kind: Context) -> None:
        self.kind = kind

    def child_context(self, node, context, options):
        return self.kind

    def wrap(self, node, context, index, inner, options):
        result = "" if Context.FIRST_CHILD in context else PARAGRAPH_BREAK
        result += inner
        if Context.FINAL_CHILD not in context:
            result += PARAGRAPH_BREAK
        return result


class ListItemRule(TagRule):
    def child_context(self, node, context, options):
        if context & (Context.UNORDERED_LIST | Context.ORDERED_LIST):
            return Context.NONE
        # Stray item outside a list: only its separator is kept
        return None

    def wrap(self, node, context, index, inner, options):
        result = ""
        if Context.UNORDERED_LIST in context:
            bullet = "•" if options.unordered_list_bullets else "*"
            result += f"{bullet} {inner}"
        if Context.ORDERED_LIST in context:
            # Ordinal follows the filtered position, not the source start/value
            result += f"{index + 1}. {inner}"
        if Context.FINAL_CHILD not in context:
            result += LINE_BREAK
        return result


class PreRule(TagRule):
    def child_context(self, node, context, options):
        return Context.CODE if Context.PRE in context else Context.PRE

    def wrap(self, node, context, index, inner, options):
        if Context.PRE in context:
            return inner
        return FENCE + inner.strip() + FENCE


class CodeRule(TagRule):
    def child_context(self, node, context, options):
        return Context.CODE

    def wrap(self, node, context, index, inner, options):
        if context & (Context.PRE | Context.CODE):
            return inner
        return f"{CODE}{inner}{CODE}"


class EmphasisRule(TagRule):
    """Emphasis delimiters with surrounding spaces moved outside the pair."""

    def __init__(self, delimiter: str) -> None:
        self.delimiter = delimiter

    def wrap(self, node, context, index, inner, options):
        text, leading, trailing = hoist_spaces(inner)
        return (
            (SPACE if leading else "")
            + f"{self.delimiter}{text}{self.delimiter}"
            + (SPACE if trailing else "")
        )


class LinkRule(TagRule):
    def wrap(self, node, context, index, inner, options):
        if Context.CODE in context:
            return inner

        if (options.bold_mention and inner.startswith("@")) or (
            options.bold_tag and inner.startswith("#")
        ):
            return f"{BOLD}{inner}{BOLD}"

        destination = node.get("href")
        if destination:
            return f"[{inner}]({destination})"
        return inner


class SpanRule(TagRule):
    def child_context(self, node, context, options):
        if options.mastodon and "invisible" in _classes(node):
            return None
        return Context.NONE

    def wrap(self, node, context, index, inner, options):
        if not options.mastodon:
            return inner
        classes = _classes(node)
        if "invisible" in classes:
            return ""
        if "ellipsis" in classes:
            return inner + ELLIPSIS
        return inner


TRANSPARENT = TagRule()

RULES: dict[str, TagRule] = {
    "p": ParagraphRule(),
    **{f"h{level}": HeadingRule(level) for level in range(1, 7)},
    "br": LineBreakRule(),
    "ul": ListRule(Context.UNORDERED_LIST),
    "ol": ListRule(Context.ORDERED_LIST),
    "li": ListItemRule(),
    "pre": PreRule(),
    "code": CodeRule(),
    "em": EmphasisRule(ITALIC),
    "i": EmphasisRule(ITALIC),
    "strong": EmphasisRule(BOLD),
    "b": EmphasisRule(BOLD),
    "a": LinkRule(),
    "span": SpanRule(),
}


def rule_for(tag_name: str | None) -> TagRule:
    """Look up the rule for a tag; unknown tags are transparent."""
    if not tag_name:
        return TRANSPARENT
    return RULES.get(tag_name.lower(), TRANSPARENT)
