"""Document tree → Markdown rendering.

The walk keeps its own stack of frames instead of recursing, so the depth
of the input tree is bounded only by memory.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from bs4.element import (
    NavigableString,
    PageElement,
    PreformattedString,
    Script,
    Stylesheet,
    Tag,
    TemplateString,
)

from html2markdown.generator.rules import TagRule, rule_for
from html2markdown.generator.text import finalize, is_blank, normalize_text
from html2markdown.models import Context, Options


@dataclass
class _Frame:
    node: PageElement
    context: Context
    index: int
    rule: TagRule | None
    pending: deque[tuple[PageElement, Context, int]]
    parts: list[str] = field(default_factory=list)


def markdown_formatted(node: PageElement, options: Options | None = None) -> str:
    """Render a parsed HTML node's children as Markdown.

    The node itself emits no markup. Its renderable children are formatted
    according to their tag and position, concatenated, then cleaned up:
    blank-line runs capped, option-specific spacing fixes, outer whitespace
    stripped.

    Args:
        node: Root of the tree, usually a BeautifulSoup document or <body>.
        options: Stylistic switches; defaults to all off.

    Returns:
        Markdown text with no leading or trailing whitespace.
    """
    options = options or Options()
    eligible = _eligibility(node)
    markdown = _render(node, options, eligible)
    return finalize(markdown, options)


def _is_text(node: PageElement) -> bool:
    # Comments, doctypes, CDATA, script/style/template bodies subclass
    # NavigableString but are not content
    return isinstance(node, NavigableString) and not isinstance(
        node, (PreformattedString, Script, Stylesheet, TemplateString)
    )


def _eligibility(root: PageElement) -> dict[int, bool]:
    """Decide which nodes under ``root`` are worth rendering, keyed by id().

    Text is eligible when it is not blank, <br> always, any other element
    when something beneath it is eligible.
    """
    eligible: dict[int, bool] = {}
    if not isinstance(root, Tag):
        return eligible

    # Reversed document order visits every child before its parent
    for node in reversed(list(root.descendants)):
        if isinstance(node, Tag):
            if node.name == "br":
                eligible[id(node)] = True
            else:
                eligible[id(node)] = any(eligible.get(id(c), False) for c in node.children)
        else:
            eligible[id(node)] = _is_text(node) and not is_blank(str(node))
    return eligible


def _child_visits(
    node: PageElement,
    context: Context,
    eligible: dict[int, bool],
    *,
    root: bool = False,
) -> deque[tuple[PageElement, Context, int]]:
    """Pair each renderable child with its context and filtered index."""
    if not isinstance(node, Tag):
        return deque()

    children = [c for c in node.children if eligible.get(id(c), False)]
    visits: deque[tuple[PageElement, Context, int]] = deque()
    for index, child in enumerate(children):
        child_context = context
        if root and len(children) == 1:
            child_context |= Context.SINGLE_CHILD_IN_ROOT
        if index == 0:
            child_context |= Context.FIRST_CHILD
        if index == len(children) - 1:
            child_context |= Context.FINAL_CHILD
        visits.append((child, child_context, index))
    return visits


def _render_text(node: PageElement, context: Context, options: Options) -> str:
    escape = options.escape_markdown and not context & (Context.PRE | Context.CODE)
    return normalize_text(str(node), escape=escape)


def _render(root: PageElement, options: Options, eligible: dict[int, bool]) -> str:
    stack = [
        _Frame(
            node=root,
            context=Context.NONE,
            index=0,
            rule=None,
            pending=_child_visits(root, Context.NONE, eligible, root=True),
        )
    ]

    while True:
        frame = stack[-1]

        if frame.pending:
            child, context, index = frame.pending.popleft()
            if not isinstance(child, Tag):
                frame.parts.append(_render_text(child, context, options))
                continue

            rule = rule_for(child.name)
            child_context = rule.child_context(child, context, options)
            pending = (
                deque() if child_context is None
                else _child_visits(child, child_context, eligible)
            )
            stack.append(_Frame(child, context, index, rule, pending))
            continue

        stack.pop()
        inner = "".join(frame.parts)
        if not stack:
            return inner
        stack[-1].parts.append(
            frame.rule.wrap(frame.node, frame.context, frame.index, inner, options)
        )
