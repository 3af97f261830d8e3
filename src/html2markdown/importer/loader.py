"""HTML input → parsed tree, and the string-to-string convenience entry."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, Tag
from rich.console import Console

from html2markdown.generator.renderer import markdown_formatted
from html2markdown.models import Options

console = Console(stderr=True)


def parse_html(html: str, parser: str = "lxml") -> Tag:
    """Parse an HTML document or fragment.

    The lxml builder wraps fragments in <html><body>; the <body> element is
    returned in that case so top-level fragment nodes are the root's children.
    """
    soup = BeautifulSoup(html, parser)
    body = soup.body
    if body is not None:
        return body
    return soup


def html_to_markdown(html: str, options: Options | None = None, parser: str = "lxml") -> str:
    """Convert an HTML string to Markdown."""
    if not html or not html.strip():
        return ""
    return markdown_formatted(parse_html(html, parser), options)


def load_html_file(path: Path, parser: str = "lxml") -> Tag:
    """Read a UTF-8 HTML file and parse it.

    Args:
        path: File to read.
        parser: BeautifulSoup tree builder name.

    Returns:
        The root node to render.
    """
    console.print(f"[dim]Parsing {path.name} with {parser}...[/dim]")

    with open(path, "r", encoding="utf-8") as f:
        html = f.read()

    root = parse_html(html, parser)
    console.print(f"[dim]Found {len(root.find_all(True))} elements[/dim]")
    return root
