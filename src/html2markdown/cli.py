"""Click CLI — convert and options commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from html2markdown.config import Settings, get_settings

console = Console(stderr=True)

# CLI flag name → Settings field
_OPTION_FLAGS = {
    "bullets": "unordered_list_bullets",
    "escape": "escape_markdown",
    "mastodon": "mastodon",
    "swiftui": "swiftui",
    "bold_tag": "bold_tag",
    "bold_mention": "bold_mention",
}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """html2md — convert HTML documents to Markdown."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _options_table(settings: Settings) -> Table:
    table = Table(title="Render Options", show_header=False)
    table.add_column("Option", style="bold")
    table.add_column("Value")
    table.add_row("parser", settings.parser)
    for field, value in settings.to_options().model_dump().items():
        table.add_row(field, "[green]on[/green]" if value else "[dim]off[/dim]")
    return table


# ── Convert ───────────────────────────────────────────────────


@cli.command()
@click.argument("input_file", required=False, type=click.Path(exists=True, path_type=Path))
@click.option("--text", "-t", type=str, help="HTML to convert (alternative to file)")
@click.option("--bullets/--no-bullets", default=None, help="Use • for unordered list items")
@click.option("--escape/--no-escape", default=None, help="Escape Markdown syntax in text")
@click.option("--mastodon/--no-mastodon", default=None, help="Respect Mastodon span classes")
@click.option("--swiftui/--no-swiftui", default=None, help="Render headings as bold text")
@click.option("--bold-tag/--no-bold-tag", default=None, help="Bold hashtags instead of links")
@click.option("--bold-mention/--no-bold-mention", default=None, help="Bold mentions instead of links")
@click.option(
    "--parser",
    type=click.Choice(["lxml", "html.parser"]),
    default=None,
    help="BeautifulSoup tree builder",
)
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Output file")
@click.pass_context
def convert(
    ctx: click.Context,
    input_file: Path | None,
    text: str | None,
    parser: str | None,
    output: Path | None,
    **flags: bool | None,
) -> None:
    """Convert HTML to Markdown.

    Reads from INPUT_FILE, --text argument, or stdin.
    """
    from html2markdown.generator.renderer import markdown_formatted
    from html2markdown.importer.loader import load_html_file, parse_html

    overrides: dict[str, object] = {
        _OPTION_FLAGS[name]: value for name, value in flags.items() if value is not None
    }
    if parser is not None:
        overrides["parser"] = parser
    settings = get_settings(**overrides)
    verbose = ctx.obj.get("verbose", False)

    if verbose:
        console.print(_options_table(settings))

    if text:
        root = parse_html(text, settings.parser)
    elif input_file:
        root = load_html_file(input_file, settings.parser)
    elif not sys.stdin.isatty():
        root = parse_html(sys.stdin.read(), settings.parser)
    else:
        console.print("[red]Provide HTML via INPUT_FILE, --text, or stdin.[/red]")
        raise SystemExit(1)

    markdown = markdown_formatted(root, settings.to_options())
    if not markdown:
        console.print("[red]No renderable content in input.[/red]")
        raise SystemExit(1)

    if output:
        output.write_text(markdown + "\n", encoding="utf-8")
        console.print(f"[green]Written to {output}[/green]")
    else:
        click.echo(markdown)


# ── Options ───────────────────────────────────────────────────


@cli.command()
def options() -> None:
    """Show the effective render options (from env and .env)."""
    console.print(_options_table(get_settings()))
