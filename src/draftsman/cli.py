"""CLI interface for draftsman."""

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from draftsman.config import SiteConfig, load_config, merge_cli_overrides
from draftsman.creator import create
from draftsman.errors import DraftsmanError, InvalidSelectionError
from draftsman.inventory import list_drafts, list_posts
from draftsman.logging_setup import configure_logging
from draftsman.models import ContentItem, ContentKind
from draftsman.promoter import Promoter
from draftsman.templates import default_templates_dir

app = typer.Typer(
    name="draftsman",
    help="Create drafts and posts for a static-site blog, and publish drafts.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from draftsman import __version__

        console.print(f"draftsman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Site root containing the drafts and posts directories.",
            file_okay=False,
            dir_okay=True,
        ),
    ] = Path("."),
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to a .draftsman.toml file. Defaults to <root>/.draftsman.toml.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Draftsman - draft and post lifecycle for static-site blogs."""
    configure_logging(verbose)
    ctx.obj = load_config(root, config_path)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _create(ctx: typer.Context, kind: ContentKind, words: list[str]) -> None:
    config: SiteConfig = ctx.obj
    try:
        path = create(config, kind, " ".join(words))
    except (DraftsmanError, OSError) as exc:
        _fail(str(exc))
    console.print(f"[green]Created {kind.value}:[/green] {escape(str(path))}", soft_wrap=True)


@app.command()
def post(
    ctx: typer.Context,
    title: Annotated[list[str], typer.Argument(help="Post title.")],
) -> None:
    """Create a post dated today."""
    _create(ctx, ContentKind.POST, title)


@app.command()
def draft(
    ctx: typer.Context,
    title: Annotated[list[str], typer.Argument(help="Draft title.")],
) -> None:
    """Create an undated draft."""
    _create(ctx, ContentKind.DRAFT, title)


def _print_items(items: list[ContentItem], *, show_date: bool = False) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("File", no_wrap=True)
    table.add_column("Title")
    if show_date:
        table.add_column("Date")
    for index, item in enumerate(items):
        row = [str(index), escape(item.file_name), escape(item.title)]
        if show_date:
            row.append(item.publish_date.isoformat() if item.publish_date else "")
        table.add_row(*row)
    console.print(table)


def _prompt_choice(count: int) -> str:
    return typer.prompt(f"Select a draft to publish [0-{count - 1}]")


def _report_invalid(exc: InvalidSelectionError) -> None:
    console.print(f"[yellow]{escape(str(exc))}[/yellow]")


@app.command()
def publish(
    ctx: typer.Context,
    select: Annotated[
        Optional[str],
        typer.Option(
            "--select",
            "-s",
            help="Index of the draft to publish, skipping the prompt.",
        ),
    ] = None,
    overwrite: Annotated[
        Optional[bool],
        typer.Option(
            "--overwrite/--no-overwrite",
            help="Replace an existing post with the same name.",
        ),
    ] = None,
) -> None:
    """Move a draft into the posts directory under today's date."""
    config = merge_cli_overrides(ctx.obj, overwrite=overwrite)
    if select is None:
        promoter = Promoter(
            config,
            choose=_prompt_choice,
            present=_print_items,
            on_invalid=_report_invalid,
        )
    else:
        promoter = Promoter(config, choose=lambda _count: select, max_attempts=1)
    try:
        destination = promoter.publish()
    except (DraftsmanError, OSError) as exc:
        _fail(str(exc))
    console.print(f"[green]Published:[/green] {escape(str(destination))}", soft_wrap=True)


@app.command()
def drafts(ctx: typer.Context) -> None:
    """List drafts with their selection indices."""
    try:
        items = list_drafts(ctx.obj)
    except OSError as exc:
        _fail(str(exc))
    if not items:
        console.print("[yellow]No drafts[/yellow]")
        return
    _print_items(items)


@app.command()
def posts(ctx: typer.Context) -> None:
    """List posts with their publish dates."""
    try:
        items = list_posts(ctx.obj)
    except OSError as exc:
        _fail(str(exc))
    if not items:
        console.print("[yellow]No posts[/yellow]")
        return
    _print_items(items, show_date=True)


@app.command()
def init(ctx: typer.Context) -> None:
    """Create the content directories and copy in the default templates."""
    config: SiteConfig = ctx.obj
    try:
        for directory in (config.drafts_path, config.posts_path, config.templates_path):
            directory.mkdir(parents=True, exist_ok=True)
        for kind in ContentKind:
            name = config.template_name(kind)
            target = config.templates_path / name
            if target.exists():
                console.print(f"Keeping existing template {escape(name)}")
                continue
            source = default_templates_dir() / f"{kind.value}.markdown"
            target.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
            console.print(f"[green]Wrote template:[/green] {escape(str(target))}", soft_wrap=True)
    except OSError as exc:
        _fail(str(exc))
    console.print(f"Site initialised at {escape(str(config.root))}", soft_wrap=True)


if __name__ == "__main__":
    app()
