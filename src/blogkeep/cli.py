"""CLI interface for blogkeep."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from blogkeep.blog.publishers import ExportFormat
from blogkeep.blog.services import BlogService
from blogkeep.config import BlogkeepConfig, load_config, merge_cli_overrides
from blogkeep.content.store import PostStore
from blogkeep.errors import BlogkeepError
from blogkeep.shell import BlogShell

app = typer.Typer(
    name="blogkeep",
    help="A single-user blog kept in one JSON file.",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from blogkeep import __version__

        console.print(f"blogkeep {__version__}")
        raise typer.Exit()


def _build_service(config: BlogkeepConfig) -> BlogService:
    """Load the store named by the config, exiting on an unreadable or malformed file."""
    try:
        return BlogService(
            PostStore(config.store_path),
            title=config.export.title,
            export_paths={
                ExportFormat.HTML: Path(config.export.html_path),
                ExportFormat.MARKDOWN: Path(config.export.markdown_path),
            },
        )
    except (BlogkeepError, OSError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc


def _run_shell(config: BlogkeepConfig) -> None:
    service = _build_service(config)
    try:
        BlogShell(service, console).run()
    except OSError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .blogkeep.toml file."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """blogkeep - create, browse, search and export blog posts.

    Runs the interactive shell when no command is given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = load_config(config_file)
    if ctx.invoked_subcommand is None:
        _run_shell(ctx.obj)


@app.command()
def shell(
    ctx: typer.Context,
    store: Annotated[
        Optional[Path],
        typer.Option("--store", "-s", help="Backing JSON file. Defaults to blog.json."),
    ] = None,
) -> None:
    """Run the interactive blog menu."""
    _run_shell(merge_cli_overrides(ctx.obj, store_path=store))


@app.command()
def export(
    ctx: typer.Context,
    store: Annotated[
        Optional[Path],
        typer.Option("--store", "-s", help="Backing JSON file. Defaults to blog.json."),
    ] = None,
    output_format: Annotated[
        ExportFormat,
        typer.Option("--format", "-f", help="Export format."),
    ] = ExportFormat.HTML,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file. Defaults to the configured path."),
    ] = None,
) -> None:
    """Export every post to a static page without entering the shell."""
    service = _build_service(merge_cli_overrides(ctx.obj, store_path=store))
    try:
        path = service.export(output, output_format)
    except OSError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc
    console.print(f"Blog exported to {path}", markup=False, emoji=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
