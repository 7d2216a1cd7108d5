"""CLI for turl."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from turl import __version__
from turl.config import CLAUDE_CONFIG_DIR_ENV, CODEX_HOME_ENV, ProviderRoots
from turl.errors import TurlError

app = typer.Typer(
    name="turl",
    help="Resolve a thread URI (codex://<id>, claude://<id>) and print the conversation.",
    add_completion=False,
)
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"turl {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def write_stdout(data: bytes) -> None:
    """Write data to stdout byte for byte, escape sequences included."""
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


@app.command()
def main(
    uri: Annotated[str, typer.Argument(help="Thread URI, e.g. codex://019c871c-...")],
    raw: Annotated[bool, typer.Option("--raw", help="Print the session file unmodified")] = False,
    path_only: Annotated[
        bool, typer.Option("--path", help="Only output the resolved session path")
    ] = False,
    codex_home: Annotated[
        Path | None,
        typer.Option(
            "--codex-home",
            help=f"Codex base directory (default: ${CODEX_HOME_ENV} or ~/.codex)",
        ),
    ] = None,
    claude_home: Annotated[
        Path | None,
        typer.Option(
            "--claude-home",
            help=f"Claude base directory (default: ${CLAUDE_CONFIG_DIR_ENV} or ~/.claude)",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Print the user/assistant exchanges of a thread as markdown."""
    if raw and path_only:
        raise typer.BadParameter("--raw and --path cannot be combined")

    configure_logging(verbose)
    roots = ProviderRoots.from_env(codex_home=codex_home, claude_home=claude_home)

    from turl.render import render_markdown
    from turl.service import read_resolved, read_resolved_bytes, resolve_thread
    from turl.uri import parse_thread_uri

    try:
        thread_uri = parse_thread_uri(uri)
        resolved = resolve_thread(thread_uri, roots)
        for warning in resolved.metadata.warnings:
            err_console.print(f"[yellow]warning:[/yellow] {escape(warning)}", soft_wrap=True)

        if path_only:
            typer.echo(str(resolved.path))
            return

        if raw:
            write_stdout(read_resolved_bytes(resolved))
        else:
            markdown = render_markdown(thread_uri, resolved.path, read_resolved(resolved))
            write_stdout(markdown.encode("utf-8"))
    except TurlError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
