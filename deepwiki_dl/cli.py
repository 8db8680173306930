# deepwiki_dl/cli.py

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.console import Console
from rich.table import Table
from typer.core import TyperCommand

from deepwiki_dl.config.settings import settings
from deepwiki_dl.deepwiki_client import DeepWikiClientError
from deepwiki_dl.downloader import DownloadResult, download_wiki
from deepwiki_dl.parsing import WikiContentError

EXAMPLES = """
Examples:
  deepwiki-dl modelcontextprotocol/typescript-sdk
  deepwiki-dl modelcontextprotocol/typescript-sdk ./my-output
"""

app = typer.Typer(
    help="Download a DeepWiki wiki as numbered markdown files.",
    add_completion=False,
)

console = Console()

_REPO_NAME_RE = re.compile(r"^[^/\s]+/[^/\s]+$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")


def _usage_error(ctx: typer.Context) -> typer.Exit:
    typer.echo(ctx.get_help())
    return typer.Exit(code=1)


class _UsageExitCommand(TyperCommand):
    """Report bad arguments (unknown options, extra values) like a missing repo: usage + exit 1."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            raise _usage_error(ctx)


def _print_summary(result: DownloadResult) -> None:
    table = Table(title=f"{result.repo_name} -> {result.output_dir}")
    table.add_column("#", justify="right")
    table.add_column("File")

    for idx, path in enumerate(result.files, start=1):
        table.add_row(str(idx), path.name)

    console.print(table)

    if result.file_count < result.section_count:
        console.print(
            f"[yellow]{result.section_count - result.file_count} section(s) "
            f"had no matching page in the wiki contents.[/yellow]"
        )


# ---------------------------------------------------------------------------
# CLI entrypoint
# ---------------------------------------------------------------------------

@app.command(
    cls=_UsageExitCommand,
    epilog=EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def main(
    ctx: typer.Context,
    repo_name: Optional[str] = typer.Argument(
        None,
        metavar="REPO_NAME",
        help="GitHub repository in format 'owner/repo'.",
        show_default=False,
    ),
    out_dir: Optional[Path] = typer.Argument(
        None,
        metavar="[OUT_DIR]",
        help="Output directory (default: {repo-name}-deepwiki/).",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """
    Download the DeepWiki wiki of REPO_NAME and save one file per page.
    """
    if repo_name is None or not _REPO_NAME_RE.match(repo_name):
        raise _usage_error(ctx)

    _configure_logging(verbose)

    try:
        result = download_wiki(repo_name, out_dir)
    except (DeepWikiClientError, WikiContentError, OSError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    _print_summary(result)
    typer.echo("✓ Download complete!")


if __name__ == "__main__":
    app()
