"""Main CLI entry point."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from .. import __version__
from ..config.credentials import load_credentials
from ..github_client.client import RepositoryInfoClient
from ..manifest.scanner import ManifestError, extract_repositories, read_manifest
from ..report.audit import audit_repositories
from ..report.formatter import format_entry
from .options import (
    CONFIG_ARGUMENT,
    MANIFEST_ARGUMENT,
    MAX_STARS_ARGUMENT,
    VERBOSE_OPTION,
)

logger = logging.getLogger(__name__)

USAGE = "Usage: gh-dep-audit <manifest file> <max stars> <config file>"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

app = typer.Typer(
    name="gh-dep-audit",
    help="Report GitHub dependencies with few stars or no recent commits",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Send DEBUG logs to stderr when running verbosely."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, force=True)
        # httpx logs every request at INFO; keep our own messages readable
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"gh-dep-audit v{__version__}")
        raise typer.Exit()


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": ["-h", "--help"],
    }
)
def audit(
    ctx: typer.Context,
    manifest: Path | None = MANIFEST_ARGUMENT,
    max_stars: int | None = MAX_STARS_ARGUMENT,
    config: Path | None = CONFIG_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Print GitHub repositories referenced by MANIFEST with at most MAX_STARS stars.

    Repositories whose last commit is more than three years old are flagged
    as stale.

    Examples:
        gh-dep-audit go.mod 100 ~/.config/gh-dep-audit.json
        gh-dep-audit requirements.txt 50 creds.json --verbose
    """
    if manifest is None or max_stars is None or config is None or ctx.args:
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    setup_logging(verbose)

    credentials = load_credentials(config)
    if credentials is None:
        typer.echo(
            f"❌ Error: Failed to load GitHub credentials from {config}", err=True
        )
        raise typer.Exit(1)

    try:
        content = read_manifest(manifest)
    except ManifestError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1)

    repositories = extract_repositories(content)
    logger.info(f"Found {len(repositories)} GitHub references in {manifest}")

    with RepositoryInfoClient(credentials) as client:
        for entry in audit_repositories(repositories, client, max_stars):
            console.print(
                format_entry(entry),
                soft_wrap=True,
                markup=False,
                emoji=False,
                highlight=False,
            )


if __name__ == "__main__":
    app()
