"""Argument and option definitions for the audit command.

Positional arguments default to None so the command can report a wrong
argument count with its own usage message instead of Click's. Unknown
options are kept as positionals, so a negative MAX_STARS fails the range
check rather than being reported as an unknown flag.
"""

import typer

MANIFEST_ARGUMENT = typer.Argument(
    None,
    help="Dependency manifest to scan (e.g. go.mod)",
    show_default=False,
)

MAX_STARS_ARGUMENT = typer.Argument(
    None,
    min=0,
    help="Report repositories with at most this many stars",
    show_default=False,
)

CONFIG_ARGUMENT = typer.Argument(
    None,
    help="JSON file with 'username' and 'token' for the GitHub API",
    show_default=False,
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log API activity to stderr"
)
