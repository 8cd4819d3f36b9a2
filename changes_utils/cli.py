"""CLI entry point for changes-utils."""

from __future__ import annotations

import logging

import click

from changes_utils.models import EntryOptions
from changes_utils.pipeline import add_changes_entry_from_commits


@click.group()
@click.version_option(package_name="changes-utils")
def cli() -> None:
    """Utilities for a distribution's Changes file."""


@cli.command("add-entry")
@click.option(
    "-f",
    "--filename",
    type=click.Path(dir_okay=False),
    default=None,
    help="Changes file. Defaults to the first of Changes, CHANGES, ChangeLog, "
    "CHANGELOG found in the current directory.",
)
@click.option(
    "--functional-changes/--no-functional-changes",
    default=True,
    show_default=True,
    help="Whether the release has functional changes. Without them the entry "
    'starts with "No functional changes." (or "No spec/data changes." when '
    ".tag-spec/.tag-data exists).",
)
@click.option(
    "-F",
    "no_functional",
    is_flag=True,
    help="Shortcut for --no-functional-changes.",
)
@click.option(
    "-n",
    "--num-commits",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Number of commit messages to add.",
)
@click.option(
    "-s",
    "--num-skip-commits",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Skip this number of most recent commits first.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log what is being done.")
def add_entry(
    filename: str | None,
    functional_changes: bool,
    no_functional: bool,
    num_commits: int,
    num_skip_commits: int,
    verbose: bool,
) -> None:
    """Add a new release entry, from items from commit log messages."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    options = EntryOptions(
        filename=filename,
        functional_changes=functional_changes and not no_functional,
        num_commits=num_commits,
        num_skip_commits=num_skip_commits,
    )
    result = add_changes_entry_from_commits(options)
    if not result.ok:
        raise click.ClickException(result.message)

    click.echo(f"✓ Added entry to {result.filename}")
