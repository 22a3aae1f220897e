"""jrni CLI: create, find and tally journal entries.

    jrni n TITLE [--tags a,b] [--id ID] [--stdin]   create an entry and edit it
    jrni id [ID]                                     edit the entry with ID, or list ids
    jrni t                                           tag counts, least used first
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from jrni import __version__
from jrni.config import JrniConfig, load_config, resolve_journal_dir
from jrni.editor import open_in_editor
from jrni.errors import JrniError
from jrni.journal import JournalStore
from jrni.journal.filenames import slugify


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _reports_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn JrniError into a one-line ``Error: ...`` and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except JrniError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _open_store(config: JrniConfig) -> JournalStore:
    return JournalStore(resolve_journal_dir(config))


def _edit(path: Path, config: JrniConfig) -> None:
    open_in_editor(path, config.editor)
    click.echo(str(path))


@click.group()
@click.version_option(version=__version__, package_name="jrni")
@click.option(
    "-p",
    "--path",
    "journal_path",
    type=click.Path(file_okay=False, path_type=Path),
    help="Path to the journal contents directory (overrides JRNI_PATH).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, journal_path: Path | None, verbose: bool) -> None:
    """jrni: a journal of dated markdown entries."""
    config = load_config(journal_path)
    _setup_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@main.command("n")
@click.argument("title")
@click.option("-t", "--tags", default="", help="Comma-separated tags for the new entry.")
@click.option("--id", "entry_id", default=None, help="Id for the entry (defaults to the title slug).")
@click.option("--stdin", "read_stdin", is_flag=True, help="Read the entry body from stdin.")
@click.pass_obj
@_reports_errors
def new_entry(
    config: JrniConfig, title: str, tags: str, entry_id: str | None, read_stdin: bool
) -> None:
    """Create a new entry titled TITLE and open it in $EDITOR."""
    store = _open_store(config)
    body = click.get_text_stream("stdin").read() if read_stdin else ""

    if entry_id is None:
        candidate = slugify(title)
        # Explicit ids may repeat; a derived one is dropped when already taken.
        entry_id = None if store.id_in_use(candidate) else candidate

    entry = store.create(title, tags=[tags], body=body, id=entry_id)
    _edit(store.path_for(entry), config)


@main.command("id")
@click.argument("entry_id", required=False)
@click.pass_obj
@_reports_errors
def query_id(config: JrniConfig, entry_id: str | None) -> None:
    """Edit the entry with ENTRY_ID, or list every id if none is given."""
    store = _open_store(config)

    if entry_id is None:
        for found_id, _entry in store.ids():
            click.echo(found_id)
        return

    entry = store.find_by_id(entry_id)
    _edit(store.path_for(entry), config)


@main.command("t")
@click.pass_obj
@_reports_errors
def query_tags(config: JrniConfig) -> None:
    """Print each tag with its entry count, least used first."""
    store = _open_store(config)
    counts = store.tag_counts()
    for tag, count in sorted(counts.items(), key=lambda item: (item[1], item[0])):
        click.echo(f"{tag} {count}")
