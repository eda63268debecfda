import logging
import sys

import click

from path_trie import __version__, log
from path_trie.store import load_storage
from path_trie.stream import StreamError
from path_trie.trie import SEPARATOR


def load_trie(store):
    try:
        return store.load()
    except StreamError as err:
        log.error(f"Could not read stored paths from {store}: {err}")
        sys.exit(1)


def save_trie(store, trie):
    try:
        store.save(trie)
    except StreamError as err:
        log.error(f"Could not write paths to {store}: {err}")
        sys.exit(1)


@click.group()
@click.version_option(__version__)
@click.option(
    "--file",
    "file_path",
    default="path_trie.bin",
    type=click.Path(dir_okay=False),
    help="File holding the stored paths (default: path_trie.bin)",
)
@click.option("--storage-backend", help="Define an external storage class. Defaults to FileStore.")
@click.option(
    "--log-level",
    type=click.Choice(
        [logging.getLevelName(i) for i in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR)],
        case_sensitive=False,
    ),
    help='Log level (debug, info, warning, error) (default: "info")',
)
@click.pass_context
def main(ctx, file_path, storage_backend, log_level):
    if log_level:
        log.setLevel(log_level.upper())

    options = {"storage_backend": storage_backend}
    if storage_backend is None:
        # --file only means something to the default FileStore
        options["storage_options"] = {"path": file_path}
    ctx.obj = load_storage(options)


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def add(store, paths):
    """Add paths, creating their parents as needed."""
    trie = load_trie(store)
    for path in paths:
        if trie.insert(path):
            click.echo(f"added {path}")
        else:
            log.warning(f"Not adding {path}: it exists already or is not an absolute path")
    save_trie(store, trie)


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def remove(store, paths):
    """Remove paths along with everything below them."""
    trie = load_trie(store)
    for path in paths:
        if trie.remove(path):
            click.echo(f"removed {path}")
        else:
            log.warning(f"Not removing {path}: no such path")
    save_trie(store, trie)


@main.command()
@click.argument("path")
@click.pass_obj
def has(store, path):
    """Check whether a path exists. Exits with 1 when it doesn't."""
    trie = load_trie(store)
    if trie.has(path):
        click.echo("yes")
    else:
        click.echo("no")
        sys.exit(1)


@main.command(name="list")
@click.pass_obj
def list_leaves(store):
    """Print every leaf path."""
    trie = load_trie(store)
    for leaf in sorted(trie.leaves()):
        click.echo(leaf)


@main.command()
@click.pass_obj
def tree(store):
    """Print every path as an indented tree."""
    trie = load_trie(store)
    nodes = []
    trie.prefix(nodes.append)
    # sorting on the split path keeps parents right above their children
    nodes.sort(key=lambda node: node.full_path.rstrip(SEPARATOR).split(SEPARATOR))
    for node in nodes:
        depth = node.full_path.count(SEPARATOR) if node is not trie.root else 0
        click.echo("  " * depth + node.segment)
