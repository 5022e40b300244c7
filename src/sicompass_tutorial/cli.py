"""Command-line interface for the sicompass tutorial provider."""

import logging
import sys

import click
from rich.console import Console

from . import __version__
from .formatting import get_formatter
from .tutorial import ROOT_PATH, TutorialProvider, dumps

console = Console(stderr=True)

GROUP_FLAGS = ("-v", "--verbose", "-h", "--help", "--version")


class DefaultToFetchGroup(click.Group):
    """Custom group that defaults to 'fetch' when no subcommand is given.

    This keeps ``sicompass-tutorial /Navigation`` working as the navigator
    invokes it. A first argument equal to a command name is that command,
    so relative paths named ``fetch``, ``tree`` or ``paths`` need a leading
    slash or an explicit ``fetch``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Insert 'fetch' before the first argument that is not a group flag."""
        index = 0
        while index < len(args) and args[index] in GROUP_FLAGS:
            index += 1

        if index < len(args) and args[index] in self.commands:
            return super().parse_args(ctx, args)

        # Help and version at the group level win over the default command
        if any(arg in ("-h", "--help", "--version") for arg in args[:index]):
            return super().parse_args(ctx, args)

        return super().parse_args(ctx, [*args[:index], "fetch", *args[index:]])


@click.group(cls=DefaultToFetchGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="sicompass-tutorial")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log lookup details to stderr",
)
def main(verbose: bool) -> None:
    """sicompass-tutorial - the sicompass tutorial provider.

    Prints the children of a tutorial node as a JSON array.

    \b
    Commands:
      fetch  Print children at a path as JSON (default command)
      tree   Show the tutorial as a tree
      paths  List every addressable path

    \b
    Quick Start:
      sicompass-tutorial                     # Root sections
      sicompass-tutorial /Navigation/Modes   # Children of a branch
      sicompass-tutorial tree /Navigation    # Human-readable view

    \b
    Paths:
      A bare word naming a command (fetch, tree, paths) runs that command.
      Give it a leading slash or an explicit fetch to look it up as a path:
      sicompass-tutorial /tree
      sicompass-tutorial fetch tree
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logging.getLogger("sicompass_tutorial").setLevel(logging.DEBUG)


@main.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", required=False, default=ROOT_PATH)
@click.option(
    "--depth",
    "-d",
    type=click.IntRange(min=1),
    default=None,
    help="Expand only this many levels (1 gives the legacy shallow output)",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Pretty-print the JSON with this indent",
)
def fetch(path: str, depth: int | None, indent: int | None) -> None:
    """Print the children at PATH as a JSON array.

    An unknown path prints [] and exits successfully.

    \b
    Examples:
      sicompass-tutorial fetch /              # Top-level sections
      sicompass-tutorial fetch /Navigation    # Nested branches, fully expanded
      sicompass-tutorial fetch /Nope          # []
      sicompass-tutorial fetch / --depth 1    # Branches rendered as {label: []}
    """
    provider = TutorialProvider()
    click.echo(dumps(provider.fetch(path, depth=depth), indent=indent))


@main.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", required=False, default=ROOT_PATH)
@click.option(
    "--theme",
    type=str,
    default=None,
    help="Output theme: default, minimal or plain",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--raw", is_flag=True, help="Show leaf text markers as-is")
def tree(path: str, theme: str | None, no_color: bool, raw: bool) -> None:
    """Show the tutorial below PATH as a tree.

    \b
    Examples:
      sicompass-tutorial tree                # Whole tutorial
      sicompass-tutorial tree /Navigation    # One section
      sicompass-tutorial tree --theme plain  # No styling
    """
    try:
        formatter = get_formatter(theme=theme, no_color=no_color)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    provider = TutorialProvider()
    nodes = provider.children(path)
    if nodes is None:
        formatter.warning(f"No tutorial section at {path}")
        return

    formatter.tree(path, nodes, strip=not raw)


@main.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--no-color", is_flag=True, help="Disable colored output")
def paths(no_color: bool) -> None:
    """List every branch path with its number of children.

    \b
    Examples:
      sicompass-tutorial paths
    """
    try:
        formatter = get_formatter(no_color=no_color)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    rows = [[path, count] for path, count in TutorialProvider().branch_paths()]
    formatter.table("Tutorial Paths", ["Path", "Children"], rows)
    formatter.info(f"Total: {len(rows)} path(s)")


if __name__ == "__main__":
    main()
