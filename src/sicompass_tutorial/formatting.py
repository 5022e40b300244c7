"""Color and formatting options for the human-readable views.

The JSON output of ``fetch`` is never styled. The ``tree`` and ``paths``
views go through :class:`OutputFormatter`, which supports the NO_COLOR
convention (https://no-color.org/) and themes selected with the
SICOMPASS_TUTORIAL_THEME environment variable or the ``--theme`` option.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .tags import strip_markers
from .tutorial import Branch, Leaf, Node

THEME_ENV_VAR = "SICOMPASS_TUTORIAL_THEME"


class Theme(Enum):
    """Available output themes."""

    DEFAULT = "default"
    MINIMAL = "minimal"
    PLAIN = "plain"


@dataclass(frozen=True)
class ThemeConfig:
    """Rich style strings for each kind of output.

    Attributes:
        warning_style: Style for warnings.
        info_style: Style for informational messages.
        header_style: Style for titles and table headers.
        branch_style: Style for branch labels in the tree view.
        leaf_style: Style for leaf text in the tree view.
        dim_style: Style for secondary text.
    """

    warning_style: str = "bold yellow"
    info_style: str = "bold blue"
    header_style: str = "bold magenta"
    branch_style: str = "bold cyan"
    leaf_style: str = ""
    dim_style: str = "dim"


THEME_CONFIGS: dict[Theme, ThemeConfig] = {
    Theme.DEFAULT: ThemeConfig(),
    Theme.MINIMAL: ThemeConfig(
        warning_style="yellow",
        info_style="blue",
        header_style="magenta",
        branch_style="cyan",
        leaf_style="",
        dim_style="dim",
    ),
    Theme.PLAIN: ThemeConfig(
        warning_style="",
        info_style="",
        header_style="",
        branch_style="",
        leaf_style="",
        dim_style="",
    ),
}


def resolve_theme(theme_name: str | None = None) -> Theme:
    """Resolve a theme name to a Theme.

    Checks ``theme_name``, then SICOMPASS_TUTORIAL_THEME, then falls back to
    ``Theme.DEFAULT``.

    Raises:
        ValueError: If the theme name is not recognized.
    """
    name = theme_name or os.environ.get(THEME_ENV_VAR)
    if name is None:
        return Theme.DEFAULT

    try:
        return Theme(name.strip().lower())
    except ValueError:
        valid = ", ".join(t.value for t in Theme)
        raise ValueError(f"Unknown theme '{name}'. Valid themes: {valid}") from None


def detect_color_support(force_color: bool | None = None) -> bool:
    """Determine whether color output should be used.

    Resolution order:
        1. ``force_color`` when not None.
        2. ``NO_COLOR`` set to any value disables color.
        3. SICOMPASS_TUTORIAL_THEME=plain disables color.
        4. Color only when stdout is a TTY.
    """
    if force_color is not None:
        return force_color

    if "NO_COLOR" in os.environ:
        return False

    if os.environ.get(THEME_ENV_VAR, "").strip().lower() == "plain":
        return False

    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


class OutputFormatter:
    """Styled console output for the tutorial views.

    Args:
        theme: The theme to use.
        force_color: ``True`` forces colors on, ``False`` forces them off,
            ``None`` auto-detects.
        console: Optional Rich Console. One is created when omitted.
    """

    def __init__(
        self,
        theme: Theme = Theme.DEFAULT,
        force_color: bool | None = None,
        console: Console | None = None,
    ) -> None:
        self._theme = theme
        self._config = THEME_CONFIGS[theme]
        self._color_enabled = detect_color_support(force_color)

        if console is not None:
            self._console = console
        else:
            self._console = Console(no_color=not self._color_enabled)

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def config(self) -> ThemeConfig:
        return self._config

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    @property
    def console(self) -> Console:
        return self._console

    def warning(self, message: str) -> None:
        self._print_styled(message, self._config.warning_style, prefix="[warn]")

    def info(self, message: str) -> None:
        self._print_styled(message, self._config.info_style)

    def table(self, title: str, columns: list[str], rows: list[list[Any]]) -> None:
        """Print a Rich table. Cell values are converted with ``str``."""
        tbl = Table(
            title=title,
            show_header=True,
            header_style=self._style(self._config.header_style),
        )
        for col in columns:
            tbl.add_column(col)
        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))
        self._console.print(tbl)

    def tree(self, title: str, nodes: Sequence[Node], strip: bool = True) -> None:
        """Print ``nodes`` as a Rich tree under ``title``.

        Args:
            title: Label of the tree root, usually the path.
            nodes: Nodes to display, fully expanded.
            strip: Remove presentational markers from leaf text.
        """
        root = Tree(Text(title, style=self._style(self._config.header_style)))
        self._add_nodes(root, nodes, strip)
        self._console.print(root)

    def _add_nodes(self, parent: Tree, nodes: Sequence[Node], strip: bool) -> None:
        for node in nodes:
            match node:
                case Branch(label=label, children=children):
                    child = parent.add(Text(label, style=self._style(self._config.branch_style)))
                    self._add_nodes(child, children, strip)
                case Leaf(text=text):
                    text = strip_markers(text) if strip else text
                    parent.add(Text(text, style=self._style(self._config.leaf_style)))
                case _:
                    raise TypeError(f"Not a tutorial node: {node!r}")

    def _style(self, style: str) -> str:
        return style if self._color_enabled else ""

    def _print_styled(self, message: str, style: str, prefix: str = "") -> None:
        """Print ``message`` with an optional prefix.

        Uses ``rich.text.Text`` so bracketed prefixes like ``[warn]`` are not
        parsed as markup.
        """
        style = self._style(style)
        text = Text()
        if prefix:
            text.append(f"{prefix} ", style=style)
        text.append(message, style=style)
        self._console.print(text)


def get_formatter(
    theme: str | None = None,
    no_color: bool = False,
    console: Console | None = None,
) -> OutputFormatter:
    """Create an OutputFormatter from CLI options and the environment.

    Raises:
        ValueError: If the theme name is not recognized.
    """
    resolved_theme = resolve_theme(theme)
    force_color: bool | None = None
    if no_color:
        force_color = False

    return OutputFormatter(theme=resolved_theme, force_color=force_color, console=console)
