"""Tutorial tree provider for sicompass.

The tutorial is a fixed tree of help text. The navigator asks for the
children of one node at a time by path, and the provider answers with a
JSON array in which leaves are plain strings and branches are single-key
objects mapping the branch label to its own rendered children.
"""

import json
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"
ROOT_PATH = "/"


@dataclass(frozen=True)
class Leaf:
    """A terminal line of tutorial text.

    Attributes:
        text: The text shown to the user, passed through verbatim.
    """

    text: str

    kind: ClassVar[str] = "leaf"


@dataclass(frozen=True)
class Branch:
    """A labeled group of tutorial nodes.

    Attributes:
        label: Text matched exactly against path segments.
        children: Ordered child nodes.
    """

    label: str
    children: tuple["Node", ...] = field(default_factory=tuple)

    kind: ClassVar[str] = "branch"


Node = Leaf | Branch


def _branch(label: str, *children: "Node | str") -> Branch:
    """Build a Branch, wrapping bare strings as leaves."""
    return Branch(
        label=label,
        children=tuple(Leaf(child) if isinstance(child, str) else child for child in children),
    )


def build_sections() -> tuple[Node, ...]:
    """Return the root node list of the built-in tutorial."""
    return (
        _branch(
            "Welcome",
            "Sicompass is a keyboard-driven navigable structure.",
            "Use j/k or arrows to move up and down in this list.",
            "Press Enter or l to go deeper. Press Escape or h to go back.",
            (
                "Everything you see is a list of items. Some items are plain text,\n"
                "like this one, and some are groups that hold more items.\n\n"
                "Groups can be nested as deep as they need to be. Whatever is\n"
                "inside a group stays in the same order every time you open it."
            ),
        ),
        _branch(
            "Navigation",
            _branch(
                "Moving Around",
                "h or Left Arrow: go back (parent level)",
                "j or Down Arrow: move down in list",
                "k or Up Arrow: move up in list",
                "l or Right Arrow / Enter: go into selected item",
            ),
            _branch(
                "Modes",
                "o: operator mode - navigate and perform actions",
                "e: editor mode - edit text content",
                ":: command mode - type commands",
                "Tab: search mode - filter items in current view",
            ),
        ),
        _branch(
            "Editing",
            "Press i to enter insert mode on an editable item.",
            "Press a to enter append mode.",
            "Press Escape to return to operator mode.",
            "Press Enter to confirm your edit.",
        ),
        _branch(
            "Commands",
            "Press : to enter command mode.",
            ":create file - create a new file (in file browser)",
            ":create directory - create a new directory",
            ":editor mode - switch to editor mode",
            ":operator mode - switch to operator mode",
        ),
        _branch(
            "File Browser",
            "The file browser is another provider below this tutorial.",
            "Navigate into it to browse your filesystem.",
            "You can rename files and directories with insert mode.",
            "You can create files and directories with : commands.",
        ),
        _branch(
            "Next Steps",
            "Press Escape or h to go back to the root.",
            "Navigate down to the file browser to explore your files.",
            "<link>file browser</link>: open the file browser.",
            "Happy navigating!",
        ),
    )


def parse_path(raw: str | None) -> list[str]:
    """Split a slash-delimited path into segments.

    ``"/"``, ``""`` and ``None`` all address the root. Empty segments from
    leading, trailing or repeated separators are dropped, so ``"A//B/"``
    yields ``["A", "B"]``. There is no escape for a separator inside a label.

    Args:
        raw: The path string.

    Returns:
        The ordered list of path segments.
    """
    if not raw or raw == ROOT_PATH:
        return []
    return [segment for segment in raw.split(PATH_SEPARATOR) if segment]


def resolve(nodes: Sequence[Node], segments: Sequence[str]) -> Sequence[Node] | None:
    """Descend ``nodes`` along ``segments``.

    Each segment selects the first Branch among the current siblings whose
    label equals it exactly. Leaves never match.

    Args:
        nodes: Sibling nodes to search.
        segments: Remaining path segments.

    Returns:
        The children at the end of the path, or None if any segment has no
        matching branch.
    """
    if not segments:
        return nodes

    head, rest = segments[0], segments[1:]
    for node in nodes:
        match node:
            case Leaf():
                continue
            case Branch(label=label, children=children):
                if label == head:
                    return resolve(children, rest)
            case _:
                raise TypeError(f"Not a tutorial node: {node!r}")

    logger.debug("No branch labelled %r among %d sibling(s)", head, len(nodes))
    return None


def render(nodes: Sequence[Node], depth: int | None = None) -> list[Any]:
    """Convert nodes into a JSON-compatible list.

    Leaves become their text and branches become ``{label: [...]}``.

    Args:
        nodes: The nodes to render.
        depth: Number of levels to expand. None expands every level. With
            ``depth=1`` each branch renders as ``{label: []}``.

    Returns:
        A list of strings and single-key dicts, in sibling order.

    Raises:
        ValueError: If depth is less than 1.
        TypeError: If a node is neither a Leaf nor a Branch.
    """
    if depth is not None and depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    return [_render_node(node, depth) for node in nodes]


def _render_node(node: Node, depth: int | None) -> Any:
    match node:
        case Leaf(text=text):
            return text
        case Branch(label=label) if depth == 1:
            return {label: []}
        case Branch(label=label, children=children):
            return {label: render(children, None if depth is None else depth - 1)}
        case _:
            raise TypeError(f"Not a tutorial node: {node!r}")


def dumps(rendered: list[Any], indent: int | None = None) -> str:
    """Serialize rendered children to JSON.

    Without ``indent`` the result is a single compact line.
    """
    if indent is None:
        return json.dumps(rendered, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(rendered, ensure_ascii=False, indent=indent)


class TutorialProvider:
    """Path lookups against one tutorial tree.

    Args:
        sections: Root node list. Defaults to the built-in tutorial.
    """

    def __init__(self, sections: Sequence[Node] | None = None) -> None:
        self.sections: tuple[Node, ...] = (
            build_sections() if sections is None else tuple(sections)
        )

    def children(self, raw_path: str | None) -> Sequence[Node] | None:
        """Return the nodes at ``raw_path``, or None if it does not resolve."""
        return resolve(self.sections, parse_path(raw_path))

    def fetch(self, raw_path: str | None = ROOT_PATH, depth: int | None = None) -> list[Any]:
        """Resolve a path and render its children.

        Args:
            raw_path: Slash-delimited path. None means the root.
            depth: Expansion depth passed to :func:`render`.

        Returns:
            The rendered children, or an empty list if the path does not
            resolve.
        """
        nodes = self.children(raw_path)
        if nodes is None:
            logger.debug("Path %r not found", raw_path)
            return []
        logger.debug("Path %r resolved to %d node(s)", raw_path, len(nodes))
        return render(nodes, depth)

    def walk(self, raw_path: str | None = ROOT_PATH) -> Iterator[tuple[str, Node]]:
        """Iterate depth-first over every node below ``raw_path``.

        Yields:
            ``(path, node)`` pairs where ``path`` is the normalized path of
            the list holding ``node``. Nothing is yielded for an unknown path.
        """
        segments = parse_path(raw_path)
        nodes = resolve(self.sections, segments)
        if nodes is None:
            return
        yield from _walk(nodes, segments)

    def branch_paths(self) -> list[tuple[str, int]]:
        """Return ``(path, child_count)`` for every branch, in declaration order."""
        result = []
        for parent, node in self.walk():
            if isinstance(node, Branch):
                result.append((_join(parent, node.label), len(node.children)))
        return result


def _join(parent: str, label: str) -> str:
    return f"{parent.rstrip(PATH_SEPARATOR)}{PATH_SEPARATOR}{label}"


def _walk(nodes: Sequence[Node], segments: list[str]) -> Iterator[tuple[str, Node]]:
    path = PATH_SEPARATOR + PATH_SEPARATOR.join(segments)
    for node in nodes:
        match node:
            case Leaf():
                yield path, node
            case Branch(label=label, children=children):
                yield path, node
                yield from _walk(children, [*segments, label])
            case _:
                raise TypeError(f"Not a tutorial node: {node!r}")
