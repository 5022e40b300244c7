"""sicompass-tutorial - the sicompass tutorial provider.

Answers path lookups against the built-in tutorial tree with JSON arrays
the sicompass navigator can display.
"""

__version__ = "0.1.0"

from .tutorial import (
    Branch,
    Leaf,
    Node,
    TutorialProvider,
    build_sections,
    parse_path,
    render,
    resolve,
)

__all__ = [
    "Branch",
    "Leaf",
    "Node",
    "TutorialProvider",
    "__version__",
    "build_sections",
    "parse_path",
    "render",
    "resolve",
]
