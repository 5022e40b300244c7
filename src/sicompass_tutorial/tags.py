"""Presentational markers embedded in tutorial text.

The navigator recognizes a handful of tag-like markers inside item text,
such as ``<input>name</input>`` or ``<checkbox checked>done``. Lookups and
JSON rendering treat them as opaque text; these helpers exist for
human-readable views that want to show the text without the markup.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """A tag-like marker.

    Attributes:
        name: Marker identifier.
        open_tag: Opening tag text.
        close_tag: Closing tag text.
        close_required: Whether the marker is only valid with its closing tag.
    """

    name: str
    open_tag: str
    close_tag: str
    close_required: bool = True


# Order matters: "<checkbox checked>" must be tried before "<checkbox>".
# "link" and "image" are stripped for display too, which the navigator does not do.
MARKERS: tuple[Marker, ...] = (
    Marker("input", "<input>", "</input>"),
    Marker("radio", "<radio>", "</radio>", close_required=False),
    Marker("checked", "<checked>", "</checked>", close_required=False),
    Marker("checkbox_checked", "<checkbox checked>", "</checkbox>", close_required=False),
    Marker("checkbox", "<checkbox>", "</checkbox>", close_required=False),
    Marker("link", "<link>", "</link>"),
    Marker("image", "<image>", "</image>"),
)


def _locate(text: str, marker: Marker) -> tuple[int, int] | None:
    """Return the (open, close) offsets of ``marker`` in ``text``.

    ``close`` is -1 when the closing tag is absent and optional.
    """
    start = text.find(marker.open_tag)
    if start == -1:
        return None
    end = text.find(marker.close_tag, start + len(marker.open_tag))
    if end == -1 and marker.close_required:
        return None
    return start, end


def find_marker(text: str) -> Marker | None:
    """Return the first recognized marker in ``text``, or None."""
    for marker in MARKERS:
        if _locate(text, marker) is not None:
            return marker
    return None


def extract_content(text: str, marker: Marker) -> str | None:
    """Return the text enclosed by ``marker``.

    For markers whose closing tag is optional and absent, everything after
    the opening tag is returned.

    Returns:
        The enclosed text, or None if ``marker`` is not present.
    """
    offsets = _locate(text, marker)
    if offsets is None:
        return None
    start, end = offsets
    content_start = start + len(marker.open_tag)
    if end == -1:
        return text[content_start:]
    return text[content_start:end]


def strip_markers(text: str) -> str:
    """Remove the tags of the first marker in ``text``, keeping its content.

    Only the opening tag has to be present; a missing closing tag leaves
    everything after the opening tag in place. Text without a recognized
    opening tag is returned unchanged.
    """
    for marker in MARKERS:
        start = text.find(marker.open_tag)
        if start == -1:
            continue
        content_start = start + len(marker.open_tag)
        end = text.find(marker.close_tag, content_start)
        if end == -1:
            return text[:start] + text[content_start:]
        return text[:start] + text[content_start:end] + text[end + len(marker.close_tag) :]
    return text
