"""Slash-path resolution over nested maps and lists.

A path such as ``"servers/0/host"`` is split on ``/`` and walked one
segment at a time. A map segment is looked up as a key, a list segment is
parsed as a non-negative index. Any miss short-circuits to ``None``.

Empty segments (``"a//b"``, ``"/a"``, ``"a/"``) make the whole path
unresolvable. The empty string is the only path with no segments and it
addresses the root map itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from ._value import CfgValue, List, Map

if TYPE_CHECKING:
    from ._map import CfgMap

SEPARATOR = "/"

#: A container that can hold the final segment of a path.
Parent = Union["CfgMap", "list[CfgValue]"]


# ---------------------------------------------------------------------------
# Segment helpers
# ---------------------------------------------------------------------------


def split_path(path: str) -> list[str] | None:
    """Split *path* into segments, or return ``None`` if any segment is empty."""
    if path == "":
        return []
    segments = path.split(SEPARATOR)
    if any(segment == "" for segment in segments):
        return None
    return segments


def join_path(*parts: str) -> str:
    """Join non-empty *parts* with the separator."""
    return SEPARATOR.join(part for part in parts if part)


def _parse_index(segment: str) -> int | None:
    # Digits only: "-1", "+1" and " 1" are not indices.
    if not segment.isascii() or not segment.isdigit():
        return None
    return int(segment)


def list_index(items: list[CfgValue], segment: str) -> int | None:
    """Return the in-range index *segment* denotes in *items*, if any."""
    index = _parse_index(segment)
    if index is None or index >= len(items):
        return None
    return index


def _step(node: Parent, segment: str) -> CfgValue | None:
    """Descend one level from a map or list container."""
    if isinstance(node, list):
        index = list_index(node, segment)
        return None if index is None else node[index]
    return node[segment] if segment in node else None


def _children(value: CfgValue) -> Parent | None:
    """Return the container payload of *value*, or ``None`` for scalars."""
    if isinstance(value, Map):
        return value.value
    if isinstance(value, List):
        return value.value
    return None


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _walk(root: CfgMap, segments: list[str]) -> Parent | None:
    node: Parent = root
    for segment in segments:
        child = _step(node, segment)
        if child is None:
            return None
        container = _children(child)
        if container is None:
            return None
        node = container
    return node


def resolve(root: CfgMap, path: str) -> CfgValue | None:
    """Return the value at *path* below *root*, or ``None`` if it does not resolve."""
    segments = split_path(path)
    if segments is None:
        return None
    if not segments:
        return Map(root)

    parent = _walk(root, segments[:-1])
    if parent is None:
        return None
    return _step(parent, segments[-1])


def resolve_parent(root: CfgMap, path: str) -> tuple[Parent, str] | None:
    """Locate the container that holds the last segment of *path*.

    Returns ``(container, last_segment)`` where *container* is a ``CfgMap``
    or the ``list`` payload of a ``List``. The last segment itself does not
    need to exist yet. ``None`` if the path is empty, malformed, or its
    parent does not resolve to a container.
    """
    segments = split_path(path)
    if not segments:
        return None

    parent = _walk(root, segments[:-1])
    if parent is None:
        return None
    return parent, segments[-1]
