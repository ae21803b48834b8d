"""src/weburl/parsing/path.py

Dot-segment removal for hierarchical paths.
"""

from typing import List

__all__ = ["is_single_dot_segment", "is_double_dot_segment", "normalize_path"]

_SINGLE_DOT = frozenset((".", "%2e"))
_DOUBLE_DOT = frozenset(("..", ".%2e", "%2e.", "%2e%2e"))


def is_single_dot_segment(segment: str) -> bool:
    """``.`` or its percent-encoded alias, case-insensitive."""
    return segment.lower() in _SINGLE_DOT


def is_double_dot_segment(segment: str) -> bool:
    """``..`` or any of its percent-encoded aliases, case-insensitive."""
    return segment.lower() in _DOUBLE_DOT


def normalize_path(pathname: str) -> str:
    """
    Remove ``.`` and ``..`` segments from an encoded path.

    Empty segments are kept, so repeated and trailing slashes survive. A dot
    segment in last position leaves a trailing slash behind. ``..`` never
    climbs above the root.

    Args:
        pathname: Percent-encoded path. A missing leading ``/`` is added and
            an empty path becomes ``/``.

    Returns:
        Normalized path starting with ``/``.
    """
    if not pathname:
        return "/"
    if not pathname.startswith("/"):
        pathname = "/" + pathname

    segments = pathname[1:].split("/")
    output: List[str] = []
    last_index = len(segments) - 1
    for index, segment in enumerate(segments):
        if is_single_dot_segment(segment):
            if index == last_index:
                output.append("")
            continue
        if is_double_dot_segment(segment):
            if output:
                output.pop()
            if index == last_index:
                output.append("")
            continue
        output.append(segment)
    return "/" + "/".join(output)
