"""Text encodings for integer lists in the bracketed, comma separated form."""

from __future__ import annotations

import re
from collections.abc import Iterable

NULL_TOKEN = "null"
NULL_VALUE = -1


def serialize_list(values: Iterable[int]) -> str:
    """Render integers as ``[a,b,c]``."""
    return "[" + ",".join(str(value) for value in values) + "]"


def serialize_nested(rows: Iterable[Iterable[int]]) -> str:
    """Render a list of integer lists as ``[[a,b],[c]]``."""
    return "[" + ",".join(serialize_list(row) for row in rows) + "]"


def split(text: str, delims: str) -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty pieces."""
    if not delims:
        return [text] if text else []
    pattern = "[" + re.escape(delims) + "]"
    return [piece for piece in re.split(pattern, text) if piece]


def parse_int_list(text: str) -> list[int]:
    """Parse ``[a,null,b]`` into integers, reading ``null`` as -1.

    Raises ValueError when an item is not an integer.
    """
    return [
        NULL_VALUE if item == NULL_TOKEN else int(item)
        for item in split(text[1:-1], ",")
    ]


def join(items: Iterable[object], sep: str) -> str:
    """Join the string forms of ``items`` with ``sep``."""
    return sep.join(str(item) for item in items)