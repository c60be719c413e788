"""String tokenizing and container printing helpers."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO


def _first_of(text: str, chars: str, start: int) -> int | None:
    return next((i for i, c in enumerate(text[start:], start) if c in chars), None)


def _first_not_of(text: str, chars: str, start: int) -> int | None:
    return next((i for i, c in enumerate(text[start:], start) if c not in chars), None)


class StringTokenizer:
    """Hands out successive tokens of a string, split on delimiter characters.

    An empty string is returned once the tokens are exhausted, after which
    the tokenizer is cleared.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._pos: int | None = 0

    def set_string(self, text: str) -> None:
        """Set the string to tokenize."""
        self._text = text

    def get_token(self, delims: str) -> str:
        """Return the next token, or an empty string when none are left."""
        if self._pos is None:
            self._pos = 0
            self._text = ""
            return ""
        stop = _first_of(self._text, delims, self._pos)
        token = self._text[self._pos:stop]
        self._pos = None if stop is None else _first_not_of(self._text, delims, stop)
        return token


def format_container(container: Iterable, name: str = "container:", cols: int = 0) -> str:
    """Render the elements of a container, `cols` per line (0: all on one line)."""
    items = list(container)
    parts = [name, "\n"]
    if not items:
        parts.append("Container is empty! \n")
        return "".join(parts)
    count = 1
    for item in items:
        parts.append(str(item))
        if cols == 0:
            parts.append(" ")
        elif cols == 1:
            parts.append("\n")
        elif count < cols:
            parts.append(" ")
            count += 1
        else:
            parts.append("\n")
            count = 1
    if count < cols:
        parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def print_container(
    container: Iterable,
    name: str = "container:",
    cols: int = 0,
    file: TextIO | None = None,
) -> None:
    """Write the rendering of a container to `file` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_container(container, name, cols))
    out.flush()