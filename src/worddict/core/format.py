# src/worddict/core/format.py
"""
The dictionary file format.

One entry per line:

    <left> = <right1> --> <right2> --> ...

The right side is the translation history, newest last. Neither side may
contain "=" or "-->". Blank lines are ignored on read and never written.
"""

from typing import Callable

from worddict.core.errors import (
    BrokenError,
    BadLeftString, NoRightString, BadRightString, Duplicated,
)


FIELD_SEPARATOR = "="
HISTORY_SEPARATOR = "-->"
HISTORY_JOIN = f" {HISTORY_SEPARATOR} "


def is_clean(s: str) -> bool:
    """True if `s` contains no format delimiter."""
    return HISTORY_SEPARATOR not in s and FIELD_SEPARATOR not in s


def parse_line(
    text: str,
    line: int,
    existing: Callable[[str], str | None] | None = None,
) -> tuple[str, list[str]] | None:
    """
    Parse one line of a dictionary file.

    Args:
        text: raw line, surrounding whitespace allowed
        line: 1-based line number, used in errors
        existing: maps a left string to the already stored spelling of the
            same term (case-insensitive), or None if it is new

    Returns:
        (left, history), or None for a blank line

    Raises:
        BrokenError on the first rule the line violates
    """
    text = text.strip()
    if not text:
        return None

    pieces = text.split(FIELD_SEPARATOR)
    left = pieces[0]

    if HISTORY_SEPARATOR in left:
        raise BrokenError(line, left, BadLeftString())

    left = left.rstrip()

    if existing is not None:
        another = existing(left)
        if another is not None:
            raise BrokenError(line, left, Duplicated(another))

    if len(pieces) < 2:
        raise BrokenError(line, left, NoRightString())

    right = pieces[1]

    if len(pieces) > 2:
        raise BrokenError(line, left, BadRightString(right))

    history = []
    for s in right.split(HISTORY_SEPARATOR):
        s = s.strip()
        if not s:
            raise BrokenError(line, left, BadRightString(right))
        history.append(s)

    return left, history


def format_line(left: str, history: list[str]) -> str:
    return f"{left} {FIELD_SEPARATOR} {HISTORY_JOIN.join(history)}"
