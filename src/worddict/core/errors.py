# src/worddict/core/errors.py
"""
Errors raised by the dictionary engine.

Two disjoint families:
  ReadError  - loading the dictionary file (I/O or a broken line)
  WriteError - mutating the table (I/O or a rejected pair)
"""

import json
from dataclasses import dataclass
from typing import Union


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


class DictionaryError(Exception):
    """Base class for all dictionary errors."""


# === Read side ===

@dataclass(frozen=True)
class BadLeftString:
    pass


@dataclass(frozen=True)
class NoRightString:
    pass


@dataclass(frozen=True)
class BadRightString:
    right_string: str


@dataclass(frozen=True)
class Duplicated:
    another_left_string: str


BrokenReason = Union[BadLeftString, NoRightString, BadRightString, Duplicated]


class ReadError(DictionaryError):
    pass


class ReadIOError(ReadError):
    def __init__(self, error: OSError | UnicodeDecodeError):
        super().__init__(str(error))
        self.error = error


class BrokenError(ReadError):
    """A line of the dictionary file does not follow `left = right --> ...`."""

    def __init__(self, line: int, left_string: str, reason: BrokenReason):
        self.line = line
        self.left_string = left_string
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        head = f"broken at line {self.line}, "
        reason = self.reason
        left = self.left_string

        if isinstance(reason, BadLeftString):
            return head + f"the left string {_quote(left)} is not correct"
        if isinstance(reason, NoRightString):
            return head + (
                f'expected a "=" after the left string {_quote(left)} '
                "to concatenate a right string"
            )
        if isinstance(reason, BadRightString):
            return head + f"the right string {_quote(reason.right_string)} is not correct"
        if left == reason.another_left_string:
            return head + f"the left string {_quote(left)} is duplicated"
        return head + (
            f"the left string {_quote(left)} and "
            f"{_quote(reason.another_left_string)} are duplicated"
        )


# === Write side ===

class WriteError(DictionaryError):
    pass


class WriteIOError(WriteError):
    def __init__(self, error: OSError):
        super().__init__(str(error))
        self.error = error


class BadLeftStringError(WriteError, ValueError):
    def __init__(self):
        super().__init__("the left word is not correct")


class BadRightStringError(WriteError, ValueError):
    def __init__(self):
        super().__init__("the right word is not correct")


class DuplicatedError(WriteError, ValueError):
    def __init__(self):
        super().__init__("the pair of the left word and the right word is duplicated")


class SameError(WriteError, ValueError):
    def __init__(self):
        super().__init__("the left word is equal to the right word")
