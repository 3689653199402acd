# src/worddict/core/dictionary.py
"""
Bilingual word dictionary backed by a flat text file.

Maps a left term to the history of its right-side translations:
"Alduin" → ["阿爾杜因", "奥杜因"] (newest last)

The table is two parallel lists kept in memory. Every successful mutation
rewrites the whole file, sorted by left term. Sorting reorders the table, so
an index is only valid until the next write; look entries up by left term
when you need a stable handle.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from worddict.core.errors import (
    ReadIOError, WriteIOError,
    BadLeftStringError, BadRightStringError, DuplicatedError, SameError,
)
from worddict.core.format import HISTORY_JOIN, is_clean, parse_line, format_line


logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 50


@dataclass(frozen=True)
class Entry:
    index: int
    left: str
    history: tuple[str, ...]

    @property
    def right(self) -> str:
        return self.history[-1]

    @property
    def history_string(self) -> str:
        return HISTORY_JOIN.join(self.history)

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "left": self.left,
            "right": self.right,
            "history": list(self.history),
        }


class Dictionary:
    def __init__(self, path: str | os.PathLike):
        """Bind to a dictionary file without reading it. Call `read_data` to load."""
        self.path = Path(path)
        self.left: list[str] = []
        self.right: list[list[str]] = []

    # === Accessors ===

    def count(self) -> int:
        assert len(self.left) == len(self.right)
        return len(self.left)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self.count()

    def get_left(self, index: int) -> str | None:
        if not self._in_range(index):
            return None
        return self.left[index]

    def get_right(self, index: int) -> str | None:
        """The current (newest) translation at `index`."""
        if not self._in_range(index):
            return None
        return self.right[index][-1]

    def get_history(self, index: int) -> list[str] | None:
        if not self._in_range(index):
            return None
        return list(self.right[index])

    def get_history_string(self, index: int) -> str | None:
        """History joined oldest to newest, e.g. "阿爾杜因 --> 奥杜因"."""
        if not self._in_range(index):
            return None
        return HISTORY_JOIN.join(self.right[index])

    def get_item(self, index: int) -> Entry | None:
        if not self._in_range(index):
            return None
        return Entry(index, self.left[index], tuple(self.right[index]))

    def entries(self) -> list[Entry]:
        return [
            Entry(i, left, tuple(history))
            for i, (left, history) in enumerate(zip(self.left, self.right))
        ]

    # === Queries ===
    #
    # Every scan starts at `start_index % count()`, wraps around at the end
    # and visits each entry at most once.

    def _scan(self, start_index: int):
        size = self.count()
        index = start_index % size
        for _ in range(size):
            yield index
            index += 1
            if index == size:
                index = 0

    def find_left_exact(self, s: str, start_index: int = 0) -> int | None:
        """First index whose left term equals `s`, ignoring case."""
        if self.count() == 0:
            return None

        target = s.lower()
        for index in self._scan(start_index):
            if self.left[index].lower() == target:
                return index

        return None

    def find_key(self, left: str) -> int | None:
        """Index of the entry keyed by `left`, or None."""
        return self.find_left_exact(left.strip(), 0)

    def find_left(self, s: str, start_index: int = 0) -> list[int] | None:
        """
        Indices whose left term contains `s`, ignoring case.

        At most MAX_SUGGESTIONS indices, in the order the scan found them.
        Returns None for an empty table, [] when nothing matches.
        """
        if self.count() == 0:
            return None

        s_upper = s.upper()
        s_lower = s.lower()

        found = []
        for index in self._scan(start_index):
            if len(found) == MAX_SUGGESTIONS:
                break

            term = self.left[index]
            if s_upper in term.upper() or s_lower in term.lower():
                if index not in found:
                    found.append(index)

        return found

    def find_right_exact(self, s: str, start_index: int = 0) -> int | None:
        """First entry index with any translation equal to `s`, ignoring case."""
        if self.count() == 0:
            return None

        target = s.lower()
        for index in self._scan(start_index):
            for translation in reversed(self.right[index]):
                if translation.lower() == target:
                    return index

        return None

    def find_right(self, s: str, start_index: int = 0) -> int | None:
        """First entry index with any translation containing `s`, ignoring case."""
        if self.count() == 0:
            return None

        s_upper = s.upper()
        s_lower = s.lower()

        for index in self._scan(start_index):
            for translation in reversed(self.right[index]):
                if s_upper in translation.upper() or s_lower in translation.lower():
                    return index

        return None

    def find_pairs(self, keyword: str) -> dict[str, list[str]]:
        """Map each left term containing `keyword` to its history."""
        indices = self.find_left(keyword, 0) or []
        return {self.left[i]: list(self.right[i]) for i in indices}

    # === Reading ===

    def read_data(self) -> None:
        """
        Replace the table with the contents of the dictionary file.

        A missing file leaves the table empty. On BrokenError the table holds
        only the lines before the broken one and should be discarded.

        Raises:
            ReadIOError: the file exists but cannot be read
            BrokenError: a line violates the format
        """
        self.left = []
        self.right = []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                for line_number, text in enumerate(f, start=1):
                    parsed = parse_line(text, line_number, existing=self._stored_spelling)
                    if parsed is None:
                        continue
                    left, history = parsed
                    self.left.append(left)
                    self.right.append(history)
        except FileNotFoundError:
            logger.debug("Dictionary file %s not found, starting empty", self.path)
            return
        except (OSError, UnicodeDecodeError) as e:
            raise ReadIOError(e) from e

        logger.info("Loaded %d entries from %s", self.count(), self.path)

    def _stored_spelling(self, left: str) -> str | None:
        index = self.find_left_exact(left, 0)
        if index is None:
            return None
        return self.left[index]

    # === Writing ===

    def sort(self) -> None:
        """Order the table by left term, case-insensitively. Invalidates indices."""
        order = sorted(range(self.count()), key=lambda i: self.left[i].upper())
        self.left = [self.left[i] for i in order]
        self.right = [self.right[i] for i in order]

    def to_text(self) -> str:
        return "\n".join(format_line(left, history) for left, history in zip(self.left, self.right))

    def write_data(self) -> None:
        """
        Sort the table, then replace the dictionary file with it.

        The file is written to a temporary sibling and renamed over the
        target, so a failed write leaves the previous file intact. The
        in-memory table is not rolled back on failure.

        Raises:
            WriteIOError
        """
        self.sort()
        text = self.to_text()

        directory = self.path.parent
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp_file:
                tmp_name = tmp_file.name
                tmp_file.write(text)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())

            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and Path(tmp_name).exists():
                Path(tmp_name).unlink()
            raise WriteIOError(e) from e

        logger.info("Wrote %d entries to %s", self.count(), self.path)

    def delete(self, index: int) -> bool:
        """Remove the entry at `index` and persist. False if out of range."""
        if not self._in_range(index):
            logger.debug("Delete index %d out of range (count=%d)", index, self.count())
            return False

        del self.left[index]
        del self.right[index]

        self.write_data()
        return True

    def add_edit(self, left: str, right: str) -> bool:
        """
        Add a pair, or append `right` to the history of an existing left term.

        Returns:
            True if a new entry was created, False if an existing one was extended

        Raises:
            BadLeftStringError, BadRightStringError: a delimiter in either word
            SameError: left and right are equal
            DuplicatedError: `right` is already the current translation
            WriteIOError: the table changed but could not be persisted
        """
        left = left.strip()
        right = right.strip()

        if not is_clean(left):
            raise BadLeftStringError()
        if not is_clean(right):
            raise BadRightStringError()
        if left == right:
            raise SameError()

        index = self.find_left_exact(left, 0)
        if index is not None:
            if self.right[index][-1] == right:
                raise DuplicatedError()

            self.right[index].append(right)
            self.write_data()
            return False

        self.left.append(left)
        self.right.append([right])
        self.write_data()
        return True
