"""
Shared dependencies for routes.

The server holds one Dictionary for the whole process. It is loaded once and
written back on every mutation; routes run on the event loop, one at a time.
"""

from pathlib import Path

from worddict import config
from worddict.core.dictionary import Dictionary


_dictionary: Dictionary | None = None


def open_dictionary(path: str | Path | None = None) -> Dictionary:
    """Replace the process-wide dictionary with a freshly loaded one."""
    global _dictionary
    dictionary = Dictionary(path or config.DICTIONARY_PATH)
    dictionary.read_data()
    _dictionary = dictionary
    return dictionary


def get_dictionary() -> Dictionary:
    if _dictionary is None:
        return open_dictionary()
    return _dictionary
