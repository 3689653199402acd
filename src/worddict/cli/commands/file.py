"""
Local dictionary file commands (no server needed).
"""

import sys
from pathlib import Path

from worddict.core.dictionary import Dictionary
from worddict.core.errors import DictionaryError


def add_subparser(subparsers):
    parser = subparsers.add_parser("file", help="Check or reformat a dictionary file")
    file_sub = parser.add_subparsers(dest="file_command", required=True)

    # check
    check_p = file_sub.add_parser("check", help="Validate a dictionary file")
    check_p.add_argument("path", help="Path to dictionary file")
    check_p.set_defaults(func=file_check)

    # format
    format_p = file_sub.add_parser("format", help="Rewrite a dictionary file sorted")
    format_p.add_argument("path", help="Path to dictionary file")
    format_p.set_defaults(func=file_format)


def _load(path: Path) -> Dictionary:
    if not path.exists():
        print(f"✗ File not found: {path}")
        sys.exit(1)

    dictionary = Dictionary(path)
    try:
        dictionary.read_data()
    except DictionaryError as e:
        print(f"✗ {path}: {e}")
        sys.exit(1)
    return dictionary


def file_check(args):
    dictionary = _load(Path(args.path))
    print(f"✓ {args.path}: {dictionary.count()} entries")


def file_format(args):
    dictionary = _load(Path(args.path))
    try:
        dictionary.write_data()
    except DictionaryError as e:
        print(f"✗ {args.path}: {e}")
        sys.exit(1)
    print(f"✓ Formatted {args.path}: {dictionary.count()} entries")
