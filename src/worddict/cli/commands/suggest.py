"""
Suggestion command.
"""

import sys
from rich import print_json
from worddict.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("suggest", help="Left terms containing a keyword, with translations")
    parser.add_argument("keyword", help="Keyword to search for")
    parser.set_defaults(func=suggest)


def suggest(args):
    try:
        pairs = client.suggestions(args.keyword)
        print_json(data=pairs)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
