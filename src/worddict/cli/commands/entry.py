"""
Entry commands.
"""

import sys
import httpx
from worddict.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("entry", help="Dictionary entry management")
    entry_sub = parser.add_subparsers(dest="entry_command", required=True)

    # add
    add_p = entry_sub.add_parser("add", help="Add a pair or a new translation")
    add_p.add_argument("left", help="Left term")
    add_p.add_argument("right", help="Right term (translation)")
    add_p.set_defaults(func=entry_add)

    # remove
    remove_p = entry_sub.add_parser("remove", help="Remove an entry")
    remove_p.add_argument("left", help="Left term")
    remove_p.set_defaults(func=entry_remove)

    # show
    show_p = entry_sub.add_parser("show", help="Show an entry with its history")
    show_p.add_argument("left", help="Left term")
    show_p.set_defaults(func=entry_show)

    # list
    list_p = entry_sub.add_parser("list", help="List all entries")
    list_p.set_defaults(func=entry_list)

    # find
    find_p = entry_sub.add_parser("find", help="Search entries")
    find_p.add_argument("term", help="Search term")
    find_p.add_argument("--right", action="store_true", help="Search translations instead of left terms")
    find_p.add_argument("--exact", action="store_true", help="Whole-word match instead of substring")
    find_p.add_argument("--start", type=int, default=0, help="Index to start scanning from")
    find_p.set_defaults(func=entry_find)


def _fail(e: Exception):
    if isinstance(e, httpx.HTTPStatusError):
        try:
            detail = e.response.json().get("detail", e.response.text)
        except ValueError:
            detail = e.response.text
        print(f"✗ Error: {detail}")
    else:
        print(f"✗ Error: {e}")
    sys.exit(1)


def _print_entry(entry: dict):
    print(f"{entry['left']} = {' --> '.join(entry['history'])}")


def entry_add(args):
    try:
        result = client.add_entry(args.left, args.right)
        entry = result["entry"]
        if result["created"]:
            print(f"✓ Created: {entry['left']}")
        else:
            print(f"✓ Updated: {entry['left']}")
        print(f"  {' --> '.join(entry['history'])}")
    except Exception as e:
        _fail(e)


def entry_remove(args):
    try:
        result = client.delete_entry(args.left)
        print(f"✓ Removed: {result['deleted']}")
    except Exception as e:
        _fail(e)


def entry_show(args):
    try:
        entry = client.get_entry(args.left)
        print(f"Left: {entry['left']}")
        print(f"Right: {entry['right']}")
        if len(entry["history"]) > 1:
            print()
            print(f"History ({len(entry['history'])}):")
            for i, translation in enumerate(entry["history"]):
                print(f"  {i}  {translation}")
    except Exception as e:
        _fail(e)


def entry_list(args):
    try:
        result = client.list_entries()
        if not result["entries"]:
            print("No entries.")
            return
        for entry in result["entries"]:
            _print_entry(entry)
    except Exception as e:
        _fail(e)


def entry_find(args):
    side = "right" if args.right else "left"
    try:
        entries = client.lookup(args.term, side=side, exact=args.exact, start=args.start)
        if not entries:
            print("No matches.")
            return
        for entry in entries:
            _print_entry(entry)
    except Exception as e:
        _fail(e)
