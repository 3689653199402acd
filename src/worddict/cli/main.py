"""
worddict CLI.
"""

import argparse
from worddict.cli.commands import entry, suggest, file


def main(argv=None):
    parser = argparse.ArgumentParser(prog="worddict", description="worddict CLI")
    subparsers = parser.add_subparsers(dest="command")

    entry.add_subparser(subparsers)
    suggest.add_subparser(subparsers)
    file.add_subparser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
