"""
GridPack CLI

Command-line interface with subcommands for packing and editing grid layouts.
"""

import argparse
import sys
from .cli import compact, move, resize, sync, locate


def main():
    parser = argparse.ArgumentParser(
        prog='gridpack',
        description='GridPack: Grid packing and collision resolution for dashboard layouts'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    compact.add_parser(subparsers)
    move.add_parser(subparsers)
    resize.add_parser(subparsers)
    sync.add_parser(subparsers)
    locate.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    status = None
    if args.command == 'compact':
        compact.run(args)
    elif args.command == 'move':
        status = move.run(args)
    elif args.command == 'resize':
        status = resize.run(args)
    elif args.command == 'sync':
        sync.run(args)
    elif args.command == 'locate':
        locate.run(args)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
