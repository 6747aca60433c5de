"""Subcommand dispatcher for reelcompose.

Usage:
    reelcompose submit     --search ... --title ... --soundtrack ...
    reelcompose status     <job-id>
    reelcompose templates  [--manifest ...] [--validate]
"""

import argparse
import sys


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="reelcompose",
        description="Template-driven photo slideshow composition and rendering.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands. Each delegates to its own module's main().
    subparsers.add_parser("submit", help="Compose a timeline and queue a render")
    subparsers.add_parser("status", help="Show the status of a queued render")
    subparsers.add_parser("templates", help="List or validate style templates")

    # Parse only the subcommand name, pass the rest to the subcommand's parser.
    parsed, remaining = parser.parse_known_args(args)

    if parsed.command is None:
        parser.print_help()
        sys.exit(1)

    if parsed.command == "submit":
        from .cli import main as submit_main
        submit_main(remaining)
    elif parsed.command == "status":
        from .status_cli import main as status_main
        status_main(remaining)
    elif parsed.command == "templates":
        from .templates_cli import main as templates_main
        templates_main(remaining)


if __name__ == "__main__":
    main()
