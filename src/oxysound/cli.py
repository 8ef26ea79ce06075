"""Command-line interface for playlist operations."""

import argparse
import sys
from typing import List, Optional

from . import api, commands, config
from .errors import ConfigError, OxysoundError, log_error
from .logging_config import enable_debug, get_logger
from .utils import expand_path_aliases


logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="oxysound", description="Build YouTube playlists from video IDs"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Create command
    create_cmd_parser = subparsers.add_parser(
        "create", help="Create a playlist, replacing any saved one with the same title"
    )
    create_cmd_parser.add_argument("title", help="Playlist title")
    create_cmd_parser.add_argument("ids", nargs="*", help="Video IDs to start with")

    # Add command
    add_parser = subparsers.add_parser("add", help="Add videos to a playlist")
    add_parser.add_argument("title", help="Playlist title")
    add_parser.add_argument("ids", nargs="+", help="Video IDs to add")

    # Remove command
    remove_parser = subparsers.add_parser("remove", help="Remove videos from a playlist")
    remove_parser.add_argument("title", help="Playlist title")
    remove_parser.add_argument("ids", nargs="+", help="Video IDs to remove")

    # Print command
    print_parser = subparsers.add_parser("print", help="Print a playlist without saving it")
    target = print_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("-t", "--title", help="Title of a saved playlist")
    target.add_argument("-i", "--ids", nargs="+", help="Video IDs to build a playlist from")

    # List command
    subparsers.add_parser("list", help="List saved playlists")

    return parser


def resolve_print_target(args: argparse.Namespace) -> commands.show.PrintTarget:
    """Turn the mutually exclusive --title/--ids options into a print target."""
    if args.title is not None:
        return commands.ByTitle(args.title)
    return commands.ByIds(list(args.ids))


def build_command(
    args: argparse.Namespace, api_key: str, save_directory: str
) -> commands.PlaylistCommand:
    """Create the command selected on the command line.

    Args:
        args: Parsed arguments
        api_key: YouTube Data API key
        save_directory: Directory holding the playlist files

    Returns:
        The command to run

    Raises:
        ValueError: If no known command was selected
        OxysoundError: If the YouTube client cannot be built
    """
    if args.command == "create":
        return commands.CreateCommand(
            save_directory, args.title, args.ids, api.get_metadata_provider(api_key)
        )
    if args.command == "add":
        return commands.AddCommand(
            save_directory, args.title, args.ids, api.get_metadata_provider(api_key)
        )
    if args.command == "remove":
        return commands.RemoveCommand(save_directory, args.title, args.ids)
    if args.command == "print":
        return commands.PrintCommand(save_directory, resolve_print_target(args))
    if args.command == "list":
        return commands.ListCommand(save_directory)
    raise ValueError(f"Unknown command: {args.command}")


def print_playlists(titles: List[str], save_directory: str) -> None:
    """Print the titles returned by the list command."""
    print(f"Available playlists at {expand_path_aliases(save_directory)}:")
    for title in titles:
        print(f"- {title}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        int: Exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    try:
        args = parser.parse_args(args=argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    if args.debug:
        enable_debug()

    if not args.command:
        parser.print_help()
        return 1

    try:
        api_key, save_directory = config.check_config()
    except ConfigError as e:
        log_error(e, "Configuration error")
        return 1

    try:
        command = build_command(args, api_key, save_directory)
        logger.debug("Running %s command", args.command)
        result = command.run()
    except (OxysoundError, ValueError) as e:
        log_error(e, "Command failed")
        return 1

    if args.command == "list":
        print_playlists(result, save_directory)
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
