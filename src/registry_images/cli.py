"""Command-line entry point for registry-images."""

import argparse
import asyncio
import logging
import sys

from .commands import run_delete, run_list
from .exceptions import RegistryImagesError
from .settings import Settings
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def handle_list(args) -> int:
    """Handle list command."""
    try:
        settings = Settings.from_env()
        output = asyncio.run(
            run_list(settings, filter_pattern=args.filter, as_json=args.json)
        )
    except RegistryImagesError as e:
        logger.error(f"Error listing images: {e}")
        return 1

    print(output)
    return 0


def handle_delete(args) -> int:
    """Handle delete command."""
    try:
        settings = Settings.from_env()
        deleted = asyncio.run(run_delete(settings, args.image))
    except RegistryImagesError as e:
        logger.error(f"Error when removing image: {e}")
        return 1

    print(f"Deleted tag: {deleted}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="registry-images",
        description="List and delete images in your managed container registry.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser(
        "list",
        help="List repositories and tags",
        description="List the tags of every repository in the registry.",
    )
    list_parser.add_argument("--filter", help="Regex to filter results")
    list_parser.add_argument(
        "--json", action="store_true", help="Format output as JSON"
    )
    list_parser.set_defaults(func=handle_list)

    delete_parser = subparsers.add_parser(
        "delete",
        help="Remove an image tag",
        description="Delete a tag and trigger layer garbage collection.",
    )
    delete_parser.add_argument("image", help="Image to delete, as repository:tag")
    delete_parser.set_defaults(func=handle_delete)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
