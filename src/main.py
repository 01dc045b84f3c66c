#!/usr/bin/env python3
"""ProductSetManager - Main entry point.

Usage: main.py [-v|-q] <command> [args...]
"""

from dotenv import load_dotenv
import logging
import sys
from typing import List, Optional, Sequence

from commands import CommandRegistry
from commands.add_product_to_product_set import AddProductToProductSetCommand
from commands.create_product_set import CreateProductSetCommand
from commands.delete_product_set import DeleteProductSetCommand
from commands.get_product_set import GetProductSetCommand
from commands.list_product_sets import ListProductSetsCommand
from commands.list_products_in_product_set import ListProductsInProductSetCommand
from errors import ConfigError, RemoteCallError, UsageError
from log_config import setup_logging
from product_search import ProductSearchService
from settings import Settings, load_settings


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

HELP_COMMANDS = {"help", "-h", "--help"}


def build_registry() -> CommandRegistry:
    """Register every product set command."""
    registry = CommandRegistry()
    registry.register(CreateProductSetCommand())
    registry.register(ListProductSetsCommand())
    registry.register(GetProductSetCommand())
    registry.register(ListProductsInProductSetCommand())
    registry.register(AddProductToProductSetCommand())
    registry.register(DeleteProductSetCommand())
    return registry


def _split_log_flags(argv: Sequence[str]) -> tuple[List[str], bool, bool]:
    """Strip leading -v/--verbose and -q/--quiet flags."""
    args = list(argv)
    verbose = quiet = False
    while args and args[0] in {"-v", "--verbose", "-q", "--quiet"}:
        flag = args.pop(0)
        if flag in {"-v", "--verbose"}:
            verbose = True
        else:
            quiet = True
    return args, verbose, quiet


def run(
    argv: Sequence[str],
    api: Optional[ProductSearchService] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Run one command and return the process exit code.

    Args:
        argv: Command name followed by its positional arguments.
        api: Service to call. Defaults to one backed by the real client.
        settings: Project and region. Defaults to `load_settings()`.
    """
    registry = build_registry()

    if argv and argv[0].lower() in HELP_COMMANDS:
        print(registry.get_help())
        return EXIT_OK

    try:
        command, params = registry.resolve(argv)
    except UsageError as exc:
        print(f"Usage error: {exc}", file=sys.stderr)
        print(registry.get_help(), file=sys.stderr)
        return EXIT_USAGE

    try:
        if settings is None:
            settings = load_settings()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if api is None:
        api = ProductSearchService()

    logger.debug("Running %s in %s", command.name, settings.location.path)
    try:
        command.execute(api, settings.location, *params)
    except RemoteCallError as exc:
        print(f"Error executing {command.name}: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


def main():
    """Main application entry point."""
    # Load env variables
    load_dotenv()

    argv, verbose, quiet = _split_log_flags(sys.argv[1:])
    setup_logging(verbose=verbose, quiet=quiet)
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
