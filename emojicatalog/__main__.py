# SPDX-License-Identifier: MIT

from . import VERSION, logger, set_verbose
from .config import CatalogConfig, DEFAULT_URL
from .controller import CatalogController
from .engine import SORT_ORDERS
from .utils import colors
from .view import CatalogView

import argparse
import sys

parser = argparse.ArgumentParser(
    prog="emojicatalog",
    description="Browse, search and sort an emoji catalog",
)

parser.add_argument(
    "url", nargs="?", default=DEFAULT_URL, help="URL of the emoji catalog JSON file"
)
parser.add_argument(
    "--no-color", action="store_true", help="do not use colors in output"
)
parser.add_argument(
    "--delay",
    type=float,
    default=0.0,
    help="seconds to keep the loading/progress indicators visible",
)
parser.add_argument(
    "--width", type=int, default=40, help="wrap width of card descriptions"
)
parser.add_argument("-v", "--verbose", action="store_true", help="show debug output")

HELP = """Commands:
 search <text> or /<text> - search names, descriptions and categories
 category <name> - only show one category (no name shows all)
 categories - list available categories
 sort asc|desc|none - sort by name
 (empty line) - apply the current search again
 clear - clear all filters
 help - show this message
 quit - quits the program"""

SORT_ALIASES = {"none": "", "off": ""}


def config_from_args(args: argparse.Namespace) -> CatalogConfig:
    return CatalogConfig(
        url=args.url,
        reveal_delay=args.delay,
        recompute_delay=args.delay,
        color=not args.no_color,
        card_width=args.width,
        verbose=args.verbose,
    )


def handle_command(controller: CatalogController, line: str) -> bool:
    """
    Run one prompt command.

    :returns: False if the user asked to quit.
    """
    line = line.strip()
    if not line:
        controller.submit_search()
        return True

    if line.startswith("/"):
        controller.set_search(line[1:])
        return True

    command, _, arg = line.partition(" ")
    arg = arg.strip()

    if command == "quit":
        return False
    elif command == "help":
        logger.info(HELP)
    elif command == "search":
        controller.set_search(arg)
    elif command == "category":
        values = [value for value, _ in controller.view.category_options]
        if arg not in values:
            logger.warning(f"No such category: {arg}, ignoring")
        else:
            controller.set_category(arg)
    elif command == "categories":
        logger.info(controller.view.format_categories())
    elif command == "sort":
        order = SORT_ALIASES.get(arg, arg)
        if order not in SORT_ORDERS:
            logger.warning(f"Unknown sort order: {arg}, use asc, desc or none")
        else:
            controller.set_sort(order)
    elif command == "clear":
        controller.clear_filters()
    else:
        logger.warning(f"Unknown command: {command}, type help for a list")

    return True


def run_prompt(controller: CatalogController, read=input):
    while True:
        try:
            line = read("> ")
        except EOFError:
            break
        if not handle_command(controller, line):
            break


def main(argv=None) -> int:
    config = config_from_args(parser.parse_args(argv))
    set_verbose(config.verbose)

    bold = colors["bold"] if config.color else ""
    reset = colors["reset"] if config.color else ""
    logger.info(f"{bold}emojicatalog{reset} {VERSION}")
    logger.info("===\n")

    view = CatalogView(color=config.color, card_width=config.card_width)
    controller = CatalogController(
        view,
        reveal_delay=config.reveal_delay,
        recompute_delay=config.recompute_delay,
    )

    if not controller.start(config.url):
        return 1

    logger.info("\n" + HELP)
    run_prompt(controller)
    return 0


if __name__ == "__main__":
    sys.exit(main())
