##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Argument parser for the `modis` command line. Every command in
`modis.cli.commands.ALL_COMMANDS` contributes its own subparser.
"""

from argparse import ArgumentParser

from modis import VERSION
from modis.cli.commands import ALL_COMMANDS


DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class HelpParser(ArgumentParser):
    """
    Parser that shows the full help text, not just the usage line, when the
    command line can't be parsed.
    """

    def error(self, message: str):
        self.print_help()
        self.exit(2, f"error: {message}\n")


def build_main_parser() -> ArgumentParser:
    """
    Build the `modis` parser with its global options and every command.

    Returns:
        The parser.
    """
    parser = HelpParser(
        prog="modis",
        description="Inspect the configuration and Redis connection used by Modis models.",
        epilog="See modis <command> --help for more info",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument(
        "-lvl",
        "--level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Set log level [Default: %(default)s]",
    )
    parser.add_argument("--no-color", action="store_true", help="Log without coloredlogs formatting.")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    for command in ALL_COMMANDS:
        command.add_parser(subparsers)

    return parser
