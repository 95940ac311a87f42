##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The `modis info` command: where the configuration came from, which Redis
server models are stored in, and whether that server answers.
"""

import logging
from argparse import ArgumentParser, Namespace

from modis.cli.commands.command_entry_point import CommandEntryPoint


LOG = logging.getLogger("modis")


class InfoCommand(CommandEntryPoint):
    """
    Handles the `info` command.

    Methods:
        add_parser: Adds the `info` command to the CLI parser.
        process_command: Prints the configuration report.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `info` command to the CLI parser.

        Args:
            subparsers: The subparsers object of the main parser.
        """
        info: ArgumentParser = subparsers.add_parser(
            "info",
            help="show the app.yaml in use, the key prefix, and the Redis server models are stored in",
        )
        info.add_argument(
            "--offline",
            action="store_true",
            help="don't try to reach the Redis server",
        )
        info.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        Print the configuration report.

        Args:
            args: Parsed CLI arguments.
        """
        # Imported here so the parser can be built without a usable configuration
        from modis import display  # pylint: disable=import-outside-toplevel

        LOG.debug(f"Running modis info (offline={args.offline}).")
        display.print_info(args)
