##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Entry point for the `modis` command line.
"""

import logging
import sys
import traceback
from typing import List, Optional

from modis.cli.argparse_main import build_main_parser
from modis.log_formatter import setup_logging


LOG = logging.getLogger("modis")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse the command line, configure logging, and run the chosen command.

    Args:
        argv: The arguments after the program name. Defaults to `sys.argv[1:]`.

    Returns:
        The exit status: 0 on success, 1 if no command was given or the command failed.
    """
    argv = sys.argv[1:] if argv is None else argv
    parser = build_main_parser()
    if not argv:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args(argv)

    setup_logging(logger=LOG, log_level=args.level, colors=not args.no_color)

    try:
        args.func(args)
    except Exception as exc:  # pylint: disable=broad-except
        # Top of the program stack: report anything a command raises
        LOG.debug(traceback.format_exc())
        LOG.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
