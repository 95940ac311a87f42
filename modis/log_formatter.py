##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Logging setup for the `modis` command line. Library code only creates module
loggers; applications that use Modis models configure logging themselves.
"""

import logging
import sys

import coloredlogs


FORMATS = {
    "DEFAULT": "[%(asctime)s: %(levelname)s] %(message)s",
    "DEBUG": "[%(asctime)s: %(levelname)s] [%(module)s: %(lineno)d] %(message)s",
}


def setup_logging(logger: logging.Logger, log_level: str = "INFO", colors: bool = True):
    """
    Send `logger` output to stdout. The debug format adds the module and line
    number of each record.

    Args:
        logger: The logger to configure, normally the `modis` logger.
        log_level: A level name such as `DEBUG` or `info`.
        colors: Install `coloredlogs` formatting on top of the handler.
    """
    level = log_level.upper()
    fmt = FORMATS["DEBUG"] if level == "DEBUG" else FORMATS["DEFAULT"]
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False

    if colors is True:
        coloredlogs.install(level=level, logger=logger, fmt=fmt)
