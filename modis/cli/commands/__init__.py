##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Modis CLI Commands Package.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    info: Implements the `info` command for displaying configuration and connection diagnostics.
"""

from modis.cli.commands.info import InfoCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    InfoCommand(),
]
