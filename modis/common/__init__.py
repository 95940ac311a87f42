##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The `common` package provides shared definitions used across Modis.

Modules:
    enums.py: Enumerations for lifecycle states and callback hooks.
"""
