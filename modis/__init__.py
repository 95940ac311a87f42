##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Modis: Redis-backed models with attributes, validations, dirty tracking,
lifecycle callbacks, and namespaced keys.
"""

__version__ = "0.1.0"
VERSION = __version__
