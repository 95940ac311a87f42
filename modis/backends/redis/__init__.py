##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The `redis` package contains the Redis implementation of the Modis store interface.

Modules:
    redis_store.py: Defines `RedisStore`.
"""
