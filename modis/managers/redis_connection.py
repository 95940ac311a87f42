##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module stores a manager for redis connections.
"""
import logging
from typing import Optional

import redis

from modis.config.redis_config import get_client_kwargs


LOG = logging.getLogger(__name__)

_CLIENT: Optional[redis.Redis] = None


class RedisConnectionManager:
    """
    A context manager for handling redis connections.
    This will ensure safe opening and closing of Redis connections.
    """

    def __init__(self, db_num: int = 0):
        self.db_num = db_num
        self.connection = None

    def __enter__(self) -> redis.Redis:
        self.connection = self.get_redis_connection()
        return self.connection

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.connection:
            LOG.debug(f"MANAGER: Closing connection at db_num: {self.db_num}")
            self.connection.close()

    def get_redis_connection(self) -> redis.Redis:
        """
        Build a Redis client from the configuration, offset from the configured
        database number by `db_num`.

        Returns:
            A Redis client.
        """
        redis_config = get_client_kwargs()
        redis_config["db"] += self.db_num
        return redis.Redis(**redis_config)


def get_redis_client() -> redis.Redis:
    """
    Get the shared Redis client, creating it from the configuration on first use.

    Returns:
        The shared Redis client.
    """
    global _CLIENT  # pylint: disable=global-statement
    if _CLIENT is None:
        LOG.debug("Creating the shared Redis client.")
        _CLIENT = redis.Redis(**get_client_kwargs())
    return _CLIENT


def set_redis_client(client: Optional[redis.Redis]):
    """
    Replace the shared Redis client. Passing None makes the next call to
    `get_redis_client` build a fresh client from the configuration.

    Args:
        client: The client to share, or None.
    """
    global _CLIENT  # pylint: disable=global-statement
    _CLIENT = client
