##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Redis-backed store for Modis models.

Layout used in Redis for a model whose absolute namespace is `ns`:

- `ns:<id>`: a hash holding the record's serialized attributes
- `ns:all`: a set holding the ID of every saved record
- `ns_id_seq`: the counter `INCR`ed to allocate new IDs

See also:
    - modis.backends.store_base: Base class
    - modis.models.persistence: The save lifecycle that drives this store
"""

import logging
from typing import Dict, List, Optional

from redis import Redis
from redis.exceptions import RedisError

from modis.backends.store_base import StoreBase


LOG = logging.getLogger(__name__)


class RedisStore(StoreBase):
    """
    Store implementation that keeps each record in a Redis hash.

    The client must be created with `decode_responses=True`.

    Attributes:
        client (Redis): The Redis client used for database operations.

    Methods:
        next_id: Atomically generate the next ID for a namespace.
        write: Write a record and register its ID in the namespace's `all` set.
        read: Read the hash stored under a key.
        delete: Remove a record and its ID from the namespace's `all` set.
        members: List the IDs saved under a namespace.
    """

    def __init__(self, client: Redis):
        """
        Initialize the store with a Redis client.

        Args:
            client: A Redis client instance used to interact with the Redis database.
        """
        self.client: Redis = client

    @staticmethod
    def id_sequence_key(namespace: str) -> str:
        """Key of the ID counter for `namespace`."""
        return f"{namespace}_id_seq"

    @staticmethod
    def all_key(namespace: str) -> str:
        """Key of the set of saved IDs for `namespace`."""
        return f"{namespace}:all"

    @staticmethod
    def _record_id(key: str, namespace: str) -> str:
        return key[len(namespace) + 1 :] if key.startswith(f"{namespace}:") else key.rsplit(":", 1)[-1]

    def next_id(self, namespace: str) -> int:
        new_id = int(self.client.incr(self.id_sequence_key(namespace)))
        LOG.debug(f"Allocated id {new_id} in '{namespace}'.")
        return new_id

    def write(self, key: str, mapping: Dict[str, str], namespace: str) -> bool:
        """
        Write a record in a single MULTI/EXEC transaction: the hash fields in
        `mapping` and the record's membership in the namespace's `all` set.

        Args:
            key: The full key of the record.
            mapping: Serialized attribute values. May be empty.
            namespace: The absolute namespace of the model.

        Returns:
            True if the transaction was committed, False if Redis reported an error.
        """
        LOG.debug(f"Writing {len(mapping)} field(s) to '{key}'...")
        try:
            pipe = self.client.pipeline(transaction=True)
            if mapping:
                pipe.hset(key, mapping=mapping)
            pipe.sadd(self.all_key(namespace), self._record_id(key, namespace))
            pipe.execute()
        except RedisError as exc:
            LOG.error(f"Failed to write '{key}' to Redis: {exc}")
            return False
        LOG.debug(f"Successfully wrote '{key}'.")
        return True

    def read(self, key: str) -> Optional[Dict[str, str]]:
        LOG.debug(f"Reading '{key}' from Redis.")
        data = self.client.hgetall(key)
        return data or None

    def delete(self, key: str, namespace: str) -> bool:
        """
        Remove a record's hash and its membership in the namespace's `all` set.

        Args:
            key: The full key of the record.
            namespace: The absolute namespace of the model.

        Returns:
            True if the transaction was committed, False if Redis reported an error.
        """
        LOG.debug(f"Deleting '{key}' from Redis...")
        try:
            pipe = self.client.pipeline(transaction=True)
            pipe.delete(key)
            pipe.srem(self.all_key(namespace), self._record_id(key, namespace))
            pipe.execute()
        except RedisError as exc:
            LOG.error(f"Failed to delete '{key}' from Redis: {exc}")
            return False
        LOG.debug(f"Successfully deleted '{key}'.")
        return True

    def members(self, namespace: str) -> List[int]:
        return sorted(int(member) for member in self.client.smembers(self.all_key(namespace)))
