##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The `backends` package contains the key-value stores that Modis models are
persisted to, along with the default store shared by every model that
doesn't set its own.

Subpackages:
    redis/: The Redis implementation of the store interface.

Modules:
    store_base.py: The abstract `StoreBase` interface.
    utils.py: Serialization of attribute values to and from store strings.
"""
import logging
from typing import Optional

from modis.backends.store_base import StoreBase


LOG = logging.getLogger(__name__)

_DEFAULT_STORE: Optional[StoreBase] = None


def get_default_store() -> StoreBase:
    """
    Get the store used by models that don't have one of their own. On first
    use this is a `RedisStore` wrapping the shared Redis client.

    Returns:
        The default store.
    """
    global _DEFAULT_STORE  # pylint: disable=global-statement
    if _DEFAULT_STORE is None:
        from modis.backends.redis.redis_store import RedisStore  # pylint: disable=import-outside-toplevel
        from modis.managers.redis_connection import get_redis_client  # pylint: disable=import-outside-toplevel

        LOG.debug("Creating the default Redis store.")
        _DEFAULT_STORE = RedisStore(get_redis_client())
    return _DEFAULT_STORE


def set_default_store(store: Optional[StoreBase]):
    """
    Replace the default store. Passing None restores the lazily created Redis store.

    Args:
        store: The store to use by default, or None.
    """
    global _DEFAULT_STORE  # pylint: disable=global-statement
    _DEFAULT_STORE = store
