##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module defines the abstract base class for all key-value stores that
Modis models can be persisted to.

The persistence engine only ever talks to a store through this interface:
it asks for fresh IDs, writes serialized attribute mappings under computed
keys, and reads them back.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class StoreBase(ABC):
    """
    Base class for all stores supported in Modis.

    Methods:
        next_id: Atomically generate the next ID for a namespace.
        write: Write serialized attributes under a key.
        read: Read serialized attributes stored under a key.
        delete: Remove a key.
        members: List the IDs saved under a namespace.
    """

    @abstractmethod
    def next_id(self, namespace: str) -> int:
        """
        Atomically generate the next ID for a namespace.

        Args:
            namespace: The absolute namespace of the model.

        Returns:
            A new ID, unique within `namespace`.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `next_id` method.")

    @abstractmethod
    def write(self, key: str, mapping: Dict[str, str], namespace: str) -> bool:
        """
        Write serialized attributes under `key`.

        Args:
            key: The full key of the record.
            mapping: Serialized attribute values.
            namespace: The absolute namespace of the model the record belongs to.

        Returns:
            True if the write was committed, False otherwise.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `write` method.")

    @abstractmethod
    def read(self, key: str) -> Optional[Dict[str, str]]:
        """
        Read the serialized attributes stored under `key`.

        Args:
            key: The full key of the record.

        Returns:
            The serialized attributes or None if nothing is stored there.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `read` method.")

    @abstractmethod
    def delete(self, key: str, namespace: str) -> bool:
        """
        Remove the record stored under `key`.

        Args:
            key: The full key of the record.
            namespace: The absolute namespace of the model the record belongs to.

        Returns:
            True if the delete was committed, False otherwise.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `delete` method.")

    @abstractmethod
    def members(self, namespace: str) -> List[int]:
        """
        List the IDs of every record saved under a namespace.

        Args:
            namespace: The absolute namespace of the model.

        Returns:
            The IDs in ascending order.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `members` method.")
