##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Loading saved Modis records back out of the store.
"""

import logging
from typing import Dict, List

from modis.backends.utils import deserialize_attributes
from modis.common.enums import LifecycleState
from modis.exceptions import RecordNotFound


LOG = logging.getLogger(__name__)


class FindersMixin:
    """
    Mixin for reading records from the store.

    Methods:
        find: Load a record by ID.
        all: Load every record of this model.
        reload: Refresh an instance from the store.
    """

    @classmethod
    def find(cls, record_id: int):
        """
        Load a record by ID.

        Args:
            record_id: The ID of the record.

        Returns:
            The record.

        Raises:
            (exceptions.RecordNotFound): If no record is stored with that ID.
        """
        record_id = int(record_id)
        data = cls.store().read(cls.key_for(record_id))
        if not data:
            raise RecordNotFound(f"Couldn't find {cls.__name__} with id={record_id}.")
        return cls._instantiate(record_id, data)

    @classmethod
    def all(cls) -> List:
        """
        Load every saved record of this model, ordered by ID. IDs listed in
        the namespace's `all` set without a stored record are skipped.

        Returns:
            A list of records.
        """
        records = []
        for record_id in cls.store().members(cls.absolute_namespace()):
            try:
                records.append(cls.find(record_id))
            except RecordNotFound:
                LOG.warning(f"{cls.__name__} with id '{record_id}' is listed but could not be retrieved.")
        LOG.debug(f"Retrieved {len(records)} {cls.__name__} record(s).")
        return records

    @classmethod
    def _instantiate(cls, record_id: int, data: Dict[str, str]):
        instance = cls()
        instance._load(record_id, data)  # pylint: disable=protected-access
        return instance

    def _load(self, record_id: int, data: Dict[str, str]):
        entry = self._entry()
        # Declared fields missing from the stored hash go back to their defaults
        self._attributes = {name: attribute.default_value() for name, attribute in entry.attributes.items()}
        self._attributes.update(deserialize_attributes(data, entry.attribute_types))
        self._id = record_id
        self._errors.clear()
        self._previous_changes = {}
        self._take_snapshot()
        self._state = LifecycleState.SAVED

    def reload(self):
        """
        Replace this instance's attributes with what is stored, discarding unsaved changes.

        Returns:
            This instance.

        Raises:
            (exceptions.RecordNotFound): If the record isn't saved or no longer exists.
        """
        if self.new_record:
            raise RecordNotFound(f"{type(self).__name__} has not been saved, there is nothing to reload.")
        data = self.store().read(self.key)
        if not data:
            raise RecordNotFound(f"Couldn't find {type(self).__name__} with id={self.id}.")
        self._load(self.id, data)
        return self
