##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Dirty tracking for Modis models.

Changes are computed by diffing the current attribute values against a
snapshot taken when the record was constructed, loaded, or last saved.
Only declared attributes are tracked.
"""

from copy import deepcopy
from typing import Any, Dict, List, Tuple


class DirtyTrackingMixin:
    """
    Mixin that tracks which declared attributes changed since the last snapshot.

    Methods:
        is_changed: Whether any attribute changed.
        attribute_changed: Whether a given attribute changed.
        attribute_was: The snapshot value of an attribute.
        reset_changes: Take a new snapshot, moving the current changes to `previous_changes`.
    """

    def _take_snapshot(self):
        # Deep copy so in-place mutation of arrays and hashes shows up as a change
        self._original = deepcopy(self._attributes)

    @property
    def changes(self) -> Dict[str, Tuple[Any, Any]]:
        """Changed attributes mapped to `(old, new)`, in declaration order."""
        return {
            name: (self._original.get(name), value)
            for name, value in self._attributes.items()
            if self._original.get(name) != value
        }

    @property
    def changed(self) -> List[str]:
        """Names of the changed attributes, in declaration order."""
        return list(self.changes)

    @property
    def previous_changes(self) -> Dict[str, Tuple[Any, Any]]:
        """The changes that were persisted by the last successful save."""
        return dict(self._previous_changes)

    def is_changed(self) -> bool:
        return bool(self.changes)

    def attribute_changed(self, name: str) -> bool:
        self._check_attribute_name(name)
        return self._original.get(name) != self._attributes[name]

    def attribute_was(self, name: str) -> Any:
        self._check_attribute_name(name)
        return deepcopy(self._original.get(name))

    def reset_changes(self):
        """Forget the current changes, keeping them in `previous_changes`."""
        self._previous_changes = self.changes
        self._take_snapshot()
