##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The persistence engine for Modis models.

Every save walks the same sequence of states:

    VALIDATING -> BEFORE_SAVE -> BEFORE_CREATE | BEFORE_UPDATE -> WRITING
        -> AFTER_CREATE | AFTER_UPDATE -> AFTER_SAVE -> SAVED

Failing validation, a `before_*` callback returning `False`, or a write the
store doesn't commit moves the record to FAILED instead. A failed save
leaves the record's ID and dirty state exactly as they were.

A new record's ID is allocated from the store before the write, since the
key depends on it, but it is only given to the instance once the write has
been committed.
"""

import logging
from typing import Any, Optional

from modis.backends import get_default_store
from modis.backends.store_base import StoreBase
from modis.backends.utils import serialize_attributes
from modis.common.enums import CallbackHook, LifecycleState
from modis.exceptions import RecordNotSaved
from modis.models.callbacks import run_callbacks


LOG = logging.getLogger(__name__)


class PersistenceMixin:
    """
    Mixin implementing the save and destroy lifecycles.

    Methods:
        store: The store this model class persists to.
        use_store: Set the store for this model class.
        create: Build and save a record, returning it whether or not it saved.
        create_or_raise: Build and save a record, raising if it couldn't be saved.
        save: Save the record, returning whether it worked.
        save_or_raise: Save the record, raising `RecordNotSaved` if it didn't work.
        update_attribute: Set one attribute and save without validation.
        update_attributes: Set several attributes and save.
        update_attributes_or_raise: Set several attributes and save, raising on failure.
        destroy: Remove the record from the store.
    """

    @classmethod
    def store(cls) -> StoreBase:
        return cls._entry().store or get_default_store()

    @classmethod
    def use_store(cls, store: Optional[StoreBase]):
        """
        Persist this model class (and subclasses defined afterwards) to
        `store`. Passing None goes back to the default store.

        Args:
            store: The store to use, or None.
        """
        cls._entry().store = store

    @classmethod
    def create(cls, **attributes: Any):
        """
        Build a record from `attributes` and try to save it.

        Returns:
            The record. Check `persisted` to see whether it was saved.
        """
        instance = cls(**attributes)
        instance.save()
        return instance

    @classmethod
    def create_or_raise(cls, **attributes: Any):
        """
        Build a record from `attributes` and save it.

        Returns:
            The saved record.

        Raises:
            (exceptions.RecordNotSaved): If the record could not be saved.
        """
        instance = cls(**attributes)
        instance.save_or_raise()
        return instance

    @property
    def lifecycle_state(self) -> LifecycleState:
        return self._state

    @property
    def new_record(self) -> bool:
        return self._id is None

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def persisted(self) -> bool:
        return not (self.new_record or self._destroyed)

    def save(self, validate: bool = True) -> bool:
        """
        Save the record.

        Args:
            validate: Run validations first. Skipping them still runs callbacks.

        Returns:
            True if the record was written, False otherwise.
        """
        try:
            self._create_or_update(validate)
        except RecordNotSaved as exc:
            LOG.debug(f"Save of {self!r} failed: {exc}")
            return False
        return True

    def save_or_raise(self, validate: bool = True) -> bool:
        """
        Save the record.

        Args:
            validate: Run validations first. Skipping them still runs callbacks.

        Returns:
            True once the record has been written.

        Raises:
            (exceptions.RecordNotSaved): If validation failed, a `before_*`
                callback halted the save, or the store didn't commit the write.
        """
        self._create_or_update(validate)
        return True

    def update_attribute(self, name: str, value: Any) -> bool:
        """
        Set a single attribute and save without running validations.

        Returns:
            True if the record was written, False otherwise.
        """
        self.write_attribute(name, value)
        return self.save(validate=False)

    def update_attributes(self, **attributes: Any) -> bool:
        """
        Set several attributes and save.

        Returns:
            True if the record was written, False otherwise.
        """
        self.assign_attributes(attributes)
        return self.save()

    def update_attributes_or_raise(self, **attributes: Any) -> bool:
        """
        Set several attributes and save.

        Raises:
            (exceptions.RecordNotSaved): If the record could not be saved.
        """
        self.assign_attributes(attributes)
        return self.save_or_raise()

    def destroy(self) -> bool:
        """
        Remove the record from the store, running the destroy callbacks around
        the delete. A `before_destroy` callback returning False cancels it.

        Returns:
            True if the record was removed, False otherwise.
        """
        if not self.persisted:
            LOG.warning(f"{self!r} has not been saved or was already destroyed, nothing to destroy.")
            return False

        entry = self._entry()
        if not run_callbacks(self, CallbackHook.BEFORE_DESTROY, entry.callbacks[CallbackHook.BEFORE_DESTROY]):
            return False

        if not self.store().delete(self.key, self.absolute_namespace()):
            return False

        self._destroyed = True
        self._transition(LifecycleState.DESTROYED)
        run_callbacks(self, CallbackHook.AFTER_DESTROY, entry.callbacks[CallbackHook.AFTER_DESTROY])
        LOG.info(f"Destroyed {type(self).__name__} '{self.key}'.")
        return True

    def _transition(self, state: LifecycleState):
        LOG.debug(f"{type(self).__name__}({self._id}): {self._state.value} -> {state.value}")
        self._state = state

    def _fail(self, reason: str):
        self._transition(LifecycleState.FAILED)
        raise RecordNotSaved(f"{type(self).__name__} could not be saved: {reason}")

    def _run_phase(self, state: LifecycleState, hook: CallbackHook) -> bool:
        self._transition(state)
        return run_callbacks(self, hook, self._entry().callbacks[hook])

    def _create_or_update(self, validate: bool):
        if self._destroyed:
            self._fail("the record has been destroyed")

        if validate:
            self._transition(LifecycleState.VALIDATING)
            if not self.is_valid():
                self._fail(", ".join(self.errors.full_messages()))

        creating = self.new_record
        if creating:
            phases = (
                (LifecycleState.BEFORE_CREATE, CallbackHook.BEFORE_CREATE),
                (LifecycleState.AFTER_CREATE, CallbackHook.AFTER_CREATE),
            )
        else:
            phases = (
                (LifecycleState.BEFORE_UPDATE, CallbackHook.BEFORE_UPDATE),
                (LifecycleState.AFTER_UPDATE, CallbackHook.AFTER_UPDATE),
            )

        if not self._run_phase(LifecycleState.BEFORE_SAVE, CallbackHook.BEFORE_SAVE):
            self._fail("a before_save callback halted the save")
        if not self._run_phase(*phases[0]):
            self._fail(f"a {phases[0][1].value} callback halted the save")

        self._transition(LifecycleState.WRITING)
        try:
            record_id = self._write(creating)
        except Exception:
            self._transition(LifecycleState.FAILED)
            raise
        if record_id is None:
            self._fail("the store did not commit the write")
        self._id = record_id

        self._run_phase(*phases[1])
        self._run_phase(LifecycleState.AFTER_SAVE, CallbackHook.AFTER_SAVE)

        self.reset_changes()
        self._transition(LifecycleState.SAVED)
        LOG.debug(f"Saved {type(self).__name__} '{self.key}'.")

    def _write(self, creating: bool) -> Optional[int]:
        """
        Write the record to the store.

        Args:
            creating: Whether this is the record's first save.

        Returns:
            The record's ID if the write was committed, otherwise None.
        """
        store = self.store()
        namespace = self.absolute_namespace()

        names = list(self._attributes) if creating else self.changed
        if not creating and not names:
            LOG.debug(f"No changes to write for '{self.key}'.")
            return self._id

        # Values are serialized before an ID is allocated
        try:
            mapping = serialize_attributes({name: self._attributes[name] for name in names})
        except (TypeError, ValueError) as exc:
            self._fail(f"its attribute values could not be serialized ({exc})")

        record_id = store.next_id(namespace) if creating else self._id
        if not store.write(self.key_for(record_id), mapping, namespace):
            return None
        return record_id
