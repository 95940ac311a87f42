##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""This module provides enumerations used by Modis models."""
from enum import Enum


__all__ = ("CallbackHook", "LifecycleState")


class LifecycleState(Enum):
    """
    Enum for the states a model instance moves through while it is saved.

    A save starts in `VALIDATING` and ends in either `SAVED` or `FAILED`.
    Freshly constructed instances sit in `NEW`; instances loaded from the
    store start out `SAVED`; destroyed instances end in `DESTROYED`.

    Attributes:
        NEW (str): Constructed, never saved.
        VALIDATING (str): Running validations.
        BEFORE_SAVE (str): Running `before_save` callbacks.
        BEFORE_CREATE (str): Running `before_create` callbacks.
        BEFORE_UPDATE (str): Running `before_update` callbacks.
        WRITING (str): Writing attributes to the store.
        AFTER_CREATE (str): Running `after_create` callbacks.
        AFTER_UPDATE (str): Running `after_update` callbacks.
        AFTER_SAVE (str): Running `after_save` callbacks.
        SAVED (str): The last save succeeded.
        FAILED (str): The last save failed.
        DESTROYED (str): The record was removed from the store.
    """

    NEW = "new"
    VALIDATING = "validating"
    BEFORE_SAVE = "before_save"
    BEFORE_CREATE = "before_create"
    BEFORE_UPDATE = "before_update"
    WRITING = "writing"
    AFTER_CREATE = "after_create"
    AFTER_UPDATE = "after_update"
    AFTER_SAVE = "after_save"
    SAVED = "saved"
    FAILED = "failed"
    DESTROYED = "destroyed"


class CallbackHook(Enum):
    """
    Enum for the lifecycle hooks that callbacks can be attached to.
    """

    BEFORE_SAVE = "before_save"
    AFTER_SAVE = "after_save"
    BEFORE_CREATE = "before_create"
    AFTER_CREATE = "after_create"
    BEFORE_UPDATE = "before_update"
    AFTER_UPDATE = "after_update"
    BEFORE_DESTROY = "before_destroy"
    AFTER_DESTROY = "after_destroy"

    @property
    def is_before(self) -> bool:
        """Whether callbacks on this hook run ahead of the write and may halt it."""
        return self.value.startswith("before_")
