##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The `models` package contains the `Model` base class and everything it is
built from.

Modules:
    attributes.py: The `Attribute` descriptor and supported attribute types.
    callbacks.py: Lifecycle hook decorators and the callback runner.
    dirty.py: Snapshot-based dirty tracking.
    finders.py: Loading records from the store.
    model.py: The `Model` base class.
    namespace.py: Namespace and key resolution.
    persistence.py: The save and destroy lifecycles.
    registry.py: The per-class model registry.
    validations.py: The `Errors` collection and validators.
"""
from modis.models.attributes import Attribute
from modis.models.callbacks import (
    after_create,
    after_destroy,
    after_save,
    after_update,
    before_create,
    before_destroy,
    before_save,
    before_update,
)
from modis.models.model import Model
from modis.models.registry import REGISTRY, override_namespace
from modis.models.validations import Errors, validator


__all__ = (
    "Attribute",
    "Errors",
    "Model",
    "REGISTRY",
    "after_create",
    "after_destroy",
    "after_save",
    "after_update",
    "before_create",
    "before_destroy",
    "before_save",
    "before_update",
    "override_namespace",
    "validator",
)
