##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module defines `Model`, the base class for every Redis-backed Modis model.

Example:
    class Outer:
        class InnerModel(Model):
            name = Attribute("string", default="Ian", presence=True)

            @before_create
            def announce(self):
                LOG.info(f"creating {self.name}")

    record = Outer.InnerModel.create_or_raise(name="Kyle")
    record.key  # "modis:outer:inner_model:1"
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from modis.common.enums import CallbackHook, LifecycleState
from modis.exceptions import InvalidCallbackError, ModisError
from modis.models.callbacks import to_hook
from modis.models.dirty import DirtyTrackingMixin
from modis.models.finders import FindersMixin
from modis.models.namespace import NamespaceMixin
from modis.models.persistence import PersistenceMixin
from modis.models.registry import REGISTRY, ModelEntry
from modis.models.validations import Errors, ValidationsMixin


LOG = logging.getLogger(__name__)


class Model(ValidationsMixin, DirtyTrackingMixin, NamespaceMixin, FindersMixin, PersistenceMixin):
    """
    Base class for Modis models. Subclasses declare `Attribute`s in their
    class body and are registered in the model registry when defined.

    Attributes:
        id (Optional[int]): The ID assigned by the store on first save.

    Methods:
        register_callback: Attach a callable to a lifecycle hook.
        attribute_names: The declared attribute names.
        read_attribute: Get an attribute's value.
        write_attribute: Set an attribute's value.
        assign_attributes: Set several attributes at once.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        entry = REGISTRY.register(cls)
        reserved = set(dir(Model))
        clashes = [name for name in entry.attributes if name in reserved or name == "id"]
        if clashes:
            REGISTRY.unregister(cls)
            raise ModisError(f"{cls.__qualname__} declares attributes that clash with the Model API: {clashes}.")

    def __init__(self, **attributes: Any):
        """
        Build a new record. Defaults are applied first, then `attributes`
        override them. Values that differ from the defaults count as changes.

        Args:
            **attributes: Declared attribute names mapped to their values.

        Raises:
            (exceptions.UnknownAttributeError): If an attribute isn't declared.
            (exceptions.AttributeCoercionError): If a value doesn't match its declared type.
        """
        entry = self._entry()
        self._id: Optional[int] = None
        self._destroyed: bool = False
        self._state: LifecycleState = LifecycleState.NEW
        self._errors: Errors = Errors()
        self._previous_changes: Dict = {}
        self._attributes: Dict[str, Any] = {name: attr.default_value() for name, attr in entry.attributes.items()}
        self._take_snapshot()
        self.assign_attributes(attributes)

    def __repr__(self) -> str:
        attrs = ", ".join(f"{name}={value!r}" for name, value in self._attributes.items())
        return f"{type(self).__name__}(id={self._id!r}, {attrs})"

    @classmethod
    def _entry(cls) -> ModelEntry:
        return REGISTRY.get(cls)

    @classmethod
    def attribute_names(cls) -> List[str]:
        return list(cls._entry().attributes)

    @classmethod
    def register_callback(cls, hook: Union[str, CallbackHook], callback: Callable):
        """
        Attach a callable to a lifecycle hook of this model class. It is
        called with the instance as its only argument, after any callbacks
        already registered on the hook.

        Args:
            hook: The hook, by name (e.g. `"after_save"`) or `CallbackHook` member.
            callback: The callable to run.

        Raises:
            (exceptions.InvalidCallbackError): If the hook is unknown or `callback` isn't callable.
        """
        hook = to_hook(hook)
        if not callable(callback):
            raise InvalidCallbackError(f"{callback!r} is not callable and can't be a {hook.value} callback.")
        cls._entry().add_callback(hook, callback)

    @property
    def id(self) -> Optional[int]:  # pylint: disable=invalid-name
        return self._id

    @property
    def attributes(self) -> Dict[str, Any]:
        """A copy of the current attribute values."""
        return dict(self._attributes)

    def read_attribute(self, name: str) -> Any:
        self._check_attribute_name(name)
        return self._attributes[name]

    def write_attribute(self, name: str, value: Any):
        """
        Set an attribute's value after checking it against the declared type.

        Raises:
            (exceptions.UnknownAttributeError): If `name` isn't declared.
            (exceptions.AttributeCoercionError): If `value` doesn't match the declared type.
        """
        self._check_attribute_name(name)
        self._entry().attributes[name].check(value)
        self._attributes[name] = value

    def assign_attributes(self, attributes: Mapping[str, Any]):
        for name, value in attributes.items():
            self.write_attribute(name, value)
