##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
The model registry keeps one `ModelEntry` per model class. An entry holds
everything the persistence engine needs to know about the class: its
declared attributes, validators, the callbacks registered on each lifecycle
hook, an optional namespace override, and an optional store override.

Entries are created when a `Model` subclass is defined. A subclass starts
from a copy of its parent's entry; the namespace override is never inherited.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

from modis.backends.store_base import StoreBase
from modis.common.enums import CallbackHook
from modis.exceptions import ModisError
from modis.models.attributes import Attribute
from modis.models.callbacks import HOOKS_ATTR, MethodCallback
from modis.models.validations import VALIDATOR_ATTR
from modis.utils import qualname_to_namespace


LOG = logging.getLogger(__name__)


def _empty_callbacks() -> Dict[CallbackHook, List[Callable]]:
    return {hook: [] for hook in CallbackHook}


@dataclass
class ModelEntry:
    """
    Registry entry describing one model class.

    Attributes:
        model_class (type): The model class.
        attributes (Dict[str, Attribute]): Declared attributes in declaration order.
        validators (List[str]): Names of methods marked with `@validator`.
        callbacks (Dict[CallbackHook, List[Callable]]): Ordered callbacks per hook.
        namespace_override (Optional[str]): Explicit namespace, or None to use the default.
        store (Optional[StoreBase]): Store for this model, or None to use the default store.
    """

    model_class: type
    attributes: Dict[str, Attribute] = field(default_factory=dict)
    validators: List[str] = field(default_factory=list)
    callbacks: Dict[CallbackHook, List[Callable]] = field(default_factory=_empty_callbacks)
    namespace_override: Optional[str] = None
    store: Optional[StoreBase] = None

    @property
    def default_namespace(self) -> str:
        """The namespace derived from the class's nesting, e.g. `outer:inner_model`."""
        return qualname_to_namespace(self.model_class.__qualname__)

    @property
    def namespace(self) -> str:
        """The namespace in effect: the override if one is set, else the default."""
        if self.namespace_override is not None:
            return self.namespace_override
        return self.default_namespace

    @property
    def attribute_types(self) -> Dict[str, str]:
        """Declared attribute names mapped to their type names."""
        return {name: attribute.type_name for name, attribute in self.attributes.items()}

    def add_callback(self, hook: CallbackHook, callback: Callable):
        """
        Append a callback to a hook. A method callback that is already
        registered on the hook is not added twice.

        Args:
            hook: The hook to attach to.
            callback: The callable, called with the instance.
        """
        registered = self.callbacks[hook]
        if isinstance(callback, MethodCallback) and callback in registered:
            return
        registered.append(callback)


class ModelRegistry:
    """
    Registry of every model class defined in the process.

    Methods:
        register: Create (or recreate) the entry for a model class.
        get: Get the entry for a model class.
        unregister: Remove the entry for a model class.
    """

    def __init__(self):
        self._entries: Dict[type, ModelEntry] = {}

    def __contains__(self, model_class: type) -> bool:
        return model_class in self._entries

    def __iter__(self) -> Iterator[ModelEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def _parent_entry(self, model_class: type) -> Optional[ModelEntry]:
        for base in model_class.__mro__[1:]:
            if base in self._entries:
                return self._entries[base]
        return None

    def register(self, model_class: type) -> ModelEntry:
        """
        Build the entry for `model_class` from its parent's entry and the
        attributes, validators, and callbacks declared in its class body.

        Args:
            model_class: The model class being defined.

        Returns:
            The new entry.
        """
        entry = ModelEntry(model_class=model_class)
        parent = self._parent_entry(model_class)
        if parent is not None:
            entry.attributes.update(parent.attributes)
            entry.validators.extend(parent.validators)
            for hook, callbacks in parent.callbacks.items():
                entry.callbacks[hook].extend(callbacks)
            entry.store = parent.store

        for name, value in vars(model_class).items():
            if isinstance(value, Attribute):
                entry.attributes[name] = value
            if getattr(value, VALIDATOR_ATTR, False) and name not in entry.validators:
                entry.validators.append(name)
            for hook in getattr(value, HOOKS_ATTR, ()):
                entry.add_callback(hook, MethodCallback(name))

        self._entries[model_class] = entry
        LOG.debug(
            f"Registered model {model_class.__qualname__} with attributes {list(entry.attributes)} "
            f"in namespace '{entry.namespace}'."
        )
        return entry

    def get(self, model_class: type) -> ModelEntry:
        """
        Get the entry for a model class.

        Args:
            model_class: A registered model class.

        Returns:
            The class's entry.

        Raises:
            (exceptions.ModisError): If the class was never registered.
        """
        try:
            return self._entries[model_class]
        except KeyError as exc:
            raise ModisError(f"{model_class.__qualname__} is not a registered Modis model.") from exc

    def unregister(self, model_class: type):
        """
        Remove the entry for a model class, if there is one.

        Args:
            model_class: The model class to forget.
        """
        self._entries.pop(model_class, None)


REGISTRY = ModelRegistry()


def check_namespace(namespace: Optional[str]):
    """
    Ensure a namespace override can be used to build keys.

    Args:
        namespace: The override, or None for the default namespace.

    Raises:
        (exceptions.ModisError): If `namespace` is an empty or blank string.
    """
    if namespace is not None and not namespace.strip():
        raise ModisError("A model namespace can't be empty. Pass None to use the default namespace.")


@contextmanager
def override_namespace(model_class: type, namespace: Optional[str]) -> Iterator[ModelEntry]:
    """
    Temporarily set the namespace of a model class, restoring the previous
    override (or the default) on exit.

    Args:
        model_class: A registered model class.
        namespace: The namespace to use inside the block, or None for the default.

    Yields:
        The class's registry entry.
    """
    check_namespace(namespace)
    entry = REGISTRY.get(model_class)
    previous = entry.namespace_override
    entry.namespace_override = namespace
    try:
        yield entry
    finally:
        entry.namespace_override = previous
