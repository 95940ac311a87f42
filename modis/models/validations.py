##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Validation support for Modis models: the `Errors` collection, presence checks
declared on attributes, and custom validator methods marked with `@validator`.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List

from modis.exceptions import UnknownAttributeError


LOG = logging.getLogger(__name__)

VALIDATOR_ATTR = "__modis_validator__"
BASE = "base"


class Errors:
    """
    Collection of validation messages, grouped by attribute name.

    Methods:
        add: Record a message for an attribute.
        full_messages: Get every message prefixed with its attribute name.
        clear: Remove every message.
    """

    def __init__(self):
        self.messages: Dict[str, List[str]] = {}

    def __bool__(self) -> bool:
        return any(self.messages.values())

    def __len__(self) -> int:
        return sum(len(messages) for messages in self.messages.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self.full_messages())

    def __contains__(self, attribute: str) -> bool:
        return bool(self.messages.get(attribute))

    def __getitem__(self, attribute: str) -> List[str]:
        return list(self.messages.get(attribute, []))

    def __repr__(self) -> str:
        return f"Errors({self.messages!r})"

    def add(self, attribute: str, message: str):
        """
        Record a message for an attribute. Use `base` for errors about the record as a whole.

        Args:
            attribute: The attribute name.
            message: The message, e.g. "can't be blank".
        """
        self.messages.setdefault(attribute, []).append(message)

    def full_messages(self) -> List[str]:
        """
        Get every message, prefixed with a readable version of its attribute name.

        Returns:
            A list of messages such as `"Name can't be blank"`.
        """
        full = []
        for attribute, messages in self.messages.items():
            for message in messages:
                if attribute == BASE:
                    full.append(message)
                else:
                    full.append(f"{attribute.replace('_', ' ').capitalize()} {message}")
        return full

    def clear(self):
        """Remove every message."""
        self.messages.clear()


def validator(func: Callable) -> Callable:
    """
    Mark a model method as a validator. It is called with no arguments
    during validation and reports problems through `self.errors.add`.
    """
    setattr(func, VALIDATOR_ATTR, True)
    return func


def is_blank(value: Any) -> bool:
    """
    Whether a value counts as blank: None, whitespace-only strings, and empty collections.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, set, tuple, dict)):
        return not value
    return False


class ValidationsMixin:
    """
    Mixin that gives models `errors` and `is_valid`.

    Methods:
        is_valid: Run every validation and report whether the record is valid.
    """

    @property
    def errors(self) -> Errors:
        """The errors found by the last call to `is_valid`."""
        return self._errors

    def is_valid(self) -> bool:
        """
        Run presence checks for attributes declared with `presence=True`,
        then every method marked with `@validator`, in declaration order.

        Returns:
            True if no errors were recorded.
        """
        entry = self._entry()
        self._errors.clear()

        for name, attribute in entry.attributes.items():
            if attribute.presence and is_blank(self.read_attribute(name)):
                self._errors.add(name, "can't be blank")

        for name in entry.validators:
            getattr(self, name)()

        if self._errors:
            LOG.debug(f"{self!r} is invalid: {', '.join(self._errors.full_messages())}")
        return not self._errors

    def _check_attribute_name(self, name: str):
        if name not in self._entry().attributes:
            raise UnknownAttributeError(f"Unknown attribute '{name}' for {type(self).__name__}.")
