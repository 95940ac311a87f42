##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
This module defines `Attribute`, the descriptor used to declare the stored
attributes of a Modis model, and the closed set of types an attribute may have.
"""

import logging
from copy import deepcopy
from datetime import datetime
from typing import Any, Dict, Tuple

from modis.exceptions import AttributeCoercionError, UnsupportedAttributeType


LOG = logging.getLogger(__name__)

ATTRIBUTE_TYPES: Dict[str, Tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "float": (float, int),
    "boolean": (bool,),
    "timestamp": (datetime,),
    "array": (list, set),
    "hash": (dict,),
}


class Attribute:
    """
    Descriptor for a stored model attribute.

    Reading the attribute on an instance returns its current value; assigning
    to it goes through the model's `write_attribute`, which type-checks the
    value. `None` is accepted for every type.

    Attributes:
        name (str): The attribute name, filled in when the owning class is created.
        type_name (str): One of the keys of `ATTRIBUTE_TYPES`.
        default (Any): The default value, or a zero-argument callable producing it.
        presence (bool): Whether the attribute must be non-blank for the model to be valid.

    Methods:
        default_value: Produce the default value for a new instance.
        check: Ensure a value is acceptable for this attribute.
    """

    def __init__(self, type_name: str = "string", default: Any = None, presence: bool = False):
        """
        Args:
            type_name: One of `string`, `integer`, `float`, `boolean`, `timestamp`, `array`, `hash`.
            default: The default value, or a callable returning it.
            presence: If True, a blank value makes the model invalid.

        Raises:
            (exceptions.UnsupportedAttributeType): If `type_name` is not a known type.
        """
        if type_name not in ATTRIBUTE_TYPES:
            raise UnsupportedAttributeType(
                f"Unsupported attribute type '{type_name}'. Supported types: {', '.join(ATTRIBUTE_TYPES)}."
            )
        self.name: str = None
        self.type_name: str = type_name
        self.default: Any = default
        self.presence: bool = presence

    def __set_name__(self, owner: type, name: str):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.read_attribute(self.name)

    def __set__(self, instance, value: Any):
        instance.write_attribute(self.name, value)

    def __repr__(self) -> str:
        return f"Attribute(name={self.name!r}, type_name={self.type_name!r}, default={self.default!r})"

    def default_value(self) -> Any:
        """
        Produce the default value for a new instance. Callable defaults are
        called; mutable defaults are copied so instances never share them.

        Returns:
            The default value.
        """
        if callable(self.default):
            return self.default()
        return deepcopy(self.default)

    def check(self, value: Any):
        """
        Ensure `value` is acceptable for this attribute.

        Args:
            value: The value about to be assigned.

        Raises:
            (exceptions.AttributeCoercionError): If the value doesn't match the declared type.
        """
        if value is None:
            return
        accepted = ATTRIBUTE_TYPES[self.type_name]
        # bool is a subclass of int but it isn't a number here
        if isinstance(value, bool) and self.type_name != "boolean":
            accepted = ()
        if not isinstance(value, accepted):
            raise AttributeCoercionError(
                f"Attribute '{self.name}' is declared as {self.type_name} but got "
                f"{type(value).__name__} {value!r}."
            )
