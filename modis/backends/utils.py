##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Utility functions for converting attribute values into strings a key-value
store can hold, and back again.

Every value is stored as JSON so that `None` and the string `"null"` can be
told apart. Decoding is driven by the attribute's declared type.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Mapping


LOG = logging.getLogger(__name__)


def serialize_value(value: Any) -> str:
    """
    Convert a single attribute value into a string for the store.

    Args:
        value: The attribute value.

    Returns:
        The JSON representation of `value`.

    Raises:
        TypeError: If `value` holds something JSON can't encode, such as a nested datetime.
        ValueError: If `value` contains a circular reference.
    """
    if isinstance(value, datetime):
        return json.dumps(value.isoformat())
    if isinstance(value, set):
        # Explicitly mark this as a set so we can properly deserialize it later.
        # Elements may be of mixed types, so order them by their repr.
        return json.dumps({"__set__": sorted(value, key=repr)})
    return json.dumps(value)


def deserialize_value(raw: str, type_name: str) -> Any:
    """
    Convert a stored string back into a value of the declared type.

    Args:
        raw: The string read from the store.
        type_name: The declared attribute type (e.g. `integer`).

    Returns:
        The decoded value.
    """
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError as exc:
        LOG.error(f"Failed to deserialize stored value {raw!r}: {exc}")
        # Use the original string value as fallback
        return raw

    if loaded is None:
        return None
    if type_name == "timestamp":
        return datetime.fromisoformat(loaded)
    if type_name == "integer":
        return int(loaded)
    if type_name == "float":
        return float(loaded)
    if type_name == "array" and isinstance(loaded, dict) and "__set__" in loaded:
        return set(loaded["__set__"])
    return loaded


def serialize_attributes(values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Serialize a mapping of attribute values.

    Args:
        values: Attribute names mapped to their values.

    Returns:
        Attribute names mapped to their serialized values.
    """
    LOG.debug("Serializing attributes...")
    return {name: serialize_value(value) for name, value in values.items()}


def deserialize_attributes(data: Mapping[str, str], attribute_types: Mapping[str, str]) -> Dict[str, Any]:
    """
    Deserialize data read from the store. Fields that aren't declared in
    `attribute_types` are skipped with a warning.

    Args:
        data: The raw field/value mapping read from the store.
        attribute_types: Declared attribute names mapped to their type names.

    Returns:
        Attribute names mapped to their decoded values.
    """
    LOG.debug("Deserializing attributes...")
    deserialized = {}
    for name, raw in data.items():
        if name not in attribute_types:
            LOG.warning(f"Field '{name}' is stored but not declared on the model. Ignoring it.")
            continue
        deserialized[name] = deserialize_value(raw, attribute_types[name])
    return deserialized
