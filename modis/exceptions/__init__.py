##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Module of all Modis-specific exception types.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "ModisError",
    "RecordNotSaved",
    "RecordNotFound",
    "UnknownAttributeError",
    "UnsupportedAttributeType",
    "AttributeCoercionError",
    "InvalidCallbackError",
)


class ModisError(Exception):
    """
    Base class for every exception raised by Modis.
    """


class RecordNotSaved(ModisError):
    """
    Exception to signal that a record could not be saved. Raised by
    `save_or_raise` and `create_or_raise` when validation fails, a
    `before_*` callback halts the chain, or the write to the store fails.
    """


class RecordNotFound(ModisError):
    """
    Exception to signal that no record exists in the store for a given ID.
    """


class UnknownAttributeError(ModisError, AttributeError):
    """
    Exception to signal that an attribute name was not declared on the model.
    """


class UnsupportedAttributeType(ModisError, TypeError):
    """
    Exception to signal that an attribute was declared with a type
    Modis doesn't know how to store.
    """


class AttributeCoercionError(ModisError, TypeError):
    """
    Exception to signal that a value assigned to an attribute does not
    match the attribute's declared type.
    """


class InvalidCallbackError(ModisError, ValueError):
    """
    Exception to signal that a callback was registered for an unknown hook
    or that the registered object isn't callable.
    """
