"""
Tests for the `modis/exceptions/__init__.py` module.
"""

import pytest

from modis.exceptions import (
    AttributeCoercionError,
    InvalidCallbackError,
    ModisError,
    RecordNotFound,
    RecordNotSaved,
    UnknownAttributeError,
    UnsupportedAttributeType,
)


@pytest.mark.parametrize(
    "exception, builtin",
    [
        (RecordNotSaved, Exception),
        (RecordNotFound, Exception),
        (UnknownAttributeError, AttributeError),
        (UnsupportedAttributeType, TypeError),
        (AttributeCoercionError, TypeError),
        (InvalidCallbackError, ValueError),
    ],
)
def test_exception_hierarchy(exception: type, builtin: type):
    """
    Test that every exception can be caught as a `ModisError` and as the matching builtin.

    Args:
        exception: The Modis exception class.
        builtin: The builtin it also derives from.
    """
    assert issubclass(exception, ModisError)
    assert issubclass(exception, builtin)


def test_message_kept():
    """Test that the message passed in is the exception's text."""
    assert str(RecordNotSaved("MockModel could not be saved")) == "MockModel could not be saved"
