"""
Tests for the `modis/common/enums.py` module.
"""

import pytest

from modis.common.enums import CallbackHook, LifecycleState


@pytest.mark.parametrize(
    "hook, is_before",
    [
        (CallbackHook.BEFORE_SAVE, True),
        (CallbackHook.BEFORE_DESTROY, True),
        (CallbackHook.AFTER_CREATE, False),
        (CallbackHook.AFTER_UPDATE, False),
    ],
)
def test_callback_hook_is_before(hook: CallbackHook, is_before: bool):
    """
    Test telling before hooks from after hooks.

    Args:
        hook: The hook.
        is_before: Whether it runs before the operation.
    """
    assert hook.is_before is is_before


def test_callback_hooks():
    """Test the full set of hooks."""
    assert {hook.value for hook in CallbackHook} == {
        f"{when}_{event}" for when in ("before", "after") for event in ("save", "create", "update", "destroy")
    }


def test_lifecycle_state_values():
    """Test that lifecycle states are named by lowercase values."""
    assert LifecycleState("new") is LifecycleState.NEW
    assert LifecycleState.AFTER_SAVE.value == "after_save"
