##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Modis
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Modis.
##############################################################################

"""
Lifecycle callbacks for Modis models.

Methods are attached to a hook with the decorators defined here, e.g.:

    class User(Model):
        name = Attribute("string")

        @before_save
        def strip_name(self):
            self.name = self.name.strip()

Callbacks for a hook run in the order they were registered. A `before_*`
callback that returns exactly `False` halts the chain and aborts the whole
operation; values returned by `after_*` callbacks are ignored.
"""

import logging
from typing import Any, Callable, Iterable, Union

from modis.common.enums import CallbackHook
from modis.exceptions import InvalidCallbackError


LOG = logging.getLogger(__name__)

HOOKS_ATTR = "__modis_hooks__"


class MethodCallback:
    """
    Callable handle for a callback declared as a method on the model.

    The method is looked up on the instance each time the callback runs, so
    a subclass that overrides the method changes what the callback does.

    Attributes:
        name (str): The name of the method.
    """

    def __init__(self, name: str):
        self.name: str = name

    def __call__(self, instance: Any) -> Any:
        return getattr(instance, self.name)()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MethodCallback) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"MethodCallback({self.name!r})"


def to_hook(hook: Union[str, CallbackHook]) -> CallbackHook:
    """
    Normalize a hook given by name or enum member.

    Args:
        hook: A `CallbackHook` or its value (e.g. `"before_save"`).

    Returns:
        The matching `CallbackHook`.

    Raises:
        (exceptions.InvalidCallbackError): If `hook` doesn't name a known hook.
    """
    if isinstance(hook, CallbackHook):
        return hook
    try:
        return CallbackHook(hook)
    except ValueError as exc:
        valid = ", ".join(member.value for member in CallbackHook)
        raise InvalidCallbackError(f"Unknown callback hook '{hook}'. Valid hooks: {valid}.") from exc


def _hook_decorator(hook: CallbackHook) -> Callable:
    def decorator(func: Callable) -> Callable:
        if not callable(func):
            raise InvalidCallbackError(f"Only callables can be registered as {hook.value} callbacks.")
        hooks = getattr(func, HOOKS_ATTR, ())
        setattr(func, HOOKS_ATTR, hooks + (hook,))
        return func

    decorator.__name__ = hook.value
    decorator.__doc__ = f"Register the decorated method as a `{hook.value}` callback."
    return decorator


before_save = _hook_decorator(CallbackHook.BEFORE_SAVE)
after_save = _hook_decorator(CallbackHook.AFTER_SAVE)
before_create = _hook_decorator(CallbackHook.BEFORE_CREATE)
after_create = _hook_decorator(CallbackHook.AFTER_CREATE)
before_update = _hook_decorator(CallbackHook.BEFORE_UPDATE)
after_update = _hook_decorator(CallbackHook.AFTER_UPDATE)
before_destroy = _hook_decorator(CallbackHook.BEFORE_DESTROY)
after_destroy = _hook_decorator(CallbackHook.AFTER_DESTROY)


def run_callbacks(instance: Any, hook: CallbackHook, callbacks: Iterable[Callable]) -> bool:
    """
    Run the callbacks registered for `hook` against `instance`.

    Args:
        instance: The model instance going through its lifecycle.
        hook: The hook being run.
        callbacks: The callbacks registered for `hook`, in order.

    Returns:
        False if a `before_*` callback halted the chain, True otherwise.
    """
    for callback in callbacks:
        result = callback(instance)
        if hook.is_before and result is False:
            LOG.debug(f"{callback!r} returned False, halting the {hook.value} chain for {instance!r}.")
            return False
    return True
