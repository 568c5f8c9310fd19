"""Small runtime helpers: controller context values, error checks and nil tests."""

from __future__ import annotations

import os
import re
import traceback
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

T = TypeVar("T")


class _ContextKey:
    """Private key type so stored values never clash with user keys."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"<context key {self._name}>"


_CONTROLLER_KEY = _ContextKey("controller")

_CONTROLLER_FILENAME_PATTERN = re.compile(r"([a-z]+)_?controller\.py")


def with_controller(ctx: Optional[Mapping[Any, Any]], controller: str) -> dict[Any, Any]:
    """Return a copy of ``ctx`` that carries the given controller name."""
    new_ctx: dict[Any, Any] = dict(ctx or {})
    new_ctx[_CONTROLLER_KEY] = controller
    return new_ctx


def controller_from(ctx: Optional[Mapping[Any, Any]]) -> Optional[str]:
    """Return the controller stored in ``ctx``, or None if there is none."""
    if not ctx:
        return None
    controller = ctx.get(_CONTROLLER_KEY)
    return controller if isinstance(controller, str) else None


def get_controller(ctx: Optional[Mapping[Any, Any]]) -> str:
    """Return the controller from ``ctx``, falling back to the call stack."""
    controller = controller_from(ctx)
    if controller:
        return controller
    return get_controller_in_caller()


def get_controller_in_caller() -> str:
    """Find ``xxxcontroller.py`` or ``xxx_controller.py`` in the call stack.

    The innermost matching frame wins; an empty string means no match.
    """
    frames = reversed(traceback.extract_stack()[:-1])
    for frame in frames:
        match = _CONTROLLER_FILENAME_PATTERN.search(os.path.basename(frame.filename))
        if match:
            return match.group(1)
    return ""


def must(value: T, error: Optional[BaseException]) -> T:
    """Return ``value``, raising ``error`` instead if it is set."""
    if error is not None:
        raise error
    return value


def is_nil(value: Any) -> bool:
    """Tell whether ``value`` is None or an empty string."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return False