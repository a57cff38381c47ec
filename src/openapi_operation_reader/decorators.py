"""Decorators attaching endpoint metadata to Python callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .annotations import Callback, Operation
from .source import CALLBACKS_ATTRIBUTE, OPERATION_ATTRIBUTE

F = TypeVar("F", bound=Callable[..., Any])


def operation(**fields: Any) -> Callable[[F], F]:
    """Declare the primary operation metadata of an endpoint.

    Keyword arguments are the fields of :class:`Operation`, for example
    ``summary``, ``operation_id`` or ``responses``.
    """
    metadata = Operation(**fields)

    def wrap(func: F) -> F:
        setattr(func, OPERATION_ATTRIBUTE, metadata)
        return func

    return wrap


def callback(**fields: Any) -> Callable[[F], F]:
    """Declare a callback block; stack the decorator for several callbacks.

    Keyword arguments are the fields of :class:`Callback`. Blocks keep the order
    in which they appear in the source.
    """
    metadata = Callback(**fields)

    def wrap(func: F) -> F:
        existing: tuple[Callback, ...] = getattr(func, CALLBACKS_ATTRIBUTE, ())
        # Decorators apply bottom-up; prepend to keep source order.
        setattr(func, CALLBACKS_ATTRIBUTE, (metadata, *existing))
        return func

    return wrap
