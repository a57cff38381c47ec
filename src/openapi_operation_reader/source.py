"""Endpoint declarations and the metadata sources behind them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .annotations import Callback, Operation
from .model_types import ParameterDescription, ResponseDescription

OPERATION_ATTRIBUTE = "__openapi_operation__"
CALLBACKS_ATTRIBUTE = "__openapi_callbacks__"


class EndpointMetadataSource(Protocol):
    """Typed access to the metadata blocks declared on one endpoint."""

    def get_operation(self) -> Optional[Operation]:
        """Return the primary operation block, if declared."""
        ...

    def get_callbacks(self) -> tuple[Callback, ...]:
        """Return declared callback blocks in declaration order."""
        ...


@dataclass(frozen=True)
class DecoratedMethodSource:
    """Metadata source reading attributes set by the reader decorators."""

    method: Callable[..., Any]

    def get_operation(self) -> Optional[Operation]:
        """Return the operation attached by ``@operation``."""
        value = getattr(self.method, OPERATION_ATTRIBUTE, None)
        if isinstance(value, Operation):
            return value
        return None

    def get_callbacks(self) -> tuple[Callback, ...]:
        """Return callbacks attached by ``@callback``."""
        value = getattr(self.method, CALLBACKS_ATTRIBUTE, ())
        return tuple(item for item in value if isinstance(item, Callback))


@dataclass(frozen=True)
class EndpointDeclaration:
    """One endpoint as handed over by discovery.

    ``inherited_parameters`` and ``inherited_responses`` carry class-level
    defaults. They are accepted but not merged into the assembled operation.
    """

    declaring_type: Optional[type]
    method_name: str
    metadata: EndpointMetadataSource
    inherited_parameters: tuple[ParameterDescription, ...] = ()
    inherited_responses: tuple[ResponseDescription, ...] = ()


def declaration_for(
    method: Callable[..., Any],
    *,
    declaring_type: Optional[type] = None,
) -> EndpointDeclaration:
    """Build a declaration backed by the decorator attributes of ``method``.

    Args:
        method (Callable[..., Any]): Decorated function or method.
        declaring_type (Optional[type]): Class owning the method, if any.

    Returns:
        EndpointDeclaration: Declaration with no inherited defaults.
    """
    return EndpointDeclaration(
        declaring_type=declaring_type,
        method_name=getattr(method, "__name__", repr(method)),
        metadata=DecoratedMethodSource(method),
    )
