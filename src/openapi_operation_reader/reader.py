"""Top-level operation reader."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Optional

from .callbacks import assemble_callbacks
from .model_types import CallbackDescription, OperationDescription
from .operation import assemble_operation
from .options import DEFAULT_OPTIONS, AssemblyOptions
from .source import EndpointDeclaration, declaration_for

logger = logging.getLogger(__name__)


class OperationReader:
    """Assemble OpenAPI operation descriptions from endpoint declarations."""

    def __init__(self, *, options: AssemblyOptions = DEFAULT_OPTIONS) -> None:
        self._options = options

    @property
    def options(self) -> AssemblyOptions:
        """Options applied to every assembly."""
        return self._options

    def read(self, declaration: EndpointDeclaration) -> OperationDescription:
        """Assemble the operation described by one endpoint declaration.

        An endpoint without operation metadata yields an empty operation.
        Callback blocks are only read when operation metadata is present.

        Args:
            declaration (EndpointDeclaration): Endpoint to describe.

        Returns:
            OperationDescription: Freshly built operation description.
        """
        operation = declaration.metadata.get_operation()
        if operation is None:
            logger.debug("No operation metadata on %s", _qualified_name(declaration))
            return OperationDescription()

        description = assemble_operation(operation, options=self._options)
        callbacks: dict[str, CallbackDescription] = {}
        for callback in declaration.metadata.get_callbacks():
            callbacks.update(assemble_callbacks(callback, options=self._options))
        description.callbacks = callbacks

        logger.debug(
            "Assembled operation %r from %s with %d callback(s)",
            operation.operation_id,
            _qualified_name(declaration),
            len(callbacks),
        )
        return description

    def read_method(
        self,
        method: Callable[..., Any],
        *,
        declaring_type: Optional[type] = None,
    ) -> OperationDescription:
        """Assemble the operation declared by decorators on ``method``."""
        return self.read(declaration_for(method, declaring_type=declaring_type))


def _qualified_name(declaration: EndpointDeclaration) -> str:
    if declaration.declaring_type is None:
        return declaration.method_name
    return f"{declaration.declaring_type.__qualname__}.{declaration.method_name}"
