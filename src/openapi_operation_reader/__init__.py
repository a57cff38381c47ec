"""Assemble OpenAPI operation objects from declarative endpoint metadata."""

from __future__ import annotations

from .cli import main
from .decorators import callback, operation
from .loader import MetadataLoadError, load_endpoint_table
from .model_types import OperationDescription
from .options import AssemblyOptions, ServerVariableKey
from .reader import OperationReader
from .source import EndpointDeclaration, EndpointMetadataSource, declaration_for

__all__ = [
    "AssemblyOptions",
    "EndpointDeclaration",
    "EndpointMetadataSource",
    "MetadataLoadError",
    "OperationDescription",
    "OperationReader",
    "ServerVariableKey",
    "callback",
    "declaration_for",
    "load_endpoint_table",
    "main",
    "operation",
]
