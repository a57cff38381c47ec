"""Endpoint table loading.

An endpoint table is a YAML document mapping endpoint names to the metadata
blocks a decorated method would carry::

    endpoints:
      listPets:
        operation:
          operationId: listPets
          responses:
            - responseCode: "200"
        callbacks: []
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .annotations import Callback, Operation
from .source import EndpointDeclaration


class MetadataLoadError(RuntimeError):
    """Raised when an endpoint table cannot be loaded."""


class EndpointEntry(BaseModel):
    """Metadata source backed by one endpoint table entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation: Optional[Operation] = None
    callbacks: tuple[Callback, ...] = ()

    def get_operation(self) -> Optional[Operation]:
        """Return the operation block of the entry, if any."""
        return self.operation

    def get_callbacks(self) -> tuple[Callback, ...]:
        """Return the callback blocks of the entry."""
        return self.callbacks


def load_endpoint_table(path: Path) -> dict[str, EndpointDeclaration]:
    """Load endpoint declarations from a YAML endpoint table.

    Args:
        path (Path): Path to the endpoint table.

    Returns:
        dict[str, EndpointDeclaration]: Declarations keyed by endpoint name, in
            file order.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except OSError as exc:
        raise MetadataLoadError(f"Failed to read endpoint table {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise MetadataLoadError(f"Failed to parse YAML in {path}: {exc}") from exc

    return parse_endpoint_table(payload, source=str(path))


def parse_endpoint_table(payload: Any, *, source: str = "<memory>") -> dict[str, EndpointDeclaration]:
    """Validate an already-parsed endpoint table payload."""
    if not isinstance(payload, dict):
        raise MetadataLoadError(
            f"Endpoint table {source} must deserialize to a mapping, got {type(payload)!r}"
        )
    endpoints = payload.get("endpoints")
    if not isinstance(endpoints, dict):
        raise MetadataLoadError(f"Endpoint table {source} is missing an 'endpoints' mapping")

    declarations: dict[str, EndpointDeclaration] = {}
    for name, raw_entry in endpoints.items():
        try:
            entry = EndpointEntry.model_validate(raw_entry or {})
        except ValidationError as exc:
            raise MetadataLoadError(
                f"Invalid metadata for endpoint {name!r} in {source}: {exc}"
            ) from exc
        declarations[str(name)] = EndpointDeclaration(
            declaring_type=None,
            method_name=str(name),
            metadata=entry,
        )
    return declarations
