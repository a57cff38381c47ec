"""External documentation assembly."""

from __future__ import annotations

from .annotations import Operation
from .model_types import ExternalDocsDescription


def assemble_external_docs(operation: Operation) -> ExternalDocsDescription:
    """Copy the external docs block, present even when left at its defaults."""
    external_docs = operation.external_docs
    return ExternalDocsDescription(
        description=external_docs.description,
        url=external_docs.url,
    )
