"""Operation field population shared by top-level and callback operations."""

from __future__ import annotations

from .annotations import Operation
from .external_docs import assemble_external_docs
from .model_types import OperationDescription
from .options import DEFAULT_OPTIONS, AssemblyOptions
from .parameters import assemble_parameters
from .request_body import assemble_request_body
from .responses import assemble_responses
from .servers import assemble_servers


def assemble_operation(
    operation: Operation,
    *,
    options: AssemblyOptions = DEFAULT_OPTIONS,
) -> OperationDescription:
    """Build an operation description from one operation block.

    Every sub-assembler runs unconditionally, so sub-objects without declared
    metadata come back empty rather than missing. Callbacks are not handled
    here.

    Args:
        operation (Operation): Declared operation metadata.
        options (AssemblyOptions): Reader options.

    Returns:
        OperationDescription: Operation description without callbacks.
    """
    return OperationDescription(
        description=operation.description,
        summary=operation.summary,
        operation_id=operation.operation_id,
        deprecated=operation.deprecated,
        tags=list(operation.tags),
        responses=assemble_responses(operation.responses),
        request_body=assemble_request_body(operation, options=options),
        external_docs=assemble_external_docs(operation),
        servers=assemble_servers(operation, options=options),
        parameters=assemble_parameters(operation),
    )
