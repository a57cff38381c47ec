"""Request body assembly."""

from __future__ import annotations

import logging

from .annotations import Operation
from .content import assemble_contents
from .model_types import ContentDescription, RequestBodyDescription
from .options import DEFAULT_OPTIONS, AssemblyOptions

logger = logging.getLogger(__name__)


class EmptyRequestBodyContentError(RuntimeError):
    """Raised in strict mode when a request body declares no content."""


def assemble_request_body(
    operation: Operation,
    *,
    options: AssemblyOptions = DEFAULT_OPTIONS,
) -> RequestBodyDescription:
    """Build the request body description of an operation.

    The model holds a single content, so only the first declared content is
    kept. A request body without declared content gets an empty content unless
    ``options.strict_request_body_content`` is set.

    Args:
        operation (Operation): Operation metadata carrying the request body.
        options (AssemblyOptions): Reader options.

    Returns:
        RequestBodyDescription: Request body description, never ``None``.
    """
    request_body = operation.request_body
    contents = assemble_contents(request_body.content)
    if contents:
        content = contents[0]
        if len(contents) > 1:
            logger.debug(
                "Keeping first of %d request body contents for operation %r",
                len(contents),
                operation.operation_id,
            )
    elif options.strict_request_body_content:
        raise EmptyRequestBodyContentError(
            f"Request body of operation {operation.operation_id!r} declares no content"
        )
    else:
        content = ContentDescription()

    return RequestBodyDescription(
        description=request_body.description,
        required=request_body.required,
        content=content,
    )
