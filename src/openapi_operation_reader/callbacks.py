"""Callback assembly."""

from __future__ import annotations

import logging

from .annotations import Callback
from .model_types import CallbackDescription, HttpMethod, PathItemDescription
from .operation import assemble_operation
from .options import DEFAULT_OPTIONS, AssemblyOptions

logger = logging.getLogger(__name__)


def assemble_callbacks(
    callback: Callback,
    *,
    options: AssemblyOptions = DEFAULT_OPTIONS,
) -> dict[str, CallbackDescription]:
    """Build the callbacks mapping for one declared callback block.

    Each nested operation is placed on the path item slot of its declared
    method. Methods are matched case-sensitively against lowercase names and
    operations with any other method are dropped. The path item is registered
    under the callback name twice: once inside the callback and once for the
    callback itself.

    Args:
        callback (Callback): Declared callback block.
        options (AssemblyOptions): Reader options.

    Returns:
        dict[str, CallbackDescription]: Single-entry mapping keyed by the
            callback name.
    """
    path_item = PathItemDescription()
    for operation in callback.operation:
        method = HttpMethod.parse(operation.method)
        if method is None:
            logger.warning(
                "Dropping operation %r of callback %r: unsupported method %r",
                operation.operation_id,
                callback.name,
                operation.method,
            )
            continue
        method.place(path_item, assemble_operation(operation, options=options))

    path_item.ref = callback.callback_url_expression
    return {callback.name: CallbackDescription({callback.name: path_item})}
