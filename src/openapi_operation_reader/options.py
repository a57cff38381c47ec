"""Assembly options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ServerVariableKey(str, Enum):
    """Which declared field keys the server variable mapping."""

    NAME = "name"
    # Older readers registered each variable under its own description text.
    DESCRIPTION = "description"


@dataclass(frozen=True)
class AssemblyOptions:
    """Behavior switches shared by all assemblers of one reader.

    Args:
        server_variable_key (ServerVariableKey): Key used for server variables.
        strict_request_body_content (bool): Raise instead of substituting an
            empty content when a request body declares no content.
    """

    server_variable_key: ServerVariableKey = ServerVariableKey.NAME
    strict_request_body_content: bool = False


DEFAULT_OPTIONS = AssemblyOptions()
