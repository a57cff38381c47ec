"""Server assembly."""

from __future__ import annotations

from .annotations import Operation, Server, ServerVariable
from .model_types import ServerDescription, ServerVariableDescription
from .options import DEFAULT_OPTIONS, AssemblyOptions, ServerVariableKey


def assemble_servers(
    operation: Operation,
    *,
    options: AssemblyOptions = DEFAULT_OPTIONS,
) -> list[ServerDescription]:
    """Build one server description per declared server.

    Args:
        operation (Operation): Operation metadata carrying the servers.
        options (AssemblyOptions): Reader options; ``server_variable_key``
            selects whether variables are keyed by name or by description.

    Returns:
        list[ServerDescription]: Servers in declaration order.
    """
    return [
        _server_from_annotation(server, key=options.server_variable_key)
        for server in operation.servers
    ]


def _server_from_annotation(server: Server, *, key: ServerVariableKey) -> ServerDescription:
    variables: dict[str, ServerVariableDescription] = {}
    for variable in server.variables:
        variables[_variable_key(variable, key)] = ServerVariableDescription(
            description=variable.description,
        )
    return ServerDescription(
        url=server.url,
        description=server.description,
        variables=variables,
    )


def _variable_key(variable: ServerVariable, key: ServerVariableKey) -> str:
    if key is ServerVariableKey.DESCRIPTION:
        return variable.description
    return variable.name
