"""Declarative endpoint metadata records.

These records are the input contract of the reader: every recognized field with
its schema-defined default. Field names are snake_case; camelCase aliases are
accepted so endpoint tables can use OpenAPI-style keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Metadata(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        # YAML reads unquoted status codes as integers.
        coerce_numbers_to_str=True,
    )


class ExampleObject(_Metadata):
    """One named payload example."""

    name: str = ""
    summary: str = ""
    value: str = ""
    external_value: str = ""


class Content(_Metadata):
    """Examples declared for a single media type."""

    media_type: str = ""
    examples: tuple[ExampleObject, ...] = ()


class Parameter(_Metadata):
    """A query, path, header or cookie parameter."""

    name: str = ""
    in_: str = Field(default="", alias="in")
    description: str = ""
    required: bool = False
    deprecated: bool = False
    allow_empty_value: bool = False
    style: str = ""
    explode: bool = False
    allow_reserved: bool = False


class RequestBody(_Metadata):
    """Request body block; several contents may be declared."""

    description: str = ""
    content: tuple[Content, ...] = ()
    required: bool = False


class ApiResponse(_Metadata):
    """One response keyed by status code or ``default``."""

    response_code: str = "default"
    description: str = ""
    content: Content = Field(default_factory=Content)


class ServerVariable(_Metadata):
    """Substitution variable for a server URL template."""

    name: str = ""
    allowable_values: tuple[str, ...] = ()
    default_value: str = ""
    description: str = ""


class Server(_Metadata):
    """Alternative server for an operation."""

    url: str = ""
    description: str = ""
    variables: tuple[ServerVariable, ...] = ()


class ExternalDocumentation(_Metadata):
    """Pointer to documentation hosted elsewhere."""

    description: str = ""
    url: str = ""


class LinkParameters(_Metadata):
    """Named runtime expression passed to a linked operation."""

    name: str = ""
    expression: str = ""


class Link(_Metadata):
    """Design-time link from a response to another operation."""

    name: str = ""
    operation_ref: str = ""
    operation_id: str = ""
    parameters: LinkParameters = Field(default_factory=LinkParameters)
    description: str = ""


class Operation(_Metadata):
    """Primary metadata block of an endpoint.

    ``method`` is only meaningful for operations nested in a :class:`Callback`,
    where it selects the path-item slot.
    """

    method: str = ""
    tags: tuple[str, ...] = ()
    summary: str = ""
    description: str = ""
    request_body: RequestBody = Field(default_factory=RequestBody)
    external_docs: ExternalDocumentation = Field(default_factory=ExternalDocumentation)
    operation_id: str = ""
    parameters: tuple[Parameter, ...] = ()
    responses: tuple[ApiResponse, ...] = ()
    deprecated: bool = False
    servers: tuple[Server, ...] = ()


class Callback(_Metadata):
    """Out-of-band operations invoked against a caller-supplied URL."""

    name: str = ""
    callback_url_expression: str = ""
    operation: tuple[Operation, ...] = ()


__all__ = [
    "ApiResponse",
    "Callback",
    "Content",
    "ExampleObject",
    "ExternalDocumentation",
    "Link",
    "LinkParameters",
    "Operation",
    "Parameter",
    "RequestBody",
    "Server",
    "ServerVariable",
]
