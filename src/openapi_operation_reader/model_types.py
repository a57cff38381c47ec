"""OpenAPI description records produced by the reader."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class _Description(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ParameterStyle(str, Enum):
    """Serialization styles allowed for a parameter value."""

    MATRIX = "matrix"
    LABEL = "label"
    FORM = "form"
    SIMPLE = "simple"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"

    @classmethod
    def parse(cls, raw: str) -> Optional[ParameterStyle]:
        """Return the style matching ``raw`` by value or member name, if any."""
        text = raw.strip()
        for style in cls:
            if text in (style.value, style.name):
                return style
        return None


class ExampleDescription(_Description):
    description: Optional[str] = None
    summary: Optional[str] = None
    external_value: Optional[str] = Field(default=None, alias="externalValue")
    value: Optional[str] = None


class MediaTypeDescription(_Description):
    examples: dict[str, ExampleDescription] = Field(default_factory=dict)


class ContentDescription(RootModel[dict[str, MediaTypeDescription]]):
    """Media type string to media type description."""

    root: dict[str, MediaTypeDescription] = Field(default_factory=dict)


class ParameterDescription(_Description):
    name: Optional[str] = None
    location: Optional[str] = Field(default=None, alias="in")
    description: Optional[str] = None
    required: bool = False
    deprecated: bool = False
    style: Optional[ParameterStyle] = None
    allow_empty_value: bool = Field(default=False, alias="allowEmptyValue")
    allow_reserved: bool = Field(default=False, alias="allowReserved")
    explode: bool = False


class RequestBodyDescription(_Description):
    description: Optional[str] = None
    required: bool = False
    content: ContentDescription = Field(default_factory=ContentDescription)


class ResponseDescription(_Description):
    description: Optional[str] = None
    content: ContentDescription = Field(default_factory=ContentDescription)


class ServerVariableDescription(_Description):
    description: Optional[str] = None


class ServerDescription(_Description):
    url: Optional[str] = None
    description: Optional[str] = None
    variables: dict[str, ServerVariableDescription] = Field(default_factory=dict)


class ExternalDocsDescription(_Description):
    description: Optional[str] = None
    url: Optional[str] = None


class LinkDescription(_Description):
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    operation_ref: Optional[str] = Field(default=None, alias="operationRef")
    description: Optional[str] = None
    parameters: dict[str, str] = Field(default_factory=dict)


class OperationDescription(_Description):
    """A single API operation.

    Collections are never ``None``. ``request_body`` and ``external_docs`` stay
    ``None`` only for an endpoint that declared no operation metadata at all.
    """

    description: Optional[str] = None
    summary: Optional[str] = None
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    deprecated: bool = False
    tags: list[str] = Field(default_factory=list)
    parameters: list[ParameterDescription] = Field(default_factory=list)
    request_body: Optional[RequestBodyDescription] = Field(default=None, alias="requestBody")
    responses: dict[str, ResponseDescription] = Field(default_factory=dict)
    servers: list[ServerDescription] = Field(default_factory=list)
    external_docs: Optional[ExternalDocsDescription] = Field(default=None, alias="externalDocs")
    callbacks: dict[str, CallbackDescription] = Field(default_factory=dict)


class PathItemDescription(_Description):
    """Operations bound to one path expression, at most one per HTTP method."""

    ref: Optional[str] = Field(default=None, alias="$ref")
    get: Optional[OperationDescription] = None
    put: Optional[OperationDescription] = None
    post: Optional[OperationDescription] = None
    delete: Optional[OperationDescription] = None
    options: Optional[OperationDescription] = None
    head: Optional[OperationDescription] = None
    patch: Optional[OperationDescription] = None
    trace: Optional[OperationDescription] = None


class CallbackDescription(RootModel[dict[str, PathItemDescription]]):
    """Callback name to the path item invoked for it."""

    root: dict[str, PathItemDescription] = Field(default_factory=dict)


class HttpMethod(str, Enum):
    """HTTP methods that own a slot on :class:`PathItemDescription`."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"

    @classmethod
    def parse(cls, raw: str) -> Optional[HttpMethod]:
        """Return the method whose value equals ``raw`` exactly, if any."""
        for method in cls:
            if raw == method.value:
                return method
        return None

    def place(self, path_item: PathItemDescription, operation: OperationDescription) -> None:
        """Attach ``operation`` to this method's slot of ``path_item``."""
        setattr(path_item, self.value, operation)


OperationDescription.model_rebuild()
PathItemDescription.model_rebuild()
CallbackDescription.model_rebuild()
