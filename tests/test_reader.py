"""Tests for the top-level operation reader."""

from __future__ import annotations

from typing import Optional

from openapi_python_client.schema import Operation as OpenAPIOperation

from openapi_operation_reader import OperationReader, callback, operation
from openapi_operation_reader.annotations import (
    ApiResponse,
    Callback,
    Content,
    ExampleObject,
    ExternalDocumentation,
    Operation,
    Parameter,
    RequestBody,
    Server,
    ServerVariable,
)
from openapi_operation_reader.model_types import (
    ContentDescription,
    OperationDescription,
    ParameterDescription,
)
from openapi_operation_reader.options import AssemblyOptions, ServerVariableKey
from openapi_operation_reader.source import EndpointDeclaration


class _StaticSource:
    def __init__(
        self,
        operation_metadata: Optional[Operation],
        callbacks: tuple[Callback, ...] = (),
    ) -> None:
        self._operation = operation_metadata
        self._callbacks = callbacks

    def get_operation(self) -> Optional[Operation]:
        return self._operation

    def get_callbacks(self) -> tuple[Callback, ...]:
        return self._callbacks


def _declaration(
    operation_metadata: Optional[Operation],
    callbacks: tuple[Callback, ...] = (),
) -> EndpointDeclaration:
    return EndpointDeclaration(
        declaring_type=None,
        method_name="endpoint",
        metadata=_StaticSource(operation_metadata, callbacks),
    )


def _full_operation() -> Operation:
    return Operation(
        summary="Update a pet",
        description="Replaces a pet record.",
        operation_id="updatePet",
        deprecated=True,
        tags=["pets", "write", "pets"],
        parameters=[Parameter(name="petId", in_="path", required=True)],
        request_body=RequestBody(
            description="New pet record",
            required=True,
            content=[
                Content(
                    media_type="application/json",
                    examples=[ExampleObject(name="cat", summary="A cat", value='{"name": "Tom"}')],
                )
            ],
        ),
        responses=[
            ApiResponse(response_code="200", description="Updated"),
            ApiResponse(response_code="default", description="Error"),
        ],
        external_docs=ExternalDocumentation(description="Guide", url="https://docs.example.com"),
        servers=[
            Server(
                url="https://{region}.example.com",
                variables=[ServerVariable(name="region", description="Region")],
            )
        ],
    )


def test_missing_operation_metadata_yields_empty_operation() -> None:
    """An unannotated endpoint gives an inert empty operation."""
    callbacks = (Callback(name="ignored", operation=[Operation(method="post")]),)

    description = OperationReader().read(_declaration(None, callbacks))

    assert description == OperationDescription()
    assert description.description is None
    assert description.summary is None
    assert description.operation_id is None
    assert description.deprecated is False
    assert description.tags == []
    assert description.parameters == []
    assert description.responses == {}
    assert description.servers == []
    assert description.callbacks == {}


def test_scalar_fields_and_sub_objects() -> None:
    """All declared metadata lands on the assembled operation."""
    description = OperationReader().read(_declaration(_full_operation()))

    assert description.summary == "Update a pet"
    assert description.description == "Replaces a pet record."
    assert description.operation_id == "updatePet"
    assert description.deprecated is True
    assert description.tags == ["pets", "write", "pets"]
    assert [parameter.name for parameter in description.parameters] == ["petId"]
    assert description.request_body is not None
    assert list(description.request_body.content.root) == ["application/json"]
    assert list(description.responses) == ["200", "default"]
    assert description.external_docs is not None
    assert description.external_docs.url == "https://docs.example.com"
    assert [server.url for server in description.servers] == ["https://{region}.example.com"]
    assert list(description.servers[0].variables) == ["region"]
    assert description.callbacks == {}


def test_defaults_still_produce_containers() -> None:
    """An operation block with only defaults still gets every container."""
    description = OperationReader().read(_declaration(Operation()))

    assert description.request_body is not None
    assert description.request_body.content == ContentDescription()
    assert description.external_docs is not None
    assert description.responses == {}
    assert description.servers == []


def test_callbacks_are_attached() -> None:
    """Each callback block registers under its name."""
    callbacks = (
        Callback(
            name="onCreated",
            callback_url_expression="{$request.body#/created}",
            operation=[Operation(method="post", operation_id="created")],
        ),
        Callback(
            name="onDeleted",
            callback_url_expression="{$request.body#/deleted}",
            operation=[Operation(method="delete", operation_id="deleted")],
        ),
    )

    description = OperationReader().read(_declaration(Operation(), callbacks))

    assert list(description.callbacks) == ["onCreated", "onDeleted"]
    created = description.callbacks["onCreated"].root["onCreated"]
    assert created.ref == "{$request.body#/created}"
    assert created.post is not None and created.post.operation_id == "created"
    deleted = description.callbacks["onDeleted"].root["onDeleted"]
    assert deleted.delete is not None and deleted.delete.operation_id == "deleted"


def test_reading_twice_gives_equal_independent_graphs() -> None:
    """Two reads are structurally equal but share no objects."""
    reader = OperationReader()
    declaration = _declaration(
        _full_operation(),
        (Callback(name="cb", operation=[Operation(method="get")]),),
    )

    first = reader.read(declaration)
    second = reader.read(declaration)

    assert first == second
    assert first is not second
    assert first.tags is not second.tags
    assert first.request_body is not second.request_body
    assert first.responses["200"] is not second.responses["200"]
    assert first.callbacks["cb"] is not second.callbacks["cb"]

    first.tags.append("mutated")
    assert second.tags == ["pets", "write", "pets"]


def test_inherited_defaults_are_not_merged() -> None:
    """Inherited parameters and responses are accepted but left out."""
    declaration = EndpointDeclaration(
        declaring_type=None,
        method_name="endpoint",
        metadata=_StaticSource(Operation()),
        inherited_parameters=(ParameterDescription(name="tenant", location="header"),),
    )

    description = OperationReader().read(declaration)

    assert description.parameters == []


def test_reader_passes_options_down() -> None:
    """Reader options reach the server assembler."""
    reader = OperationReader(
        options=AssemblyOptions(server_variable_key=ServerVariableKey.DESCRIPTION)
    )

    description = reader.read(_declaration(_full_operation()))

    assert reader.options.server_variable_key is ServerVariableKey.DESCRIPTION
    assert list(description.servers[0].variables) == ["Region"]


def test_reader_defaults_to_name_keyed_lenient_options() -> None:
    """A reader built without options keys variables by name and is lenient."""
    assert OperationReader().options == AssemblyOptions(
        server_variable_key=ServerVariableKey.NAME,
        strict_request_body_content=False,
    )


def test_decorated_method_is_read() -> None:
    """Decorators attach metadata that the reader picks up."""

    class PetResource:
        @callback(
            name="onAdopted",
            callback_url_expression="{$request.query.hook}",
            operation=[Operation(method="post", operation_id="adopted")],
        )
        @callback(
            name="onReturned",
            callback_url_expression="{$request.query.hook}",
            operation=[Operation(method="post", operation_id="returned")],
        )
        @operation(
            operation_id="adoptPet",
            tags=["pets"],
            responses=[ApiResponse(response_code="202", description="Accepted")],
        )
        def adopt(self) -> None:
            """Adopt a pet."""

    description = OperationReader().read_method(PetResource.adopt, declaring_type=PetResource)

    assert description.operation_id == "adoptPet"
    assert description.tags == ["pets"]
    assert list(description.responses) == ["202"]
    assert list(description.callbacks) == ["onAdopted", "onReturned"]


def test_undecorated_method_is_inert() -> None:
    """A plain function yields an empty operation."""

    def plain() -> None:
        """Not an endpoint."""

    assert OperationReader().read_method(plain) == OperationDescription()


def test_dump_conforms_to_openapi_operation_model() -> None:
    """The serialized operation validates against an independent OpenAPI model."""
    metadata = _full_operation().model_copy(update={"servers": ()})

    dumped = (
        OperationReader()
        .read(_declaration(metadata))
        .model_dump(mode="json", by_alias=True, exclude_none=True)
    )
    validated = OpenAPIOperation.model_validate(dumped)

    assert validated.model_dump(by_alias=True, exclude_none=True)["operationId"] == "updatePet"
    assert dumped["requestBody"]["content"]["application/json"]["examples"]["cat"] == {
        "description": "cat",
        "summary": "A cat",
        "externalValue": "",
        "value": '{"name": "Tom"}',
    }
    assert set(dumped["responses"]) == {"200", "default"}
