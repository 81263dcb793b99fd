from api_client_gen.parser.base import Operation, Parameter, Response
from api_client_gen.generator.definitions import (
    ResponseKind,
    parameter_schemas,
    parameter_type_name,
    response_definitions,
    response_kind,
    response_type_name,
)
from api_client_gen.generator.parameters import classify_parameters


def _op(**kwargs) -> Operation:
    return Operation(operationId=kwargs.pop("operationId", "GetWidget"), **kwargs)


class TestTypeNames:
    def test_parameter_type_name(self):
        assert parameter_type_name(_op(), "Query") == "GetWidgetQueryParameter"

    def test_parameter_type_name_is_sanitized(self):
        assert parameter_type_name(_op(operationId="get-widget"), "Body") == "get_widgetBodyParameter"

    def test_response_type_name(self):
        assert response_type_name(_op(), "404") == "GetWidgetNotFoundResponse"
        assert response_type_name(_op(), "418") == "GetWidgetUNKNOWNResponse"

    def test_missing_operation_id(self):
        assert response_type_name(Operation(), "200") == "OKResponse"


class TestParameterSchemas:
    def test_query_schema(self):
        op = _op(parameters=[
            Parameter(name="limit", location="query", type="integer", description="page size", required=True),
            Parameter(name="sort", location="query", type="string"),
        ])
        [schema] = parameter_schemas(op, classify_parameters(op))
        assert schema == {
            "id": "GetWidgetQueryParameter",
            "type": "object",
            "properties": {
                "limit": {"description": "page size", "type": "integer"},
                "sort": {"description": "", "type": "string"},
            },
            "required": ["limit"],
        }

    def test_header_and_cookie_use_their_own_parameters(self):
        op = _op(parameters=[
            Parameter(name="q", location="query", type="string"),
            Parameter(name="X-Trace", location="header", type="string", required=True),
            Parameter(name="session", location="cookie", type="string"),
        ])
        schemas = parameter_schemas(op, classify_parameters(op))
        by_id = {s["id"]: s for s in schemas}
        assert list(by_id) == ["GetWidgetQueryParameter", "GetWidgetHeaderParameter", "GetWidgetCookieParameter"]
        assert list(by_id["GetWidgetHeaderParameter"]["properties"]) == ["X-Trace"]
        assert by_id["GetWidgetHeaderParameter"]["required"] == ["X-Trace"]
        assert list(by_id["GetWidgetCookieParameter"]["properties"]) == ["session"]
        assert by_id["GetWidgetCookieParameter"]["required"] == []

    def test_empty_groups_emit_nothing(self):
        op = _op(parameters=[Parameter(name="id", location="path", type="string")])
        assert parameter_schemas(op, classify_parameters(op)) == []

    def test_body_schema_reused_and_stamped(self):
        body_schema = {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]}
        op = _op(parameters=[Parameter(name="widget", location="body", schema=body_schema)])
        [schema] = parameter_schemas(op, classify_parameters(op))
        assert schema["id"] == "GetWidgetBodyParameter"
        assert schema["properties"] == body_schema["properties"]

    def test_body_schema_input_not_mutated(self):
        op = _op(parameters=[Parameter(name="widget", location="body", schema={"type": "object"})])
        parameter_schemas(op, classify_parameters(op))
        assert "id" not in op.parameters[0].schema_


class TestResponseKind:
    def test_absent(self):
        assert response_kind(Response()) is ResponseKind.ABSENT

    def test_object(self):
        assert response_kind(Response(schema={"type": "object"})) is ResponseKind.OBJECT

    def test_local_ref(self):
        assert response_kind(Response(schema={"$ref": "#Widget"})) is ResponseKind.LOCAL_REF

    def test_slash_ref_is_other(self):
        assert response_kind(Response(schema={"$ref": "#/definitions/Widget"})) is ResponseKind.OTHER

    def test_array_is_other(self):
        assert response_kind(Response(schema={"type": "array"})) is ResponseKind.OTHER


class TestResponseDefinitions:
    def test_local_reference_alias(self):
        op = _op(responses={"200": {"schema": {"$ref": "#Widget"}}})
        definitions, schemas = response_definitions(op)
        assert definitions == ["export type GetWidgetOKResponse = Widget;"]
        assert schemas == []

    def test_no_schema(self):
        definitions, _ = response_definitions(_op(responses={"204": {}}))
        assert definitions == ["export type GetWidgetNoContentResponse = any; // no schema"]

    def test_object_schema_registered(self):
        schema = {"type": "object", "properties": {"message": {"type": "string"}}}
        op = _op(responses={"400": {"schema": schema}})
        definitions, schemas = response_definitions(op)
        assert definitions == []
        assert schemas == [{**schema, "id": "GetWidgetBadRequestResponse"}]
        assert "id" not in op.responses["400"].schema_

    def test_unsupported_schema_is_marked(self):
        op = _op(responses={"200": {"schema": {"type": "array", "items": {"type": "string"}}}})
        definitions, _ = response_definitions(op)
        assert definitions == ["export type GetWidgetOKResponse = any; // TODO array"]

    def test_unsupported_ref_is_marked(self):
        op = _op(responses={"500": {"schema": {"$ref": "#/definitions/Error"}}})
        definitions, _ = response_definitions(op)
        assert definitions == [
            "export type GetWidgetInternalServerErrorResponse = any; // TODO $ref #/definitions/Error"
        ]

    def test_one_definition_per_status(self):
        op = _op(responses={
            "200": {"schema": {"type": "object"}},
            "201": {"schema": {"$ref": "#Widget"}},
            "404": {},
            "500": {"schema": {"type": "string"}},
        })
        definitions, schemas = response_definitions(op)
        assert len(definitions) + len(schemas) == 4
