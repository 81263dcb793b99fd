"""Type definitions for an operation's parameter groups and responses.

Two kinds of output are produced:

* structured schema objects (``{"id", "type", "properties", "required"}``)
  which the schema renderer turns into interfaces later, and
* free-standing ``export type`` alias lines for responses that have no
  usable object schema.
"""

import re
from enum import Enum

from api_client_gen.naming import sanitize
from api_client_gen.parser.base import Operation, Parameter, Response
from api_client_gen.generator.parameters import ParameterGroups
from api_client_gen.generator.status import status_name

LOCAL_REF = re.compile(r"^#(?!/)")


class ResponseKind(Enum):
    ABSENT = "absent"
    OBJECT = "object"
    LOCAL_REF = "local_ref"
    OTHER = "other"


def parameter_type_name(operation: Operation, group: str) -> str:
    """Name of the generated type for a parameter group, e.g. 'GetPetsQueryParameter'."""
    return sanitize(f"{operation.operation_id or ''}{group}Parameter")


def response_type_name(operation: Operation, status: str) -> str:
    """Name of the generated type for one response status."""
    return sanitize(f"{operation.operation_id or ''}{status_name(status)}Response")


def parameter_schema(name: str, parameters: tuple[Parameter, ...]) -> dict:
    """Build the object schema for a query, header or cookie group."""
    properties = {}
    required = []
    for param in parameters:
        properties[param.name] = {
            "description": param.description,
            "type": param.type,
        }
        if param.required:
            required.append(param.name)
    return {"id": name, "type": "object", "properties": properties, "required": required}


def parameter_schemas(operation: Operation, groups: ParameterGroups) -> list[dict]:
    """Emit one schema per non-empty group, in query/header/cookie/body order."""
    schemas = []
    for group, params in (("Query", groups.query), ("Header", groups.header), ("Cookie", groups.cookie)):
        if params:
            schemas.append(parameter_schema(parameter_type_name(operation, group), params))
    if groups.body is not None:
        body_schema = dict(groups.body.schema_ or {})
        body_schema["id"] = parameter_type_name(operation, "Body")
        schemas.append(body_schema)
    return schemas


def response_kind(response: Response) -> ResponseKind:
    schema = response.schema_
    if schema is None:
        return ResponseKind.ABSENT
    if schema.get("type") == "object":
        return ResponseKind.OBJECT
    ref = schema.get("$ref")
    if isinstance(ref, str) and LOCAL_REF.match(ref):
        return ResponseKind.LOCAL_REF
    return ResponseKind.OTHER


def unsupported_kind(schema: dict) -> str:
    """Describe a schema shape that cannot be turned into a type yet."""
    if schema.get("type"):
        return str(schema["type"])
    if schema.get("$ref"):
        return f"$ref {schema['$ref']}"
    return "unknown"


def response_definitions(operation: Operation) -> tuple[list[str], list[dict]]:
    """Emit (alias lines, schema objects) for every response status.

    Exactly one of the two lists receives an entry per status.
    """
    definitions: list[str] = []
    schemas: list[dict] = []
    for status, response in operation.responses.items():
        type_name = response_type_name(operation, status)
        kind = response_kind(response)
        if kind is ResponseKind.ABSENT:
            definitions.append(f"export type {type_name} = any; // no schema")
        elif kind is ResponseKind.OBJECT:
            schemas.append({**response.schema_, "id": type_name})
        elif kind is ResponseKind.LOCAL_REF:
            definitions.append(f"export type {type_name} = {response.schema_['$ref'][1:]};")
        elif kind is ResponseKind.OTHER:
            definitions.append(f"export type {type_name} = any; // TODO {unsupported_kind(response.schema_)}")
        else:
            raise AssertionError(f"unhandled response kind {kind}")
    return definitions, schemas
