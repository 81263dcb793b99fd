"""Render schema objects into TypeScript declarations."""

import json

from api_client_gen.naming import sanitize

PRIMITIVE_TYPES = {
    "integer": "number",
    "number": "number",
    "string": "string",
    "boolean": "boolean",
    "file": "Blob",
    "null": "null",
}

INDENT = "    "


def ref_name(ref: str) -> str | None:
    """Name referenced by a local anchor ('#Name' or '#/definitions/Name')."""
    if not ref.startswith("#"):
        return None
    if ref.startswith("#/"):
        parts = ref[2:].split("/")
        if len(parts) != 2 or parts[0] != "definitions":
            return None
        return sanitize(parts[1])
    return ref[1:]


def ts_type(schema: dict | None, depth: int = 0) -> str:
    """TypeScript type expression for a (property) schema."""
    if not isinstance(schema, dict) or not schema:
        return "any"

    if "$ref" in schema:
        return ref_name(str(schema["$ref"])) or "any"

    if "enum" in schema and all(isinstance(v, str) for v in schema["enum"]):
        return " | ".join(json.dumps(v) for v in schema["enum"]) or "never"

    schema_type = schema.get("type")
    if schema_type in PRIMITIVE_TYPES:
        return PRIMITIVE_TYPES[schema_type]

    if schema_type == "array":
        item = ts_type(schema.get("items"), depth)
        return f"({item})[]" if " " in item else f"{item}[]"

    if schema_type == "object" or "properties" in schema:
        if "properties" in schema:
            body = _property_lines(schema, depth + 1)
            closing = INDENT * depth
            return "{\n" + "\n".join(body) + f"\n{closing}}}"
        extra = schema.get("additionalProperties")
        if isinstance(extra, dict):
            return f"{{ [key: string]: {ts_type(extra, depth)} }}"
        return "{ [key: string]: any }"

    return "any"


def _property_lines(schema: dict, depth: int) -> list[str]:
    required = set(schema.get("required") or [])
    pad = INDENT * depth
    lines = []
    for name, prop in (schema.get("properties") or {}).items():
        prop = prop if isinstance(prop, dict) else {}
        if prop.get("description"):
            lines.append(f"{pad}/** {prop['description']} */")
        key = name if sanitize(name) == name else json.dumps(name)
        optional = "" if name in required else "?"
        lines.append(f"{pad}{key}{optional}: {ts_type(prop, depth)};")
    return lines


def render_schema(schema: dict, name: str | None = None) -> str:
    """Render a schema object carrying an ``id`` as an export declaration."""
    type_name = name or schema["id"]
    is_object = schema.get("type") == "object" or (
        "properties" in schema and "type" not in schema
    )
    if is_object and "additionalProperties" not in schema:
        lines = []
        if schema.get("description"):
            lines.append(f"/** {schema['description']} */")
        lines.append(f"export interface {type_name} {{")
        lines.extend(_property_lines(schema, 1))
        lines.append("}")
        return "\n".join(lines)
    return f"export type {type_name} = {ts_type(schema)};"


def render_definitions(definitions: dict[str, dict]) -> list[str]:
    """Render a document's top-level ``definitions`` table."""
    return [render_schema(schema, sanitize(name)) for name, schema in definitions.items()]
