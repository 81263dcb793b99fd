"""Swagger 2.0 document loader.

Reads a Swagger document (YAML or JSON) and yields its operations as
Operation models, one per path + HTTP method.
"""

from collections.abc import Iterator
from pathlib import Path

import yaml

from .base import Operation, SwaggerDocument

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")

PARAMETER_REF_PREFIX = "#/parameters/"


class DocumentError(ValueError):
    """The input file is not a usable Swagger document."""


def load_document(file_path: Path) -> SwaggerDocument:
    """Load a Swagger file from disk."""
    text = file_path.read_text(encoding="utf-8")
    return parse_document(yaml.safe_load(text))


def parse_document(data: object) -> SwaggerDocument:
    """Build a SwaggerDocument from an already decoded mapping."""
    if not isinstance(data, dict):
        raise DocumentError("document root must be a mapping")

    version = data.get("swagger", data.get("openapi"))
    if version is None:
        raise DocumentError("missing 'swagger' version marker")

    paths = data.get("paths") or {}
    if not isinstance(paths, dict):
        raise DocumentError("'paths' must be a mapping")
    for path, item in paths.items():
        if not isinstance(item, dict):
            raise DocumentError(f"path item for {path!r} must be a mapping")

    openapi = data.get("openapi")
    return SwaggerDocument(
        swagger=str(version),
        openapi=None if openapi is None else str(openapi),
        basePath=data.get("basePath") or "",
        paths=paths,
        parameters=data.get("parameters") or {},
        definitions=data.get("definitions") or {},
    )


def iter_operations(doc: SwaggerDocument) -> Iterator[tuple[str, str, Operation]]:
    """Yield (path, method, operation) in document order.

    Parameters given as ``$ref: '#/parameters/<name>'`` are replaced by the
    shared definition; references that cannot be resolved are dropped
    (see unresolved_parameter_refs()).
    """
    for path, item in doc.paths.items():
        shared = _resolve_parameters(doc, item.get("parameters"))
        for method, raw in item.items():
            if method.lower() not in HTTP_METHODS:
                continue
            operation = dict(raw or {})
            own = operation.get("parameters")
            params = _merge_parameters(shared, None if own is None else _resolve_parameters(doc, own))
            if params is not None:
                operation["parameters"] = [_normalize_parameter(p) for p in params]
            yield path, method.lower(), Operation.model_validate(operation)


def unresolved_parameter_refs(doc: SwaggerDocument) -> list[str]:
    """Return every parameter ``$ref`` that iter_operations() drops."""
    refs = []
    for item in doc.paths.values():
        entries = list(item.get("parameters") or [])
        for method, raw in item.items():
            if method.lower() in HTTP_METHODS and isinstance(raw, dict):
                entries.extend(raw.get("parameters") or [])
        for param in entries:
            if _is_ref(param) and _lookup_parameter(doc, param["$ref"]) is None:
                refs.append(param["$ref"])
    return list(dict.fromkeys(refs))


def _is_ref(param: object) -> bool:
    return isinstance(param, dict) and "$ref" in param


def _lookup_parameter(doc: SwaggerDocument, ref: object) -> dict | None:
    if not isinstance(ref, str) or not ref.startswith(PARAMETER_REF_PREFIX):
        return None
    target = doc.parameters.get(ref[len(PARAMETER_REF_PREFIX):])
    return target if isinstance(target, dict) else None


def _resolve_parameters(doc: SwaggerDocument, params: list | None) -> list[dict]:
    resolved = []
    for param in params or []:
        if _is_ref(param):
            param = _lookup_parameter(doc, param["$ref"])
            if param is None:
                continue
        resolved.append(param)
    return resolved


def _merge_parameters(shared: list[dict], own: list[dict] | None) -> list[dict] | None:
    """Path-level parameters apply unless the operation redeclares them."""
    if not shared:
        return own
    own = own or []
    declared = {(p.get("name"), p.get("in")) for p in own}
    inherited = [p for p in shared if (p.get("name"), p.get("in")) not in declared]
    return inherited + own


def _normalize_parameter(param: dict) -> dict:
    # OpenAPI 3 style parameters carry their type inside `schema`
    if param.get("in") != "body" and "type" not in param and isinstance(param.get("schema"), dict):
        param = {**param, "type": param["schema"].get("type")}
    return param
