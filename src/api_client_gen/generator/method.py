"""Turn one Swagger operation into a client method.

gen_method() is the entry point. It runs the parameter classifier, emits
the parameter and response type definitions, and assembles the method
text: JSDoc block, signature, the ``fetchApi`` call and the response
union it is cast to.

Everything here is a pure function of its input; calling gen_method()
twice on the same operation gives identical output.
"""

from pydantic import BaseModel, ConfigDict

from api_client_gen.naming import sanitize_no_word
from api_client_gen.parser.base import Operation
from api_client_gen.generator.definitions import (
    parameter_schemas,
    parameter_type_name,
    response_definitions,
    response_type_name,
)
from api_client_gen.generator.parameters import ParameterGroups, classify_parameters
from api_client_gen.generator.status import is_success, status_code

NO_TAG = "NO_TAG"
OPTIONS_SIGNATURE = "options?: Options"
OPTIONS_DESCRIPTION = "options options on api call"
FETCH_FUNCTION = "fetchApi"
ROOT_NAME = "root"


class ResponseMember(BaseModel):
    """One member of the response union."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    status: str

    @property
    def success(self) -> bool:
        return is_success(self.status)

    def render(self) -> str:
        code = status_code(self.status)
        literal = "number" if code is None else str(code)
        carrier = "OKResponse" if self.success else "NGResponse"
        return f"{carrier}<{self.type_name}, {literal}>"


class MethodBinding(BaseModel):
    """A generated client method, before and after rendering to text."""

    model_config = ConfigDict(frozen=True)

    name: str
    http_method: str
    path_template: str
    signatures: tuple[str, ...]
    descriptions: tuple[str, ...]
    forwarded: tuple[str, ...]
    responses: tuple[ResponseMember, ...]

    @property
    def signature(self) -> str:
        return f"({', '.join(self.signatures)})"

    @property
    def success_responses(self) -> tuple[ResponseMember, ...]:
        return tuple(r for r in self.responses if r.success)

    @property
    def failure_responses(self) -> tuple[ResponseMember, ...]:
        return tuple(r for r in self.responses if not r.success)

    @property
    def return_type(self) -> str:
        return " | ".join(r.render() for r in self.responses)

    def fetch_arguments(self) -> list[str]:
        return [
            f'"{self.http_method}"',
            f"`{self.path_template}`",
            "{" + ", ".join(self.forwarded) + "}",
            "options",
        ]

    def lines(self) -> list[str]:
        method = ["/**", f" * {self.http_method} {self.path_template}"]
        for description in self.descriptions:
            method.append(f" * @param {description}")
        method.append(" */")
        method.append(f"{self.name}(")
        for signature in self.signatures:
            method.append(f"    {signature},")
        method.append(") {")
        method.append("    return (")
        method.append(f"        {FETCH_FUNCTION}({ROOT_NAME}, {', '.join(self.fetch_arguments())})")
        method.append("    ) as Promise<")
        last = len(self.responses) - 1
        for i, member in enumerate(self.responses):
            postfix = "" if i == last else " |"
            method.append(f"        {member.render()}{postfix}")
        method.append("    >;")
        method.append("},")
        return method


class GeneratedMethod(BaseModel):
    """Everything generated for one operation."""

    model_config = ConfigDict(frozen=True)

    definitions: tuple[str, ...]
    definition_schemas: tuple[dict, ...]
    method: tuple[str, ...]
    tags: tuple[str, ...]
    binding: MethodBinding


def convert_type(type_name: str | None) -> str:
    if type_name == "integer":
        return "number"
    if type_name is None:
        return "any"
    return type_name


def path_template(path: str) -> str:
    """'/pets/{petId}' -> '/pets/${petId}'"""
    return "/".join(f"${part}" if part.startswith("{") else part for part in path.split("/"))


def _signatures(operation: Operation, groups: ParameterGroups) -> tuple[list[str], list[str]]:
    signatures: list[str] = []
    descriptions: list[str] = []
    if groups.path_required:
        for param in groups.path:
            signatures.append(f"{param.name}: {convert_type(param.type)}")
            descriptions.append(f"{param.name} {param.description}")
    optional_groups = (
        ("query", "Query", bool(groups.query), groups.query_required),
        ("header", "Header", bool(groups.header), groups.header_required),
        ("cookie", "Cookie", bool(groups.cookie), groups.cookie_required),
        ("body", "Body", groups.body is not None, groups.body_required),
    )
    for arg, group, present, required in optional_groups:
        if not present:
            continue
        marker = "" if required else "?"
        signatures.append(f"{arg}{marker}: {parameter_type_name(operation, group)}")
        descriptions.append(f"{arg} {arg}")
    signatures.append(OPTIONS_SIGNATURE)
    descriptions.append(OPTIONS_DESCRIPTION)
    return signatures, descriptions


def _forwarded(groups: ParameterGroups) -> tuple[str, ...]:
    # cookie parameters are typed but not forwarded
    present = (
        ("query", bool(groups.query)),
        ("body", groups.body is not None),
        ("header", bool(groups.header)),
    )
    return tuple(name for name, exists in present if exists)


def build_binding(path: str, http_method: str, operation: Operation, groups: ParameterGroups) -> MethodBinding:
    signatures, descriptions = _signatures(operation, groups)
    return MethodBinding(
        name=sanitize_no_word(operation.operation_id or ""),
        http_method=http_method.upper(),
        path_template=path_template(path),
        signatures=tuple(signatures),
        descriptions=tuple(descriptions),
        forwarded=_forwarded(groups),
        responses=tuple(
            ResponseMember(type_name=response_type_name(operation, status), status=status)
            for status in operation.responses
        ),
    )


def gen_method(path: str, http_method: str, operation: Operation) -> GeneratedMethod:
    """Generate definitions, schemas, method lines and tags for one operation."""
    groups = classify_parameters(operation)
    schemas = parameter_schemas(operation, groups)
    definitions, response_schemas = response_definitions(operation)
    binding = build_binding(path, http_method, operation, groups)
    return GeneratedMethod(
        definitions=tuple(definitions),
        definition_schemas=tuple(schemas + response_schemas),
        method=tuple(binding.lines()),
        tags=tuple(operation.tags) or (NO_TAG,),
        binding=binding,
    )
