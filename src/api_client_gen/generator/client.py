"""Assemble a complete TypeScript client module from generated methods."""

from api_client_gen.naming import sanitize
from api_client_gen.parser.base import Operation, SwaggerDocument
from api_client_gen.parser.swagger import iter_operations
from api_client_gen.generator.method import GeneratedMethod, gen_method
from api_client_gen.generator.schema import render_definitions, render_schema

DEFAULT_RUNTIME = "./fetchApi"

HEADER = "/* tslint:disable */\n// This file is generated by api-client-gen. Do not edit.\n"


class ClientGenerator:
    """Generates a TypeScript client with one namespace per operation tag."""

    def __init__(self, runtime: str | None = None):
        self.runtime = runtime or DEFAULT_RUNTIME

    def generate_operations(
        self, operations: list[tuple[str, str, Operation]]
    ) -> list[GeneratedMethod]:
        """Run gen_method() for each (path, method, operation)."""
        return [gen_method(path, method, operation) for path, method, operation in operations]

    def generate(self, doc: SwaggerDocument, tags: tuple[str, ...] = ()) -> str:
        """Generate the client source for a whole document."""
        operations = filter_by_tag(list(iter_operations(doc)), tags)
        bundles = self.generate_operations(operations)
        return self.render(bundles, doc.definitions)

    def render(self, bundles: list[GeneratedMethod], definitions: dict[str, dict] | None = None) -> str:
        parts = [HEADER, self._render_import()]

        shared = render_definitions(definitions or {})
        if shared:
            parts.append("\n\n".join(shared) + "\n")

        for bundle in bundles:
            declarations = list(bundle.definitions)
            declarations.extend(render_schema(schema) for schema in bundle.definition_schemas)
            if declarations:
                parts.append("\n".join(declarations) + "\n")

        parts.append(self._render_factory(bundles))
        return "\n".join(parts)

    # -- rendering helpers ----------------------------------------------------

    def _render_import(self) -> str:
        return f'import {{ fetchApi, NGResponse, OKResponse, Options }} from "{self.runtime}";\n'

    def _group_by_tag(self, bundles: list[GeneratedMethod]) -> dict[str, list[GeneratedMethod]]:
        """Group bundles by tag, keeping first-seen tag order."""
        groups: dict[str, list[GeneratedMethod]] = {}
        for bundle in bundles:
            for tag in dict.fromkeys(bundle.tags):
                groups.setdefault(sanitize(tag), []).append(bundle)
        return groups

    def _render_factory(self, bundles: list[GeneratedMethod]) -> str:
        lines = ["export function createClient(root: string) {", "    return {"]
        for tag, tag_bundles in self._group_by_tag(bundles).items():
            lines.append(f"        {tag}: {{")
            for bundle in tag_bundles:
                lines.extend(f"            {line}" for line in bundle.method)
            lines.append("        },")
        lines.append("    };")
        lines.append("}")
        return "\n".join(lines) + "\n"


def filter_by_tag(
    operations: list[tuple[str, str, Operation]], tags: tuple[str, ...]
) -> list[tuple[str, str, Operation]]:
    """Keep operations carrying at least one of *tags* (all when empty)."""
    if not tags:
        return operations
    wanted = set(tags)
    return [entry for entry in operations if wanted & set(entry[2].tags)]
