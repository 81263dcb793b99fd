"""Checks generated bindings for name collisions before they are written."""

from collections import Counter

from api_client_gen.naming import sanitize
from api_client_gen.generator.method import GeneratedMethod


def type_names(bundle: GeneratedMethod) -> list[str]:
    """All type names declared by one operation's bundle."""
    names = [line.split()[2] for line in bundle.definitions if line.startswith("export type ")]
    names.extend(schema["id"] for schema in bundle.definition_schemas)
    return names


def find_type_collisions(bundles: list[GeneratedMethod]) -> dict[str, str]:
    """Return {type_name: error_message} for names declared more than once."""
    counts = Counter(name for bundle in bundles for name in type_names(bundle))
    return {
        name: f"type {name} declared {count} times"
        for name, count in counts.items()
        if count > 1
    }


def find_method_collisions(bundles: list[GeneratedMethod]) -> dict[str, str]:
    """Return {"tag.method": error_message} for duplicate methods in a tag."""
    counts = Counter(
        f"{sanitize(tag)}.{bundle.binding.name}"
        for bundle in bundles
        for tag in dict.fromkeys(bundle.tags)
    )
    return {
        key: f"method {key} declared {count} times"
        for key, count in counts.items()
        if count > 1
    }


def validate_bundles(bundles: list[GeneratedMethod]) -> dict[str, str]:
    """Run all checks. Returns {name: error_message} for every collision."""
    errors = {}
    errors.update(find_type_collisions(bundles))
    errors.update(find_method_collisions(bundles))
    return errors
