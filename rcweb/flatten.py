"""Flatten JSON schemas into PostgreSQL generated-column descriptions.

A schema's ``properties`` are walked recursively. Nested objects are joined
with underscores into lowercase column names, ``$ref`` references into
``#/definitions/...`` are followed, and every leaf becomes a
:class:`FlattenedAttribute` that carries a column type and the JSON path
expression used for a generated column over ``entity_data``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["FlattenedAttribute", "flatten_json_schema"]

_DEFINITIONS_PREFIX = "#/definitions/"
_DEPTH_WITH_DEFINITIONS = 5
_DEPTH_WITHOUT_DEFINITIONS = 3


@dataclass(frozen=True)
class FlattenedAttribute:
    """A flattened schema attribute with its PostgreSQL column information."""

    attribute_name: str
    column_type: str
    generated_column_pattern: str


def flatten_json_schema(schema: Any) -> list[FlattenedAttribute]:
    """Flatten the ``properties`` of a JSON schema into column attributes.

    Nesting is limited to 5 levels when the schema has ``definitions`` and to
    3 levels otherwise; objects at the limit become ``JSONB`` columns.
    """
    max_depth = (
        _DEPTH_WITH_DEFINITIONS
        if _get(schema, "definitions") is not None
        else _DEPTH_WITHOUT_DEFINITIONS
    )
    properties = _get(schema, "properties")
    if properties is None:
        return []
    return list(_walk(properties, "", 1, max_depth, schema))


def _get(value: Any, key: str) -> Any:
    """Look up ``key`` when ``value`` is a JSON object, else return None."""
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def _get_str(value: Any, key: str) -> str | None:
    found = _get(value, key)
    return found if isinstance(found, str) else None


def _walk(
    properties: Any,
    prefix: str,
    depth: int,
    max_depth: int,
    root: Any,
) -> Iterator[FlattenedAttribute]:
    if not isinstance(properties, Mapping):
        return
    for key, value in properties.items():
        lowered = key.lower()
        name = f"{prefix}_{lowered}" if prefix else lowered

        ref = _get_str(value, "$ref")
        if ref is not None:
            yield from _walk_ref(ref, name, depth, max_depth, root)
            continue

        prop_type = _get_str(value, "type")
        if prop_type is None:
            yield _leaf(name, prefix, "TEXT")
        elif prop_type == "object":
            nested = _get(value, "properties")
            if depth < max_depth and nested is not None:
                yield from _walk(nested, name, depth + 1, max_depth, root)
            else:
                yield _leaf(name, prefix, _column_type(value))
        elif prop_type == "array":
            items_ref = _get_str(_get(value, "items"), "$ref")
            if items_ref is not None:
                yield from _walk_ref(items_ref, name, depth, max_depth, root)
            else:
                yield _leaf(name, prefix, _column_type(value))
        else:
            yield _leaf(name, prefix, _column_type(value))


def _walk_ref(
    ref: str, name: str, depth: int, max_depth: int, root: Any
) -> Iterator[FlattenedAttribute]:
    resolved = _resolve_ref(ref, root)
    nested = _get(resolved, "properties")
    if nested is not None:
        yield from _walk(nested, name, depth + 1, max_depth, root)


def _leaf(name: str, prefix: str, column_type: str) -> FlattenedAttribute:
    return FlattenedAttribute(
        attribute_name=name,
        column_type=column_type,
        generated_column_pattern=_column_pattern(name, prefix, column_type),
    )


def _column_type(prop: Any) -> str:
    """Map a schema property's type and format to a PostgreSQL column type."""
    prop_type = _get_str(prop, "type") or "string"
    if prop_type == "string":
        fmt = _get_str(prop, "format")
        return "TIMESTAMPTZ" if fmt in ("date", "date-time") else "TEXT"
    return {
        "integer": "INTEGER",
        "number": "NUMERIC",
        "boolean": "BOOLEAN",
        "array": "JSONB",
        "object": "JSONB",
    }.get(prop_type, "TEXT")


def _column_pattern(name: str, prefix: str, column_type: str) -> str:
    """Build the ``entity_data`` JSON path expression for a generated column."""
    final = "->" if column_type == "JSONB" else "->>"
    if not prefix:
        return f"entity_data {final} '{name}'"
    *parents, last = name.split("_")
    path = "".join(f" -> '{part}'" for part in parents)
    return f"entity_data{path} {final} '{last}'"


def _resolve_ref(ref: str, root: Any) -> Any:
    if not ref.startswith(_DEFINITIONS_PREFIX):
        return None
    return _get(_get(root, "definitions"), ref[len(_DEFINITIONS_PREFIX):])